"""Label/widget construction helpers.

Small widget factories used by the slide views and the navigation row.

Keep these helpers purely UI-related: they may create widgets/layouts but should
not read settings, touch navigation state, or perform application orchestration.
"""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont, QFontDatabase
from PyQt6.QtWidgets import (
    QWidget,
    QLabel,
    QVBoxLayout,
    QSizePolicy,
)


def mk_text_label(
    text: str,
    *,
    point_size: int = 14,
    bold: bool = False,
    color: str | None = None,
    align: Qt.AlignmentFlag = Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter,
    wrap: bool = True,
) -> QLabel:
    """Create a plain text label with a fixed point size."""
    lbl = QLabel(text)
    f = QFont()
    f.setPointSize(int(point_size))
    f.setBold(bool(bold))
    lbl.setFont(f)
    lbl.setAlignment(align)
    lbl.setWordWrap(bool(wrap))
    lbl.setTextFormat(Qt.TextFormat.PlainText)
    if color:
        lbl.setStyleSheet(f"color: {color}; background: transparent;")
    lbl.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Preferred)
    return lbl


def mk_title_label(text: str, *, point_size: int = 32, color: str | None = None, centered: bool = False) -> QLabel:
    """Create a standard slide title label."""
    align = Qt.AlignmentFlag.AlignHCenter if centered else Qt.AlignmentFlag.AlignLeft
    lbl = mk_text_label(text, point_size=point_size, bold=True, color=color,
                        align=align | Qt.AlignmentFlag.AlignVCenter)
    lbl.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
    return lbl


def mk_code_label(code: str, *, color: str = "#f3f4f6", background: str = "#111827") -> QLabel:
    """Monospace block for code snippets; indentation is preserved."""
    lbl = QLabel(code)
    lbl.setTextFormat(Qt.TextFormat.PlainText)
    lbl.setFont(QFontDatabase.systemFont(QFontDatabase.SystemFont.FixedFont))
    lbl.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
    lbl.setStyleSheet(f"color: {color}; background: {background}; padding: 16px; border-radius: 6px;")
    return lbl


def make_point_card(heading: str, body: str, *, badge: str | None = None, color: str | None = None,
                    parent: QWidget | None = None) -> QWidget:
    """Heading + body column used for slide bullet points."""
    outer = QWidget(parent)
    outer.setObjectName("slidePoint")
    layout = QVBoxLayout(outer)
    layout.setContentsMargins(0, 4, 0, 4)
    layout.setSpacing(2)
    head = f"{badge}  {heading}" if badge else heading
    if head:
        layout.addWidget(mk_text_label(head, point_size=18, bold=True, color=color))
    if body:
        layout.addWidget(mk_text_label(body, point_size=14, color=color))
    return outer
