"""Rendering for a single slide descriptor."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QFrame, QVBoxLayout, QWidget

from app.domain.deck import Slide
from app.ui.widgets.labels import make_point_card, mk_code_label, mk_text_label, mk_title_label


class SlideView(QFrame):
    """Draws one Slide: icon, title, subtitle, points, code and footer."""

    def __init__(self, slide: Slide, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.slide = slide
        self.setObjectName("slideView")
        self.setStyleSheet(f"QFrame#slideView {{ background: {slide.background}; }}")

        fg = slide.foreground
        # Title-only slides (cover, closing) are centred.
        centered = not slide.points and slide.code is None

        layout = QVBoxLayout(self)
        layout.setContentsMargins(64, 48, 64, 96)
        layout.setSpacing(16)
        layout.addStretch(1)

        if slide.icon:
            icon = mk_text_label(slide.icon, point_size=48, color=fg, align=Qt.AlignmentFlag.AlignHCenter)
            icon.setObjectName("labelSlideIcon")
            if not centered:
                icon.setAlignment(Qt.AlignmentFlag.AlignLeft)
            layout.addWidget(icon)

        title = mk_title_label(slide.title, point_size=40 if centered else 32, color=fg, centered=centered)
        title.setObjectName("labelSlideTitle")
        layout.addWidget(title)

        if slide.subtitle:
            sub = mk_text_label(
                slide.subtitle, point_size=20, color=fg,
                align=Qt.AlignmentFlag.AlignHCenter if centered else Qt.AlignmentFlag.AlignLeft,
            )
            sub.setObjectName("labelSlideSubtitle")
            layout.addWidget(sub)

        for point in slide.points:
            layout.addWidget(make_point_card(point.heading, point.body, badge=point.badge, color=fg))

        if slide.code is not None:
            code = mk_code_label(slide.code)
            code.setObjectName("labelSlideCode")
            layout.addWidget(code)

        if slide.footer:
            footer = mk_text_label(slide.footer, point_size=12, color=fg, align=Qt.AlignmentFlag.AlignHCenter)
            footer.setObjectName("labelSlideFooter")
            layout.addWidget(footer)

        layout.addStretch(1)
