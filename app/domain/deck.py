from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class SlidePoint:
    heading: str
    body: str = ""
    badge: str | None = None


@dataclass(frozen=True)
class Slide:
    """Opaque render descriptor for one slide.

    Only the rendering surface reads these fields; navigation never does.
    """

    title: str
    subtitle: str = ""
    icon: str = ""
    background: str = "#1e293b"
    foreground: str = "#f1f5f9"
    points: tuple[SlidePoint, ...] = ()
    code: str | None = None
    footer: str = ""


@dataclass(frozen=True)
class Deck:
    """Fixed, ordered sequence of slides for one session."""

    slides: tuple[Slide, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.slides)

    @property
    def is_empty(self) -> bool:
        return not self.slides

    def slide_at(self, index: int) -> Slide:
        return self.slides[int(index)]
