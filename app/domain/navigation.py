"""Slide navigation state machine (UI-agnostic).

A single integer register (`position`) over a fixed deck size `count`.
`next()` / `previous()` wrap around in both directions and are total for any
`count >= 1`. `go_to()` clamps out-of-range targets instead of raising.

It contains *no* Qt dependencies.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto

logger = logging.getLogger(__name__)

# Key names as produced by QKeySequence(key).toString().
DEFAULT_FORWARD_KEYS: tuple[str, ...] = ("Right",)
DEFAULT_BACKWARD_KEYS: tuple[str, ...] = ("Left",)


class DeckConfigurationError(ValueError):
    """Raised when a deck cannot enter navigation mode (no slides)."""


class NavigationKind(Enum):
    NEXT = auto()
    PREVIOUS = auto()
    GO_TO = auto()


@dataclass(frozen=True)
class NavigationEvent:
    kind: NavigationKind
    index: int | None = None

    @classmethod
    def next(cls) -> NavigationEvent:
        return cls(NavigationKind.NEXT)

    @classmethod
    def previous(cls) -> NavigationEvent:
        return cls(NavigationKind.PREVIOUS)

    @classmethod
    def go_to(cls, index: int) -> NavigationEvent:
        return cls(NavigationKind.GO_TO, int(index))


class NavigationState:
    """Owns the current slide position for one presentation session."""

    def __init__(self, count: int, *, position: int = 0) -> None:
        n = int(count)
        if n < 1:
            raise DeckConfigurationError(f"Deck must contain at least one slide (got {n})")
        self._count = n
        self._position = self._clamp(int(position))

    @property
    def count(self) -> int:
        return self._count

    @property
    def position(self) -> int:
        return self._position

    def next(self) -> int:
        """Advance one slide, wrapping from the last slide to the first."""
        self._position = (self._position + 1) % self._count
        return self._position

    def previous(self) -> int:
        """Step back one slide, wrapping from the first slide to the last."""
        self._position = (self._position - 1 + self._count) % self._count
        return self._position

    def go_to(self, index: int) -> int:
        """Jump to `index`; out-of-range values are clamped to [0, count-1]."""
        i = int(index)
        target = self._clamp(i)
        if target != i:
            logger.warning("go_to(%d) outside [0, %d]; clamped to %d", i, self._count - 1, target)
        self._position = target
        return self._position

    def is_first(self) -> bool:
        return self._position == 0

    def is_last(self) -> bool:
        return self._position == self._count - 1

    def apply(self, event: NavigationEvent) -> int:
        if event.kind is NavigationKind.NEXT:
            return self.next()
        if event.kind is NavigationKind.PREVIOUS:
            return self.previous()
        if event.kind is NavigationKind.GO_TO:
            if event.index is None:
                raise ValueError("GO_TO event requires an index")
            return self.go_to(event.index)
        raise ValueError(f"Unsupported navigation event: {event.kind!r}")

    def _clamp(self, index: int) -> int:
        return max(0, min(int(index), self._count - 1))

    def __repr__(self) -> str:
        return f"NavigationState(position={self._position}, count={self._count})"
