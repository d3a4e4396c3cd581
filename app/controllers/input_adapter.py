from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Callable, Iterable

from app.domain.navigation import (
    DEFAULT_BACKWARD_KEYS,
    DEFAULT_FORWARD_KEYS,
    DeckConfigurationError,
    NavigationEvent,
    NavigationKind,
    NavigationState,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Affordances:
    forward_enabled: bool
    backward_enabled: bool
    highlighted_indicator: int
    position_text: str


def compute_affordances(state: NavigationState) -> Affordances:
    return Affordances(
        forward_enabled=not state.is_last(),
        backward_enabled=not state.is_first(),
        highlighted_indicator=state.position,
        position_text=f"{state.position + 1} / {state.count}",
    )


def _debug_nav_enabled() -> bool:
    return str(os.environ.get("SLIDEDECK_DEBUG_NAV", "")).strip().lower() in ("1", "true", "yes", "on")


class InputAdapter:
    """Maps input events onto NavigationState and publishes affordances.

    Boundary policy: the backward/forward affordances are disabled on the
    first/last slide, but `next`/`previous` still wrap when reached through
    any other path (keyboard, direct calls). Only the button path stops at
    the edges, because a disabled button cannot be clicked.

    Until `load_deck()` succeeds every event is ignored.
    """

    def __init__(
        self,
        *,
        render: Callable[[int], None] | None = None,
        forward_keys: Iterable[str] = DEFAULT_FORWARD_KEYS,
        backward_keys: Iterable[str] = DEFAULT_BACKWARD_KEYS,
    ) -> None:
        self._render = render
        self._forward_keys = frozenset(k for k in forward_keys if k)
        self._backward_keys = frozenset(k for k in backward_keys if k)
        self._state: NavigationState | None = None
        self._listeners: list[Callable[[Affordances], None]] = []

    @property
    def state(self) -> NavigationState | None:
        return self._state

    @property
    def is_loaded(self) -> bool:
        return self._state is not None

    @property
    def forward_keys(self) -> frozenset[str]:
        return self._forward_keys

    @property
    def backward_keys(self) -> frozenset[str]:
        return self._backward_keys

    def add_listener(self, callback: Callable[[Affordances], None] | None) -> None:
        if callback is None:
            return
        self._listeners.append(callback)

    def load_deck(self, count: int) -> Affordances:
        """Enter navigation mode for a deck of `count` slides, starting at 0.

        Raises DeckConfigurationError (and stays unloaded) when `count < 1`.
        """
        try:
            state = NavigationState(count)
        except DeckConfigurationError:
            self._state = None
            logger.error("Refusing to enter navigation mode: deck has %d slides", count)
            raise
        self._state = state
        return self._refresh(state)

    def affordances(self) -> Affordances | None:
        if self._state is None:
            return None
        return compute_affordances(self._state)

    # --- Input events ---

    def on_forward(self) -> bool:
        return self.handle(NavigationEvent.next())

    def on_backward(self) -> bool:
        return self.handle(NavigationEvent.previous())

    def on_indicator(self, index: int) -> bool:
        return self.handle(NavigationEvent.go_to(index))

    def on_key(self, key_name: str) -> bool:
        if key_name in self._forward_keys:
            return self.on_forward()
        if key_name in self._backward_keys:
            return self.on_backward()
        return False

    def handle(self, event: NavigationEvent) -> bool:
        """Apply one event. Returns False when it was ignored or rejected.

        GO_TO targets outside [0, count) are rejected here, so they never
        reach the clamping in NavigationState.go_to.
        """
        state = self._state
        if state is None:
            logger.debug("Ignoring %s: no deck loaded", event.kind.name)
            return False
        if event.kind is NavigationKind.GO_TO:
            if event.index is None:
                logger.warning("Ignoring GO_TO without an index")
                return False
            if not 0 <= event.index < state.count:
                logger.warning("Rejected indicator index %d (deck has %d slides)", event.index, state.count)
                return False

        before = state.position
        after = state.apply(event)
        logger.log(
            logging.INFO if _debug_nav_enabled() else logging.DEBUG,
            "%s: %d -> %d", event.kind.name, before, after,
        )
        self._refresh(state)
        return True

    def _refresh(self, state: NavigationState) -> Affordances:
        if self._render is not None:
            self._render(state.position)
        affordances = compute_affordances(state)
        for cb in list(self._listeners):
            try:
                cb(affordances)
            except Exception:
                logger.exception("Affordance listener failed")
        return affordances
