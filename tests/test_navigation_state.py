"""
Tests for the navigation state machine.

Covers wraparound arithmetic, direct jumps, boundary predicates and the
empty-deck configuration error. No Qt involved.
"""

import pytest

from app.domain.navigation import (
    DeckConfigurationError,
    NavigationEvent,
    NavigationKind,
    NavigationState,
)

SIZES = [1, 2, 3, 5, 12]


def _all_starts():
    for n in SIZES:
        for p in range(n):
            yield n, p


@pytest.mark.parametrize("count,start", list(_all_starts()))
def test_next_applied_count_times_returns_to_start(count, start):
    state = NavigationState(count, position=start)
    for _ in range(count):
        state.next()
    assert state.position == start


@pytest.mark.parametrize("count,start", list(_all_starts()))
def test_previous_inverts_next(count, start):
    state = NavigationState(count, position=start)
    state.next()
    state.previous()
    assert state.position == start

    state.previous()
    state.next()
    assert state.position == start


@pytest.mark.parametrize("count", SIZES)
def test_go_to_is_exact_and_idempotent(count):
    state = NavigationState(count)
    for i in range(count):
        assert state.go_to(i) == i
        assert state.go_to(i) == i
        assert state.position == i


def test_position_stays_in_range_over_mixed_sequence():
    state = NavigationState(7)
    ops = [state.next, state.previous, state.previous, lambda: state.go_to(6), state.next, state.next]
    for _ in range(5):
        for op in ops:
            op()
            assert 0 <= state.position < state.count


def test_twelve_slides_walk_forward_and_wrap():
    state = NavigationState(12)
    assert state.position == 0
    for _ in range(11):
        state.next()
    assert state.position == 11
    assert state.is_last()
    assert state.next() == 0
    assert state.is_first()


def test_previous_from_first_wraps_to_last():
    state = NavigationState(12)
    assert state.previous() == 11


def test_boundary_predicates_do_not_gate_steps():
    state = NavigationState(3, position=2)
    assert state.is_last()
    assert not state.is_first()
    assert state.next() == 0


def test_single_slide_deck_is_first_and_last():
    state = NavigationState(1)
    assert state.is_first() and state.is_last()
    assert state.next() == 0
    assert state.previous() == 0


@pytest.mark.parametrize("count", [0, -1])
def test_empty_deck_is_a_configuration_error(count):
    with pytest.raises(DeckConfigurationError):
        NavigationState(count)


def test_configuration_error_is_a_value_error():
    assert issubclass(DeckConfigurationError, ValueError)


@pytest.mark.parametrize("target,expected", [(-3, 0), (12, 11), (99, 11)])
def test_go_to_out_of_range_clamps(target, expected):
    state = NavigationState(12, position=4)
    assert state.go_to(target) == expected
    assert state.position == expected


def test_initial_position_is_clamped():
    assert NavigationState(4, position=10).position == 3
    assert NavigationState(4, position=-2).position == 0


def test_apply_dispatches_events():
    state = NavigationState(5)
    assert state.apply(NavigationEvent.next()) == 1
    assert state.apply(NavigationEvent.previous()) == 0
    assert state.apply(NavigationEvent.go_to(3)) == 3


def test_apply_go_to_without_index_is_rejected():
    state = NavigationState(5, position=2)
    with pytest.raises(ValueError):
        state.apply(NavigationEvent(NavigationKind.GO_TO))
    assert state.position == 2
