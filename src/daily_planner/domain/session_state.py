"""Menu session states and their allowed transitions."""

from __future__ import annotations

from enum import StrEnum
from typing import Final


class SessionState(StrEnum):
    """Which user, if any, the interactive menu is acting for."""

    ANONYMOUS = "anonymous"
    AUTHENTICATED = "authenticated"
    EXITED = "exited"


class InvalidSessionTransitionError(ValueError):
    """Raised when an attempted session state transition is not allowed."""


_ALLOWED_TRANSITIONS: Final[dict[SessionState, frozenset[SessionState]]] = {
    # Registration keeps the session anonymous.
    SessionState.ANONYMOUS: frozenset(
        {SessionState.ANONYMOUS, SessionState.AUTHENTICATED, SessionState.EXITED}
    ),
    SessionState.AUTHENTICATED: frozenset({SessionState.ANONYMOUS, SessionState.EXITED}),
    SessionState.EXITED: frozenset(),
}


def can_transition(from_state: SessionState, to_state: SessionState) -> bool:
    """Return whether the transition is valid for the session state machine."""

    return to_state in _ALLOWED_TRANSITIONS[from_state]


def assert_transition(from_state: SessionState, to_state: SessionState) -> None:
    """Assert a transition is allowed, else raise deterministic domain error."""

    if not can_transition(from_state, to_state):
        raise InvalidSessionTransitionError(
            f"Invalid session transition: {from_state.value} -> {to_state.value}"
        )
