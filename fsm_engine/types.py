"""Shared types and the error taxonomy for the transition engine."""
from __future__ import annotations

import enum
from collections.abc import Hashable
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

S = TypeVar("S", bound=Hashable)

Guard = Callable[[], bool]
Action = Callable[[], None]


@dataclass(frozen=True, slots=True)
class Transition(Generic[S]):
    """One directed edge. ``guard`` and ``action`` are optional."""

    source: S
    target: S
    guard: Guard | None = None
    action: Action | None = None

    def allowed(self) -> bool:
        """Evaluate the guard now. True when there is no guard."""
        if self.guard is None:
            return True
        return bool(self.guard())


class ErrorKind(enum.Enum):
    NO_TRANSITIONS_DEFINED = "no transitions defined"
    INVALID_TRANSITION = "invalid transition"
    GUARD_REJECTED = "guard rejected"
    EXIT_ACTION_FAILED = "exit action failed"
    TRANSITION_ACTION_FAILED = "transition action failed"
    ENTRY_ACTION_FAILED = "entry action failed"


class TransitionError(Exception):
    """Raised when ``StateMachine.transition`` does not complete.

    ``source`` is the state the machine was in when the attempt began and
    is also the state it is in when the error is raised. ``cause`` is the
    exception raised by a failing action, or None for lookup and guard
    failures.

    Abstract: catch it, but raise one of the subclasses, which each set
    ``kind``.
    """

    kind: ErrorKind

    def __init__(
        self, source: Any, target: Any, cause: BaseException | None = None,
    ) -> None:
        if type(self) is TransitionError:
            raise TypeError("TransitionError is abstract; raise a subclass")
        self.source = source
        self.target = target
        self.cause = cause
        message = f"{self.kind.value}: from {source!r} to {target!r}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


class NoTransitionsDefined(TransitionError):
    """The current state has no outgoing transitions at all."""

    kind = ErrorKind.NO_TRANSITIONS_DEFINED


class InvalidTransition(TransitionError):
    """The current state has transitions, but none to the requested target."""

    kind = ErrorKind.INVALID_TRANSITION


class GuardRejected(TransitionError):
    kind = ErrorKind.GUARD_REJECTED


class ExitActionFailed(TransitionError):
    kind = ErrorKind.EXIT_ACTION_FAILED


class TransitionActionFailed(TransitionError):
    kind = ErrorKind.TRANSITION_ACTION_FAILED


class EntryActionFailed(TransitionError):
    """The target's entry action raised. State was rolled back before raising."""

    kind = ErrorKind.ENTRY_ACTION_FAILED
