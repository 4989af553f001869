"""StateMachine - transition table, guards, and entry/exit actions."""
from __future__ import annotations

import contextlib
import threading
from typing import Generic

from fsm_engine.types import (
    S,
    Action,
    EntryActionFailed,
    ExitActionFailed,
    Guard,
    GuardRejected,
    InvalidTransition,
    NoTransitionsDefined,
    Transition,
    TransitionActionFailed,
)


class StateMachine(Generic[S]):
    """Deterministic finite state machine over caller-supplied states.

    Transitions are kept per source state in registration order. When
    several transitions share a source and target, the first one
    registered is the only one consulted.

    The current state only changes through :meth:`transition` and
    :meth:`reset`. A failed transition leaves it where it was; a failing
    entry action is rolled back before :class:`EntryActionFailed` is
    raised.

    With ``locked=True`` every public operation holds an internal
    re-entrant lock, so one instance can be shared between threads.
    """

    def __init__(self, initial: S, *, locked: bool = False) -> None:
        self._state: S = initial
        self._initial: S = initial
        self._transitions: dict[S, list[Transition[S]]] = {}
        self._entry_actions: dict[S, Action] = {}
        self._exit_actions: dict[S, Action] = {}
        self._lock: threading.RLock | None = threading.RLock() if locked else None

    @property
    def state(self) -> S:
        return self._state

    @property
    def initial_state(self) -> S:
        return self._initial

    @property
    def locked(self) -> bool:
        return self._lock is not None

    def _guarded(self) -> contextlib.AbstractContextManager[object]:
        if self._lock is None:
            return contextlib.nullcontext()
        return self._lock

    # --- Registration ---

    def add_transition(
        self,
        source: S,
        target: S,
        guard: Guard | None = None,
        action: Action | None = None,
    ) -> None:
        """Append a transition. Duplicates are kept; order is significant."""
        with self._guarded():
            self._transitions.setdefault(source, []).append(
                Transition(source, target, guard, action)
            )

    def set_entry_action(self, state: S, action: Action) -> None:
        """Set the action run on arriving in *state*. Replaces any previous one."""
        with self._guarded():
            self._entry_actions[state] = action

    def set_exit_action(self, state: S, action: Action) -> None:
        """Set the action run on leaving *state*. Replaces any previous one."""
        with self._guarded():
            self._exit_actions[state] = action

    # --- Queries ---

    def transitions_from(self, state: S) -> list[Transition[S]]:
        """Transitions registered for *state*, in registration order."""
        with self._guarded():
            return list(self._transitions.get(state, ()))

    def targets(self) -> list[S]:
        """Distinct targets reachable from the current state. Guards not evaluated."""
        with self._guarded():
            seen: list[S] = []
            for t in self._transitions.get(self._state, ()):
                if t.target not in seen:
                    seen.append(t.target)
            return seen

    def _match(self, target: S) -> Transition[S] | None:
        for t in self._transitions.get(self._state, ()):
            if t.target == target:
                return t
        return None

    def can_transition(self, target: S) -> bool:
        """Would ``transition(target)`` get past its guard right now?

        Only the first matching transition's guard is consulted. No
        actions run.
        """
        with self._guarded():
            matched = self._match(target)
            if matched is None:
                return False
            return matched.allowed()

    # --- Operation ---

    def transition(self, target: S) -> None:
        """Move from the current state to *target*.

        Order: guard, exit action, transition action, state change, entry
        action. Raises a :class:`~fsm_engine.types.TransitionError`
        subclass on failure.
        """
        with self._guarded():
            old = self._state
            if old not in self._transitions:
                raise NoTransitionsDefined(old, target)

            matched = self._match(target)
            if matched is None:
                raise InvalidTransition(old, target)

            if not matched.allowed():
                raise GuardRejected(old, target)

            exit_action = self._exit_actions.get(old)
            if exit_action is not None:
                try:
                    exit_action()
                except Exception as err:
                    raise ExitActionFailed(old, target, err) from err

            if matched.action is not None:
                try:
                    matched.action()
                except Exception as err:
                    raise TransitionActionFailed(old, target, err) from err

            self._state = target

            entry_action = self._entry_actions.get(target)
            if entry_action is not None:
                try:
                    entry_action()
                except Exception as err:
                    self._state = old
                    raise EntryActionFailed(old, target, err) from err

    def reset(self) -> None:
        """Return to the initial state. No actions run."""
        with self._guarded():
            self._state = self._initial
