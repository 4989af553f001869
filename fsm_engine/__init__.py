"""fsm-engine - A deterministic finite state machine with guarded, actioned transitions."""
from __future__ import annotations

from fsm_engine.machine import StateMachine
from fsm_engine.types import (
    Action,
    EntryActionFailed,
    ErrorKind,
    ExitActionFailed,
    Guard,
    GuardRejected,
    InvalidTransition,
    NoTransitionsDefined,
    Transition,
    TransitionActionFailed,
    TransitionError,
)

__all__ = [
    "StateMachine",
    "Transition",
    "Guard",
    "Action",
    "ErrorKind",
    "TransitionError",
    "NoTransitionsDefined",
    "InvalidTransition",
    "GuardRejected",
    "ExitActionFailed",
    "TransitionActionFailed",
    "EntryActionFailed",
]
