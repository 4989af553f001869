"""Light switch -- the smallest useful state machine.

Demonstrates:
- Two states as an Enum
- Plain transitions with no guard or action
- An entry action on ``On``
- An invalid request (On -> On) reported as InvalidTransition

Run: python -m examples.light_switch [-v]
"""
from __future__ import annotations

import argparse
import enum
import logging

from fsm_engine import StateMachine, TransitionError

logger = logging.getLogger(__name__)


class Light(enum.Enum):
    OFF = "off"
    ON = "on"


def build_machine(log: list[str] | None = None) -> StateMachine[Light]:
    """Return a switch starting in OFF. Entry into ON appends to *log*."""
    sm: StateMachine[Light] = StateMachine(Light.OFF)
    sm.add_transition(Light.OFF, Light.ON)
    sm.add_transition(Light.ON, Light.OFF)

    def lamp_lit() -> None:
        logger.info("  * the lamp is lit")
        if log is not None:
            log.append("lit")

    sm.set_entry_action(Light.ON, lamp_lit)
    return sm


def run(sm: StateMachine[Light], requests: list[Light]) -> None:
    for target in requests:
        old = sm.state
        try:
            sm.transition(target)
        except TransitionError as err:
            logger.warning("  ! %s", err)
        else:
            logger.info("  %s -> %s", old.name, target.name)
        logger.debug("  state is now %s", sm.state.name)


def main() -> None:
    parser = argparse.ArgumentParser(description="Light switch state machine demo")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="log the state after every request")
    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )

    logger.info("=== Light Switch ===\n")
    sm = build_machine()
    logger.info("  initial state: %s", sm.state.name)

    run(sm, [Light.ON, Light.OFF, Light.ON, Light.ON])

    logger.info("\nDone. Final state: %s", sm.state.name)


if __name__ == "__main__":
    main()
