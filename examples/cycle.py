"""Three-state cycle -- A -> B -> C -> A.

Demonstrates:
- String states
- A request with no matching edge (B -> A) reported as InvalidTransition
- targets() listing where the machine may go next

Run: python -m examples.cycle [-v]
"""
from __future__ import annotations

import argparse
import logging

from fsm_engine import StateMachine, TransitionError

logger = logging.getLogger(__name__)


def build_machine() -> StateMachine[str]:
    sm: StateMachine[str] = StateMachine("A")
    sm.add_transition("A", "B")
    sm.add_transition("B", "C")
    sm.add_transition("C", "A")
    return sm


def main() -> None:
    parser = argparse.ArgumentParser(description="A -> B -> C -> A cycle demo")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="log reachable targets before each request")
    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )

    sm = build_machine()
    logger.info("Initial state: %s", sm.state)

    for target in ("B", "A", "C", "A"):
        logger.debug("  reachable from %s: %s", sm.state, sm.targets())
        try:
            sm.transition(target)
        except TransitionError as err:
            logger.error("Error: %s", err)
            continue
        logger.info("State after transition: %s", sm.state)


if __name__ == "__main__":
    main()
