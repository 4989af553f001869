"""Trip status workflow -- guards and transition actions.

Demonstrates:
- A guard that blocks departure until a driver is assigned
- A transition action that charges the rider on completion
- can_transition() as a side-effect free probe

Run: python -m examples.trip_status [-v] [--no-driver]
"""
from __future__ import annotations

import argparse
import enum
import logging
from dataclasses import dataclass, field

from fsm_engine import StateMachine, TransitionError

logger = logging.getLogger(__name__)


class TripStatus(enum.Enum):
    REQUESTED = "requested"
    ACCEPTED = "accepted"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


@dataclass
class Trip:
    driver: str | None = None
    fare: int = 0
    charges: list[int] = field(default_factory=list)


def build_machine(trip: Trip) -> StateMachine[TripStatus]:
    sm: StateMachine[TripStatus] = StateMachine(TripStatus.REQUESTED)

    sm.add_transition(TripStatus.REQUESTED, TripStatus.ACCEPTED,
                      guard=lambda: trip.driver is not None)
    sm.add_transition(TripStatus.REQUESTED, TripStatus.CANCELLED)
    sm.add_transition(TripStatus.ACCEPTED, TripStatus.IN_PROGRESS)
    sm.add_transition(TripStatus.ACCEPTED, TripStatus.CANCELLED)

    def charge() -> None:
        if trip.fare <= 0:
            raise ValueError(f"cannot charge a fare of {trip.fare}")
        trip.charges.append(trip.fare)
        logger.info("  $ charged %d", trip.fare)

    sm.add_transition(TripStatus.IN_PROGRESS, TripStatus.COMPLETED, action=charge)
    return sm


def main() -> None:
    parser = argparse.ArgumentParser(description="Trip status state machine demo")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="log guard probes before each request")
    parser.add_argument("--no-driver", action="store_true",
                        help="never assign a driver; the trip gets cancelled")
    parser.add_argument("--fare", type=int, default=18,
                        help="fare charged on completion (default: 18)")
    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )

    logger.info("=== Trip Status ===\n")
    trip = Trip(fare=args.fare)
    sm = build_machine(trip)

    plan = [TripStatus.ACCEPTED, TripStatus.IN_PROGRESS, TripStatus.COMPLETED]
    for target in plan:
        if target is TripStatus.ACCEPTED and not args.no_driver:
            trip.driver = "dana"
            logger.info("  driver %s assigned", trip.driver)
        logger.debug("  can_transition(%s) = %s", target.value, sm.can_transition(target))
        old = sm.state
        try:
            sm.transition(target)
        except TransitionError as err:
            logger.warning("  ! %s", err)
            if sm.can_transition(TripStatus.CANCELLED):
                sm.transition(TripStatus.CANCELLED)
                logger.info("  %s -> %s", old.value, TripStatus.CANCELLED.value)
            break
        logger.info("  %s -> %s", old.value, target.value)

    logger.info("\nDone. Final status: %s, charges: %s", sm.state.value, trip.charges)


if __name__ == "__main__":
    main()
