"""Document workflow -- exit/entry actions and rollback.

Demonstrates:
- Exit actions that veto leaving a state (unsaved drafts)
- Entry actions that can fail after the state has changed
- Automatic rollback on EntryActionFailed
- reset() returning to the initial state without running actions

Run: python -m examples.document_workflow [-v] [--offline]
"""
from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass, field

from fsm_engine import EntryActionFailed, StateMachine, TransitionError

logger = logging.getLogger(__name__)

DRAFT = "draft"
REVIEW = "review"
PUBLISHED = "published"
ARCHIVED = "archived"


@dataclass
class Document:
    title: str
    saved: bool = False
    online: bool = True
    published_to: list[str] = field(default_factory=list)


class PublishError(RuntimeError):
    pass


def build_machine(doc: Document) -> StateMachine[str]:
    sm: StateMachine[str] = StateMachine(DRAFT)
    sm.add_transition(DRAFT, REVIEW)
    sm.add_transition(REVIEW, DRAFT)
    sm.add_transition(REVIEW, PUBLISHED)
    sm.add_transition(PUBLISHED, ARCHIVED)

    def leave_draft() -> None:
        if not doc.saved:
            raise RuntimeError(f"{doc.title!r} has unsaved changes")

    def publish() -> None:
        if not doc.online:
            raise PublishError("publishing service unreachable")
        doc.published_to.append("site")

    sm.set_exit_action(DRAFT, leave_draft)
    sm.set_entry_action(PUBLISHED, publish)
    return sm


def attempt(sm: StateMachine[str], target: str) -> bool:
    old = sm.state
    try:
        sm.transition(target)
    except EntryActionFailed as err:
        logger.warning("  ! %s (rolled back to %s)", err, sm.state)
        return False
    except TransitionError as err:
        logger.warning("  ! %s", err)
        return False
    logger.info("  %s -> %s", old, target)
    return True


def main() -> None:
    parser = argparse.ArgumentParser(description="Document workflow state machine demo")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="log the state after every step")
    parser.add_argument("--offline", action="store_true",
                        help="simulate an unreachable publishing service")
    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )

    logger.info("=== Document Workflow ===\n")
    doc = Document(title="Quarterly report", online=not args.offline)
    sm = build_machine(doc)

    attempt(sm, REVIEW)  # vetoed: unsaved
    doc.saved = True
    for target in (REVIEW, PUBLISHED, ARCHIVED):
        if not attempt(sm, target):
            break
        logger.debug("  state is now %s", sm.state)

    logger.info("\n  state before reset: %s", sm.state)
    sm.reset()
    logger.info("  state after reset:  %s", sm.state)


if __name__ == "__main__":
    main()
