"""Smoke tests for the demo callers under examples/."""
import logging

import pytest
from examples import cycle, document_workflow, light_switch, trip_status
from fsm_engine import EntryActionFailed, GuardRejected, InvalidTransition


class TestLightSwitch:

    def test_toggle_and_invalid_request(self):
        log = []
        sm = light_switch.build_machine(log)

        sm.transition(light_switch.Light.ON)
        sm.transition(light_switch.Light.OFF)
        sm.transition(light_switch.Light.ON)
        with pytest.raises(InvalidTransition):
            sm.transition(light_switch.Light.ON)

        assert sm.state is light_switch.Light.ON
        assert log == ["lit", "lit"]

    def test_run_logs_failures(self, caplog):
        sm = light_switch.build_machine()
        with caplog.at_level(logging.WARNING, logger=light_switch.__name__):
            light_switch.run(sm, [light_switch.Light.OFF])
        assert "invalid transition" in caplog.text

    def test_run_logs_completed_transitions(self, caplog):
        sm = light_switch.build_machine()
        with caplog.at_level(logging.INFO, logger=light_switch.__name__):
            light_switch.run(sm, [light_switch.Light.ON, light_switch.Light.OFF])
        assert "OFF -> ON" in caplog.text
        assert "ON -> OFF" in caplog.text


class TestTripStatus:

    def test_guard_blocks_accept_without_driver(self):
        trip = trip_status.Trip(fare=10)
        sm = trip_status.build_machine(trip)

        assert sm.can_transition(trip_status.TripStatus.ACCEPTED) is False
        with pytest.raises(GuardRejected):
            sm.transition(trip_status.TripStatus.ACCEPTED)

    def test_completed_trip_is_charged_once(self):
        trip = trip_status.Trip(driver="dana", fare=10)
        sm = trip_status.build_machine(trip)

        for status in (trip_status.TripStatus.ACCEPTED,
                       trip_status.TripStatus.IN_PROGRESS,
                       trip_status.TripStatus.COMPLETED):
            sm.transition(status)

        assert sm.state is trip_status.TripStatus.COMPLETED
        assert trip.charges == [10]


class TestDocumentWorkflow:

    def test_unsaved_draft_cannot_leave(self):
        doc = document_workflow.Document(title="t")
        sm = document_workflow.build_machine(doc)

        assert document_workflow.attempt(sm, document_workflow.REVIEW) is False
        assert sm.state == document_workflow.DRAFT

    def test_offline_publish_rolls_back(self):
        doc = document_workflow.Document(title="t", saved=True, online=False)
        sm = document_workflow.build_machine(doc)
        sm.transition(document_workflow.REVIEW)

        with pytest.raises(EntryActionFailed) as excinfo:
            sm.transition(document_workflow.PUBLISHED)

        assert isinstance(excinfo.value.cause, document_workflow.PublishError)
        assert sm.state == document_workflow.REVIEW
        assert doc.published_to == []


def test_cycle_rejects_skipping_back():
    sm = cycle.build_machine()
    sm.transition("B")
    with pytest.raises(InvalidTransition):
        sm.transition("A")
    sm.transition("C")
    sm.transition("A")
    assert sm.state == "A"
