import pytest

from flight_monitor.flight.domain.enum import (
    STATUS_TRANSITIONS,
    FlightStatus,
    allowed_transitions,
)


class TestFlightStatus:
    def test_transition_table(self):
        assert allowed_transitions(FlightStatus.WAITING) == {
            FlightStatus.BOARDING,
            FlightStatus.DELAYED,
            FlightStatus.CANCELLED,
        }
        assert allowed_transitions(FlightStatus.BOARDING) == {
            FlightStatus.DEPARTED,
            FlightStatus.DELAYED,
            FlightStatus.CANCELLED,
        }
        assert allowed_transitions(FlightStatus.DELAYED) == {
            FlightStatus.WAITING,
            FlightStatus.BOARDING,
            FlightStatus.CANCELLED,
        }
        assert allowed_transitions(FlightStatus.DEPARTED) == frozenset()
        assert allowed_transitions(FlightStatus.CANCELLED) == frozenset()

    def test_every_status_has_an_entry(self):
        assert set(STATUS_TRANSITIONS) == set(FlightStatus)

    @pytest.mark.parametrize(
        "status, expected",
        [
            (FlightStatus.WAITING, False),
            (FlightStatus.BOARDING, False),
            (FlightStatus.DELAYED, False),
            (FlightStatus.DEPARTED, True),
            (FlightStatus.CANCELLED, True),
        ],
    )
    def test_is_terminal(self, status, expected):
        assert status.is_terminal is expected

    def test_no_status_transitions_to_itself(self):
        for status in FlightStatus:
            assert status not in allowed_transitions(status)

    def test_table_cannot_be_mutated(self):
        with pytest.raises(TypeError):
            STATUS_TRANSITIONS[FlightStatus.DEPARTED] = frozenset(
                {FlightStatus.WAITING}
            )

    def test_value_is_status_name(self):
        assert FlightStatus("CANCELLED") is FlightStatus.CANCELLED
        assert FlightStatus.BOARDING == "BOARDING"
