import pytest

from flight_monitor.flight.domain import FlightStatus
from flight_monitor.notification.domain.entity import Staff
from flight_monitor.notification.domain.value_object import STAFF_RECIPIENT


class TestStaff:
    def test_notify_addresses_staff(self, create_flight):
        flight = create_flight(destination="Rome")

        notification = Staff().notify(flight, FlightStatus.DELAYED)

        assert notification.recipient == STAFF_RECIPIENT
        assert notification.flight_id == flight.id
        assert notification.status == FlightStatus.DELAYED
        assert notification.message == (
            "Staff: The flight to Rome has been delayed. "
            "Update the schedule and notify the passengers."
        )

    @pytest.mark.parametrize("status", list(FlightStatus))
    def test_every_status_has_a_message(self, create_flight, status):
        notification = Staff().notify(create_flight(destination="Oslo"), status)

        assert notification.message.startswith("Staff:")
        assert "Oslo" in notification.message
