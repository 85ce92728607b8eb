from flight_monitor.flight.domain import Flight
from flight_monitor.shared.domain.exception import (
    BusinessRuleViolationException,
    ResourceNotFoundException,
)


class NoFlightsException(ResourceNotFoundException):
    """フライトが1件も登録されていない場合"""

    def __init__(self) -> None:
        super().__init__("No flights have been added yet. Add a flight first.")


class FlightNotFoundException(ResourceNotFoundException):
    """フライトのインデックスが範囲外の場合"""

    def __init__(self, flight_index: int, flight_count: int) -> None:
        super().__init__(
            f"Flight index {flight_index} is out of range "
            f"(expected 0 to {flight_count - 1})"
        )
        self.flight_index = flight_index


class FlightClosedException(BusinessRuleViolationException):
    """出発済み・欠航のフライトに乗客を登録しようとした場合"""

    def __init__(self, flight: Flight) -> None:
        super().__init__(
            f"Registration is closed: the flight to {flight.destination} "
            f"is already {flight.status.value.lower()}"
        )
        self.flight_id = flight.id
