from flight_monitor.flight.domain.enum import FlightStatus
from flight_monitor.shared.domain.exception import BusinessRuleViolationException


class InvalidStatusTransitionException(BusinessRuleViolationException):
    """遷移表で許可されていないステータス変更"""

    def __init__(self, current: FlightStatus, requested: FlightStatus) -> None:
        super().__init__(
            f"Cannot change flight status from {current.value} to {requested.value}"
        )
        self.current = current
        self.requested = requested
