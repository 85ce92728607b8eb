from enum import Enum
from types import MappingProxyType


class FlightStatus(str, Enum):
    """フライトステータス"""

    WAITING = "WAITING"
    BOARDING = "BOARDING"
    DEPARTED = "DEPARTED"
    DELAYED = "DELAYED"
    CANCELLED = "CANCELLED"

    @property
    def is_terminal(self) -> bool:
        """遷移先を持たない終端ステータスか"""
        return not STATUS_TRANSITIONS[self]


STATUS_TRANSITIONS = MappingProxyType(
    {
        FlightStatus.WAITING: frozenset(
            {FlightStatus.BOARDING, FlightStatus.DELAYED, FlightStatus.CANCELLED}
        ),
        FlightStatus.BOARDING: frozenset(
            {FlightStatus.DEPARTED, FlightStatus.DELAYED, FlightStatus.CANCELLED}
        ),
        FlightStatus.DEPARTED: frozenset(),
        FlightStatus.DELAYED: frozenset(
            {FlightStatus.WAITING, FlightStatus.BOARDING, FlightStatus.CANCELLED}
        ),
        FlightStatus.CANCELLED: frozenset(),
    }
)


def allowed_transitions(status: FlightStatus) -> frozenset[FlightStatus]:
    """status から遷移可能なステータスの集合を返す"""
    return STATUS_TRANSITIONS[status]
