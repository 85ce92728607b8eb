from dataclasses import dataclass
from typing import ClassVar

from flight_monitor.flight.domain import FlightId, FlightStatus


@dataclass(frozen=True)
class FlightStatusAnnounced:
    """ステータス変更のアナウンス（スタッフ・乗客への通知に先立って記録される）"""

    recipient: ClassVar[str] = "announcement"

    flight_id: FlightId
    destination: str
    status: FlightStatus
    is_vip: bool

    @property
    def message(self) -> str:
        return f"Flight to {self.destination}: status changed to {self.status.value}."

    def __str__(self) -> str:
        return self.message
