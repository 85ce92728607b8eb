from dataclasses import dataclass

from flight_monitor.flight.domain import FlightId, FlightStatus

STAFF_RECIPIENT = "staff"


@dataclass(frozen=True)
class Notification:
    """ステータス変更の通知文

    表示方法（色・出力先）は呼び出し側が決める。
    """

    recipient: str
    flight_id: FlightId
    destination: str
    status: FlightStatus
    message: str

    def __str__(self) -> str:
        return self.message
