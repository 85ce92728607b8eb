from dataclasses import dataclass, field

from flight_monitor.airport.domain import Airport
from flight_monitor.flight.domain import Flight, FlightStatus
from flight_monitor.shared.utils.logger import get_logger

logger = get_logger()


@dataclass(frozen=True)
class StatusChangeResult:
    """ステータス変更の結果（変更後のフライトと、その間に発生したイベント）"""

    flight: Flight
    previous_status: FlightStatus
    events: list = field(default_factory=list)


class ChangeFlightStatusService:
    """フライトステータス変更ユースケース

    遷移の検証はフライト自身が行い、不正な遷移は例外として呼び出し側へ伝わる。
    """

    def __init__(self, airport: Airport) -> None:
        self._airport = airport

    def change(self, flight_index: int, new_status: FlightStatus) -> StatusChangeResult:
        """flight_index（追加順）のフライトのステータスを変更する"""
        previous_status = self._airport.get_flight(flight_index).status
        flight = self._airport.change_flight_status(flight_index, new_status)
        events = self._airport.flush_domain_events()

        logger.info(
            "Flight status changed",
            extra={
                "flight_id": str(flight.id),
                "destination": str(flight.destination),
                "previous_status": previous_status.value,
                "status": flight.status.value,
                "notifications": len(events),
            },
        )
        if flight.status.is_terminal:
            logger.info(
                "Flight closed and listeners released",
                extra={"flight_id": str(flight.id), "listeners": flight.listener_count},
            )

        return StatusChangeResult(
            flight=flight, previous_status=previous_status, events=events
        )

