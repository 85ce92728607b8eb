from flight_monitor.airport.domain import Airport
from flight_monitor.flight.domain import Flight
from flight_monitor.shared.utils.logger import get_logger

logger = get_logger()


class AddFlightService:
    """フライト追加ユースケース"""

    def __init__(self, airport: Airport) -> None:
        self._airport = airport

    def add(self, destination: str, is_vip: bool = False) -> Flight:
        """フライトを追加する"""
        flight = self._airport.add_flight(destination, is_vip)
        logger.info(
            "Flight added",
            extra={
                "flight_id": str(flight.id),
                "destination": str(flight.destination),
                "is_vip": flight.is_vip,
            },
        )
        return flight
