from flight_monitor.airport.domain import Airport
from flight_monitor.notification.domain import Passenger
from flight_monitor.shared.utils.logger import get_logger

logger = get_logger()


class RegisterPassengerService:
    """乗客登録ユースケース"""

    def __init__(self, airport: Airport) -> None:
        self._airport = airport

    def register(self, name: str, flight_index: int) -> Passenger:
        """乗客を flight_index（追加順）のフライトに登録する"""
        passenger = self._airport.register_passenger(name, flight_index)
        logger.info(
            "Passenger registered",
            extra={
                "passenger_id": str(passenger.id),
                "flight_id": str(self._airport.get_flight(flight_index).id),
            },
        )
        return passenger
