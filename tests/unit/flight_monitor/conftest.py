import pytest

from flight_monitor.airport.domain import Airport
from flight_monitor.flight.domain import Destination, Flight, FlightId, FlightStatus


@pytest.fixture
def create_flight():
    """Flight を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        status: FlightStatus = FlightStatus.WAITING,
        flight_id: str = "flight-1",
        destination: str = "Paris",
        is_vip: bool = False,
    ) -> Flight:
        return Flight(
            id=FlightId(value=flight_id),
            destination=Destination(destination),
            is_vip=is_vip,
            status=status,
        )

    return _factory


@pytest.fixture
def airport():
    """フライト未登録の空港"""
    return Airport()
