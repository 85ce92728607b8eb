from flight_monitor.airport.applications import ListFlightsService
from flight_monitor.airport.handlers import dependencies
from flight_monitor.airport.handlers.response_models import (
    FlightListData,
    SuccessResponse,
    summary_to_flight_data,
)
from flight_monitor.shared.utils.logger import get_logger

logger = get_logger()


def handler(event: dict | None = None) -> dict:
    """フライト一覧ハンドラー（VIP 優先・行き先順）

    各フライトの index は追加順のインデックスで、他の操作にはこちらを指定する。
    """
    logger.info("Listing all flights")

    service = ListFlightsService(airport=dependencies.get_airport())
    flights = [summary_to_flight_data(s) for s in service.list_flights()]

    return SuccessResponse[FlightListData](
        data=FlightListData(
            flights=flights,
            count=len(flights),
            has_flights=service.has_flights(),
        )
    ).model_dump()
