from flight_monitor.airport.applications import GetStatisticsService
from flight_monitor.airport.handlers import dependencies
from flight_monitor.airport.handlers.response_models import (
    StatisticsData,
    SuccessResponse,
    to_statistics_data,
)
from flight_monitor.shared.utils.logger import get_logger

logger = get_logger()


def handler(event: dict | None = None) -> dict:
    """運航統計ハンドラー"""
    logger.info("Getting flight statistics")

    service = GetStatisticsService(airport=dependencies.get_airport())
    return SuccessResponse[StatisticsData](
        data=to_statistics_data(service.get())
    ).model_dump()
