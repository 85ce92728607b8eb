from pydantic import ValidationError

from flight_monitor.airport.applications import AddFlightService
from flight_monitor.airport.handlers import dependencies
from flight_monitor.airport.handlers.error_handling import validation_error_response
from flight_monitor.airport.handlers.request_models import AddFlightRequest
from flight_monitor.airport.handlers.response_models import (
    FlightData,
    SuccessResponse,
    to_flight_data,
)
from flight_monitor.shared.utils.logger import get_logger

logger = get_logger()


def handler(event: dict) -> dict:
    """フライト追加ハンドラー"""
    logger.info("Received add flight request")

    payload = event.get("Payload", event)
    try:
        request = AddFlightRequest.model_validate(payload)
    except ValidationError as e:
        logger.warning("Invalid add flight request", extra={"errors": e.error_count()})
        return validation_error_response(e)

    airport = dependencies.get_airport()
    service = AddFlightService(airport=airport)
    flight = service.add(request.destination, request.is_vip)

    return SuccessResponse[FlightData](
        data=to_flight_data(flight, airport.flights.index(flight))
    ).model_dump()
