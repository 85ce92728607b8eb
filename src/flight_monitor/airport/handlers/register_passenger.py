from pydantic import ValidationError

from flight_monitor.airport.applications import RegisterPassengerService
from flight_monitor.airport.handlers import dependencies
from flight_monitor.airport.handlers.error_handling import (
    domain_error_response,
    error_code_for,
    validation_error_response,
)
from flight_monitor.airport.handlers.request_models import RegisterPassengerRequest
from flight_monitor.airport.handlers.response_models import (
    PassengerData,
    SuccessResponse,
    to_flight_data,
    to_passenger_data,
)
from flight_monitor.shared.domain import DomainException
from flight_monitor.shared.utils.logger import get_logger

logger = get_logger()


def handler(event: dict) -> dict:
    """乗客登録ハンドラー

    フライトが無い・インデックスが範囲外・出発済み/欠航のフライトへの登録は
    エラーレスポンスとして返す。
    """
    logger.info("Received register passenger request")

    payload = event.get("Payload", event)
    try:
        request = RegisterPassengerRequest.model_validate(payload)
    except ValidationError as e:
        logger.warning(
            "Invalid register passenger request", extra={"errors": e.error_count()}
        )
        return validation_error_response(e)

    airport = dependencies.get_airport()
    service = RegisterPassengerService(airport=airport)
    try:
        passenger = service.register(request.name, request.flight_index)
    except DomainException as e:
        logger.warning(
            "Failed to register passenger",
            extra={"error_code": error_code_for(e), "reason": str(e)},
        )
        return domain_error_response(e)

    flight = airport.get_flight(request.flight_index)
    return SuccessResponse[PassengerData](
        data=to_passenger_data(passenger, to_flight_data(flight, request.flight_index))
    ).model_dump()
