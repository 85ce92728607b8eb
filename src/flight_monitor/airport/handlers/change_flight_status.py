from pydantic import ValidationError

from flight_monitor.airport.applications import ChangeFlightStatusService
from flight_monitor.airport.handlers import dependencies
from flight_monitor.airport.handlers.error_handling import (
    domain_error_response,
    error_code_for,
    validation_error_response,
)
from flight_monitor.airport.handlers.request_models import ChangeFlightStatusRequest
from flight_monitor.airport.handlers.response_models import (
    StatusChangeData,
    SuccessResponse,
    to_flight_data,
    to_notification_data,
)
from flight_monitor.shared.domain import DomainException
from flight_monitor.shared.utils.logger import get_logger

logger = get_logger()


def handler(event: dict) -> dict:
    """フライトステータス変更ハンドラー

    成功時はアナウンス・スタッフ・乗客への通知を発生順に返す。
    遷移表にない変更はエラーレスポンスになり、フライトの状態は変わらない。
    """
    logger.info("Received change flight status request")

    payload = event.get("Payload", event)
    try:
        request = ChangeFlightStatusRequest.model_validate(payload)
    except ValidationError as e:
        logger.warning(
            "Invalid change flight status request", extra={"errors": e.error_count()}
        )
        return validation_error_response(e)

    service = ChangeFlightStatusService(airport=dependencies.get_airport())
    try:
        result = service.change(request.flight_index, request.status)
    except DomainException as e:
        logger.warning(
            "Failed to change flight status",
            extra={"error_code": error_code_for(e), "reason": str(e)},
        )
        return domain_error_response(e)

    return SuccessResponse[StatusChangeData](
        data=StatusChangeData(
            flight=to_flight_data(result.flight, request.flight_index),
            previous_status=result.previous_status.value,
            notifications=[to_notification_data(e) for e in result.events],
        )
    ).model_dump()
