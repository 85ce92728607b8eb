from pydantic import ValidationError

from flight_monitor.airport.domain import (
    FlightClosedException,
    FlightNotFoundException,
    NoFlightsException,
)
from flight_monitor.airport.handlers.response_models import error_response
from flight_monitor.flight.domain import InvalidStatusTransitionException
from flight_monitor.shared.domain import DomainException

VALIDATION_ERROR = "VALIDATION_ERROR"

ERROR_CODES: dict[type[DomainException], str] = {
    NoFlightsException: "NO_FLIGHTS",
    FlightNotFoundException: "FLIGHT_NOT_FOUND",
    InvalidStatusTransitionException: "INVALID_TRANSITION",
    FlightClosedException: "FLIGHT_CLOSED",
}


def error_code_for(error: DomainException) -> str:
    """例外クラス（継承元を含む）に対応するエラーコードを返す"""
    for cls in type(error).__mro__:
        if cls in ERROR_CODES:
            return ERROR_CODES[cls]
    return "DOMAIN_ERROR"


def domain_error_response(error: DomainException) -> dict:
    return error_response(error_code_for(error), str(error))


def validation_error_response(error: ValidationError) -> dict:
    """リクエストモデルの検証エラーをレスポンスに変換"""
    return error_response(
        VALIDATION_ERROR,
        "Invalid request",
        details=error.errors(include_url=False, include_context=False),
    )
