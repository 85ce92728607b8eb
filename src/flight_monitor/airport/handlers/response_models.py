from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel

from flight_monitor.airport.domain import FlightStatistics, FlightSummary
from flight_monitor.flight.domain import Flight
from flight_monitor.notification.domain import Passenger

T = TypeVar("T")


class FlightData(BaseModel):
    """フライトデータのレスポンスモデル"""

    index: int
    flight_id: str
    destination: str
    status: str
    is_vip: bool


class PassengerData(BaseModel):
    """乗客データのレスポンスモデル"""

    passenger_id: str
    name: str
    flight: FlightData


class NotificationData(BaseModel):
    """アナウンス・通知のレスポンスモデル"""

    recipient: str
    flight_id: str
    destination: str
    status: str
    message: str


class StatusChangeData(BaseModel):
    """ステータス変更結果のレスポンスモデル"""

    flight: FlightData
    previous_status: str
    notifications: list[NotificationData]


class FlightListData(BaseModel):
    """フライト一覧のレスポンスモデル（VIP 優先・行き先順）"""

    flights: list[FlightData]
    count: int
    has_flights: bool


class StatisticsData(BaseModel):
    """運航統計のレスポンスモデル"""

    completed: int
    delayed: int
    cancelled: int


class SuccessResponse(BaseModel, Generic[T]):
    """成功レスポンスモデル"""

    status: str = "success"
    data: T


class ErrorResponse(BaseModel):
    """エラーレスポンスモデル"""

    status: str = "error"
    error_code: str
    message: str
    details: list | None = None


def to_flight_data(flight: Flight, index: int) -> FlightData:
    """Flight エンティティをレスポンスモデルに変換"""
    return FlightData(
        index=index,
        flight_id=str(flight.id),
        destination=str(flight.destination),
        status=flight.status.value,
        is_vip=flight.is_vip,
    )


def summary_to_flight_data(summary: FlightSummary) -> FlightData:
    return FlightData(
        index=summary.index,
        flight_id=str(summary.flight_id),
        destination=summary.destination,
        status=summary.status.value,
        is_vip=summary.is_vip,
    )


def to_passenger_data(passenger: Passenger, flight: FlightData) -> PassengerData:
    return PassengerData(
        passenger_id=str(passenger.id),
        name=str(passenger.name),
        flight=flight,
    )


def to_notification_data(event) -> NotificationData:
    """FlightStatusAnnounced / Notification をレスポンスモデルに変換"""
    return NotificationData(
        recipient=event.recipient,
        flight_id=str(event.flight_id),
        destination=event.destination,
        status=event.status.value,
        message=event.message,
    )


def to_statistics_data(statistics: FlightStatistics) -> StatisticsData:
    return StatisticsData(
        completed=statistics.completed,
        delayed=statistics.delayed,
        cancelled=statistics.cancelled,
    )


def error_response(
    error_code: str, message: str, details: list | None = None
) -> dict:
    """エラーレスポンスを生成"""
    return ErrorResponse(
        error_code=error_code,
        message=message,
        details=details,
    ).model_dump(exclude_none=True)
