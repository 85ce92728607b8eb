from pydantic import BaseModel, Field, field_validator

from flight_monitor.flight.domain import FlightStatus


class AddFlightRequest(BaseModel):
    """フライト追加リクエストモデル"""

    destination: str = Field(
        ...,
        min_length=1,
        description="行き先",
        examples=["Paris", "Rome"],
    )
    is_vip: bool = Field(default=False, description="VIP 便かどうか")

    @field_validator("destination")
    @classmethod
    def strip_destination(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Destination cannot be empty")
        return v.strip()


class RegisterPassengerRequest(BaseModel):
    """乗客登録リクエストモデル

    flight_index は追加順のインデックス（一覧の表示順ではない）。
    範囲チェックはドメイン側で行う。
    """

    name: str = Field(..., min_length=1, description="乗客名", examples=["Anna"])
    flight_index: int = Field(..., description="フライトのインデックス（0始まり）")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Passenger name cannot be empty")
        if any(c.isdigit() for c in v):
            raise ValueError("Passenger name cannot contain digits")
        return v.strip()


class ChangeFlightStatusRequest(BaseModel):
    """フライトステータス変更リクエストモデル"""

    flight_index: int = Field(..., description="フライトのインデックス（0始まり）")
    status: FlightStatus = Field(..., description="変更後のステータス")

    @field_validator("status", mode="before")
    @classmethod
    def normalize_status(cls, v):
        """大文字小文字を区別せずにステータス名を受け付ける"""
        if isinstance(v, str):
            return v.strip().upper()
        return v
