from itertools import count

from flight_monitor.flight.domain.entity import Flight
from flight_monitor.flight.domain.enum import FlightStatus
from flight_monitor.flight.domain.value_object import Destination, FlightId


class FlightFactory:
    """フライトエンティティのファクトリ

    - 連番の FlightId を採番する（同じ行き先のフライトも別エンティティになる）
    - プリミティブ型から Value Object への変換
    - 初期状態（WAITING）の設定
    """

    def __init__(self, prefix: str = "flight") -> None:
        self._prefix = prefix
        self._sequence = count(1)

    def create(self, destination: str, is_vip: bool = False) -> Flight:
        """新規フライトを生成する

        Args:
            destination: 行き先（空白のみは不可）
            is_vip: VIP 便かどうか

        Returns:
            Flight: WAITING 状態のフライト
        """
        flight_id = FlightId(value=f"{self._prefix}-{next(self._sequence)}")

        return Flight(
            id=flight_id,
            destination=Destination(destination),
            is_vip=is_vip,
            status=FlightStatus.WAITING,
        )
