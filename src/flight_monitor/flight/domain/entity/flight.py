from __future__ import annotations

from collections.abc import Callable

from flight_monitor.flight.domain.enum import FlightStatus, allowed_transitions
from flight_monitor.flight.domain.exception import InvalidStatusTransitionException
from flight_monitor.flight.domain.value_object import Destination, FlightId
from flight_monitor.shared.domain import Entity

FlightListener = Callable[["Flight", FlightStatus], object]


class Flight(Entity[FlightId]):
    """フライト

    行き先と VIP フラグは生成後に変更できない。
    ステータスとリスナーは request_transition / subscribe / unsubscribe 経由でのみ変化する。
    """

    def __init__(
        self,
        id: FlightId,
        destination: Destination,
        is_vip: bool = False,
        status: FlightStatus = FlightStatus.WAITING,
    ) -> None:
        super().__init__(id)
        self._destination = destination
        self._is_vip = is_vip
        self._status = status
        self._version = 0
        self._listeners: list[FlightListener] = []

    @property
    def destination(self) -> Destination:
        return self._destination

    @property
    def is_vip(self) -> bool:
        return self._is_vip

    @property
    def status(self) -> FlightStatus:
        return self._status

    @property
    def version(self) -> int:
        """適用済みのステータス遷移の回数"""
        return self._version

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def subscribe(self, listener: FlightListener) -> None:
        """リスナーを末尾に追加する（同じリスナーの重複登録も別エントリとして扱う）"""
        self._listeners.append(listener)

    def unsubscribe(self, listener: FlightListener) -> None:
        """同一オブジェクトの最初のエントリを取り除く"""
        for i, registered in enumerate(self._listeners):
            if registered is listener:
                del self._listeners[i]
                return

    def request_transition(self, new_status: FlightStatus) -> None:
        """ステータスを変更し、購読中のリスナーへ通知する

        遷移表にない変更は InvalidStatusTransitionException となり、状態は変わらない。
        通知は購読順に同期的に行う。配信中に購読解除されたリスナーも、
        配信開始時点で登録されていれば今回のイベントは受け取る。
        """
        if new_status not in allowed_transitions(self._status):
            raise InvalidStatusTransitionException(self._status, new_status)
        if new_status == self._status:
            return

        self._status = new_status
        self._version += 1

        for listener in list(self._listeners):
            listener(self, new_status)

    def __repr__(self) -> str:
        return (
            f"Flight(id={self.id}, destination={self._destination}, "
            f"is_vip={self._is_vip}, status={self._status.value})"
        )
