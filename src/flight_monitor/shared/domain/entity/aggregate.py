from typing import TypeVar

from .entity import Entity

ID = TypeVar("ID")


class AggregateRoot(Entity[ID]):
    """AggregateRoot 基底クラス

    - 配下のエンティティへのアクセスは必ず集約ルートを経由
    - 集約内で発生した出来事はドメインイベントとして蓄積し、呼び出し側が取り出す
    """

    def __init__(self, id: ID) -> None:
        super().__init__(id)
        self._domain_events: list = []

    @property
    def pending_domain_events(self) -> int:
        return len(self._domain_events)

    def add_domain_event(self, event: object) -> None:
        """ドメインイベントを追加する"""
        self._domain_events.append(event)

    def flush_domain_events(self) -> list:
        """蓄積したドメインイベントを返してクリアする"""
        events = self._domain_events.copy()
        self._domain_events.clear()
        return events
