from dataclasses import dataclass

from flight_monitor.flight.domain import FlightId, FlightStatus


@dataclass(frozen=True)
class FlightSummary:
    """一覧表示用のフライト情報

    index は追加順のインデックスで、表示順（VIP 優先・行き先順）とは一致しない。
    フライトを指定する操作にはこの index を渡す。
    """

    index: int
    flight_id: FlightId
    destination: str
    status: FlightStatus
    is_vip: bool
