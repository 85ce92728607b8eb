from dataclasses import dataclass


@dataclass(frozen=True)
class FlightStatistics:
    """運航統計（出発済み・遅延・欠航の累計）"""

    completed: int = 0
    delayed: int = 0
    cancelled: int = 0
