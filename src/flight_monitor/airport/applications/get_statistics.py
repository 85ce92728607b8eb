from flight_monitor.airport.domain import Airport, FlightStatistics


class GetStatisticsService:
    """運航統計取得ユースケース"""

    def __init__(self, airport: Airport) -> None:
        self._airport = airport

    def get(self) -> FlightStatistics:
        return self._airport.statistics()
