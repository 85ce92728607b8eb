from flight_monitor.airport.domain import Airport, FlightSummary


class ListFlightsService:
    """フライト一覧取得ユースケース"""

    def __init__(self, airport: Airport) -> None:
        self._airport = airport

    def list_flights(self) -> list[FlightSummary]:
        """VIP 優先・行き先順のフライト一覧を返す"""
        return self._airport.list_flights()

    def has_flights(self) -> bool:
        return self._airport.has_flights()
