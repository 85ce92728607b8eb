from itertools import count

from flight_monitor.airport.domain.event import FlightStatusAnnounced
from flight_monitor.airport.domain.exception import (
    FlightClosedException,
    FlightNotFoundException,
    NoFlightsException,
)
from flight_monitor.airport.domain.listener import PassengerListener
from flight_monitor.airport.domain.value_object import FlightStatistics, FlightSummary
from flight_monitor.flight.domain import Flight, FlightFactory, FlightId, FlightStatus
from flight_monitor.notification.domain import (
    Passenger,
    PassengerId,
    PassengerName,
    Staff,
)
from flight_monitor.shared.domain import AggregateRoot


class Airport(AggregateRoot[str]):
    """空港（フライト・乗客・運航統計を束ねる集約ルート）

    - フライトは追加順に保持し、flight_index は常にこの順序を指す
    - 各フライトには生成時に「通知・後始末」「統計」の2つのリスナーをこの順で購読させる
    - 終端ステータスになったフライトからは全リスナーを外し、乗客リストを破棄する
    - アナウンスと通知はドメインイベントとして蓄積する（flush_domain_events で取り出す）
    """

    def __init__(
        self,
        id: str = "airport",
        flight_factory: FlightFactory | None = None,
        staff: Staff | None = None,
    ) -> None:
        super().__init__(id)
        self._flight_factory = flight_factory or FlightFactory()
        self._staff = staff or Staff()
        self._flights: list[Flight] = []
        self._passengers: dict[FlightId, list[PassengerListener]] = {}
        self._passenger_sequence = count(1)

        self._completed = 0
        self._delayed = 0
        self._cancelled = 0

        # 購読解除は同一性で行うので、束縛メソッドは1度だけ生成して使い回す
        self._fan_out_listener = self._notify_passengers_and_staff
        self._statistics_listener = self._update_statistics

    @property
    def flights(self) -> tuple[Flight, ...]:
        return tuple(self._flights)

    def has_flights(self) -> bool:
        return bool(self._flights)

    def add_flight(self, destination: str, is_vip: bool = False) -> Flight:
        """フライトを追加し、空港のリスナーを購読させる"""
        flight = self._flight_factory.create(destination, is_vip)
        flight.subscribe(self._fan_out_listener)
        flight.subscribe(self._statistics_listener)

        self._flights.append(flight)
        self._passengers[flight.id] = []
        return flight

    def register_passenger(self, name: str, flight_index: int) -> Passenger:
        """乗客をフライトに登録し、フライトへ直接購読させる"""
        flight = self.get_flight(flight_index)
        if flight.status.is_terminal:
            raise FlightClosedException(flight)

        passenger = Passenger(
            id=PassengerId(value=f"passenger-{next(self._passenger_sequence)}"),
            name=PassengerName(name),
        )
        listener = PassengerListener(passenger, publish=self.add_domain_event)

        self._passengers.setdefault(flight.id, []).append(listener)
        flight.subscribe(listener)
        return passenger

    def change_flight_status(self, flight_index: int, new_status: FlightStatus) -> Flight:
        """フライトのステータス変更を要求する"""
        flight = self.get_flight(flight_index)
        flight.request_transition(new_status)
        return flight

    def passengers(self, flight_id: FlightId) -> tuple[Passenger, ...]:
        """登録中の乗客を登録順に返す（後始末済みのフライトは空）"""
        return tuple(
            listener.passenger for listener in self._passengers.get(flight_id, [])
        )

    def list_flights(self) -> list[FlightSummary]:
        """VIP 便を先頭に、行き先のアルファベット順で並べたフライト一覧"""
        summaries = [
            FlightSummary(
                index=index,
                flight_id=flight.id,
                destination=str(flight.destination),
                status=flight.status,
                is_vip=flight.is_vip,
            )
            for index, flight in enumerate(self._flights)
        ]
        return sorted(summaries, key=lambda s: (not s.is_vip, s.destination))

    def statistics(self) -> FlightStatistics:
        return FlightStatistics(
            completed=self._completed,
            delayed=self._delayed,
            cancelled=self._cancelled,
        )

    def get_flight(self, flight_index: int) -> Flight:
        """追加順の flight_index でフライトを取得する"""
        if not self._flights:
            raise NoFlightsException()
        if flight_index < 0 or flight_index >= len(self._flights):
            raise FlightNotFoundException(flight_index, len(self._flights))
        return self._flights[flight_index]

    def _notify_passengers_and_staff(self, flight: Flight, status: FlightStatus) -> None:
        self.add_domain_event(
            FlightStatusAnnounced(
                flight_id=flight.id,
                destination=str(flight.destination),
                status=status,
                is_vip=flight.is_vip,
            )
        )
        self.add_domain_event(self._staff.notify(flight, status))

        for listener in self._passengers.get(flight.id, []):
            listener(flight, status)

        if status.is_terminal:
            self._release(flight)

    def _release(self, flight: Flight) -> None:
        """終端ステータスのフライトから全リスナーを外し、乗客リストを破棄する"""
        flight.unsubscribe(self._fan_out_listener)
        flight.unsubscribe(self._statistics_listener)
        for listener in self._passengers.pop(flight.id, []):
            flight.unsubscribe(listener)

    def _update_statistics(self, flight: Flight, status: FlightStatus) -> None:
        if status == FlightStatus.DEPARTED:
            self._completed += 1
        elif status == FlightStatus.DELAYED:
            self._delayed += 1
        elif status == FlightStatus.CANCELLED:
            self._cancelled += 1
