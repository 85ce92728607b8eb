from collections.abc import Callable

from flight_monitor.flight.domain import Flight, FlightId, FlightStatus
from flight_monitor.notification.domain import Notification, Passenger


class PassengerListener:
    """乗客をフライトに購読させるリスナーハンドル

    空港は購読したハンドルそのものを保持し、後始末の際に同一性で購読解除する。
    空港の一斉通知とフライトからの直接通知の両方で呼ばれるため、
    フライトの同じ version に対しては1度だけ乗客へ通知する。
    """

    def __init__(
        self,
        passenger: Passenger,
        publish: Callable[[Notification], None],
    ) -> None:
        self._passenger = passenger
        self._publish = publish
        self._last_delivery: tuple[FlightId, int] | None = None

    @property
    def passenger(self) -> Passenger:
        return self._passenger

    def __call__(self, flight: Flight, status: FlightStatus) -> None:
        delivery = (flight.id, flight.version)
        if delivery == self._last_delivery:
            return
        self._last_delivery = delivery
        self._publish(self._passenger.notify(flight, status))
