from .add_flight import AddFlightService as AddFlightService
from .change_flight_status import (
    ChangeFlightStatusService as ChangeFlightStatusService,
)
from .change_flight_status import StatusChangeResult as StatusChangeResult
from .get_statistics import GetStatisticsService as GetStatisticsService
from .list_flights import ListFlightsService as ListFlightsService
from .register_passenger import RegisterPassengerService as RegisterPassengerService
