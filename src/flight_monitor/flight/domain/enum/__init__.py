from .flight_status import STATUS_TRANSITIONS as STATUS_TRANSITIONS
from .flight_status import FlightStatus as FlightStatus
from .flight_status import allowed_transitions as allowed_transitions
