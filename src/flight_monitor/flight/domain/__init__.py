from .entity import Flight as Flight
from .entity import FlightListener as FlightListener
from .enum import STATUS_TRANSITIONS as STATUS_TRANSITIONS
from .enum import FlightStatus as FlightStatus
from .enum import allowed_transitions as allowed_transitions
from .exception import (
    InvalidStatusTransitionException as InvalidStatusTransitionException,
)
from .factory import FlightFactory as FlightFactory
from .value_object import Destination as Destination
from .value_object import FlightId as FlightId
