from .exceptions import FlightClosedException as FlightClosedException
from .exceptions import FlightNotFoundException as FlightNotFoundException
from .exceptions import NoFlightsException as NoFlightsException
