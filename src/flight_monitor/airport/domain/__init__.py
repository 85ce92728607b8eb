from .entity import Airport as Airport
from .event import FlightStatusAnnounced as FlightStatusAnnounced
from .exception import FlightClosedException as FlightClosedException
from .exception import FlightNotFoundException as FlightNotFoundException
from .exception import NoFlightsException as NoFlightsException
from .listener import PassengerListener as PassengerListener
from .value_object import FlightStatistics as FlightStatistics
from .value_object import FlightSummary as FlightSummary
