from .destination import Destination as Destination
from .flight_id import FlightId as FlightId
