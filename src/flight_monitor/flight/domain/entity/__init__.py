from .flight import Flight as Flight
from .flight import FlightListener as FlightListener
