from .flight_factory import FlightFactory as FlightFactory
