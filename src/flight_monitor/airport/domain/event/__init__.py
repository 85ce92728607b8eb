from .flight_status_announced import FlightStatusAnnounced as FlightStatusAnnounced
