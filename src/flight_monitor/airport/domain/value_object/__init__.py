from .flight_statistics import FlightStatistics as FlightStatistics
from .flight_summary import FlightSummary as FlightSummary
