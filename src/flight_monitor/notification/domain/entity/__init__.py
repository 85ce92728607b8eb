from .passenger import Passenger as Passenger
from .staff import Staff as Staff
