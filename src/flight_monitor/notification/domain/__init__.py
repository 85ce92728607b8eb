from .entity import Passenger as Passenger
from .entity import Staff as Staff
from .value_object import STAFF_RECIPIENT as STAFF_RECIPIENT
from .value_object import Notification as Notification
from .value_object import PassengerId as PassengerId
from .value_object import PassengerName as PassengerName
