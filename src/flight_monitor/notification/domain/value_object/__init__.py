from .notification import STAFF_RECIPIENT as STAFF_RECIPIENT
from .notification import Notification as Notification
from .passenger_id import PassengerId as PassengerId
from .passenger_name import PassengerName as PassengerName
