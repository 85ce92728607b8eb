from .passenger_listener import PassengerListener as PassengerListener
