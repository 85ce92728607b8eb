from .airport import Airport as Airport
