from flight_monitor.airport.domain import Airport

# プロセス内で共有する空港（永続化はしない）
airport = Airport()


def get_airport() -> Airport:
    return airport


def reset_airport() -> Airport:
    """共有の空港を新しいものに置き換える"""
    global airport
    airport = Airport()
    return airport
