"""Stations and the trains that run between them."""

import sys
from datetime import datetime, timedelta

from .ids import generate_id

__all__ = ["Station", "Train"]

TRAIN_ID_DIGITS = 4
TIME_FORMAT = "%H:%M %d.%m.%Y"
FIRST_PLATFORM = 1
LINE = "-" * 128

DEPARTURES_HEADER = (
    "| Departure Time   | Arrival Time    | Destination   "
    "| Departure Platform | Train ID | Status   |"
)
ARRIVALS_HEADER = "| Arrival Time   | Arrival Platform | Train ID | Starting Station |"


def _resolve_now(now):
    return datetime.now() if now is None else now


def _emit(text):
    sys.stdout.write(text)
    return text


class Station:
    """A station and the trains that call at it."""

    def __init__(self, name):
        if name is None:
            raise ValueError("Invalid data!")
        self.name = name
        self.available_platform = FIRST_PLATFORM
        self.trains = []

    def add_train(self, train):
        """Register a train that departs from or arrives at this station."""
        self.trains.append(train)

    def departures_table(self, now=None):
        """Return the board of trains leaving this station."""
        now = _resolve_now(now)
        lines = ["Departures:", LINE, DEPARTURES_HEADER, LINE]
        for train in self.trains:
            if train.departure_station.name != self.name:
                continue
            status = "Departed" if train.is_departed(now) else "To depart"
            lines.append(
                f"| {train.departure_time_text()}  | {train.arrival_time_text()}"
                f"  | {train.arrival_station.name}  | {train.departure_platform}"
                f"      | {train.id}    | {status}   |"
            )
        return "\n".join(lines) + "\n"

    def arrivals_table(self):
        """Return the board of trains arriving at this station."""
        lines = ["Arrivals:", LINE, ARRIVALS_HEADER, LINE]
        for train in self.trains:
            if train.arrival_station.name != self.name:
                continue
            lines.append(
                f"| {train.arrival_time_text()}  | {train.arrival_platform}"
                f"    | {train.id} | {train.departure_station.name} |"
            )
        return "\n".join(lines) + "\n"

    def print_departures(self, now=None):
        """Write the departures board to standard output and return it."""
        return _emit(self.departures_table(now))

    def print_arrivals(self):
        """Write the arrivals board to standard output and return it."""
        return _emit(self.arrivals_table())


class Train:
    """A train running from one station to another with a set of wagons."""

    def __init__(self, departure_station, arrival_station, distance_km, speed, departure_time):
        if departure_station is None or arrival_station is None:
            raise ValueError("Invalid station!")
        if distance_km < 0:
            raise ValueError("Invalid distance!")
        if speed <= 0:
            raise ValueError("Invalid speed!")
        self.departure_station = departure_station
        self.arrival_station = arrival_station
        self.distance_km = distance_km
        self.speed = speed
        self.departure_time = departure_time
        # Travel time is counted in whole hours only.
        self.arrival_time = departure_time + timedelta(hours=distance_km // speed)
        self.arrival_platform = arrival_station.available_platform
        self.departure_platform = departure_station.available_platform
        self.id = generate_id(TRAIN_ID_DIGITS)
        self.wagons = []

    def find_wagon(self, wagon_id):
        """Return the wagon with ``wagon_id``; raise ValueError if absent."""
        for wagon in self.wagons:
            if wagon.id == wagon_id:
                return wagon
        raise ValueError("Invalid id!")

    def add_wagon(self, wagon):
        """Attach a wagon at the end of the train."""
        self.wagons.append(wagon)

    def remove_wagon(self, wagon_id):
        """Detach and return the wagon with ``wagon_id``."""
        wagon = self.find_wagon(wagon_id)
        self.wagons.remove(wagon)
        return wagon

    def departure_time_text(self):
        return self.departure_time.strftime(TIME_FORMAT)

    def arrival_time_text(self):
        return self.arrival_time.strftime(TIME_FORMAT)

    def is_departed(self, now=None):
        """Return True once the departure time has been reached."""
        return self.departure_time <= _resolve_now(now)

    def wagons_listing(self):
        """Return the numbered list of wagon types."""
        lines = ["Wagons"]
        lines.extend(
            f"{number} - {wagon.wagon_type}"
            for number, wagon in enumerate(self.wagons, start=1)
        )
        return "\n".join(lines) + "\n"

    def info(self):
        """Return a description of the train and its wagons."""
        return (
            f"===Train ID: {self.id} ===\n"
            f"Starting station: {self.departure_station.name}\n"
            f"Destination: {self.arrival_station.name}\n"
            f"Distance:{self.distance_km}km\n"
            f"Speed: {self.speed}km/h\n"
            f"Departure Time: {self.departure_time_text()}\n"
            f"Arrival Time: {self.arrival_time_text()}\n"
            f"Departure Platform: {self.departure_platform}\n\n"
            + self.wagons_listing()
        )

    def print_train_info(self):
        """Write the train description to standard output and return it."""
        return _emit(self.info())