"""Passengers and administrators working with the station network."""

import argparse
import hmac
from pathlib import Path

from .ids import generate_id
from .network import TRAIN_ID_DIGITS, Station, Train

__all__ = ["User", "Admin", "read_train_ids", "main"]

STATIONS_FILE = "Stations.txt"
TRAINS_FILE = "Trains.txt"
TEXT_ENCODING = "utf-8"


def _as_bytes(value):
    return str(value).encode(TEXT_ENCODING)


class User:
    """A passenger who can browse schedules and buy tickets."""

    def __init__(self, name, trains, stations, age=None):
        if name is None:
            raise ValueError("Invalid data!")
        if age is not None and age < 1:
            raise ValueError("Invalid age!")
        self.name = name
        self.age = age
        self.trains = trains
        self.stations = stations

    def stations_listing(self, path=STATIONS_FILE):
        """Return the contents of the stations file, one station per line."""
        lines = Path(path).read_text(encoding=TEXT_ENCODING).splitlines()
        return "".join(f"{line}\n" for line in lines)

    def find_station(self, station_name):
        for station in self.stations:
            if station.name == station_name:
                return station
        raise ValueError("Invalid station!")

    def find_train(self, train_id):
        for train in self.trains:
            if train.id == train_id:
                return train
        raise ValueError("Invalid trainId")

    def schedule(self, station_name, now=None):
        """Return the arrivals and departures boards of a station."""
        station = self.find_station(station_name)
        return (
            f"=== Schedule for station {station.name} ===\n"
            + station.arrivals_table()
            + "\n"
            + station.departures_table(now)
        )

    def train_info(self, train_id):
        return self.find_train(train_id).info()

    def wagon_layout(self, train_id, wagon_id):
        return self.find_train(train_id).find_wagon(wagon_id).render()

    def buy_ticket(self, train_id, wagon_id, seat):
        """Reserve a seat and return the ticket price."""
        wagon = self.find_train(train_id).find_wagon(wagon_id)
        wagon.buy_ticket(seat)
        return wagon.ticket_price()


class Admin(User):
    """A user who manages stations, trains and wagons after logging in."""

    def __init__(self, name, password, trains, stations):
        super().__init__(name, trains, stations)
        self._password = password
        self.logged_in = False

    def login(self, name, password):
        """Log in; raise PermissionError on wrong credentials."""
        name_ok = name == self.name
        matches = hmac.compare_digest(_as_bytes(password), _as_bytes(self._password))
        if not (name_ok and matches):
            self.logged_in = False
            raise PermissionError("Invalid credentials!")
        self.logged_in = True
        return True

    def _require_login(self):
        if not self.logged_in:
            raise PermissionError("Administrator is not logged in!")

    def _station(self, station):
        if isinstance(station, Station):
            return station
        return self.find_station(station)

    def add_station(self, name):
        self._require_login()
        if any(station.name == name for station in self.stations):
            raise ValueError("Station already exists!")
        station = Station(name)
        self.stations.append(station)
        return station

    def add_train(self, departure_station, arrival_station, distance_km, speed, departure_time):
        """Create a train between two stations, given by name or object."""
        self._require_login()
        departure = self._station(departure_station)
        arrival = self._station(arrival_station)
        train = Train(departure, arrival, distance_km, speed, departure_time)
        taken = {existing.id for existing in self.trains}
        while train.id in taken:
            train.id = generate_id(TRAIN_ID_DIGITS)
        self.trains.append(train)
        departure.add_train(train)
        if arrival is not departure:
            arrival.add_train(train)
        return train

    def remove_train(self, train_id):
        self._require_login()
        train = self.find_train(train_id)
        self.trains.remove(train)
        for station in self.stations:
            station.trains[:] = [t for t in station.trains if t is not train]
        return train

    def add_wagon(self, train_id, wagon):
        self._require_login()
        self.find_train(train_id).add_wagon(wagon)
        return wagon

    def remove_wagon(self, train_id, wagon_id):
        self._require_login()
        return self.find_train(train_id).remove_wagon(wagon_id)

    def move_wagon(self, source_train_id, wagon_id, destination_train_id, now=None):
        """Move an unsold wagon between two trains that have not departed."""
        self._require_login()
        source = self.find_train(source_train_id)
        destination = self.find_train(destination_train_id)
        if source.is_departed(now) or destination.is_departed(now):
            raise ValueError("Wagons can only be moved between trains that have not departed!")
        wagon = source.find_wagon(wagon_id)
        if wagon.has_bought_seats():
            raise ValueError("A wagon with bought seats cannot be moved!")
        source.remove_wagon(wagon_id)
        destination.add_wagon(wagon)
        return wagon


def read_train_ids(path=TRAINS_FILE):
    """Return the whitespace-separated train ids stored in ``path``."""
    text = Path(path).read_text(encoding=TEXT_ENCODING)
    ids = []
    for token in text.split():
        try:
            ids.append(int(token))
        except ValueError:
            raise ValueError(f"Invalid train id: {token!r}") from None
    return ids


def main(argv=None):
    parser = argparse.ArgumentParser(prog="trainstation", description="Train station tools.")
    parser.add_argument("trains_file", nargs="?", help="file of train ids to list")
    args = parser.parse_args(argv)
    if args.trains_file:
        for train_id in read_train_ids(args.trains_file):
            print(train_id)
    return 0