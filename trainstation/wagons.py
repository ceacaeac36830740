"""Train wagons with seats and ticket pricing."""

import sys
from abc import ABC, abstractmethod

from .ids import generate_id

__all__ = ["Wagon", "FirstClassWagon", "PassengerClassWagon", "SleepingWagon"]

ID_DIGITS = 4
SEAT_ROWS = 9

FIRST_CLASS_SEATS = 10
FOOD_PRICE = 10
PASSENGER_CLASS_SEATS = 20
SLEEPING_BEDS = 5


class Wagon(ABC):
    """A wagon with numbered seats, numbered from 1."""

    wagon_type = ""

    def __init__(self, seats_count, base_price):
        if base_price <= 0:
            raise ValueError("Base price must be bigger than 0!")
        self.id = generate_id(ID_DIGITS)
        self.base_price = base_price
        self._seats = [False] * seats_count

    @property
    def seats_count(self):
        return len(self._seats)

    @property
    def seats(self):
        """Taken state of every seat, in seat order."""
        return tuple(self._seats)

    def buy_ticket(self, seat):
        """Reserve ``seat``; raise ValueError if it is invalid or taken."""
        if seat < 1 or seat > self.seats_count:
            raise ValueError("Invalid seat!")
        if self._seats[seat - 1]:
            raise ValueError("The seat has already been taken!")
        self._seats[seat - 1] = True

    @abstractmethod
    def ticket_price(self):
        """Price of one ticket in this wagon."""

    def has_bought_seats(self):
        """Return True if any seat has been sold."""
        return any(self._seats)

    def render(self):
        """Return the seat map drawn as text; sold seats show as ``xx``."""
        cols = self.seats_count // 5
        border = "_" * (3 * cols)
        lines = [" " + border]
        seat_iter = iter(enumerate(self._seats, start=1))
        for row in range(SEAT_ROWS):
            if row % 2 == 0:
                cells = []
                for _ in range(cols):
                    number, taken = next(seat_iter, (None, False))
                    if number is None:
                        cells.append("   ")
                    else:
                        cells.append(("xx" if taken else f"{number:02d}") + " ")
                lines.append("|" + "".join(cells) + "|")
            else:
                lines.append("|" + "   " * cols + "|")
        lines.append("|" + border + "|")
        return "\n".join(lines)

    def print_wagon(self):
        """Write the seat map to standard output and return it."""
        text = self.render() + "\n"
        sys.stdout.write(text)
        return text


class FirstClassWagon(Wagon):
    """First-class wagon with a comfort factor and optional food."""

    wagon_type = "First Class"

    def __init__(self, base_price, comfort_factor, include_food):
        super().__init__(FIRST_CLASS_SEATS, base_price)
        if comfort_factor < 0 or comfort_factor > 1:
            raise ValueError("Comfort factor must be between 0 and 1!")
        self.comfort_factor = comfort_factor
        self.include_food = bool(include_food)

    def ticket_price(self):
        food = FOOD_PRICE if self.include_food else 0
        return self.base_price * self.comfort_factor + food


class PassengerClassWagon(Wagon):
    """Ordinary wagon where luggage is charged by weight."""

    wagon_type = "Passenger Class"

    def __init__(self, base_price, price_per_kilo, luggage_weight):
        super().__init__(PASSENGER_CLASS_SEATS, base_price)
        if price_per_kilo <= 0:
            raise ValueError("The price per kilo of luggage must be bigger than 0!")
        if luggage_weight <= 0:
            raise ValueError("The weight of the luggage must be bigger than 0!")
        self.price_per_kilo = price_per_kilo
        self.luggage_weight = luggage_weight

    def ticket_price(self):
        return self.base_price + self.price_per_kilo * self.luggage_weight


class SleepingWagon(Wagon):
    """Sleeping wagon charged by the distance travelled."""

    wagon_type = "Sleeping Class"

    def __init__(self, base_price, price_per_100km, distance_km):
        super().__init__(SLEEPING_BEDS, base_price)
        if distance_km <= 0:
            raise ValueError("Distance must be bigger than 0!")
        if price_per_100km <= 0:
            raise ValueError("Price per 100 km must be bigger than 0!")
        self.distance_km = distance_km
        self.price_per_100km = price_per_100km

    def ticket_price(self):
        return self.base_price + (self.price_per_100km / 100) * self.distance_km