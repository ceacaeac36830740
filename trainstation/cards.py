"""Discount cards issued to passengers."""

import sys
from abc import ABC, abstractmethod

from .ids import generate_id

__all__ = [
    "DiscountCard",
    "AgeDiscountCard",
    "DistanceDiscountCard",
    "RouteDiscountCard",
]

ID_DIGITS = 6

CHILD_DISCOUNT = 100
TEEN_DISCOUNT = 50
ADULT_DISCOUNT = 20

WITHIN_DISTANCE_DISCOUNT = 50
OVER_DISTANCE_DISCOUNT = 30

FULL_DISCOUNT = 100


def _chunks(text, width):
    if not text:
        return [""]
    return [text[start:start + width] for start in range(0, len(text), width)]


class DiscountCard(ABC):
    """A card that entitles its holder to a percentage off a ticket."""

    class_type = ""

    def __init__(self, card_holder):
        self.card_holder = card_holder
        self.id = generate_id(ID_DIGITS)

    @property
    @abstractmethod
    def discount_percents(self):
        """Percentage taken off the ticket price."""

    @property
    @abstractmethod
    def field_info(self):
        """Card-specific line shown under the holder's name."""

    def render(self):
        """Return the card drawn as a framed text box."""
        width = len(self.class_type) + len("===") + len(" card===")
        lines = [f"|==={self.class_type} card===|"]
        for text in (self.card_holder, self.field_info):
            lines.extend(f"|{chunk:<{width}}|" for chunk in _chunks(text, width))
        id_text = f"{self.id:0{ID_DIGITS}d}"
        lines.append(f"|{id_text:<{width}}|")
        lines.append(f"|{'=' * width}|")
        return "\n".join(lines) + "\n"

    def print_card(self):
        """Write the rendered card to standard output and return it."""
        text = self.render()
        sys.stdout.write(text)
        return text


class AgeDiscountCard(DiscountCard):
    """Discount that depends on the holder's age."""

    class_type = "Age"

    def __init__(self, card_holder, age):
        super().__init__(card_holder)
        if age < 1:
            raise ValueError("Invalid age!")
        self.age = age

    @property
    def discount_percents(self):
        if self.age < 11:
            return CHILD_DISCOUNT
        if self.age < 19:
            return TEEN_DISCOUNT
        return ADULT_DISCOUNT

    @property
    def field_info(self):
        return f"{self.age} years old"


class DistanceDiscountCard(DiscountCard):
    """Discount that depends on how far the holder travels."""

    class_type = "Distance"

    def __init__(self, card_holder, distance_km, travelled_km):
        super().__init__(card_holder)
        if distance_km < 1:
            raise ValueError("Invalid distance!")
        if travelled_km < 1:
            raise ValueError("Invalid travelled distance!")
        self.distance_km = distance_km
        self.travelled_km = travelled_km

    @property
    def discount_percents(self):
        if self.distance_km >= self.travelled_km:
            return WITHIN_DISTANCE_DISCOUNT
        return OVER_DISTANCE_DISCOUNT

    @property
    def field_info(self):
        return f"{self.distance_km} km"


class RouteDiscountCard(DiscountCard):
    """Full discount on the route to one destination."""

    class_type = "Route"

    def __init__(self, card_holder, destination):
        super().__init__(card_holder)
        self.destination = destination

    @property
    def discount_percents(self):
        return FULL_DISCOUNT

    @property
    def field_info(self):
        return self.destination