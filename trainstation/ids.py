"""Random numeric identifiers for cards, wagons and trains."""

import random

__all__ = ["generate_id"]


def generate_id(length):
    """Return a random identifier made of ``length`` decimal digits.

    Leading digits may be zero, so the value can be numerically shorter.
    A non-positive length yields 0.
    """
    if length <= 0:
        return 0
    return random.randrange(10**length)