"""In-memory railway model: stations, trains, wagons with seat booking, discount cards and users."""

__version__ = "0.1.0"
__all__ = ["cards", "ids", "network", "users", "wagons"]