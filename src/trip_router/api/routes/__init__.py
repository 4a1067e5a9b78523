"""Route group exports."""

from . import cities, health, routes, trips

__all__ = ["routes", "trips", "cities", "health"]
