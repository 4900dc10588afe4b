"""Route group exports."""

from . import crossings, health, plans

__all__ = ["crossings", "health", "plans"]
