"""Itinerary planning engine for motorhome, campervan and caravan trips across Europe."""

__version__ = "0.1.0"
