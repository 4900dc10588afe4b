"""Geospatial helper functions."""

from __future__ import annotations

import math
from typing import Protocol

from shapely.geometry import Point, box
from shapely.geometry.base import BaseGeometry

from ..errors import PlanningValidationError

EARTH_RADIUS_KM = 6371.0


class HasCoordinates(Protocol):
    latitude: float
    longitude: float


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Compute distance between two coordinates using the Haversine formula."""

    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)

    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def distance_km(a: HasCoordinates, b: HasCoordinates) -> float:
    return haversine_km(a.latitude, a.longitude, b.latitude, b.longitude)


def validate_coordinate(lat: float, lon: float, label: str = "Stop") -> None:
    if not (math.isfinite(lat) and math.isfinite(lon)):
        raise PlanningValidationError(f"{label} has a non-numeric coordinate.")
    if not -90.0 <= lat <= 90.0:
        raise PlanningValidationError(f"{label} latitude {lat} is outside [-90, 90].")
    if not -180.0 <= lon <= 180.0:
        raise PlanningValidationError(f"{label} longitude {lon} is outside [-180, 180].")


def lat_lng_box(min_lat: float, max_lat: float, min_lng: float, max_lng: float) -> BaseGeometry:
    """Build a rectangle in shapely's (x=lng, y=lat) order."""

    return box(min_lng, min_lat, max_lng, max_lat)


def region_covers(region: BaseGeometry, lat: float, lon: float) -> bool:
    """Return True if the point lies inside or on the boundary of the region."""

    return region.covers(Point(lon, lat))
