"""Sea/tunnel crossing detection and ranking between UK/Ireland and mainland Europe."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from shapely.ops import unary_union

from ...config import settings
from ...models.domain import ChannelCrossing, CrossingTerminal, VehicleProfile
from ..geospatial import HasCoordinates, haversine_km, lat_lng_box, region_covers
from .catalog import load_crossings

UK_BOX = lat_lng_box(49.9, 60.9, -8.2, 1.8)
IRELAND_BOX = lat_lng_box(51.4, 55.4, -10.5, -5.9)
UK_AND_IRELAND = unary_union([UK_BOX, IRELAND_BOX])
EUROPE_BOX = lat_lng_box(35.0, 72.0, -10.0, 40.0)


@dataclass(slots=True, frozen=True)
class RankedCrossing:
    crossing: ChannelCrossing
    drive_to_port_km: float
    drive_from_port_km: float
    estimated_hours: float


def is_uk_or_ireland(lat: float, lon: float) -> bool:
    return region_covers(UK_AND_IRELAND, lat, lon)


def is_mainland_europe(lat: float, lon: float) -> bool:
    """Mainland Europe box, excluding anything classified as UK/Ireland."""
    return region_covers(EUROPE_BOX, lat, lon) and not is_uk_or_ireland(lat, lon)


def needs_crossing(a: HasCoordinates, b: HasCoordinates) -> bool:
    a_uk = is_uk_or_ireland(a.latitude, a.longitude)
    b_uk = is_uk_or_ireland(b.latitude, b.longitude)
    a_eu = is_mainland_europe(a.latitude, a.longitude)
    b_eu = is_mainland_europe(b.latitude, b.longitude)
    return (a_uk and b_eu) or (a_eu and b_uk)


def terminals_for(crossing: ChannelCrossing, origin: HasCoordinates) -> tuple[CrossingTerminal, CrossingTerminal]:
    """Return (origin-side, destination-side) terminals for a journey starting at origin."""
    if is_uk_or_ireland(origin.latitude, origin.longitude):
        return crossing.departure, crossing.arrival
    return crossing.arrival, crossing.departure


def is_compatible(crossing: ChannelCrossing, vehicle: VehicleProfile) -> bool:
    if vehicle.category not in crossing.vehicle_types:
        return False
    if crossing.max_vehicle_length_m is not None and vehicle.length_m > crossing.max_vehicle_length_m:
        return False
    return True


def estimate_crossing(
    crossing: ChannelCrossing,
    origin: HasCoordinates,
    destination: HasCoordinates,
    drive_speed_kmh: Optional[float] = None,
) -> RankedCrossing:
    speed = drive_speed_kmh or settings.crossing_drive_speed_kmh
    near, far = terminals_for(crossing, origin)
    to_port = haversine_km(origin.latitude, origin.longitude, near.latitude, near.longitude)
    from_port = haversine_km(far.latitude, far.longitude, destination.latitude, destination.longitude)
    hours = (to_port + from_port) / speed + crossing.duration_minutes / 60.0
    return RankedCrossing(
        crossing=crossing,
        drive_to_port_km=to_port,
        drive_from_port_km=from_port,
        estimated_hours=hours,
    )


def rank_crossings_detailed(
    origin: HasCoordinates,
    destination: HasCoordinates,
    vehicle: Optional[VehicleProfile] = None,
    crossings: Optional[Sequence[ChannelCrossing]] = None,
) -> list[RankedCrossing]:
    candidates = list(crossings if crossings is not None else load_crossings())
    if vehicle is not None:
        candidates = [crossing for crossing in candidates if is_compatible(crossing, vehicle)]
    ranked = [estimate_crossing(crossing, origin, destination) for crossing in candidates]
    # sorted() is stable, equal estimates keep table order
    return sorted(ranked, key=lambda item: item.estimated_hours)


def rank_crossings(
    origin: HasCoordinates,
    destination: HasCoordinates,
    vehicle: Optional[VehicleProfile] = None,
    crossings: Optional[Sequence[ChannelCrossing]] = None,
) -> list[ChannelCrossing]:
    return [item.crossing for item in rank_crossings_detailed(origin, destination, vehicle, crossings)]
