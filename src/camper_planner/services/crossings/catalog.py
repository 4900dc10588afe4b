"""Loader for the bundled channel crossing reference table."""

from __future__ import annotations

import functools
import json
import logging
from pathlib import Path
from typing import Any, Optional

from ...config import settings
from ...models.domain import ChannelCrossing, CrossingTerminal

logger = logging.getLogger(__name__)


def _terminal(raw: dict[str, Any]) -> CrossingTerminal:
    return CrossingTerminal(
        name=str(raw["name"]),
        latitude=float(raw["lat"]),
        longitude=float(raw["lng"]),
        country=str(raw["country"]),
    )


def _crossing(raw: dict[str, Any]) -> ChannelCrossing:
    cost = raw.get("estimated_cost") or {}
    max_length = raw.get("max_vehicle_length_m")
    return ChannelCrossing(
        crossing_id=str(raw["id"]),
        name=str(raw["name"]),
        mode=raw["mode"],
        departure=_terminal(raw["departure"]),
        arrival=_terminal(raw["arrival"]),
        duration_minutes=int(raw["duration_minutes"]),
        frequency=str(raw.get("frequency", "")),
        operators=tuple(raw.get("operators") or ()),
        vehicle_types=tuple(raw.get("vehicle_types") or ()),
        cost_low=float(cost.get("low", 0.0)),
        cost_high=float(cost.get("high", 0.0)),
        currency=str(cost.get("currency", "GBP")),
        region=raw["region"],
        overnight=bool(raw.get("overnight", False)),
        max_vehicle_length_m=float(max_length) if max_length is not None else None,
        booking_urls=tuple(raw.get("booking_urls") or ()),
        notes=str(raw.get("notes", "")),
    )


@functools.lru_cache(maxsize=1)
def load_crossings(source: Optional[Path] = None) -> tuple[ChannelCrossing, ...]:
    """Load the crossing table from the configured JSON file."""

    json_path = source or settings.crossings_file
    if not json_path.exists():
        raise FileNotFoundError(f"Crossing table not found: {json_path}")

    with json_path.open(mode="r", encoding="utf-8") as handle:
        payload = json.load(handle)
    if not isinstance(payload, list):
        raise ValueError(f"Crossing table '{json_path}' must contain a JSON array.")

    try:
        crossings = tuple(_crossing(entry) for entry in payload)
    except (KeyError, TypeError, ValueError) as exc:
        raise ValueError(f"Malformed crossing entry in '{json_path}': {exc}") from exc

    logger.info("Loaded %d channel crossings from %s", len(crossings), json_path)
    return crossings


def get_crossing(crossing_id: str) -> Optional[ChannelCrossing]:
    for crossing in load_crossings():
        if crossing.crossing_id == crossing_id:
            return crossing
    return None
