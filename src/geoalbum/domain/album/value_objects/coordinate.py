"""Coordinate value object: a validated latitude/longitude pair."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from geoalbum.domain.album.exceptions import CoordinateOutOfBoundsError
from geoalbum.domain.shared.result import Err, Ok, Result

LATITUDE_RANGE = (-90.0, 90.0)
LONGITUDE_RANGE = (-180.0, 180.0)

# Mean Earth radius in kilometers
EARTH_RADIUS_KM = 6371.0


def _check_bounds(
    latitude: float,
    longitude: float,
) -> CoordinateOutOfBoundsError | None:
    lat_min, lat_max = LATITUDE_RANGE
    if not lat_min <= latitude <= lat_max:
        return CoordinateOutOfBoundsError("latitude", latitude, lat_min, lat_max)

    lng_min, lng_max = LONGITUDE_RANGE
    if not lng_min <= longitude <= lng_max:
        return CoordinateOutOfBoundsError("longitude", longitude, lng_min, lng_max)

    return None


@dataclass(frozen=True)
class Coordinate:
    """Geographic point. Both bounds are inclusive."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        error = _check_bounds(self.latitude, self.longitude)
        if error is not None:
            raise error
        object.__setattr__(self, "latitude", float(self.latitude))
        object.__setattr__(self, "longitude", float(self.longitude))

    @classmethod
    def create(
        cls,
        latitude: float,
        longitude: float,
    ) -> Result[Coordinate, CoordinateOutOfBoundsError]:
        # NaN fails both comparisons and is reported as out of bounds
        error = _check_bounds(latitude, longitude)
        if error is not None:
            return Err(error)
        return Ok(cls(latitude=latitude, longitude=longitude))

    @classmethod
    def from_dict(
        cls,
        data: dict[str, Any],
    ) -> Result[Coordinate, CoordinateOutOfBoundsError]:
        return cls.create(data["latitude"], data["longitude"])

    def distance_to(self, other: Coordinate) -> float:
        """Great-circle distance in kilometers (haversine formula)."""
        lat1 = math.radians(self.latitude)
        lat2 = math.radians(other.latitude)
        d_lat = math.radians(other.latitude - self.latitude)
        d_lng = math.radians(other.longitude - self.longitude)

        a = (
            math.sin(d_lat / 2) ** 2
            + math.cos(lat1) * math.cos(lat2) * math.sin(d_lng / 2) ** 2
        )
        a = min(a, 1.0)  # rounding near antipodal points
        c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
        return EARTH_RADIUS_KM * c

    def to_dict(self) -> dict[str, float]:
        return {"latitude": self.latitude, "longitude": self.longitude}

    def __str__(self) -> str:
        return f"{self.latitude},{self.longitude}"
