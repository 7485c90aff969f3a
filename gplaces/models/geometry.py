"""Points, locations and viewports."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Protocol, runtime_checkable

from gplaces.core.json_fields import JsonObject, get_float, get_object


@runtime_checkable
class PointLike(Protocol):
    """Anything exposing a latitude and a longitude in decimal degrees."""

    @property
    def latitude(self) -> float: ...

    @property
    def longitude(self) -> float: ...


@dataclass(frozen=True, slots=True)
class Point:
    latitude: float
    longitude: float

    @property
    def is_unset(self) -> bool:
        return is_unset_location(self)


def is_unset_location(point: Optional[PointLike]) -> bool:
    """``None`` and the exact pair ``(0, 0)`` both count as "no location".

    Zero is compared exactly: ``(0, 1e-9)`` is a real coordinate.
    """
    if point is None:
        return True
    return point.latitude == 0 and point.longitude == 0


@dataclass(frozen=True, slots=True)
class PlacesGeometryLocation:
    latitude: float
    longitude: float
    raw: Optional[Dict[str, Any]] = field(default=None, repr=False, compare=False)

    @classmethod
    def parse(cls, obj: JsonObject) -> "PlacesGeometryLocation":
        return cls(latitude=get_float(obj, "lat"), longitude=get_float(obj, "lng"), raw=obj)


@dataclass(frozen=True, slots=True)
class PlacesGeometryViewport:
    northeast: Optional[PlacesGeometryLocation] = None
    southwest: Optional[PlacesGeometryLocation] = None
    raw: Optional[Dict[str, Any]] = field(default=None, repr=False, compare=False)

    @classmethod
    def parse(cls, obj: JsonObject) -> "PlacesGeometryViewport":
        return cls(
            northeast=get_object(obj, "northeast", PlacesGeometryLocation.parse),
            southwest=get_object(obj, "southwest", PlacesGeometryLocation.parse),
            raw=obj,
        )


@dataclass(frozen=True, slots=True)
class PlacesGeometry:
    location: Optional[PlacesGeometryLocation] = None
    viewport: Optional[PlacesGeometryViewport] = None
    raw: Optional[Dict[str, Any]] = field(default=None, repr=False, compare=False)

    @classmethod
    def parse(cls, obj: JsonObject) -> "PlacesGeometry":
        return cls(
            location=get_object(obj, "location", PlacesGeometryLocation.parse),
            viewport=get_object(obj, "viewport", PlacesGeometryViewport.parse),
            raw=obj,
        )
