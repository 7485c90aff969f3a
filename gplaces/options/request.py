"""The request description built by options objects, plus shared validators."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import urlencode

from gplaces.core.exceptions import PropertyNotSetError, PropertyOutOfRangeError
from gplaces.models.enums import PlacesPriceLevel
from gplaces.models.geometry import PointLike, is_unset_location

BASE_URL = "https://maps.googleapis.com/maps/api/place/"
DETAILS_URL = BASE_URL + "details/json"
NEARBY_SEARCH_URL = BASE_URL + "nearbysearch/json"
TEXT_SEARCH_URL = BASE_URL + "textsearch/json"

MAX_RADIUS = 50000


@dataclass(frozen=True)
class PlacesRequest:
    """An HTTP GET request ready to be handed to a transport."""

    url: str
    params: List[Tuple[str, str]] = field(default_factory=list)
    method: str = "GET"

    @property
    def query(self) -> Dict[str, str]:
        return dict(self.params)

    @property
    def query_string(self) -> str:
        return urlencode(self.params)

    @property
    def full_url(self) -> str:
        if not self.params:
            return self.url
        return f"{self.url}?{self.query_string}"


class QueryBuilder:
    """Collects query parameters, skipping values left at their defaults."""

    def __init__(self) -> None:
        self._params: List[Tuple[str, str]] = []

    def add(self, name: str, value: Any) -> "QueryBuilder":
        self._params.append((name, str(value)))
        return self

    def add_string(self, name: str, value: Optional[str]) -> "QueryBuilder":
        if value is not None and value.strip():
            self.add(name, value)
        return self

    def add_positive(self, name: str, value: Optional[int]) -> "QueryBuilder":
        if value is not None and value > 0:
            self.add(name, int(value))
        return self

    def add_price(self, name: str, value: Optional[PlacesPriceLevel]) -> "QueryBuilder":
        if value is not None:
            wire = PlacesPriceLevel(value).wire_value
            if wire is not None:
                self.add(name, wire)
        return self

    def add_list(self, name: str, values: Optional[List[str]]) -> "QueryBuilder":
        items = [item for item in values or [] if item and item.strip()]
        if items:
            self.add(name, ",".join(items))
        return self

    def add_location(self, name: str, latitude: float, longitude: float) -> "QueryBuilder":
        return self.add(name, format_location(latitude, longitude))

    def build(self, url: str) -> PlacesRequest:
        return PlacesRequest(url=url, params=list(self._params))


def format_coordinate(value: float) -> str:
    """Render a coordinate independent of locale: ``12.0`` -> ``"12"``, ``1e-05`` -> ``"0.00001"``."""
    # Adding 0.0 folds -0.0 into 0.0.
    return format(Decimal(repr(float(value) + 0.0)).normalize(), "f")


def format_location(latitude: float, longitude: float) -> str:
    return f"{format_coordinate(latitude)},{format_coordinate(longitude)}"


def require_string(name: str, value: Optional[str]) -> None:
    if value is None or not value.strip():
        raise PropertyNotSetError(name)


def require_point(name: str, point: Optional[PointLike]) -> None:
    if point is None or is_unset_location(point):
        raise PropertyNotSetError(name)
    check_range("latitude", point.latitude, -90, 90)
    check_range("longitude", point.longitude, -180, 180)


def check_range(name: str, value: Optional[float], minimum: float, maximum: float) -> None:
    if value is None:
        return
    if not minimum <= value <= maximum:
        raise PropertyOutOfRangeError(name, value, minimum, maximum)
