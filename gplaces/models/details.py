"""Place details and their nested records."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, Dict, List, Optional

from gplaces.core.json_fields import (
    JsonObject,
    get_array,
    get_bool,
    get_float,
    get_minutes,
    get_object,
    get_optional_bool,
    get_optional_int,
    get_string,
    get_string_array,
)
from gplaces.models.enums import PlacesBusinessStatus, PlacesPriceLevel
from gplaces.models.geometry import PlacesGeometry

_FLOAT_EPSILON = sys.float_info.min


@dataclass(frozen=True, slots=True)
class PlacesAddressComponent:
    long_name: Optional[str] = None
    short_name: Optional[str] = None
    types: List[str] = field(default_factory=list)
    raw: Optional[Dict[str, Any]] = field(default=None, repr=False, compare=False)

    @classmethod
    def parse(cls, obj: JsonObject) -> "PlacesAddressComponent":
        return cls(
            long_name=get_string(obj, "long_name"),
            short_name=get_string(obj, "short_name"),
            types=get_string_array(obj, "types"),
            raw=obj,
        )


@dataclass(frozen=True, slots=True)
class PlacesOpeningHoursPeriodItem:
    """One end of an opening period: ``day`` 0 is Sunday, ``time`` is ``"hhmm"``."""

    day: int = 0
    time: Optional[str] = None
    raw: Optional[Dict[str, Any]] = field(default=None, repr=False, compare=False)

    @classmethod
    def parse(cls, obj: JsonObject) -> "PlacesOpeningHoursPeriodItem":
        day = get_optional_int(obj, "day")
        return cls(day=day if day is not None else 0, time=get_string(obj, "time"), raw=obj)


@dataclass(frozen=True, slots=True)
class PlacesOpeningHoursPeriod:
    # A place open around the clock only has ``open`` (day 0, time "0000").
    open: Optional[PlacesOpeningHoursPeriodItem] = None
    close: Optional[PlacesOpeningHoursPeriodItem] = None
    raw: Optional[Dict[str, Any]] = field(default=None, repr=False, compare=False)

    @property
    def has_open(self) -> bool:
        return self.open is not None

    @property
    def has_close(self) -> bool:
        return self.close is not None

    @classmethod
    def parse(cls, obj: JsonObject) -> "PlacesOpeningHoursPeriod":
        return cls(
            open=get_object(obj, "open", PlacesOpeningHoursPeriodItem.parse),
            close=get_object(obj, "close", PlacesOpeningHoursPeriodItem.parse),
            raw=obj,
        )


@dataclass(frozen=True, slots=True)
class PlacesOpeningHours:
    open_now: Optional[bool] = None
    periods: List[PlacesOpeningHoursPeriod] = field(default_factory=list)
    weekday_text: List[str] = field(default_factory=list)
    raw: Optional[Dict[str, Any]] = field(default=None, repr=False, compare=False)

    @classmethod
    def parse(cls, obj: JsonObject) -> "PlacesOpeningHours":
        return cls(
            open_now=get_optional_bool(obj, "open_now"),
            periods=get_array(obj, "periods", PlacesOpeningHoursPeriod.parse),
            weekday_text=get_string_array(obj, "weekday_text"),
            raw=obj,
        )


@dataclass(frozen=True, slots=True)
class PlacesDetails:
    """A single place as returned by the details and search endpoints.

    Search endpoints return a subset of the fields, so everything is
    optional. Photos and reviews are not modelled; read them from ``raw``.
    """

    place_id: Optional[str] = None
    name: Optional[str] = None
    formatted_address: Optional[str] = None
    adr_address: Optional[str] = None
    formatted_phone_number: Optional[str] = None
    international_phone_number: Optional[str] = None
    website: Optional[str] = None
    url: Optional[str] = None
    icon: Optional[str] = None
    reference: Optional[str] = None
    scope: Optional[str] = None
    vicinity: Optional[str] = None
    geometry: Optional[PlacesGeometry] = None
    opening_hours: Optional[PlacesOpeningHours] = None
    business_status: PlacesBusinessStatus = PlacesBusinessStatus.UNSPECIFIED
    price_level: PlacesPriceLevel = PlacesPriceLevel.UNSPECIFIED
    rating: float = 0.0
    user_ratings_total: Optional[int] = None
    address_components: List[PlacesAddressComponent] = field(default_factory=list)
    types: List[str] = field(default_factory=list)
    utc_offset: timedelta = timedelta(0)
    permanently_closed: bool = False
    raw: Optional[Dict[str, Any]] = field(default=None, repr=False, compare=False)

    @property
    def has_business_status(self) -> bool:
        return self.business_status is not PlacesBusinessStatus.UNSPECIFIED

    @property
    def has_phone_number(self) -> bool:
        return bool(self.formatted_phone_number and self.formatted_phone_number.strip())

    @property
    def has_opening_hours(self) -> bool:
        return self.opening_hours is not None

    @property
    def has_price_level(self) -> bool:
        return self.price_level is not PlacesPriceLevel.UNSPECIFIED

    @property
    def has_rating(self) -> bool:
        # An absent rating is stored as 0.0; anything at or above the smallest
        # positive float counts as rated. The older flag read the opposite way
        # (true below epsilon); this reading is pending product-owner sign-off,
        # see "has_rating" under Open question decisions in DESIGN.md.
        return abs(self.rating) >= _FLOAT_EPSILON

    @property
    def has_website(self) -> bool:
        return bool(self.website and self.website.strip())

    @classmethod
    def parse(cls, obj: JsonObject) -> "PlacesDetails":
        return cls(
            place_id=get_string(obj, "place_id"),
            name=get_string(obj, "name"),
            formatted_address=get_string(obj, "formatted_address"),
            adr_address=get_string(obj, "adr_address"),
            formatted_phone_number=get_string(obj, "formatted_phone_number"),
            international_phone_number=get_string(obj, "international_phone_number"),
            website=get_string(obj, "website"),
            url=get_string(obj, "url"),
            icon=get_string(obj, "icon"),
            reference=get_string(obj, "reference"),
            scope=get_string(obj, "scope"),
            vicinity=get_string(obj, "vicinity"),
            geometry=get_object(obj, "geometry", PlacesGeometry.parse),
            opening_hours=get_object(obj, "opening_hours", PlacesOpeningHours.parse),
            business_status=PlacesBusinessStatus.parse(get_string(obj, "business_status")),
            price_level=PlacesPriceLevel.parse(obj.get("price_level")),
            rating=get_float(obj, "rating"),
            user_ratings_total=get_optional_int(obj, "user_ratings_total"),
            address_components=get_array(obj, "address_components", PlacesAddressComponent.parse),
            types=get_string_array(obj, "types"),
            utc_offset=get_minutes(obj, "utc_offset"),
            permanently_closed=get_bool(obj, "permanently_closed"),
            raw=obj,
        )
