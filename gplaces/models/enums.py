"""Enumerations used by the Places models and options.

Each parsed enum carries an explicit fallback member so that values added
to the API later never break parsing.
"""

import enum
import logging
from typing import Any, Optional

from gplaces.core.json_fields import normalize_enum_name

logger = logging.getLogger(__name__)


class PlacesResponseStatusCode(str, enum.Enum):
    """Endpoint status embedded in the JSON body (not the HTTP status)."""

    OK = "OK"
    ZERO_RESULTS = "ZERO_RESULTS"
    OVER_QUERY_LIMIT = "OVER_QUERY_LIMIT"
    REQUEST_DENIED = "REQUEST_DENIED"
    INVALID_REQUEST = "INVALID_REQUEST"
    NOT_FOUND = "NOT_FOUND"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"

    @classmethod
    def parse(cls, value: Optional[str]) -> "PlacesResponseStatusCode":
        if value:
            wanted = normalize_enum_name(value)
            for member in cls:
                if normalize_enum_name(member.value) == wanted:
                    return member
        logger.warning("Unrecognized Places response status %r; treating it as UNKNOWN_ERROR", value)
        return cls.UNKNOWN_ERROR

    @property
    def is_success(self) -> bool:
        return self in (PlacesResponseStatusCode.OK, PlacesResponseStatusCode.ZERO_RESULTS)


class PlacesBusinessStatus(str, enum.Enum):
    UNSPECIFIED = "UNSPECIFIED"
    OPERATIONAL = "OPERATIONAL"
    CLOSED_TEMPORARILY = "CLOSED_TEMPORARILY"
    CLOSED_PERMANENTLY = "CLOSED_PERMANENTLY"

    @classmethod
    def parse(cls, value: Optional[str]) -> "PlacesBusinessStatus":
        if value is None or not value.strip():
            return cls.UNSPECIFIED
        wanted = normalize_enum_name(value)
        for member in cls:
            if normalize_enum_name(member.value) == wanted:
                return member
        logger.debug("Unrecognized business status %r", value)
        return cls.UNSPECIFIED


class PlacesPriceLevel(enum.IntEnum):
    """Price level of a place.

    ``UNSPECIFIED`` is zero and never sent. The remaining members are
    one-indexed; the request parameter is zero-indexed, so
    ``INEXPENSIVE`` goes on the wire as ``0`` (see :attr:`wire_value`).
    """

    UNSPECIFIED = 0
    INEXPENSIVE = 1
    MODERATE = 2
    EXPENSIVE = 3
    VERY_EXPENSIVE = 4

    @property
    def wire_value(self) -> Optional[int]:
        if self is PlacesPriceLevel.UNSPECIFIED:
            return None
        return int(self) - 1

    @classmethod
    def parse(cls, value: Any) -> "PlacesPriceLevel":
        """Parse a ``price_level`` value using the same zero-indexed scale as requests."""
        if value is None or isinstance(value, bool):
            return cls.UNSPECIFIED
        if isinstance(value, str):
            text = value.strip()
            try:
                value = int(text)
            except ValueError:
                wanted = normalize_enum_name(text)
                for member in cls:
                    if normalize_enum_name(member.name) == wanted:
                        return member
                return cls.UNSPECIFIED
        try:
            level = int(value)
        except (TypeError, ValueError, OverflowError):
            level = -1
        if not 0 <= level < len(cls) - 1:
            logger.debug("Unrecognized price level %r", value)
            return cls.UNSPECIFIED
        return cls(level + 1)


class PlacesRankBy(str, enum.Enum):
    """Order of nearby search results."""

    PROMINENCE = "prominence"
    DISTANCE = "distance"
