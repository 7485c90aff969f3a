"""Typed bodies of the details, nearby search and text search responses."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from gplaces.core.json_fields import JsonObject, get_array, get_object, get_string, get_string_array
from gplaces.models.details import PlacesDetails
from gplaces.models.enums import PlacesResponseStatusCode


@dataclass(frozen=True, slots=True)
class PlacesDetailsResponseBody:
    status: PlacesResponseStatusCode
    result: Optional[PlacesDetails] = None
    error_message: Optional[str] = None
    html_attributions: List[str] = field(default_factory=list)
    raw: Optional[Dict[str, Any]] = field(default=None, repr=False, compare=False)

    @classmethod
    def parse(cls, obj: JsonObject) -> "PlacesDetailsResponseBody":
        return cls(
            status=PlacesResponseStatusCode.parse(get_string(obj, "status")),
            result=get_object(obj, "result", PlacesDetails.parse),
            error_message=get_string(obj, "error_message"),
            html_attributions=get_string_array(obj, "html_attributions"),
            raw=obj,
        )


@dataclass(frozen=True, slots=True)
class PlacesSearchResponseBody:
    """Shared shape of the nearby search and text search bodies.

    ``results`` is not guaranteed to be empty for a non-OK ``status``; check
    ``status`` explicitly.
    """

    status: PlacesResponseStatusCode
    results: List[PlacesDetails] = field(default_factory=list)
    next_page_token: Optional[str] = None
    error_message: Optional[str] = None
    html_attributions: List[str] = field(default_factory=list)
    raw: Optional[Dict[str, Any]] = field(default=None, repr=False, compare=False)

    @property
    def has_next_page_token(self) -> bool:
        return bool(self.next_page_token and self.next_page_token.strip())

    @classmethod
    def parse(cls, obj: JsonObject):
        return cls(
            status=PlacesResponseStatusCode.parse(get_string(obj, "status")),
            results=get_array(obj, "results", PlacesDetails.parse),
            next_page_token=get_string(obj, "next_page_token"),
            error_message=get_string(obj, "error_message"),
            html_attributions=get_string_array(obj, "html_attributions"),
            raw=obj,
        )


@dataclass(frozen=True, slots=True)
class PlacesNearbySearchResponseBody(PlacesSearchResponseBody):
    pass


@dataclass(frozen=True, slots=True)
class PlacesTextSearchResponseBody(PlacesSearchResponseBody):
    pass
