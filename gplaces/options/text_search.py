"""Options for the text search endpoint."""

import logging
from dataclasses import dataclass
from typing import Optional

from gplaces.core.exceptions import PropertyNotSetError
from gplaces.models.enums import PlacesPriceLevel
from gplaces.models.geometry import Point, PointLike, is_unset_location
from gplaces.options.request import (
    MAX_RADIUS,
    TEXT_SEARCH_URL,
    PlacesRequest,
    QueryBuilder,
    check_range,
    require_point,
)

logger = logging.getLogger(__name__)


@dataclass
class PlacesTextSearchOptions:
    query: Optional[str] = None
    location: Optional[PointLike] = None
    radius: Optional[int] = None
    language: Optional[str] = None
    min_price: Optional[PlacesPriceLevel] = None
    max_price: Optional[PlacesPriceLevel] = None
    type: Optional[str] = None
    page_token: Optional[str] = None

    @classmethod
    def at(cls, query: str, latitude: float, longitude: float, radius: int) -> "PlacesTextSearchOptions":
        return cls(query=query, location=Point(latitude, longitude), radius=radius)

    @property
    def has_page_token(self) -> bool:
        return bool(self.page_token and self.page_token.strip())

    def validate(self) -> None:
        # A follow-up page only needs its token.
        if self.has_page_token:
            return
        require_point("location", self.location)
        if not (self.query and self.query.strip()) and not (self.type and self.type.strip()):
            raise PropertyNotSetError("query")
        check_range("radius", self.radius, 0, MAX_RADIUS)

    def get_request(self) -> PlacesRequest:
        self.validate()

        query = QueryBuilder().add_string("query", self.query)
        if not is_unset_location(self.location):
            query.add_location("location", self.location.latitude, self.location.longitude)
        query.add_positive("radius", self.radius)
        query.add_string("language", self.language)
        query.add_price("minprice", self.min_price)
        query.add_price("maxprice", self.max_price)
        query.add_string("type", self.type)
        query.add_string("pagetoken", self.page_token)

        request = query.build(TEXT_SEARCH_URL)
        logger.debug("Built text search request: %s", request.query_string)
        return request
