"""Options for the nearby search endpoint."""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from gplaces.models.enums import PlacesPriceLevel, PlacesRankBy
from gplaces.models.geometry import Point, PointLike
from gplaces.options.request import (
    MAX_RADIUS,
    NEARBY_SEARCH_URL,
    PlacesRequest,
    QueryBuilder,
    check_range,
    require_point,
)

logger = logging.getLogger(__name__)


@dataclass
class PlacesNearbySearchOptions:
    """Parameters of a nearby search.

    Either a location or a ``page_token`` must be set. When a page token is
    set every other parameter is left out of the request, since Google does
    not define what combining them means.
    """

    latitude: float = 0.0
    longitude: float = 0.0
    radius: int = 0
    keyword: Optional[str] = None
    language: Optional[str] = None
    min_price: PlacesPriceLevel = PlacesPriceLevel.UNSPECIFIED
    max_price: PlacesPriceLevel = PlacesPriceLevel.UNSPECIFIED
    name: Optional[str] = None
    rank_by: PlacesRankBy = PlacesRankBy.PROMINENCE
    type: Optional[str] = None
    page_token: Optional[str] = None
    fields: List[str] = field(default_factory=list)

    @classmethod
    def from_point(cls, location: PointLike, radius: int) -> "PlacesNearbySearchOptions":
        if location is None:
            raise ValueError("location must be provided")
        return cls(latitude=location.latitude, longitude=location.longitude, radius=radius)

    @classmethod
    def from_page_token(cls, page_token: str) -> "PlacesNearbySearchOptions":
        return cls(page_token=page_token)

    @property
    def location(self) -> Point:
        return Point(self.latitude, self.longitude)

    @property
    def has_page_token(self) -> bool:
        return bool(self.page_token and self.page_token.strip())

    def get_request(self) -> PlacesRequest:
        if self.has_page_token:
            logger.debug("Built nearby search request for next page")
            return QueryBuilder().add("pagetoken", self.page_token.strip()).build(NEARBY_SEARCH_URL)

        require_point("latitude", self.location)
        check_range("radius", self.radius, 0, MAX_RADIUS)

        query = QueryBuilder().add_location("location", self.latitude, self.longitude)
        query.add_positive("radius", self.radius)
        query.add_string("keyword", self.keyword)
        query.add_string("language", self.language)
        query.add_price("minprice", self.min_price)
        query.add_price("maxprice", self.max_price)
        query.add_string("name", self.name)
        query.add("rankby", PlacesRankBy(self.rank_by or PlacesRankBy.PROMINENCE).value)
        query.add_string("type", self.type)
        query.add_list("fields", self.fields)

        request = query.build(NEARBY_SEARCH_URL)
        logger.debug("Built nearby search request: %s", request.query_string)
        return request
