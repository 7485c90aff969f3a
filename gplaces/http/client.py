"""Raw-response client for the Places endpoints."""

import dataclasses
import logging
from typing import Any, Optional, TypeVar, Union

from gplaces.models.geometry import PointLike
from gplaces.options.details import PlacesGetDetailsOptions
from gplaces.options.nearby_search import PlacesNearbySearchOptions
from gplaces.options.text_search import PlacesTextSearchOptions

logger = logging.getLogger(__name__)

O = TypeVar("O", PlacesGetDetailsOptions, PlacesNearbySearchOptions, PlacesTextSearchOptions)


def _require_text(name: str, value: Optional[str]) -> str:
    if value is None or not str(value).strip():
        raise ValueError(f"{name} must be provided")
    return value


def _require_options(options: Any, expected: type) -> None:
    if options is None:
        raise ValueError("options must be provided")
    if not isinstance(options, expected):
        raise TypeError(f"Expected {expected.__name__}, got {type(options).__name__}")


class PlacesHttpClient:
    """Builds requests from options and hands them to the owning client.

    Every method returns the transport response untouched; use
    :class:`gplaces.service.PlacesHttpService` for parsed responses.
    """

    def __init__(self, client: Any) -> None:
        if client is None:
            raise ValueError("client must be provided")
        self.client = client

    def get_details(self, options: Union[str, PlacesGetDetailsOptions]) -> Any:
        """Accepts a place ID or a :class:`PlacesGetDetailsOptions`."""
        if not isinstance(options, PlacesGetDetailsOptions):
            options = PlacesGetDetailsOptions(_require_text("place_id", options))
        return self._send(options)

    def nearby_search(self, options: PlacesNearbySearchOptions) -> Any:
        _require_options(options, PlacesNearbySearchOptions)
        return self._send(options)

    def nearby_search_by_coordinates(self, latitude: float, longitude: float, radius: int) -> Any:
        return self.nearby_search(PlacesNearbySearchOptions(latitude, longitude, radius))

    def nearby_search_by_location(self, location: PointLike, radius: int) -> Any:
        if location is None:
            raise ValueError("location must be provided")
        return self.nearby_search(PlacesNearbySearchOptions.from_point(location, radius))

    def nearby_search_by_page_token(self, page_token: str) -> Any:
        return self.nearby_search(PlacesNearbySearchOptions.from_page_token(_require_text("page_token", page_token)))

    def text_search(self, options: PlacesTextSearchOptions) -> Any:
        _require_options(options, PlacesTextSearchOptions)
        return self._send(options)

    def text_search_by_coordinates(self, query: str, latitude: float, longitude: float, radius: int) -> Any:
        return self.text_search(PlacesTextSearchOptions.at(query, latitude, longitude, radius))

    def text_search_by_location(self, query: str, location: PointLike, radius: int) -> Any:
        if location is None:
            raise ValueError("location must be provided")
        return self.text_search(PlacesTextSearchOptions(query=query, location=location, radius=radius))

    def _send(self, options: O) -> Any:
        default_language = getattr(self.client, "default_language", None)
        if default_language and not (options.language and options.language.strip()):
            options = dataclasses.replace(options, language=default_language)
        request = options.get_request()
        logger.debug("Sending %s request", type(options).__name__)
        return self.client.get_response(request)
