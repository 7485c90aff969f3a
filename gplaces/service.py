"""Service layer returning parsed Places responses."""

from typing import Any, Union

from gplaces.http.client import PlacesHttpClient
from gplaces.models.geometry import PointLike
from gplaces.options.details import PlacesGetDetailsOptions
from gplaces.options.nearby_search import PlacesNearbySearchOptions
from gplaces.options.text_search import PlacesTextSearchOptions
from gplaces.registry import OwnerRegistry
from gplaces.responses import PlacesDetailsResponse, PlacesNearbySearchResponse, PlacesTextSearchResponse

_CLIENTS: "OwnerRegistry[PlacesHttpClient]" = OwnerRegistry("PlacesHttpClient")
_SERVICES: "OwnerRegistry[PlacesHttpService]" = OwnerRegistry("PlacesHttpService")


class GoogleHttpService:
    """Wraps a Google HTTP client; entry point for the typed service APIs."""

    def __init__(self, client: Any) -> None:
        if client is None:
            raise ValueError("client must be provided")
        self.client = client

    @property
    def places(self) -> "PlacesHttpService":
        return places(self)


class PlacesHttpService:
    def __init__(self, service: GoogleHttpService) -> None:
        if service is None:
            raise ValueError("service must be provided")
        self.service = service

    @property
    def client(self) -> PlacesHttpClient:
        return places(self.service.client)

    def get_details(self, options: Union[str, PlacesGetDetailsOptions]) -> PlacesDetailsResponse:
        return PlacesDetailsResponse(self.client.get_details(options))

    def nearby_search(self, options: PlacesNearbySearchOptions) -> PlacesNearbySearchResponse:
        return PlacesNearbySearchResponse(self.client.nearby_search(options))

    def nearby_search_by_coordinates(self, latitude: float, longitude: float, radius: int) -> PlacesNearbySearchResponse:
        return PlacesNearbySearchResponse(self.client.nearby_search_by_coordinates(latitude, longitude, radius))

    def nearby_search_by_location(self, location: PointLike, radius: int) -> PlacesNearbySearchResponse:
        return PlacesNearbySearchResponse(self.client.nearby_search_by_location(location, radius))

    def nearby_search_by_page_token(self, page_token: str) -> PlacesNearbySearchResponse:
        return PlacesNearbySearchResponse(self.client.nearby_search_by_page_token(page_token))

    def text_search(self, options: PlacesTextSearchOptions) -> PlacesTextSearchResponse:
        return PlacesTextSearchResponse(self.client.text_search(options))

    def text_search_by_coordinates(self, query: str, latitude: float, longitude: float, radius: int) -> PlacesTextSearchResponse:
        return PlacesTextSearchResponse(self.client.text_search_by_coordinates(query, latitude, longitude, radius))

    def text_search_by_location(self, query: str, location: PointLike, radius: int) -> PlacesTextSearchResponse:
        return PlacesTextSearchResponse(self.client.text_search_by_location(query, location, radius))


def places(owner: Any) -> Union[PlacesHttpClient, PlacesHttpService]:
    """Return the Places client or service belonging to ``owner``.

    A :class:`GoogleHttpService` gets a :class:`PlacesHttpService`; any
    other client (something with ``get_response``) gets a
    :class:`PlacesHttpClient`. Repeated calls return the same instance.
    """
    if owner is None:
        raise ValueError("owner must be provided")
    if isinstance(owner, GoogleHttpService):
        return _SERVICES.get(owner, lambda: PlacesHttpService(owner))
    if not callable(getattr(owner, "get_response", None)):
        raise TypeError(f"{type(owner).__name__} cannot perform Places requests")
    return _CLIENTS.get(owner, lambda: PlacesHttpClient(owner))


def forget(owner: Any) -> None:
    """Drop the memoized Places client or service of ``owner``."""
    _CLIENTS.forget(owner)
    _SERVICES.forget(owner)


def clear() -> None:
    _CLIENTS.clear()
    _SERVICES.clear()
