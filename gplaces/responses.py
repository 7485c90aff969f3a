"""Response wrappers pairing the raw HTTP response with its parsed body."""

import logging
from typing import Any, Callable, Dict, Generic, Optional, TypeVar

from gplaces.core.exceptions import PlacesError, PlacesHttpError, PlacesStatusError
from gplaces.models.bodies import (
    PlacesDetailsResponseBody,
    PlacesNearbySearchResponseBody,
    PlacesTextSearchResponseBody,
)
from gplaces.models.enums import PlacesResponseStatusCode

logger = logging.getLogger(__name__)

T = TypeVar("T")

HTTP_OK = 200


def _parse_json_object(response: Any) -> Dict[str, Any]:
    payload = response.json()
    if not isinstance(payload, dict):
        raise ValueError(f"Expected a JSON object, got {type(payload).__name__}")
    return payload


class PlacesResponse:
    """Base wrapper: raises :class:`PlacesHttpError` for any non-OK HTTP status."""

    def __init__(self, response: Any) -> None:
        self.response = response
        if response.status_code == HTTP_OK:
            return

        try:
            error = _parse_json_object(response).get("error")
        except ValueError:
            error = None
        if not isinstance(error, dict):
            error = {}

        code = error.get("code")
        message = error.get("message") or getattr(response, "reason", None) or f"HTTP {response.status_code}"
        logger.error("Places request failed: http_status=%s, code=%s, message=%s", response.status_code, code, message)
        raise PlacesHttpError(response, int(code) if isinstance(code, (int, float)) else 0, str(message))

    @property
    def status_code(self) -> int:
        return self.response.status_code

    @property
    def headers(self) -> Any:
        return self.response.headers

    @property
    def text(self) -> str:
        return self.response.text


class PlacesBodyResponse(PlacesResponse, Generic[T]):
    body: T

    def __init__(self, response: Any, parse: Callable[[Dict[str, Any]], T]) -> None:
        super().__init__(response)
        try:
            payload = _parse_json_object(response)
        except ValueError as exc:
            logger.error("Places response body is not a JSON object: %s", exc)
            raise PlacesError(f"Malformed Places response body: {exc}") from exc
        self.body = parse(payload)

    def raise_for_status(self) -> "PlacesBodyResponse[T]":
        """Raise :class:`PlacesStatusError` unless the endpoint status is OK or ZERO_RESULTS."""
        status: PlacesResponseStatusCode = self.body.status
        if not status.is_success:
            error_message: Optional[str] = getattr(self.body, "error_message", None)
            logger.error("Places endpoint failed: status=%s, error_message=%s", status.value, error_message)
            raise PlacesStatusError(status, error_message)
        return self


class PlacesDetailsResponse(PlacesBodyResponse[PlacesDetailsResponseBody]):
    def __init__(self, response: Any) -> None:
        super().__init__(response, PlacesDetailsResponseBody.parse)


class PlacesNearbySearchResponse(PlacesBodyResponse[PlacesNearbySearchResponseBody]):
    def __init__(self, response: Any) -> None:
        super().__init__(response, PlacesNearbySearchResponseBody.parse)


class PlacesTextSearchResponse(PlacesBodyResponse[PlacesTextSearchResponseBody]):
    def __init__(self, response: Any) -> None:
        super().__init__(response, PlacesTextSearchResponseBody.parse)
