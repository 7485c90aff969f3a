"""Transport for requests to the Google web APIs."""

import logging
from typing import Any, Dict, Optional

import requests

from gplaces.core.config import Settings, get_settings
from gplaces.options.request import PlacesRequest

logger = logging.getLogger(__name__)
_SESSION = requests.Session()
DEFAULT_TIMEOUT = 10.0


class GoogleHttpClient:
    """Performs authenticated GET requests against the Google web APIs.

    Credentials are either an API key (sent as the ``key`` query parameter)
    or an OAuth access token (sent as a bearer token). Anything with a
    ``get_response(request)`` method can stand in for this class.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        access_token: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT,
        default_language: Optional[str] = None,
    ) -> None:
        self.api_key = api_key
        self.access_token = access_token
        self.timeout = timeout
        self.default_language = default_language
        self._session = session

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None, **kwargs: Any) -> "GoogleHttpClient":
        settings = settings or get_settings()
        return cls(
            settings.google_api_key or None,
            access_token=settings.google_access_token or None,
            timeout=settings.request_timeout,
            default_language=settings.default_language,
            **kwargs,
        )

    @property
    def session(self) -> requests.Session:
        return self._session if self._session is not None else _SESSION

    def get_response(self, request: PlacesRequest) -> requests.Response:
        params = list(request.params)
        if self.api_key:
            params.append(("key", self.api_key))
        headers: Dict[str, str] = {}
        if self.access_token:
            headers["Authorization"] = f"Bearer {self.access_token}"

        logger.info("GET %s", request.url)
        response = self.session.get(request.url, params=params, headers=headers, timeout=self.timeout)
        logger.debug("GET %s -> %s", request.url, response.status_code)
        return response
