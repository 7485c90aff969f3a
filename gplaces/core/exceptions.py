"""Exceptions raised by the Places client."""

from typing import Any, Optional


class PlacesError(RuntimeError):
    """Base class for errors raised by this library."""


class PlacesValidationError(PlacesError, ValueError):
    """Raised locally when request options cannot be turned into a request."""

    def __init__(self, property_name: str, message: str) -> None:
        super().__init__(message)
        self.property_name = property_name


class PropertyNotSetError(PlacesValidationError):
    """A required option was left blank or at its default value."""

    def __init__(self, property_name: str) -> None:
        super().__init__(property_name, f"Required property '{property_name}' is not set.")


class PropertyOutOfRangeError(PlacesValidationError):
    def __init__(self, property_name: str, value: Any, minimum: Any, maximum: Any) -> None:
        super().__init__(
            property_name,
            f"Property '{property_name}' must be between {minimum} and {maximum} (got {value}).",
        )
        self.value = value
        self.minimum = minimum
        self.maximum = maximum


class PlacesHttpError(PlacesError):
    """Raised when the Places API answers with a non-OK HTTP status code.

    ``code`` and the message come from the ``error`` object of the response
    body. The ``errors`` list Google sends alongside it is not parsed yet.
    """

    def __init__(self, response: Any, code: int, message: str) -> None:
        super().__init__(message)
        self.response = response
        self.code = code
        self.message = message

    @property
    def status_code(self) -> Optional[int]:
        return getattr(self.response, "status_code", None)


class PlacesStatusError(PlacesError):
    """Raised on request when the endpoint status of a body is a failure."""

    def __init__(self, status: Any, error_message: Optional[str] = None) -> None:
        super().__init__(error_message or str(status))
        self.status = status
        self.error_message = error_message
