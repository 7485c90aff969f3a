"""Tolerant accessors for the JSON objects returned by the Places API.

Every model reads its fields through these helpers so that a missing key,
a ``null`` or a value of the wrong shape degrades to an empty default
instead of raising.
"""

import logging
import math
from datetime import timedelta
from typing import Any, Callable, Dict, List, Mapping, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

JsonObject = Dict[str, Any]


def get_string(obj: Mapping[str, Any], key: str) -> Optional[str]:
    value = obj.get(key)
    if value is None:
        return None
    return str(value)


def get_bool(obj: Mapping[str, Any], key: str) -> bool:
    value = obj.get(key)
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes"}
    return bool(value)


def get_optional_bool(obj: Mapping[str, Any], key: str) -> Optional[bool]:
    if obj.get(key) is None:
        return None
    return get_bool(obj, key)


def get_float(obj: Mapping[str, Any], key: str, default: float = 0.0) -> float:
    value = _safe_float(obj.get(key))
    return default if value is None else value


def get_int(obj: Mapping[str, Any], key: str, default: int = 0) -> int:
    value = _safe_int(obj.get(key))
    return default if value is None else value


def get_optional_int(obj: Mapping[str, Any], key: str) -> Optional[int]:
    return _safe_int(obj.get(key))


def get_minutes(obj: Mapping[str, Any], key: str) -> timedelta:
    """Read a signed number of minutes as a ``timedelta`` (zero when absent or out of range)."""
    minutes = get_float(obj, key)
    try:
        return timedelta(minutes=minutes)
    except OverflowError:
        logger.debug("Ignoring out of range minutes for %r: %s", key, minutes)
        return timedelta(0)


def get_object(obj: Mapping[str, Any], key: str, parse: Callable[[JsonObject], T]) -> Optional[T]:
    value = obj.get(key)
    if not isinstance(value, dict):
        if value is not None:
            logger.debug("Expected an object for %r, got %s", key, type(value).__name__)
        return None
    return parse(value)


def get_array(obj: Mapping[str, Any], key: str, parse: Callable[[JsonObject], T]) -> List[T]:
    """Parse every object item of the array at ``key``, keeping API order."""
    value = obj.get(key)
    if not isinstance(value, list):
        return []
    return [parse(item) for item in value if isinstance(item, dict)]


def get_string_array(obj: Mapping[str, Any], key: str) -> List[str]:
    value = obj.get(key)
    if not isinstance(value, list):
        return []
    return [str(item) for item in value if item is not None]


def normalize_enum_name(value: str) -> str:
    """``"closed_TEMPORARILY"`` and ``"ClosedTemporarily"`` -> ``"CLOSEDTEMPORARILY"``."""
    return "".join(ch for ch in value if ch.isalnum()).upper()


def _safe_float(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        result = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    return result if math.isfinite(result) else None


def _safe_int(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None
