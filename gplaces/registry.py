"""Memoization of one helper instance per owning object."""

import logging
import threading
from typing import Any, Callable, Dict, Generic, Tuple, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class OwnerRegistry(Generic[T]):
    """Maps an owner (by identity) to the instance created for it.

    Entries are created on first access and live until :meth:`forget` or
    :meth:`clear` is called. The registry holds a strong reference to the
    owner so its ``id`` cannot be reused while the entry exists.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._entries: Dict[int, Tuple[Any, T]] = {}
        self._lock = threading.Lock()

    def get(self, owner: Any, factory: Callable[[], T]) -> T:
        with self._lock:
            entry = self._entries.get(id(owner))
            if entry is None:
                entry = (owner, factory())
                self._entries[id(owner)] = entry
                logger.debug("Created %s for %s", self.name, type(owner).__name__)
            return entry[1]

    def forget(self, owner: Any) -> bool:
        with self._lock:
            return self._entries.pop(id(owner), None) is not None

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __contains__(self, owner: Any) -> bool:
        with self._lock:
            return id(owner) in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
