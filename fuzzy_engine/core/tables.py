"""
Process-wide lookup tables built once on first use.

Each table is produced by a builder function, frozen into a read-only
mapping and shared by every caller afterwards. The lock is only taken
while the table does not exist yet.
"""

from __future__ import annotations

import logging
from threading import Lock
from types import MappingProxyType
from typing import Callable, Generic, Mapping, Optional, TypeVar

logger = logging.getLogger(__name__)

K = TypeVar("K")
V = TypeVar("V")


class LazyTable(Generic[K, V]):
    """Read-only mapping built by ``builder`` the first time it is requested."""

    def __init__(self, name: str, builder: Callable[[], dict[K, V]]) -> None:
        self.name = name
        self._builder = builder
        self._lock = Lock()
        self._table: Optional[Mapping[K, V]] = None

    @property
    def initialized(self) -> bool:
        return self._table is not None

    def get(self) -> Mapping[K, V]:
        table = self._table
        if table is not None:
            return table
        with self._lock:
            if self._table is None:
                self._table = MappingProxyType(dict(self._builder()))
                logger.debug("Built lookup table %s (%d entries)", self.name, len(self._table))
            return self._table

    def lookup(self, key: K, default: Optional[V] = None) -> Optional[V]:
        return self.get().get(key, default)
