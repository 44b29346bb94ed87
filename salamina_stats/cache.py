from __future__ import annotations

import threading
import time
from typing import Callable, Optional

from .domain.contracts import TeamData
from .settings import FOTMOB_CACHE_TTL_SECONDS


class TeamDataCache:
    """
    Single-entry in-process cache for the FotMob team payload.

    Holds at most one (document, fetched_at) pair. An entry is fresh while
    ``now - fetched_at < ttl_seconds``. Stale entries are kept (not evicted)
    so ``age`` stays observable; they are simply never served.
    """

    def __init__(
        self,
        ttl_seconds: float = FOTMOB_CACHE_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.ttl_seconds = float(ttl_seconds)
        self.clock = clock
        self._document: Optional[TeamData] = None
        self._fetched_at: Optional[float] = None
        self._lock = threading.Lock()

    def now(self) -> float:
        return self.clock()

    def get(self, now: Optional[float] = None) -> Optional[TeamData]:
        """Return the cached document if still fresh at ``now``, else None."""
        if now is None:
            now = self.clock()
        with self._lock:
            if self._document is None or self._fetched_at is None:
                return None
            if now - self._fetched_at < self.ttl_seconds:
                return self._document
            return None

    def set(self, document: TeamData, fetched_at: Optional[float] = None) -> None:
        if fetched_at is None:
            fetched_at = self.clock()
        with self._lock:
            self._document = document
            self._fetched_at = fetched_at

    def clear(self) -> None:
        with self._lock:
            self._document = None
            self._fetched_at = None

    def age(self, now: Optional[float] = None) -> Optional[float]:
        """Seconds since the stored entry was fetched, or None when empty."""
        if now is None:
            now = self.clock()
        with self._lock:
            if self._fetched_at is None:
                return None
            return now - self._fetched_at

    @property
    def has_entry(self) -> bool:
        with self._lock:
            return self._document is not None
