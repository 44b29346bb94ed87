"""
FotMob team data client.

Fetches the team payload for the tracked club and keeps the last good
response in a short-lived in-process cache. Failures are logged and surface
to callers only as ``None``; they never touch the cache.
"""

from __future__ import annotations

import threading
import time
from typing import Any, Dict, Optional

import requests

from .cache import TeamDataCache
from .config import FETCH_FAILURE_LOG_WINDOW_SECONDS, setup_logger
from .constants import FOTMOB_REQUEST_HEADERS, FOTMOB_TEAM_URL
from .domain.contracts import TeamData
from .errors import APIError
from .logging_utils import RateLimitedLogger
from .settings import FOTMOB_TIMEOUT_MS

logger = setup_logger(__name__)

SOURCE = "FotMob"


class _Flight:
    """One outbound request shared by every caller that missed the cache."""

    __slots__ = ("done", "result")

    def __init__(self) -> None:
        self.done = threading.Event()
        self.result: Optional[TeamData] = None


class TeamDataFetcher:
    """Cached, single-flight access to the FotMob team endpoint."""

    def __init__(
        self,
        cache: Optional[TeamDataCache] = None,
        session: Optional[Any] = None,  # anything with .request(method, url, ...)
        url: str = FOTMOB_TEAM_URL,
        timeout_ms: Optional[int] = None,
    ) -> None:
        self.cache = cache if cache is not None else TeamDataCache()
        self.session = session if session is not None else requests.Session()
        self.url = url
        if not timeout_ms or timeout_ms <= 0:
            timeout_ms = FOTMOB_TIMEOUT_MS
        self.timeout_s = timeout_ms / 1000.0
        self.last_error: Optional[APIError] = None
        self._flights: Dict[str, _Flight] = {}
        self._flights_lock = threading.Lock()
        self._failure_log = RateLimitedLogger(logger, window_seconds=FETCH_FAILURE_LOG_WINDOW_SECONDS)

    def get_team_data(self) -> Optional[TeamData]:
        """Return the team payload, from cache when fresh, else from FotMob."""
        t0 = time.perf_counter()
        now = self.cache.now()

        cached = self.cache.get(now)
        if cached is not None:
            self._log_result(t0, "cache")
            return cached

        with self._flights_lock:
            flight = self._flights.get(self.url)
            leader = flight is None
            if leader:
                # A flight may have landed between the first check and the lock
                cached = self.cache.get(now)
                if cached is not None:
                    self._log_result(t0, "cache")
                    return cached
                flight = _Flight()
                self._flights[self.url] = flight

        if not leader:
            flight.done.wait()
            self._log_result(t0, "shared" if flight.result is not None else "shared_error")
            return flight.result

        try:
            flight.result = self._fetch_and_store(now, t0)
        finally:
            with self._flights_lock:
                self._flights.pop(self.url, None)
            flight.done.set()
        return flight.result

    def clear(self) -> None:
        self.cache.clear()
        self.last_error = None

    def _fetch_and_store(self, now: float, t0: float) -> Optional[TeamData]:
        try:
            document = self._request_document()
        except APIError as exc:
            self.last_error = exc
            self._failure_log.warning(
                (SOURCE, exc.code),
                "provider=fotmob op=team_data took_ms=%d result=error code=%s error=%s",
                int((time.perf_counter() - t0) * 1000),
                exc.code,
                exc,
            )
            return None

        self.cache.set(document, fetched_at=now)
        self.last_error = None
        self._log_result(t0, "ok")
        return document

    def _request_document(self) -> TeamData:
        try:
            response = self.session.request(
                "GET",
                self.url,
                headers=dict(FOTMOB_REQUEST_HEADERS),
                timeout=self.timeout_s,
            )
        except requests.Timeout as exc:
            raise APIError(SOURCE, "TIMEOUT", "FotMob did not respond in time.", str(exc)) from exc
        except requests.RequestException as exc:
            raise APIError(SOURCE, "NETWORK_ERROR", "A network error occurred.", str(exc)) from exc

        status = getattr(response, "status_code", None)
        if not isinstance(status, int) or not 200 <= status < 300:
            raise APIError(
                SOURCE,
                "HTTP_ERROR",
                f"FotMob returned HTTP {status}.",
                getattr(response, "reason", None),
            )

        try:
            payload = response.json()
        except (ValueError, RecursionError) as exc:
            # RecursionError: pathologically nested body
            raise APIError(SOURCE, "PARSE_ERROR", "Failed to parse API response.", str(exc)) from exc

        if not isinstance(payload, dict):
            raise APIError(
                SOURCE,
                "PARSE_ERROR",
                "Unexpected payload shape.",
                type(payload).__name__,
            )
        return payload  # type: ignore[return-value]

    def _log_result(self, t0: float, result: str) -> None:
        logger.info(
            "provider=fotmob op=team_data took_ms=%d result=%s",
            int((time.perf_counter() - t0) * 1000),
            result,
        )


_fetcher_singleton: Optional[TeamDataFetcher] = None
_fetcher_lock = threading.Lock()


def get_fetcher() -> TeamDataFetcher:
    global _fetcher_singleton
    with _fetcher_lock:
        if _fetcher_singleton is None:
            _fetcher_singleton = TeamDataFetcher()
        return _fetcher_singleton


def set_fetcher(fetcher: Optional[TeamDataFetcher]) -> None:
    """Swap the process-wide fetcher (None resets to a fresh default on next use)."""
    global _fetcher_singleton
    with _fetcher_lock:
        _fetcher_singleton = fetcher


def get_team_data() -> Optional[TeamData]:
    """Process-wide accessor used by the HTTP layer."""
    return get_fetcher().get_team_data()


__all__ = ["TeamDataFetcher", "get_fetcher", "set_fetcher", "get_team_data"]
