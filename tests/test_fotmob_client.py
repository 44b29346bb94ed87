import logging
import threading
import time

import pytest
import requests

from salamina_stats import fotmob_client, settings
from salamina_stats.cache import TeamDataCache
from salamina_stats.constants import CACHE_TTL_SECONDS, FOTMOB_TEAM_URL
from salamina_stats.fotmob_client import TeamDataFetcher


class FakeClock:
    def __init__(self, start=10_000.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


class FakeJSONResponse:
    def __init__(self, status_code=200, payload=None, reason="OK"):
        self.status_code = status_code
        self.reason = reason
        self._payload = payload

    def json(self):
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


class FakeSession:
    def __init__(self, responses):
        self._responses = list(responses)
        self.calls = []

    def request(self, method, url, timeout=None, **kwargs):
        self.calls.append({"method": method, "url": url, "timeout": timeout, **kwargs})
        if not self._responses:
            raise AssertionError("No more responses configured")
        item = self._responses.pop(0)
        if isinstance(item, Exception):
            raise item
        return item


def _raw_response(status_code, body):
    response = requests.Response()
    response.status_code = status_code
    response.reason = "OK"
    response._content = body
    response.encoding = "utf-8"
    return response


def _doc(marker="a"):
    return {"overview": {"teamColors": {"darkMode": marker}}}


def _fetcher(responses, clock=None, ttl=CACHE_TTL_SECONDS):
    clock = clock or FakeClock()
    session = FakeSession(responses)
    cache = TeamDataCache(ttl_seconds=ttl, clock=clock)
    return TeamDataFetcher(cache=cache, session=session, timeout_ms=4000), session, clock


def test_success_populates_cache_and_sends_browser_headers():
    doc = _doc()
    fetcher, session, _ = _fetcher([FakeJSONResponse(200, doc)])

    assert fetcher.get_team_data() == doc
    assert len(session.calls) == 1

    call = session.calls[0]
    assert call["method"] == "GET"
    assert call["url"] == FOTMOB_TEAM_URL
    assert "id=8590" in call["url"] and "ccode3=CYP" in call["url"]
    assert call["headers"]["Accept"] == "application/json"
    assert call["headers"]["User-Agent"].startswith("Mozilla/5.0")
    assert call["timeout"] == 4.0
    assert fetcher.cache.has_entry


def test_cache_hit_within_ttl_skips_network():
    doc = _doc()
    fetcher, session, clock = _fetcher([FakeJSONResponse(200, doc)])

    first = fetcher.get_team_data()
    clock.advance(CACHE_TTL_SECONDS - 0.001)
    second = fetcher.get_team_data()

    assert second is first
    assert len(session.calls) == 1


def test_cache_expiry_triggers_refetch():
    fresh = _doc("b")
    fetcher, session, clock = _fetcher(
        [FakeJSONResponse(200, _doc("a")), FakeJSONResponse(200, fresh)]
    )

    fetcher.get_team_data()
    clock.advance(CACHE_TTL_SECONDS + 0.001)

    assert fetcher.get_team_data() == fresh
    assert len(session.calls) == 2
    assert fetcher.cache.age() == 0


def test_failure_is_not_cached():
    doc = _doc()
    fetcher, session, _ = _fetcher(
        [FakeJSONResponse(500, reason="Server Error"), FakeJSONResponse(200, doc)]
    )

    assert fetcher.get_team_data() is None
    assert fetcher.cache.has_entry is False
    assert fetcher.last_error.code == "HTTP_ERROR"

    # same instant: network is tried again, no cached absence
    assert fetcher.get_team_data() == doc
    assert len(session.calls) == 2
    assert fetcher.last_error is None


def test_failure_leaves_stale_entry_untouched():
    doc = _doc()
    fetcher, session, clock = _fetcher(
        [FakeJSONResponse(200, doc), requests.ConnectionError("unreachable")]
    )

    fetcher.get_team_data()
    clock.advance(CACHE_TTL_SECONDS + 1)

    assert fetcher.get_team_data() is None
    assert fetcher.cache.has_entry is True
    assert fetcher.cache.age() == CACHE_TTL_SECONDS + 1
    assert fetcher.last_error.code == "NETWORK_ERROR"


@pytest.mark.parametrize(
    "response, code",
    [
        (requests.Timeout("read timed out"), "TIMEOUT"),
        (requests.ConnectionError("dns"), "NETWORK_ERROR"),
        (FakeJSONResponse(404, reason="Not Found"), "HTTP_ERROR"),
        (FakeJSONResponse(200, ValueError("Expecting value")), "PARSE_ERROR"),
        (FakeJSONResponse(200, ["not", "an", "object"]), "PARSE_ERROR"),
        (_raw_response(200, b"[" * 200000), "PARSE_ERROR"),
    ],
)
def test_failures_return_none(response, code):
    fetcher, session, _ = _fetcher([response])

    assert fetcher.get_team_data() is None
    assert fetcher.last_error.code == code
    assert fetcher.last_error.source == "FotMob"
    assert fetcher.cache.get() is None


def test_repeated_failures_are_rate_limited_in_logs(caplog):
    fetcher, _, _ = _fetcher(
        [FakeJSONResponse(503), FakeJSONResponse(503), requests.Timeout("slow")]
    )

    with caplog.at_level(logging.WARNING, logger=fotmob_client.logger.name):
        fetcher.get_team_data()
        fetcher.get_team_data()
        fetcher.get_team_data()

    warnings = [r.getMessage() for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 2
    assert "code=HTTP_ERROR" in warnings[0]
    assert "code=TIMEOUT" in warnings[1]


def test_concurrent_misses_share_one_request(monkeypatch):
    doc = _doc()
    entered = threading.Event()
    release = threading.Event()
    waiting = []
    waiting_lock = threading.Lock()

    class CountingEvent(threading.Event):
        def wait(self, timeout=None):
            with waiting_lock:
                waiting.append(threading.current_thread().name)
            return super().wait(timeout)

    class CountingFlight(fotmob_client._Flight):
        def __init__(self):
            super().__init__()
            self.done = CountingEvent()

    monkeypatch.setattr(fotmob_client, "_Flight", CountingFlight)

    class BlockingSession:
        def __init__(self):
            self.calls = 0
            self._lock = threading.Lock()

        def request(self, method, url, timeout=None, **kwargs):
            with self._lock:
                self.calls += 1
            entered.set()
            release.wait(timeout=5)
            return FakeJSONResponse(200, doc)

    session = BlockingSession()
    fetcher = TeamDataFetcher(
        cache=TeamDataCache(clock=FakeClock()), session=session, timeout_ms=4000
    )
    results = []

    def worker():
        results.append(fetcher.get_team_data())

    leader = threading.Thread(target=worker)
    leader.start()
    assert entered.wait(timeout=5)

    followers = [threading.Thread(target=worker) for _ in range(4)]
    for t in followers:
        t.start()

    # hold the shared request open until every follower is parked on it
    deadline = time.monotonic() + 5
    while len(waiting) < 4 and time.monotonic() < deadline:
        time.sleep(0.01)
    assert len(waiting) == 4
    assert session.calls == 1

    release.set()
    for t in [leader, *followers]:
        t.join(timeout=5)

    assert session.calls == 1
    assert len(results) == 5
    assert all(r == doc for r in results)


def test_module_accessor_uses_swappable_singleton():
    doc = _doc()
    fetcher, session, _ = _fetcher([FakeJSONResponse(200, doc)])
    fotmob_client.set_fetcher(fetcher)
    try:
        assert fotmob_client.get_team_data() == doc
        assert fotmob_client.get_fetcher() is fetcher
    finally:
        fotmob_client.set_fetcher(None)

    assert fotmob_client.get_fetcher() is not fetcher
    fotmob_client.set_fetcher(None)


@pytest.mark.parametrize("timeout_ms", [0, -250])
def test_non_positive_timeout_falls_back_to_default(timeout_ms):
    fetcher = TeamDataFetcher(cache=TeamDataCache(), session=FakeSession([]), timeout_ms=timeout_ms)

    assert fetcher.timeout_s == settings.FOTMOB_TIMEOUT_MS / 1000.0
    assert fetcher.timeout_s > 0


@pytest.mark.parametrize(
    "raw, expected",
    [(None, 4000), ("2500", 2500), ("0", 4000), ("-10", 4000), ("soon", 4000)],
)
def test_timeout_setting_must_be_positive(monkeypatch, raw, expected):
    if raw is None:
        monkeypatch.delenv("FOTMOB_TIMEOUT_MS", raising=False)
    else:
        monkeypatch.setenv("FOTMOB_TIMEOUT_MS", raw)

    assert settings._get_positive_int("FOTMOB_TIMEOUT_MS", 4000) == expected
