import logging

from salamina_stats.logging_utils import RateLimitedLogger


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def test_rate_limited_logger_suppresses_within_window(caplog):
    clock = FakeClock()
    logger = logging.getLogger("salamina_stats.tests.ratelimit")
    limited = RateLimitedLogger(logger, window_seconds=60, clock=clock)

    with caplog.at_level(logging.WARNING, logger=logger.name):
        assert limited.warning(("fotmob", "TIMEOUT"), "first") is True
        assert limited.warning(("fotmob", "TIMEOUT"), "second") is False
        assert limited.warning(("fotmob", "HTTP_ERROR"), "other key") is True
        clock.now = 61
        assert limited.warning(("fotmob", "TIMEOUT"), "after window") is True

    assert [r.getMessage() for r in caplog.records] == ["first", "other key", "after window"]


def test_reset_allows_immediate_repeat():
    clock = FakeClock()
    limited = RateLimitedLogger(logging.getLogger("salamina_stats.tests.reset"), clock=clock)

    assert limited.info(["k"], "one") is True
    assert limited.info(["k"], "two") is False
    limited.reset()
    assert limited.info(["k"], "three") is True
