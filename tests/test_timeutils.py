"""Tests for timestamps, random values and wait."""

import asyncio
import re
import time
from datetime import datetime, timedelta
from types import SimpleNamespace

from rrutils.core import timeutils
from rrutils.core.timeutils import (
    get_future_date,
    get_random_int,
    get_random_money,
    get_short_timestamp,
    get_timestamp,
    wait,
)


class TestTimestamps:
    """Tests for timestamp helpers."""

    def test_iso_timestamp_format(self):
        assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z", get_timestamp())

    def test_short_timestamp_is_epoch_millis(self):
        before = int(time.time() * 1000)
        stamp = get_short_timestamp()
        after = int(time.time() * 1000)
        assert before <= stamp <= after


class TestRandomValues:
    """Tests for random helpers."""

    def test_random_money_range_and_format(self):
        for _ in range(200):
            money = get_random_money()
            assert re.fullmatch(r"\d{1,2}\.\d{2}", money)
            assert 4.0 <= float(money) < 14.0

    def test_random_money_never_rounds_up_to_upper_bound(self, monkeypatch):
        monkeypatch.setattr(timeutils, "random", SimpleNamespace(random=lambda: 0.9999999999999999))
        assert get_random_money() == "13.99"

    def test_random_money_lower_bound(self, monkeypatch):
        monkeypatch.setattr(timeutils, "random", SimpleNamespace(random=lambda: 0.0))
        assert get_random_money() == "4.00"

    def test_random_int_default_range(self):
        values = {get_random_int() for _ in range(500)}
        assert values <= set(range(10))

    def test_random_int_floors_max(self):
        assert all(0 <= get_random_int(2.9) < 2 for _ in range(100))

    def test_random_int_small_max(self):
        assert get_random_int(0) == 0
        assert get_random_int(1) == 0


class TestFutureDate:
    """Tests for get_future_date."""

    def test_explicit_duration(self):
        result = get_future_date(3)
        expected = datetime.now() + timedelta(days=3)
        assert abs((expected - result).total_seconds()) < 5

    def test_default_duration_is_random_week(self, monkeypatch):
        monkeypatch.setattr(timeutils, "get_random_int", lambda max=10: 6)
        result = get_future_date()
        assert (result - datetime.now()).days in (5, 6)


class TestWait:
    """Tests for the async wait."""

    def test_waits_for_milliseconds(self):
        start = time.monotonic()
        asyncio.run(wait(20))
        assert time.monotonic() - start >= 0.015

    def test_defaults_to_one_second(self, monkeypatch):
        slept = []

        async def fake_sleep(seconds):
            slept.append(seconds)

        monkeypatch.setattr(timeutils, "asyncio", SimpleNamespace(sleep=fake_sleep))
        asyncio.run(wait())
        asyncio.run(wait(0))
        assert slept == [1.0, 1.0]
