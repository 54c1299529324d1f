"""env: handler — tests for raw and filtered environment reads.

Tests cover:
    - Raw value returned as string; unset -> None
    - |d, |b, |!b conversions through the live environment
    - Environment read at call time, not factory time
    - Injected environ mapping used instead of os.environ
"""

import math

import pytest

from shortstop_handlers.services.handle_env import env


def test_raw_value(monkeypatch):
    monkeypatch.setenv("SAMPLE", "8000")
    assert env()("SAMPLE") == "8000"


def test_unset_raw_value_is_none(monkeypatch):
    monkeypatch.delenv("SAMPLE", raising=False)
    assert env()("SAMPLE") is None


def test_decimal_filter(monkeypatch):
    monkeypatch.setenv("SAMPLE", "8000")
    assert env()("SAMPLE|d") == 8000


@pytest.mark.parametrize("raw", ["", "hello"])
def test_decimal_filter_nan(monkeypatch, raw):
    monkeypatch.setenv("SAMPLE", raw)
    assert math.isnan(env()("SAMPLE|d"))


@pytest.mark.parametrize("raw,expected", [
    ("8000", True),
    ("true", True),
    ("false", False),
    ("0", False),
    ("", False),
])
def test_boolean_filters(monkeypatch, raw, expected):
    monkeypatch.setenv("SAMPLE", raw)
    handler = env()
    assert handler("SAMPLE|b") is expected
    assert handler("SAMPLE|!b") is (not expected)


def test_boolean_filter_unset(monkeypatch):
    monkeypatch.delenv("SAMPLE", raising=False)
    handler = env()
    assert handler("SAMPLE|b") is False
    assert handler("SAMPLE|!b") is True


def test_environment_read_at_call_time(monkeypatch):
    handler = env()
    monkeypatch.setenv("SAMPLE", "1")
    assert handler("SAMPLE|d") == 1
    monkeypatch.setenv("SAMPLE", "2")
    assert handler("SAMPLE|d") == 2


def test_injected_environ():
    handler = env({"PORT": "3000", "X!": "yes"})
    assert handler("PORT|d") == 3000
    assert handler("X!|b") is True
    assert handler("X|!b") is True
