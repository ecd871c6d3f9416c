"""Shared fixtures for the NiftyPulse tests."""

from datetime import date, timedelta

import pytest

from niftypulse.schemas.market import Candle

START_DATE = date(2024, 1, 1)


def build_candles(closes, start=START_DATE):
    """Daily candles with open == close and a 1-point range either side."""
    return [
        Candle(
            date=start + timedelta(days=i),
            open=close,
            high=close + 1,
            low=close - 1,
            close=close,
            volume=1000 + i,
        )
        for i, close in enumerate(closes)
    ]


@pytest.fixture
def make_candles():
    return build_candles


@pytest.fixture
def rising_candles():
    """60 sessions, +2 every day."""
    return build_candles([100 + 2 * i for i in range(60)])


@pytest.fixture
def falling_candles():
    """60 sessions, -2 every day."""
    return build_candles([300 - 2 * i for i in range(60)])


@pytest.fixture
def zigzag_up_candles():
    """60 sessions alternating +3 / -2."""
    closes = [100 + i // 2 + (3 if i % 2 else 0) for i in range(60)]
    return build_candles(closes)


@pytest.fixture
def zigzag_down_candles():
    """60 sessions alternating -3 / +2."""
    closes = [200 - i // 2 - (3 if i % 2 else 0) for i in range(60)]
    return build_candles(closes)
