"""Tests for the next-move rule table."""

import pytest

from niftypulse.schemas.analysis import Bias
from niftypulse.services.analysis.narrative import (
    NARRATIVE_RULES,
    NarrativeContext,
    format_number,
    select_narrative,
)


@pytest.mark.parametrize("rsi14", [None, 10.0, 50.0, 90.0])
def test_neutral_ignores_rsi(rsi14):
    headline, narrative = select_narrative(Bias.NEUTRAL, NarrativeContext(rsi14=rsi14))
    assert headline == "Sideways consolidation likely"
    assert narrative.startswith("Nifty appears range-bound")


def test_bullish_stretched_fallbacks():
    headline, narrative = select_narrative(Bias.BULLISH, NarrativeContext(rsi14=75.5))
    assert headline == "Uptrend extended but stretched"
    assert "RSI at 75.5 signals" in narrative
    assert "Pullbacks toward the 20-day SMA" in narrative
    assert "while recent support holds." in narrative


def test_bullish_threshold_is_strict():
    headline, _ = select_narrative(Bias.BULLISH, NarrativeContext(rsi14=68.0))
    assert headline == "Upside continuation favoured"


def test_bullish_continuation_fallbacks():
    headline, narrative = select_narrative(Bias.BULLISH, NarrativeContext())
    assert headline == "Upside continuation favoured"
    assert "with 0% five-day momentum" in narrative
    assert "above recent highs would" in narrative
    assert "while nearby support remains" in narrative


def test_bullish_continuation_values():
    context = NarrativeContext(
        momentum_pct_5day=1.25,
        rsi14=55.0,
        support_zone=21950.4,
        resistance_zone=22400.0,
    )
    _, narrative = select_narrative(Bias.BULLISH, context)
    assert "with 1.25% five-day momentum" in narrative
    assert "above 22400 would" in narrative
    assert "while 21950.4 remains" in narrative


def test_bearish_oversold():
    headline, narrative = select_narrative(
        Bias.BEARISH, NarrativeContext(rsi14=28.1, support_zone=21500.0)
    )
    assert headline == "Downtrend oversold"
    assert "RSI at 28.1, flagging" in narrative
    assert "unless 21500 breaks decisively." in narrative


def test_bearish_oversold_fallback():
    _, narrative = select_narrative(Bias.BEARISH, NarrativeContext(rsi14=20.0))
    assert "unless support breaks decisively." in narrative


@pytest.mark.parametrize("rsi14", [None, 32.0, 45.0])
def test_bearish_pressure(rsi14):
    headline, narrative = select_narrative(Bias.BEARISH, NarrativeContext(rsi14=rsi14))
    assert headline == "Downside pressure building"
    assert "sits at 0%." in narrative
    assert "Losing recent support would" in narrative
    assert "reclaiming the 20-day SMA is needed" in narrative


def test_every_bias_has_a_catch_all_rule():
    for bias in Bias:
        rules = [r for r in NARRATIVE_RULES if r.bias == bias]
        assert rules
        assert rules[-1].when(None) is True


@pytest.mark.parametrize(
    "value,expected",
    [
        (100.0, "100"),
        (0, "0"),
        (22150.5, "22150.5"),
        (-1.25, "-1.25"),
        (66.67, "66.67"),
    ],
)
def test_format_number(value, expected):
    assert format_number(value) == expected
