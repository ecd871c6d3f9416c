"""
Next-move narrative rules.

A flat, ordered rule table keyed on bias and RSI extremity. The first rule
whose bias matches and whose RSI test passes supplies the headline and the
narrative template.
"""

from dataclasses import dataclass, field
from typing import Callable, Optional

from niftypulse.schemas.analysis import Bias

RSI_OVERBOUGHT = 68
RSI_OVERSOLD = 32


@dataclass(frozen=True)
class NarrativeContext:
    """Values a narrative template may cite."""

    momentum_pct_5day: Optional[float] = None
    rsi14: Optional[float] = None
    sma20: Optional[float] = None
    support_zone: Optional[float] = None
    resistance_zone: Optional[float] = None


@dataclass(frozen=True)
class NarrativeRule:
    bias: Bias
    headline: str
    template: str
    when: Callable[[Optional[float]], bool] = lambda rsi14: True
    fallbacks: dict[str, str] = field(default_factory=dict)


def format_number(value: float) -> str:
    """Shortest text form of a number: 100.0 -> '100', 22150.5 -> '22150.5'."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


NARRATIVE_RULES: tuple[NarrativeRule, ...] = (
    NarrativeRule(
        bias=Bias.NEUTRAL,
        headline="Sideways consolidation likely",
        template=(
            "Nifty appears range-bound as key moving averages converge. "
            "Traders may focus on breakouts from recent levels."
        ),
    ),
    NarrativeRule(
        bias=Bias.BULLISH,
        headline="Uptrend extended but stretched",
        template=(
            "Momentum stays positive with price riding above the 20-day average, "
            "though RSI at {rsi14} signals potential cooling. Pullbacks toward "
            "{sma20} could offer dip opportunities while {support_zone} holds."
        ),
        when=lambda rsi14: rsi14 is not None and rsi14 > RSI_OVERBOUGHT,
        fallbacks={"sma20": "the 20-day SMA", "support_zone": "recent support"},
    ),
    NarrativeRule(
        bias=Bias.BULLISH,
        headline="Upside continuation favoured",
        template=(
            "Price holds above the rising 20- and 50-day averages with "
            "{momentum_pct_5day}% five-day momentum. A sustained move above "
            "{resistance_zone} would extend the rally, while {support_zone} "
            "remains the risk marker."
        ),
        fallbacks={"resistance_zone": "recent highs", "support_zone": "nearby support"},
    ),
    NarrativeRule(
        bias=Bias.BEARISH,
        headline="Downtrend oversold",
        template=(
            "Nifty is trading beneath its short- and medium-term averages with "
            "RSI at {rsi14}, flagging a stretched sell-off. A pause or mean "
            "reversion bounce is possible unless {support_zone} breaks decisively."
        ),
        when=lambda rsi14: rsi14 is not None and rsi14 < RSI_OVERSOLD,
        fallbacks={"support_zone": "support"},
    ),
    NarrativeRule(
        bias=Bias.BEARISH,
        headline="Downside pressure building",
        template=(
            "Lower highs persist beneath the 20- and 50-day averages. Momentum "
            "over the last week sits at {momentum_pct_5day}%. Losing "
            "{support_zone} would unlock deeper retracements, while reclaiming "
            "{sma20} is needed to neutralise the trend."
        ),
        fallbacks={"support_zone": "recent support", "sma20": "the 20-day SMA"},
    ),
)


def _render(rule: NarrativeRule, context: NarrativeContext) -> str:
    values = {}
    for key in ("rsi14", "sma20", "support_zone", "resistance_zone"):
        value = getattr(context, key)
        values[key] = format_number(value) if value is not None else rule.fallbacks.get(key, "")

    # Missing momentum reads as 0%
    momentum = context.momentum_pct_5day
    values["momentum_pct_5day"] = format_number(momentum if momentum is not None else 0)

    return rule.template.format(**values)


def select_narrative(bias: Bias, context: NarrativeContext) -> tuple[str, str]:
    """
    Pick the headline and narrative for a bias.

    Returns: (headline, narrative)
    """
    for rule in NARRATIVE_RULES:
        if rule.bias == bias and rule.when(context.rsi14):
            return rule.headline, _render(rule, context)

    raise ValueError(f"No narrative rule for bias: {bias}")
