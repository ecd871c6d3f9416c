"""
Technical Indicator Calculations

Pure Python/NumPy implementations of the index indicators.
All math is deterministic and strictly causal: the value at index i only
looks at candles 0..i.
"""

import math
from typing import Optional

import numpy as np


# =============================================================================
# ROUNDING
# =============================================================================


def round2(value: float) -> float:
    """
    Round to 2 decimal places, half away from zero.

    Works on ``value * 100`` as stored in binary floating point, so
    ``round2(0.285)`` is 0.28 (0.285 * 100 == 28.499999999999996) while
    ``round2(2.345)`` is 2.35 (2.345 * 100 == 234.50000000000003).
    """
    scaled = abs(float(value)) * 100
    whole = math.floor(scaled)
    if scaled - whole >= 0.5:
        whole += 1
    rounded = whole / 100
    if value < 0 and rounded:
        return -rounded
    return rounded


def to_optional(value: float) -> Optional[float]:
    """Map a NaN slot to None, otherwise round to 2dp."""
    if np.isnan(value):
        return None
    return round2(value)


def running_sum(values: np.ndarray) -> float:
    """
    Plain left-to-right sum.

    np.sum (pairwise) and the builtin sum (compensated) can land one ulp
    away, which flips round2 on a .xx5 boundary.
    """
    total = 0.0
    for value in values.tolist():
        total += value
    return total


# =============================================================================
# MOVING AVERAGES
# =============================================================================


def sma(data: np.ndarray, period: int) -> np.ndarray:
    """Simple Moving Average. NaN until ``period`` values are available."""
    result = np.full(len(data), np.nan)
    for i in range(period - 1, len(data)):
        result[i] = running_sum(data[i - period + 1 : i + 1]) / period
    return result


# =============================================================================
# MOMENTUM INDICATORS
# =============================================================================


def gains_losses(closes: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """
    Daily gain/loss series.

    The first day has no prior close, so both are 0 there.
    """
    gains = np.zeros(len(closes))
    losses = np.zeros(len(closes))

    if len(closes) > 1:
        deltas = np.diff(closes)
        gains[1:] = np.where(deltas > 0, deltas, 0)
        losses[1:] = np.where(deltas < 0, -deltas, 0)

    return gains, losses


def rsi(closes: np.ndarray, period: int = 14) -> np.ndarray:
    """
    Relative Strength Index, simple-average variant.

    Average gain/loss are plain means of the trailing ``period`` daily
    values (no exponential smoothing). Defined from index ``period`` on.
    """
    gains, losses = gains_losses(closes)
    result = np.full(len(closes), np.nan)

    for i in range(period, len(closes)):
        avg_gain = running_sum(gains[i - period + 1 : i + 1]) / period
        avg_loss = running_sum(losses[i - period + 1 : i + 1]) / period

        if avg_loss == 0:
            result[i] = 100
        elif avg_gain == 0:
            result[i] = 0
        else:
            rs = avg_gain / avg_loss
            result[i] = 100 - (100 / (1 + rs))

    return result


# =============================================================================
# PERCENT CHANGE / LEVELS
# =============================================================================


def percent_change(current: float, reference: float) -> Optional[float]:
    """Percent change from ``reference`` to ``current``; None for a zero base."""
    if not reference:
        return None
    return round2(((current - reference) / reference) * 100)


def trailing_range(
    highs: np.ndarray, lows: np.ndarray, lookback: int = 15
) -> tuple[Optional[float], Optional[float]]:
    """
    Support/resistance zone over the trailing window.

    Returns: (min low, max high), or (None, None) for no data.
    """
    if len(highs) == 0:
        return None, None
    return round2(np.min(lows[-lookback:])), round2(np.max(highs[-lookback:]))
