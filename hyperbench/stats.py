"""Minimum/maximum helpers and statistical outlier detection.

Outliers are found with modified Z-scores, following Iglewicz and Hoaglin (1993),
"How to Detect and Handle Outliers".
"""

from __future__ import annotations

import statistics
import sys
from collections.abc import Sequence

# 1.4826 converts the MAD into an estimator of the standard deviation;
# the second factor is the number of standard deviations.
OUTLIER_THRESHOLD = 1.4826 * 10.0


def max_value(vals: Sequence[float]) -> float:
    """Largest of a non-empty sequence of floats without NaNs."""
    if not vals:
        raise ValueError("max_value() of an empty sequence")
    return max(vals)


def min_value(vals: Sequence[float]) -> float:
    """Smallest of a non-empty sequence of floats without NaNs."""
    if not vals:
        raise ValueError("min_value() of an empty sequence")
    return min(vals)


def modified_zscores(xs: Sequence[float]) -> list[float]:
    """Compute modified Z-scores, (x_i - median) / MAD, for a non-empty sample."""
    if not xs:
        raise ValueError("modified_zscores() requires a non-empty sample")
    x_median = statistics.median(xs)
    mad = statistics.median(abs(x - x_median) for x in xs)
    if not mad > 0.0:
        mad = sys.float_info.epsilon
    return [(x - x_median) / mad for x in xs]


def num_outliers(xs: Sequence[float]) -> int:
    """Number of points whose modified Z-score exceeds OUTLIER_THRESHOLD."""
    if not xs:
        return 0
    return sum(1 for score in modified_zscores(xs) if abs(score) > OUTLIER_THRESHOLD)