"""Standard normal primitives used by every power formula."""

from __future__ import annotations

from scipy.stats import norm


def quantile(p: float) -> float:
    """Inverse CDF of the standard normal at probability *p* in (0, 1)."""
    if not (0.0 < p < 1.0):
        raise ValueError(f"p must be in (0, 1), got {p}")
    return float(norm.ppf(p))


def cdf(x: float) -> float:
    """Standard normal CDF."""
    return float(norm.cdf(x))


def ccdf(x: float) -> float:
    """Upper tail ``1 - cdf(x)``, computed directly so large *x* keeps precision."""
    return float(norm.sf(x))
