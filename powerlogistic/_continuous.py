"""Sample size and power for a continuous (normally distributed) exposure.

Model: logit(Pr(Y=1)) = beta0 + beta1 * X with X ~ N(0, 1), odds ratio
OR = exp(beta1) per standard deviation of X.

Reference: Hsieh, Bloch & Larsen (1998), Statist. Med. 17, 1623-1634.
"""

from __future__ import annotations

import math

from powerlogistic._common import (
    DEFAULT_ALPHA,
    DEFAULT_POWER,
    DomainError,
    _check_n,
    _check_probability,
    _log_odds,
)
from powerlogistic._normal import ccdf, quantile


def sample_size_continuous(
    p1: float,
    odds_ratio: float,
    alpha: float = DEFAULT_ALPHA,
    power: float = DEFAULT_POWER,
) -> int:
    """Total sample size for a continuous exposure.

        n = (z_{1-alpha/2} + z_power)^2 / (p1 * (1 - p1) * log(OR)^2)

    Parameters
    ----------
    p1 : float
        Overall event rate Pr(Y = 1).
    odds_ratio : float
        Odds ratio per one SD increase in the exposure. Must be > 0 and != 1.
    alpha : float
        Two-sided significance level.
    power : float
        Desired power.

    Returns
    -------
    int
        Smallest total sample size achieving ``power``.

    Examples
    --------
    >>> sample_size_continuous(0.5, math.exp(0.405), power=0.95)
    317
    """
    _check_probability(p1, "p1")
    _check_probability(alpha, "alpha")
    _check_probability(power, "power")
    beta = _log_odds(odds_ratio)
    if beta == 0.0:
        raise DomainError("Cannot solve for n when odds_ratio = 1 (no effect)")

    za = quantile(1.0 - alpha / 2.0)
    zb = quantile(power)
    return math.ceil((za + zb) ** 2 / (p1 * (1.0 - p1) * beta ** 2))


def power_continuous(
    n: int | float,
    p1: float,
    odds_ratio: float,
    alpha: float = DEFAULT_ALPHA,
) -> float:
    """Power of the Wald test for a continuous exposure at total size *n*.

        power = 1 - Phi(z_{1-alpha/2} - sqrt(n * log(OR)^2 * p1 * (1 - p1)))

    Increases with ``n`` and with ``|log(OR)|``.
    """
    _check_n(n)
    _check_probability(p1, "p1")
    _check_probability(alpha, "alpha")
    beta = _log_odds(odds_ratio)

    za = quantile(1.0 - alpha / 2.0)
    return ccdf(za - math.sqrt(n * beta ** 2 * p1 * (1.0 - p1)))
