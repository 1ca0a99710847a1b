"""Sample size and power for a binary exposure with known prevalence.

Model: logit(Pr(D=1)) = beta0 + beta1 * X, X in {0, 1}, with
B = Pr(X=1), p1 = Pr(D | X=0) and p2 = Pr(D | X=1).

Reference: Hsieh, Bloch & Larsen (1998), Statist. Med. 17, 1623-1634.
"""

from __future__ import annotations

import math

from powerlogistic._common import (
    DEFAULT_ALPHA,
    DEFAULT_POWER,
    _check_n,
    _check_prevalence,
    _check_probability,
)
from powerlogistic._normal import cdf, quantile


# ---------------------------------------------------------------------------
# Internal terms shared by both directions
# ---------------------------------------------------------------------------

def _binary_terms(p1: float, p2: float, b: float) -> tuple[float, float, float]:
    """Return (null SD, alternative SD, squared effect) of the Hsieh formula.

        pbar  = (1 - B) * p1 + B * p2
        null  = sqrt(pbar * (1 - pbar) / B)
        alt   = sqrt(p1 * (1 - p1) + p2 * (1 - p2) * (1 - B) / B)
        delta = (p1 - p2)^2 * (1 - B)
    """
    pbar = (1.0 - b) * p1 + b * p2
    null_sd = math.sqrt(pbar * (1.0 - pbar) / b)
    alt_sd = math.sqrt(p1 * (1.0 - p1) + p2 * (1.0 - p2) * (1.0 - b) / b)
    delta = (p1 - p2) ** 2 * (1.0 - b)
    return null_sd, alt_sd, delta


def _binary_power(n: float, p1: float, p2: float, b: float, alpha: float) -> float:
    """Unvalidated power; the root-finder calls this many times."""
    null_sd, alt_sd, delta = _binary_terms(p1, p2, b)
    za = quantile(1.0 - alpha / 2.0)
    return cdf((math.sqrt(n * delta) - za * null_sd) / alt_sd)


def _check_binary(p1: float, p2: float, b: float, alpha: float) -> None:
    _check_probability(p1, "p1")
    _check_probability(p2, "p2")
    _check_prevalence(b)
    _check_probability(alpha, "alpha")


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def sample_size_binary(
    p1: float,
    p2: float,
    b: float,
    alpha: float = DEFAULT_ALPHA,
    power: float = DEFAULT_POWER,
) -> int:
    """Total sample size for a binary exposure.

    Parameters
    ----------
    p1 : float
        Event rate at X = 0.
    p2 : float
        Event rate at X = 1. Must differ from ``p1``.
    b : float
        Prevalence of exposure, Pr(X = 1), strictly inside (0, 1).
    alpha : float
        Two-sided significance level.
    power : float
        Desired power.

    Returns
    -------
    int

    Examples
    --------
    >>> sample_size_binary(0.4, 0.5, 0.5, alpha=0.05, power=0.95)
    1281
    """
    _check_binary(p1, p2, b, alpha)
    _check_probability(power, "power")
    if p1 == p2:
        raise ValueError(f"p1 and p2 must be different (both are {p1})")

    null_sd, alt_sd, delta = _binary_terms(p1, p2, b)
    za = quantile(1.0 - alpha / 2.0)
    zb = quantile(power)
    return math.ceil((za * null_sd + zb * alt_sd) ** 2 / delta)


def power_binary(
    n: int | float,
    p1: float,
    p2: float,
    b: float,
    alpha: float = DEFAULT_ALPHA,
) -> float:
    """Power for a binary exposure at total sample size *n*.

        power = Phi((sqrt(n * delta) - z_{1-alpha/2} * null) / alt)

    Increasing in ``n``, and in ``p2`` over ``(p1, 1)``.
    """
    _check_n(n)
    _check_binary(p1, p2, b, alpha)
    return _binary_power(float(n), p1, p2, b, alpha)
