"""Minimum detectable effect for a binary exposure.

Given n, the baseline rate p1, the exposure prevalence B and a target
power, find the smallest event rate p2 in (p1, 1) that the study detects,
and the corresponding odds ratio.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

from powerlogistic._binary import _binary_power
from powerlogistic._common import (
    DEFAULT_ALPHA,
    DEFAULT_POWER,
    DomainError,
    _check_n,
    _check_prevalence,
    _check_probability,
    _solve_parameter,
)

logger = logging.getLogger(__name__)

ROOT_BRACKET_EPS = 1e-9


def oddsratio(a: float, b: float) -> float:
    """Odds ratio of probability *a* relative to probability *b*.

        OR = (a / (1 - a)) / (b / (1 - b))

    >>> oddsratio(0.5, 0.2)
    4.0
    """
    for name, p in (("a", a), ("b", b)):
        if p == 0.0 or p == 1.0:
            raise DomainError(f"{name} must not be 0 or 1, got {p}")
        if not (0.0 < p < 1.0):
            raise ValueError(f"{name} must be in (0, 1), got {p}")
    return (a / (1.0 - a)) / (b / (1.0 - b))


def _check_mde_args(
    n: int | float | None,
    p1: float | None,
    b: float | None,
    alpha: float,
    power: float,
) -> None:
    if n is None:
        raise ValueError("`n` is required. `n` is the total sample size.")
    if p1 is None:
        raise ValueError("`p1` is required. `p1` is the event rate at X = 0.")
    if b is None:
        raise ValueError(
            "`b` is required. `b` is the proportion of the sample with X = 1."
        )
    _check_n(n)
    _check_probability(p1, "p1")
    _check_prevalence(b)
    _check_probability(alpha, "alpha")
    _check_probability(power, "power")


def mdpr(
    n: int | float | None = None,
    p1: float | None = None,
    b: float | None = None,
    alpha: float = DEFAULT_ALPHA,
    power: float = DEFAULT_POWER,
) -> float:
    """Minimum detectable event rate at X = 1.

    Solves ``power_binary(n, p1, p2, b, alpha) == power`` for ``p2`` on
    ``(p1 + eps, 1 - eps)`` with Brent's method.

    Parameters
    ----------
    n : int
        Total sample size.
    p1 : float
        Event rate at X = 0.
    b : float
        Proportion of the sample with X = 1.
    alpha : float
        Two-sided significance level.
    power : float
        Target power.

    Returns
    -------
    float
        ``p2`` in ``(p1, 1)``.

    Raises
    ------
    NoSolutionError
        If no ``p2`` in ``(p1, 1)`` reaches ``power`` at this ``n``.
    """
    _check_mde_args(n, p1, b, alpha, power)
    p2 = _solve_parameter(
        func=lambda x: _binary_power(float(n), p1, x, b, alpha),
        target=power,
        bracket=(p1 + ROOT_BRACKET_EPS, 1.0 - ROOT_BRACKET_EPS),
    )
    logger.debug("mdpr(n=%s, p1=%s, b=%s) = %.10g", n, p1, b, p2)
    return p2


def mdor(
    n: int | float | None = None,
    p1: float | None = None,
    b: float | None = None,
    alpha: float = DEFAULT_ALPHA,
    power: float = DEFAULT_POWER,
) -> float:
    """Minimum detectable odds ratio, ``oddsratio(mdpr(...), p1)``.

    The solved rate is in the numerator, so the result is > 1.

    Examples
    --------
    >>> mdor(n=500, p1=0.1, b=0.5) > 1
    True
    """
    p2 = mdpr(n=n, p1=p1, b=b, alpha=alpha, power=power)
    return oddsratio(p2, p1)


def mdor_curve(
    n_values: Sequence[int] | NDArray[np.integer],
    p1: float | Sequence[float],
    b: float,
    alpha: float = DEFAULT_ALPHA,
    power: float = DEFAULT_POWER,
) -> NDArray[np.floating]:
    """Minimum detectable odds ratio over a grid of sample sizes.

    Parameters
    ----------
    n_values : sequence of int
        At least two total sample sizes.
    p1 : float or sequence of float
        One or more baseline event rates.
    b : float
        Proportion of the sample with X = 1.

    Returns
    -------
    ndarray
        Shape ``(len(p1), len(n_values))``; row *i* is the curve for ``p1[i]``.
    """
    n_arr = np.asarray(n_values)
    if n_arr.ndim != 1 or n_arr.size < 2:
        raise ValueError("n_values must have 2 or more values for sample size")
    p1_arr = np.atleast_1d(np.asarray(p1, dtype=np.float64))

    out = np.empty((p1_arr.size, n_arr.size), dtype=np.float64)
    for i, p in enumerate(p1_arr):
        for j, n in enumerate(n_arr):
            out[i, j] = mdor(n=n.item(), p1=float(p), b=b, alpha=alpha, power=power)
    return out
