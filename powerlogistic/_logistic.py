"""Power and sample size for simple logistic regression.

One entry point covers four formulas: {continuous, binary} exposure crossed
with {solve for n, solve for power}.

Reference: Hsieh, Bloch & Larsen (1998), Statist. Med. 17, 1623-1634.
"""

from __future__ import annotations

import logging

from powerlogistic._binary import power_binary, sample_size_binary
from powerlogistic._common import (
    DEFAULT_ALPHA,
    DEFAULT_POWER,
    LogisticPowerResult,
    SolveFor,
)
from powerlogistic._continuous import power_continuous, sample_size_continuous
from powerlogistic._design import BinaryExposure, ContinuousExposure, LogisticDesign
from powerlogistic._mde import oddsratio

logger = logging.getLogger(__name__)


def solve(design: LogisticDesign) -> LogisticPowerResult:
    """Compute the unknown (n or power) of a validated design."""
    exp = design.exposure
    solve_for = design.solve_for
    logger.debug(
        "solving for %s, %s exposure", solve_for.value, type(exp).__name__,
    )

    if isinstance(exp, ContinuousExposure):
        if solve_for is SolveFor.SAMPLE_SIZE:
            result_n = sample_size_continuous(
                exp.p1, exp.odds_ratio, alpha=design.alpha, power=design.power,
            )
            result_power = design.power
        else:
            result_n = design.n
            result_power = power_continuous(
                design.n, exp.p1, exp.odds_ratio, alpha=design.alpha,
            )
        return LogisticPowerResult(
            solve_for=solve_for,
            n=result_n,
            power=result_power,
            alpha=design.alpha,
            design="continuous",
            effect_size=exp.odds_ratio,
            p1=exp.p1,
            method="Logistic regression power calculation (continuous exposure)",
            note="n is total sample size; odds ratio per SD of exposure",
        )

    if solve_for is SolveFor.SAMPLE_SIZE:
        result_n = sample_size_binary(
            exp.p1, exp.p2, exp.b, alpha=design.alpha, power=design.power,
        )
        result_power = design.power
    else:
        result_n = design.n
        result_power = power_binary(
            design.n, exp.p1, exp.p2, exp.b, alpha=design.alpha,
        )
    return LogisticPowerResult(
        solve_for=solve_for,
        n=result_n,
        power=result_power,
        alpha=design.alpha,
        design="binary",
        effect_size=oddsratio(exp.p2, exp.p1),
        p1=exp.p1,
        p2=exp.p2,
        b=exp.b,
        method="Logistic regression power calculation (binary exposure)",
        note="n is total sample size; odds ratio is p2 vs p1",
    )


def power_logistic(
    n: int | None = None,
    p1: float | None = None,
    p2: float | None = None,
    b: float | None = None,
    odds_ratio: float | None = None,
    alpha: float = DEFAULT_ALPHA,
    power: float = DEFAULT_POWER,
) -> LogisticPowerResult:
    """Power or sample size for simple logistic regression.

    If ``n`` is ``None`` the total sample size is computed, otherwise the
    power at ``n``. If ``b`` is ``None`` the exposure is continuous and
    ``p1``/``odds_ratio`` are used; otherwise it is binary and
    ``p1``/``p2``/``b`` are used.

    Parameters
    ----------
    n : int or None
        Total sample size.
    p1 : float
        Pr(Y = 1) for a continuous exposure; Pr(D | X = 0) for a binary one.
    p2 : float or None
        Pr(D | X = 1), binary exposure only.
    b : float or None
        Pr(X = 1), binary exposure only.
    odds_ratio : float or None
        exp(beta) per SD, continuous exposure only.
    alpha : float
        Two-sided type I error (default 0.05).
    power : float
        Desired power (default 0.8), used when solving for ``n``.

    Returns
    -------
    LogisticPowerResult

    Examples
    --------
    >>> import math
    >>> power_logistic(p1=0.5, odds_ratio=math.exp(0.405), power=0.95).n
    317
    >>> round(power_logistic(n=317, p1=0.5, odds_ratio=math.exp(0.405)).power, 3)
    0.95
    >>> power_logistic(p1=0.4, p2=0.5, b=0.5, alpha=0.05, power=0.95).n
    1281
    """
    if p1 is None:
        raise ValueError("p1 is required")

    if b is None:
        if odds_ratio is None:
            raise ValueError("odds_ratio is required for a continuous exposure")
        exposure = ContinuousExposure(p1=p1, odds_ratio=odds_ratio)
    else:
        if p2 is None:
            raise ValueError("p2 is required for a binary exposure")
        exposure = BinaryExposure(p1=p1, p2=p2, b=b)

    return solve(LogisticDesign(exposure=exposure, n=n, alpha=alpha, power=power))
