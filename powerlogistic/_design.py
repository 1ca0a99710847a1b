"""Explicit design inputs for logistic-regression power calculations.

A design names its exposure type and whether sample size or power is the
unknown. Everything is validated once, when the dataclass is built.
"""

from __future__ import annotations

from dataclasses import dataclass

from powerlogistic._common import (
    DEFAULT_ALPHA,
    DEFAULT_POWER,
    SolveFor,
    _check_n,
    _check_prevalence,
    _check_probability,
    _log_odds,
)


@dataclass(frozen=True)
class ContinuousExposure:
    """Normally distributed exposure; ``p1`` = Pr(Y = 1), ``odds_ratio`` = exp(beta)."""

    p1: float
    odds_ratio: float

    def __post_init__(self) -> None:
        _check_probability(self.p1, "p1")
        _log_odds(self.odds_ratio)


@dataclass(frozen=True)
class BinaryExposure:
    """Binary exposure with prevalence ``b`` = Pr(X = 1).

    ``p1`` and ``p2`` are the event rates at X = 0 and X = 1.
    """

    p1: float
    p2: float
    b: float

    def __post_init__(self) -> None:
        _check_probability(self.p1, "p1")
        _check_probability(self.p2, "p2")
        if self.p1 == self.p2:
            raise ValueError(
                f"p1 and p2 must be different (both are {self.p1})"
            )
        _check_prevalence(self.b)


Exposure = ContinuousExposure | BinaryExposure


@dataclass(frozen=True)
class LogisticDesign:
    """A single power or sample size question.

    Leave ``n`` as ``None`` to solve for sample size; give it to solve
    for power (``power`` is then ignored).
    """

    exposure: Exposure
    n: int | float | None = None
    alpha: float = DEFAULT_ALPHA
    power: float = DEFAULT_POWER

    def __post_init__(self) -> None:
        if not isinstance(self.exposure, (ContinuousExposure, BinaryExposure)):
            raise TypeError(
                "exposure must be ContinuousExposure or BinaryExposure, "
                f"got {type(self.exposure).__name__}"
            )
        _check_probability(self.alpha, "alpha")
        _check_probability(self.power, "power")
        if self.n is not None:
            _check_n(self.n)

    @property
    def solve_for(self) -> SolveFor:
        if self.n is None:
            return SolveFor.SAMPLE_SIZE
        return SolveFor.POWER

    @property
    def is_binary(self) -> bool:
        return isinstance(self.exposure, BinaryExposure)
