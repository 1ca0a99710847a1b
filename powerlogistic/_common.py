"""Shared result type, errors, validation and root-finding."""

from __future__ import annotations

import enum
import logging
import math
from collections.abc import Callable
from dataclasses import dataclass

from scipy.optimize import brentq

logger = logging.getLogger(__name__)

DEFAULT_ALPHA = 0.05
DEFAULT_POWER = 0.8


class DomainError(ValueError):
    """A formula was evaluated where it is undefined (e.g. division by zero)."""


class NoSolutionError(ValueError):
    """Root-finding failed: the target is not reachable inside the bracket."""


class SolveFor(enum.Enum):
    """Which quantity a calculation solves for."""

    SAMPLE_SIZE = "n"
    POWER = "power"


@dataclass(frozen=True)
class LogisticPowerResult:
    """Result of a logistic-regression power/sample size calculation.

    ``solve_for`` tags which of ``n`` or ``power`` was computed; the other
    is the user-supplied input. ``effect_size`` is always an odds ratio.
    """

    solve_for: SolveFor
    n: int | float
    power: float
    alpha: float
    design: str
    effect_size: float
    p1: float
    p2: float | None = None
    b: float | None = None
    method: str = ""
    note: str = ""

    @property
    def value(self) -> int | float:
        """The solved-for quantity: sample size or power."""
        if self.solve_for is SolveFor.SAMPLE_SIZE:
            return self.n
        return self.power

    def summary(self) -> str:
        """Human-readable summary, similar to R's print.power.htest."""
        lines = [self.method, ""]
        lines.append(f"              n = {self.n}")
        lines.append(f"             p1 = {self.p1}")
        if self.p2 is not None:
            lines.append(f"             p2 = {self.p2}")
        if self.b is not None:
            lines.append(f"              B = {self.b}")
        lines.append(f"     odds ratio = {self.effect_size:.6f}")
        lines.append(f"          alpha = {self.alpha}")
        lines.append(f"          power = {self.power:.6f}")
        if self.note:
            lines.append("")
            lines.append(f"NOTE: {self.note}")
        return "\n".join(lines)


# ---------------------------------------------------------------------------
# Shared validation
# ---------------------------------------------------------------------------

def _check_probability(value: float | None, name: str) -> float:
    """Require *value* to be supplied and strictly inside (0, 1)."""
    if value is None:
        raise ValueError(f"{name} is required")
    if not (0.0 < value < 1.0):
        raise ValueError(f"{name} must be in (0, 1), got {value}")
    return value


def _check_prevalence(b: float | None) -> float:
    """Validate the exposure prevalence B = Pr(X=1).

    Values outside [0, 1] are invalid input; the endpoints themselves make
    the binary formulas divide by zero and are reported as domain errors.
    """
    if b is None:
        raise ValueError("b is required")
    if not (0.0 <= b <= 1.0):
        raise ValueError(f"b must be in (0, 1), got {b}")
    if b == 0.0 or b == 1.0:
        raise DomainError(f"b must be strictly between 0 and 1, got {b}")
    return b


def _check_n(n: int | float | None) -> int | float:
    if n is None:
        raise ValueError("n is required")
    if isinstance(n, bool):
        raise ValueError(f"n must be a number, not a bool, got {n!r}")
    if not math.isfinite(n) or n < 1:
        raise ValueError(f"n must be >= 1, got {n}")
    return n


def _log_odds(odds_ratio: float | None) -> float:
    """Return beta = log(OR), rejecting non-positive odds ratios."""
    if odds_ratio is None:
        raise ValueError("odds_ratio is required")
    if not math.isfinite(odds_ratio):
        raise ValueError(f"odds_ratio must be finite, got {odds_ratio}")
    if odds_ratio <= 0.0:
        raise DomainError(f"odds_ratio must be > 0, got {odds_ratio}")
    return math.log(odds_ratio)


# ---------------------------------------------------------------------------
# Shared root-finding
# ---------------------------------------------------------------------------

def _solve_parameter(
    func: Callable[[float], float],
    target: float,
    bracket: tuple[float, float],
    *,
    xtol: float = 1e-12,
    maxiter: int = 200,
) -> float:
    """Solve ``func(x) == target`` via Brent's method.

    Parameters
    ----------
    func : callable
        Monotonic function of one variable (e.g. computes power as f(p2)).
    target : float
        Target value (e.g. desired power).
    bracket : tuple
        ``(lower, upper)`` bracket. ``func(lower) - target`` and
        ``func(upper) - target`` must have opposite signs.

    Returns
    -------
    float
        The solution *x* such that ``func(x) ≈ target``.

    Raises
    ------
    NoSolutionError
        If the bracket is empty or does not straddle the target.
    """
    lo, hi = bracket
    if not lo < hi:
        raise NoSolutionError(f"No solution in range: empty bracket ({lo!r}, {hi!r})")

    reach_lo = func(lo)
    reach_hi = func(hi)
    if (reach_lo - target) * (reach_hi - target) > 0:
        raise NoSolutionError(
            f"No solution in range ({lo:g}, {hi:g}): target {target:.6f} lies "
            f"outside the reachable [{min(reach_lo, reach_hi):.6f}, "
            f"{max(reach_lo, reach_hi):.6f}]"
        )

    root = brentq(lambda x: func(x) - target, lo, hi, xtol=xtol, maxiter=maxiter)
    logger.debug("brentq on (%g, %g) -> %.12g (target %g)", lo, hi, root, target)
    return root
