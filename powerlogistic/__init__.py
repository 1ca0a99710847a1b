"""
PowerLogistic: power and sample size for simple logistic regression.

Closed-form Wald-test approximations of Hsieh, Bloch & Larsen (1998) for a
single binary outcome and one exposure that is either continuous (normal)
or binary with known prevalence, plus the minimum detectable effect
(event rate or odds ratio) at a given sample size.

Usage:
    from powerlogistic import power_logistic, mdpr, mdor, oddsratio
"""

__version__ = "0.1.0"

from powerlogistic._binary import power_binary, sample_size_binary
from powerlogistic._common import (
    DEFAULT_ALPHA,
    DEFAULT_POWER,
    DomainError,
    LogisticPowerResult,
    NoSolutionError,
    SolveFor,
)
from powerlogistic._continuous import power_continuous, sample_size_continuous
from powerlogistic._design import BinaryExposure, ContinuousExposure, LogisticDesign
from powerlogistic._logistic import power_logistic, solve
from powerlogistic._mde import mdor, mdor_curve, mdpr, oddsratio
from powerlogistic._normal import ccdf, cdf, quantile

__all__ = [
    "__version__",
    "DEFAULT_ALPHA",
    "DEFAULT_POWER",
    "DomainError",
    "NoSolutionError",
    "SolveFor",
    "LogisticPowerResult",
    "ContinuousExposure",
    "BinaryExposure",
    "LogisticDesign",
    "power_logistic",
    "solve",
    "sample_size_continuous",
    "power_continuous",
    "sample_size_binary",
    "power_binary",
    "mdpr",
    "mdor",
    "mdor_curve",
    "oddsratio",
    "quantile",
    "cdf",
    "ccdf",
]
