"""Tests for power_logistic and solve."""

import math

import pytest

from powerlogistic import (
    BinaryExposure,
    ContinuousExposure,
    LogisticDesign,
    SolveFor,
    oddsratio,
    power_binary,
    power_logistic,
    sample_size_continuous,
    solve,
)


class TestPowerLogisticContinuous:

    def test_solve_n(self):
        r = power_logistic(p1=0.5, odds_ratio=math.exp(0.405), power=0.95)
        assert r.n == 317
        assert r.solve_for is SolveFor.SAMPLE_SIZE
        assert r.value == 317
        assert r.design == "continuous"

    def test_solve_power(self):
        r = power_logistic(n=317, p1=0.5, odds_ratio=math.exp(0.405))
        assert r.power == pytest.approx(0.950, abs=0.001)
        assert r.solve_for is SolveFor.POWER
        assert r.value == r.power
        assert r.n == 317

    def test_default_power(self):
        r = power_logistic(p1=0.3, odds_ratio=1.5)
        assert r.n == sample_size_continuous(0.3, 1.5, alpha=0.05, power=0.8)
        assert r.power == 0.8

    def test_effect_size_is_odds_ratio(self):
        r = power_logistic(p1=0.3, odds_ratio=1.5)
        assert r.effect_size == 1.5
        assert r.p2 is None
        assert r.b is None


class TestPowerLogisticBinary:

    def test_solve_n(self):
        r = power_logistic(p1=0.4, p2=0.5, b=0.5, alpha=0.05, power=0.95)
        assert r.n == 1281
        assert r.design == "binary"

    def test_solve_power(self):
        r = power_logistic(n=1281, p1=0.4, p2=0.5, b=0.5, alpha=0.05)
        assert r.power == pytest.approx(0.950, abs=0.001)

    def test_odds_ratio_ignored_for_binary(self):
        """A stray odds_ratio does not change the binary answer."""
        r1 = power_logistic(p1=0.4, p2=0.5, b=0.5, power=0.95)
        r2 = power_logistic(p1=0.4, p2=0.5, b=0.5, odds_ratio=math.exp(0.405), power=0.95)
        assert r1.n == r2.n == 1281

    def test_effect_size(self):
        r = power_logistic(p1=0.4, p2=0.5, b=0.5)
        assert r.effect_size == pytest.approx(oddsratio(0.5, 0.4))

    def test_matches_formula(self):
        r = power_logistic(n=400, p1=0.1, p2=0.2, b=0.3)
        assert r.power == power_binary(400, 0.1, 0.2, 0.3)


class TestPowerLogisticValidation:

    def test_zero_p1(self):
        with pytest.raises(ValueError, match="p1"):
            power_logistic(p1=0, odds_ratio=2)

    def test_equal_rates(self):
        with pytest.raises(ValueError, match="p1 and p2 must be different"):
            power_logistic(p1=0.5, p2=0.5, b=0.5)

    def test_equal_rates_power_direction(self):
        with pytest.raises(ValueError, match="p1 and p2 must be different"):
            power_logistic(n=100, p1=0.5, p2=0.5, b=0.5)

    def test_missing_p1(self):
        with pytest.raises(ValueError, match="p1 is required"):
            power_logistic(odds_ratio=2.0)

    def test_missing_odds_ratio(self):
        with pytest.raises(ValueError, match="odds_ratio is required"):
            power_logistic(p1=0.3)

    def test_missing_p2(self):
        with pytest.raises(ValueError, match="p2 is required"):
            power_logistic(p1=0.3, b=0.5)

    def test_zero_odds_ratio(self):
        with pytest.raises(ValueError, match="odds_ratio must be > 0"):
            power_logistic(p1=0.3, odds_ratio=0.0)

    def test_invalid_alpha(self):
        with pytest.raises(ValueError, match="alpha"):
            power_logistic(p1=0.3, odds_ratio=1.5, alpha=1.5)

    def test_invalid_power(self):
        with pytest.raises(ValueError, match="power"):
            power_logistic(p1=0.3, odds_ratio=1.5, power=0.0)

    def test_invalid_n(self):
        with pytest.raises(ValueError, match="n must be"):
            power_logistic(n=0, p1=0.3, odds_ratio=1.5)


class TestSolve:

    def test_design_drives_branch(self):
        exposure = BinaryExposure(p1=0.4, p2=0.5, b=0.5)
        r_n = solve(LogisticDesign(exposure, power=0.95))
        r_p = solve(LogisticDesign(exposure, n=r_n.n))
        assert r_n.n == 1281
        assert r_p.power >= 0.95

    def test_continuous_design(self):
        r = solve(LogisticDesign(ContinuousExposure(p1=0.5, odds_ratio=math.exp(0.405)), power=0.95))
        assert r.n == 317


class TestSummary:

    def test_summary_contains_key_fields(self):
        s = power_logistic(p1=0.4, p2=0.5, b=0.5).summary()
        assert "n = " in s
        assert "odds ratio" in s
        assert "p2 = 0.5" in s
        assert "B = 0.5" in s
        assert "binary exposure" in s

    def test_continuous_summary_omits_binary_fields(self):
        s = power_logistic(p1=0.3, odds_ratio=1.5).summary()
        assert "p2 =" not in s
        assert "continuous exposure" in s


class TestPowerLogisticArgumentTypes:

    def test_missing_alpha_named(self):
        with pytest.raises(ValueError, match="alpha is required"):
            power_logistic(p1=0.3, odds_ratio=1.5, alpha=None)

    def test_missing_power_named(self):
        with pytest.raises(ValueError, match="power is required"):
            power_logistic(p1=0.3, odds_ratio=1.5, power=None)

    def test_bool_n_rejected(self):
        with pytest.raises(ValueError, match="not a bool"):
            power_logistic(n=True, p1=0.3, odds_ratio=1.5)
