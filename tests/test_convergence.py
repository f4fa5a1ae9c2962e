"""
Tests for convergence diagnostics and bracket scanning.
"""

import math

import pytest

from rootfind.analysis.brackets import scan_brackets
from rootfind.analysis.convergence import (
    ConvergenceAnalyzer,
    ConvergenceBehaviour,
    bisection_steps,
    iterations_bound,
)
from rootfind.samples import polynom, trig
from rootfind.search.fixed_point import fixed_point


def sequence(f, x0, n):
    values = [x0]
    for _ in range(n):
        values.append(f(values[-1]))
    return values


class TestBounds:
    def test_iterations_bound(self):
        assert iterations_bound(0.5, 8.0, 1e-6) == 23

    def test_iterations_bound_already_close(self):
        assert iterations_bound(0.9, 1e-7, 1e-6) == 0

    def test_iterations_bound_zero_factor(self):
        assert iterations_bound(0.0, 5.0, 1e-6) == 1

    def test_iterations_bound_rejects_non_contraction(self):
        with pytest.raises(ValueError):
            iterations_bound(1.0, 1.0, 1e-6)
        with pytest.raises(ValueError):
            iterations_bound(0.5, 1.0, 0.0)

    def test_bisection_steps(self):
        assert bisection_steps(2.0, 1e-6) == 21
        assert bisection_steps(1.0, 0.25) == 2
        assert bisection_steps(0.1, 1.0) == 0


class TestConvergenceAnalyzer:
    def setup_method(self):
        self.analyzer = ConvergenceAnalyzer()

    def test_monotonic_linear(self):
        report = self.analyzer.analyse(sequence(lambda x: x / 2 + 1, 10.0, 20))
        assert report.behaviour == ConvergenceBehaviour.MONOTONIC
        assert report.contraction_factor == pytest.approx(0.5)
        assert report.order == pytest.approx(1.0, abs=1e-6)
        assert report.convergence_rate == "Moderate linear convergence"

    def test_a_posteriori_bound(self):
        values = sequence(lambda x: x / 2 + 1, 10.0, 20)
        report = self.analyzer.analyse(values)
        # k / (1 - k) * last step, with k = 1/2
        assert report.a_posteriori_bound == pytest.approx(abs(values[-1] - values[-2]))
        assert abs(values[-1] - 2.0) <= report.a_posteriori_bound + 1e-15

    def test_oscillatory(self):
        report = self.analyzer.analyse(sequence(lambda x: -0.5 * x, 1.0, 12))
        assert report.behaviour == ConvergenceBehaviour.OSCILLATORY
        assert report.contraction_factor == pytest.approx(0.5)

    def test_cos_oscillates(self):
        result = fixed_point(math.cos, 1.0, 1e-8, 100)
        report = self.analyzer.analyse(result.iterates)
        assert report.behaviour == ConvergenceBehaviour.OSCILLATORY
        assert report.contraction_factor == pytest.approx(math.sin(0.7390851332151607), abs=0.02)

    def test_divergent(self):
        report = self.analyzer.analyse(sequence(lambda x: 2 * x, 1.0, 10))
        assert report.behaviour == ConvergenceBehaviour.DIVERGENT
        assert report.a_posteriori_bound == math.inf
        assert report.convergence_rate == "Non-convergent"

    def test_non_finite_is_divergent(self):
        report = self.analyzer.analyse([1.0, 10.0, math.inf, math.nan])
        assert report.behaviour == ConvergenceBehaviour.DIVERGENT

    def test_stalled(self):
        report = self.analyzer.analyse(sequence(lambda x: x - 1, 0.0, 10))
        assert report.behaviour == ConvergenceBehaviour.STALLED
        assert report.contraction_factor == pytest.approx(1.0)

    def test_insufficient_data(self):
        report = self.analyzer.analyse([1.0, 0.5])
        assert report.behaviour == ConvergenceBehaviour.INSUFFICIENT_DATA
        assert report.order is None
        assert report.steps == [0.5]

    def test_quadratic_order(self):
        errors = [0.5, 0.25, 0.0625, 0.00390625, 0.0000152587890625]
        report = self.analyzer.analyse([1.0 + e for e in errors])
        assert report.order > 1.5
        assert report.convergence_rate == "Superlinear"

    def test_summary_mentions_behaviour(self):
        report = self.analyzer.analyse(sequence(lambda x: x / 2 + 1, 10.0, 20))
        assert "monotonic" in report.summary()

    def test_window_validation(self):
        with pytest.raises(ValueError):
            ConvergenceAnalyzer(window=1)


class TestContractionCheck:
    def setup_method(self):
        self.analyzer = ConvergenceAnalyzer()

    def test_cos_is_contraction(self):
        estimate = self.analyzer.check_contraction(math.cos, 0.0, 1.0)
        assert estimate.is_contraction
        assert estimate.lipschitz == pytest.approx(math.sin(1.0), abs=0.01)
        assert "CONTRACTION" in str(estimate)

    def test_frac_map_not_contraction_near_root(self):
        estimate = self.analyzer.check_contraction(
            lambda x: 1.5 * math.sin(x) - 2.5, -3.2, -2.6
        )
        assert not estimate.is_contraction

    def test_rejects_bad_input(self):
        with pytest.raises(ValueError):
            self.analyzer.check_contraction(math.cos, 1.0, 0.0)
        with pytest.raises(ValueError):
            self.analyzer.check_contraction(math.cos, 0.0, 1.0, samples=1)


class TestScanBrackets:
    def test_polynom_single_sign_change(self):
        brackets = scan_brackets(polynom, 0.0, 5.0, samples=100)
        assert len(brackets) == 1
        a, b = brackets[0]
        assert a < 0.5 < b

    def test_trig(self):
        brackets = scan_brackets(trig, -5.0, 5.0, samples=50)
        assert len(brackets) == 1
        a, b = brackets[0]
        assert a < -2.8832 < b

    def test_exact_zero_reported_once(self):
        brackets = scan_brackets(lambda x: x, -1.0, 1.0, samples=5)
        assert brackets == [(-0.5, 0.0)]

    def test_zero_at_lower_bound(self):
        brackets = scan_brackets(lambda x: x, 0.0, 1.0, samples=3)
        assert brackets == [(0.0, 0.5)]

    def test_nan_points_skipped(self):
        func = lambda x: math.nan if x < 0 else x - 0.5
        assert scan_brackets(func, -1.0, 1.0, samples=5) == [(0.0, 0.5)]

    def test_no_sign_change(self):
        assert scan_brackets(lambda x: x * x + 1, -2.0, 2.0) == []

    def test_validation(self):
        with pytest.raises(ValueError):
            scan_brackets(math.sin, 0.0, 1.0, samples=1)
        with pytest.raises(ValueError):
            scan_brackets(math.sin, 1.0, 1.0)
