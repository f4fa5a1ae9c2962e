"""
Tests for text reports and plots.
"""

import math

import pytest

from rootfind.functional.library import functional_frac, x_minus
from rootfind.report import (
    format_bisection,
    format_fixed_point,
    iterate_table,
    plot_iterates,
)
from rootfind.samples import trig
from rootfind.search.bisection import binary_search
from rootfind.search.fixed_point import fixed_point


class TestIterateTable:
    def test_headers_and_rows(self):
        table = iterate_table([1.0, 0.5, 0.25])
        assert "x_n" in table
        assert "|x_n - x_{n-1}|" in table
        assert len(table.splitlines()) == 2 + 3

    def test_truncation(self):
        table = iterate_table([float(i) for i in range(50)], max_rows=6)
        assert "..." in table
        assert "49" in table
        assert len(table.splitlines()) == 2 + 7

    def test_markdown_format(self):
        table = iterate_table([1.0, 0.5], tablefmt="pipe")
        assert table.splitlines()[0].startswith("|")


class TestSummaries:
    def test_bisection_success(self):
        result = binary_search(trig, -3.0, -2.0, 1e-8)
        text = format_bisection(result, "trig")
        assert "converged" in text
        assert "-2.8832" in text
        assert "steps" in text

    def test_bisection_invalid(self):
        result = binary_search(lambda x: x * x + 1, -1.0, 1.0)
        text = format_bisection(result, "g")
        assert "invalid bracket" in text

    def test_fixed_point_success(self):
        result = fixed_point(math.cos, 1.0, 1e-8, 100)
        text = format_fixed_point(result, "cos")
        assert "fixed point" in text
        assert "oscillatory" in text
        assert "x_n" not in text

    def test_fixed_point_failure_lists_iterates(self):
        result = fixed_point(x_minus(functional_frac(trig, 0.0)), -2.0, 1e-5, 10)
        text = format_fixed_point(result, "f")
        assert "max iterations" in text
        assert "last iterate" in text
        assert "x_n" in text

    def test_show_iterates(self):
        result = fixed_point(math.cos, 1.0, 1e-8, 100)
        text = format_fixed_point(result, "cos", show_iterates=True)
        assert "x_n" in text


class TestPlot:
    def test_plot_iterates(self, tmp_path):
        pytest.importorskip("matplotlib")
        result = fixed_point(math.cos, 1.0, 1e-6, 100)
        path = tmp_path / "iterates.png"
        fig = plot_iterates(result.iterates, func=math.cos, path=str(path))
        assert path.exists()
        assert len(fig.axes) == 2

    def test_plot_without_map(self):
        pytest.importorskip("matplotlib")
        fig = plot_iterates([1.0, 0.5, 0.25])
        assert len(fig.axes) == 1

    def test_plot_all_iterates_overflowed(self):
        pytest.importorskip("matplotlib")
        fig = plot_iterates([math.nan, math.inf, math.nan], func=math.cos)
        assert len(fig.axes) == 1
