"""
Tests for the command-line driver.
"""

import pytest

from rootfind.cli import main


class TestCli:
    def test_samples(self, capsys):
        assert main(["samples"]) == 0
        out = capsys.readouterr().out
        assert "trig" in out
        assert "polynom" in out

    def test_bisect(self, capsys):
        assert main(["bisect", "trig", "-3", "-2", "--epsilon", "1e-8"]) == 0
        assert "-2.8832" in capsys.readouterr().out

    def test_bisect_invalid_bracket(self, capsys):
        assert main(["bisect", "polynom", "3", "5"]) == 1
        assert "invalid bracket" in capsys.readouterr().out

    def test_bisect_reversed_bounds(self):
        with pytest.raises(SystemExit) as excinfo:
            main(["bisect", "trig", "-2", "-3"])
        assert excinfo.value.code == 2

    def test_fixed_point_diverges(self, capsys):
        code = main([
            "fixed-point", "trig", "--x0", "-2", "--functional", "frac",
            "-k", "0", "--epsilon", "1e-5", "--max-iter", "10",
        ])
        assert code == 1
        assert "max iterations" in capsys.readouterr().out

    def test_fixed_point_newton(self, capsys):
        code = main(["fixed-point", "polynom", "--x0", "1", "--functional", "newton",
                     "--epsilon", "1e-10"])
        assert code == 0
        assert "0.5" in capsys.readouterr().out

    def test_fixed_point_newton_zero_derivative(self, capsys):
        code = main(["fixed-point", "polynom", "--x0", "4", "--functional", "newton"])
        assert code == 1
        assert "failed" in capsys.readouterr().out

    def test_fixed_point_overflow_runs_to_cap(self, capsys):
        assert main(["fixed-point", "polynom", "--x0", "10"]) == 1
        assert "max iterations" in capsys.readouterr().out

    def test_fixed_point_domain_error_is_failure(self, capsys):
        # iterates reach inf and math.sin(inf) raises ValueError
        code = main(["fixed-point", "trig", "--x0", "1", "-k", "-1.5", "--max-iter", "1000"])
        assert code == 1
        assert "failed" in capsys.readouterr().out

    def test_fixed_point_bad_epsilon_is_usage_error(self):
        with pytest.raises(SystemExit) as excinfo:
            main(["fixed-point", "trig", "--x0", "1", "--epsilon", "-1"])
        assert excinfo.value.code == 2

    def test_fixed_point_accelerated(self, capsys):
        code = main([
            "fixed-point", "trig", "--x0", "-2", "-k", "3", "--accelerate",
            "--show-iterates",
        ])
        assert code == 0
        assert "x_n" in capsys.readouterr().out

    def test_scan(self, capsys):
        assert main(["scan", "polynom", "0", "5"]) == 0
        assert "0.5" in capsys.readouterr().out

    def test_scan_no_sign_change(self, capsys):
        assert main(["scan", "polynom", "1", "3"]) == 1

    def test_scan_empty_interval_is_usage_error(self):
        with pytest.raises(SystemExit) as excinfo:
            main(["scan", "polynom", "2", "2"])
        assert excinfo.value.code == 2

    def test_unknown_sample(self):
        with pytest.raises(SystemExit):
            main(["bisect", "nosuch", "0", "1"])

    def test_verbose(self, capsys):
        assert main(["-v", "bisect", "identity", "-1", "1"]) == 0
