"""
Command-line driver.

Usage:
    python -m rootfind samples
    python -m rootfind bisect trig -3 -2 --epsilon 1e-6
    python -m rootfind fixed-point trig --x0 -2 --functional frac -k 0
    python -m rootfind fixed-point polynom --x0 1 --functional newton --show-iterates
    python -m rootfind scan polynom 0 5
"""

import argparse
import logging
import math
from typing import List, Optional

from tabulate import tabulate

from rootfind import __version__
from rootfind.analysis.brackets import scan_brackets
from rootfind.analysis.convergence import ConvergenceAnalyzer, bisection_steps
from rootfind.functional.library import FUNCTIONALS, iteration_map
from rootfind.report import format_bisection, format_fixed_point, plot_iterates
from rootfind.samples import SAMPLES, get_sample
from rootfind.search.bisection import DEFAULT_TOLERANCE, BisectionSolver
from rootfind.search.fixed_point import (
    DEFAULT_MAX_ITERATIONS,
    AcceleratedFixedPointEngine,
    FixedPointEngine,
)

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1


def cmd_samples(args: argparse.Namespace) -> int:
    rows = [
        (s.name, s.formula, ", ".join(f"{r:g}" for r in s.roots))
        for s in SAMPLES.values()
    ]
    print(tabulate(rows, headers=["name", "F(x)", "roots"]))
    return EXIT_OK


def _check_bounds(lo: float, hi: float) -> None:
    if not (math.isfinite(lo) and math.isfinite(hi)):
        raise ValueError(f"bounds must be finite, got [{lo:g}, {hi:g}]")
    if lo > hi:
        raise ValueError(f"lower bound {lo:g} exceeds upper bound {hi:g}")


def _failed(what: str, error: Exception) -> int:
    logger.debug("%s raised %r", what, error)
    print(f"{what} failed: {error}")
    return EXIT_FAILED


def cmd_bisect(args: argparse.Namespace) -> int:
    sample = get_sample(args.sample)
    _check_bounds(args.a, args.b)
    solver = BisectionSolver(tolerance=args.epsilon)
    try:
        result = solver.solve(sample.func, args.a, args.b)
    except (ArithmeticError, ValueError) as e:
        return _failed(f"Bisection of {sample.name}", e)

    print(format_bisection(result, sample.name))
    if not result.ok:
        return EXIT_FAILED
    logger.debug(
        "expected at most %d steps", bisection_steps(args.b - args.a, args.epsilon)
    )
    return EXIT_OK


def cmd_fixed_point(args: argparse.Namespace) -> int:
    sample = get_sample(args.sample)
    func = iteration_map(
        args.functional, sample.func, k=args.k, derivative=sample.derivative
    )
    engine_cls = AcceleratedFixedPointEngine if args.accelerate else FixedPointEngine
    engine = engine_cls(
        tolerance=args.epsilon,
        max_iterations=args.max_iter,
        divergence_threshold=args.divergence_threshold,
    )
    try:
        result = engine.iterate(args.x0, func)
    except (ArithmeticError, ValueError) as e:
        return _failed(f"Fixed-point iteration of {sample.name}", e)

    analysis = ConvergenceAnalyzer().analyse(result.iterates)
    print(format_fixed_point(
        result,
        f"x - {args.functional}({sample.name})",
        show_iterates=args.show_iterates,
        analysis=analysis,
    ))
    if args.plot:
        plot_iterates(result.iterates, func=func, path=args.plot)
        print(f"Plot saved to {args.plot}")
    return EXIT_OK if result.ok else EXIT_FAILED


def cmd_scan(args: argparse.Namespace) -> int:
    sample = get_sample(args.sample)
    _check_bounds(args.lo, args.hi)
    if args.lo == args.hi:
        raise ValueError(f"empty interval [{args.lo:g}, {args.hi:g}]")
    if args.samples < 2:
        raise ValueError(f"samples must be at least 2, got {args.samples}")
    solver = BisectionSolver(tolerance=args.epsilon)
    try:
        brackets = scan_brackets(sample.func, args.lo, args.hi, samples=args.samples)
        results = [solver.solve(sample.func, a, b) for a, b in brackets]
    except (ArithmeticError, ValueError) as e:
        return _failed(f"Scan of {sample.name}", e)

    if not brackets:
        print(f"No sign change of {sample.name} found on [{args.lo:g}, {args.hi:g}].")
        return EXIT_FAILED

    rows = []
    for (a, b), result in zip(brackets, results):
        rows.append((f"[{a:.6g}, {b:.6g}]", result.root, result.f_root, result.steps))
    print(tabulate(rows, headers=["bracket", "root", "F(root)", "steps"], floatfmt=".10g"))
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rootfind",
        description="Bisection and fixed-point root finding for scalar functions.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log every search at DEBUG level",
    )
    sub = parser.add_subparsers(dest="command", required=True)
    sample_names = sorted(SAMPLES)

    p = sub.add_parser("samples", help="List the sample functions")
    p.set_defaults(handler=cmd_samples)

    p = sub.add_parser("bisect", help="Bisect a bracket of a sample function")
    p.add_argument("sample", choices=sample_names)
    p.add_argument("a", type=float)
    p.add_argument("b", type=float)
    p.add_argument("--epsilon", type=float, default=DEFAULT_TOLERANCE)
    p.set_defaults(handler=cmd_bisect)

    p = sub.add_parser("fixed-point", help="Iterate x - Γ(F) from a starting value")
    p.add_argument("sample", choices=sample_names)
    p.add_argument("--x0", type=float, required=True)
    p.add_argument("--functional", choices=sorted(FUNCTIONALS), default="frac")
    p.add_argument("-k", type=float, default=0.0, help="Scale parameter of the frac functional")
    p.add_argument("--epsilon", type=float, default=DEFAULT_TOLERANCE)
    p.add_argument("--max-iter", type=int, default=DEFAULT_MAX_ITERATIONS)
    p.add_argument("--divergence-threshold", type=float, default=None)
    p.add_argument("--accelerate", action="store_true", help="Use Aitken acceleration")
    p.add_argument("--show-iterates", action="store_true")
    p.add_argument("--plot", metavar="PATH", help="Save an iterate plot (needs matplotlib)")
    p.set_defaults(handler=cmd_fixed_point)

    p = sub.add_parser("scan", help="Find sign changes on a grid and bisect each")
    p.add_argument("sample", choices=sample_names)
    p.add_argument("lo", type=float)
    p.add_argument("hi", type=float)
    p.add_argument("--samples", type=int, default=100)
    p.add_argument("--epsilon", type=float, default=DEFAULT_TOLERANCE)
    p.set_defaults(handler=cmd_scan)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)
    # handlers report evaluation failures themselves; ValueError here is bad usage
    try:
        return args.handler(args)
    except ValueError as e:
        parser.error(str(e))
