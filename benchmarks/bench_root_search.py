"""
rootfind Benchmark Runner
=========================

Times each method on the sample functions and prints iteration counts,
residuals and median wall times side by side.

Usage:
    python benchmarks/bench_root_search.py
"""

import gc
import math
import statistics
import sys
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from tabulate import tabulate

from rootfind.functional.library import iteration_map
from rootfind.samples import get_sample
from rootfind.search.bisection import BisectionSolver
from rootfind.search.fixed_point import AcceleratedFixedPointEngine, FixedPointEngine
from rootfind.utils.helpers import format_ns


ITERATIONS = 200     # Timed repetitions
WARMUP = 20          # Warmup repetitions
TOLERANCE = 1e-10


@dataclass
class BenchmarkCase:
    name: str
    sample: str
    run: Callable
    root: Optional[float] = None
    steps: int = 0
    ok: bool = False
    times_ns: List[int] = field(default_factory=list)

    @property
    def median_ns(self) -> float:
        return statistics.median(self.times_ns) if self.times_ns else 0.0


def time_function(func: Callable, iterations: int, warmup: int) -> List[int]:
    """Time a call over multiple iterations, returning a list of ns times."""
    for _ in range(warmup):
        func()

    times = []
    for _ in range(iterations):
        gc.disable()
        start = time.perf_counter_ns()
        func()
        end = time.perf_counter_ns()
        gc.enable()
        times.append(end - start)
    return times


def build_cases() -> List[BenchmarkCase]:
    bisect = BisectionSolver(tolerance=TOLERANCE)
    plain = FixedPointEngine(tolerance=TOLERANCE, max_iterations=500)
    accel = AcceleratedFixedPointEngine(tolerance=TOLERANCE, max_iterations=500)

    trig = get_sample('trig')
    polynom = get_sample('polynom')
    trig_frac = iteration_map('frac', trig.func, k=1.0)
    trig_newton = iteration_map('newton', trig.func, derivative=trig.derivative)
    poly_newton = iteration_map('newton', polynom.func, derivative=polynom.derivative)

    return [
        BenchmarkCase("bisection", "trig", lambda: bisect.solve(trig.func, -3.0, -2.0)),
        BenchmarkCase("frac k=1", "trig", lambda: plain.iterate(-2.0, trig_frac)),
        BenchmarkCase("frac k=1 + Aitken", "trig", lambda: accel.iterate(-2.0, trig_frac)),
        BenchmarkCase("newton", "trig", lambda: plain.iterate(-2.0, trig_newton)),
        BenchmarkCase("bisection", "polynom", lambda: bisect.solve(polynom.func, 0.2, 1.3)),
        BenchmarkCase("newton", "polynom", lambda: plain.iterate(1.0, poly_newton)),
    ]


def run_case(case: BenchmarkCase) -> BenchmarkCase:
    result = case.run()
    case.ok = result.ok
    case.root = result.root
    case.steps = result.steps if hasattr(result, 'steps') else result.iterations
    case.times_ns = time_function(case.run, ITERATIONS, WARMUP)
    return case


def print_summary(cases: List[BenchmarkCase]) -> None:
    rows = []
    for case in cases:
        sample = get_sample(case.sample)
        residual = abs(sample.func(case.root)) if case.root is not None else math.nan
        rows.append((
            case.sample,
            case.name,
            "✓" if case.ok else "✗",
            case.root,
            residual,
            case.steps,
            format_ns(case.median_ns),
        ))
    print(tabulate(
        rows,
        headers=["sample", "method", "ok", "root", "|F(root)|", "steps", "median"],
        floatfmt=".12g",
    ))


def main():
    """Main entry point."""
    print("rootfind benchmark")
    print(f"Python {sys.version}")
    print(f"Platform: {sys.platform}")
    print()

    cases = [run_case(case) for case in build_cases()]
    print_summary(cases)
    return cases


if __name__ == '__main__':
    main()
