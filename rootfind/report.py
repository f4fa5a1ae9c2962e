"""
Reporting
=========

Text tables and plots for search results:
  - iterate tables (plain text, Markdown or LaTeX via tabulate)
  - one-paragraph summaries for bisection and fixed-point runs
  - iterate plots (matplotlib, ``pip install rootfind[plot]``)
"""

from typing import Optional, Sequence

from tabulate import tabulate

from rootfind.analysis.convergence import ConvergenceAnalyzer, ConvergenceReport
from rootfind.search.result import BisectionResult, FixedPointResult, SearchStatus
from rootfind.utils.helpers import format_seconds


def iterate_table(
    iterates: Sequence[float],
    tablefmt: str = "simple",
    max_rows: Optional[int] = None,
    floatfmt: str = ".10g",
) -> str:
    """
    Tabulate x_0 .. x_N with the step |x_n - x_{n-1}|.

    When ``max_rows`` is given, only the first and last rows are kept
    with a gap marker between them.
    """
    rows = []
    previous = None
    for n, x in enumerate(iterates):
        step = abs(x - previous) if previous is not None else None
        rows.append((n, x, step))
        previous = x

    if max_rows is not None and len(rows) > max_rows:
        head = max_rows // 2
        tail = max_rows - head
        rows = rows[:head] + [("...", None, None)] + rows[-tail:]

    return tabulate(
        rows,
        headers=["n", "x_n", "|x_n - x_{n-1}|"],
        tablefmt=tablefmt,
        floatfmt=floatfmt,
        missingval="",
    )


def format_bisection(result: BisectionResult, name: str = "F") -> str:
    a, b = result.interval
    if result.status == SearchStatus.INVALID_BRACKET:
        fa, fb = result.f_endpoints
        return (
            f"Bisection of {name} on [{a:g}, {b:g}]: invalid bracket, "
            f"{name}(a)={fa:.6g} and {name}(b)={fb:.6g} do not change sign."
        )
    lines = [
        f"Bisection of {name}: {result.status.name.lower().replace('_', ' ')}",
        tabulate(
            [
                ("root", result.root),
                (f"{name}(root)", result.f_root),
                ("steps", result.steps),
                ("final interval", f"[{a:.12g}, {b:.12g}]"),
                ("width", result.width),
                ("time", format_seconds(result.wall_time_seconds)),
            ],
            tablefmt="plain",
            floatfmt=".12g",
        ),
    ]
    return "\n".join(lines)


def format_fixed_point(
    result: FixedPointResult,
    name: str = "f",
    show_iterates: bool = False,
    analysis: Optional[ConvergenceReport] = None,
    max_rows: Optional[int] = 20,
) -> str:
    if analysis is None:
        analysis = ConvergenceAnalyzer().analyse(result.iterates)

    status = result.status.name.lower().replace('_', ' ')
    rows = []
    if result.ok:
        rows.append(("fixed point", result.root))
    else:
        rows.append(("last iterate", result.iterates[-1]))
    rows.extend([
        ("iterations", result.iterations),
        ("last step", result.last_step),
        ("behaviour", analysis.behaviour.name.lower()),
        ("rate", analysis.convergence_rate),
        ("contraction k", analysis.contraction_factor),
        ("time", format_seconds(result.wall_time_seconds)),
    ])
    lines = [
        f"Fixed-point iteration of {name}: {status}",
        tabulate(rows, tablefmt="plain", floatfmt=".12g"),
    ]
    if show_iterates or not result.ok:
        lines.append("")
        lines.append(iterate_table(result.iterates, max_rows=max_rows))
    return "\n".join(lines)


def plot_iterates(
    iterates: Sequence[float],
    func=None,
    path: Optional[str] = None,
    title: str = "Fixed-point iterates",
):
    """
    Plot an iterate sequence against n; with ``func`` also draw the
    cobweb diagram of the map against y = x.

    Returns the matplotlib Figure; saves it when ``path`` is given.
    """
    import numpy as np
    from matplotlib.figure import Figure

    xs = list(iterates)
    finite = [x for x in xs if np.isfinite(x)]
    # no cobweb panel when every iterate overflowed
    cobweb = func is not None and bool(finite)
    if not cobweb:
        fig = Figure(figsize=(6, 4))
        ax = fig.add_subplot(1, 1, 1)
    else:
        fig = Figure(figsize=(11, 4))
        ax = fig.add_subplot(1, 2, 1)

    ax.plot(range(len(xs)), xs, marker="o")
    ax.set_xlabel("n")
    ax.set_ylabel("x_n")
    ax.set_title(title)
    ax.grid(True, alpha=0.3)

    if cobweb:
        cob = fig.add_subplot(1, 2, 2)
        lo, hi = min(finite), max(finite)
        pad = 0.1 * (hi - lo) if hi > lo else 1.0
        grid = np.linspace(lo - pad, hi + pad, 400)
        cob.plot(grid, [func(float(x)) for x in grid], label="f(x)")
        cob.plot(grid, grid, linestyle="--", label="y = x")
        for x0, x1 in zip(xs, xs[1:]):
            cob.plot([x0, x0], [x0, x1], color="grey", linewidth=0.8)
            cob.plot([x0, x1], [x1, x1], color="grey", linewidth=0.8)
        cob.set_xlabel("x")
        cob.set_title("Cobweb")
        cob.legend()
        cob.grid(True, alpha=0.3)

    fig.tight_layout()
    if path is not None:
        fig.savefig(path)
    return fig
