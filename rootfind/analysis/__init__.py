"""Diagnostics for iterate sequences and bracket discovery."""

from rootfind.analysis.convergence import (
    ConvergenceAnalyzer,
    ConvergenceBehaviour,
    ConvergenceReport,
    ContractionEstimate,
    iterations_bound,
    bisection_steps,
)
from rootfind.analysis.brackets import scan_brackets

__all__ = [
    'ConvergenceAnalyzer',
    'ConvergenceBehaviour',
    'ConvergenceReport',
    'ContractionEstimate',
    'iterations_bound',
    'bisection_steps',
    'scan_brackets',
]
