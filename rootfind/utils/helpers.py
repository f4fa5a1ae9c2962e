"""Utility helpers for rootfind."""

import time


class Timer:
    """High-resolution timer for measuring a search."""
    
    def __init__(self):
        self.start_ns = 0
        self.end_ns = 0
    
    def __enter__(self):
        self.start_ns = time.perf_counter_ns()
        return self
    
    def __exit__(self, *exc):
        self.end_ns = time.perf_counter_ns()
    
    @property
    def elapsed_ns(self) -> int:
        return self.end_ns - self.start_ns
    
    @property
    def elapsed_s(self) -> float:
        return self.elapsed_ns / 1_000_000_000.0


def format_ns(ns: float) -> str:
    """Format nanoseconds into a human-readable string."""
    if ns < 1_000:
        return f"{ns:.0f} ns"
    elif ns < 1_000_000:
        return f"{ns / 1_000:.1f} µs"
    elif ns < 1_000_000_000:
        return f"{ns / 1_000_000:.2f} ms"
    else:
        return f"{ns / 1_000_000_000:.3f} s"


def format_seconds(seconds: float) -> str:
    return format_ns(seconds * 1_000_000_000.0)
