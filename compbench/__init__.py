"""Micro-benchmarks with binary result files, per-compiler summaries and plots."""

__version__ = "0.1.0"

__all__ = [
    "bench",
    "cases",
    "container_io",
    "containers",
    "datastream",
    "enums",
    "graph",
    "info",
    "plot",
    "runner",
    "style",
    "top10",
]