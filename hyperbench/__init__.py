"""Benchmarking building blocks: duration formatting, statistics, parameter scans, options and exports."""

__version__ = "0.1.0"