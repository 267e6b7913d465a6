"""Benchmark results and their CSV and JSON exporters."""