"""Benchmark results and their CSV and JSON exports."""

from __future__ import annotations

import csv
import io
import json
import math
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Sequence

from ..options import SortOrder
from ..units import Unit


@dataclass
class BenchmarkResult:
    """Measurements for one benchmarked command."""

    command: str
    command_with_unused_parameters: str
    mean: float
    stddev: float | None
    median: float
    user: float
    system: float
    min: float
    max: float
    times: list[float] | None = None
    exit_codes: list[int | None] = field(default_factory=list)
    parameters: dict[str, str] = field(default_factory=dict)

    def to_json_dict(self) -> dict[str, Any]:
        """The result as it appears in a JSON export."""
        data: dict[str, Any] = {
            "command": self.command,
            "mean": self.mean,
            "stddev": self.stddev,
            "median": self.median,
            "user": self.user,
            "system": self.system,
            "min": self.min,
            "max": self.max,
            "times": self.times,
            "exit_codes": self.exit_codes,
        }
        if self.parameters:
            data["parameters"] = dict(sorted(self.parameters.items()))
        return data


def _format_float(value: float) -> str:
    """Shortest decimal text for a float, without exponent or trailing '.0'."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = repr(value)
    if "e" in text or "E" in text:
        text = format(Decimal(text), "f")
    if text.endswith(".0"):
        text = text[:-2]
    return text


class CsvExporter:
    """Exports results as comma separated values; times and exit codes are omitted."""

    def serialize(
        self,
        results: Sequence[BenchmarkResult],
        unit: Unit | None = None,
        sort_order: SortOrder = SortOrder.COMMAND,
    ) -> bytes:
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")

        headers = ["command", "mean", "stddev", "median", "user", "system", "min", "max"]
        if results:
            headers.extend(f"parameter_{name}" for name in sorted(results[0].parameters))
        writer.writerow(headers)

        for res in results:
            numbers = (
                res.mean,
                res.stddev if res.stddev is not None else 0.0,
                res.median,
                res.user,
                res.system,
                res.min,
                res.max,
            )
            row = [res.command, *map(_format_float, numbers)]
            row.extend(value for _, value in sorted(res.parameters.items()))
            writer.writerow(row)

        return buffer.getvalue().encode("utf-8")


class JsonExporter:
    """Exports results as pretty-printed JSON."""

    def serialize(
        self,
        results: Sequence[BenchmarkResult],
        unit: Unit | None = None,
        sort_order: SortOrder = SortOrder.COMMAND,
    ) -> bytes:
        summary = {"results": [res.to_json_dict() for res in results]}
        text = json.dumps(summary, indent=2, ensure_ascii=False)
        return (text + "\n").encode("utf-8")