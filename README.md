# hyperbench

Building blocks for benchmarking shell commands: readable duration
formatting, outlier detection, comma-separated parameter lists and stepped
parameter ranges, session options read from parsed command-line arguments,
user-facing warnings, a progress bar, and CSV and JSON exports of benchmark
results.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `hyperbench.units` – `Unit` (`SECOND`, `MILLISECOND`, `MICROSECOND`) with
  `short_name()` (`"s"`, `"ms"`, `"µs"`) and `format(value)`, which formats a
  value in seconds with three decimals for seconds and one decimal for
  milliseconds and microseconds.
- `hyperbench.format` – `format_duration`, `format_duration_unit` and
  `format_duration_value`. Without a unit, durations below 1 ms are shown in
  µs, below 1 s in ms, and otherwise in s.
- `hyperbench.stats` – `min_value`, `max_value`, `modified_zscores` and
  `num_outliers`. A point is an outlier when its modified Z-score (distance
  from the median divided by the median absolute deviation) exceeds
  `OUTLIER_THRESHOLD` (1.4826 × 10).
- `hyperbench.number` – `ParameterValue`, holding text, an `int` or a
  `Decimal`, and `number_to_count`, which turns a number into a non-negative
  count or raises `ValueError`.
- `hyperbench.tokenize` – `tokenize` splits a comma-separated list; `\,` is a
  literal comma and `\\` a backslash.
- `hyperbench.range_step` – `RangeStep(start, end, step)` iterates from
  `start` up to and including `end`. It raises `ParameterScanError` for an
  empty range, a zero step, or more than 100,000 values.
- `hyperbench.process` – `extract_exit_code` (on POSIX, a process killed by a
  signal gives 128 plus the signal number) and
  `randomized_environment_offset`, a string of 0–4095 `X` characters.
- `hyperbench.options` – `Options.from_cli_arguments(matches)` builds the
  session settings from a mapping of long option names (`"runs"`,
  `"min-runs"`, `"max-runs"`, `"warmup"`, `"prepare"`, `"conclude"`,
  `"setup"`, `"cleanup"`, `"output"`, `"show-output"`, `"style"`, `"sort"`,
  `"shell"`, `"no-shell"`, `"debug-mode"`, `"ignore-failure"`, `"time-unit"`,
  `"min-benchmarking-time"`, `"input"`) to their values. Invalid values raise
  `OptionsError`, whose `kind` tells which check failed. The module also holds
  `Shell`, `RunBounds`, `CommandInputPolicy`, `CommandOutputPolicy`,
  `ExecutorKind`, `SortOrder`, `OutputStyleOption` and `CmdFailureAction`;
  the input and output policies give values ready for `subprocess`.
- `hyperbench.export.structured` – `BenchmarkResult`, `CsvExporter` and
  `JsonExporter`, each with `serialize(results, unit, sort_order)` returning
  bytes.
- `hyperbench.warnings` – `FastExecutionTime`, `NonZeroExitCode`,
  `SlowInitialRun` and `OutliersDetected`, whose `str()` is the message shown
  to the user, and `OutlierWarningOptions`.
- `hyperbench.progress_bar` – `get_progress_bar(length, msg, option)` returns
  a `tqdm` bar, disabled for the basic and color output styles.

## Examples

```python
from hyperbench.format import format_duration_unit
from hyperbench.tokenize import tokenize
from hyperbench.range_step import RangeStep
from hyperbench.stats import num_outliers

format_duration_unit(0.0005, None)      # ("500.0 µs", Unit.MICROSECOND)
tokenize(r"hello\, world!,foo")         # ["hello, world!", "foo"]
list(RangeStep(0, 10, 3))               # [0, 3, 6, 9]
num_outliers([-0.2, 0.0, 0.2, 4.0])     # 1
```

Reading options:

```python
from hyperbench.options import Options

options = Options.from_cli_arguments({"runs": "5", "style": "basic"})
options.run_bounds.min, options.run_bounds.max   # (5, 5)
options.validate_against_command_list(2)
```

Exporting results as CSV:

```python
from hyperbench.export.structured import BenchmarkResult, CsvExporter
from hyperbench.options import SortOrder

result = BenchmarkResult(
    command="sleep 0.1",
    command_with_unused_parameters="sleep 0.1",
    mean=0.1057, stddev=0.0016, median=0.1057,
    user=0.0009, system=0.0011, min=0.1023, max=0.108,
)
print(CsvExporter().serialize([result], None, SortOrder.COMMAND).decode())
```

## What this package does not do

- It has no command-line program; nothing is installed to run from a shell.
- It does not start, run or time benchmarked commands, and it does not
  measure user or system CPU time. It provides the settings and the
  `subprocess` stream values for doing so, but not the loop that does it.
- It does not compute relative speeds between commands, and it does not
  export Markdown, AsciiDoc or Emacs org-mode tables. Only CSV and JSON
  exports are available.