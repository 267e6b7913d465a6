"""Settings for a benchmark session and how they are read from parsed arguments."""

from __future__ import annotations

import os
import re
import shlex
import subprocess
import sys
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path, PurePath
from typing import IO, Any

from .units import Unit

_WINDOWS = os.name == "nt"

DEFAULT_SHELL = "cmd.exe" if _WINDOWS else "sh"

_U64_MAX = 2**64 - 1
_UINT_RE = re.compile(r"\+?[0-9]+")


class OptionsError(ValueError):
    """Raised for invalid or inconsistent options.

    ``kind`` tells which of the class-level kinds the error is.
    """

    EMPTY_RUNS_RANGE = "empty_runs_range"
    INT_PARSING = "int_parsing"
    FLOAT_PARSING = "float_parsing"
    SHELL_PARSE = "shell_parse"
    EMPTY_SHELL = "empty_shell"
    UNKNOWN_OUTPUT_POLICY = "unknown_output_policy"
    UNKNOWN_SORT_ORDER = "unknown_sort_order"
    STDIN_DATA_FILE_DOES_NOT_EXIST = "stdin_data_file_does_not_exist"
    COMMAND_COUNT_MISMATCH = "command_count_mismatch"

    def __init__(self, kind: str, message: str) -> None:
        super().__init__(message)
        self.kind = kind


@dataclass(frozen=True)
class Shell:
    """Shell used to run benchmarked commands: the default one or a custom command line."""

    argv: tuple[str, ...] = (DEFAULT_SHELL,)
    custom: bool = False

    @classmethod
    def default(cls) -> Shell:
        return cls()

    @classmethod
    def parse_from_str(cls, s: str) -> Shell:
        """Parse a shell command line such as ``bash -x``."""
        try:
            words = shlex.split(s, posix=True)
        except ValueError as exc:
            raise OptionsError(
                OptionsError.SHELL_PARSE, f"Could not parse the '--shell' value: {exc}"
            ) from exc
        if not words or not words[0]:
            raise OptionsError(OptionsError.EMPTY_SHELL, "The '--shell' value is empty")
        return cls(tuple(words), custom=True)

    def command(self) -> list[str]:
        """The argument vector that starts this shell."""
        return list(self.argv)

    def __str__(self) -> str:
        if self.custom:
            return shlex.join(self.argv)
        return self.argv[0]


class CmdFailureAction(Enum):
    """Action to take when a benchmarked command fails."""

    RAISE_ERROR = "raise-error"
    IGNORE = "ignore"


class OutputStyleOption(Enum):
    """How terminal output is styled."""

    BASIC = "basic"
    FULL = "full"
    NO_COLOR = "nocolor"
    COLOR = "color"
    DISABLED = "none"


class SortOrder(Enum):
    COMMAND = "command"
    MEAN_TIME = "mean-time"


@dataclass
class RunBounds:
    """Bounds for the number of benchmark runs."""

    min: int = 10
    max: int | None = None


@dataclass(frozen=True)
class CommandInputPolicy:
    """Where the benchmarked command reads its input from: the null device or a file."""

    path: Path | None = None

    @classmethod
    def null(cls) -> CommandInputPolicy:
        return cls()

    @classmethod
    def file(cls, path: str | os.PathLike[str]) -> CommandInputPolicy:
        return cls(Path(path))

    def open_stdin(self) -> int | IO[bytes]:
        """A value for subprocess's ``stdin``; an opened file must be closed by the caller."""
        if self.path is None:
            return subprocess.DEVNULL
        return open(self.path, "rb")


@dataclass(frozen=True)
class CommandOutputPolicy:
    """What happens to the output of the benchmarked command."""

    NULL = "null"
    PIPE = "pipe"
    FILE = "file"
    INHERIT = "inherit"

    kind: str = "null"
    path: Path | None = None

    @classmethod
    def null(cls) -> CommandOutputPolicy:
        return cls(cls.NULL)

    @classmethod
    def pipe(cls) -> CommandOutputPolicy:
        return cls(cls.PIPE)

    @classmethod
    def inherit(cls) -> CommandOutputPolicy:
        return cls(cls.INHERIT)

    @classmethod
    def file(cls, path: str | os.PathLike[str]) -> CommandOutputPolicy:
        return cls(cls.FILE, Path(path))

    def open_streams(self) -> tuple[Any, Any]:
        """Values for subprocess's ``stdout`` and ``stderr``.

        An opened file must be closed by the caller.
        """
        if self.kind == self.NULL:
            return subprocess.DEVNULL, subprocess.DEVNULL
        if self.kind == self.PIPE:
            # Typically only stdout is performance-relevant, so only that is piped.
            return subprocess.PIPE, subprocess.DEVNULL
        if self.kind == self.FILE:
            assert self.path is not None
            return open(self.path, "wb"), subprocess.DEVNULL
        return None, None


@dataclass(frozen=True)
class ExecutorKind:
    """How commands are run: directly, through a shell, or by a mock executor."""

    RAW = "raw"
    SHELL = "shell"
    MOCK = "mock"

    kind: str = "shell"
    shell: Shell | None = field(default_factory=Shell.default)
    mock_shell: str | None = None

    @classmethod
    def raw(cls) -> ExecutorKind:
        return cls(cls.RAW, None)

    @classmethod
    def with_shell(cls, shell: Shell) -> ExecutorKind:
        return cls(cls.SHELL, shell)

    @classmethod
    def mock(cls, mock_shell: str | None = None) -> ExecutorKind:
        return cls(cls.MOCK, None, mock_shell)


def _parse_count(matches: Mapping[str, Any], param: str) -> int | None:
    text = matches.get(param)
    if text is None:
        return None
    text = str(text)
    if not _UINT_RE.fullmatch(text) or int(text) > _U64_MAX:
        raise OptionsError(
            OptionsError.INT_PARSING,
            f"Could not parse '--{param}' value '{text}' as a non-negative integer",
        )
    return int(text)


def _parse_float(param: str, text: str) -> float:
    error = OptionsError(
        OptionsError.FLOAT_PARSING,
        f"Could not parse '--{param}' value '{text}' as a number",
    )
    if "_" in text or text != text.strip() or not text:
        raise error
    try:
        return float(text)
    except ValueError:
        raise error from None


def _component_count(arg: str) -> int:
    count = len(PurePath(arg).parts)
    if arg == "." or arg.startswith("./") or (_WINDOWS and arg.startswith(".\\")):
        count += 1
    return count


def _auto_output_style(output_policy: CommandOutputPolicy) -> OutputStyleOption:
    if output_policy.kind == CommandOutputPolicy.INHERIT or not sys.stdout.isatty():
        return OutputStyleOption.BASIC
    term = os.environ.get("TERM")
    plain_term = term in ("unknown", "dumb") if term is not None else not _WINDOWS
    if plain_term or os.environ.get("NO_COLOR"):
        return OutputStyleOption.NO_COLOR
    return OutputStyleOption.FULL


_STYLES = {
    "full": OutputStyleOption.FULL,
    "basic": OutputStyleOption.BASIC,
    "nocolor": OutputStyleOption.NO_COLOR,
    "color": OutputStyleOption.COLOR,
    "none": OutputStyleOption.DISABLED,
}

_SORT_ORDERS = {
    None: (SortOrder.MEAN_TIME, SortOrder.COMMAND),
    "auto": (SortOrder.MEAN_TIME, SortOrder.COMMAND),
    "command": (SortOrder.COMMAND, SortOrder.COMMAND),
    "mean-time": (SortOrder.MEAN_TIME, SortOrder.MEAN_TIME),
}

_TIME_UNITS = {
    "microsecond": Unit.MICROSECOND,
    "millisecond": Unit.MILLISECOND,
    "second": Unit.SECOND,
}


@dataclass
class Options:
    """The main settings for a benchmark session."""

    run_bounds: RunBounds = field(default_factory=RunBounds)
    warmup_count: int = 0
    min_benchmarking_time: float = 3.0
    command_failure_action: CmdFailureAction = CmdFailureAction.RAISE_ERROR
    preparation_command: list[str] | None = None
    conclusion_command: list[str] | None = None
    setup_command: str | None = None
    cleanup_command: str | None = None
    output_style: OutputStyleOption = OutputStyleOption.FULL
    sort_order_speed_comparison: SortOrder = SortOrder.MEAN_TIME
    sort_order_exports: SortOrder = SortOrder.COMMAND
    executor_kind: ExecutorKind = field(default_factory=ExecutorKind)
    command_input_policy: CommandInputPolicy = field(default_factory=CommandInputPolicy)
    command_output_policy: CommandOutputPolicy = field(default_factory=CommandOutputPolicy)
    time_unit: Unit | None = None

    @classmethod
    def from_cli_arguments(cls, matches: Mapping[str, Any]) -> Options:
        """Build options from parsed arguments.

        ``matches`` maps long option names to their string values, to lists of
        strings for repeatable options, and to booleans for flags. Absent
        options may be missing or None.
        """
        options = cls()

        warmup = _parse_count(matches, "warmup")
        if warmup is not None:
            options.warmup_count = warmup

        min_runs = _parse_count(matches, "min-runs")
        max_runs = _parse_count(matches, "max-runs")
        runs = _parse_count(matches, "runs")
        if runs is not None:
            min_runs = max_runs = runs

        if min_runs is not None and max_runs is not None:
            if min_runs > max_runs:
                raise OptionsError(
                    OptionsError.EMPTY_RUNS_RANGE,
                    "The minimum number of runs is larger than the maximum number of runs",
                )
            options.run_bounds = RunBounds(min_runs, max_runs)
        elif min_runs is not None:
            options.run_bounds.min = min_runs
        elif max_runs is not None:
            # The minimum was not given, so lower it if the maximum is below the default.
            options.run_bounds.min = min(options.run_bounds.min, max_runs)
            options.run_bounds.max = max_runs

        setup = matches.get("setup")
        options.setup_command = None if setup is None else str(setup)
        prepare = matches.get("prepare")
        options.preparation_command = None if prepare is None else [str(v) for v in prepare]
        conclude = matches.get("conclude")
        options.conclusion_command = None if conclude is None else [str(v) for v in conclude]
        cleanup = matches.get("cleanup")
        options.cleanup_command = None if cleanup is None else str(cleanup)

        output = matches.get("output")
        if matches.get("show-output"):
            options.command_output_policy = CommandOutputPolicy.inherit()
        elif output is None or output == "null":
            options.command_output_policy = CommandOutputPolicy.null()
        elif output == "pipe":
            options.command_output_policy = CommandOutputPolicy.pipe()
        elif output == "inherit":
            options.command_output_policy = CommandOutputPolicy.inherit()
        else:
            if _component_count(output) <= 1:
                raise OptionsError(
                    OptionsError.UNKNOWN_OUTPUT_POLICY,
                    f"Unknown output policy '{output}'. Use './{output}' to output to a file "
                    "named '{output}'.".replace("{output}", output),
                )
            options.command_output_policy = CommandOutputPolicy.file(output)

        style = _STYLES.get(matches.get("style"))
        options.output_style = (
            style if style is not None else _auto_output_style(options.command_output_policy)
        )

        sort = matches.get("sort")
        if sort not in _SORT_ORDERS:
            raise OptionsError(OptionsError.UNKNOWN_SORT_ORDER, f"Unknown sort order '{sort}'")
        options.sort_order_speed_comparison, options.sort_order_exports = _SORT_ORDERS[sort]

        shell = matches.get("shell")
        if matches.get("no-shell"):
            options.executor_kind = ExecutorKind.raw()
        elif matches.get("debug-mode"):
            options.executor_kind = ExecutorKind.mock(None if shell is None else str(shell))
        elif shell is None or shell == "default":
            options.executor_kind = ExecutorKind.with_shell(Shell.default())
        elif shell == "none":
            options.executor_kind = ExecutorKind.raw()
        else:
            options.executor_kind = ExecutorKind.with_shell(Shell.parse_from_str(shell))

        if matches.get("ignore-failure"):
            options.command_failure_action = CmdFailureAction.IGNORE

        options.time_unit = _TIME_UNITS.get(matches.get("time-unit"))

        min_time = matches.get("min-benchmarking-time")
        if min_time is not None:
            options.min_benchmarking_time = _parse_float("min-benchmarking-time", str(min_time))

        input_path = matches.get("input")
        if input_path is None or input_path == "null":
            options.command_input_policy = CommandInputPolicy.null()
        else:
            if not Path(input_path).exists():
                raise OptionsError(
                    OptionsError.STDIN_DATA_FILE_DOES_NOT_EXIST,
                    f"The file '{input_path}' specified as '--input' does not exist",
                )
            options.command_input_policy = CommandInputPolicy.file(input_path)

        return options

    def validate_against_command_list(self, num_commands: int) -> None:
        """Check that per-command options were given once or once per command."""
        for name, values in (
            ("prepare", self.preparation_command),
            ("conclude", self.conclusion_command),
        ):
            if values is not None and len(values) > 1 and len(values) != num_commands:
                raise OptionsError(
                    OptionsError.COMMAND_COUNT_MISMATCH,
                    f"The '--{name}' option has to be provided just once or N times, "
                    "where N is the number of benchmark commands.",
                )