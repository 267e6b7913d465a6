"""Progress bar shown while benchmarks run."""

from __future__ import annotations

import os

from tqdm import tqdm

from .options import OutputStyleOption

_BAR_FORMAT = " {desc:<30} {bar} ETA {remaining} "
_ASCII_BAR = os.name == "nt"


def get_progress_bar(length: int, msg: str, option: OutputStyleOption) -> tqdm:
    """Return a configured progress bar; it is hidden for the basic and color styles."""
    hidden = option in (OutputStyleOption.BASIC, OutputStyleOption.COLOR)
    bar = tqdm(
        total=length,
        bar_format=_BAR_FORMAT,
        ascii=_ASCII_BAR,
        disable=hidden,
        leave=False,
        dynamic_ncols=True,
    )
    bar.set_description_str(msg)
    return bar