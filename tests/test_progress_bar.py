import pytest

from hyperbench.options import OutputStyleOption
from hyperbench.progress_bar import get_progress_bar


@pytest.mark.parametrize("option", [OutputStyleOption.BASIC, OutputStyleOption.COLOR])
def test_hidden_for_basic_and_color(option):
    bar = get_progress_bar(10, "Running", option)
    try:
        assert bar.disable is True
    finally:
        bar.close()


@pytest.mark.parametrize(
    "option",
    [OutputStyleOption.FULL, OutputStyleOption.NO_COLOR, OutputStyleOption.DISABLED],
)
def test_visible_bar_has_length_and_message(option):
    bar = get_progress_bar(7, "Performing warmup runs", option)
    try:
        assert bar.disable is False
        assert bar.total == 7
        assert bar.desc == "Performing warmup runs"
    finally:
        bar.close()


def test_visible_bar_advances():
    bar = get_progress_bar(3, "Measuring", OutputStyleOption.FULL)
    try:
        bar.update(2)
        assert bar.n == 2
    finally:
        bar.close()