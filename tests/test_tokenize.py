import pytest

from hyperbench.tokenize import tokenize


@pytest.mark.parametrize(
    "text, expected",
    [
        (r"", [""]),
        (r"foo", ["foo"]),
        (r" ", [" "]),
        (r"hello\, world!", ["hello, world!"]),
        (r"\,", [","]),
        (r"\,\,\,", [",,,"]),
        (r"\n", [r"\n"]),
        (r"\\", ["\\"]),
        (r"\\\,", [r"\,"]),
    ],
)
def test_tokenize_single_value(text, expected):
    assert tokenize(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        (r"foo,bar,baz", ["foo", "bar", "baz"]),
        (r"hello world,foo", ["hello world", "foo"]),
        (r"hello\,world!,baz", ["hello,world!", "baz"]),
    ],
)
def test_tokenize_multiple_values(text, expected):
    assert tokenize(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        (r"foo,,bar", ["foo", "", "bar"]),
        (r",bar", ["", "bar"]),
        (r"bar,", ["bar", ""]),
        (r",,", ["", "", ""]),
    ],
)
def test_tokenize_empty_values(text, expected):
    assert tokenize(text) == expected


def test_trailing_backslash_is_kept():
    assert tokenize("a\\") == ["a\\"]