import sys

import pytest

from hyperbench.stats import max_value, min_value, modified_zscores, num_outliers

EPSILON = sys.float_info.epsilon


@pytest.mark.parametrize(
    "vals, expected",
    [
        ([1.0], 1.0),
        ([-1.0], -1.0),
        ([-2.0, -1.0], -1.0),
        ([-1.0, 1.0], 1.0),
        ([-1.0, 1.0, 0.0], 1.0),
    ],
)
def test_max(vals, expected):
    result = max_value(vals)
    assert abs(result - expected) < EPSILON


def test_min():
    first = min_value([-2.0, -1.0])
    assert abs(first - (-2.0)) < EPSILON
    second = min_value([-1.0, 1.0, 0.0])
    assert abs(second - (-1.0)) < EPSILON


def test_min_max_empty_raise():
    with pytest.raises(ValueError):
        max_value([])
    with pytest.raises(ValueError):
        min_value([])


def test_modified_zscores_empty_raises():
    with pytest.raises(ValueError):
        modified_zscores([])


def test_modified_zscores_median_is_zero():
    scores = modified_zscores([1.0, 2.0, 3.0])
    assert scores[1] == 0.0
    assert scores[0] == -scores[2]


NORMAL_SAMPLE = [
    2.33269488,
    1.42195907,
    -0.57527698,
    -0.31293437,
    2.2948158,
    0.75813273,
    -1.0712388,
    -0.96394741,
    -1.15897446,
    1.10976285,
]


@pytest.mark.parametrize(
    "xs, expected",
    [
        ([], 0),
        ([50.0], 0),
        ([1000.0, 0.0], 0),
        ([-0.2, 0.0, 0.2], 0),
        ([-0.2, 0.0, 0.2, 4.0], 1),
        ([0.5, 0.30, 0.29, 0.31, 0.30], 1),
        (NORMAL_SAMPLE, 0),
        (NORMAL_SAMPLE + [20.0, -500.0], 2),
    ],
)
def test_detect_outliers(xs, expected):
    assert num_outliers(xs) == expected


def test_detect_outliers_if_mad_becomes_0():
    assert num_outliers([10.0] * 7 + [100.0]) == 1
    assert num_outliers([10.0] * 7 + [100.0, 100.0]) == 2