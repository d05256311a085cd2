import math

import numpy as np
import pytest

from trisolve import InvalidCoordinate, Point, distance, round_to_precision
from trisolve.primitives import (
    barycentric_to_cartesian,
    compact_raw_point,
    describe_raw_point,
    equal_float,
    incircle_radius,
    normalize_point,
    to_float,
)


@pytest.mark.parametrize(
    'p1, p2',
    [
        ([-2, -2], [2, 1]),
        ({'x': -2, 'y': -2}, {'X': 2, 'Y': 1}),
        ((-2, -2), Point(2.0, 1.0)),
        (np.array([-2.0, -2.0]), ['2', '1']),
    ],
)
def test_distance_accepts_every_point_representation(p1, p2):
    assert distance(p1, p2) == 5


def test_distance_is_zero_for_identical_points():
    assert distance([1.5, -3], {'x': 1.5, 'y': -3}) == 0


@pytest.mark.parametrize(
    'raw',
    [
        {'x': 1},
        {'x': 1, 'Y': 2},
        [1],
        ' 1,2',
        None,
        ['a', 2],
        {'X': float('nan'), 'Y': 0},
    ],
)
def test_normalize_point_rejects_unreadable_coordinates(raw):
    with pytest.raises(InvalidCoordinate) as exc:
        normalize_point(raw, 'B')

    assert exc.value.message.startswith('Illegal Parameter: B:')
    assert exc.value.details['point'] == 'B'


def test_normalize_point_keeps_first_two_items_of_longer_sequences():
    assert normalize_point([1, 2, 3]) == Point(1.0, 2.0)


def test_raw_point_rendering():
    assert describe_raw_point({'x': 1}) == "{'x': 1}"
    assert compact_raw_point([0, 0]) == '[0,0]'
    assert compact_raw_point({'X': 1, 'Y': 2}) == '{X:1,Y:2}'


@pytest.mark.parametrize(
    'value, expected',
    [(3, 3.0), ('2.5', 2.5), (' 7 ', 7.0), (np.float64(1.25), 1.25)],
)
def test_to_float_coerces_numbers_and_numeric_strings(value, expected):
    assert to_float(value) == expected


@pytest.mark.parametrize('value', ['abc', True, None, [1], object(), 10 ** 400])
def test_to_float_returns_nan_for_everything_else(value):
    assert math.isnan(to_float(value))


@pytest.mark.parametrize(
    'value, precision, expected',
    [
        (1.23456, 2, 1.23),
        (2.5, 0, 3.0),
        (-2.5, 0, -2.0),
        (1.23456, 2.7, 1.23),
        (1.005, -1, 1.005),
    ],
)
def test_round_to_precision(value, precision, expected):
    assert round_to_precision(value, precision) == pytest.approx(expected)


def test_equal_float_uses_absolute_tolerance():
    assert equal_float(60.0, 60.0009)
    assert not equal_float(60.0, 60.002)
    assert equal_float(1.0, 1.05, max_difference=0.1)


def test_incircle_radius_of_right_triangle():
    assert incircle_radius(3, 4, 5) == pytest.approx(1.0)
    assert incircle_radius(3e200, 4e200, 5e200) == pytest.approx(1e200)
    assert incircle_radius(3e-200, 4e-200, 5e-200) == pytest.approx(1e-200)


def test_round_to_precision_passes_non_finite_values_through():
    assert round_to_precision(math.inf, 2) == math.inf
    assert math.isnan(round_to_precision(math.nan, 2))
    assert round_to_precision(1e300, 10) == 1e300


def test_barycentric_weights_are_normalised():
    vertices = (Point(0, 0), Point(3, 0), Point(0, 3))

    centroid = barycentric_to_cartesian(vertices, (1, 1, 1))
    assert centroid.x == pytest.approx(1.0)
    assert centroid.y == pytest.approx(1.0)
    assert barycentric_to_cartesian(vertices, (2, 0, 0)) == Point(0.0, 0.0)
    midpoint = barycentric_to_cartesian(vertices, (0, 5, 5))
    assert midpoint.x == pytest.approx(1.5)
    assert midpoint.y == pytest.approx(1.5)
