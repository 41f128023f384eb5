import math

import pytest

from classiclauncher.mathutils import clamp, get_angle, get_angle_360, random_between


@pytest.mark.parametrize(
    "value, low, high, expected",
    [
        (5, 0, 10, 5),
        (-1, 0, 10, 0),
        (11, 0, 10, 10),
        (2.5, 1.0, 3.0, 2.5),
        (0.5, 1.0, 3.0, 1.0),
        (7.5, 1.0, 3.0, 3.0),
    ],
)
def test_clamp(value, low, high, expected):
    assert clamp(value, low, high) == expected


def test_clamp_low_wins_when_bounds_inverted():
    # The upper bound is applied first, then the lower one.
    assert clamp(5, 8, 2) == 8


def test_random_between_stays_in_range():
    samples = [random_between(1, 3000) for _ in range(500)]
    assert all(1 <= s <= 3000 for s in samples)
    assert len(set(samples)) > 1


def test_get_angle_along_positive_x_is_zero():
    assert get_angle(0, 0, 5, 0) == pytest.approx(0.0)


def test_get_angle_downward_is_negative_quarter_turn():
    assert get_angle(0, 0, 0, 1) == pytest.approx(-90.0)


def test_get_angle_is_translation_invariant():
    assert get_angle(3, 4, 8, 9) == pytest.approx(get_angle(0, 0, 5, 5))


def test_get_angle_360_maps_negative_angles():
    assert get_angle_360(0, 0, 0, 1) == pytest.approx(270.0)


@pytest.mark.parametrize(
    "point", [(1, 0), (1, 1), (0, 1), (-1, 1), (-1, -1), (0, -1), (2, -3)]
)
def test_get_angle_360_range_and_consistency(point):
    x, y = point
    angle = get_angle(0, 0, x, y)
    full = get_angle_360(0, 0, x, y)
    assert 0 <= full < 360
    assert math.isclose(full % 360, angle % 360, abs_tol=1e-9)