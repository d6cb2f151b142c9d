"""Tests for the string polyline and end marker geometry."""

import math

import pytest

from bulb_switcher.core.geometry import Point
from bulb_switcher.core.path import compute_string_path


def test_touching_draws_single_straight_segment():
    path = compute_string_path(100.0, 100.0, 37.0, True, Point(150.0, 120.0))
    assert path.points == (Point(100.0, 0.0), Point(150.0, 120.0))
    assert path.marker == Point(150.0, 120.0)


@pytest.mark.parametrize("length,amplitude", [(0.0, 0.0), (250.0, -60.0), (3.0, 10.0)])
def test_touching_ignores_length_and_amplitude(length, amplitude):
    path = compute_string_path(100.0, length, amplitude, True, Point(150.0, 120.0))
    assert path.points == (Point(100.0, 0.0), Point(150.0, 120.0))


@pytest.mark.parametrize("amplitude", [0.0, 60.0, -40.0, 1e6])
def test_zero_length_collapses_to_anchor(amplitude):
    path = compute_string_path(100.0, 0.0, amplitude, False, Point(0.0, 0.0))
    assert path.points == (Point(100.0, 0.0),)
    assert path.marker == Point(100.0, 0.0)
    assert path.is_collapsed


def test_negative_length_collapses_to_anchor():
    path = compute_string_path(100.0, -20.0, 15.0, False, Point(0.0, 0.0))
    assert path.points == (Point(100.0, 0.0),)


def test_still_string_is_straight():
    path = compute_string_path(100.0, 100.0, 0.0, False, Point(0.0, 0.0))
    assert len(path.points) == 21
    assert all(point.x == 100.0 for point in path.points)
    assert [point.y for point in path.points] == [5.0 * i for i in range(21)]
    assert path.marker == Point(100.0, 100.0)


def test_wave_follows_sine_of_current_length():
    length, amplitude = 100.0, 60.0
    path = compute_string_path(100.0, length, amplitude, False, Point(0.0, 0.0))
    for point in path.points[1:]:
        expected = 100.0 + amplitude * math.sin(2 * math.pi * (length - point.y) / length)
        assert point.x == pytest.approx(expected, abs=1e-9)

    # Quarter of the way down the string sits at the full swing
    quarter = path.points[5]
    assert quarter.y == 25.0
    assert quarter.x == pytest.approx(100.0 - amplitude)


def test_ends_are_pinned():
    path = compute_string_path(100.0, 100.0, 45.0, False, Point(0.0, 0.0))
    assert path.points[0] == Point(100.0, 0.0)
    assert path.points[-1].y == 100.0
    assert path.points[-1].x == pytest.approx(100.0)
    assert path.marker == Point(100.0, 100.0)


def test_length_not_a_multiple_of_step_ends_exactly_at_length():
    path = compute_string_path(100.0, 62.0, 20.0, False, Point(0.0, 0.0))
    assert path.points[-2].y == 60.0
    assert path.points[-1] == Point(100.0, 62.0)
    assert path.marker == Point(100.0, 62.0)


def test_period_stretches_with_length():
    short = compute_string_path(100.0, 60.0, 30.0, False, Point(0.0, 0.0))
    long = compute_string_path(100.0, 120.0, 30.0, False, Point(0.0, 0.0))
    # y = 15 is a quarter of the short string, an eighth of the long one
    assert short.points[3].x == pytest.approx(70.0)
    assert long.points[3].x == pytest.approx(100.0 - 30.0 * math.sin(math.pi / 4))


def test_custom_sample_step():
    path = compute_string_path(50.0, 100.0, 0.0, False, Point(0.0, 0.0), sample_step=25.0)
    assert [point.y for point in path.points] == [0.0, 25.0, 50.0, 75.0, 100.0]
