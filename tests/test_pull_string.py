"""Integration tests for PullString: full press/drag/release cycles."""

import pytest

from bulb_switcher.core.config import BulbStringConfig
from bulb_switcher.core.geometry import Point
from bulb_switcher.core.pull_string import PullString


def run_until_settled(string, dt=16.0, max_ticks=1000):
    ticks = 0
    while string.is_animating and ticks < max_ticks:
        string.advance(dt)
        ticks += 1
    return ticks


def test_initial_state():
    string = PullString()
    assert not string.is_touching
    assert not string.is_animating
    assert string.length == 100.0
    assert string.amplitude == 0.0
    assert string.resting_endpoint == Point(100.0, 100.0)


def test_full_cycle_notifies_in_order(listener):
    string = PullString(listener=listener)
    assert string.press(Point(105, 95))
    string.move(Point(150, 180))
    assert string.release()
    assert string.is_animating

    run_until_settled(string)
    assert listener.events == [
        ("pull", Point(105, 95)),
        ("release", Point(150, 180)),
        ("end_release",),
    ]
    assert string.amplitude == 0.0
    assert string.length == 100.0


def test_press_far_from_the_end_does_nothing(listener):
    string = PullString(listener=listener)
    assert not string.press(Point(10, 10))
    assert not string.release()
    assert listener.events == []
    assert not string.is_animating


def test_path_while_held_is_a_straight_line():
    string = PullString()
    string.press(Point(100, 100))
    string.move(Point(150, 120))
    path = string.path()
    assert path.points == (Point(100.0, 0.0), Point(150.0, 120.0))
    assert path.marker == Point(150.0, 120.0)


def test_path_during_release_follows_animated_values():
    string = PullString(BulbStringConfig(length_sequence=(60.0,), wave_sequence=((40.0, 1),)))
    string.press(Point(100, 100))
    string.release()
    string.advance(50.0)
    assert string.length == pytest.approx(80.0)
    assert string.amplitude == pytest.approx(20.0)
    path = string.path()
    assert path.marker == Point(100.0, pytest.approx(80.0))
    assert max(abs(point.x - 100.0) for point in path.points) == pytest.approx(20.0, abs=0.5)


def test_regrab_cancels_previous_completion(listener):
    string = PullString(listener=listener)
    string.press(Point(100, 100))
    string.release()
    for _ in range(10):
        string.advance(16.0)
    assert string.is_animating

    # Grab the string where it currently ends
    assert string.press(string.resting_endpoint)
    assert not string.is_animating
    for _ in range(100):
        string.advance(16.0)
    assert listener.count("end_release") == 0

    string.release()
    run_until_settled(string)
    assert listener.names() == ["pull", "release", "pull", "release", "end_release"]
    assert string.amplitude == 0.0


def test_resting_endpoint_tracks_animated_length():
    string = PullString(BulbStringConfig(length_sequence=(160.0,), wave_sequence=()))
    string.press(Point(100, 100))
    string.release()
    run_until_settled(string)
    assert string.resting_endpoint == Point(100.0, 160.0)

    # The old resting spot is now out of reach
    assert not string.press(Point(100, 100))
    assert string.press(Point(100, 150))


def test_repeated_cycles_each_complete_once(listener):
    string = PullString(listener=listener)
    for _ in range(3):
        assert string.press(string.resting_endpoint)
        string.release()
        run_until_settled(string)
    assert listener.count("pull") == 3
    assert listener.count("release") == 3
    assert listener.count("end_release") == 3


def test_empty_sequences_complete_on_release(listener):
    string = PullString(BulbStringConfig(length_sequence=(), wave_sequence=()), listener=listener)
    string.press(Point(100, 100))
    string.release()
    assert listener.names() == ["pull", "release", "end_release"]
    assert not string.is_animating
    assert string.length == 100.0


def test_zero_length_string_still_renders(listener):
    string = PullString(BulbStringConfig(length_sequence=(0.0,), wave_sequence=((30.0, 1),)))
    string.press(Point(100, 100))
    string.release()
    string.advance(100.0)
    assert string.length == 0.0
    assert string.amplitude == 30.0
    path = string.path()
    assert path.points == (Point(100.0, 0.0),)


def test_regrab_stops_animation_before_on_pull():
    seen = []

    class AnimationWatcher:
        def on_pull(self, position):
            seen.append(string.is_animating)

        def on_release(self, position):
            pass

        def on_end_release(self):
            pass

    string = PullString(listener=AnimationWatcher())
    string.press(Point(100, 100))
    string.release()
    string.advance(50.0)
    assert string.is_animating

    assert string.press(string.resting_endpoint)
    assert seen == [False, False]


def test_press_out_of_reach_keeps_animation_running(listener):
    string = PullString(listener=listener)
    string.press(Point(100, 100))
    string.release()
    string.advance(50.0)
    assert not string.press(Point(0, 0))
    assert string.is_animating
