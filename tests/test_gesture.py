"""Tests for GestureTracker press/move/release handling."""

import pytest

from bulb_switcher.core.geometry import Point
from bulb_switcher.core.gesture import GestureTracker

END = Point(100.0, 100.0)


@pytest.fixture
def tracker(listener):
    return GestureTracker(50.0, listener, Point(100.0, 100.0))


class TestPress:
    """Grabbing the string end."""

    @pytest.mark.parametrize("position", [
        (100, 100),
        (150, 150),     # corner of the threshold box, inclusive
        (50, 100),
        (130, 60),
    ])
    def test_press_within_threshold_grabs(self, tracker, listener, position):
        assert tracker.press(Point(*position), END) is True
        assert tracker.is_touching
        assert tracker.position == Point(*position)
        assert listener.events == [("pull", Point(*position))]

    @pytest.mark.parametrize("position", [
        (150.5, 100),
        (100, 49.5),
        (0, 0),
        (100, 300),
    ])
    def test_press_outside_threshold_is_ignored(self, tracker, listener, position):
        assert tracker.press(Point(*position), END) is False
        assert not tracker.is_touching
        assert tracker.position == Point(100.0, 100.0)
        assert listener.events == []

    def test_threshold_is_per_axis_not_euclidean(self, tracker):
        # Euclidean distance is ~63.6 but each axis is within 45
        assert tracker.press(Point(145, 145), END) is True

    def test_press_measured_against_given_endpoint(self, tracker):
        assert tracker.press(Point(100, 100), Point(100, 200)) is False
        assert tracker.press(Point(100, 190), Point(100, 200)) is True

    def test_second_press_while_held_is_ignored(self, tracker, listener):
        tracker.press(Point(100, 100), END)
        assert tracker.press(Point(110, 110), END) is False
        assert listener.count("pull") == 1
        assert tracker.position == Point(100, 100)

    def test_accepts_plain_tuples(self, tracker):
        assert tracker.press((120, 90), (100, 100)) is True
        assert tracker.position == Point(120.0, 90.0)


class TestDragAndRelease:
    """Moving the held end and letting go."""

    def test_move_updates_position_while_held(self, tracker):
        tracker.press(Point(100, 100), END)
        tracker.move(Point(140, 180))
        tracker.move(Point(160, 220))
        assert tracker.position == Point(160, 220)

    def test_move_without_press_is_ignored(self, tracker):
        tracker.move(Point(10, 10))
        assert tracker.position == Point(100, 100)

    def test_release_reports_last_recorded_position(self, tracker, listener):
        tracker.press(Point(100, 100), END)
        tracker.move(Point(140, 180))
        assert tracker.release() is True
        assert not tracker.is_touching
        assert listener.events[-1] == ("release", Point(140, 180))

    def test_release_position_is_recorded_first(self, tracker, listener):
        tracker.press(Point(100, 100), END)
        tracker.move(Point(140, 180))
        tracker.release(Point(145, 190))
        assert listener.events[-1] == ("release", Point(145, 190))
        assert tracker.position == Point(145, 190)

    def test_release_without_press_is_ignored(self, tracker, listener):
        assert tracker.release(Point(10, 10)) is False
        assert listener.events == []

    def test_release_fires_once_per_cycle(self, tracker, listener):
        tracker.press(Point(100, 100), END)
        tracker.release()
        tracker.release()
        assert listener.names() == ["pull", "release"]

    def test_listener_sees_touching_during_release(self, listener):
        seen = []

        class ReleaseWatcher:
            def on_pull(self, position):
                pass

            def on_release(self, position):
                seen.append(tracker.is_touching)

            def on_end_release(self):
                pass

        tracker = GestureTracker(50.0, ReleaseWatcher(), Point(100, 100))
        tracker.press(Point(100, 100), END)
        tracker.release()
        assert seen == [True]
        assert not tracker.is_touching
