"""Tests for the 14-day mood trend comparison."""

from datetime import date, timedelta

from journey_backend.models.enums import MoodTrend
from journey_backend.services.trends import calculate_mood_trend

TODAY = date(2026, 3, 15)


def _moods(moods_by_age: dict[int, int]) -> dict[date, int]:
    return {TODAY - timedelta(days=age): mood for age, mood in moods_by_age.items()}


class TestMoodTrend:
    def test_improving(self):
        samples = _moods({0: 4, 1: 5, 14: 4, 20: 4})
        assert calculate_mood_trend(samples, TODAY) == MoodTrend.IMPROVING

    def test_small_difference_is_stable(self):
        samples = _moods({0: 3, 13: 3, 14: 3, 15: 3, 16: 3, 17: 4, 27: 3})
        assert calculate_mood_trend(samples, TODAY) == MoodTrend.STABLE

    def test_declining(self):
        samples = _moods({2: 2, 3: 2, 16: 4, 17: 4})
        assert calculate_mood_trend(samples, TODAY) == MoodTrend.DECLINING

    def test_empty_recent_window_is_stable(self):
        assert calculate_mood_trend(_moods({15: 1, 16: 1}), TODAY) == MoodTrend.STABLE

    def test_empty_previous_window_is_stable(self):
        assert calculate_mood_trend(_moods({0: 5, 1: 5}), TODAY) == MoodTrend.STABLE

    def test_no_samples(self):
        assert calculate_mood_trend({}, TODAY) == MoodTrend.STABLE

    def test_entries_older_than_28_days_are_ignored(self):
        samples = _moods({0: 3, 14: 3, 28: 1, 40: 1})
        assert calculate_mood_trend(samples, TODAY) == MoodTrend.STABLE

    def test_window_boundary_day_13_is_recent(self):
        # Day 13 lifts the recent average; day 14 anchors the previous one
        samples = _moods({13: 5, 14: 3})
        assert calculate_mood_trend(samples, TODAY) == MoodTrend.IMPROVING
