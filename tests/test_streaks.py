"""Tests for streak calculation."""

from datetime import date, timedelta

from journey_backend.services.streaks import calculate_streaks

TODAY = date(2026, 3, 15)


def _days(*ages: int) -> list[date]:
    return [TODAY - timedelta(days=a) for a in ages]


class TestCurrentStreak:
    def test_no_entries(self):
        assert calculate_streaks([], TODAY) == (0, 0)

    def test_run_ending_today_with_gap(self):
        assert calculate_streaks(_days(0, 1, 2, 5), TODAY) == (3, 3)

    def test_grace_when_only_yesterday(self):
        assert calculate_streaks(_days(1), TODAY) == (1, 1)

    def test_grace_run_continues_from_yesterday(self):
        current, longest = calculate_streaks(_days(1, 2, 3), TODAY)
        assert current == 3
        assert longest == 3

    def test_two_days_ago_breaks_current(self):
        current, longest = calculate_streaks(_days(2, 3, 4), TODAY)
        assert current == 0
        assert longest == 3

    def test_future_dated_entry_is_skipped(self):
        current, _ = calculate_streaks([TODAY + timedelta(days=1)] + _days(0, 1), TODAY)
        assert current == 2

    def test_unsorted_input(self):
        assert calculate_streaks(_days(2, 0, 1), TODAY) == (3, 3)


class TestLongestStreak:
    def test_non_consecutive_entries(self):
        assert calculate_streaks(_days(3, 6, 9), TODAY) == (0, 1)

    def test_historical_run_longer_than_current(self):
        current, longest = calculate_streaks(_days(0, 1, 10, 11, 12, 13, 14), TODAY)
        assert current == 2
        assert longest == 5
        assert longest > current

    def test_trailing_run_is_longest(self):
        current, longest = calculate_streaks(_days(0, 1, 2, 3, 8, 9), TODAY)
        assert current == longest == 4

    def test_longest_has_no_grace(self):
        # Yesterday-only run counts for current via grace; longest is the same run
        current, longest = calculate_streaks(_days(1, 2, 20), TODAY)
        assert current == 2
        assert longest == 2

    def test_year_of_daily_entries(self):
        assert calculate_streaks(_days(*range(365)), TODAY) == (365, 365)
