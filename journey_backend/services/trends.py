"""
trends.py — Mood trend classification
Compares the average mood of the last 14 days against the 14 days before that.
"""

from datetime import date
from statistics import fmean
from typing import Mapping

from journey_backend.models.enums import MoodTrend

WINDOW_DAYS = 14
TREND_THRESHOLD = 0.3


def calculate_mood_trend(mood_by_date: Mapping[date, int], today: date) -> MoodTrend:
    """Days 0-13 back from today form the recent window, days 14-27 the previous one.

    Only days with an entry count towards a window's average. If either window
    is empty there is not enough data and the trend is stable.
    """
    recent, previous = [], []
    for entry_date, mood in mood_by_date.items():
        age = (today - entry_date).days
        if 0 <= age < WINDOW_DAYS:
            recent.append(mood)
        elif WINDOW_DAYS <= age < 2 * WINDOW_DAYS:
            previous.append(mood)

    if not recent or not previous:
        return MoodTrend.STABLE

    diff = fmean(recent) - fmean(previous)
    if diff > TREND_THRESHOLD:
        return MoodTrend.IMPROVING
    if diff < -TREND_THRESHOLD:
        return MoodTrend.DECLINING
    return MoodTrend.STABLE
