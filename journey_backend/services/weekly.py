from datetime import date, timedelta
from typing import Mapping

from journey_backend.schemas import DailyMoodData

WEEK_DAYS = 7


def build_weekly_summary(mood_by_date: Mapping[date, int], today: date) -> list[DailyMoodData]:
    """One slot per day from 6 days ago through today, oldest first. Always 7 long."""
    week = []
    for offset in range(WEEK_DAYS - 1, -1, -1):
        day = today - timedelta(days=offset)
        mood = mood_by_date.get(day)
        week.append(DailyMoodData(date=day.isoformat(), mood_rating=mood, has_entry=mood is not None))
    return week
