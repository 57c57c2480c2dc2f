"""
analytics_service.py — Journey statistics & insights
Combines the store's raw aggregates with the streak, trend and weekly
calculators. Everything is recomputed per request; nothing is cached.
"""

from datetime import date, timedelta
from typing import Callable

from journey_backend.clock import utc_today
from journey_backend.schemas import JourneyInsights, JourneyStats, MilestoneOut
from journey_backend.services.insights import generate_insights
from journey_backend.services.streaks import calculate_streaks
from journey_backend.services.trends import WINDOW_DAYS, calculate_mood_trend
from journey_backend.services.validation import require_user
from journey_backend.services.weekly import build_weekly_summary
from journey_backend.store import JourneyStore

RECENT_MILESTONES_IN_STATS = 3
DEFAULT_MILESTONE_LIMIT = 10
MAX_MILESTONE_LIMIT = 50


class JourneyAnalyticsService:
    def __init__(self, store: JourneyStore, today: Callable[[], date] = utc_today):
        self.store = store
        self.today = today

    def get_stats(self, user_id: str) -> JourneyStats:
        require_user(user_id)
        today = self.today()

        raw = self.store.get_raw_stats(user_id)
        # Two trend windows cover the weekly summary as well
        samples = self.store.mood_samples_since(user_id, today - timedelta(days=2 * WINDOW_DAYS - 1))
        recent = self.store.list_milestones(user_id, RECENT_MILESTONES_IN_STATS)

        current_streak, longest_streak = calculate_streaks(raw.entry_dates, today)

        return JourneyStats(
            total_entries=raw.total_entries,
            current_streak=current_streak,
            longest_streak=longest_streak,
            average_mood=raw.average_mood,
            mood_trend=calculate_mood_trend(samples, today),
            completed_goals=raw.completed_goals,
            active_goals=raw.active_goals,
            total_milestones=raw.milestone_count,
            recent_milestones=[MilestoneOut.model_validate(m) for m in recent],
            mood_breakdown=raw.mood_histogram,
            weekly_mood_data=build_weekly_summary(samples, today),
        )

    def get_insights(self, user_id: str) -> JourneyInsights:
        return generate_insights(self.get_stats(user_id))

    def list_milestones(self, user_id: str, limit: int = DEFAULT_MILESTONE_LIMIT) -> list[MilestoneOut]:
        require_user(user_id)
        if limit <= 0:
            limit = DEFAULT_MILESTONE_LIMIT
        limit = min(limit, MAX_MILESTONE_LIMIT)
        return [MilestoneOut.model_validate(m) for m in self.store.list_milestones(user_id, limit)]
