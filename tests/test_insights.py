"""Tests for rule-based insight generation."""

from journey_backend.models.enums import MoodTrend
from journey_backend.schemas import JourneyStats
from journey_backend.services.insights import generate_insights


class TestGenerateInsights:
    def test_new_user(self):
        insights = generate_insights(JourneyStats())
        assert insights.mood_patterns == []
        assert insights.achievements == []
        assert insights.recommendations == [
            "Start your journey today with a quick mood check-in",
            "Set your first goal to guide your mental health journey",
        ]
        assert len(insights.next_goals) == 3

    def test_improving_and_positive(self):
        stats = JourneyStats(total_entries=20, average_mood=4.2, mood_trend=MoodTrend.IMPROVING)
        patterns = generate_insights(stats).mood_patterns
        assert patterns[0].startswith("Your mood has been improving")
        assert patterns[1].startswith("You maintain a positive mood")

    def test_declining_suggests_support(self):
        stats = JourneyStats(total_entries=5, average_mood=2.0, mood_trend=MoodTrend.DECLINING)
        patterns = generate_insights(stats).mood_patterns
        assert len(patterns) == 1
        assert "reaching out for support" in patterns[0]

    def test_short_streak_recommendation(self):
        stats = JourneyStats(total_entries=3, current_streak=3, active_goals=1)
        assert generate_insights(stats).recommendations == ["Try to build a weekly habit of daily entries"]

    def test_week_streak_and_goals_need_no_recommendation(self):
        stats = JourneyStats(total_entries=9, current_streak=9, active_goals=3)
        insights = generate_insights(stats)
        assert insights.recommendations == []
        assert insights.next_goals == []

    def test_achievements_only_when_positive(self):
        stats = JourneyStats(total_entries=12, longest_streak=5, completed_goals=0)
        assert generate_insights(stats).achievements == [
            "🎯 12 total journal entries",
            "🔥 5 days longest streak",
        ]
        stats.completed_goals = 2
        assert generate_insights(stats).achievements[-1] == "✅ 2 goals completed"
