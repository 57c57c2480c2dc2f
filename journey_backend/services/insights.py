"""
insights.py — Rule-based journey insights
Turns a computed JourneyStats into short human-readable statements.
"""

from journey_backend.models.enums import MoodTrend
from journey_backend.schemas import JourneyInsights, JourneyStats

POSITIVE_MOOD_THRESHOLD = 4.0
WEEK_STREAK = 7
MAX_SUGGESTED_ACTIVE_GOALS = 3

_TREND_PATTERNS = {
    MoodTrend.IMPROVING: "Your mood has been improving over time! 📈",
    MoodTrend.DECLINING: "Your mood shows some challenges lately. Consider reaching out for support. 💙",
    MoodTrend.STABLE: "Your mood has been relatively stable. 📊",
}

_NEXT_GOAL_SUGGESTIONS = [
    "Daily mood tracking",
    "Improve sleep quality",
    "Practice mindfulness",
]


def generate_insights(stats: JourneyStats) -> JourneyInsights:
    insights = JourneyInsights()

    if stats.total_entries > 0:
        insights.mood_patterns.append(_TREND_PATTERNS[MoodTrend(stats.mood_trend)])
        if stats.average_mood >= POSITIVE_MOOD_THRESHOLD:
            insights.mood_patterns.append("You maintain a positive mood most days! ✨")

    if stats.current_streak == 0:
        insights.recommendations.append("Start your journey today with a quick mood check-in")
    elif stats.current_streak < WEEK_STREAK:
        insights.recommendations.append("Try to build a weekly habit of daily entries")

    if stats.active_goals == 0:
        insights.recommendations.append("Set your first goal to guide your mental health journey")

    if stats.total_entries > 0:
        insights.achievements.append(f"🎯 {stats.total_entries} total journal entries")
    if stats.longest_streak > 0:
        insights.achievements.append(f"🔥 {stats.longest_streak} days longest streak")
    if stats.completed_goals > 0:
        insights.achievements.append(f"✅ {stats.completed_goals} goals completed")

    if stats.active_goals < MAX_SUGGESTED_ACTIVE_GOALS:
        insights.next_goals.extend(_NEXT_GOAL_SUGGESTIONS)

    return insights
