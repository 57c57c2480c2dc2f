from enum import Enum


class GoalType(str, Enum):
    MOOD = "mood"
    SLEEP = "sleep"
    EXERCISE = "exercise"
    MINDFULNESS = "mindfulness"
    SOCIAL = "social"
    CUSTOM = "custom"

    @property
    def display_name(self) -> str:
        return _GOAL_TYPE_DISPLAY[self]


class GoalStatus(str, Enum):
    ACTIVE = "active"
    COMPLETED = "completed"
    PAUSED = "paused"
    CANCELLED = "cancelled"

    @property
    def display_name(self) -> str:
        return _GOAL_STATUS_DISPLAY[self]


class MilestoneType(str, Enum):
    FIRST_ENTRY = "first_entry"
    WEEK_STREAK = "week_streak"
    MONTH_STREAK = "month_streak"
    FIRST_GOAL = "first_goal"
    MOOD_STABLE = "mood_stable"
    YEAR_COMPLETE = "year_complete"


class MoodTrend(str, Enum):
    IMPROVING = "improving"
    STABLE = "stable"
    DECLINING = "declining"


_GOAL_TYPE_DISPLAY = {
    GoalType.MOOD: "Mood Improvement",
    GoalType.SLEEP: "Sleep Quality",
    GoalType.EXERCISE: "Physical Activity",
    GoalType.MINDFULNESS: "Mindfulness & Meditation",
    GoalType.SOCIAL: "Social Connection",
    GoalType.CUSTOM: "Personal Goal",
}

_GOAL_STATUS_DISPLAY = {
    GoalStatus.ACTIVE: "In Progress",
    GoalStatus.COMPLETED: "Completed",
    GoalStatus.PAUSED: "Paused",
    GoalStatus.CANCELLED: "Cancelled",
}
