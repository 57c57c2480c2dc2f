# Import all models so they register with SQLAlchemy Base.metadata
# This ensures Base.metadata.create_all() creates all tables

from journey_backend.models.enums import GoalType, GoalStatus, MilestoneType, MoodTrend
from journey_backend.models.journey_entry import JourneyEntry
from journey_backend.models.journey_goal import JourneyGoal
from journey_backend.models.journey_milestone import JourneyMilestone

__all__ = [
    "GoalType",
    "GoalStatus",
    "MilestoneType",
    "MoodTrend",
    "JourneyEntry",
    "JourneyGoal",
    "JourneyMilestone",
]
