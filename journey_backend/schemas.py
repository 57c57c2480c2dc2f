from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from journey_backend.models.enums import GoalStatus, GoalType, MilestoneType, MoodTrend


class EntryOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: str
    entry_date: date
    mood_rating: int
    mood_label: str
    mood_emoji: str
    anxiety_level: Optional[int] = None
    sleep_quality: Optional[int] = None
    energy_level: Optional[int] = None
    notes: Optional[str] = None
    activities: list[str] = Field(default_factory=list)
    symptoms: list[str] = Field(default_factory=list)
    gratitude_note: Optional[str] = None
    is_private: bool = False
    created_at: datetime
    updated_at: datetime


class EntryListResponse(BaseModel):
    entries: list[EntryOut] = Field(default_factory=list)
    total: int = 0
    page: int = 1
    page_size: int = 30
    total_pages: int = 0


class GoalOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: str
    title: str
    description: Optional[str] = None
    target_date: Optional[date] = None
    goal_type: GoalType
    goal_type_display: str
    status: GoalStatus
    status_display: str
    is_completed: bool
    completed_at: Optional[datetime] = None
    is_overdue: bool = False
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_goal(cls, goal, today: date) -> "GoalOut":
        out = cls.model_validate(goal)
        out.is_overdue = goal.is_overdue_on(today)
        return out


class GoalListResponse(BaseModel):
    goals: list[GoalOut] = Field(default_factory=list)
    total: int = 0


class MilestoneOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: str
    milestone_type: MilestoneType
    title: str
    description: Optional[str] = None
    achieved_at: datetime
    created_at: datetime


class MilestoneListResponse(BaseModel):
    milestones: list[MilestoneOut] = Field(default_factory=list)
    total: int = 0


class DailyMoodData(BaseModel):
    date: str  # YYYY-MM-DD
    mood_rating: Optional[int] = None
    has_entry: bool = False


class JourneyStats(BaseModel):
    total_entries: int = 0
    current_streak: int = 0
    longest_streak: int = 0
    average_mood: float = 0.0
    mood_trend: MoodTrend = MoodTrend.STABLE
    completed_goals: int = 0
    active_goals: int = 0
    total_milestones: int = 0
    recent_milestones: list[MilestoneOut] = Field(default_factory=list)
    mood_breakdown: dict[str, int] = Field(default_factory=dict)
    weekly_mood_data: list[DailyMoodData] = Field(default_factory=list)


class JourneyInsights(BaseModel):
    mood_patterns: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)
    achievements: list[str] = Field(default_factory=list)
    next_goals: list[str] = Field(default_factory=list)
