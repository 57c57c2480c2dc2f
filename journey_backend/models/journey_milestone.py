from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, Text, DateTime, Enum, UniqueConstraint
from journey_backend.database import Base
from journey_backend.models.enums import MilestoneType


class JourneyMilestone(Base):
    __tablename__ = "journey_milestones"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(64), nullable=False, index=True)
    milestone_type = Column(
        Enum(MilestoneType, values_callable=lambda e: [m.value for m in e], native_enum=False, length=30),
        nullable=False,
    )
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    achieved_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))

    # One award per (user, type); writers rely on this for insert-or-ignore
    __table_args__ = (
        UniqueConstraint("user_id", "milestone_type", name="uq_journey_milestone_user_type"),
    )
