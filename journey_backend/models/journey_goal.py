from datetime import date, datetime, timezone

from sqlalchemy import Column, Integer, String, Text, Date, DateTime, Boolean, Enum
from journey_backend.database import Base
from journey_backend.models.enums import GoalType, GoalStatus


def _enum_values(enum_cls):
    return [member.value for member in enum_cls]


class JourneyGoal(Base):
    __tablename__ = "journey_goals"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(64), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    target_date = Column(Date, nullable=True)
    goal_type = Column(Enum(GoalType, values_callable=_enum_values, native_enum=False, length=20), nullable=False)
    status = Column(
        Enum(GoalStatus, values_callable=_enum_values, native_enum=False, length=20),
        default=GoalStatus.ACTIVE,
        nullable=False,
    )
    is_completed = Column(Boolean, default=False, nullable=False)
    completed_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))
    updated_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))

    def set_status(self, status: GoalStatus, now: datetime):
        """Apply a status; completion fields track the `completed` status exactly."""
        self.status = status
        if status is GoalStatus.COMPLETED:
            self.is_completed = True
            self.completed_at = now
        else:
            self.is_completed = False
            self.completed_at = None

    @property
    def goal_type_display(self) -> str:
        return GoalType(self.goal_type).display_name

    @property
    def status_display(self) -> str:
        return GoalStatus(self.status).display_name

    def is_overdue_on(self, today: date) -> bool:
        if self.target_date is None or self.is_completed:
            return False
        return today > self.target_date
