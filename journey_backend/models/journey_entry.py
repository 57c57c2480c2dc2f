import json
from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, Text, Date, DateTime, Boolean, UniqueConstraint
from journey_backend.database import Base

MOOD_LABELS = {1: "Very Low", 2: "Low", 3: "Neutral", 4: "Good", 5: "Excellent"}
MOOD_EMOJIS = {1: "😢", 2: "😟", 3: "😐", 4: "😊", 5: "😄"}


class JourneyEntry(Base):
    __tablename__ = "journey_entries"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(64), nullable=False, index=True)
    entry_date = Column(Date, nullable=False)
    mood_rating = Column(Integer, nullable=False)  # 1-5
    anxiety_level = Column(Integer, nullable=True)  # 1-5
    sleep_quality = Column(Integer, nullable=True)  # 1-5
    energy_level = Column(Integer, nullable=True)  # 1-5
    notes = Column(Text, nullable=True)
    _activities = Column("activities", Text, nullable=True)  # JSON array
    _symptoms = Column("symptoms", Text, nullable=True)  # JSON array
    gratitude_note = Column(Text, nullable=True)
    is_private = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))
    updated_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))

    __table_args__ = (
        UniqueConstraint("user_id", "entry_date", name="uq_journey_user_date"),
    )

    @property
    def activities(self) -> list[str]:
        return json.loads(self._activities) if self._activities else []

    @activities.setter
    def activities(self, value):
        self._activities = json.dumps(list(value or []))

    @property
    def symptoms(self) -> list[str]:
        return json.loads(self._symptoms) if self._symptoms else []

    @symptoms.setter
    def symptoms(self, value):
        self._symptoms = json.dumps(list(value or []))

    @property
    def mood_label(self) -> str:
        return MOOD_LABELS.get(self.mood_rating, "Unknown")

    @property
    def mood_emoji(self) -> str:
        return MOOD_EMOJIS.get(self.mood_rating, "😐")
