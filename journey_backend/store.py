"""
store.py — SQLAlchemy persistence for journey entries, goals and milestones.
Every SQLAlchemy failure leaves this module as a PersistenceError; lookups that
miss (or hit another user's row) raise NotFoundError.
"""

from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import date, datetime, timezone

from sqlalchemy import func, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from journey_backend.errors import ConflictError, NotFoundError, PersistenceError
from journey_backend.models.enums import GoalStatus, MilestoneType
from journey_backend.models.journey_entry import JourneyEntry
from journey_backend.models.journey_goal import JourneyGoal
from journey_backend.models.journey_milestone import JourneyMilestone

_UPSERT_DIALECTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


@dataclass
class RawStats:
    total_entries: int = 0
    entry_dates: list[date] = field(default_factory=list)  # distinct, newest first
    average_mood: float = 0.0
    completed_goals: int = 0
    active_goals: int = 0
    milestone_count: int = 0
    mood_histogram: dict[str, int] = field(default_factory=dict)


class JourneyStore:
    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def _writing(self, action: str):
        try:
            yield
            self.db.commit()
        except (ConflictError, NotFoundError):
            self.db.rollback()
            raise
        except SQLAlchemyError as e:
            self.db.rollback()
            raise PersistenceError(f"failed to {action}: {e}") from e

    @contextmanager
    def _reading(self, action: str):
        try:
            yield
        except SQLAlchemyError as e:
            raise PersistenceError(f"failed to {action}: {e}") from e

    # ------------------------------------------------------------------
    # Entries
    # ------------------------------------------------------------------
    def create_entry(self, user_id: str, entry_date: date, fields: dict) -> JourneyEntry:
        with self._reading("check existing journey entry"):
            existing = self.db.query(JourneyEntry.id).filter_by(user_id=user_id, entry_date=entry_date).first()
        if existing:
            raise ConflictError("entry already exists for this date")

        now = datetime.now(timezone.utc)
        entry = JourneyEntry(user_id=user_id, entry_date=entry_date, created_at=now, updated_at=now)
        for key, value in fields.items():
            setattr(entry, key, value)
        try:
            with self._writing("create journey entry"):
                self.db.add(entry)
                self.db.flush()
        except PersistenceError as e:
            # Lost a race against a concurrent insert for the same date
            if isinstance(e.__cause__, IntegrityError):
                raise ConflictError("entry already exists for this date") from e
            raise
        with self._reading("reload journey entry"):
            self.db.refresh(entry)
        return entry

    def get_entry_by_id(self, user_id: str, entry_id: int) -> JourneyEntry:
        with self._reading("get journey entry"):
            entry = self.db.query(JourneyEntry).filter_by(id=entry_id, user_id=user_id).first()
        if entry is None:
            raise NotFoundError("journey entry not found")
        return entry

    def get_entry_by_date(self, user_id: str, entry_date: date) -> JourneyEntry:
        with self._reading("get journey entry"):
            entry = self.db.query(JourneyEntry).filter_by(user_id=user_id, entry_date=entry_date).first()
        if entry is None:
            raise NotFoundError("no journey entry for this date")
        return entry

    def update_entry(self, user_id: str, entry_id: int, changes: dict) -> JourneyEntry:
        entry = self.get_entry_by_id(user_id, entry_id)
        if not changes:
            return entry
        with self._writing("update journey entry"):
            for key, value in changes.items():
                setattr(entry, key, value)
            entry.updated_at = datetime.now(timezone.utc)
        with self._reading("reload journey entry"):
            self.db.refresh(entry)
        return entry

    def delete_entry(self, user_id: str, entry_id: int):
        entry = self.get_entry_by_id(user_id, entry_id)
        with self._writing("delete journey entry"):
            self.db.delete(entry)

    def list_entries(
        self,
        user_id: str,
        page: int,
        page_size: int,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> tuple[list[JourneyEntry], int]:
        with self._reading("list journey entries"):
            query = self.db.query(JourneyEntry).filter(JourneyEntry.user_id == user_id)
            if start_date is not None:
                query = query.filter(JourneyEntry.entry_date >= start_date)
            if end_date is not None:
                query = query.filter(JourneyEntry.entry_date <= end_date)

            total = query.count()
            if total == 0:
                return [], 0
            entries = (
                query.order_by(JourneyEntry.entry_date.desc())
                .offset((page - 1) * page_size)
                .limit(page_size)
                .all()
            )
        return entries, total

    def mood_samples_since(self, user_id: str, start: date) -> dict[date, int]:
        with self._reading("load mood samples"):
            rows = self.db.execute(
                select(JourneyEntry.entry_date, JourneyEntry.mood_rating).where(
                    JourneyEntry.user_id == user_id,
                    JourneyEntry.entry_date >= start,
                )
            ).all()
        return {row.entry_date: row.mood_rating for row in rows}

    # ------------------------------------------------------------------
    # Goals
    # ------------------------------------------------------------------
    def create_goal(self, user_id: str, fields: dict) -> JourneyGoal:
        now = datetime.now(timezone.utc)
        goal = JourneyGoal(
            user_id=user_id,
            status=GoalStatus.ACTIVE,
            is_completed=False,
            created_at=now,
            updated_at=now,
            **fields,
        )
        with self._writing("create journey goal"):
            self.db.add(goal)
        with self._reading("reload journey goal"):
            self.db.refresh(goal)
        return goal

    def get_goal(self, user_id: str, goal_id: int) -> JourneyGoal:
        with self._reading("get journey goal"):
            goal = self.db.query(JourneyGoal).filter_by(id=goal_id, user_id=user_id).first()
        if goal is None:
            raise NotFoundError("journey goal not found")
        return goal

    def update_goal(self, user_id: str, goal_id: int, changes: dict) -> JourneyGoal:
        goal = self.get_goal(user_id, goal_id)
        now = datetime.now(timezone.utc)
        with self._writing("update journey goal"):
            for key, value in changes.items():
                if key == "status":
                    goal.set_status(value, now)
                else:
                    setattr(goal, key, value)
            goal.updated_at = now
        with self._reading("reload journey goal"):
            self.db.refresh(goal)
        return goal

    def delete_goal(self, user_id: str, goal_id: int):
        goal = self.get_goal(user_id, goal_id)
        with self._writing("delete journey goal"):
            self.db.delete(goal)

    def list_goals(self, user_id: str, status: GoalStatus | None = None) -> list[JourneyGoal]:
        with self._reading("list journey goals"):
            query = self.db.query(JourneyGoal).filter_by(user_id=user_id)
            if status is not None:
                query = query.filter_by(status=status)
            return query.order_by(JourneyGoal.created_at.desc(), JourneyGoal.id.desc()).all()

    def count_goals(self, user_id: str) -> int:
        with self._reading("count journey goals"):
            return self.db.query(JourneyGoal).filter_by(user_id=user_id).count()

    # ------------------------------------------------------------------
    # Milestones
    # ------------------------------------------------------------------
    def award_milestone(
        self,
        user_id: str,
        milestone_type: MilestoneType,
        title: str,
        description: str | None,
    ) -> bool:
        """Insert the milestone unless the user already holds one of this type.

        Returns True when a row was written.
        """
        now = datetime.now(timezone.utc)
        values = {
            "user_id": user_id,
            "milestone_type": milestone_type,
            "title": title,
            "description": description,
            "achieved_at": now,
            "created_at": now,
        }
        insert = _UPSERT_DIALECTS.get(self.db.get_bind().dialect.name)
        if insert is None:
            return self._award_with_savepoint(values)

        stmt = insert(JourneyMilestone).values(**values).on_conflict_do_nothing(
            index_elements=["user_id", "milestone_type"]
        )
        with self._writing("award journey milestone"):
            result = self.db.execute(stmt)
        return result.rowcount == 1

    def _award_with_savepoint(self, values: dict) -> bool:
        with self._writing("award journey milestone"):
            try:
                with self.db.begin_nested():
                    self.db.add(JourneyMilestone(**values))
            except IntegrityError:
                return False
        return True

    def milestone_exists(self, user_id: str, milestone_type: MilestoneType) -> bool:
        with self._reading("check journey milestone"):
            return self.db.query(
                select(JourneyMilestone.id)
                .where(
                    JourneyMilestone.user_id == user_id,
                    JourneyMilestone.milestone_type == milestone_type,
                )
                .exists()
            ).scalar()

    def list_milestones(self, user_id: str, limit: int) -> list[JourneyMilestone]:
        with self._reading("list journey milestones"):
            return (
                self.db.query(JourneyMilestone)
                .filter_by(user_id=user_id)
                .order_by(JourneyMilestone.achieved_at.desc(), JourneyMilestone.id.desc())
                .limit(limit)
                .all()
            )

    # ------------------------------------------------------------------
    # Aggregates
    # ------------------------------------------------------------------
    def get_raw_stats(self, user_id: str) -> RawStats:
        with self._reading("load journey stats"):
            total, avg = self.db.query(
                func.count(JourneyEntry.id), func.avg(JourneyEntry.mood_rating)
            ).filter(JourneyEntry.user_id == user_id).one()

            dates = [
                row.entry_date
                for row in self.db.query(JourneyEntry.entry_date)
                .filter(JourneyEntry.user_id == user_id)
                .distinct()
                .order_by(JourneyEntry.entry_date.desc())
            ]

            goal_counts = dict(
                self.db.query(JourneyGoal.status, func.count(JourneyGoal.id))
                .filter(JourneyGoal.user_id == user_id)
                .group_by(JourneyGoal.status)
                .all()
            )

            milestones = self.db.query(func.count(JourneyMilestone.id)).filter(
                JourneyMilestone.user_id == user_id
            ).scalar()

            histogram = {
                str(rating): count
                for rating, count in self.db.query(JourneyEntry.mood_rating, func.count(JourneyEntry.id))
                .filter(JourneyEntry.user_id == user_id)
                .group_by(JourneyEntry.mood_rating)
                .all()
            }

        return RawStats(
            total_entries=total or 0,
            entry_dates=dates,
            average_mood=float(avg) if avg is not None else 0.0,
            completed_goals=goal_counts.get(GoalStatus.COMPLETED, 0),
            active_goals=goal_counts.get(GoalStatus.ACTIVE, 0),
            milestone_count=milestones or 0,
            mood_histogram=histogram,
        )
