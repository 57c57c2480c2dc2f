"""
milestone_service.py — Achievement milestones
Evaluated in the background after an entry or goal is created. Each award is a
single insert-or-ignore against the (user, milestone type) unique constraint,
so running the checks twice never yields a second row. Store failures are
logged and dropped; the next entry or goal creation re-evaluates everything.
"""

import logging
from datetime import date
from typing import Callable

from sqlalchemy.orm import sessionmaker

from journey_backend.clock import utc_today
from journey_backend.errors import PersistenceError
from journey_backend.models.enums import MilestoneType
from journey_backend.services.dispatcher import BackgroundDispatcher
from journey_backend.services.streaks import calculate_streaks
from journey_backend.store import JourneyStore

WEEK_STREAK_DAYS = 7
MONTH_STREAK_DAYS = 30
MOOD_STABLE_MIN_ENTRIES = 14
MOOD_STABLE_MIN_AVERAGE = 4.0

MILESTONE_COPY = {
    MilestoneType.FIRST_ENTRY: ("First Entry", "Congratulations on starting your mental health journey! 🌟"),
    MilestoneType.WEEK_STREAK: ("7-Day Streak", "Amazing! You've maintained a 7-day streak! 🔥"),
    MilestoneType.MONTH_STREAK: ("30-Day Streak", "Incredible! You've maintained a 30-day streak! 🏆"),
    MilestoneType.FIRST_GOAL: ("First Goal Set", "Great job setting your first goal! 🎯"),
    MilestoneType.MOOD_STABLE: ("Mood Stability", "You're maintaining great mental wellness! Keep it up! 💙"),
    MilestoneType.YEAR_COMPLETE: ("One Year Journey", "A full year of showing up for yourself! 🎉"),
}


class MilestoneService:
    def __init__(
        self,
        session_factory: sessionmaker,
        dispatcher: BackgroundDispatcher | None = None,
        logger: logging.Logger | None = None,
        today: Callable[[], date] = utc_today,
    ):
        self.session_factory = session_factory
        self.dispatcher = dispatcher
        self.logger = logger or logging.getLogger(__name__)
        self.today = today

    # ------------------------------------------------------------------
    def schedule_entry_checks(self, user_id: str):
        self._schedule("entry-milestones", self.check_entry_milestones, user_id)

    def schedule_goal_checks(self, user_id: str):
        self._schedule("goal-milestones", self.check_goal_milestones, user_id)

    def _schedule(self, job_name: str, check, user_id: str):
        if self.dispatcher is None:
            self.logger.warning(f"No dispatcher configured, skipping {job_name} for user {user_id}")
            return
        self.dispatcher.submit(f"{job_name}:{user_id}", check, user_id)

    # ------------------------------------------------------------------
    def check_entry_milestones(self, user_id: str) -> list[MilestoneType]:
        """Award every entry-driven milestone the user now qualifies for."""
        with self.session_factory() as db:
            store = JourneyStore(db)
            try:
                raw = store.get_raw_stats(user_id)
            except PersistenceError as e:
                self.logger.error(f"Milestone evaluation for user {user_id} skipped: {e.message}")
                return []

            current_streak, _ = calculate_streaks(raw.entry_dates, self.today())

            earned = []
            if raw.total_entries >= 1:
                earned.append(MilestoneType.FIRST_ENTRY)
            if current_streak >= WEEK_STREAK_DAYS:
                earned.append(MilestoneType.WEEK_STREAK)
            if current_streak >= MONTH_STREAK_DAYS:
                earned.append(MilestoneType.MONTH_STREAK)
            if raw.total_entries >= MOOD_STABLE_MIN_ENTRIES and raw.average_mood >= MOOD_STABLE_MIN_AVERAGE:
                earned.append(MilestoneType.MOOD_STABLE)

            return [t for t in earned if self._award(store, user_id, t)]

    def check_goal_milestones(self, user_id: str) -> list[MilestoneType]:
        with self.session_factory() as db:
            store = JourneyStore(db)
            try:
                has_goal = store.count_goals(user_id) >= 1
            except PersistenceError as e:
                self.logger.error(f"First-goal check for user {user_id} skipped: {e.message}")
                return []
            if has_goal and self._award(store, user_id, MilestoneType.FIRST_GOAL):
                return [MilestoneType.FIRST_GOAL]
            return []

    def _award(self, store: JourneyStore, user_id: str, milestone_type: MilestoneType) -> bool:
        title, description = MILESTONE_COPY[milestone_type]
        try:
            if store.milestone_exists(user_id, milestone_type):
                return False
            awarded = store.award_milestone(user_id, milestone_type, title, description)
        except PersistenceError as e:
            self.logger.error(f"Could not award {milestone_type.value} to user {user_id}: {e.message}")
            return False
        if awarded:
            self.logger.info(f"Awarded milestone {milestone_type.value} to user {user_id}")
        return awarded
