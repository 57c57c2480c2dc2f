"""
goal_service.py — Journey goals
Status is freely settable; there is no transition graph. The store keeps the
completion flag and timestamp in step with the `completed` status.
"""

from datetime import date
from typing import Callable

from journey_backend.clock import utc_today
from journey_backend.errors import ValidationError
from journey_backend.models.enums import GoalStatus, GoalType
from journey_backend.models.journey_goal import JourneyGoal
from journey_backend.schemas import GoalOut
from journey_backend.services.milestone_service import MilestoneService
from journey_backend.services.validation import check_length, parse_enum, parse_iso_date, require_user
from journey_backend.store import JourneyStore

TITLE_MAX = 255
DESCRIPTION_MAX = 1000


def _check_title(title):
    if not title:
        raise ValidationError("title is required")
    check_length(title, TITLE_MAX, "title")


class JourneyGoalService:
    def __init__(
        self,
        store: JourneyStore,
        milestones: MilestoneService | None = None,
        today: Callable[[], date] = utc_today,
    ):
        self.store = store
        self.milestones = milestones
        self.today = today

    def describe(self, goal: JourneyGoal) -> GoalOut:
        """Response view of a goal, with overdue judged against today."""
        return GoalOut.from_goal(goal, self.today())

    def create(self, user_id: str, data: dict) -> JourneyGoal:
        require_user(user_id)
        _check_title(data.get("title"))
        description = data.get("description")
        if description is not None:
            check_length(description, DESCRIPTION_MAX, "description")
        goal_type = parse_enum(GoalType, data.get("goal_type"), "goal type")
        raw_target = data.get("target_date")
        target_date = parse_iso_date(raw_target, "target date") if raw_target else None

        goal = self.store.create_goal(user_id, {
            "title": data["title"],
            "description": description,
            "goal_type": goal_type,
            "target_date": target_date,
        })

        if self.milestones is not None:
            self.milestones.schedule_goal_checks(user_id)
        return goal

    def get(self, user_id: str, goal_id: int) -> JourneyGoal:
        require_user(user_id)
        return self.store.get_goal(user_id, goal_id)

    def update(self, user_id: str, goal_id: int, data: dict) -> JourneyGoal:
        require_user(user_id)
        changes = {}
        if data.get("title") is not None:
            _check_title(data["title"])
            changes["title"] = data["title"]
        if data.get("description") is not None:
            check_length(data["description"], DESCRIPTION_MAX, "description")
            changes["description"] = data["description"]
        if data.get("target_date"):
            changes["target_date"] = parse_iso_date(data["target_date"], "target date")
        if data.get("status") is not None:
            changes["status"] = parse_enum(GoalStatus, data["status"], "goal status")
        return self.store.update_goal(user_id, goal_id, changes)

    def delete(self, user_id: str, goal_id: int):
        require_user(user_id)
        self.store.delete_goal(user_id, goal_id)

    def list(self, user_id: str, status: str | None = None) -> list[JourneyGoal]:
        require_user(user_id)
        goal_status = parse_enum(GoalStatus, status, "goal status") if status else None
        return self.store.list_goals(user_id, goal_status)
