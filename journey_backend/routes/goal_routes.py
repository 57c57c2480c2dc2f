from fastapi import APIRouter, Depends
from pydantic import BaseModel
from typing import Optional

from journey_backend.auth import get_current_user
from journey_backend.dependencies import get_goal_service
from journey_backend.schemas import GoalListResponse, GoalOut
from journey_backend.services.goal_service import JourneyGoalService

router = APIRouter(prefix="/api/v1/journey/goals", tags=["Journey Goals"])


class JourneyGoalCreate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    target_date: Optional[str] = None  # YYYY-MM-DD
    goal_type: Optional[str] = None


class JourneyGoalUpdate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    target_date: Optional[str] = None  # YYYY-MM-DD
    status: Optional[str] = None


@router.get("", response_model=GoalListResponse)
def list_goals(
    status: Optional[str] = None,
    user_id: str = Depends(get_current_user),
    service: JourneyGoalService = Depends(get_goal_service),
):
    goals = [service.describe(g) for g in service.list(user_id, status)]
    return GoalListResponse(goals=goals, total=len(goals))


@router.post("", response_model=GoalOut, status_code=201)
def create_goal(
    goal_data: JourneyGoalCreate,
    user_id: str = Depends(get_current_user),
    service: JourneyGoalService = Depends(get_goal_service),
):
    return service.describe(service.create(user_id, goal_data.model_dump(exclude_unset=True)))


@router.get("/{goal_id}", response_model=GoalOut)
def get_goal(
    goal_id: int,
    user_id: str = Depends(get_current_user),
    service: JourneyGoalService = Depends(get_goal_service),
):
    return service.describe(service.get(user_id, goal_id))


@router.put("/{goal_id}", response_model=GoalOut)
def update_goal(
    goal_id: int,
    goal_data: JourneyGoalUpdate,
    user_id: str = Depends(get_current_user),
    service: JourneyGoalService = Depends(get_goal_service),
):
    return service.describe(service.update(user_id, goal_id, goal_data.model_dump(exclude_unset=True)))


@router.delete("/{goal_id}")
def delete_goal(
    goal_id: int,
    user_id: str = Depends(get_current_user),
    service: JourneyGoalService = Depends(get_goal_service),
):
    service.delete(user_id, goal_id)
    return {"status": "success"}
