from fastapi import Depends, Request
from sqlalchemy.orm import Session

from journey_backend.database import get_db
from journey_backend.services.analytics_service import JourneyAnalyticsService
from journey_backend.services.entry_service import JourneyEntryService
from journey_backend.services.goal_service import JourneyGoalService
from journey_backend.store import JourneyStore


def get_store(db: Session = Depends(get_db)) -> JourneyStore:
    return JourneyStore(db)


def get_entry_service(request: Request, store: JourneyStore = Depends(get_store)) -> JourneyEntryService:
    state = request.app.state
    return JourneyEntryService(store, milestones=state.milestones, today=state.today)


def get_goal_service(request: Request, store: JourneyStore = Depends(get_store)) -> JourneyGoalService:
    state = request.app.state
    return JourneyGoalService(store, milestones=state.milestones, today=state.today)


def get_analytics_service(request: Request, store: JourneyStore = Depends(get_store)) -> JourneyAnalyticsService:
    return JourneyAnalyticsService(store, today=request.app.state.today)
