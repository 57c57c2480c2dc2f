from fastapi import APIRouter, Depends

from journey_backend.auth import get_current_user
from journey_backend.dependencies import get_analytics_service
from journey_backend.schemas import JourneyInsights, JourneyStats, MilestoneListResponse
from journey_backend.services.analytics_service import DEFAULT_MILESTONE_LIMIT, JourneyAnalyticsService

router = APIRouter(prefix="/api/v1/journey", tags=["Journey Analytics"])


@router.get("/stats", response_model=JourneyStats)
def get_stats(
    user_id: str = Depends(get_current_user),
    service: JourneyAnalyticsService = Depends(get_analytics_service),
):
    return service.get_stats(user_id)


@router.get("/insights", response_model=JourneyInsights)
def get_insights(
    user_id: str = Depends(get_current_user),
    service: JourneyAnalyticsService = Depends(get_analytics_service),
):
    return service.get_insights(user_id)


@router.get("/milestones", response_model=MilestoneListResponse)
def list_milestones(
    limit: int = DEFAULT_MILESTONE_LIMIT,
    user_id: str = Depends(get_current_user),
    service: JourneyAnalyticsService = Depends(get_analytics_service),
):
    milestones = service.list_milestones(user_id, limit)
    return MilestoneListResponse(milestones=milestones, total=len(milestones))
