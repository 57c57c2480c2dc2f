from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, StrictInt
from typing import Optional

from journey_backend.auth import get_current_user
from journey_backend.dependencies import get_entry_service
from journey_backend.schemas import EntryListResponse, EntryOut
from journey_backend.services.entry_service import DEFAULT_PAGE_SIZE, JourneyEntryService

router = APIRouter(prefix="/api/v1/journey/entries", tags=["Journey Entries"])


class JourneyEntryCreate(BaseModel):
    entry_date: Optional[str] = None  # YYYY-MM-DD, defaults to today
    mood_rating: Optional[StrictInt] = None
    anxiety_level: Optional[StrictInt] = None
    sleep_quality: Optional[StrictInt] = None
    energy_level: Optional[StrictInt] = None
    notes: Optional[str] = None
    activities: Optional[list[str]] = None
    symptoms: Optional[list[str]] = None
    gratitude_note: Optional[str] = None
    is_private: bool = False


class JourneyEntryUpdate(BaseModel):
    mood_rating: Optional[StrictInt] = None
    anxiety_level: Optional[StrictInt] = None
    sleep_quality: Optional[StrictInt] = None
    energy_level: Optional[StrictInt] = None
    notes: Optional[str] = None
    activities: Optional[list[str]] = None
    symptoms: Optional[list[str]] = None
    gratitude_note: Optional[str] = None
    is_private: Optional[bool] = None


@router.post("", response_model=EntryOut, status_code=status.HTTP_201_CREATED)
def create_entry(
    entry_data: JourneyEntryCreate,
    user_id: str = Depends(get_current_user),
    service: JourneyEntryService = Depends(get_entry_service),
):
    return service.create(user_id, entry_data.model_dump(exclude_unset=True))


@router.get("", response_model=EntryListResponse)
def list_entries(
    page: int = 1,
    page_size: int = DEFAULT_PAGE_SIZE,
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
    user_id: str = Depends(get_current_user),
    service: JourneyEntryService = Depends(get_entry_service),
):
    return service.list(user_id, page, page_size, start_date, end_date)


@router.get("/today", response_model=EntryOut)
def get_todays_entry(
    user_id: str = Depends(get_current_user),
    service: JourneyEntryService = Depends(get_entry_service),
):
    return service.get_today(user_id)


@router.get("/{entry_id}", response_model=EntryOut)
def get_entry(
    entry_id: int,
    user_id: str = Depends(get_current_user),
    service: JourneyEntryService = Depends(get_entry_service),
):
    return service.get(user_id, entry_id)


@router.put("/{entry_id}", response_model=EntryOut)
def update_entry(
    entry_id: int,
    entry_data: JourneyEntryUpdate,
    user_id: str = Depends(get_current_user),
    service: JourneyEntryService = Depends(get_entry_service),
):
    return service.update(user_id, entry_id, entry_data.model_dump(exclude_unset=True))


@router.delete("/{entry_id}")
def delete_entry(
    entry_id: int,
    user_id: str = Depends(get_current_user),
    service: JourneyEntryService = Depends(get_entry_service),
):
    service.delete(user_id, entry_id)
    return {"status": "success"}
