"""
entry_service.py — Daily journey entries
One wellbeing snapshot per user per calendar date. Creating an entry queues
the milestone checks in the background; the caller never waits on them.
"""

import math
from datetime import date
from typing import Callable

from journey_backend.clock import utc_today
from journey_backend.errors import ValidationError
from journey_backend.models.journey_entry import JourneyEntry
from journey_backend.schemas import EntryListResponse, EntryOut
from journey_backend.services.milestone_service import MilestoneService
from journey_backend.services.validation import (
    check_length,
    check_rating,
    check_tags,
    parse_iso_date,
    require_user,
)
from journey_backend.store import JourneyStore

NOTES_MAX = 1000
GRATITUDE_MAX = 500
DEFAULT_PAGE_SIZE = 30
MAX_PAGE_SIZE = 100

OPTIONAL_RATINGS = {
    "anxiety_level": "anxiety level",
    "sleep_quality": "sleep quality",
    "energy_level": "energy level",
}
ENTRY_FIELDS = (
    "mood_rating", "anxiety_level", "sleep_quality", "energy_level",
    "notes", "activities", "symptoms", "gratitude_note", "is_private",
)


def validate_entry_fields(fields: dict):
    """Bounds shared by create and update; only keys present in `fields` are checked."""
    if "mood_rating" in fields:
        check_rating(fields["mood_rating"], "mood rating")
    for key, label in OPTIONAL_RATINGS.items():
        if fields.get(key) is not None:
            check_rating(fields[key], label)
    if fields.get("activities") is not None:
        check_tags(fields["activities"], "activities")
    if fields.get("symptoms") is not None:
        check_tags(fields["symptoms"], "symptoms")
    if fields.get("notes") is not None:
        check_length(fields["notes"], NOTES_MAX, "notes")
    if fields.get("gratitude_note") is not None:
        check_length(fields["gratitude_note"], GRATITUDE_MAX, "gratitude note")


class JourneyEntryService:
    def __init__(
        self,
        store: JourneyStore,
        milestones: MilestoneService | None = None,
        today: Callable[[], date] = utc_today,
    ):
        self.store = store
        self.milestones = milestones
        self.today = today

    def create(self, user_id: str, data: dict) -> JourneyEntry:
        require_user(user_id)
        if data.get("mood_rating") is None:
            raise ValidationError("mood rating is required")

        raw_date = data.get("entry_date")
        entry_date = parse_iso_date(raw_date, "date") if raw_date else self.today()

        fields = {k: data[k] for k in ENTRY_FIELDS if data.get(k) is not None}
        validate_entry_fields(fields)
        fields.setdefault("activities", [])
        fields.setdefault("symptoms", [])
        fields.setdefault("is_private", False)

        entry = self.store.create_entry(user_id, entry_date, fields)

        if self.milestones is not None:
            self.milestones.schedule_entry_checks(user_id)
        return entry

    def get(self, user_id: str, entry_id: int) -> JourneyEntry:
        require_user(user_id)
        return self.store.get_entry_by_id(user_id, entry_id)

    def get_today(self, user_id: str) -> JourneyEntry:
        require_user(user_id)
        return self.store.get_entry_by_date(user_id, self.today())

    def update(self, user_id: str, entry_id: int, data: dict) -> JourneyEntry:
        """Overwrite the provided fields; omitted or null fields keep their value."""
        require_user(user_id)
        changes = {k: data[k] for k in ENTRY_FIELDS if data.get(k) is not None}
        validate_entry_fields(changes)
        return self.store.update_entry(user_id, entry_id, changes)

    def delete(self, user_id: str, entry_id: int):
        require_user(user_id)
        self.store.delete_entry(user_id, entry_id)

    def list(
        self,
        user_id: str,
        page: int = 1,
        page_size: int = DEFAULT_PAGE_SIZE,
        start_date: str | None = None,
        end_date: str | None = None,
    ) -> EntryListResponse:
        require_user(user_id)
        page = max(page, 1)
        if page_size < 1:
            page_size = DEFAULT_PAGE_SIZE
        page_size = min(page_size, MAX_PAGE_SIZE)

        start = parse_iso_date(start_date, "start date") if start_date else None
        end = parse_iso_date(end_date, "end date") if end_date else None

        entries, total = self.store.list_entries(user_id, page, page_size, start, end)
        return EntryListResponse(
            entries=[EntryOut.model_validate(e) for e in entries],
            total=total,
            page=page,
            page_size=page_size,
            total_pages=math.ceil(total / page_size),
        )
