"""Tests for JourneyEntryService: validation, uniqueness and listing."""

import pytest

from journey_backend.errors import ConflictError, NotFoundError, ValidationError
from journey_backend.services.entry_service import JourneyEntryService

from conftest import TODAY, add_entries, days_ago


@pytest.fixture
def service(store, recorder) -> JourneyEntryService:
    return JourneyEntryService(store, milestones=recorder, today=lambda: TODAY)


class TestCreateEntry:
    def test_defaults_to_today(self, service):
        entry = service.create("u1", {"mood_rating": 4})
        assert entry.entry_date == TODAY
        assert entry.activities == []
        assert entry.symptoms == []
        assert entry.is_private is False
        assert entry.mood_label == "Good"

    def test_empty_date_string_means_today(self, service):
        assert service.create("u1", {"mood_rating": 3, "entry_date": ""}).entry_date == TODAY

    def test_explicit_date_and_fields(self, service):
        entry = service.create("u1", {
            "entry_date": "2026-03-01",
            "mood_rating": 2,
            "anxiety_level": 4,
            "sleep_quality": 1,
            "energy_level": 5,
            "notes": "rough night",
            "activities": ["walk", "reading"],
            "symptoms": ["headache"],
            "gratitude_note": "tea",
            "is_private": True,
        })
        assert entry.entry_date.isoformat() == "2026-03-01"
        assert entry.activities == ["walk", "reading"]
        assert entry.symptoms == ["headache"]
        assert entry.is_private is True

    def test_schedules_milestone_checks(self, service, recorder):
        service.create("u1", {"mood_rating": 4})
        assert recorder.entry_checks == ["u1"]

    def test_duplicate_date_conflicts(self, service, recorder):
        service.create("u1", {"mood_rating": 4, "entry_date": "2026-03-10"})
        with pytest.raises(ConflictError):
            service.create("u1", {"mood_rating": 5, "entry_date": "2026-03-10"})
        assert recorder.entry_checks == ["u1"]

    def test_next_day_and_other_user_succeed(self, service):
        service.create("u1", {"mood_rating": 4, "entry_date": "2026-03-10"})
        service.create("u1", {"mood_rating": 4, "entry_date": "2026-03-11"})
        service.create("u2", {"mood_rating": 4, "entry_date": "2026-03-10"})

    @pytest.mark.parametrize(
        "data",
        [
            {},
            {"mood_rating": 0},
            {"mood_rating": 6},
            {"mood_rating": True},
            {"mood_rating": 3, "anxiety_level": 6},
            {"mood_rating": 3, "sleep_quality": 0},
            {"mood_rating": 3, "energy_level": 9},
            {"mood_rating": 3, "activities": [str(i) for i in range(11)]},
            {"mood_rating": 3, "symptoms": [str(i) for i in range(11)]},
            {"mood_rating": 3, "notes": "x" * 1001},
            {"mood_rating": 3, "gratitude_note": "x" * 501},
            {"mood_rating": 3, "entry_date": "15/03/2026"},
            {"mood_rating": 3, "entry_date": "2026-3-5"},
            {"mood_rating": 3, "entry_date": "2026-03-5"},
            {"mood_rating": 3, "entry_date": "2026-03-05T00:00:00"},
        ],
    )
    def test_rejects_invalid_input(self, service, recorder, data):
        with pytest.raises(ValidationError):
            service.create("u1", data)
        assert recorder.entry_checks == []

    def test_boundaries_are_accepted(self, service):
        entry = service.create("u1", {
            "mood_rating": 1,
            "anxiety_level": 5,
            "activities": [str(i) for i in range(10)],
            "notes": "x" * 1000,
            "gratitude_note": "x" * 500,
        })
        assert len(entry.activities) == 10

    def test_requires_user(self, service):
        with pytest.raises(ValidationError):
            service.create("", {"mood_rating": 3})


class TestReadUpdateDelete:
    def test_get_is_owner_scoped(self, service):
        entry = service.create("u1", {"mood_rating": 4})
        assert service.get("u1", entry.id).id == entry.id
        with pytest.raises(NotFoundError):
            service.get("u2", entry.id)

    def test_get_today(self, service):
        with pytest.raises(NotFoundError):
            service.get_today("u1")
        service.create("u1", {"mood_rating": 4})
        assert service.get_today("u1").entry_date == TODAY

    def test_partial_update(self, service):
        entry = service.create("u1", {"mood_rating": 2, "notes": "meh", "activities": ["walk"]})
        updated = service.update("u1", entry.id, {"mood_rating": 5, "notes": None})
        assert updated.mood_rating == 5
        assert updated.notes == "meh"
        assert updated.activities == ["walk"]

    def test_update_without_fields_returns_entry(self, service):
        entry = service.create("u1", {"mood_rating": 2})
        assert service.update("u1", entry.id, {}).mood_rating == 2

    def test_update_validates_present_fields(self, service):
        entry = service.create("u1", {"mood_rating": 2})
        with pytest.raises(ValidationError):
            service.update("u1", entry.id, {"mood_rating": 7})
        with pytest.raises(ValidationError):
            service.update("u1", entry.id, {"notes": "x" * 1001})

    def test_update_unknown_entry(self, service):
        with pytest.raises(NotFoundError):
            service.update("u1", 999, {"mood_rating": 3})

    def test_delete(self, service):
        entry = service.create("u1", {"mood_rating": 2})
        with pytest.raises(NotFoundError):
            service.delete("u2", entry.id)
        service.delete("u1", entry.id)
        with pytest.raises(NotFoundError):
            service.get("u1", entry.id)


class TestListEntries:
    def test_empty(self, service):
        result = service.list("u1")
        assert result.entries == []
        assert result.total == 0
        assert result.total_pages == 0
        assert result.page == 1
        assert result.page_size == 30

    def test_pagination_newest_first(self, service, store):
        add_entries(store, "u1", {0: 3, 1: 3, 2: 3, 3: 3, 4: 3})
        first = service.list("u1", page=1, page_size=2)
        assert first.total == 5
        assert first.total_pages == 3
        assert [e.entry_date for e in first.entries] == [days_ago(0), days_ago(1)]
        last = service.list("u1", page=3, page_size=2)
        assert [e.entry_date for e in last.entries] == [days_ago(4)]

    def test_page_and_size_are_clamped(self, service):
        result = service.list("u1", page=0, page_size=500)
        assert result.page == 1
        assert result.page_size == 100
        assert service.list("u1", page_size=0).page_size == 30

    def test_date_range_is_inclusive(self, service, store):
        add_entries(store, "u1", {0: 3, 2: 3, 5: 3, 9: 3})
        result = service.list("u1", start_date=days_ago(5).isoformat(), end_date=days_ago(2).isoformat())
        assert [e.entry_date for e in result.entries] == [days_ago(2), days_ago(5)]
        assert result.total == 2

    def test_bad_range_date(self, service):
        with pytest.raises(ValidationError):
            service.list("u1", start_date="yesterday")
        with pytest.raises(ValidationError):
            service.list("u1", start_date="2026-3-5")
        with pytest.raises(ValidationError):
            service.list("u1", end_date="2026-03-5")
