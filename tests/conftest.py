"""Shared fixtures: a throwaway SQLite file per test and a fixed calendar date."""

from datetime import date, timedelta

import pytest

import journey_backend.models  # noqa: F401  (registers tables)
from journey_backend.config import Settings
from journey_backend.database import Base, build_engine, build_session_factory
from journey_backend.services.milestone_service import MilestoneService
from journey_backend.store import JourneyStore

TODAY = date(2026, 3, 15)


def days_ago(n: int) -> date:
    return TODAY - timedelta(days=n)


class RecordingMilestones:
    """Stand-in for MilestoneService that only remembers what was scheduled."""

    def __init__(self):
        self.entry_checks: list[str] = []
        self.goal_checks: list[str] = []

    def schedule_entry_checks(self, user_id: str):
        self.entry_checks.append(user_id)

    def schedule_goal_checks(self, user_id: str):
        self.goal_checks.append(user_id)


def add_entries(store: JourneyStore, user_id: str, moods_by_age: dict[int, int]):
    """Create one entry per {days_ago: mood} pair."""
    for age, mood in moods_by_age.items():
        store.create_entry(user_id, days_ago(age), {"mood_rating": mood, "activities": [], "symptoms": []})


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        database_url=f"sqlite:///{tmp_path / 'journey.db'}",
        jwt_secret="test-secret",
        milestone_workers=1,
        log_level="DEBUG",
    )


@pytest.fixture
def engine(settings):
    engine = build_engine(settings)
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return build_session_factory(engine)


@pytest.fixture
def db(session_factory):
    with session_factory() as session:
        yield session


@pytest.fixture
def store(db) -> JourneyStore:
    return JourneyStore(db)


@pytest.fixture
def recorder() -> RecordingMilestones:
    return RecordingMilestones()


@pytest.fixture
def milestones(session_factory) -> MilestoneService:
    return MilestoneService(session_factory, today=lambda: TODAY)
