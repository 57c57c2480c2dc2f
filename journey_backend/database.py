import logging
import os

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base

from journey_backend.config import Settings

logger = logging.getLogger(__name__)

Base = declarative_base()


def build_engine(settings: Settings) -> Engine:
    # Only use connect_args if we are using SQLite
    engine_args = {}
    if settings.database_url.startswith("sqlite"):
        engine_args["connect_args"] = {"check_same_thread": False}
    else:
        # Production settings for PostgreSQL
        engine_args.update({
            "pool_size": 5,
            "max_overflow": 10,
            "pool_timeout": 30,
            "pool_recycle": 1800,
        })

    try:
        return create_engine(settings.database_url, **engine_args, echo=False)
    except Exception as e:
        logger.error(f"Failed to create engine: {e}")
        raise


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine, expire_on_commit=False)


def get_db(request: Request):
    """FastAPI dependency — yields a database session and closes it after use."""
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def init_db(engine: Engine, database_url: str):
    """Create the data/ directory for local SQLite, then create all tables."""
    if database_url.startswith("sqlite:///./"):
        os.makedirs("data", exist_ok=True)

    # Import all models so they register with Base.metadata
    from journey_backend.models.journey_entry import JourneyEntry  # noqa: F401
    from journey_backend.models.journey_goal import JourneyGoal  # noqa: F401
    from journey_backend.models.journey_milestone import JourneyMilestone  # noqa: F401

    Base.metadata.create_all(bind=engine)
    logger.info("Database initialized successfully.")
