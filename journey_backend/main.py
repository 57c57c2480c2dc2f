from contextlib import asynccontextmanager
from datetime import date
from typing import Callable

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from journey_backend.clock import utc_today
from journey_backend.config import Settings, configure_logging, load_settings
from journey_backend.database import build_engine, build_session_factory, init_db
from journey_backend.errors import register_exception_handlers
from journey_backend.routes.analytics_routes import router as analytics_router
from journey_backend.routes.entry_routes import router as entry_router
from journey_backend.routes.goal_routes import router as goal_router
from journey_backend.services.dispatcher import BackgroundDispatcher
from journey_backend.services.milestone_service import MilestoneService


def create_app(settings: Settings | None = None, today: Callable[[], date] = utc_today) -> FastAPI:
    settings = settings or load_settings()
    logger = configure_logging(settings)

    engine = build_engine(settings)
    session_factory = build_session_factory(engine)
    milestones = MilestoneService(session_factory, logger=logger.getChild("milestones"), today=today)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        init_db(engine, settings.database_url)
        # Milestone checks outlive the request that queued them, not the process
        dispatcher = BackgroundDispatcher(settings.milestone_workers, logger=logger.getChild("dispatcher"))
        milestones.dispatcher = dispatcher
        app.state.dispatcher = dispatcher
        logger.info("Journey backend started.")
        try:
            yield
        finally:
            milestones.dispatcher = None
            dispatcher.shutdown(wait=True)
            engine.dispose()

    app = FastAPI(title="Journey Tracker", lifespan=lifespan)
    app.state.settings = settings
    app.state.session_factory = session_factory
    app.state.milestones = milestones
    app.state.today = today

    @app.get("/api/v1/health-check")
    async def health():
        return {"status": "ok", "message": "Backend is alive!"}

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    app.include_router(entry_router)
    app.include_router(goal_router)
    app.include_router(analytics_router)
    return app


def main():
    import uvicorn
    uvicorn.run("journey_backend.main:create_app", factory=True, host="0.0.0.0", port=8000)


if __name__ == "__main__":
    main()
