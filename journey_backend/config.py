import logging
import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()


def _split_csv(raw: str) -> list[str]:
    return [item.strip() for item in raw.split(",") if item.strip()]


@dataclass
class Settings:
    # --- Database ---
    # Default to local SQLite, but prefer environment variable in deployments
    database_url: str = "sqlite:///./data/journey.db"

    # --- JWT Configuration ---
    jwt_secret: str = "change-this-secret-key"
    jwt_algorithm: str = "HS256"
    jwt_expiry_hours: int = 720  # 30 days

    # --- Runtime ---
    log_level: str = "INFO"
    milestone_workers: int = 2
    cors_origins: list[str] = field(default_factory=lambda: ["*"])

    def __post_init__(self):
        # Fix for common SQLAlchemy issues with postgres:// vs postgresql://
        if self.database_url.startswith("postgres://"):
            self.database_url = self.database_url.replace("postgres://", "postgresql://", 1)


def load_settings() -> Settings:
    """Build Settings from the process environment (and .env, if present)."""
    return Settings(
        database_url=os.getenv("DATABASE_URL", "sqlite:///./data/journey.db"),
        jwt_secret=os.getenv("JWT_SECRET", "change-this-secret-key"),
        jwt_algorithm=os.getenv("JWT_ALGORITHM", "HS256"),
        jwt_expiry_hours=int(os.getenv("JWT_EXPIRY_HOURS", "720")),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        milestone_workers=max(1, int(os.getenv("MILESTONE_WORKERS", "2"))),
        cors_origins=_split_csv(os.getenv("CORS_ORIGINS", "*")) or ["*"],
    )


def configure_logging(settings: Settings) -> logging.Logger:
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    return logging.getLogger("journey_backend")
