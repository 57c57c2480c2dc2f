from datetime import date, datetime, timezone


def utc_today() -> date:
    """Server-side calendar date used for "today" everywhere in the journey core."""
    return datetime.now(timezone.utc).date()
