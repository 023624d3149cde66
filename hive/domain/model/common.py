"""Base model for all domain entities."""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict


def utc_now() -> datetime:
    """Current time in UTC."""
    return datetime.now(timezone.utc)


class DomainModel(BaseModel):
    """Immutable entity; changes are made with ``model_copy(update=...)``."""

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,
    )
