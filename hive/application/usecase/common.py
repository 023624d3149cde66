"""Response schemas shared across use cases."""

from pydantic import BaseModel


class ModifiedResponse(BaseModel):
    """Number of modified records."""

    modified_count: int
