"""Event entity.

Events are owned by the events module; comments only need to know that
an event exists, so this is a read-only projection.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from huddle.domain.model.common import DomainModel
from huddle.domain.value import EventId


class Event(DomainModel):
    """Event an audience can comment on."""

    id: EventId
    title: str = Field(min_length=1, max_length=200)
    starts_at: Optional[datetime] = None
    created_at: datetime
