"""PostgreSQL implementation of Event repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from huddle.domain.model import Event
from huddle.domain.repository import EventRepository
from huddle.domain.value import EventId
from huddle.persistence.errors import translate_errors
from huddle.persistence.mappers import row_to_event
from huddle.persistence.tables import events_table


class PostgresEventRepository(EventRepository):
    """PostgreSQL implementation of EventRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, event_id: EventId) -> Optional[Event]:
        """Find an event by ID."""
        stmt = select(events_table).where(events_table.c.id == event_id)
        with translate_errors("events.find_by_id"):
            result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_event(row._asdict()) if row else None
