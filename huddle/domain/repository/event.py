"""Event repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from huddle.domain.model.event import Event
from huddle.domain.value import EventId


class EventRepository(ABC):
    """Read-only access to events."""

    @abstractmethod
    async def find_by_id(self, event_id: EventId) -> Optional[Event]:
        """Find an event by ID.

        Args:
            event_id: The event's unique identifier

        Returns:
            The event if found, None otherwise
        """
        pass
