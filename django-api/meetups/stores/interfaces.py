"""Store interfaces (repository pattern).

Stores must be swappable and return domain models. Every operation has a
blocking form and an async form prefixed with "a", following Django's
async ORM naming.
"""

from abc import ABC, abstractmethod

from meetups.domain import Event, EventData, EventId, EventType


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def list_events(self) -> list[Event]:
        """Return all events. Ordering is not guaranteed."""
        ...

    @abstractmethod
    def list_joined_events(self, user_id: str) -> list[Event]:
        """Return events that have a participant row for the user."""
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def event_exists(self, event_id: EventId) -> bool:
        """Check if an event exists."""
        ...

    @abstractmethod
    def create_event(self, data: EventData, organiser_id: str) -> Event:
        """Insert a new event owned by organiser_id and return it."""
        ...

    @abstractmethod
    def update_event(self, event_id: EventId, data: EventData) -> bool:
        """Overwrite the editable fields of an event.

        The organiser is never touched. Returns False if the event is gone.
        """
        ...

    @abstractmethod
    def add_participant(self, event_id: EventId, user_id: str) -> bool:
        """Insert a participant row. Returns False if it already exists."""
        ...

    @abstractmethod
    def remove_participant(self, event_id: EventId, user_id: str) -> bool:
        """Delete a participant row. Returns False if there was none."""
        ...

    @abstractmethod
    def participant_exists(self, event_id: EventId, user_id: str) -> bool:
        """Check if the user has joined the event."""
        ...

    @abstractmethod
    def list_types(self) -> list[EventType]:
        """Return all event types."""
        ...

    # Async counterparts, same contracts as the methods above.

    @abstractmethod
    async def alist_events(self) -> list[Event]: ...

    @abstractmethod
    async def alist_joined_events(self, user_id: str) -> list[Event]: ...

    @abstractmethod
    async def aget_event(self, event_id: EventId) -> Event | None: ...

    @abstractmethod
    async def aevent_exists(self, event_id: EventId) -> bool: ...

    @abstractmethod
    async def acreate_event(self, data: EventData, organiser_id: str) -> Event: ...

    @abstractmethod
    async def aupdate_event(self, event_id: EventId, data: EventData) -> bool: ...

    @abstractmethod
    async def aadd_participant(self, event_id: EventId, user_id: str) -> bool: ...

    @abstractmethod
    async def aremove_participant(self, event_id: EventId, user_id: str) -> bool: ...

    @abstractmethod
    async def aparticipant_exists(self, event_id: EventId, user_id: str) -> bool: ...

    @abstractmethod
    async def alist_types(self) -> list[EventType]: ...
