"""In-memory implementation of the EventStore.

Used as a drop-in replacement for the database in service tests.
"""

import threading
import uuid
from dataclasses import replace
from datetime import datetime, timezone

from meetups.domain import Event, EventData, EventId, EventType, TypeId
from meetups.stores.interfaces import EventStore


class InMemoryEventStore(EventStore):
    """Dict-backed event store. Each instance is an isolated, empty store."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._types: dict[TypeId, EventType] = {}
        self._events: dict[EventId, Event] = {}
        self._participants: set[tuple[EventId, str]] = set()

    def add_type(self, name: str) -> EventType:
        """Seed a lookup type; types are created administratively."""
        event_type = EventType(id=TypeId(uuid.uuid4()), name=name)
        with self._lock:
            self._types[event_type.id] = event_type
        return event_type

    def _resolve_type(self, type_id: TypeId | None) -> EventType | None:
        if type_id is None:
            return None
        try:
            return self._types[type_id]
        except KeyError:
            raise LookupError(f"Type {type_id} does not exist") from None

    def list_events(self) -> list[Event]:
        with self._lock:
            return list(self._events.values())

    def list_joined_events(self, user_id: str) -> list[Event]:
        with self._lock:
            return [
                event
                for event_id, event in self._events.items()
                if (event_id, user_id) in self._participants
            ]

    def get_event(self, event_id: EventId) -> Event | None:
        with self._lock:
            return self._events.get(event_id)

    def event_exists(self, event_id: EventId) -> bool:
        with self._lock:
            return event_id in self._events

    def create_event(self, data: EventData, organiser_id: str) -> Event:
        with self._lock:
            event = Event(
                id=EventId(uuid.uuid4()),
                name=data.name,
                description=data.description,
                start=data.start,
                end=data.end,
                organiser_id=organiser_id,
                created_on=datetime.now(timezone.utc),
                type=self._resolve_type(data.type_id),
            )
            self._events[event.id] = event
        return event

    def update_event(self, event_id: EventId, data: EventData) -> bool:
        with self._lock:
            current = self._events.get(event_id)
            if current is None:
                return False
            self._events[event_id] = replace(
                current,
                name=data.name,
                description=data.description,
                start=data.start,
                end=data.end,
                type=self._resolve_type(data.type_id),
            )
        return True

    def add_participant(self, event_id: EventId, user_id: str) -> bool:
        with self._lock:
            if event_id not in self._events:
                raise LookupError(f"Event {event_id} does not exist")
            key = (event_id, user_id)
            if key in self._participants:
                return False
            self._participants.add(key)
        return True

    def remove_participant(self, event_id: EventId, user_id: str) -> bool:
        with self._lock:
            key = (event_id, user_id)
            if key not in self._participants:
                return False
            self._participants.remove(key)
        return True

    def participant_exists(self, event_id: EventId, user_id: str) -> bool:
        with self._lock:
            return (event_id, user_id) in self._participants

    def list_types(self) -> list[EventType]:
        with self._lock:
            return list(self._types.values())

    def participant_count(self) -> int:
        with self._lock:
            return len(self._participants)

    # Nothing here blocks, so the async forms call straight through.

    async def alist_events(self) -> list[Event]:
        return self.list_events()

    async def alist_joined_events(self, user_id: str) -> list[Event]:
        return self.list_joined_events(user_id)

    async def aget_event(self, event_id: EventId) -> Event | None:
        return self.get_event(event_id)

    async def aevent_exists(self, event_id: EventId) -> bool:
        return self.event_exists(event_id)

    async def acreate_event(self, data: EventData, organiser_id: str) -> Event:
        return self.create_event(data, organiser_id)

    async def aupdate_event(self, event_id: EventId, data: EventData) -> bool:
        return self.update_event(event_id, data)

    async def aadd_participant(self, event_id: EventId, user_id: str) -> bool:
        return self.add_participant(event_id, user_id)

    async def aremove_participant(self, event_id: EventId, user_id: str) -> bool:
        return self.remove_participant(event_id, user_id)

    async def aparticipant_exists(self, event_id: EventId, user_id: str) -> bool:
        return self.participant_exists(event_id, user_id)

    async def alist_types(self) -> list[EventType]:
        return self.list_types()
