"""Domain models representing persisted state and service inputs/outputs.

These are pure domain objects with no API input rules.
Django ORM models are in meetups/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime

from meetups.domain.value_objects import EventId, TypeId


@dataclass(frozen=True)
class EventType:
    """Lookup category attached to an Event."""

    id: TypeId
    name: str


@dataclass(frozen=True)
class EventData:
    """Editable fields of an Event, as supplied by the caller on add or update."""

    name: str
    description: str
    start: datetime
    end: datetime
    type_id: TypeId | None = None

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise ValueError("Event cannot end before it starts")


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId
    name: str
    description: str
    start: datetime
    end: datetime
    organiser_id: str
    created_on: datetime
    type: EventType | None = None


@dataclass(frozen=True)
class EventSummary:
    """Listing row for an Event."""

    id: EventId
    name: str
    start: datetime
    organiser_id: str
    type_name: str | None


@dataclass(frozen=True)
class EventDetail:
    """Display-ready view of a single Event, with the type name resolved."""

    id: EventId
    name: str
    description: str
    start: datetime
    end: datetime
    organiser_id: str
    created_on: datetime
    type_name: str | None


@dataclass(frozen=True)
class EventEditForm:
    """Raw editable fields of an Event plus the types it may be assigned."""

    name: str
    description: str
    start: datetime
    end: datetime
    type_id: TypeId | None
    types: tuple[EventType, ...] = ()
