from meetups.domain.models import (
    Event,
    EventData,
    EventDetail,
    EventEditForm,
    EventSummary,
    EventType,
)
from meetups.domain.outcomes import Outcome
from meetups.domain.value_objects import EventId, TypeId

__all__ = [
    "Event",
    "EventData",
    "EventDetail",
    "EventEditForm",
    "EventSummary",
    "EventType",
    "EventId",
    "TypeId",
    "Outcome",
]
