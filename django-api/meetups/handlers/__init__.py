from meetups.handlers.views import (
    EventDetailView,
    EventEditView,
    EventListView,
    JoinedEventListView,
    JoinEventView,
    LeaveEventView,
    TypeListView,
)

__all__ = [
    "EventDetailView",
    "EventEditView",
    "EventListView",
    "JoinedEventListView",
    "JoinEventView",
    "LeaveEventView",
    "TypeListView",
]
