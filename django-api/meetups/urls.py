from django.urls import path

from meetups.handlers import (
    EventDetailView,
    EventEditView,
    EventListView,
    JoinedEventListView,
    JoinEventView,
    LeaveEventView,
    TypeListView,
)

urlpatterns = [
    path("events", EventListView.as_view(), name="event-list"),
    path("events/joined", JoinedEventListView.as_view(), name="event-joined"),
    path("events/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
    path("events/<str:event_id>/edit", EventEditView.as_view(), name="event-edit"),
    path("events/<str:event_id>/join", JoinEventView.as_view(), name="event-join"),
    path("events/<str:event_id>/leave", LeaveEventView.as_view(), name="event-leave"),
    path("types", TypeListView.as_view(), name="type-list"),
]
