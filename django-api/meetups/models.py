"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

import uuid

from django.db import models


class Type(models.Model):
    """Persistence model for event types (lookup data)."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=15)

    class Meta:
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name


class Event(models.Model):
    """Persistence model for events."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=20)
    description = models.CharField(max_length=150)
    start = models.DateTimeField()
    end = models.DateTimeField()
    created_on = models.DateTimeField(auto_now_add=True)
    type = models.ForeignKey(
        Type,
        on_delete=models.PROTECT,
        related_name="events",
        blank=True,
        null=True,
    )
    organiser_id = models.CharField(max_length=255, db_index=True)

    class Meta:
        indexes = [
            models.Index(fields=["start"], name="meetups_event_start_idx"),
        ]

    def __str__(self) -> str:
        return self.name


class EventParticipant(models.Model):
    """Persistence model for a user's membership in an event."""

    event = models.ForeignKey(
        Event, on_delete=models.CASCADE, related_name="participants"
    )
    helper_id = models.CharField(max_length=255)

    class Meta:
        constraints = [
            models.UniqueConstraint(
                fields=["event", "helper_id"], name="unique_event_participant"
            ),
        ]
        indexes = [
            models.Index(fields=["helper_id"], name="meetups_helper_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.helper_id} @ {self.event.name}"
