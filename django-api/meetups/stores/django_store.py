"""Django ORM implementation of the EventStore."""

import logging

from asgiref.sync import sync_to_async
from django.db import transaction

from meetups import models
from meetups.domain import Event, EventData, EventId, EventType, TypeId
from meetups.stores.interfaces import EventStore

logger = logging.getLogger(__name__)


def _to_type(row: models.Type) -> EventType:
    return EventType(id=TypeId(row.id), name=row.name)


def _to_event(row: models.Event) -> Event:
    return Event(
        id=EventId(row.id),
        name=row.name,
        description=row.description,
        start=row.start,
        end=row.end,
        organiser_id=row.organiser_id,
        created_on=row.created_on,
        type=_to_type(row.type) if row.type is not None else None,
    )


def _event_fields(data: EventData) -> dict:
    return {
        "name": data.name,
        "description": data.description,
        "start": data.start,
        "end": data.end,
        "type_id": data.type_id.value if data.type_id is not None else None,
    }


def _events():
    return models.Event.objects.select_related("type")


def _participant(event_id: EventId, user_id: str):
    return models.EventParticipant.objects.filter(
        event_id=event_id.value, helper_id=user_id
    )


class DjangoEventStore(EventStore):
    """Relational event store using Django ORM."""

    def list_events(self) -> list[Event]:
        return [_to_event(row) for row in _events()]

    def list_joined_events(self, user_id: str) -> list[Event]:
        rows = _events().filter(participants__helper_id=user_id)
        return [_to_event(row) for row in rows]

    def get_event(self, event_id: EventId) -> Event | None:
        row = _events().filter(pk=event_id.value).first()
        return _to_event(row) if row is not None else None

    def event_exists(self, event_id: EventId) -> bool:
        return models.Event.objects.filter(pk=event_id.value).exists()

    def create_event(self, data: EventData, organiser_id: str) -> Event:
        row = models.Event.objects.create(organiser_id=organiser_id, **_event_fields(data))
        # Re-read so the type relation is populated.
        return _to_event(_events().get(pk=row.pk))

    def update_event(self, event_id: EventId, data: EventData) -> bool:
        with transaction.atomic():
            row = (
                models.Event.objects.select_for_update()
                .filter(pk=event_id.value)
                .first()
            )
            if row is None:
                return False
            for field, value in _event_fields(data).items():
                setattr(row, field, value)
            row.save(update_fields=["name", "description", "start", "end", "type"])
        return True

    def add_participant(self, event_id: EventId, user_id: str) -> bool:
        # get_or_create retries the lookup on IntegrityError, so the unique
        # constraint settles concurrent joins for the same pair.
        _, created = models.EventParticipant.objects.get_or_create(
            event_id=event_id.value, helper_id=user_id
        )
        if not created:
            logger.debug("Participant %s already in event %s", user_id, event_id)
        return created

    def remove_participant(self, event_id: EventId, user_id: str) -> bool:
        deleted, _ = _participant(event_id, user_id).delete()
        return deleted > 0

    def participant_exists(self, event_id: EventId, user_id: str) -> bool:
        return _participant(event_id, user_id).exists()

    def list_types(self) -> list[EventType]:
        return [_to_type(row) for row in models.Type.objects.all()]

    async def alist_events(self) -> list[Event]:
        return [_to_event(row) async for row in _events()]

    async def alist_joined_events(self, user_id: str) -> list[Event]:
        rows = _events().filter(participants__helper_id=user_id)
        return [_to_event(row) async for row in rows]

    async def aget_event(self, event_id: EventId) -> Event | None:
        row = await _events().filter(pk=event_id.value).afirst()
        return _to_event(row) if row is not None else None

    async def aevent_exists(self, event_id: EventId) -> bool:
        return await models.Event.objects.filter(pk=event_id.value).aexists()

    async def acreate_event(self, data: EventData, organiser_id: str) -> Event:
        row = await models.Event.objects.acreate(
            organiser_id=organiser_id, **_event_fields(data)
        )
        return _to_event(await _events().aget(pk=row.pk))

    async def aupdate_event(self, event_id: EventId, data: EventData) -> bool:
        # transaction.atomic has no async form.
        return await sync_to_async(self.update_event)(event_id, data)

    async def aadd_participant(self, event_id: EventId, user_id: str) -> bool:
        _, created = await models.EventParticipant.objects.aget_or_create(
            event_id=event_id.value, helper_id=user_id
        )
        if not created:
            logger.debug("Participant %s already in event %s", user_id, event_id)
        return created

    async def aremove_participant(self, event_id: EventId, user_id: str) -> bool:
        deleted, _ = await _participant(event_id, user_id).adelete()
        return deleted > 0

    async def aparticipant_exists(self, event_id: EventId, user_id: str) -> bool:
        return await _participant(event_id, user_id).aexists()

    async def alist_types(self) -> list[EventType]:
        return [_to_type(row) async for row in models.Type.objects.all()]
