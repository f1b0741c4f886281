"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Check organiser rights and membership rules
- Return domain models, None for absence, and Outcome for rejected writes
- Let store failures propagate untouched

Every operation has an async form prefixed with "a" that awaits the store's
async methods and follows the same rules.
"""

import logging

from meetups.domain import (
    Event,
    EventData,
    EventDetail,
    EventEditForm,
    EventId,
    EventSummary,
    EventType,
    Outcome,
)
from meetups.stores.interfaces import EventStore

logger = logging.getLogger(__name__)


def _type_name(event: Event) -> str | None:
    return event.type.name if event.type is not None else None


def _summary(event: Event) -> EventSummary:
    return EventSummary(
        id=event.id,
        name=event.name,
        start=event.start,
        organiser_id=event.organiser_id,
        type_name=_type_name(event),
    )


def _detail(event: Event) -> EventDetail:
    return EventDetail(
        id=event.id,
        name=event.name,
        description=event.description,
        start=event.start,
        end=event.end,
        organiser_id=event.organiser_id,
        created_on=event.created_on,
        type_name=_type_name(event),
    )


def _edit_form(event: Event, types: list[EventType]) -> EventEditForm:
    return EventEditForm(
        name=event.name,
        description=event.description,
        start=event.start,
        end=event.end,
        type_id=event.type.id if event.type is not None else None,
        types=tuple(types),
    )


def _log_forbidden_update(event_id: EventId, user_id: str) -> None:
    logger.info(
        "Update of event %s by %s rejected: not the organiser", event_id, user_id
    )


class EventService:
    """Service for creating, editing, joining and leaving events."""

    def __init__(self, store: EventStore) -> None:
        self._store = store

    def add_event(self, data: EventData, organiser_id: str) -> EventId:
        """Create an event owned by organiser_id and return its ID."""
        event = self._store.create_event(data, organiser_id)
        logger.info("Event %s created by %s", event.id, organiser_id)
        return event.id

    def get_all_events(self) -> list[EventSummary]:
        """Return every event. Ordering is not guaranteed."""
        return [_summary(event) for event in self._store.list_events()]

    def get_event_details(self, event_id: EventId) -> EventDetail | None:
        """Return display details for an event, or None if it does not exist."""
        event = self._store.get_event(event_id)
        return _detail(event) if event is not None else None

    def get_event_for_edit(self, event_id: EventId) -> EventEditForm | None:
        """Return the editable fields of an event, or None if it does not exist."""
        event = self._store.get_event(event_id)
        if event is None:
            return None
        return _edit_form(event, self._store.list_types())

    def get_event_organiser_id(self, event_id: EventId) -> str | None:
        """Return the organiser of an event, or None if it does not exist."""
        event = self._store.get_event(event_id)
        return event.organiser_id if event is not None else None

    def get_user_joined_events(self, user_id: str) -> list[EventSummary]:
        """Return the events the user has joined."""
        return [_summary(event) for event in self._store.list_joined_events(user_id)]

    def get_all_types(self) -> list[EventType]:
        """Return every event type."""
        return self._store.list_types()

    def is_user_joined_event(self, event_id: EventId, user_id: str) -> bool:
        """Return True if the user is a participant of the event."""
        return self._store.participant_exists(event_id, user_id)

    def attempt_join(self, event_id: EventId, user_id: str) -> Outcome:
        """Add the user to the event's participants.

        Returns:
            Outcome.NOT_FOUND if the event does not exist,
            Outcome.ALREADY_JOINED if the user is already a participant,
            Outcome.OK otherwise.
        """
        if not self._store.event_exists(event_id):
            logger.debug("Join rejected: event %s not found", event_id)
            return Outcome.NOT_FOUND
        if not self._store.add_participant(event_id, user_id):
            return Outcome.ALREADY_JOINED
        logger.info("User %s joined event %s", user_id, event_id)
        return Outcome.OK

    def attempt_leave(self, event_id: EventId, user_id: str) -> Outcome:
        """Remove the user from the event's participants.

        A missing event and a user who never joined both yield
        Outcome.NOT_JOINED.
        """
        if not self._store.remove_participant(event_id, user_id):
            return Outcome.NOT_JOINED
        logger.info("User %s left event %s", user_id, event_id)
        return Outcome.OK

    def attempt_update(
        self, event_id: EventId, data: EventData, user_id: str
    ) -> Outcome:
        """Overwrite an event's editable fields on behalf of its organiser.

        Returns:
            Outcome.NOT_FOUND if the event does not exist,
            Outcome.FORBIDDEN if user_id is not the organiser,
            Outcome.OK once the new values are stored.
        """
        organiser_id = self.get_event_organiser_id(event_id)
        if organiser_id is None:
            return Outcome.NOT_FOUND
        # organiser_id never changes after creation.
        if organiser_id != user_id:
            _log_forbidden_update(event_id, user_id)
            return Outcome.FORBIDDEN
        if not self._store.update_event(event_id, data):
            return Outcome.NOT_FOUND
        logger.info("Event %s updated by %s", event_id, user_id)
        return Outcome.OK

    def join_event(self, event_id: EventId, user_id: str) -> bool:
        return self.attempt_join(event_id, user_id).succeeded

    def leave_event(self, event_id: EventId, user_id: str) -> bool:
        return self.attempt_leave(event_id, user_id).succeeded

    def update_event(self, event_id: EventId, data: EventData, user_id: str) -> bool:
        return self.attempt_update(event_id, data, user_id).succeeded

    async def aadd_event(self, data: EventData, organiser_id: str) -> EventId:
        event = await self._store.acreate_event(data, organiser_id)
        logger.info("Event %s created by %s", event.id, organiser_id)
        return event.id

    async def aget_all_events(self) -> list[EventSummary]:
        return [_summary(event) for event in await self._store.alist_events()]

    async def aget_event_details(self, event_id: EventId) -> EventDetail | None:
        event = await self._store.aget_event(event_id)
        return _detail(event) if event is not None else None

    async def aget_event_for_edit(self, event_id: EventId) -> EventEditForm | None:
        event = await self._store.aget_event(event_id)
        if event is None:
            return None
        return _edit_form(event, await self._store.alist_types())

    async def aget_event_organiser_id(self, event_id: EventId) -> str | None:
        event = await self._store.aget_event(event_id)
        return event.organiser_id if event is not None else None

    async def aget_user_joined_events(self, user_id: str) -> list[EventSummary]:
        events = await self._store.alist_joined_events(user_id)
        return [_summary(event) for event in events]

    async def aget_all_types(self) -> list[EventType]:
        return await self._store.alist_types()

    async def ais_user_joined_event(self, event_id: EventId, user_id: str) -> bool:
        return await self._store.aparticipant_exists(event_id, user_id)

    async def aattempt_join(self, event_id: EventId, user_id: str) -> Outcome:
        """Async form of attempt_join."""
        if not await self._store.aevent_exists(event_id):
            logger.debug("Join rejected: event %s not found", event_id)
            return Outcome.NOT_FOUND
        if not await self._store.aadd_participant(event_id, user_id):
            return Outcome.ALREADY_JOINED
        logger.info("User %s joined event %s", user_id, event_id)
        return Outcome.OK

    async def aattempt_leave(self, event_id: EventId, user_id: str) -> Outcome:
        """Async form of attempt_leave."""
        if not await self._store.aremove_participant(event_id, user_id):
            return Outcome.NOT_JOINED
        logger.info("User %s left event %s", user_id, event_id)
        return Outcome.OK

    async def aattempt_update(
        self, event_id: EventId, data: EventData, user_id: str
    ) -> Outcome:
        """Async form of attempt_update."""
        organiser_id = await self.aget_event_organiser_id(event_id)
        if organiser_id is None:
            return Outcome.NOT_FOUND
        if organiser_id != user_id:
            _log_forbidden_update(event_id, user_id)
            return Outcome.FORBIDDEN
        if not await self._store.aupdate_event(event_id, data):
            return Outcome.NOT_FOUND
        logger.info("Event %s updated by %s", event_id, user_id)
        return Outcome.OK

    async def ajoin_event(self, event_id: EventId, user_id: str) -> bool:
        return (await self.aattempt_join(event_id, user_id)).succeeded

    async def aleave_event(self, event_id: EventId, user_id: str) -> bool:
        return (await self.aattempt_leave(event_id, user_id)).succeeded

    async def aupdate_event(
        self, event_id: EventId, data: EventData, user_id: str
    ) -> bool:
        return (await self.aattempt_update(event_id, data, user_id)).succeeded
