"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors and outcomes to HTTP responses
- Never contain business logic
- Never expose internal error details

The acting user comes from the X-User-Id header and is trusted as-is.
"""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from meetups.domain import EventId, Outcome
from meetups.domain.errors import (
    DomainError,
    ErrorCode,
    EventNotFoundError,
    InvalidEventIdError,
    MissingUserIdError,
    NotOrganiserError,
    error_for_outcome,
)
from meetups.handlers.serializers import (
    EventDataSerializer,
    EventDetailSerializer,
    EventEditFormSerializer,
    EventSummarySerializer,
    EventTypeSerializer,
)
from meetups.services import EventService
from meetups.stores import DjangoEventStore

USER_ID_HEADER = "X-User-Id"

ERROR_STATUS = {
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.INVALID_EVENT_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.NOT_ORGANISER: status.HTTP_403_FORBIDDEN,
    ErrorCode.ALREADY_JOINED: status.HTTP_409_CONFLICT,
    ErrorCode.NOT_JOINED: status.HTTP_409_CONFLICT,
    ErrorCode.MISSING_USER_ID: status.HTTP_400_BAD_REQUEST,
}


def error_response(error: DomainError) -> Response:
    return Response(
        {"code": error.code.value, "message": error.message},
        status=ERROR_STATUS[error.code],
    )


def parse_event_id(raw: str) -> EventId:
    try:
        return EventId.from_string(raw)
    except ValueError:
        raise InvalidEventIdError() from None


def require_user_id(request: Request) -> str:
    user_id = request.headers.get(USER_ID_HEADER, "").strip()
    if not user_id:
        raise MissingUserIdError()
    return user_id


class EventServiceView(APIView):
    """Base view wiring the service and turning DomainError into a response."""

    service_class = EventService
    store_class = DjangoEventStore

    def get_service(self) -> EventService:
        return self.service_class(self.store_class())

    def handle_exception(self, exc):
        if isinstance(exc, DomainError):
            return error_response(exc)
        return super().handle_exception(exc)

    def event_data_serializer(self, service: EventService, data) -> EventDataSerializer:
        type_ids = {event_type.id.value for event_type in service.get_all_types()}
        return EventDataSerializer(data=data, context={"type_ids": type_ids})

    def outcome_response(self, outcome: Outcome, event_id: EventId) -> Response:
        error = error_for_outcome(outcome, str(event_id))
        if error is not None:
            return error_response(error)
        return Response(status=status.HTTP_204_NO_CONTENT)


class EventListView(EventServiceView):
    """Handler for GET/POST /api/events"""

    def get(self, request: Request) -> Response:
        events = self.get_service().get_all_events()
        return Response(EventSummarySerializer(events, many=True).data)

    def post(self, request: Request) -> Response:
        user_id = require_user_id(request)
        service = self.get_service()
        serializer = self.event_data_serializer(service, request.data)
        serializer.is_valid(raise_exception=True)
        event_id = service.add_event(serializer.to_event_data(), user_id)
        return Response({"id": str(event_id)}, status=status.HTTP_201_CREATED)


class JoinedEventListView(EventServiceView):
    """Handler for GET /api/events/joined"""

    def get(self, request: Request) -> Response:
        user_id = require_user_id(request)
        events = self.get_service().get_user_joined_events(user_id)
        return Response(EventSummarySerializer(events, many=True).data)


class EventDetailView(EventServiceView):
    """Handler for GET/PUT /api/events/{event_id}"""

    def get(self, request: Request, event_id: str) -> Response:
        parsed_id = parse_event_id(event_id)
        detail = self.get_service().get_event_details(parsed_id)
        if detail is None:
            raise EventNotFoundError(event_id)
        return Response(EventDetailSerializer(detail).data)

    def put(self, request: Request, event_id: str) -> Response:
        parsed_id = parse_event_id(event_id)
        user_id = require_user_id(request)
        service = self.get_service()
        serializer = self.event_data_serializer(service, request.data)
        serializer.is_valid(raise_exception=True)
        outcome = service.attempt_update(parsed_id, serializer.to_event_data(), user_id)
        return self.outcome_response(outcome, parsed_id)


class EventEditView(EventServiceView):
    """Handler for GET /api/events/{event_id}/edit"""

    def get(self, request: Request, event_id: str) -> Response:
        parsed_id = parse_event_id(event_id)
        user_id = require_user_id(request)
        service = self.get_service()
        form = service.get_event_for_edit(parsed_id)
        if form is None:
            raise EventNotFoundError(event_id)
        if service.get_event_organiser_id(parsed_id) != user_id:
            raise NotOrganiserError(event_id)
        return Response(EventEditFormSerializer(form).data)


class JoinEventView(EventServiceView):
    """Handler for POST /api/events/{event_id}/join"""

    def post(self, request: Request, event_id: str) -> Response:
        parsed_id = parse_event_id(event_id)
        user_id = require_user_id(request)
        outcome = self.get_service().attempt_join(parsed_id, user_id)
        return self.outcome_response(outcome, parsed_id)


class LeaveEventView(EventServiceView):
    """Handler for POST /api/events/{event_id}/leave"""

    def post(self, request: Request, event_id: str) -> Response:
        parsed_id = parse_event_id(event_id)
        user_id = require_user_id(request)
        outcome = self.get_service().attempt_leave(parsed_id, user_id)
        return self.outcome_response(outcome, parsed_id)


class TypeListView(EventServiceView):
    """Handler for GET /api/types"""

    def get(self, request: Request) -> Response:
        types = self.get_service().get_all_types()
        return Response(EventTypeSerializer(types, many=True).data)
