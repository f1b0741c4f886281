"""Serializers for transforming domain models to API responses and back."""

from rest_framework import serializers

from meetups.domain import EventData, TypeId


class EventTypeSerializer(serializers.Serializer):
    """Serializer for EventType domain model."""

    id = serializers.UUIDField(source="id.value")
    name = serializers.CharField()


class EventSummarySerializer(serializers.Serializer):
    """Serializer for EventSummary domain model."""

    id = serializers.UUIDField(source="id.value")
    name = serializers.CharField()
    start = serializers.DateTimeField()
    organiser_id = serializers.CharField()
    type = serializers.CharField(source="type_name", allow_null=True)


class EventDetailSerializer(serializers.Serializer):
    """Serializer for EventDetail domain model."""

    id = serializers.UUIDField(source="id.value")
    name = serializers.CharField()
    description = serializers.CharField()
    start = serializers.DateTimeField()
    end = serializers.DateTimeField()
    organiser_id = serializers.CharField()
    created_on = serializers.DateTimeField()
    type = serializers.CharField(source="type_name", allow_null=True)


class EventEditFormSerializer(serializers.Serializer):
    """Serializer for EventEditForm domain model."""

    name = serializers.CharField()
    description = serializers.CharField()
    start = serializers.DateTimeField()
    end = serializers.DateTimeField()
    type_id = serializers.SerializerMethodField()
    types = EventTypeSerializer(many=True)

    def get_type_id(self, form) -> str | None:
        return str(form.type_id) if form.type_id is not None else None


class EventDataSerializer(serializers.Serializer):
    """Validates add/update payloads and builds EventData.

    Expects ``type_ids`` in the context: the set of existing type UUIDs.
    """

    name = serializers.CharField(min_length=5, max_length=20)
    description = serializers.CharField(min_length=15, max_length=150)
    start = serializers.DateTimeField()
    end = serializers.DateTimeField()
    type_id = serializers.UUIDField(required=False, allow_null=True)

    def validate_type_id(self, value):
        if value is not None and value not in self.context.get("type_ids", set()):
            raise serializers.ValidationError("Unknown event type")
        return value

    def validate(self, attrs):
        if attrs["end"] < attrs["start"]:
            raise serializers.ValidationError(
                {"end": "Event cannot end before it starts"}
            )
        return attrs

    def to_event_data(self) -> EventData:
        data = self.validated_data
        type_id = data.get("type_id")
        return EventData(
            name=data["name"],
            description=data["description"],
            start=data["start"],
            end=data["end"],
            type_id=TypeId(type_id) if type_id is not None else None,
        )
