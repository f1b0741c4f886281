"""Integration tests for EventService over the Django ORM store.

Rows are seeded straight through the ORM, the way an admin would create them.
Run with: pytest tests/test_django_store.py -v
"""

import uuid
from datetime import timedelta

import pytest
from django.db import IntegrityError, transaction
from django.db.models.query import QuerySet
from django.utils import timezone

from meetups import models
from meetups.domain import EventId, EventType, Outcome, TypeId
from meetups.stores import DjangoEventStore


@pytest.fixture
def test_type() -> models.Type:
    return models.Type.objects.create(name="TestType")


@pytest.fixture
def seed_event(test_type):
    def _seed(organiser_id="userId", name="Test Event") -> models.Event:
        start = timezone.now().replace(microsecond=0)
        return models.Event.objects.create(
            name=name,
            description="Test Description",
            start=start,
            end=start + timedelta(hours=2),
            type=test_type,
            organiser_id=organiser_id,
        )

    return _seed


@pytest.mark.django_db
class TestDjangoEventStoreReads:
    """Read operations against the database."""

    def test_add_event_persists_row(self, db_service, make_event_data):
        """add_event writes one row owned by the organiser."""
        data = make_event_data()

        db_service.add_event(data, "testUserId")

        row = models.Event.objects.get(name=data.name, organiser_id="testUserId")
        assert row.description == data.description
        assert row.start == data.start
        assert row.end == data.end
        assert row.created_on is not None

    def test_get_all_events_counts_rows(self, db_service, make_event_data):
        """get_all_events returns as many events as were added."""
        db_service.add_event(make_event_data(name="First Test Event"), "u1")
        db_service.add_event(make_event_data(name="Second Event"), "u1")

        assert len(db_service.get_all_events()) == models.Event.objects.count() == 2

    def test_event_details(self, db_service, seed_event):
        """get_event_details returns fields and the resolved type name."""
        row = seed_event()

        detail = db_service.get_event_details(EventId(row.id))

        assert detail.name == row.name
        assert detail.description == row.description
        assert detail.start == row.start
        assert detail.type_name == "TestType"

    def test_event_for_edit(self, db_service, seed_event, test_type):
        """get_event_for_edit returns the raw type reference."""
        row = seed_event()

        form = db_service.get_event_for_edit(EventId(row.id))

        assert form.type_id == TypeId(test_type.id)
        assert [t.name for t in form.types] == ["TestType"]

    def test_unknown_event_lookups(self, db_service):
        """Lookups of a missing id return None."""
        missing = EventId(uuid.uuid4())
        assert db_service.get_event_details(missing) is None
        assert db_service.get_event_for_edit(missing) is None
        assert db_service.get_event_organiser_id(missing) is None

    def test_user_joined_events(self, db_service, seed_event):
        """get_user_joined_events returns events with a participant row."""
        row = seed_event(organiser_id="userId")
        seed_event(name="Not joined")
        models.EventParticipant.objects.create(event=row, helper_id="userId")

        events = db_service.get_user_joined_events("userId")

        assert len(events) == 1
        assert events[0].id == EventId(row.id)
        assert events[0].name == row.name

    def test_get_all_types(self, db_service, test_type):
        """get_all_types returns every type row."""
        types = db_service.get_all_types()
        assert [(t.id, t.name) for t in types] == [(TypeId(test_type.id), "TestType")]

    def test_create_event_returns_resolved_type(self, test_type, make_event_data):
        """create_event returns the stored event with its type populated."""
        data = make_event_data(type_id=TypeId(test_type.id))

        event = DjangoEventStore().create_event(data, "organiser")

        assert event.id == EventId(models.Event.objects.get().pk)
        assert event.type == EventType(id=TypeId(test_type.id), name="TestType")
        assert event.organiser_id == "organiser"
        assert event.created_on is not None


@pytest.mark.django_db
class TestDjangoEventStoreWrites:
    """Membership and update writes against the database."""

    def test_join_existing_participant(self, db_service, seed_event):
        """Joining again returns False and keeps a single row."""
        row = seed_event()
        models.EventParticipant.objects.create(event=row, helper_id="userId")

        assert db_service.join_event(EventId(row.id), "userId") is False
        assert models.EventParticipant.objects.filter(event=row).count() == 1

    def test_join_missing_event(self, db_service):
        """Joining a missing event returns False and writes nothing."""
        assert db_service.join_event(EventId(uuid.uuid4()), "") is False
        assert not models.EventParticipant.objects.exists()

    def test_join_and_leave(self, db_service, seed_event):
        """Join then leave leaves no participant rows."""
        row = seed_event(organiser_id="a-sample-user")
        event_id = EventId(row.id)

        assert db_service.join_event(event_id, "new-participant") is True
        assert db_service.is_user_joined_event(event_id, "new-participant") is True
        assert db_service.leave_event(event_id, "new-participant") is True
        assert db_service.is_user_joined_event(event_id, "new-participant") is False
        assert not models.EventParticipant.objects.exists()

    def test_leave_not_joined(self, db_service):
        """Leaving without a membership row returns False."""
        assert db_service.leave_event(EventId(uuid.uuid4()), "not-signed-User") is False

    def test_unique_pair_enforced_by_database(self, seed_event):
        """The database rejects a duplicate (event, helper) row."""
        row = seed_event()
        models.EventParticipant.objects.create(event=row, helper_id="u2")

        with pytest.raises(IntegrityError), transaction.atomic():
            models.EventParticipant.objects.create(event=row, helper_id="u2")

    def test_join_losing_insert_race(self, db_service, seed_event, monkeypatch):
        """A join whose lookup misses a concurrently inserted row reports ALREADY_JOINED."""
        row = seed_event()
        models.EventParticipant.objects.create(event=row, helper_id="u2")
        original_get = QuerySet.get
        missed = []

        def stale_first_lookup(queryset, *args, **kwargs):
            if queryset.model is models.EventParticipant and not missed:
                missed.append(kwargs)
                raise models.EventParticipant.DoesNotExist
            return original_get(queryset, *args, **kwargs)

        monkeypatch.setattr(QuerySet, "get", stale_first_lookup)

        outcome = db_service.attempt_join(EventId(row.id), "u2")

        assert missed
        assert outcome is Outcome.ALREADY_JOINED
        assert models.EventParticipant.objects.filter(event=row, helper_id="u2").count() == 1

    def test_update_by_non_organiser(self, db_service, seed_event, make_event_data):
        """A non-organiser update is rejected and the row is unchanged."""
        row = seed_event(organiser_id="firstUserId")

        outcome = db_service.attempt_update(
            EventId(row.id), make_event_data(name="Hijacked"), "secondUserId"
        )

        assert outcome is Outcome.FORBIDDEN
        row.refresh_from_db()
        assert row.name == "Test Event"

    def test_update_by_organiser(self, db_service, seed_event, make_event_data):
        """The organiser's update is written and the organiser is kept."""
        row = seed_event(organiser_id="firstUserId")
        changed = make_event_data(name="UpdatedName", start=row.start)

        assert db_service.update_event(EventId(row.id), changed, "firstUserId") is True

        row.refresh_from_db()
        assert row.name == "UpdatedName"
        assert row.type_id is None
        assert row.organiser_id == "firstUserId"

    def test_update_missing_event(self, db_service, make_event_data):
        """Updating a missing event returns False."""
        assert (
            db_service.update_event(EventId(uuid.uuid4()), make_event_data(), "user-Id")
            is False
        )
