"""Pytest configuration and shared fixtures."""

from datetime import timedelta

import pytest
from django.utils import timezone
from rest_framework.test import APIClient

from meetups.domain import EventData
from meetups.services import EventService
from meetups.stores import DjangoEventStore, InMemoryEventStore


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def memory_store() -> InMemoryEventStore:
    return InMemoryEventStore()


@pytest.fixture
def memory_service(memory_store: InMemoryEventStore) -> EventService:
    return EventService(memory_store)


@pytest.fixture
def db_service(db) -> EventService:
    return EventService(DjangoEventStore())


@pytest.fixture
def make_event_data():
    """Build EventData starting now (to the second) and lasting two hours."""

    def _make(
        name="Test Event",
        description="Test Description",
        type_id=None,
        start=None,
        hours=2,
    ) -> EventData:
        start = start or timezone.now().replace(microsecond=0)
        return EventData(
            name=name,
            description=description,
            start=start,
            end=start + timedelta(hours=hours),
            type_id=type_id,
        )

    return _make
