from meetups.stores.django_store import DjangoEventStore
from meetups.stores.interfaces import EventStore
from meetups.stores.memory_store import InMemoryEventStore

__all__ = ["EventStore", "DjangoEventStore", "InMemoryEventStore"]
