"""
Shared test configuration and fixtures.

Services get an in-memory event store and a deterministic clock so every
publish has a strictly increasing created_at.
"""

import pytest

from nostr_drive import DriveService, FolderService, InMemoryEventStore, KindValidator


class StepClock:
    """Deterministic clock: each call returns the next second."""

    def __init__(self, start: int = 1_700_000_000):
        self.now = start

    def __call__(self) -> int:
        self.now += 1
        return self.now


@pytest.fixture
def clock():
    return StepClock()


@pytest.fixture
def store():
    return InMemoryEventStore()


@pytest.fixture
def folder_service(store, clock):
    return FolderService(store, validator=KindValidator(), clock=clock)


@pytest.fixture
def drive_service(store, clock):
    return DriveService(store, clock=clock)
