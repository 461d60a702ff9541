from __future__ import annotations

from datetime import date

import pytest

from edu_control.core.constants import StorageKeys
from edu_control.main import create_app
from edu_control.storage.gateway import PersistenceGateway
from edu_control.storage.memory_store import InMemoryKeyValueStore
from edu_control.users.model import user_to_dict
from helpers import FakeGenerator


@pytest.fixture
def fixed_today() -> date:
    # a Wednesday
    return date(2025, 3, 12)


@pytest.fixture
def store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def gateway(store) -> PersistenceGateway:
    return PersistenceGateway(store)


@pytest.fixture
def generator() -> FakeGenerator:
    return FakeGenerator(reply="Keep it up!")


@pytest.fixture
def seed_users(gateway):
    def _seed(*users):
        gateway.save(StorageKeys.USERS, [user_to_dict(u) for u in users])

    return _seed


@pytest.fixture
def app(store, generator):
    return create_app("edu_control.config.testing", store=store, generator=generator)


@pytest.fixture
def client(app):
    return app.test_client()
