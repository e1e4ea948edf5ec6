from datetime import datetime, timedelta

import pytest
import pytz
from fastapi.testclient import TestClient

from vzt_hub.context import Clock, SessionContext
from vzt_hub.main import create_app
from vzt_hub.services.store import DomainStore
from vzt_hub.storage.memory_provider import MemoryStorageProvider


TZ = "Europe/Prague"


class FixedClock(Clock):
    def __init__(self, start: datetime):
        super().__init__(TZ)
        self.current = start

    def now(self) -> datetime:
        return self.current

    def advance(self, **kwargs) -> None:
        self.current = self.current + timedelta(**kwargs)


def local(*args) -> datetime:
    return pytz.timezone(TZ).localize(datetime(*args))


@pytest.fixture
def clock():
    # Wednesday morning
    return FixedClock(local(2026, 10, 14, 9, 0, 0))


@pytest.fixture
def provider():
    return MemoryStorageProvider()


@pytest.fixture
def store(provider, clock):
    s = DomainStore(provider, clock=clock, key_prefix="vzt_", audit_limit=100)
    s.initialize()
    return s


@pytest.fixture
def ctx():
    return SessionContext()


@pytest.fixture
def client(store):
    app = create_app(store=store)
    with TestClient(app) as c:
        yield c
