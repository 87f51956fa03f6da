"""Shared pytest fixtures for spendlog tests."""

import tempfile
import time
import os
from datetime import datetime, UTC
import pytest

from spendlog.config import LedgerConfig
from spendlog.database.base import KeyValueStore
from spendlog.database.factories import create_sqlite_store
from spendlog.database.ledger_store import LedgerStore
from spendlog.delivery.base import DeliveryChannel
from spendlog.domain.errors import DeliveryUnavailable, PersistenceError
from spendlog.domain.session import SessionController


class FixedClock:
    """Clock returning a settable instant."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


class RecordingChannel(DeliveryChannel):
    """Delivery channel that records what it was asked to open."""

    def __init__(self):
        self.sent = []

    def open_composer(self, recipient: str, text: str) -> None:
        self.sent.append((recipient, text))


class UnavailableChannel(DeliveryChannel):
    """Delivery channel that can never open a composer."""

    def open_composer(self, recipient: str, text: str) -> None:
        raise DeliveryUnavailable("No browser available")


class MemoryStore(KeyValueStore):
    """In-memory store whose writes can be switched to fail."""

    def __init__(self):
        self.values = {}
        self.fail_writes = False

    def connect(self) -> None:
        pass

    def disconnect(self) -> None:
        pass

    def initialize_schema(self) -> None:
        pass

    def get(self, key):
        return self.values.get(key)

    def set(self, key, value):
        if self.fail_writes:
            raise PersistenceError(f"Could not save '{key}'")
        self.values[key] = value


@pytest.fixture
def temp_store():
    """Create a temporary SQLite-backed store for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    store = create_sqlite_store(database_path=db_path)
    # Store the path for tests that need it
    store.database_path = db_path
    store.connect()
    store.initialize_schema()

    yield store

    # Cleanup
    store.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def memory_store():
    """Create an in-memory store."""
    return MemoryStore()


@pytest.fixture
def config():
    """Default ledger configuration."""
    return LedgerConfig()


@pytest.fixture
def ledger_store(temp_store, config):
    """Create a LedgerStore over the temporary database."""
    return LedgerStore(temp_store, config)


@pytest.fixture
def clock():
    """Clock fixed at 15 September 2025."""
    return FixedClock(datetime(2025, 9, 15, 10, 30, tzinfo=UTC))


@pytest.fixture
def channel():
    """Recording delivery channel."""
    return RecordingChannel()


@pytest.fixture
def session(ledger_store, channel, config, clock):
    """Create a started SessionController."""
    controller = SessionController(
        ledger_store=ledger_store, channel=channel, config=config, clock=clock
    )
    controller.start()
    return controller


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def unavailable_channel():
    """Delivery channel that always fails."""
    return UnavailableChannel()


@pytest.fixture
def make_session(ledger_store, channel, config, clock):
    """Factory for started sessions, defaulting to the shared fixtures."""

    def _make(store=None, delivery=None, session_clock=None, session_config=None):
        session_config = session_config or config
        controller = SessionController(
            ledger_store=LedgerStore(store, session_config) if store is not None else ledger_store,
            channel=delivery or channel,
            config=session_config,
            clock=session_clock or clock,
        )
        controller.start()
        return controller

    return _make


@pytest.fixture
def local_utc_plus_3(monkeypatch):
    """Run with the local timezone set to UTC+3 (POSIX TZ sign is inverted)."""
    monkeypatch.setenv("TZ", "UTC-3")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()
