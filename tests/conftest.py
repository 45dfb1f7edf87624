"""Shared test fixtures."""

from datetime import timedelta

import pytest
from fastapi.testclient import TestClient

from rsvp_backend.core.cutoff import CutoffGate
from rsvp_backend.core.dependencies import get_cutoff_gate, get_dispatcher, get_store
from rsvp_backend.main import app
from tests.fakes import CUTOFF, ROSTER, FakeDispatcher, FakeStore


@pytest.fixture(name="store")
def store_fixture() -> FakeStore:
    """A store holding a two-party roster."""
    return FakeStore(rows=[list(row) for row in ROSTER])


@pytest.fixture(name="dispatcher")
def dispatcher_fixture() -> FakeDispatcher:
    return FakeDispatcher()


@pytest.fixture(name="gate")
def gate_fixture() -> CutoffGate:
    """A gate whose clock reads one day before the cutoff."""
    return CutoffGate(CUTOFF, clock=lambda: CUTOFF - timedelta(days=1))


@pytest.fixture(name="closed_gate")
def closed_gate_fixture(gate: CutoffGate) -> CutoffGate:
    """The same gate, moved one second past the cutoff."""
    gate.clock = lambda: CUTOFF + timedelta(seconds=1)
    return gate


@pytest.fixture(name="client")
def client_fixture(store: FakeStore, dispatcher: FakeDispatcher, gate: CutoffGate):
    """Create a test client wired to the fake store, dispatcher and gate."""
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_dispatcher] = lambda: dispatcher
    app.dependency_overrides[get_cutoff_gate] = lambda: gate
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()
