"""Pytest fixtures for outbox-execute tests."""

import time

import pytest

from tests.helpers import FakeBridge, make_message

ENV_VARS = [
    "INFURA_KEY",
    "DEVNET_PRIVKEY",
    "L1RPC",
    "L2RPC",
    "L2_CHAIN_ID",
    "OUTBOX_ADDRESSES",
    "POLL_INTERVAL_SECONDS",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Start every test without bridge variables and without reading a local .env file."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("outbox_execute.config.load_dotenv", lambda: None)


@pytest.fixture
def sleeps(monkeypatch):
    """Replace time.sleep with a recorder so polling and retry loops run instantly."""
    recorded: list[float] = []
    monkeypatch.setattr(time, "sleep", recorded.append)
    return recorded


@pytest.fixture
def message():
    return make_message()


@pytest.fixture
def fake_bridge(message):
    """A bridge whose transaction emitted one outgoing message."""
    return FakeBridge(receipt={"logs": []}, messages=[message])
