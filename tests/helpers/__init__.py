"""Test helpers for outbox-execute tests."""

from .fake_bridge import FakeBridge, make_message

__all__ = [
    "FakeBridge",
    "make_message",
]
