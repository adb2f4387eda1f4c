"""
Shared test fixtures for the fieldcheck test suite.
"""
from collections import defaultdict

import pytest

from fieldcheck.validators import ValidationOutcome


# ==========================================================================
# Host Doubles
# ==========================================================================

class FakeEventSource:
    """Minimal trigger source: named events with add/remove listener."""

    def __init__(self):
        self.handlers = defaultdict(list)

    def add_event_listener(self, event, handler):
        self.handlers[event].append(handler)

    def remove_event_listener(self, event, handler):
        if handler in self.handlers[event]:
            self.handlers[event].remove(handler)

    def emit(self, event, payload=None):
        for handler in list(self.handlers[event]):
            handler(payload)

    def count(self, event):
        return len(self.handlers[event])


class RecordingListener:
    """Listener target exposing validation_result_handler."""

    def __init__(self):
        self.outcomes: list[ValidationOutcome] = []

    def validation_result_handler(self, outcome):
        self.outcomes.append(outcome)

    @property
    def kinds(self):
        return [o.kind.value for o in self.outcomes]


class Form(FakeEventSource):
    """Form-like object: a trigger source with attribute-held field values."""

    def __init__(self, **fields):
        super().__init__()
        for name, value in fields.items():
            setattr(self, name, value)


# ==========================================================================
# Fixtures
# ==========================================================================

@pytest.fixture
def event_source():
    return FakeEventSource()


@pytest.fixture
def listener():
    return RecordingListener()


@pytest.fixture
def form():
    return Form(email="hello@example.com", card={"type": "Visa", "number": "4111111111111111"})


@pytest.fixture
def recorder():
    """Plain callable handler that records what it receives."""
    received = []

    def handler(outcome):
        received.append(outcome)

    handler.received = received
    return handler
