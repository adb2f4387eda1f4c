"""Listener Registry

A validator owns one Notifier and delegates all outcome fan-out to it.
Handlers are kept per outcome kind in registration order; dispatch is
synchronous and a handler that raises propagates to the caller.
"""
from __future__ import annotations

from collections import defaultdict

from .results import OutcomeKind, ValidationOutcome
from .sources import OutcomeHandler


class Notifier:
    """Per-validator registry of outcome handlers."""

    __slots__ = ("_handlers",)

    def __init__(self):
        self._handlers: dict[OutcomeKind, list[OutcomeHandler]] = defaultdict(list)

    def subscribe(self, kind: OutcomeKind, handler: OutcomeHandler) -> None:
        """Register handler for kind. Registering the same handler twice is a no-op."""
        if handler not in self._handlers[kind]:
            self._handlers[kind].append(handler)

    def unsubscribe(self, kind: OutcomeKind, handler: OutcomeHandler) -> bool:
        """Remove handler for kind. Returns False if it was not registered."""
        if handler not in self._handlers[kind]:
            return False
        self._handlers[kind].remove(handler)
        return True

    def subscribe_all(self, handler: OutcomeHandler) -> None:
        for kind in OutcomeKind: self.subscribe(kind, handler)

    def unsubscribe_all(self, handler: OutcomeHandler) -> None:
        for kind in OutcomeKind: self.unsubscribe(kind, handler)

    def dispatch(self, outcome: ValidationOutcome) -> int:
        """Deliver outcome to every handler of its kind. Returns the number notified."""
        # Snapshot so handlers may unsubscribe while being notified
        handlers = list(self._handlers[outcome.kind])
        for handler in handlers:
            handler(outcome)
        return len(handlers)
