"""Value Sources and Host Protocols

The core never reaches into a UI framework. It pulls the current value through
a zero-argument function or an (object, dotted path) pair, subscribes to a
trigger object by event name, and pushes outcomes to listener targets. The
protocols below name exactly what those collaborators must provide.
"""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Callable, Protocol, runtime_checkable

from .results import ValidationOutcome

ValueFunction = Callable[[], Any]
OutcomeHandler = Callable[[ValidationOutcome], None]


@runtime_checkable
class TriggerSource(Protocol):
    """Object that can deliver a named event to subscribed handlers."""
    def add_event_listener(self, event: str, handler: Callable[..., Any]) -> None: ...
    def remove_event_listener(self, event: str, handler: Callable[..., Any]) -> None: ...


@runtime_checkable
class ValidationListener(Protocol):
    """Listener target with a single handler for both outcome kinds."""
    def validation_result_handler(self, outcome: ValidationOutcome) -> None: ...


_MISSING = object()


def _segment(obj: Any, name: str) -> Any:
    """Read one path segment from a mapping, sequence or attribute."""
    if isinstance(obj, Mapping):
        return obj.get(name, _MISSING)
    if isinstance(obj, Sequence) and not isinstance(obj, (str, bytes)) and name.lstrip("-").isdigit():
        try: return obj[int(name)]
        except IndexError: return _MISSING
    return getattr(obj, name, _MISSING)


def resolve_property(source: Any, path: str) -> Any:
    """Resolve a dotted property path against a source.

    Segments are looked up as mapping keys, sequence indexes (integer segments)
    or attributes, in that order of preference. Any missing segment, or a None
    along the way, resolves the whole path to None.

    Usage:
        resolve_property({"card": {"number": "4111"}}, "card.number")  # "4111"
        resolve_property(form, "fields.0.text")
    """
    current = source
    for name in path.split("."):
        if current is None: return None
        if (current := _segment(current, name)) is _MISSING: return None
    return current


def pull_field(value: Any, *names: str) -> Any:
    """Read the first present field among names from a mapping or object.

    Composite inputs (card type and number, date parts) arrive either as
    mappings or as objects with attributes. Returns None when no name is present.
    """
    if value is None: return None
    for name in names:
        if (found := _segment(value, name)) is not _MISSING: return found
    return None


def handler_for(target: Any) -> OutcomeHandler | None:
    """Pick the handler a listener target exposes, if any.

    A target with a validation_result_handler receives both kinds through it;
    a bare callable is used directly. Anything else cannot receive outcomes.
    """
    if isinstance(target, ValidationListener):
        return target.validation_result_handler
    if callable(target):
        return target
    return None
