"""Validator Core

One Validator class drives every kind: value resolution, the required-field
check, the kind's registered algorithm, subfield reconciliation and listener
notification. Kind-specific behavior lives in the registry, not in overrides;
the per-kind classes (EmailValidator, DateValidator, ...) only pick a kind.

Usage:
    v = Validator(ValidatorKind.NUMBER, min_value=29)
    v.validate("28").error_codes        # ["lowerThanMin"]

    v = EmailValidator(source=form, property_path="email.text", trigger=button)
    v.add_listener(OutcomeKind.INVALID, show_error)
"""
from __future__ import annotations

from typing import Any, Iterable

from fieldcheck.core.config import settings
from fieldcheck.core.errors import (
    property_missing,
    raise_error,
    source_is_string,
    source_missing,
    unknown_option,
    unknown_subfield,
    value_function_not_callable,
)
from fieldcheck.core.logging import validator_logger

from .config import ValidatorConfig
from .notifier import Notifier
from .registry import ValidatorKind, Variant, get_variant, register
from .results import OutcomeKind, ResultCode, ValidationOutcome, ValidationResult
from .sources import OutcomeHandler, TriggerSource, ValueFunction, handler_for, resolve_property

log = validator_logger()


@register(ValidatorKind.REQUIRED, config=ValidatorConfig)
def validate_required(config: ValidatorConfig, value: Any, base_field: str | None = None) -> list[ValidationResult]:
    """Plain validators only check presence, which the core does before this runs."""
    return []


class Validator:
    """Stateful validator bound to a value source, a trigger and listeners.

    Options of the kind's configuration model can be passed as keyword
    arguments and read or set as attributes:

        v = ZipCodeValidator(domain="US or Canada")
        v.wrong_length_error = "Bad ZIP"
    """

    kind: ValidatorKind = ValidatorKind.REQUIRED

    def __init__(
        self,
        kind: ValidatorKind | str | None = None,
        *,
        config: ValidatorConfig | None = None,
        enabled: bool = True,
        required: bool = True,
        source: Any = None,
        property_path: str | None = None,
        value_function: ValueFunction | None = None,
        listener: Any = None,
        trigger: Any = None,
        trigger_event: str | None = None,
        **options: Any,
    ):
        variant = get_variant(kind if kind is not None else self.kind)
        object.__setattr__(self, "_variant", variant)
        object.__setattr__(self, "_config", config if config is not None else variant.config())
        self.kind = variant.kind
        self.configure(**options)

        self.enabled = enabled
        self.required = required
        self.property_path = property_path
        self._notifier = Notifier()
        self._subfield_bindings: dict[str, tuple[Any, str]] = {}
        self._implicit_handler: OutcomeHandler | None = None
        self._trigger_binding: tuple[TriggerSource, str] | None = None
        self._source = None
        self._listener = None
        self._trigger = None
        self._trigger_event = trigger_event or settings.TRIGGER_EVENT
        self._value_function: ValueFunction | None = None

        self.value_function = value_function
        self.source = source
        self.listener = listener
        self.trigger = trigger

    # ========================================================================
    # Options
    # ========================================================================

    @property
    def config(self) -> ValidatorConfig: return self._config

    @property
    def variant(self) -> Variant: return self._variant

    def configure(self, **options: Any) -> Validator:
        """Set several options at once. Unknown names are configuration errors.

        The options are validated together against the current ones, so their
        order does not matter and a rejected call leaves every option unchanged.
        """
        config_cls = type(self._config)
        for name in options:
            if name not in config_cls.model_fields:
                raise_error(unknown_option(name, type(self).__name__, origin=self._origin))
        if options:
            config = config_cls.model_validate({**self._config.model_dump(), **options})
            object.__setattr__(self, "_config", config)
        return self

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails
        config = self.__dict__.get("_config")
        if config is not None and name in type(config).model_fields:
            return getattr(config, name)
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    def __setattr__(self, name: str, value: Any) -> None:
        config = self.__dict__.get("_config")
        if config is not None and name in type(config).model_fields:
            setattr(config, name, value)
        else:
            object.__setattr__(self, name, value)

    @property
    def _origin(self) -> str: return type(self).__name__

    # ========================================================================
    # Value Source
    # ========================================================================

    @property
    def source(self) -> Any: return self._source

    @source.setter
    def source(self, value: Any) -> None:
        if isinstance(value, str):
            raise_error(source_is_string(origin=f"{self._origin}.source"))
        self._source = value
        self._retarget_listener()
        self._rebind_trigger()

    @property
    def value_function(self) -> ValueFunction | None: return self._value_function

    @value_function.setter
    def value_function(self, value: ValueFunction | None) -> None:
        if value is not None and not callable(value):
            raise_error(value_function_not_callable(value, origin=f"{self._origin}.value_function"))
        self._value_function = value

    def bind_subfield(self, name: str, source: Any, property_path: str) -> None:
        """Read one declared subfield from its own source.

        Usage:
            v.bind_subfield("cardType", type_picker, "selected_item.value")
            v.bind_subfield("cardNumber", number_input, "text")
        """
        if name not in self._variant.subfields:
            raise_error(unknown_subfield(name, self._variant.subfields, origin=f"{self._origin}.bind_subfield"))
        if isinstance(source, str):
            raise_error(source_is_string(origin=f"{self._origin}.bind_subfield"))
        self._subfield_bindings[name] = (source, property_path)

    def unbind_subfield(self, name: str) -> None: self._subfield_bindings.pop(name, None)

    def resolve_value(self) -> Any:
        """Pull the current value: value function, then subfield bindings, then source/property_path."""
        if self._value_function is not None:
            return self._value_function()
        if self._subfield_bindings:
            parts = {name: resolve_property(src, path) for name, (src, path) in self._subfield_bindings.items()}
            return parts if any(v is not None for v in parts.values()) else None
        if self._source is None and self.property_path:
            raise_error(source_missing(self.property_path, origin=f"{self._origin}.validate"))
        if self._source is not None and not self.property_path:
            raise_error(property_missing(self._source, origin=f"{self._origin}.validate"))
        if self._source is None:
            return None
        return resolve_property(self._source, self.property_path)

    # ========================================================================
    # Listeners and Trigger
    # ========================================================================

    @property
    def listener(self) -> Any: return self._listener

    @listener.setter
    def listener(self, value: Any) -> None:
        self._listener = value
        self._retarget_listener()

    def add_listener(self, kind: OutcomeKind | str, handler: OutcomeHandler) -> None:
        self._notifier.subscribe(OutcomeKind(kind), handler)

    def remove_listener(self, kind: OutcomeKind | str, handler: OutcomeHandler) -> bool:
        return self._notifier.unsubscribe(OutcomeKind(kind), handler)

    def _retarget_listener(self) -> None:
        """Route both kinds to the explicit listener, falling back to the source."""
        handler = handler_for(self._listener if self._listener is not None else self._source)
        if handler == self._implicit_handler:
            return
        if self._implicit_handler is not None:
            self._notifier.unsubscribe_all(self._implicit_handler)
        self._implicit_handler = handler
        if handler is not None:
            self._notifier.subscribe_all(handler)

    @property
    def trigger(self) -> Any: return self._trigger

    @trigger.setter
    def trigger(self, value: Any) -> None:
        self._trigger = value
        self._rebind_trigger()

    @property
    def trigger_event(self) -> str: return self._trigger_event

    @trigger_event.setter
    def trigger_event(self, value: str | None) -> None:
        self._trigger_event = value or settings.TRIGGER_EVENT
        self._rebind_trigger()

    def _rebind_trigger(self) -> None:
        """Keep exactly one subscription on the effective trigger (explicit trigger, else source)."""
        target = self._trigger if self._trigger is not None else self._source
        binding = (target, self._trigger_event) if isinstance(target, TriggerSource) else None
        current = self._trigger_binding
        if current is not None and binding is not None and current[0] is binding[0] and current[1] == binding[1]:
            return
        if current is not None:
            current[0].remove_event_listener(current[1], self._handle_trigger)
        if binding is not None:
            binding[0].add_event_listener(binding[1], self._handle_trigger)
            log.debug("trigger_bound", validator=self._origin, trigger=type(binding[0]).__name__, trigger_event=binding[1])
        self._trigger_binding = binding

    def _handle_trigger(self, *args: Any, **kwargs: Any) -> None:
        self.validate()

    # ========================================================================
    # Validation
    # ========================================================================

    def validate(self, value: Any = None, suppress_notification: bool = False) -> ValidationOutcome:
        """Validate value, or the value pulled from the bound source when None.

        Returns the outcome and, unless suppressed, dispatches it to the
        listeners of its kind. A disabled validator returns a VALID outcome
        without running or notifying.
        """
        if value is None:
            value = self.resolve_value()
        if value is not None or self.required:
            return self._process(value, suppress_notification)
        outcome = ValidationOutcome.valid(field=self.property_path)
        if self.enabled and not suppress_notification:
            self._notifier.dispatch(outcome)
        return outcome

    def _process(self, value: Any, suppress_notification: bool) -> ValidationOutcome:
        if not self.enabled:
            log.debug("validator_disabled", validator=self._origin, kind=self.kind.value)
            return ValidationOutcome.valid(field=self.property_path)

        if ("" if value is None else str(value).strip()):
            outcome = self._reconcile(list(self._variant.algorithm(self._config, value, None)))
        elif self.required:
            outcome = ValidationOutcome.invalid(
                (ValidationResult.invalid(ResultCode.REQUIRED_FIELD, self._config.required_field_error),),
                field=self.property_path)
        else:
            outcome = ValidationOutcome.valid(field=self.property_path)

        log.debug("validation_completed", validator=self._origin, kind=self.kind.value,
            outcome=outcome.kind.value, error_codes=outcome.error_codes)
        if not suppress_notification:
            self._notifier.dispatch(outcome)
        return outcome

    def _reconcile(self, results: list[ValidationResult]) -> ValidationOutcome:
        """Build the outcome, padding declared subfields that have no entry."""
        if not any(r.is_error for r in results):
            if self._variant.results_on_valid and results:
                return ValidationOutcome.valid(field=self.property_path, results=tuple(results))
            return ValidationOutcome.valid(field=self.property_path)
        covered = {r.sub_field for r in results}
        padding = [ValidationResult.valid(name) for name in self._variant.subfields if name not in covered]
        return ValidationOutcome.invalid(tuple(results + padding), field=self.property_path)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind.value!r}, enabled={self.enabled}, required={self.required})"


def validate_all(validators: Iterable[Validator]) -> list[ValidationOutcome]:
    """Run every enabled validator in order and collect the failing outcomes.

    Usage:
        failures = validate_all([email_validator, zip_validator])
        if not failures: submit()
    """
    failures = []
    for validator in validators:
        if not validator.enabled:
            continue
        outcome = validator.validate()
        if not outcome.is_valid:
            failures.append(outcome)
    return failures
