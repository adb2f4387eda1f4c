"""Validator variant registry - tagged dispatch for validation algorithms.

Each validator kind registers one pure algorithm together with its options
model and declared subfields. The core looks the variant up by kind; there
are no overridable lifecycle hooks.

Usage:
    @register(ValidatorKind.EMAIL, config=EmailConfig)
    def validate_email(config, value, base_field=None): ...
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

from fieldcheck.core.errors import raise_error, unknown_validator

from .config import ValidatorConfig
from .results import ValidationResult

Algorithm = Callable[[Any, Any, str | None], list[ValidationResult]]


class ValidatorKind(str, Enum):
    REQUIRED = "required"
    CREDIT_CARD = "credit_card"
    CURRENCY = "currency"
    DATE = "date"
    EMAIL = "email"
    NUMBER = "number"
    PHONE_NUMBER = "phone_number"
    REGEXP = "regexp"
    SOCIAL_SECURITY = "social_security"
    STRING = "string"
    ZIP_CODE = "zip_code"


@dataclass(frozen=True, slots=True)
class Variant:
    """Everything the core needs to run one validator kind.

    results_on_valid: surface non-error results on the VALID path (match
    metadata) instead of dropping them.
    """
    kind: ValidatorKind
    config: type[ValidatorConfig]
    algorithm: Algorithm
    subfields: tuple[str, ...] = ()
    results_on_valid: bool = False


_VARIANTS: dict[ValidatorKind, Variant] = {}


def register(
    kind: ValidatorKind,
    *,
    config: type[ValidatorConfig],
    subfields: tuple[str, ...] = (),
    results_on_valid: bool = False,
) -> Callable[[Algorithm], Algorithm]:
    """Register the decorated function as the algorithm for kind."""
    def decorator(algorithm: Algorithm) -> Algorithm:
        _VARIANTS[kind] = Variant(kind, config, algorithm, subfields, results_on_valid)
        return algorithm
    return decorator


def get_variant(kind: ValidatorKind | str) -> Variant:
    """Get a registered variant by kind."""
    try:
        return _VARIANTS[ValidatorKind(kind)]
    except (KeyError, ValueError):
        raise_error(unknown_validator(str(getattr(kind, "value", kind)), list_kinds(), origin="registry"))


def list_kinds() -> list[str]:
    """List all registered kinds."""
    return [k.value for k in _VARIANTS]
