"""Number validation with locale-configurable separators."""
from __future__ import annotations

from typing import Any

from .base import Validator
from .config import NumberConfig, NumberDomain
from .numeric import NEGATIVE_SIGN, as_text, check_body, check_bounds, check_chars, check_format_chars, strip_sign
from .registry import ValidatorKind, register
from .results import ResultCode, ValidationResult


@register(ValidatorKind.NUMBER, config=NumberConfig)
def validate_number(config: NumberConfig, value: Any, base_field: str | None = None) -> list[ValidationResult]:
    """Validate a number typed with the configured separators.

    Usage:
        validate_number(NumberConfig(min_value=29), "28")   # [lowerThanMin]
        validate_number(NumberConfig(), "1,234.5")          # []
    """
    text = as_text(config, value)

    if (failure := check_format_chars(config, NEGATIVE_SIGN, base_field)) is not None:
        return [failure]
    if (failure := check_chars(config, text, NEGATIVE_SIGN, base_field)) is not None:
        return [failure]

    stripped = strip_sign(config, text, base_field)
    if isinstance(stripped, ValidationResult):
        return [stripped]
    text, negative = stripped
    if NEGATIVE_SIGN in text:
        return [ValidationResult.invalid(ResultCode.INVALID_CHAR, config.invalid_char_error, base_field or "")]

    integer_only = config.domain == NumberDomain.INT
    if (failure := check_body(config, text, base_field, integer_only=integer_only)) is not None:
        return [failure]
    if (failure := check_bounds(config, text, negative, base_field)) is not None:
        return [failure]
    return []


class NumberValidator(Validator):
    """Validates numbers, optionally integer-only, bounded or non-negative."""
    kind = ValidatorKind.NUMBER
