"""String length validation."""
from __future__ import annotations

from typing import Any

from .base import Validator
from .config import StringConfig
from .registry import ValidatorKind, register
from .results import ResultCode, ValidationResult


@register(ValidatorKind.STRING, config=StringConfig)
def validate_string(config: StringConfig, value: Any, base_field: str | None = None) -> list[ValidationResult]:
    """Check the length of str(value) against max_length, then min_length."""
    text, field = str(value), base_field or ""
    if config.max_length is not None and len(text) > config.max_length:
        message = config.message("too_long", max_length=config.max_length)
        return [ValidationResult.invalid(ResultCode.TOO_LONG, message, field)]
    if config.min_length is not None and len(text) < config.min_length:
        message = config.message("too_short", min_length=config.min_length)
        return [ValidationResult.invalid(ResultCode.TOO_SHORT, message, field)]
    return []


class StringValidator(Validator):
    """Validates string length bounds."""
    kind = ValidatorKind.STRING
