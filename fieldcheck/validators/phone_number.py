"""Telephone number validation by aggregate digit count."""
from __future__ import annotations

from typing import Any

from .base import Validator
from .config import DECIMAL_DIGITS, PhoneNumberConfig
from .registry import ValidatorKind, register
from .results import ResultCode, ValidationResult


@register(ValidatorKind.PHONE_NUMBER, config=PhoneNumberConfig)
def validate_phone_number(config: PhoneNumberConfig, value: Any, base_field: str | None = None) -> list[ValidationResult]:
    """Only digits and allowed format characters, with at least min_digits digits.

    Digit grouping is not checked: "(1234) 567-89.01" passes as readily as
    "(123) 456-7890".
    """
    number, field = str(value), base_field or ""
    if any(c not in DECIMAL_DIGITS + config.allowed_format_chars for c in number):
        return [ValidationResult.invalid(ResultCode.INVALID_CHAR, config.invalid_char_error, field)]
    if sum(c in DECIMAL_DIGITS for c in number) < config.min_digits:
        message = config.message("wrong_length", min_digits=config.min_digits)
        return [ValidationResult.invalid(ResultCode.WRONG_LENGTH, message, field)]
    return []


class PhoneNumberValidator(Validator):
    """Validates telephone numbers."""
    kind = ValidatorKind.PHONE_NUMBER
