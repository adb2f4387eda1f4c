"""US Social Security number validation."""
from __future__ import annotations

from typing import Any

from .base import Validator
from .config import DECIMAL_DIGITS, SocialSecurityConfig
from .registry import ValidatorKind, register
from .results import ResultCode, ValidationResult

SEPARATOR_POSITIONS = (3, 6)


@register(ValidatorKind.SOCIAL_SECURITY, config=SocialSecurityConfig)
def validate_social_security(config: SocialSecurityConfig, value: Any, base_field: str | None = None) -> list[ValidationResult]:
    """Accept NNNNNNNNN or NNN-NN-NNNN (any allowed format character as separator)."""
    ssn, field = str(value), base_field or ""
    if any(c not in DECIMAL_DIGITS + config.allowed_format_chars for c in ssn):
        return [ValidationResult.invalid(ResultCode.INVALID_CHAR, config.invalid_char_error, field)]

    if len(ssn) == 11:
        well_formed = all(
            (c in config.allowed_format_chars) if i in SEPARATOR_POSITIONS else (c in DECIMAL_DIGITS)
            for i, c in enumerate(ssn))
    else:
        well_formed = len(ssn) == 9 and all(c in DECIMAL_DIGITS for c in ssn)
    if not well_formed:
        return [ValidationResult.invalid(ResultCode.WRONG_FORMAT, config.wrong_format_error, field)]

    if ssn.startswith("000"):
        return [ValidationResult.invalid(ResultCode.ZERO_START, config.zero_start_error, field)]
    return []


class SocialSecurityValidator(Validator):
    """Validates US Social Security numbers."""
    kind = ValidatorKind.SOCIAL_SECURITY
