"""US ZIP and Canadian postal code validation."""
from __future__ import annotations

from typing import Any

from .base import Validator
from .config import DECIMAL_DIGITS, ROMAN_LETTERS, ZipCodeConfig, ZipCodeDomain
from .registry import ValidatorKind, register
from .results import ResultCode, ValidationResult

US_LENGTHS = (5, 9, 10)
CA_LENGTHS = (6, 7)


def _is_us_form(config: ZipCodeConfig, zip_code: str) -> bool:
    """12345, 123456789 or 12345-6789 (any allowed format character as separator)."""
    if any(c not in DECIMAL_DIGITS for c in zip_code[:5]):
        return False
    rest = zip_code[5:]
    if len(zip_code) == 10:
        if rest[0] not in config.allowed_format_chars: return False
        rest = rest[1:]
    return all(c in DECIMAL_DIGITS for c in rest)


def _is_ca_form(config: ZipCodeConfig, zip_code: str) -> bool:
    """A1B2C3 or A1B 2C3 (any allowed format character as separator)."""
    if len(zip_code) == 7:
        if zip_code[3] not in config.allowed_format_chars: return False
        zip_code = zip_code[:3] + zip_code[4:]
    pattern = (ROMAN_LETTERS, DECIMAL_DIGITS) * 3
    return all(char in chars for char, chars in zip(zip_code, pattern))


@register(ValidatorKind.ZIP_CODE, config=ZipCodeConfig)
def validate_zip_code(config: ZipCodeConfig, value: Any, base_field: str | None = None) -> list[ValidationResult]:
    """Validate a postal code for the configured domain.

    The length and presence of letters pick the candidate country. Under the
    Canada-only domain a code of the wrong shape reports wrongCAFormat with the
    length message.
    """
    zip_code, field, domain = str(value), base_field or "", config.domain
    if any(c not in DECIMAL_DIGITS + ROMAN_LETTERS + config.allowed_format_chars for c in zip_code):
        return [ValidationResult.invalid(ResultCode.INVALID_CHAR, config.invalid_char_error, field)]

    has_letter = any(c in ROMAN_LETTERS for c in zip_code)
    looks_us = len(zip_code) in US_LENGTHS and not has_letter
    looks_ca = len(zip_code) in CA_LENGTHS and has_letter

    if domain == ZipCodeDomain.CANADA_ONLY and not looks_ca:
        return [ValidationResult.invalid(ResultCode.WRONG_CA_FORMAT, config.wrong_length_error, field)]
    if (domain == ZipCodeDomain.US_ONLY and not looks_us) or not (looks_us or looks_ca):
        return [ValidationResult.invalid(ResultCode.WRONG_LENGTH, config.wrong_length_error, field)]

    if looks_us and not _is_us_form(config, zip_code):
        return [ValidationResult.invalid(ResultCode.WRONG_US_FORMAT, config.wrong_us_format_error, field)]
    if looks_ca and not _is_ca_form(config, zip_code):
        return [ValidationResult.invalid(ResultCode.WRONG_CA_FORMAT, config.wrong_ca_format_error, field)]
    return []


class ZipCodeValidator(Validator):
    """Validates US ZIP / ZIP+4 and Canadian postal codes."""
    kind = ValidatorKind.ZIP_CODE
