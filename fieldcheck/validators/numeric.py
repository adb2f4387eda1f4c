"""Numeric Tokenizer

Shared steps of the number and currency validators. Each step returns the
first failure it finds, or None, so the callers read as a flat pipeline that
stops at the first failing step.
"""
from __future__ import annotations

from decimal import Decimal
from typing import Any

from .config import DECIMAL_DIGITS, NumericConfig
from .results import ResultCode, ValidationResult

NEGATIVE_SIGN = "-"
NEGATIVE_PARENS = "()"

def char_at(text: str, index: int) -> str:
    """Character at index (negative counts from the end), or "" out of range."""
    return text[index] if -len(text) <= index < len(text) else ""


def _fail(code: ResultCode, message: str, base_field: str | None) -> ValidationResult:
    return ValidationResult.invalid(code, message, base_field or "")


def as_text(config: NumericConfig, value: Any) -> str:
    """Text form of value; numbers are written out positionally with the configured decimal separator."""
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        return str(value)
    return format(Decimal(str(value)), "f").replace(".", config.decimal_separator)


def check_format_chars(
    config: NumericConfig, reserved: str, base_field: str | None, symbol: str | None = None,
) -> ValidationResult | None:
    """Separators must be single, distinct characters outside digits and reserved."""
    ds, ts = config.decimal_separator, config.thousands_separator
    forbidden = DECIMAL_DIGITS + reserved
    marks = [ds, ts] + ([symbol] if symbol is not None else [])
    if (len(ds) != 1 or len(ts) != 1 or len(set(marks)) != len(marks)
            or any(c in forbidden for mark in marks for c in mark) or symbol == ""):
        return _fail(ResultCode.INVALID_FORMAT_CHAR, config.invalid_format_chars_error, base_field)
    return None


def check_chars(config: NumericConfig, text: str, extra: str, base_field: str | None) -> ValidationResult | None:
    """Every character must be a digit, a separator or one of extra."""
    allowed = DECIMAL_DIGITS + config.decimal_separator + config.thousands_separator + extra
    if any(c not in allowed for c in text):
        return _fail(ResultCode.INVALID_CHAR, config.invalid_char_error, base_field)
    return None


def strip_sign(
    config: NumericConfig, text: str, base_field: str | None, parens: bool = False,
) -> tuple[str, bool] | ValidationResult:
    """Remove a leading minus (or, with parens, wrapping parentheses).

    Returns the unsigned text and whether it was negative, or the failure.
    """
    if char_at(text, 0) == NEGATIVE_SIGN:
        body = text[1:]
    elif parens and char_at(text, 0) == "(":
        if char_at(text, -1) != ")":
            return _fail(ResultCode.INVALID_CHAR, config.invalid_char_error, base_field)
        body = text[1:-1]
    else:
        return text, False

    if body == "" or body == config.decimal_separator:
        return _fail(ResultCode.INVALID_CHAR, config.invalid_char_error, base_field)
    if not config.allow_negative:
        return _fail(ResultCode.NEGATIVE, config.negative_error, base_field)
    return body, True


def check_body(
    config: NumericConfig, text: str, base_field: str | None, integer_only: bool = False,
) -> ValidationResult | None:
    """Checks on the unsigned, symbol-free text.

    One decimal separator at most, digits only after it (at most precision of
    them, none non-zero when integer_only), a leading digit or decimal
    separator, and every thousands separator followed by exactly three digits.
    """
    ds, ts = config.decimal_separator, config.thousands_separator
    if text.count(ds) > 1:
        return _fail(ResultCode.DECIMAL_POINT_COUNT, config.decimal_point_count_error, base_field)

    decimal_index = text.find(ds)
    if decimal_index != -1:
        if text == ds:
            return _fail(ResultCode.INVALID_CHAR, config.invalid_char_error, base_field)
        for count, char in enumerate(text[decimal_index + 1:], start=1):
            if char not in DECIMAL_DIGITS:
                return _fail(ResultCode.INVALID_CHAR, config.invalid_char_error, base_field)
            if integer_only and char != "0":
                return _fail(ResultCode.INTEGER, config.integer_error, base_field)
            if config.precision != -1 and count > config.precision:
                return _fail(ResultCode.PRECISION, config.precision_error, base_field)

    first = char_at(text, 0)
    if first == "" or (first not in DECIMAL_DIGITS and first != ds):
        return _fail(ResultCode.INVALID_CHAR, config.invalid_char_error, base_field)

    end = len(text) if decimal_index == -1 else decimal_index
    for i in range(1, end):
        if text[i] != ts:
            continue
        group = text[i + 1:i + 4]
        if len(group) != 3 or any(c not in DECIMAL_DIGITS for c in group):
            return _fail(ResultCode.SEPARATION, config.separation_error, base_field)
        if i + 4 != end and char_at(text, i + 4) != ts:
            return _fail(ResultCode.SEPARATION, config.separation_error, base_field)
    return None


def to_float(config: NumericConfig, text: str, negative: bool) -> float:
    """Numeric value of already-validated text."""
    plain = text.replace(config.thousands_separator, "").replace(config.decimal_separator, ".")
    number = float(plain)
    return -number if negative else number


def check_bounds(config: NumericConfig, text: str, negative: bool, base_field: str | None) -> ValidationResult | None:
    if config.min_value is None and config.max_value is None:
        return None
    number = to_float(config, text, negative)
    if config.min_value is not None and number < config.min_value:
        return _fail(ResultCode.LOWER_THAN_MIN, config.lower_than_min_error, base_field)
    if config.max_value is not None and number > config.max_value:
        return _fail(ResultCode.EXCEEDS_MAX, config.exceeds_max_error, base_field)
    return None
