"""Date validation against a format mask.

A mask such as ``MM/DD/YYYY`` is made of month, day and year token runs and
separator characters. String input is split the same way and then range
checked; structured input (mappings, date objects) is range checked directly.
"""
from __future__ import annotations

import calendar
from dataclasses import dataclass
from typing import Any

from .base import Validator
from .config import DECIMAL_DIGITS, DateConfig
from .registry import ValidatorKind, register
from .results import ResultCode, ValidationResult, subfield_name
from .sources import pull_field

DAY, MONTH, YEAR = "day", "month", "year"
TOKENS = {"M": MONTH, "D": DAY, "Y": YEAR}
DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


# ============================================================================
# Format Mask
# ============================================================================

@dataclass(frozen=True, slots=True)
class DateMask:
    """Parsed format mask.

    runs: (part, width) pairs in mask order, where part is "month", "day",
          "year" or a single separator character
    """
    runs: tuple[tuple[str, int], ...]

    @property
    def separated(self) -> bool: return any(part not in TOKENS.values() for part, _ in self.runs)

    def width(self, part: str) -> int: return next((w for p, w in self.runs if p == part), 0)


def parse_mask(input_format: str, allowed_format_chars: str) -> DateMask | None:
    """Parse a mask, or return None when its shape can never match a date.

    Tokens are case-insensitive and each must form one contiguous run. The month
    takes 1-2 characters; either the day takes 1-2 and the year 0, 2 or 4, or the
    day is omitted and the year takes 2 or 4.
    """
    runs: list[tuple[str, int]] = []
    for char in input_format.upper():
        part = TOKENS.get(char)
        if part is None:
            if char not in allowed_format_chars: return None
            runs.append((char, 1))
        elif runs and runs[-1][0] == part:
            runs[-1] = (part, runs[-1][1] + 1)
        elif any(p == part for p, _ in runs):
            return None
        else:
            runs.append((part, 1))

    mask = DateMask(tuple(runs))
    months, days, years = mask.width(MONTH), mask.width(DAY), mask.width(YEAR)
    if not 1 <= months <= 2: return None
    if 1 <= days <= 2 and years in (0, 2, 4): return mask
    if days == 0 and years in (2, 4): return mask
    return None


def split_input(text: str, mask: DateMask) -> dict[str, str] | None:
    """Cut text into token digit strings following the mask, or None on a shape mismatch.

    With separators, any allowed separator stands for any mask separator; month
    and day take 1-2 digits and the year exactly its mask width. Without
    separators every token takes exactly its mask width.
    """
    if not mask.separated:
        if len(text) != sum(w for _, w in mask.runs) or any(c not in DECIMAL_DIGITS for c in text):
            return None
        parts, offset = {}, 0
        for part, width in mask.runs:
            parts[part], offset = text[offset:offset + width], offset + width
        return parts

    chunks: list[str] = []
    for char in text:
        if char in DECIMAL_DIGITS and chunks and chunks[-1][-1] in DECIMAL_DIGITS:
            chunks[-1] += char
        else:
            chunks.append(char)
    if len(chunks) != len(mask.runs):
        return None

    parts = {}
    for chunk, (part, width) in zip(chunks, mask.runs):
        is_digits = chunk[0] in DECIMAL_DIGITS
        if part not in TOKENS.values():
            if is_digits: return None
            continue
        if not is_digits: return None
        if part == YEAR and len(chunk) != width: return None
        if part != YEAR and not 1 <= len(chunk) <= 2: return None
        parts[part] = chunk
    return parts


# ============================================================================
# Range Checks
# ============================================================================

def days_in_month(month: int, year: int) -> int:
    if month == 2 and calendar.isleap(year): return 29
    return DAYS_IN_MONTH[month - 1]


def check_ranges(
    config: DateConfig, month: int, day: int | None, year: int | None, base_field: str | None = None,
) -> list[ValidationResult]:
    """Month, then day, then year; the first failure is the only result."""
    if not 1 <= month <= 12:
        return [ValidationResult.invalid(ResultCode.WRONG_MONTH, config.wrong_month_error, subfield_name(base_field, MONTH))]
    # Without a year, February 29 is accepted
    leap_basis = 2000 if year is None else year
    if day is not None and not 1 <= day <= days_in_month(month, leap_basis):
        return [ValidationResult.invalid(ResultCode.WRONG_DAY, config.wrong_day_error, subfield_name(base_field, DAY))]
    if year is not None and not 0 <= year <= 9999:
        return [ValidationResult.invalid(ResultCode.WRONG_YEAR, config.wrong_year_error, subfield_name(base_field, YEAR))]
    return []


def _as_int(value: Any) -> int | None:
    if isinstance(value, bool): return None
    if isinstance(value, int): return value
    if isinstance(value, float): return int(value) if value.is_integer() else None
    text = str(value).strip()
    return int(text) if text and all(c in DECIMAL_DIGITS for c in text) else None


def _is_blank(value: Any) -> bool: return value is None or str(value).strip() == ""


# ============================================================================
# Algorithm
# ============================================================================

def _validate_string(config: DateConfig, text: str, mask: DateMask, base_field: str | None) -> list[ValidationResult]:
    text = text.strip()
    if any(c not in DECIMAL_DIGITS and c not in config.allowed_format_chars for c in text):
        return [ValidationResult.invalid(ResultCode.INVALID_CHAR, config.invalid_char_error, base_field or "")]

    parts = split_input(text, mask)
    if parts is None:
        message = config.message("wrong_length", input_format=config.input_format)
        return [ValidationResult.invalid(ResultCode.WRONG_LENGTH, message, base_field or "")]

    year = int(parts[YEAR]) if YEAR in parts else None
    if year is not None and mask.width(YEAR) == 2:
        year += 2000  # two-digit years are read as 2000-2099
    day = int(parts[DAY]) if DAY in parts else None
    return check_ranges(config, int(parts[MONTH]), day, year, base_field)


def _validate_structured(config: DateConfig, value: Any, mask: DateMask, base_field: str | None) -> list[ValidationResult]:
    fields = {
        MONTH: pull_field(value, config.month_property, MONTH),
        DAY: pull_field(value, config.day_property, DAY),
        YEAR: pull_field(value, config.year_property, YEAR),
    }
    expected = [part for part in (MONTH, DAY, YEAR) if mask.width(part)]

    results = [
        ValidationResult.invalid(ResultCode.REQUIRED_FIELD, config.required_field_error, subfield_name(base_field, part))
        for part in expected if _is_blank(fields[part])
    ]
    if results:
        return results

    numbers = {part: _as_int(fields[part]) for part in expected}
    results = [
        ValidationResult.invalid(ResultCode.INVALID_CHAR, config.invalid_char_error, subfield_name(base_field, part))
        for part in expected if numbers[part] is None
    ]
    if results:
        return results
    return check_ranges(config, numbers[MONTH], numbers.get(DAY), numbers.get(YEAR), base_field)


@register(ValidatorKind.DATE, config=DateConfig, subfields=(DAY, MONTH, YEAR))
def validate_date(config: DateConfig, value: Any, base_field: str | None = None) -> list[ValidationResult]:
    """Validate a date string against input_format, or a structured date.

    Strings are parsed against the mask unless validate_as_string is off;
    anything else (mappings, objects with month/day/year attributes) is read
    field by field.
    """
    mask = parse_mask(config.input_format, config.allowed_format_chars)
    if mask is None:
        return [ValidationResult.invalid(ResultCode.FORMAT, config.format_error, base_field or "")]
    if isinstance(value, str) and config.validate_as_string:
        return _validate_string(config, value, mask, base_field)
    return _validate_structured(config, value, mask, base_field)


class DateValidator(Validator):
    """Validates dates typed against a format mask or given as month/day/year parts.

    Usage:
        v = DateValidator(input_format="YYYY-MM-DD")
        v.validate("1989-07-31").is_valid
    """
    kind = ValidatorKind.DATE
