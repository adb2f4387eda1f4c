"""Validator Options

Each validator kind has one options model. Models validate on assignment, so a
bad option fails at the line that sets it and a good one takes effect on the
next validate() call.

Message options (every field ending in ``_error``) always hold text: setting
one to None or "" restores its default.
"""
from __future__ import annotations

import math
import re
from enum import Enum
from functools import lru_cache
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from fieldcheck.core.config import settings
from fieldcheck.core.errors import (
    invalid_domain,
    invalid_expression,
    invalid_flags,
    invalid_format_chars,
    raise_error,
)

DECIMAL_DIGITS = "0123456789"
ROMAN_LETTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"


def substitute(message: str, **params: Any) -> str:
    """Fill ``{name}`` (or positional ``{0}``) placeholders without str.format.

    Custom messages may contain stray braces, so unknown placeholders are left alone.
    """
    for index, (name, value) in enumerate(params.items()):
        message = message.replace("{" + name + "}", str(value)).replace("{" + str(index) + "}", str(value))
    return message


def _reject_chars(cls: type, option: str, chars: str, forbidden: str, reason: str) -> str:
    if any(c in forbidden for c in chars):
        raise_error(invalid_format_chars(option, chars, reason, origin=cls.__name__))
    return chars


# ============================================================================
# Base
# ============================================================================

class ValidatorConfig(BaseModel):
    """Options shared by every validator kind."""
    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    required_field_error: str = "This field is required."

    @field_validator("*", mode="before")
    @classmethod
    def _restore_default_message(cls, value: Any, info: ValidationInfo) -> Any:
        if info.field_name and info.field_name.endswith("_error") and (value is None or value == ""):
            return cls.model_fields[info.field_name].default
        return value

    def message(self, name: str, **params: Any) -> str:
        """Current text of message option ``<name>_error`` with placeholders filled."""
        return substitute(getattr(self, f"{name}_error"), **params)


# ============================================================================
# Credit Card
# ============================================================================

class CardType(str, Enum):
    """Card brands with known length and prefix rules."""
    AMERICAN_EXPRESS = "American Express"
    DINERS_CLUB = "Diners Club"
    DISCOVER = "Discover"
    MASTER_CARD = "MasterCard"
    VISA = "Visa"


class CreditCardConfig(ValidatorConfig):
    allowed_format_chars: str = " -"

    invalid_char_error: str = "Invalid characters in your credit card number. (Enter numbers only.)"
    invalid_number_error: str = "The credit card number is invalid."
    no_num_error: str = "No credit card number is specified."
    no_type_error: str = "No credit card type is specified or the type is not valid."
    wrong_length_error: str = "Your credit card number contains the wrong number of digits."
    wrong_type_error: str = "Incorrect card type is specified."

    @field_validator("allowed_format_chars")
    @classmethod
    def _no_digits(cls, v: str) -> str:
        return _reject_chars(cls, "allowed_format_chars", v, DECIMAL_DIGITS, "digits are not allowed")


# ============================================================================
# Date
# ============================================================================

class DateConfig(ValidatorConfig):
    allowed_format_chars: str = "/- ."
    input_format: str = Field(default_factory=lambda: settings.DATE_INPUT_FORMAT)
    validate_as_string: bool = True
    month_property: str = "month"
    day_property: str = "day"
    year_property: str = "year"

    format_error: str = "Configuration error: Incorrect formatting string."
    invalid_char_error: str = "The date contains invalid characters."
    wrong_day_error: str = "Enter a valid day for the month."
    wrong_length_error: str = "Type the date in the format {input_format}."
    wrong_month_error: str = "Enter a month between 1 and 12."
    wrong_year_error: str = "Enter a year between 0 and 9999."

    @field_validator("allowed_format_chars")
    @classmethod
    def _no_digits(cls, v: str) -> str:
        return _reject_chars(cls, "allowed_format_chars", v, DECIMAL_DIGITS, "digits are not allowed")


# ============================================================================
# Number / Currency
# ============================================================================

class NumberDomain(str, Enum):
    INT = "int"
    REAL = "real"


class AlignSymbol(str, Enum):
    LEFT = "left"
    RIGHT = "right"
    ANY = "any"


class NumericConfig(ValidatorConfig):
    """Options shared by the number and currency tokenizers."""
    allow_negative: bool = True
    decimal_separator: str = Field(default_factory=lambda: settings.DECIMAL_SEPARATOR)
    thousands_separator: str = Field(default_factory=lambda: settings.THOUSANDS_SEPARATOR)
    max_value: float | None = None
    min_value: float | None = None
    precision: int = -1

    decimal_point_count_error: str = "The decimal separator can occur only once."
    exceeds_max_error: str = "The number entered is too large."
    invalid_char_error: str = "The input contains invalid characters."
    invalid_format_chars_error: str = "One of the formatting parameters is invalid."
    lower_than_min_error: str = "The amount entered is too small."
    negative_error: str = "The amount may not be negative."
    precision_error: str = "The amount entered has too many digits beyond the decimal point."
    separation_error: str = "The thousands separator must be followed by three digits."

    @field_validator("max_value", "min_value")
    @classmethod
    def _nan_is_unset(cls, v: float | None) -> float | None:
        return None if v is not None and math.isnan(v) else v


class NumberConfig(NumericConfig):
    domain: NumberDomain = NumberDomain.REAL

    integer_error: str = "The number must be an integer."

    @field_validator("domain", mode="before")
    @classmethod
    def _known_domain(cls, v: Any) -> Any:
        if isinstance(v, NumberDomain) or v in {d.value for d in NumberDomain}: return v
        raise_error(invalid_domain(str(v), [d.value for d in NumberDomain], origin=cls.__name__))


class CurrencyConfig(NumericConfig):
    align_symbol: AlignSymbol = AlignSymbol.LEFT
    currency_symbol: str = Field(default_factory=lambda: settings.CURRENCY_SYMBOL)
    precision: int = 2

    currency_symbol_error: str = "The currency symbol occurs in an invalid location."
    exceeds_max_error: str = "The amount entered is too large."


# ============================================================================
# Email
# ============================================================================

class EmailConfig(ValidatorConfig):
    invalid_char_error: str = "Your e-mail address contains invalid characters."
    invalid_domain_error: str = "The domain in your e-mail address is incorrectly formatted."
    invalid_ip_domain_error: str = "The IP domain in your e-mail address is incorrectly formatted."
    invalid_periods_in_domain_error: str = "The domain in your e-mail address has consecutive periods."
    missing_at_sign_error: str = "An at sign (@) is missing in your e-mail address."
    missing_period_in_domain_error: str = "The domain in your e-mail address is missing a period."
    missing_username_error: str = "The username in your e-mail address is missing."
    too_many_at_signs_error: str = "Your e-mail address contains too many @ characters."


# ============================================================================
# Postal Code
# ============================================================================

class ZipCodeDomain(str, Enum):
    US_ONLY = "US Only"
    CANADA_ONLY = "Canada Only"
    US_OR_CANADA = "US or Canada"


class ZipCodeConfig(ValidatorConfig):
    allowed_format_chars: str = " -"
    domain: ZipCodeDomain = ZipCodeDomain.US_ONLY

    invalid_char_error: str = "The ZIP code contains invalid characters."
    wrong_ca_format_error: str = "The Canadian ZIP code must be formatted 'A1B 2C3'."
    wrong_length_error: str = "The ZIP code must be 5 digits or 5+4 digits."
    wrong_us_format_error: str = "The ZIP+4 code must be formatted '12345-6789'."

    @field_validator("allowed_format_chars")
    @classmethod
    def _no_digits_or_letters(cls, v: str) -> str:
        return _reject_chars(cls, "allowed_format_chars", v, DECIMAL_DIGITS + ROMAN_LETTERS,
            "digits and letters are not allowed")

    @field_validator("domain", mode="before")
    @classmethod
    def _known_domain(cls, v: Any) -> Any:
        if isinstance(v, ZipCodeDomain): return v
        if v in {d.value for d in ZipCodeDomain}: return ZipCodeDomain(v)
        if v in ZipCodeDomain.__members__: return ZipCodeDomain[v]
        raise_error(invalid_domain(str(v), [d.value for d in ZipCodeDomain], origin=cls.__name__))


# ============================================================================
# Phone Number / Social Security
# ============================================================================

class PhoneNumberConfig(ValidatorConfig):
    allowed_format_chars: str = "()- .+"
    min_digits: int = 10

    invalid_char_error: str = "Your telephone number contains invalid characters."
    wrong_length_error: str = "Your telephone number must contain at least {min_digits} digits."

    @field_validator("allowed_format_chars")
    @classmethod
    def _no_digits(cls, v: str) -> str:
        return _reject_chars(cls, "allowed_format_chars", v, DECIMAL_DIGITS, "digits are not allowed")


class SocialSecurityConfig(ValidatorConfig):
    allowed_format_chars: str = " -"

    invalid_char_error: str = "You entered invalid characters in your Social Security number."
    wrong_format_error: str = "The Social Security number must be 9 digits or in the form NNN-NN-NNNN."
    zero_start_error: str = "Invalid Social Security number; the number cannot start with 000."

    @field_validator("allowed_format_chars")
    @classmethod
    def _no_digits(cls, v: str) -> str:
        return _reject_chars(cls, "allowed_format_chars", v, DECIMAL_DIGITS, "digits are not allowed")


# ============================================================================
# String
# ============================================================================

class StringConfig(ValidatorConfig):
    max_length: int | None = None
    min_length: int | None = None

    too_long_error: str = ("This string is longer than the maximum allowed length. "
        "This must be less than {max_length} characters long.")
    too_short_error: str = ("This string is shorter than the minimum allowed length. "
        "This must be at least {min_length} characters long.")


# ============================================================================
# Regular Expression
# ============================================================================

REGEXP_FLAGS: dict[str, re.RegexFlag] = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
    "x": re.VERBOSE,
}
GLOBAL_FLAG = "g"


@lru_cache(maxsize=256)
def compile_expression(expression: str, flags: str) -> re.Pattern:
    """Compile expression with letter flags (g is handled by the caller)."""
    compiled_flags = 0
    for letter in flags:
        compiled_flags |= REGEXP_FLAGS.get(letter, 0)
    return re.compile(expression, compiled_flags)


class RegExpConfig(ValidatorConfig):
    flags: str = ""
    expression: str = ""

    no_expression_error: str = "The expression is missing."
    no_match_error: str = "The field is invalid."

    @field_validator("flags")
    @classmethod
    def _known_flags(cls, v: str, info: ValidationInfo) -> str:
        allowed = GLOBAL_FLAG + "".join(REGEXP_FLAGS)
        if any(c not in allowed for c in v):
            raise_error(invalid_flags(v, allowed, origin=cls.__name__))
        # Only set on assignment; at construction expression is checked after flags
        if expression := info.data.get("expression"):
            try: compile_expression(expression, v)
            except re.error as e: raise_error(invalid_expression(expression, str(e), origin=cls.__name__))
        return v

    @field_validator("expression")
    @classmethod
    def _compiles(cls, v: str, info: ValidationInfo) -> str:
        if v:
            try: compile_expression(v, info.data.get("flags", ""))
            except re.error as e: raise_error(invalid_expression(v, str(e), origin=cls.__name__))
        return v

    @property
    def is_global(self) -> bool: return GLOBAL_FLAG in self.flags

    @property
    def pattern(self) -> re.Pattern | None:
        return compile_expression(self.expression, self.flags) if self.expression else None
