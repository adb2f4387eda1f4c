"""Validation Results and Outcomes

A ValidationResult reports on one field or subfield. A ValidationOutcome is the
payload returned by (and dispatched from) a single validate() call.

Results are immutable and produced fresh on every call, so outcomes from two
identical calls compare equal.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ResultCode(str, Enum):
    """Machine-readable failure codes shared across validators."""
    REQUIRED_FIELD = "requiredField"
    INVALID_CHAR = "invalidChar"
    WRONG_LENGTH = "wrongLength"
    # Credit card
    NO_TYPE = "noType"
    WRONG_TYPE = "wrongType"
    NO_NUM = "noNum"
    INVALID_NUMBER = "invalidNumber"
    # Date
    FORMAT = "format"
    WRONG_MONTH = "wrongMonth"
    WRONG_DAY = "wrongDay"
    WRONG_YEAR = "wrongYear"
    # Number / currency
    INVALID_FORMAT_CHAR = "invalidFormatChar"
    NEGATIVE = "negative"
    DECIMAL_POINT_COUNT = "decimalPointCount"
    PRECISION = "precision"
    INTEGER = "integer"
    SEPARATION = "separation"
    LOWER_THAN_MIN = "lowerThanMin"
    EXCEEDS_MAX = "exceedsMax"
    CURRENCY_SYMBOL = "currencySymbol"
    # Email
    MISSING_AT_SIGN = "missingAtSign"
    TOO_MANY_AT_SIGNS = "tooManyAtSigns"
    MISSING_USERNAME = "missingUsername"
    MISSING_PERIOD_IN_DOMAIN = "missingPeriodInDomain"
    INVALID_PERIODS_IN_DOMAIN = "invalidPeriodsInDomain"
    INVALID_DOMAIN = "invalidDomain"
    INVALID_IP_DOMAIN = "invalidIPDomain"
    # Postal code
    WRONG_US_FORMAT = "wrongUSFormat"
    WRONG_CA_FORMAT = "wrongCAFormat"
    # Social security
    WRONG_FORMAT = "wrongFormat"
    ZERO_START = "zeroStart"
    # String
    TOO_SHORT = "tooShort"
    TOO_LONG = "tooLong"
    # Regular expression
    NO_EXPRESSION = "noExpression"
    NO_MATCH = "noMatch"


class OutcomeKind(str, Enum):
    """Notification kinds dispatched to listeners."""
    VALID = "valid"
    INVALID = "invalid"


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Result of checking one field or subfield.

    A non-error result has empty code and message; it marks a subfield that
    passed while a sibling subfield failed.
    """
    is_error: bool
    sub_field: str = ""
    error_code: str = ""
    error_message: str = ""

    @classmethod
    def valid(cls, sub_field: str = "") -> ValidationResult: return cls(is_error=False, sub_field=sub_field)

    @classmethod
    def invalid(cls, code: ResultCode | str, message: str, sub_field: str = "") -> ValidationResult:
        return cls(is_error=True, sub_field=sub_field,
            error_code=code.value if isinstance(code, ResultCode) else code, error_message=message)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for form components and logs."""
        if not self.is_error: return {"valid": True, "sub_field": self.sub_field}
        return {"valid": False, "sub_field": self.sub_field, "code": self.error_code, "message": self.error_message}


@dataclass(frozen=True, slots=True)
class RegExpValidationResult(ValidationResult):
    """Match metadata produced by a regular expression validator.

    Carries the matched text, its offset in the input and the captured groups
    (None for a group that did not participate in the match).
    """
    matched_string: str = ""
    matched_index: int = 0
    matched_substrings: tuple[str | None, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        base = ValidationResult.to_dict(self)
        if self.is_error: return base
        return {**base, "matched_string": self.matched_string, "matched_index": self.matched_index,
            "matched_substrings": list(self.matched_substrings)}


@dataclass(frozen=True, slots=True)
class ValidationOutcome:
    """Payload returned by validate() and dispatched to listeners."""
    kind: OutcomeKind
    field: str | None = None
    results: tuple[ValidationResult, ...] = ()

    @classmethod
    def valid(cls, field: str | None = None, results: tuple[ValidationResult, ...] = ()) -> ValidationOutcome:
        return cls(kind=OutcomeKind.VALID, field=field, results=results)

    @classmethod
    def invalid(cls, results: tuple[ValidationResult, ...], field: str | None = None) -> ValidationOutcome:
        return cls(kind=OutcomeKind.INVALID, field=field, results=results)

    @property
    def is_valid(self) -> bool: return self.kind is OutcomeKind.VALID

    @property
    def message(self) -> str:
        """Error messages of every failing result, newline separated, in result order."""
        return "\n".join(r.error_message for r in self.results if r.is_error)

    @property
    def error_codes(self) -> list[str]: return [r.error_code for r in self.results if r.is_error]

    def to_dict(self) -> dict[str, Any]:
        """Serialize for form components and logs."""
        return {"kind": self.kind.value, "field": self.field, "message": self.message,
            "results": [r.to_dict() for r in self.results]}


def subfield_name(base_field: str | None, name: str) -> str:
    """Qualify a subfield name with the composite field it belongs to."""
    return f"{base_field}.{name}" if base_field else name
