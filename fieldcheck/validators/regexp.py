"""Regular expression validation with match metadata."""
from __future__ import annotations

from typing import Any

from .base import Validator
from .config import RegExpConfig
from .registry import ValidatorKind, register
from .results import RegExpValidationResult, ResultCode, ValidationResult


@register(ValidatorKind.REGEXP, config=RegExpConfig, results_on_valid=True)
def validate_regexp(config: RegExpConfig, value: Any, base_field: str | None = None) -> list[ValidationResult]:
    """Search value for the expression.

    Each match becomes a non-error RegExpValidationResult carrying the matched
    text, its offset and the captured groups. With the "g" flag every
    non-overlapping match is reported, left to right.

    Usage:
        validate_regexp(RegExpConfig(expression=r"(\\d)x", flags="g"), "1x 2x")
        # two results: ("1x", 0, ("1",)) and ("2x", 3, ("2",))
    """
    field = base_field or ""
    pattern = config.pattern
    if pattern is None:
        return [ValidationResult.invalid(ResultCode.NO_EXPRESSION, config.no_expression_error, field)]

    text = str(value)
    if config.is_global:
        matches = list(pattern.finditer(text))
    else:
        matches = [m] if (m := pattern.search(text)) is not None else []
    if not matches:
        return [ValidationResult.invalid(ResultCode.NO_MATCH, config.no_match_error, field)]

    return [
        RegExpValidationResult(is_error=False, sub_field=field, matched_string=m.group(0),
            matched_index=m.start(), matched_substrings=m.groups())
        for m in matches
    ]


class RegExpValidator(Validator):
    """Validates against a regular expression and reports what matched."""
    kind = ValidatorKind.REGEXP
