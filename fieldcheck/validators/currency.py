"""Currency validation: the number tokenizer plus symbol placement and parenthesised negatives."""
from __future__ import annotations

from typing import Any

from .base import Validator
from .config import AlignSymbol, CurrencyConfig
from .numeric import NEGATIVE_PARENS, NEGATIVE_SIGN, as_text, check_body, check_bounds, check_chars, check_format_chars, strip_sign
from .registry import ValidatorKind, register
from .results import ResultCode, ValidationResult


def strip_symbol(config: CurrencyConfig, text: str) -> str | None:
    """Remove the currency symbol if present, or None when it is misplaced or repeated."""
    symbol = config.currency_symbol
    index = text.find(symbol)
    if index == -1:
        return text
    if text.count(symbol) > 1:
        return None
    at_left, at_right = index == 0, index + len(symbol) == len(text)
    align = config.align_symbol
    if (align == AlignSymbol.LEFT and not at_left) or (align == AlignSymbol.RIGHT and not at_right):
        return None
    if align == AlignSymbol.ANY and not (at_left or at_right):
        return None
    return text[:index] + text[index + len(symbol):]


@register(ValidatorKind.CURRENCY, config=CurrencyConfig)
def validate_currency(config: CurrencyConfig, value: Any, base_field: str | None = None) -> list[ValidationResult]:
    """Validate an amount such as "$1,234.56", "-$5" or "($5.00)".

    The sign comes first, then the symbol: "$-5" is rejected.
    """
    text = as_text(config, value)
    reserved = NEGATIVE_SIGN + NEGATIVE_PARENS

    if (failure := check_format_chars(config, reserved, base_field, symbol=config.currency_symbol)) is not None:
        return [failure]
    if (failure := check_chars(config, text, reserved + config.currency_symbol, base_field)) is not None:
        return [failure]

    stripped = strip_sign(config, text, base_field, parens=True)
    if isinstance(stripped, ValidationResult):
        return [stripped]
    text, negative = stripped

    unsymboled = strip_symbol(config, text)
    if unsymboled is None:
        return [ValidationResult.invalid(ResultCode.CURRENCY_SYMBOL, config.currency_symbol_error, base_field or "")]
    text = unsymboled
    if (failure := check_chars(config, text, "", base_field)) is not None:
        return [failure]

    if (failure := check_body(config, text, base_field)) is not None:
        return [failure]
    if (failure := check_bounds(config, text, negative, base_field)) is not None:
        return [failure]
    return []


class CurrencyValidator(Validator):
    """Validates monetary amounts with a currency symbol and fixed precision."""
    kind = ValidatorKind.CURRENCY
