"""Credit card validation: brand length and prefix tables plus the Luhn checksum."""
from __future__ import annotations

from typing import Any

from .base import Validator
from .config import DECIMAL_DIGITS, CardType, CreditCardConfig
from .registry import ValidatorKind, register
from .results import ResultCode, ValidationResult, subfield_name
from .sources import pull_field

CARD_NUMBER = "cardNumber"
CARD_TYPE = "cardType"

# Brand -> (allowed digit counts, allowed prefixes of the canonical digit string)
CARD_RULES: dict[CardType, tuple[tuple[int, ...], tuple[str, ...]]] = {
    CardType.VISA: ((13, 16), ("4",)),
    CardType.MASTER_CARD: ((16,), ("51", "52", "53", "54", "55")),
    CardType.AMERICAN_EXPRESS: ((15,), ("34", "37")),
    CardType.DISCOVER: ((16,), ("6011",)),
    CardType.DINERS_CLUB: ((14,), ("300", "301", "302", "303", "304", "305", "36", "38")),
}


def parse_card_type(raw: Any) -> CardType | None:
    """Accept a CardType, its display value in any case, or its member name."""
    if isinstance(raw, CardType): return raw
    text = str(raw).strip()
    for card_type in CardType:
        if text.lower() == card_type.value.lower() or text.upper() == card_type.name:
            return card_type
    return None


def luhn_ok(digits: str) -> bool:
    """Mod-10 checksum, doubling every second digit from the right."""
    total = 0
    for position, char in enumerate(reversed(digits)):
        digit = int(char)
        if position % 2:
            digit *= 2
            if digit > 9: digit -= 9
        total += digit
    return total % 10 == 0


@register(ValidatorKind.CREDIT_CARD, config=CreditCardConfig, subfields=(CARD_NUMBER, CARD_TYPE))
def validate_credit_card(config: CreditCardConfig, value: Any, base_field: str | None = None) -> list[ValidationResult]:
    """Check a composite value exposing cardType and cardNumber.

    Stops at the first failing check; the Luhn checksum runs only once the
    characters, length and prefix are acceptable.
    """
    type_field = subfield_name(base_field, CARD_TYPE)
    number_field = subfield_name(base_field, CARD_NUMBER)

    raw_type = pull_field(value, CARD_TYPE, "card_type")
    if raw_type is None or str(raw_type).strip() == "":
        return [ValidationResult.invalid(ResultCode.NO_TYPE, config.no_type_error, type_field)]
    card_type = parse_card_type(raw_type)
    if card_type is None:
        return [ValidationResult.invalid(ResultCode.WRONG_TYPE, config.wrong_type_error, type_field)]

    raw_number = pull_field(value, CARD_NUMBER, "card_number")
    if raw_number is None or str(raw_number) == "":
        return [ValidationResult.invalid(ResultCode.NO_NUM, config.no_num_error, number_field)]
    number = str(raw_number)

    allowed = DECIMAL_DIGITS + config.allowed_format_chars
    if any(c not in allowed for c in number):
        return [ValidationResult.invalid(ResultCode.INVALID_CHAR, config.invalid_char_error, number_field)]
    digits = "".join(c for c in number if c in DECIMAL_DIGITS)

    # Diners Club cards issued under the MasterCard interchange start with 5
    if card_type is CardType.DINERS_CLUB and digits.startswith("5"):
        card_type = CardType.MASTER_CARD

    lengths, prefixes = CARD_RULES[card_type]
    if len(digits) not in lengths:
        return [ValidationResult.invalid(ResultCode.WRONG_LENGTH, config.wrong_length_error, number_field)]
    if not digits.startswith(prefixes) or not luhn_ok(digits):
        return [ValidationResult.invalid(ResultCode.INVALID_NUMBER, config.invalid_number_error, number_field)]
    return []


class CreditCardValidator(Validator):
    """Validates a card type and number pair.

    Usage:
        v = CreditCardValidator()
        v.validate({"cardType": CardType.MASTER_CARD, "cardNumber": "5555 5555 5555 4444"})
    """
    kind = ValidatorKind.CREDIT_CARD
