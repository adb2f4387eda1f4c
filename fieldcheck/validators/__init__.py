"""Field Validators

Importing this package registers every validator kind.

Usage:
    from fieldcheck.validators import CardType, CreditCardValidator, validate_all

    card = CreditCardValidator(source=form, property_path="payment")
    failures = validate_all([card, email])
"""
from .results import (
    OutcomeKind,
    RegExpValidationResult,
    ResultCode,
    ValidationOutcome,
    ValidationResult,
)
from .config import (
    AlignSymbol,
    CardType,
    CreditCardConfig,
    CurrencyConfig,
    DateConfig,
    EmailConfig,
    NumberConfig,
    NumberDomain,
    PhoneNumberConfig,
    RegExpConfig,
    SocialSecurityConfig,
    StringConfig,
    ValidatorConfig,
    ZipCodeConfig,
    ZipCodeDomain,
)
from .registry import ValidatorKind, get_variant, list_kinds
from .sources import TriggerSource, ValidationListener, resolve_property
from .base import Validator, validate_all, validate_required

# Import triggers registration
from .credit_card import CreditCardValidator, validate_credit_card
from .currency import CurrencyValidator, validate_currency
from .date import DateValidator, validate_date
from .email import EmailValidator, validate_email
from .number import NumberValidator, validate_number
from .phone_number import PhoneNumberValidator, validate_phone_number
from .regexp import RegExpValidator, validate_regexp
from .social_security import SocialSecurityValidator, validate_social_security
from .string import StringValidator, validate_string
from .zip_code import ZipCodeValidator, validate_zip_code

__all__ = [
    # Results
    "OutcomeKind",
    "RegExpValidationResult",
    "ResultCode",
    "ValidationOutcome",
    "ValidationResult",
    # Options
    "AlignSymbol",
    "CardType",
    "CreditCardConfig",
    "CurrencyConfig",
    "DateConfig",
    "EmailConfig",
    "NumberConfig",
    "NumberDomain",
    "PhoneNumberConfig",
    "RegExpConfig",
    "SocialSecurityConfig",
    "StringConfig",
    "ValidatorConfig",
    "ZipCodeConfig",
    "ZipCodeDomain",
    # Core
    "TriggerSource",
    "ValidationListener",
    "Validator",
    "ValidatorKind",
    "get_variant",
    "list_kinds",
    "resolve_property",
    "validate_all",
    "validate_required",
    # Validators
    "CreditCardValidator",
    "CurrencyValidator",
    "DateValidator",
    "EmailValidator",
    "NumberValidator",
    "PhoneNumberValidator",
    "RegExpValidator",
    "SocialSecurityValidator",
    "StringValidator",
    "ZipCodeValidator",
    # Algorithms
    "validate_credit_card",
    "validate_currency",
    "validate_date",
    "validate_email",
    "validate_number",
    "validate_phone_number",
    "validate_regexp",
    "validate_social_security",
    "validate_string",
    "validate_zip_code",
]
