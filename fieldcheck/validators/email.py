"""Email validation

A character scan of the address grammar, without a regular expression. The
domain is either a dotted host name or a bracketed IPv4/IPv6 literal.
"""
from __future__ import annotations

from typing import Any

from .base import Validator
from .config import DECIMAL_DIGITS, EmailConfig
from .registry import ValidatorKind, register
from .results import ResultCode, ValidationResult

DISALLOWED_LOCALNAME_CHARS = "()<>,;:\\\"[] `~!#$%^&*+={}|/?'"
DISALLOWED_DOMAIN_CHARS = "()<>,;:\\\"[] `~!#$%^&*_+={}|/?'"
HEX_DIGITS = "0123456789abcdefABCDEF"


# ============================================================================
# IP Literals
# ============================================================================

def is_ipv4(text: str) -> bool:
    """Four dot-separated decimal groups, each 0-255."""
    groups = text.split(".")
    return len(groups) == 4 and all(
        g and len(g) <= 3 and all(c in DECIMAL_DIGITS for c in g) and int(g) <= 255 for g in groups)


def _is_hex_group(group: str) -> bool:
    return 1 <= len(group) <= 4 and all(c in HEX_DIGITS for c in group)


def is_ipv6(text: str) -> bool:
    """Colon-separated hex groups with at most one ``::`` elision.

    A trailing dotted IPv4 group stands for the last two groups; when present,
    every hex group must be zero.
    """
    if text.count("::") > 1:
        return False
    elided = "::" in text
    if elided:
        head, tail = text.split("::")
        groups = (head.split(":") if head else []) + (tail.split(":") if tail else [])
    else:
        groups = text.split(":")

    embedded_v4 = bool(groups) and "." in groups[-1]
    if embedded_v4:
        if not is_ipv4(groups[-1]):
            return False
        groups = groups[:-1]
        if not all(_is_hex_group(g) and int(g, 16) == 0 for g in groups):
            return False
    elif not all(_is_hex_group(g) for g in groups):
        return False

    width = len(groups) + (2 if embedded_v4 else 0)
    return width < 8 if elided else width == 8


def is_ip_literal(text: str) -> bool:
    """IPv6 when the text has a colon, else IPv4."""
    return is_ipv6(text) if ":" in text else is_ipv4(text)


# ============================================================================
# Algorithm
# ============================================================================

def _check_domain(config: EmailConfig, domain: str, base_field: str) -> ValidationResult | None:
    if domain.startswith("[") and domain.endswith("]"):
        if not is_ip_literal(domain[1:-1]):
            return ValidationResult.invalid(ResultCode.INVALID_IP_DOMAIN, config.invalid_ip_domain_error, base_field)
        return None

    last_period = domain.rfind(".")
    if last_period == -1:
        return ValidationResult.invalid(ResultCode.MISSING_PERIOD_IN_DOMAIN, config.missing_period_in_domain_error, base_field)
    if ".." in domain:
        return ValidationResult.invalid(ResultCode.INVALID_PERIODS_IN_DOMAIN, config.invalid_periods_in_domain_error, base_field)
    if any(c in DISALLOWED_DOMAIN_CHARS for c in domain):
        return ValidationResult.invalid(ResultCode.INVALID_CHAR, config.invalid_char_error, base_field)
    if domain[0] in ".-" or (last_period > 0 and domain[last_period - 1] == "-"):
        return ValidationResult.invalid(ResultCode.INVALID_DOMAIN, config.invalid_domain_error, base_field)
    return None


@register(ValidatorKind.EMAIL, config=EmailConfig)
def validate_email(config: EmailConfig, value: Any, base_field: str | None = None) -> list[ValidationResult]:
    """Validate an address of the form user@host.tld or user@[ip-literal].

    Usage:
        validate_email(EmailConfig(), "hello@[123.123.123.123]")   # []
        validate_email(EmailConfig(), "hello@what@example.com")    # [tooManyAtSigns]
    """
    address, field = str(value), base_field or ""

    at = address.find("@")
    if at == -1:
        return [ValidationResult.invalid(ResultCode.MISSING_AT_SIGN, config.missing_at_sign_error, field)]
    if address.find("@", at + 1) != -1:
        return [ValidationResult.invalid(ResultCode.TOO_MANY_AT_SIGNS, config.too_many_at_signs_error, field)]

    username, domain = address[:at], address[at + 1:]
    if not username:
        return [ValidationResult.invalid(ResultCode.MISSING_USERNAME, config.missing_username_error, field)]
    if any(c in DISALLOWED_LOCALNAME_CHARS for c in username) or username.startswith("."):
        return [ValidationResult.invalid(ResultCode.INVALID_CHAR, config.invalid_char_error, field)]

    failure = _check_domain(config, domain, field)
    return [failure] if failure is not None else []


class EmailValidator(Validator):
    """Validates e-mail addresses, including IP-literal domains."""
    kind = ValidatorKind.EMAIL
