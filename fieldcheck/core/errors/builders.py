"""Configuration Error Builders

Ergonomic constructors for typed configuration errors.
Each builder creates AppError with appropriate code and context.
"""
from .types import AppError, ErrorCode, ErrorContext


# =============================================================================
# Binding Errors (E1xxx)
# =============================================================================

def binding_error(
    message: str,
    *,
    code: ErrorCode = ErrorCode.E1000_BINDING_GENERIC,
    origin: str = "",
    **metadata,
) -> AppError:
    """Create value binding error."""
    return AppError(
        code=code,
        message=message,
        context=ErrorContext(origin=origin),
        metadata={k: v for k, v in metadata.items() if v is not None},
    )


def source_missing(property_path: str, origin: str = "") -> AppError:
    return binding_error(
        f"Property path '{property_path}' is set but no source is bound",
        code=ErrorCode.E1001_SOURCE_MISSING,
        origin=origin,
        property_path=property_path,
    )


def property_missing(source: object, origin: str = "") -> AppError:
    return binding_error(
        f"Source {type(source).__name__} is bound but no property path is set",
        code=ErrorCode.E1002_PROPERTY_MISSING,
        origin=origin,
        source_type=type(source).__name__,
    )


def source_is_string(origin: str = "") -> AppError:
    return binding_error(
        "Source must be an object, not a string value",
        code=ErrorCode.E1003_SOURCE_IS_STRING,
        origin=origin,
    )


def value_function_not_callable(value_function: object, origin: str = "") -> AppError:
    return binding_error(
        f"Value function must be callable, got {type(value_function).__name__}",
        code=ErrorCode.E1004_VALUE_FUNCTION_NOT_CALLABLE,
        origin=origin,
    )


def unknown_subfield(name: str, subfields: tuple[str, ...], origin: str = "") -> AppError:
    available = ", ".join(subfields) or "none"
    return binding_error(
        f"Subfield '{name}' is not declared. Available: {available}",
        code=ErrorCode.E1005_UNKNOWN_SUBFIELD,
        origin=origin,
        subfield=name,
    )


# =============================================================================
# Option Errors (E2xxx)
# =============================================================================

def option_error(
    message: str,
    *,
    code: ErrorCode = ErrorCode.E2000_OPTION_GENERIC,
    option: str | None = None,
    origin: str = "",
    **metadata,
) -> AppError:
    """Create option error."""
    meta = {"option": option, **metadata}
    return AppError(
        code=code,
        message=message,
        context=ErrorContext(origin=origin),
        metadata={k: v for k, v in meta.items() if v is not None},
    )


def invalid_format_chars(option: str, chars: str, reason: str, origin: str = "") -> AppError:
    return option_error(
        f"Invalid '{option}' value '{chars}': {reason}",
        code=ErrorCode.E2001_INVALID_FORMAT_CHARS,
        option=option,
        origin=origin,
        chars=chars,
    )


def invalid_domain(domain: str, allowed: list[str], origin: str = "") -> AppError:
    return option_error(
        f"Invalid domain '{domain}'. It must be one of: {', '.join(allowed)}",
        code=ErrorCode.E2002_INVALID_DOMAIN,
        option="domain",
        origin=origin,
        allowed=allowed,
    )


def invalid_expression(expression: str, reason: str, origin: str = "") -> AppError:
    return option_error(
        f"Invalid regular expression '{expression}': {reason}",
        code=ErrorCode.E2003_INVALID_EXPRESSION,
        option="expression",
        origin=origin,
    )


def invalid_flags(flags: str, allowed: str, origin: str = "") -> AppError:
    return option_error(
        f"Invalid flags '{flags}'. Allowed letters: {allowed}",
        code=ErrorCode.E2004_INVALID_FLAGS,
        option="flags",
        origin=origin,
    )


def unknown_option(option: str, validator: str, origin: str = "") -> AppError:
    return option_error(
        f"{validator} has no option '{option}'",
        code=ErrorCode.E2005_UNKNOWN_OPTION,
        option=option,
        origin=origin,
    )


# =============================================================================
# Internal Errors (E9xxx)
# =============================================================================

def unknown_validator(kind: str, available: list[str], origin: str = "") -> AppError:
    return AppError(
        code=ErrorCode.E9001_UNKNOWN_VALIDATOR,
        message=f"Validator kind '{kind}' not registered. Available: {', '.join(available) or 'none'}",
        context=ErrorContext(origin=origin),
    )
