"""Configuration Error System

Configuration errors (a string bound as a source, digits in a format character
set, an unknown postal domain) are programmer mistakes. They are built as
immutable AppError values and raised as ConfigurationError at the point of
misuse. Validation failures never go through this module.

Usage:
    from fieldcheck.core.errors import raise_error, source_missing

    if self.property_path and self.source is None:
        raise_error(source_missing(self.property_path, origin="Validator"))
"""
from .types import (
    AppError,
    ErrorCode,
    ErrorContext,
)

from .builders import (
    # Binding (E1xxx)
    binding_error,
    source_missing,
    property_missing,
    source_is_string,
    value_function_not_callable,
    unknown_subfield,
    # Options (E2xxx)
    option_error,
    invalid_format_chars,
    invalid_domain,
    invalid_expression,
    invalid_flags,
    unknown_option,
    # Internal (E9xxx)
    unknown_validator,
)

from .handlers import (
    ConfigurationError,
    raise_error,
)

__all__ = [
    # Core types
    "AppError",
    "ErrorCode",
    "ErrorContext",
    # Binding (E1xxx)
    "binding_error",
    "source_missing",
    "property_missing",
    "source_is_string",
    "value_function_not_callable",
    "unknown_subfield",
    # Options (E2xxx)
    "option_error",
    "invalid_format_chars",
    "invalid_domain",
    "invalid_expression",
    "invalid_flags",
    "unknown_option",
    # Internal (E9xxx)
    "unknown_validator",
    # Handlers
    "ConfigurationError",
    "raise_error",
]
