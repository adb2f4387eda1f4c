"""Configuration Error Types

Validation failures are data and travel as ValidationResult entries. The types
here cover the other class of failure: a validator wired or configured in a way
that can never work. Those carry a typed code from the taxonomy below and fail
loudly at the point of misuse.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from uuid import uuid4


class ErrorCode(Enum):
    """Hierarchical configuration error taxonomy.

    E1xxx: Value binding errors (source, property path, value function)
    E2xxx: Option errors (format characters, domains, expressions)
    E9xxx: Internal/Unknown errors
    """
    # Binding (E1xxx)
    E1000_BINDING_GENERIC = 1000
    E1001_SOURCE_MISSING = 1001
    E1002_PROPERTY_MISSING = 1002
    E1003_SOURCE_IS_STRING = 1003
    E1004_VALUE_FUNCTION_NOT_CALLABLE = 1004
    E1005_UNKNOWN_SUBFIELD = 1005

    # Options (E2xxx)
    E2000_OPTION_GENERIC = 2000
    E2001_INVALID_FORMAT_CHARS = 2001
    E2002_INVALID_DOMAIN = 2002
    E2003_INVALID_EXPRESSION = 2003
    E2004_INVALID_FLAGS = 2004
    E2005_UNKNOWN_OPTION = 2005

    # Internal (E9xxx)
    E9000_INTERNAL_GENERIC = 9000
    E9001_UNKNOWN_VALIDATOR = 9001

    @property
    def category(self) -> str:
        """Human-readable error category."""
        code = self.value
        if 1000 <= code < 2000:
            return "binding"
        if 2000 <= code < 3000:
            return "option"
        return "internal"


@dataclass(frozen=True, slots=True)
class ErrorContext:
    """Immutable context for error tracing and debugging."""
    correlation_id: str = field(default_factory=lambda: str(uuid4())[:8])
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    origin: str = ""


@dataclass(frozen=True, slots=True)
class AppError:
    """Configuration error with full context.

    All errors carry:
    - Typed error code from taxonomy
    - Human-readable message
    - Structured metadata for debugging
    - Tracing context naming the validator that rejected the setting
    """
    code: ErrorCode
    message: str
    context: ErrorContext = field(default_factory=ErrorContext)
    metadata: dict = field(default_factory=dict)

    @property
    def error_id(self) -> str:
        """Unique identifier for this error instance."""
        return f"{self.code.name}:{self.context.correlation_id}"

    def to_dict(self) -> dict:
        """Serialize error for diagnostics."""
        return {
            "error": {
                "code": self.code.name,
                "code_num": self.code.value,
                "message": self.message,
                "category": self.code.category,
                "correlation_id": self.context.correlation_id,
                "timestamp": self.context.timestamp.isoformat(),
                "origin": self.context.origin,
                "metadata": self.metadata,
            }
        }

    def __str__(self) -> str:
        return f"[{self.code.name}] {self.message} (correlation_id={self.context.correlation_id})"
