"""Configuration Error Raising

Bridges the AppError value type to Python's exception flow. Configuration
errors are logged with their full context and raised at the point of misuse.
"""
from __future__ import annotations

from fieldcheck.core.logging import config_logger

from .types import AppError

log = config_logger()


class ConfigurationError(Exception):
    """Exception wrapper for AppError.
    
    Raised when a validator is bound or configured in a way that can never
    validate anything. Never used for data-dependent validation failures.
    """
    
    def __init__(self, error: AppError):
        self.error = error
        super().__init__(str(error))
    
    @property
    def code(self):
        return self.error.code


def raise_error(error: AppError) -> None:
    """Log and raise AppError as ConfigurationError.
    
    Usage:
        if isinstance(source, str):
            raise_error(source_is_string(origin="Validator.source"))
    """
    log.warning(
        "configuration_error",
        error_code=error.code.name,
        error_code_num=error.code.value,
        message=error.message,
        category=error.code.category,
        error_id=error.error_id,
        origin=error.context.origin,
        metadata=error.metadata,
    )
    raise ConfigurationError(error)
