"""fieldcheck - form field validation with structured, overridable results."""
__version__ = "0.1.0"

from fieldcheck.core.errors import ConfigurationError
from fieldcheck.validators import *  # noqa: F401,F403
from fieldcheck.validators import __all__ as _validator_names

__all__ = ["ConfigurationError", "__version__", *_validator_names]
