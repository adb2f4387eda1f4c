# Core module exports
from fieldcheck.core.config import settings, get_settings
from fieldcheck.core.logging import (
    configure_logging,
    install_default_logging,
    get_logger,
    validator_logger,
    config_logger,
)
