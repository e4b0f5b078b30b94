"""
Utility modules for stable-match.

This package contains shared utilities used across the library:
- config: Configuration management
- logger: Logging infrastructure
- constants: Library-wide constants
"""

from stable_match.utils.config import (
    AppSettings,
    LoggingSettings,
    MatchingSettings,
    get_settings,
    reload_settings,
)
from stable_match.utils.constants import (
    APP_NAME,
    APP_DISPLAY_NAME,
    VERSION,
    DEFAULT_ITERATION_CAP,
    ProposalOutcome,
)
from stable_match.utils.logger import (
    setup_logging,
    get_logger,
    LoggerMixin,
    log,
)

__all__ = [
    # Config
    "AppSettings",
    "LoggingSettings",
    "MatchingSettings",
    "get_settings",
    "reload_settings",
    # Constants
    "APP_NAME",
    "APP_DISPLAY_NAME",
    "VERSION",
    "DEFAULT_ITERATION_CAP",
    "ProposalOutcome",
    # Logger
    "setup_logging",
    "get_logger",
    "LoggerMixin",
    "log",
]
