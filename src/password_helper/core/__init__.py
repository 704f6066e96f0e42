"""Core password_helper utilities.

This module exports configuration, logging and the error taxonomy.
"""

from password_helper.core.config import Settings, get_settings
from password_helper.core.exceptions import (
    GenerationExhaustedError,
    InvalidArgumentError,
    InvalidPolicyError,
    PasswordHelperError,
)
from password_helper.core.logging import configure_logging, get_logger

__all__ = [
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    "GenerationExhaustedError",
    "InvalidArgumentError",
    "InvalidPolicyError",
    "PasswordHelperError",
]
