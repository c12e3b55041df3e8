"""Foundation layer: errors, configuration and logging shared by the validation core."""

from .config import CaptureSettings, LoggingSettings, SafeValidationSettings, clear_settings_cache, get_settings
from .errors import (
    EmptyErrors,
    ErrorMessages,
    FaultCode,
    InvalidMessages,
    UnsupportedArity,
    UnwrapOnFailure,
    ValidationFault,
    validate_messages,
)
from .log import configure_logging, get_logger

__all__ = [
    # Config
    "CaptureSettings", "LoggingSettings", "SafeValidationSettings", "get_settings", "clear_settings_cache",
    # Errors
    "FaultCode", "ValidationFault", "UnwrapOnFailure", "EmptyErrors", "InvalidMessages", "UnsupportedArity",
    "ErrorMessages", "validate_messages",
    # Logging
    "get_logger", "configure_logging",
]
