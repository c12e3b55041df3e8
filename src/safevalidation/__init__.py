"""safevalidation: a value or every error message, never a half-checked form.

Independent checks are combined with the zip family or lift and report all
their messages at once; dependent steps are chained with bind and stop at
the first failure.

Example:
    >>> from safevalidation import Failure, Success
    >>> Failure("Username is empty").zip(Failure("Email must contain @-sign")).errors()
    ('Username is empty', 'Email must contain @-sign')
    >>> Success(2).map(lambda x: x + 1).unwrap(0)
    3
"""

from .foundation.config import SafeValidationSettings, clear_settings_cache, get_settings
from .foundation.errors import (
    EmptyErrors,
    FaultCode,
    InvalidMessages,
    UnsupportedArity,
    UnwrapOnFailure,
    ValidationFault,
)
from .foundation.log import configure_logging
from .validation import (
    Failure,
    Success,
    Validation,
    apply,
    fallible,
    from_fallible,
    lift,
    sequence,
    traverse,
    zip,
    zip3,
    zip_left,
    zip_right,
    zip_with,
    zip_with3,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    "Validation", "Success", "Failure", "from_fallible", "fallible",
    # Combinators
    "apply", "zip_with", "zip", "zip_left", "zip_right", "zip_with3", "zip3", "lift",
    "sequence", "traverse",
    # Faults
    "FaultCode", "ValidationFault", "UnwrapOnFailure", "EmptyErrors", "InvalidMessages", "UnsupportedArity",
    # Config / logging
    "SafeValidationSettings", "get_settings", "clear_settings_cache", "configure_logging",
]
