"""Error handling for safevalidation.

- FaultCode: classification of API misuse
- ValidationFault and subclasses: programmer errors that propagate
- ErrorMessages/validate_messages: the non-empty message sequence type
"""

from .errors import EmptyErrors, FaultCode, InvalidMessages, UnsupportedArity, UnwrapOnFailure, ValidationFault
from .types import ErrorMessages, validate_messages

__all__ = [
    # Faults
    "FaultCode", "ValidationFault", "UnwrapOnFailure", "EmptyErrors", "InvalidMessages", "UnsupportedArity",
    # Message sequence
    "ErrorMessages", "validate_messages",
]
