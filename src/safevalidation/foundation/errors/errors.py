"""Faults raised when the validation API itself is misused.

Domain problems never show up here: they travel as messages inside a
failed Validation. These exceptions signal a bug in the calling code
(unwrapping a failure, building a failure with no messages, lifting a
function of unsupported arity) and are meant to propagate.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import StrEnum
from typing import Self


class FaultCode(StrEnum):
    """Machine-readable classification of API misuse."""
    UNWRAP_ON_FAILURE = "UNWRAP_ON_FAILURE"
    EMPTY_ERRORS = "EMPTY_ERRORS"
    INVALID_MESSAGES = "INVALID_MESSAGES"
    UNSUPPORTED_ARITY = "UNSUPPORTED_ARITY"


class ValidationFault(Exception):
    """Base for programmer errors detected by safevalidation."""

    code: FaultCode

    def __init__(self, message: str, code: FaultCode) -> None:
        self.code = code
        super().__init__(message)


class UnwrapOnFailure(ValidationFault, RuntimeError):
    """unsafe_unwrap() called on a failed Validation."""

    def __init__(self, errors: Sequence[str]) -> None:
        self.errors: tuple[str, ...] = tuple(errors)
        super().__init__(
            f"Cannot unwrap a failed Validation: {'; '.join(self.errors)}",
            FaultCode.UNWRAP_ON_FAILURE,
        )


class EmptyErrors(ValidationFault, ValueError):
    """A failure was requested without any messages."""

    def __init__(self) -> None:
        super().__init__("A failed Validation needs at least one message", FaultCode.EMPTY_ERRORS)


class InvalidMessages(ValidationFault, ValueError):
    """Failure messages were not all strings."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"Failure messages must be strings: {detail}", FaultCode.INVALID_MESSAGES)


class UnsupportedArity(ValidationFault, TypeError):
    """lift() was given a function it cannot curry."""

    def __init__(self, arity: int | None, supported: Sequence[int]) -> None:
        self.arity = arity
        found = "unknown" if arity is None else str(arity)
        super().__init__(
            f"lift() supports arities {', '.join(map(str, supported))}; got {found}",
            FaultCode.UNSUPPORTED_ARITY,
        )

    @classmethod
    def uninspectable(cls, supported: Sequence[int]) -> Self:
        """Signature could not be read and no explicit arity was passed."""
        return cls(None, supported)
