"""Non-empty message sequence type backed by a pydantic TypeAdapter."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Annotated, TypeAlias

from pydantic import Field, StrictStr, TypeAdapter, ValidationError

from .errors import EmptyErrors, InvalidMessages

# StrictStr so ints or bytes are rejected instead of coerced into str
ErrorMessages: TypeAlias = Annotated[tuple[StrictStr, ...], Field(min_length=1)]

# Cached at module level, building an adapter is not free
_ErrorMessagesAdapter: TypeAdapter[tuple[str, ...]] = TypeAdapter(ErrorMessages)


def validate_messages(messages: Iterable[str]) -> tuple[str, ...]:
    """Freeze messages into a tuple, rejecting empty input and non-strings."""
    try:
        frozen = tuple(messages)
    except TypeError as e:
        raise InvalidMessages(f"expected an iterable of str, got {type(messages).__name__}") from e
    if not frozen:
        raise EmptyErrors()
    try:
        return _ErrorMessagesAdapter.validate_python(frozen)
    except ValidationError as e:
        raise InvalidMessages(str(e.errors()[0]["msg"])) from e
