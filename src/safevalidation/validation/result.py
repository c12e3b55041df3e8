"""Validation container: a success value or a non-empty list of error messages.

Unlike a plain Result, a failed Validation holds *every* message gathered so
far, so independent checks (form fields, config keys) can all report at once.

Two ways to compose:
- Sequential: map, bind. Short-circuits on the first failure.
- Independent: apply, zip_with, zip, zip_left, zip_right. Evaluates both
  operands and concatenates their messages when both fail.

Example:
    >>> age = Success(42).map(lambda x: x + 1)
    >>> age.unwrap(0)
    43
    >>> Failure("too young").zip(Failure("no name")).errors()
    ('too young', 'no name')
"""

from __future__ import annotations

from collections.abc import Iterable
from functools import wraps
from typing import (
    TYPE_CHECKING,
    Callable,
    Generic,
    ParamSpec,
    TypeVar,
    overload,
)

from ..foundation.config import get_settings
from ..foundation.errors import UnwrapOnFailure, validate_messages
from ..foundation.log import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterator

T = TypeVar("T")  # Success type
U = TypeVar("U")  # Mapped success type
V = TypeVar("V")  # Second operand / intermediate type
R = TypeVar("R")  # Combined result type
P = ParamSpec("P")

logger = get_logger("result")

# Shared by every success, errors() on a success is always this tuple
_NO_ERRORS: tuple[str, ...] = ()


class Validation(Generic[T]):
    """Either Success(value) or Failure(messages), never both.

    The state is decided by the message tuple: empty means success. Failures
    are built only through Failure()/validate_messages, so an empty failure
    cannot exist.

    Examples:
        >>> Success(5).bind(lambda x: Success(x * 2) if x > 0 else Failure("neg"))
        Success(10)
        >>> Failure(["a", "b"]).map(lambda x: x * 2)
        Failure(('a', 'b'))

    Notes:
        - Uses __slots__, instances are immutable
        - Every combinator returns a new Validation
    """

    __slots__ = ("_value", "_errors")
    __match_args__ = ("value", "error_list")

    def __init__(self, value: T | None, errors: tuple[str, ...]) -> None:
        """Private constructor. Use Success() or Failure() instead."""
        self._value = value
        self._errors = errors

    # ─── State ─────────────────────────────────────────────────────────

    def is_success(self) -> bool:
        return not self._errors

    def is_failure(self) -> bool:
        return bool(self._errors)

    def errors(self) -> tuple[str, ...]:
        """Accumulated messages, empty on success."""
        return self._errors

    @property
    def value(self) -> T | None:
        """Raw success value, None on failure. Prefer unwrap()/match()."""
        return None if self._errors else self._value

    @property
    def error_list(self) -> tuple[str, ...]:
        return self._errors

    # ─── Extraction ────────────────────────────────────────────────────

    def unsafe_unwrap(self) -> T:
        """Success value. Raises UnwrapOnFailure when called on a failure.

        The raise marks a bug in the caller (it did not check the state), so
        nothing in this package catches it.
        """
        if self._errors:
            raise UnwrapOnFailure(self._errors)
        return self._value  # type: ignore[return-value]

    def unwrap(self, default: T) -> T:
        """Success value or default. Never raises."""
        return default if self._errors else self._value  # type: ignore[return-value]

    def unwrap_or_else(self, fallback: Callable[[tuple[str, ...]], T]) -> T:
        """Success value or fallback(errors)."""
        return fallback(self._errors) if self._errors else self._value  # type: ignore[return-value]

    def match(self, on_success: Callable[[T], U], on_failure: Callable[[tuple[str, ...]], U]) -> U:
        """Call exactly one of the callbacks depending on state."""
        if self._errors:
            return on_failure(self._errors)
        return on_success(self._value)  # type: ignore[arg-type]

    # ─── Functor / Monad ───────────────────────────────────────────────

    def map(self, projection: Callable[[T], U]) -> Validation[U]:
        """Apply projection to the success value; failures pass through as-is.

        Signature: Validation[T] → (T → U) → Validation[U]
        Exceptions from projection propagate.
        """
        if self._errors:
            return Validation(None, self._errors)
        return Validation(projection(self._value), _NO_ERRORS)  # type: ignore[arg-type]

    def map_errors(self, projection: Callable[[str], str]) -> Validation[T]:
        """Rewrite every message, e.g. to prefix a field name. Success passes through."""
        if not self._errors:
            return self
        return Validation(None, validate_messages(projection(m) for m in self._errors))

    @overload
    def bind(self, selector: Callable[[T], Validation[U]]) -> Validation[U]: ...

    @overload
    def bind(
        self,
        selector: Callable[[T], Validation[V]],
        result_selector: Callable[[T, V], R],
    ) -> Validation[R]: ...

    def bind(
        self,
        selector: Callable[[T], Validation],
        result_selector: Callable[[T, V], R] | None = None,
    ) -> Validation:
        """Monadic bind (>>=). Sequence a step that may itself fail.

        On failure, selector is never called and the errors carry over. On
        success, selector(value) is returned untouched. Only the first failure
        in a bind chain survives.

        With result_selector, the intermediate value and the source value are
        combined: result_selector(value, intermediate). A failed intermediate
        yields only its own errors (the source had already succeeded).

        Example:
            >>> Success(2).bind(lambda x: Success(x * 10), lambda x, y: (x, y))
            Success((2, 20))
        """
        if self._errors:
            return Validation(None, self._errors)
        intermediate = selector(self._value)  # type: ignore[arg-type]
        if result_selector is None:
            return intermediate
        if intermediate._errors:
            return Validation(None, intermediate._errors)
        return Validation(result_selector(self._value, intermediate._value), _NO_ERRORS)  # type: ignore[arg-type]

    flat_map = bind

    # ─── Applicative / Zip ─────────────────────────────────────────────

    def apply(self: Validation[Callable[[U], R]], argument: Validation[U]) -> Validation[R]:
        """Apply the wrapped function to a wrapped argument (Applicative).

        Both operands are inspected; when both failed, the function's messages
        come first, then the argument's.
        """
        if self._errors and argument._errors:
            return Validation(None, self._errors + argument._errors)
        if self._errors:
            return Validation(None, self._errors)
        if argument._errors:
            return Validation(None, argument._errors)
        return Validation(self._value(argument._value), _NO_ERRORS)  # type: ignore[misc,arg-type]

    def zip_with(self, other: Validation[V], combiner: Callable[[T, V], R]) -> Validation[R]:
        """Combine two independent validations, accumulating both sides' errors.

        Same case split as apply, written out to skip the intermediate
        wrapped function. combiner is only called when both succeeded.
        """
        if self._errors and other._errors:
            return Validation(None, self._errors + other._errors)
        if self._errors:
            return Validation(None, self._errors)
        if other._errors:
            return Validation(None, other._errors)
        return Validation(combiner(self._value, other._value), _NO_ERRORS)  # type: ignore[arg-type]

    def zip(self, other: Validation[V]) -> Validation[tuple[T, V]]:
        """Pair both values."""
        return self.zip_with(other, lambda a, b: (a, b))

    def zip_left(self, other: Validation[V]) -> Validation[T]:
        """Keep this value, but still report other's errors."""
        return self.zip_with(other, lambda a, _: a)

    def zip_right(self, other: Validation[V]) -> Validation[V]:
        """Keep other's value, but still report this side's errors."""
        return self.zip_with(other, lambda _, b: b)

    # ─── Dunder Methods ────────────────────────────────────────────────

    def __bool__(self) -> bool:
        return not self._errors

    def __iter__(self) -> Iterator[T]:
        """Iterate: yields value if success, nothing if failure."""
        if not self._errors:
            yield self._value  # type: ignore[misc]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Validation):
            return NotImplemented
        if self._errors or other._errors:
            return self._errors == other._errors
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._errors) if self._errors else hash((True, self._value))

    def __repr__(self) -> str:
        return f"Failure({self._errors!r})" if self._errors else f"Success({self._value!r})"

    __str__ = __repr__


# ═══════════════════════════════════════════════════════════════════════════════
# Constructors
# ═══════════════════════════════════════════════════════════════════════════════


def Success(value: T) -> Validation[T]:  # noqa: N802
    """Construct the success variant."""
    return Validation(value, _NO_ERRORS)


def Failure(messages: str | Iterable[str]) -> Validation[T]:  # noqa: N802
    """Construct the failure variant from one message or several.

    A lone string is one message, not a sequence of characters. Raises
    EmptyErrors for an empty iterable and InvalidMessages for non-strings.
    """
    if isinstance(messages, str):
        return Validation(None, (messages,))
    return Validation(None, validate_messages(messages))


def _describe(exc: Exception) -> str:
    match get_settings().capture.format:
        case "qualified":
            return f"{type(exc).__name__}: {exc}"
        case "repr":
            return repr(exc)
        case _:
            # ValueError() renders as "", keep the message informative
            return str(exc) or type(exc).__name__


def from_fallible(
    fn: Callable[[], T],
    projection: Callable[[Exception], str] | None = None,
) -> Validation[T]:
    """Run fn, turning any raised Exception into a one-message failure.

    This is the one place where exceptions enter the Validation world. The
    message is projection(exc) when given, else the exception rendered per
    the capture.format setting.

    Every Exception subclass is absorbed, including ones that signal bugs
    (TypeError, AttributeError). KeyboardInterrupt and SystemExit propagate.
    Exceptions raised by projection itself propagate too.

    Example:
        >>> from_fallible(lambda: int("42"))
        Success(42)
        >>> from_fallible(lambda: int("x"), lambda e: "not a number")
        Failure(('not a number',))
    """
    try:
        return Validation(fn(), _NO_ERRORS)
    except Exception as e:
        if get_settings().logging.log_captures:
            logger.debug("from_fallible captured %s: %s", type(e).__name__, e)
        return Failure(projection(e) if projection is not None else _describe(e))


def fallible(
    projection: Callable[[Exception], str] | None = None,
) -> Callable[[Callable[P, T]], Callable[P, Validation[T]]]:
    """Decorator form of from_fallible for functions that take arguments.

    Example:
        >>> @fallible(lambda e: "bad port")
        ... def parse_port(raw: str) -> int:
        ...     return int(raw)
        >>> parse_port("x")
        Failure(('bad port',))
    """
    def decorator(fn: Callable[P, T]) -> Callable[P, Validation[T]]:
        @wraps(fn)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> Validation[T]:
            return from_fallible(lambda: fn(*args, **kwargs), projection)
        return wrapper
    return decorator
