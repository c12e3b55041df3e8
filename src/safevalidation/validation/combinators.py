"""Free-function combinators over Validation.

Function forms of the applicative methods, the 3-ary zips, lift, and the
homogeneous collection folds. All of them accumulate errors left to right.
"""

from __future__ import annotations

import inspect
from collections.abc import Iterable
from functools import wraps
from typing import Any, Callable, TypeVar

from ..foundation.errors import UnsupportedArity
from .result import Failure, Success, Validation

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")
R = TypeVar("R")

LIFT_ARITIES: tuple[int, ...] = (2, 3, 4)


# ═══════════════════════════════════════════════════════════════════════════════
# Applicative / Zip
# ═══════════════════════════════════════════════════════════════════════════════


def apply(fn: Validation[Callable[[T], R]], argument: Validation[T]) -> Validation[R]:
    """apply(wrapped_fn, wrapped_arg). Function's errors come before the argument's."""
    return fn.apply(argument)


def zip_with(first: Validation[T], second: Validation[U], combiner: Callable[[T, U], R]) -> Validation[R]:
    return first.zip_with(second, combiner)


def zip(first: Validation[T], second: Validation[U]) -> Validation[tuple[T, U]]:  # noqa: A001
    return first.zip(second)


def zip_left(first: Validation[T], second: Validation[U]) -> Validation[T]:
    return first.zip_left(second)


def zip_right(first: Validation[T], second: Validation[U]) -> Validation[U]:
    return first.zip_right(second)


def zip_with3(
    first: Validation[T],
    second: Validation[U],
    third: Validation[V],
    combiner: Callable[[T, U, V], R],
) -> Validation[R]:
    """Zip the first two into a pair, then zip the pair with the third.

    Errors come out in operand order: first, second, third.
    """
    return first.zip(second).zip_with(third, lambda pair, c: combiner(pair[0], pair[1], c))


def zip3(first: Validation[T], second: Validation[U], third: Validation[V]) -> Validation[tuple[T, U, V]]:
    return zip_with3(first, second, third, lambda a, b, c: (a, b, c))


# ═══════════════════════════════════════════════════════════════════════════════
# Lift
# ═══════════════════════════════════════════════════════════════════════════════


def _required_positional(fn: Callable[..., Any]) -> int | None:
    try:
        params = inspect.signature(fn).parameters.values()
    except (TypeError, ValueError):
        return None
    return sum(
        1 for p in params
        if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD) and p.default is p.empty
    )


def _curry(fn: Callable[..., R], arity: int, bound: tuple[Any, ...] = ()) -> Callable[[Any], Any]:
    if arity == 1:
        return lambda x: fn(*bound, x)
    return lambda x: _curry(fn, arity - 1, (*bound, x))


def lift(fn: Callable[..., R], arity: int | None = None) -> Callable[..., Validation[R]]:
    """Turn a plain n-ary function into one over n Validations (n in 2..4).

    The function is curried, mapped over the first argument, then each
    remaining argument is applied in order, so errors accumulate left to
    right exactly as chained apply() calls would.

    Raises:
        UnsupportedArity: arity outside 2..4, or not inspectable and not given

    Example:
        >>> add = lift(lambda a, b: a + b)
        >>> add(Success(2), Success(3))
        Success(5)
        >>> add(Failure("bad a"), Failure("bad b"))
        Failure(('bad a', 'bad b'))
    """
    n = arity if arity is not None else _required_positional(fn)
    if n is None:
        raise UnsupportedArity.uninspectable(LIFT_ARITIES)
    if n not in LIFT_ARITIES:
        raise UnsupportedArity(n, LIFT_ARITIES)
    curried = _curry(fn, n)

    # Classes (dataclasses) carry a __dict__ that must not be copied onto the wrapper
    @wraps(fn, assigned=("__module__", "__name__", "__qualname__", "__doc__"), updated=())
    def lifted(*args: Validation[Any]) -> Validation[R]:
        if len(args) != n:
            raise TypeError(f"{getattr(fn, '__name__', 'lifted function')} expects {n} validations, got {len(args)}")
        acc = args[0].map(curried)
        for arg in args[1:]:
            acc = acc.apply(arg)
        return acc

    return lifted


# ═══════════════════════════════════════════════════════════════════════════════
# Collection Operations
# ═══════════════════════════════════════════════════════════════════════════════


def sequence(validations: Iterable[Validation[T]]) -> Validation[list[T]]:
    """Iterable[Validation[T]] → Validation[list[T]], collecting ALL errors in order."""
    values: list[T] = []
    errors: list[str] = []
    for v in validations:
        if v.is_failure():
            errors.extend(v.errors())
        elif not errors:
            values.append(v.unsafe_unwrap())
    return Failure(errors) if errors else Success(values)


def traverse(items: Iterable[T], validator: Callable[[T], Validation[U]]) -> Validation[list[U]]:
    """Validate every item, collecting all errors (not fail-fast)."""
    return sequence(validator(item) for item in items)
