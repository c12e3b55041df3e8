"""Error-accumulating validation.

Provides a Validation type holding either a value or every error message
collected from independent checks:
- Functor/Monad: map, bind (short-circuits on the first failure)
- Applicative: apply, zip_with and friends (accumulate all errors)
- lift: plain 2-4 argument functions over Validations
- from_fallible: the boundary where exceptions become messages

Example:
    >>> from safevalidation.validation import Failure, Success, Validation, lift
    >>>
    >>> def positive(n: int) -> Validation[int]:
    ...     return Success(n) if n > 0 else Failure(f"{n} is not positive")
    >>>
    >>> area = lift(lambda w, h: w * h)
    >>> area(positive(3), positive(4))
    Success(12)
    >>> area(positive(-1), positive(0)).errors()
    ('-1 is not positive', '0 is not positive')
"""

from .combinators import (
    apply,
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
from .result import Failure, Success, Validation, fallible, from_fallible

__all__ = [
    # Core type
    "Validation",
    # Constructors
    "Success",
    "Failure",
    "from_fallible",
    "fallible",
    # Applicative / zip
    "apply",
    "zip_with",
    "zip",
    "zip_left",
    "zip_right",
    "zip_with3",
    "zip3",
    # Lift
    "lift",
    # Collection operations
    "sequence",
    "traverse",
]
