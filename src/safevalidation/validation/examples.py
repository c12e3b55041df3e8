"""Examples of error-accumulating validation.

Demonstrates:
- Independent field checks reported together (zip_with, lift)
- The same checks chained with bind, which stops at the first failure
- Absorbing a raising parser with from_fallible
"""

from __future__ import annotations

from dataclasses import dataclass

from .combinators import lift, traverse
from .result import Failure, Success, Validation, from_fallible


@dataclass(frozen=True, slots=True)
class User:
    username: str
    email: str


@dataclass(frozen=True, slots=True)
class Signup:
    username: str
    email: str
    age: int


# ═════════════════════════════════════════════════════════════════════════════
# Field validators
# ═════════════════════════════════════════════════════════════════════════════


def validate_username(name: str) -> Validation[str]:
    return Failure("Username is empty") if not name else Success(name)


def validate_email(email: str) -> Validation[str]:
    return Success(email) if "@" in email else Failure("Email must contain @-sign")


def validate_age(raw: str) -> Validation[int]:
    """Parse then range-check. Parsing and range are dependent, so bind."""
    return (
        from_fallible(lambda: int(raw), lambda _: f"Age must be a number, got {raw!r}")
        .bind(lambda age: Success(age) if 0 < age < 150 else Failure(f"Age out of range: {age}"))
    )


# ═════════════════════════════════════════════════════════════════════════════
# Composition
# ═════════════════════════════════════════════════════════════════════════════


def register_user(username: str, email: str) -> Validation[User]:
    """Accumulating path: every field is checked, all problems reported."""
    return validate_username(username).zip_with(validate_email(email), User)


def register_user_chained(username: str, email: str) -> Validation[User]:
    """Short-circuit path: the email is never looked at if the username failed."""
    return validate_username(username).bind(
        lambda _: validate_email(email),
        lambda name, mail: User(name, mail),
    )


def register_signup(username: str, email: str, age: str) -> Validation[Signup]:
    """Three independent fields through a lifted constructor."""
    return lift(Signup)(validate_username(username), validate_email(email), validate_age(age))


def validate_emails(emails: list[str]) -> Validation[list[str]]:
    """Bulk check, one message per bad address."""
    return traverse(emails, lambda e: validate_email(e).map_errors(lambda m: f"{e!r}: {m}"))
