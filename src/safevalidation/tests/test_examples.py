"""Tests for the username/email form scenario."""

from __future__ import annotations

from safevalidation import Failure, Success
from safevalidation.validation.examples import (
    Signup,
    User,
    register_signup,
    register_user,
    register_user_chained,
    validate_age,
    validate_email,
    validate_emails,
    validate_username,
)


def test_field_validators() -> None:
    assert validate_username("") == Failure(["Username is empty"])
    assert validate_username("ada") == Success("ada")
    assert validate_email("x") == Failure(["Email must contain @-sign"])
    assert validate_email("ada@example.org") == Success("ada@example.org")


def test_accumulating_path_reports_both_fields() -> None:
    assert register_user("", "x") == Failure(["Username is empty", "Email must contain @-sign"])


def test_chained_path_stops_at_username() -> None:
    assert register_user_chained("", "x") == Failure(["Username is empty"])


def test_both_paths_agree_on_valid_input() -> None:
    expected = Success(User("ada", "ada@example.org"))

    assert register_user("ada", "ada@example.org") == expected
    assert register_user_chained("ada", "ada@example.org") == expected


def test_chained_path_reports_email_after_valid_username() -> None:
    assert register_user_chained("ada", "x") == Failure(["Email must contain @-sign"])


def test_validate_age() -> None:
    assert validate_age("36") == Success(36)
    assert validate_age("old") == Failure("Age must be a number, got 'old'")
    assert validate_age("200") == Failure("Age out of range: 200")


def test_register_signup_lifts_three_fields() -> None:
    assert register_signup("ada", "ada@example.org", "36") == Success(Signup("ada", "ada@example.org", 36))
    assert register_signup("", "x", "old").errors() == (
        "Username is empty",
        "Email must contain @-sign",
        "Age must be a number, got 'old'",
    )


def test_validate_emails_prefixes_each_message() -> None:
    assert validate_emails(["a@b", "c@d"]) == Success(["a@b", "c@d"])
    assert validate_emails(["a@b", "nope", "bad"]).errors() == (
        "'nope': Email must contain @-sign",
        "'bad': Email must contain @-sign",
    )
