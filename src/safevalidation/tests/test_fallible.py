"""Tests for from_fallible / fallible: the exception boundary."""

from __future__ import annotations

import logging

import pytest

from safevalidation import Failure, InvalidMessages, Success, clear_settings_cache, fallible, from_fallible


def _boom() -> int:
    raise ValueError("boom")


def test_from_fallible_success() -> None:
    assert from_fallible(lambda: 42) == Success(42)


def test_from_fallible_uses_exception_message() -> None:
    assert from_fallible(_boom) == Failure(["boom"])


def test_from_fallible_empty_message_falls_back_to_type_name() -> None:
    def raise_bare() -> int:
        raise KeyError

    assert from_fallible(raise_bare).errors() == ("KeyError",)


def test_from_fallible_projection() -> None:
    result = from_fallible(_boom, lambda e: f"custom: {type(e).__name__}")
    assert result.errors() == ("custom: ValueError",)


def test_from_fallible_projection_not_called_on_success() -> None:
    calls: list[Exception] = []
    from_fallible(lambda: 1, calls.append)  # type: ignore[arg-type]
    assert calls == []


def test_from_fallible_catches_programming_errors_too() -> None:
    """No way to tell domain errors from bugs: both are absorbed."""
    result = from_fallible(lambda: None.missing)  # type: ignore[attr-defined]
    assert result.is_failure()
    assert len(result.errors()) == 1


def test_from_fallible_lets_keyboard_interrupt_through() -> None:
    def interrupted() -> int:
        raise KeyboardInterrupt

    with pytest.raises(KeyboardInterrupt):
        from_fallible(interrupted)


def test_from_fallible_projection_must_return_a_message() -> None:
    with pytest.raises(InvalidMessages):
        from_fallible(lambda: 1 / 0, lambda e: None)  # type: ignore[arg-type,return-value]


def test_from_fallible_projection_errors_propagate() -> None:
    def bad_projection(e: Exception) -> str:
        raise RuntimeError("projection broke")

    with pytest.raises(RuntimeError, match="projection broke"):
        from_fallible(_boom, bad_projection)


@pytest.mark.parametrize(
    ("fmt", "expected"),
    [
        ("message", "boom"),
        ("qualified", "ValueError: boom"),
        ("repr", "ValueError('boom')"),
        ("QUALIFIED", "ValueError: boom"),
    ],
)
def test_capture_format_setting(monkeypatch: pytest.MonkeyPatch, fmt: str, expected: str) -> None:
    monkeypatch.setenv("SAFEVALIDATION_CAPTURE_FORMAT", fmt)
    clear_settings_cache()

    assert from_fallible(_boom).errors() == (expected,)


def test_projection_wins_over_capture_format(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SAFEVALIDATION_CAPTURE_FORMAT", "repr")
    clear_settings_cache()

    assert from_fallible(_boom, lambda _: "nope").errors() == ("nope",)


def test_capture_is_logged_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="safevalidation.result")

    from_fallible(_boom)

    records = [r for r in caplog.records if r.name == "safevalidation.result"]
    assert len(records) == 1
    assert records[0].levelno == logging.DEBUG
    assert "ValueError: boom" in records[0].getMessage()


def test_capture_logging_can_be_disabled(monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture) -> None:
    monkeypatch.setenv("SAFEVALIDATION_LOG_LOG_CAPTURES", "false")
    clear_settings_cache()
    caplog.set_level(logging.DEBUG, logger="safevalidation.result")

    from_fallible(_boom)

    assert not [r for r in caplog.records if r.name == "safevalidation.result"]


def test_success_is_not_logged(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="safevalidation.result")
    from_fallible(lambda: 1)
    assert not [r for r in caplog.records if r.name == "safevalidation.result"]


# ═════════════════════════════════════════════════════════════════════════════
# Decorator form
# ═════════════════════════════════════════════════════════════════════════════


def test_fallible_decorator() -> None:
    @fallible()
    def parse_port(raw: str) -> int:
        port = int(raw)
        if not 0 < port < 65536:
            raise ValueError(f"port out of range: {port}")
        return port

    assert parse_port("8080") == Success(8080)
    assert parse_port("70000").errors() == ("port out of range: 70000",)
    assert parse_port("x").is_failure()
    assert parse_port.__name__ == "parse_port"


def test_fallible_decorator_with_projection_and_kwargs() -> None:
    @fallible(lambda e: "division failed")
    def divide(a: int, *, by: int) -> float:
        return a / by

    assert divide(6, by=3) == Success(2.0)
    assert divide(1, by=0) == Failure("division failed")
