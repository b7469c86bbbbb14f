"""Unit tests for CLICommandHandler.

Tests verify that CLI commands:
- Return the verifier's decision as a JSON-serializable dict
- Report collaborator failures as error results instead of raising
- Keep going through a batch when one username fails
"""

import json

import pytest

from userdetails.adapters.cli.commands import CLICommandHandler
from userdetails.core.verifier import AccessVerifier
from userdetails.tests.fakes import FakeDetailsCheckerPort, FakeErrorReporterPort


@pytest.fixture
def details_checker() -> FakeDetailsCheckerPort:
    """Create a fake checker that knows batman and robin."""
    checker = FakeDetailsCheckerPort(status_code=-1)
    checker.set_status_code(1, username="batman")
    checker.set_status_code(0, username="robin")
    return checker


@pytest.fixture
def error_reporter() -> FakeErrorReporterPort:
    """Create a fake error reporter."""
    return FakeErrorReporterPort()


@pytest.fixture
def handler(details_checker, error_reporter) -> CLICommandHandler:
    """Create a CLI handler around a real verifier."""
    return CLICommandHandler(
        AccessVerifier(details_checker=details_checker, error_reporter=error_reporter)
    )


def test_verify_admin(handler, error_reporter):
    """Admins verify with no message."""
    result = handler.verify_user("batman")
    assert result == {
        "status": "success",
        "operation": "verify",
        "username": "batman",
        "verified": True,
        "status_code": 1,
        "message": None,
    }
    assert error_reporter.report_call_count == 0


def test_verify_non_admin(handler, error_reporter):
    """Non-admins are denied and the message is reported and returned."""
    result = handler.verify_user("robin")
    assert result["status"] == "success"
    assert result["verified"] is False
    assert result["status_code"] == 0
    assert result["message"] == "You do not have admin rights to this system"
    assert error_reporter.reported_messages == [result["message"]]


def test_verify_unknown(handler):
    """Unknown users are denied with the not-recognised message."""
    result = handler.verify_user("joker")
    assert result["verified"] is False
    assert result["status_code"] == -1
    assert result["message"] == "User details not recognised"


def test_result_is_json_serializable(handler):
    """Results can be printed directly as JSON."""
    for username in ("batman", "robin", "joker"):
        json.dumps(handler.verify_user(username))


def test_checker_failure_returns_error(handler, details_checker):
    """A failing checker produces an error result."""
    details_checker.set_should_fail(True, "directory offline")
    result = handler.verify_user("batman")
    assert result == {
        "status": "error",
        "operation": "verify",
        "username": "batman",
        "message": "directory offline",
    }


def test_batch_continues_after_failure(handler, error_reporter):
    """One failing username does not stop the rest of the batch."""
    error_reporter.set_should_fail(True)
    results = handler.verify_users(["robin", "batman"])
    assert [r["status"] for r in results] == ["error", "success"]
    assert results[1]["verified"] is True


def test_non_integer_status_code_returns_error(handler, details_checker):
    """A checker answer that is not an int yields an error result for that user only."""
    details_checker.set_status_code(None, username="penguin")
    results = handler.verify_users(["penguin", "batman"])
    assert results[0]["status"] == "error"
    assert results[0]["username"] == "penguin"
    assert "verified" not in results[0]
    assert results[1]["status"] == "success"
    assert results[1]["verified"] is True


def test_batch_preserves_order(handler):
    """Results come back in the order requested."""
    results = handler.verify_users(["joker", "batman", "robin"])
    assert [r["username"] for r in results] == ["joker", "batman", "robin"]
