"""Access verifier: implements VerificationPort.

Asks the details checker about a username, grants access only for an
authorised admin, and reports one of two fixed messages for the known
denial codes.
"""

import logging

from .models import (
    NOT_ADMIN_MESSAGE,
    NOT_RECOGNISED_MESSAGE,
    StatusCode,
    VerificationOutcome,
)
from .ports import DetailsCheckerPort, ErrorReporterPort, VerificationPort

logger = logging.getLogger(__name__)


class AccessVerifier(VerificationPort):
    """Core implementation of VerificationPort.

    Holds no state besides its two collaborators, so repeated calls
    with the same checker answer always behave the same way.
    """

    def __init__(
        self,
        details_checker: DetailsCheckerPort,
        error_reporter: ErrorReporterPort,
    ):
        """Initialize the verifier.

        Args:
            details_checker: DetailsCheckerPort used to resolve usernames.
            error_reporter: ErrorReporterPort used to surface denial messages.
        """
        self.details_checker = details_checker
        self.error_reporter = error_reporter

    def verify(self, username: str) -> bool:
        """Return True if the user is an authorised admin.

        Collaborator exceptions propagate unchanged.
        """
        return self.evaluate(username).verified

    def evaluate(self, username: str) -> VerificationOutcome:
        """Verify a username and return the full outcome.

        The details checker is called exactly once. The error reporter is
        called at most once, and only for the not-admin and not-recognised
        codes.

        Args:
            username: Caller-supplied username, passed through unmodified.

        Returns:
            VerificationOutcome describing the decision.
        """
        status_code = self.details_checker.check(username)

        if status_code == StatusCode.AUTHORISED_ADMIN:
            logger.info(
                f"Access granted to {username}",
                extra={"username": username, "status_code": status_code, "verified": True},
            )
            return VerificationOutcome(
                username=username, status_code=status_code, verified=True
            )

        if status_code == StatusCode.NOT_ADMIN:
            message = NOT_ADMIN_MESSAGE
        elif status_code == StatusCode.NOT_RECOGNISED:
            message = NOT_RECOGNISED_MESSAGE
        else:
            message = None

        if message is not None:
            self.error_reporter.report(message)
            logger.info(
                f"Access denied to {username}: {message}",
                extra={"username": username, "status_code": status_code, "verified": False},
            )
        else:
            logger.warning(
                f"Access denied to {username}: unrecognised status code {status_code!r}",
                extra={"username": username, "status_code": status_code, "verified": False},
            )

        return VerificationOutcome(
            username=username,
            status_code=status_code,
            verified=False,
            message=message,
        )
