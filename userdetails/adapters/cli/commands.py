"""CLI command implementations for user details verification.

This adapter maps CLI input (one username per command) to AccessVerifier
operations. It handles CLI-specific formatting and error reporting.
"""

import logging
from typing import Any

from userdetails.core.verifier import AccessVerifier

logger = logging.getLogger(__name__)


class CLICommandHandler:
    """Handles CLI commands by delegating to AccessVerifier."""

    def __init__(self, verifier: AccessVerifier):
        """Initialize the CLI command handler.

        Args:
            verifier: AccessVerifier used to evaluate usernames.
        """
        self.verifier = verifier

    def verify_user(self, username: str) -> dict[str, Any]:
        """Verify a username via CLI.

        Args:
            username: Username to verify, passed through unmodified.

        Returns:
            Dictionary with status, the decision, and any reported message.
            A collaborator failure yields status "error" instead of raising,
            so a batch of usernames keeps going.
        """
        try:
            outcome = self.verifier.evaluate(username)
            return {
                "status": "success",
                "operation": "verify",
                "username": username,
                "verified": outcome.verified,
                "status_code": int(outcome.status_code),
                "message": outcome.message,
            }
        except Exception as e:
            logger.error(f"Failed to verify {username}: {e}", exc_info=True)
            return {
                "status": "error",
                "operation": "verify",
                "username": username,
                "message": str(e),
            }

    def verify_users(self, usernames: list[str]) -> list[dict[str, Any]]:
        """Verify several usernames in order, one result per username."""
        return [self.verify_user(username) for username in usernames]
