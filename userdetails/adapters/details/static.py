"""Static details checker adapter.

Implements DetailsCheckerPort from two fixed sets of usernames, typically
taken from configuration. No credentials are checked; this is a directory
lookup only.
"""

import logging
from collections.abc import Iterable

from userdetails.core.models import StatusCode
from userdetails.core.ports import DetailsCheckerPort

logger = logging.getLogger(__name__)


class StaticDetailsChecker(DetailsCheckerPort):
    """Resolves usernames against configured admin and known-user sets.

    Matching is exact and case-sensitive.
    """

    def __init__(
        self,
        admin_users: Iterable[str] = (),
        known_users: Iterable[str] = (),
    ):
        """Initialize static details checker.

        Args:
            admin_users: Usernames that are authorised admins.
            known_users: Usernames that are recognised but not admins.

        Raises:
            ValueError: If a username appears in both sets.
        """
        self.admin_users = frozenset(admin_users)
        self.known_users = frozenset(known_users)

        overlap = self.admin_users & self.known_users
        if overlap:
            raise ValueError(
                f"users cannot be both admin and non-admin: {', '.join(sorted(overlap))}"
            )

    def check(self, username: str) -> int:
        """Return the status code for a username."""
        if username in self.admin_users:
            status = StatusCode.AUTHORISED_ADMIN
        elif username in self.known_users:
            status = StatusCode.NOT_ADMIN
        else:
            status = StatusCode.NOT_RECOGNISED

        logger.debug(
            f"Resolved {username} to {status.name}",
            extra={"username": username, "status_code": int(status)},
        )
        return int(status)
