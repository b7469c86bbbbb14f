"""Domain models for user details verification.

All models in this module use only Python standard library types,
ensuring zero external dependencies in the core domain.
"""

from dataclasses import dataclass
from enum import IntEnum


class StatusCode(IntEnum):
    """Recognised answers from a details checker.

    Checkers may return plain ints; IntEnum members compare equal to them.
    Any other integer is an unrecognised code and is denied silently.
    """

    AUTHORISED_ADMIN = 1
    NOT_ADMIN = 0
    NOT_RECOGNISED = -1


NOT_ADMIN_MESSAGE = "You do not have admin rights to this system"
NOT_RECOGNISED_MESSAGE = "User details not recognised"


@dataclass(frozen=True)
class VerificationOutcome:
    """Result of a single verification, including what was reported."""

    username: str
    status_code: int
    verified: bool
    message: str | None = None  # None when nothing was reported

    def __post_init__(self) -> None:
        """Validate outcome invariants on creation."""
        if self.verified and self.message is not None:
            raise ValueError("a verified outcome cannot carry an error message")
