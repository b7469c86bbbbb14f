"""Port interfaces for user details verification.

These abstract base classes define the boundaries between core
decision logic and external adapters. Implementations live in the
adapters/ package; in-memory fakes for tests live in tests/fakes/.

Port Interface Categories:

1. **Driven Ports** (core calls out to adapters)
   - DetailsCheckerPort: Resolve a username to a status code
   - ErrorReporterPort: Show a denial message to the user

2. **Driving Ports** (adapters call into core)
   - VerificationPort: Entry point for verifying a username
"""

from abc import ABC, abstractmethod


# ============================================================================
# DRIVEN PORTS (Core calls out to adapters)
# ============================================================================


class DetailsCheckerPort(ABC):
    """Port for looking up what a username is allowed to do.

    Adapters implementing this port answer with one of the StatusCode
    values (1 authorised admin, 0 recognised but not an admin,
    -1 not recognised). Other integers are permitted and are treated
    by the core as a silent denial.
    """

    @abstractmethod
    def check(self, username: str) -> int:
        """Return the status code for a username.

        Args:
            username: Caller-supplied username, passed through unmodified.

        Returns:
            Integer status code.

        Raises:
            Exception: If the backing directory is unavailable.
                The core does not catch it.
        """


class ErrorReporterPort(ABC):
    """Port for reporting a denial message.

    Implementations decide how the message is surfaced (terminal,
    log file, UI banner). The message is a fixed string and must be
    shown as-is.
    """

    @abstractmethod
    def report(self, message: str) -> None:
        """Display or record a human-readable error message.

        Args:
            message: The fixed denial message.

        Raises:
            Exception: If the output channel fails. The core does not catch it.
        """


# ============================================================================
# DRIVING PORTS (Adapters call into core)
# ============================================================================


class VerificationPort(ABC):
    """Port for asking the core whether a user may access the system."""

    @abstractmethod
    def verify(self, username: str) -> bool:
        """Verify a username.

        Args:
            username: Caller-supplied username.

        Returns:
            True only if the user is an authorised admin.
        """
