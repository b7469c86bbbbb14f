"""Core domain logic for user details verification.

This package contains zero external dependencies and represents
the pure decision logic of the application. Collaborators are reached
only through the port interfaces in ports.py; concrete implementations
live in the adapters package.
"""

from .models import (
    NOT_ADMIN_MESSAGE,
    NOT_RECOGNISED_MESSAGE,
    StatusCode,
    VerificationOutcome,
)
from .verifier import AccessVerifier

__all__ = [
    "NOT_ADMIN_MESSAGE",
    "NOT_RECOGNISED_MESSAGE",
    "AccessVerifier",
    "StatusCode",
    "VerificationOutcome",
]
