"""Fake implementations of core ports for testing.

These in-memory implementations allow core decision logic to be tested
without real collaborators:

- FakeDetailsCheckerPort: Canned status codes, captured lookups
- FakeErrorReporterPort: Captured messages for assertion
"""

from .details import FakeDetailsCheckerPort
from .reporting import FakeErrorReporterPort

__all__ = [
    "FakeDetailsCheckerPort",
    "FakeErrorReporterPort",
]
