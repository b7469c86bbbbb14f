"""Tests for adapter implementations.

Adapters are exercised directly against their ports and against the
real AccessVerifier.
"""
