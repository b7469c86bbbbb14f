"""Test suite for user details verification.

Organized into three categories:

1. core/: Unit tests for core decision logic
   - No external dependencies, fast execution
   - Uses in-memory fakes for ports

2. adapters/: Tests for adapter implementations
   - Validates adapter behavior and error handling

3. fakes/: Port implementations for testing
   - In-memory implementations of DetailsCheckerPort and ErrorReporterPort
   - Used by core unit tests
"""
