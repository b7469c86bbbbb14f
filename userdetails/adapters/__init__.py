"""External adapters for user details verification.

This package provides concrete implementations of the core port
interfaces and the surfaces that drive the core.

Adapter Organization:

- details/: Adapters that resolve usernames to status codes
- reporting/: Adapters that surface denial messages (stdout, logging)
- cli/: Command-line verification commands
"""
