"""User details verification.

Decides whether a user may access the system by consulting an injected
details checker and reporting denials through an injected error reporter.
"""
