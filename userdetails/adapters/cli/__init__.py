"""Command-line interface adapter.

Maps CLI input to VerificationPort operations and formats results.
"""
