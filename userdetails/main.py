"""Composition root for user details verification.

This module is the ONLY location that imports both core decision logic
and concrete adapter implementations. All wiring of dependencies
happens here, creating a clear entry point for the application.

Module Structure:
- Configuration loading via config module
- Adapter instantiation
- Core service initialization
- Dependency injection
- Entry point selection (usernames on the command line, or interactive)
"""

import json
import logging
import sys
from collections.abc import Sequence

from userdetails.adapters.cli.commands import CLICommandHandler
from userdetails.adapters.details.static import StaticDetailsChecker
from userdetails.adapters.reporting.log import LoggingErrorReporter
from userdetails.adapters.reporting.stream import StreamErrorReporter
from userdetails.config import Settings, load_settings
from userdetails.core.ports import DetailsCheckerPort, ErrorReporterPort
from userdetails.core.verifier import AccessVerifier


def _run_cli_interactive(cli_handler: CLICommandHandler) -> int:
    """Run interactive CLI loop.

    Reads one username per line and prints the result as JSON.

    Args:
        cli_handler: CLICommandHandler instance for executing commands.

    Returns:
        Exit code (always 0; denials are results, not failures).
    """
    logger = logging.getLogger(__name__)
    logger.info("Starting interactive CLI. Type a username to verify or 'exit' to quit.")

    while True:
        try:
            username = input("userdetails> ").strip()
        except EOFError:
            # Ctrl+D to exit
            logger.info("EOF received, exiting CLI")
            break

        if not username:
            continue

        if username.lower() == "exit":
            logger.info("Exiting CLI")
            break

        print(json.dumps(cli_handler.verify_user(username), indent=2))

    return 0


def configure_logging(log_level: str, log_format: str) -> None:
    """Configure application logging.

    Logs go to stderr so that stdout carries only command results.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Log format (json, text).
    """
    level = getattr(logging, log_level, logging.INFO)

    if log_format == "json":
        format_str = '{"time": "%(asctime)s", "level": "%(levelname)s", "message": "%(message)s"}'
    else:
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[
            logging.StreamHandler(sys.stderr),
        ],
    )


def build_verifier(settings: Settings) -> AccessVerifier:
    """Instantiate adapters from configuration and wire the verifier.

    Args:
        settings: Validated application settings.

    Returns:
        AccessVerifier wired to the configured collaborators.

    Raises:
        ValueError: If a configured backend is unknown.
    """
    logger = logging.getLogger(__name__)

    details_checker: DetailsCheckerPort
    if settings.details_backend == "static":
        details_checker = StaticDetailsChecker(
            admin_users=settings.admin_users,
            known_users=settings.known_users,
        )
        logger.info("Details checker: static")
    else:
        raise ValueError(f"Unknown details backend: {settings.details_backend}")

    error_reporter: ErrorReporterPort
    if settings.error_reporter_backend == "stream":
        error_reporter = StreamErrorReporter()
        logger.info("Error reporter: stream")
    elif settings.error_reporter_backend == "logging":
        error_reporter = LoggingErrorReporter()
        logger.info("Error reporter: logging")
    else:
        raise ValueError(f"Unknown error reporter backend: {settings.error_reporter_backend}")

    return AccessVerifier(
        details_checker=details_checker,
        error_reporter=error_reporter,
    )


def bootstrap(argv: Sequence[str], settings: Settings | None = None) -> int:
    """Load configuration, wire adapters, and run the requested verifications.

    Steps:
    1. Load configuration from environment (unless supplied)
    2. Configure logging
    3. Instantiate adapters and the verifier
    4. Verify usernames from argv, or start the interactive prompt

    Args:
        argv: Usernames to verify. Empty means interactive mode.
        settings: Pre-built settings, mainly for tests.

    Returns:
        Exit code: 0 if every username was verified, 1 otherwise.
    """
    if settings is None:
        settings = load_settings()

    configure_logging(settings.log_level, settings.log_format)
    logger = logging.getLogger(__name__)

    verifier = build_verifier(settings)
    cli_handler = CLICommandHandler(verifier)

    if not argv:
        return _run_cli_interactive(cli_handler)

    results = cli_handler.verify_users(list(argv))
    for result in results:
        print(json.dumps(result))

    denied = [r["username"] for r in results if not r.get("verified")]
    if denied:
        logger.info(f"{len(denied)} of {len(results)} users not verified")
        return 1
    return 0


def main(argv: Sequence[str] | None = None) -> None:
    """Application entry point.

    Exit codes:
        0: Every username verified (or interactive session ended)
        1: A username was denied, or a fatal bootstrap/runtime error
        130: Interrupted by user (SIGINT/KeyboardInterrupt)
    """
    logger = logging.getLogger(__name__)
    if argv is None:
        argv = sys.argv[1:]
    try:
        exit_code = bootstrap(argv)
    except KeyboardInterrupt:
        logger.warning("Shutdown requested by user (SIGINT)")
        sys.exit(130)
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
