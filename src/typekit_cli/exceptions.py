"""Exception hierarchy for typekit_cli.

All exceptions inherit from :class:`TypekitError`, which carries an
``exit_code`` attribute mapped to a constant from :mod:`typekit_cli.exit_codes`.
The error boundary in :mod:`typekit_cli.app` catches ``TypekitError``,
prints the message to stderr and exits with the matching code, while
unexpected exceptions produce a crash log and exit with
:data:`EXIT_GENERIC_FAILURE`.

Subclass hierarchy::

    TypekitError (exit 1)
    +-- UsageError           (exit 2)
    +-- FamilyNotFoundError  (exit 4)
    +-- ApiError             (exit 5)
    +-- TransportError       (exit 6)
    +-- ParseError           (exit 7)
    +-- ConfigError          (exit 1)

Nothing here is retried: every error aborts the running command.
"""

from __future__ import annotations

from typekit_cli.exit_codes import (
    EXIT_API_ERROR,
    EXIT_CONNECTION_ERROR,
    EXIT_GENERIC_FAILURE,
    EXIT_INVALID_USAGE,
    EXIT_NOT_FOUND,
    EXIT_PARSE_ERROR,
)


class TypekitError(Exception):
    """Base exception for all typekit_cli errors.

    Args:
        message: Human-readable error description printed to stderr.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class UsageError(TypekitError):
    """Raised for missing or invalid command-line input."""

    exit_code = EXIT_INVALID_USAGE


class ApiError(TypekitError):
    """Raised when the API answers with a status other than 200 or 302.

    The server reports failures as an ``errors`` list of strings. The
    first entry becomes the exception message; the full list is kept on
    :attr:`errors` for callers that want every reason.

    Args:
        errors: Error strings reported by the server. May be empty when
            the response carried no ``errors`` field.
        status_code: HTTP status of the failed response.
    """

    exit_code = EXIT_API_ERROR

    def __init__(self, errors: list[str], status_code: int | None = None):
        self.errors = list(errors)
        self.status_code = status_code
        if self.errors:
            message = self.errors[0]
        else:
            message = f"HTTP {status_code} with no error details"
        super().__init__(message)


class FamilyNotFoundError(TypekitError):
    """Raised when a family slug lookup does not yield a family id."""

    exit_code = EXIT_NOT_FOUND

    def __init__(self, slug: str):
        self.slug = slug
        super().__init__(f"Family {slug} not found")


class TransportError(TypekitError):
    """Raised on network-level failures (timeout, DNS resolution, connection refused)."""

    exit_code = EXIT_CONNECTION_ERROR


class ParseError(TypekitError):
    """Raised when a response body is not JSON or lacks the fields a call needs.

    Args:
        message: What went wrong.
        body: The raw response text, kept for diagnostics.
    """

    exit_code = EXIT_PARSE_ERROR

    def __init__(self, message: str, body: str = ""):
        self.body = body
        super().__init__(message)


class ConfigError(TypekitError):
    """Raised for invalid configuration values read from the environment."""

    exit_code = EXIT_GENERIC_FAILURE
