"""Numeric process exit codes following `clig.dev <https://clig.dev/>`_ conventions.

Each constant maps to a specific error category and is referenced by the
corresponding :class:`~typekit_cli.exceptions.TypekitError` subclass.
Shell wrappers can inspect the exit code to tell a rejected token from a
network outage without parsing stderr.

Example::

    $ typekit-kitgen --token=bad droid-sans
    Error: Not authorized
    $ echo $?
    5   # EXIT_API_ERROR -- the API answered with an error status
"""

EXIT_SUCCESS = 0
"""The command completed successfully."""

EXIT_GENERIC_FAILURE = 1
"""An unclassified error occurred."""

EXIT_INVALID_USAGE = 2
"""The command was invoked with invalid arguments or missing required parameters."""

EXIT_NOT_FOUND = 4
"""A looked-up resource (font family) does not exist."""

EXIT_API_ERROR = 5
"""The API answered with a status other than 200 or 302."""

EXIT_CONNECTION_ERROR = 6
"""A network-level error occurred (timeout, DNS failure, connection refused)."""

EXIT_PARSE_ERROR = 7
"""The API response could not be decoded."""

EXIT_INTERRUPTED = 130
"""The user pressed Ctrl-C."""
