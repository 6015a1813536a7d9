"""Typer applications and console-script entry points for typekit_cli.

Two single-command Typer applications live here:

* :data:`browse_app` -- runs :func:`~typekit_cli.commands.browse.browse_command`.
* :data:`kitgen_app` -- runs :func:`~typekit_cli.commands.kitgen.kitgen_command`.

:func:`browse_main` and :func:`kitgen_main` are the console-script entry
points declared in ``pyproject.toml``. Both go through :func:`_run`, the
single error boundary: :class:`~typekit_cli.exceptions.TypekitError` is
printed to stderr and mapped to its exit code, anything else is written to
a crash log under the data directory.

See Also:
    :mod:`typekit_cli.output`: Output manager installed by each command.
"""

from __future__ import annotations

import signal
import sys
import traceback
from datetime import datetime
from typing import Any

import typer

from typekit_cli.commands.browse import browse_command
from typekit_cli.commands.kitgen import kitgen_command
from typekit_cli.exit_codes import EXIT_GENERIC_FAILURE, EXIT_INTERRUPTED

_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

browse_app = typer.Typer(
    name="typekit-browse",
    help="Fetch information about your Typekit kits.",
    add_completion=False,
    context_settings=_CONTEXT_SETTINGS,
)
browse_app.command(context_settings=_CONTEXT_SETTINGS)(browse_command)

kitgen_app = typer.Typer(
    name="typekit-kitgen",
    help="Create Typekit kits from font family slugs.",
    add_completion=False,
    context_settings=_CONTEXT_SETTINGS,
)
kitgen_app.command(context_settings=_CONTEXT_SETTINGS)(kitgen_command)


def _setup_signal_handlers() -> None:
    """Install a SIGINT handler so Ctrl-C exits cleanly."""

    def _handler(signum: int, frame: Any) -> None:  # noqa: ANN401
        sys.stderr.write("\nCancelled.\n")
        sys.exit(EXIT_INTERRUPTED)

    signal.signal(signal.SIGINT, _handler)


def _write_crash_log(exc: Exception) -> str:
    """Write a crash traceback to disk and return the log file path.

    Args:
        exc: The unhandled exception to log.

    Returns:
        Absolute path to the written crash log file.
    """
    from typekit_cli.config import get_data_dir

    logs_dir = get_data_dir() / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d-%H%M%S")
    log_path = logs_dir / f"crash-{timestamp}.log"
    log_path.write_text(
        "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    )
    return str(log_path)


def _run(app: typer.Typer) -> None:
    """Invoke *app* and translate errors into exit codes.

    Raises:
        SystemExit: Always raised (either by Typer or explicitly).
    """
    _setup_signal_handlers()
    try:
        app()
    except SystemExit:
        raise
    except KeyboardInterrupt:
        sys.stderr.write("\nCancelled.\n")
        sys.exit(EXIT_INTERRUPTED)
    except Exception as exc:
        from typekit_cli.exceptions import TypekitError
        from typekit_cli.output import error

        if isinstance(exc, TypekitError):
            error(str(exc))
            sys.exit(exc.exit_code)
        else:
            log_path = _write_crash_log(exc)
            error(f"Unexpected error. Debug log: {log_path}")
            sys.exit(EXIT_GENERIC_FAILURE)


def browse_main() -> None:
    """Entry point for the ``typekit-browse`` console script."""
    _run(browse_app)


def kitgen_main() -> None:
    """Entry point for the ``typekit-kitgen`` console script."""
    _run(kitgen_app)
