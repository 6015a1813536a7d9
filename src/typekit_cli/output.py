"""Terminal output for the kit tools, split between stdout and stderr.

Kit listings, kit records and the "Kit created" line are data and go to
stdout. Errors, the ``Deleted kit`` notice and the ``--debug`` trace are
diagnostics and go to stderr, so piping a command's output never picks up
the trace.

Kit records are printed as indented JSON. When stdout is a terminal and
colour is allowed they are highlighted with Rich; ``NO_COLOR`` (any value)
or ``TERM=dumb`` switches colour off everywhere.

Each command installs one :class:`OutputManager` with :func:`set_output`;
library code reaches it through :func:`get_output` or the module-level
:func:`print_data`, :func:`error` and :func:`debug` helpers.
"""

from __future__ import annotations

import json
import os
import sys
from enum import Enum
from typing import Any, Optional

from rich.console import Console
from rich.syntax import Syntax


class OutputFormat(str, Enum):
    """How kit records are rendered on stdout."""

    AUTO = "auto"
    JSON = "json"
    RICH = "rich"


class OutputManager:
    """Writes command data to stdout and diagnostics to stderr.

    Args:
        format: Record rendering. ``AUTO`` picks ``RICH`` for a colour
            terminal and ``JSON`` otherwise.
        no_color: Force plain, uncoloured output.
        verbose: Show ``[debug]`` lines (the ``--debug`` flag).
    """

    def __init__(
        self,
        format: OutputFormat = OutputFormat.AUTO,
        no_color: bool = False,
        verbose: bool = False,
    ) -> None:
        self._no_color = no_color or _should_disable_color()
        self._verbose = verbose

        if format == OutputFormat.AUTO:
            rich_ok = _is_tty() and not self._no_color
            format = OutputFormat.RICH if rich_ok else OutputFormat.JSON
        self._format = format

        self._stdout = Console(
            file=sys.stdout,
            no_color=self._no_color,
            force_terminal=(format == OutputFormat.RICH),
        )
        self._stderr = Console(file=sys.stderr, no_color=self._no_color, stderr=True)

    # --- stdout ---

    def print_json(self, data: Any) -> None:
        """Print a decoded kit record as indented JSON."""
        text = json.dumps(data, indent=2, ensure_ascii=False, default=str)
        if self._format == OutputFormat.RICH:
            self._stdout.print(Syntax(text, "json", theme="monokai", word_wrap=True))
        else:
            self.print_data(text)

    def print_data(self, text: str) -> None:
        print(text, file=sys.stdout, flush=True)

    # --- stderr ---

    def success(self, message: str) -> None:
        if self._no_color:
            print(message, file=sys.stderr, flush=True)
        else:
            self._stderr.print(f"[green]{message}[/green]")

    def error(self, message: str) -> None:
        """Print ``Error: <message>``, in bold red when colour is on."""
        if self._no_color:
            print(f"Error: {message}", file=sys.stderr, flush=True)
        else:
            self._stderr.print(f"[bold red]Error:[/bold red] {message}")

    def debug(self, message: str) -> None:
        """Print ``[debug] <message>`` when verbose.

        Response bodies pass through here untouched, so Rich markup and
        emoji codes are not interpreted and long lines are not wrapped.
        """
        if not self._verbose:
            return
        if self._no_color:
            print(f"[debug] {message}", file=sys.stderr, flush=True)
        else:
            self._stderr.print(
                f"[debug] {message}", style="dim", markup=False, emoji=False, soft_wrap=True
            )


def _is_tty() -> bool:
    return hasattr(sys.stdout, "isatty") and sys.stdout.isatty()


def _should_disable_color() -> bool:
    """True when ``NO_COLOR`` is set to anything or ``TERM`` is ``dumb``."""
    return os.environ.get("NO_COLOR") is not None or os.environ.get("TERM") == "dumb"


# --- Process-wide instance ---

_output: Optional[OutputManager] = None


def get_output() -> OutputManager:
    """Return the installed :class:`OutputManager`, creating a default one if needed."""
    global _output
    if _output is None:
        _output = OutputManager()
    return _output


def set_output(output: OutputManager) -> None:
    global _output
    _output = output


def reset_output() -> None:
    """Forget the installed manager; tests call this between runs."""
    global _output
    _output = None


def print_data(text: str) -> None:
    get_output().print_data(text)


def error(message: str) -> None:
    get_output().error(message)


def debug(message: str) -> None:
    get_output().debug(message)
