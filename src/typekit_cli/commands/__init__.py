"""Command callbacks for the typekit_cli console scripts.

* :mod:`~typekit_cli.commands.browse` -- list, delete and inspect kits
  interactively (``typekit-browse``).
* :mod:`~typekit_cli.commands.kitgen` -- create a kit from family slugs
  (``typekit-kitgen``).

Each module exports a plain callback function that
:mod:`typekit_cli.app` registers as the single command of its own
:class:`typer.Typer` application.
"""
