"""Kitgen command -- create a kit from font family slugs.

Backs the ``typekit-kitgen`` console script::

    typekit-kitgen --token=$TOKEN -d example.com -d example.org droid-sans:n4,i7 ubuntu

Each positional argument is ``slug[:variations]``. The pipeline fails fast:
slugs are resolved to family ids one at a time, then the kit is created,
then families are attached one at a time. A failure after the kit exists
leaves the kit in place.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional

import typer

from typekit_cli import __version__
from typekit_cli.client import TypekitClient
from typekit_cli.config import resolve_config
from typekit_cli.exceptions import UsageError
from typekit_cli.kits import KitsAPI
from typekit_cli.models import FamilySpec
from typekit_cli.output import OutputManager, debug, print_data, set_output

PROG_NAME = "typekit-kitgen"
DEFAULT_DOMAIN = "localhost"


def _version_callback(value: bool) -> None:
    """Print version and exit when --version is passed."""
    if value:
        typer.echo(f"{PROG_NAME} {__version__}")
        raise typer.Exit()


def apply_defaults(name: str, domains: Sequence[str]) -> tuple[str, list[str]]:
    """Fill in the kit name and domain list when the user left them out.

    Domains default to ``["localhost"]`` and the name to the first domain.
    """
    resolved_domains = list(domains) or [DEFAULT_DOMAIN]
    return name or resolved_domains[0], resolved_domains


def generate_kit(
    api: KitsAPI,
    families: Sequence[FamilySpec],
    name: str,
    domains: Sequence[str],
) -> str:
    """Resolve *families*, create the kit and attach the families.

    Returns:
        The id of the created kit.
    """
    resolved = api.resolve_families(families)
    kit_id = api.create_kit(name, domains)
    api.add_kit_families(kit_id, resolved)
    return kit_id


def kitgen_command(
    families: Optional[list[str]] = typer.Argument(
        None, help="Font families as slug[:variations], e.g. droid-sans:n4,i7.", show_default=False
    ),
    token: str = typer.Option(
        "", "--token", "-t", help="Authentication token to use.", show_default=False
    ),
    name: str = typer.Option(
        "", "--name", "-n", help="Name for generated kit.", show_default=False
    ),
    domains: Optional[list[str]] = typer.Option(
        None, "--domain", "-d", help="Domain(s) this kit will be used on.", show_default=False
    ),
    debug_flag: bool = typer.Option(
        False, "--debug", help="Enable extra debugging information."
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> str:
    """Create a Typekit kit serving the given font families.

    Prints ``Kit created; id is <id>`` on success.

    Raises:
        UsageError: If no token is given or no family is listed.
    """
    set_output(OutputManager(verbose=debug_flag))
    config = resolve_config(cli_token=token, debug=debug_flag)

    name, domain_list = apply_defaults(name, domains or [])
    if not config.token:
        raise UsageError("missing argument: --token")
    if not families:
        raise UsageError("missing family")
    specs = [FamilySpec.parse(family) for family in families]

    debug("parsed options")
    debug(f"  token is {config.token}")
    debug(f"  name is {name}")
    debug(f"  domains are {' '.join(domain_list)}")
    debug(f"  families are {' '.join(families)}")

    with TypekitClient(config) as client:
        kit_id = generate_kit(KitsAPI(client), specs, name, domain_list)

    print_data(f"Kit created; id is {kit_id}")
    return kit_id
