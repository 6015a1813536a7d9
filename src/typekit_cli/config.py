"""Configuration resolution with XDG paths and environment fallbacks.

The tools take almost everything from the command line; this module fills
the gaps from the environment and freezes the result into a
:class:`~typekit_cli.models.ClientConfig`:

* **Token** -- ``--token`` flag, else ``TYPEKIT_TOKEN``.
* **Base URL** -- ``TYPEKIT_API_URL``, else the public endpoint.
* **Timeout** -- ``TYPEKIT_TIMEOUT`` in seconds, else 30.

The only on-disk location used is the XDG data directory, which holds
crash logs written by :mod:`typekit_cli.app`.
"""

from __future__ import annotations

import os
import platform
from pathlib import Path
from typing import Optional

from typekit_cli.exceptions import ConfigError
from typekit_cli.models import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, ClientConfig

_APP_NAME = "typekit-cli"

ENV_TOKEN = "TYPEKIT_TOKEN"
ENV_BASE_URL = "TYPEKIT_API_URL"
ENV_TIMEOUT = "TYPEKIT_TIMEOUT"


# --- XDG path resolution ---


def _is_xdg_platform() -> bool:
    """Return True if the platform supports XDG Base Directory spec (Linux/FreeBSD)."""
    return platform.system() == "Linux" or platform.system().endswith("BSD")


def get_data_dir() -> Path:
    """Return the data directory (crash logs), creating it if necessary.

    On Linux/BSD: ``$XDG_DATA_HOME/typekit-cli/`` (default
    ``~/.local/share/typekit-cli/``). Elsewhere: ``~/.typekit-cli/``.
    """
    if _is_xdg_platform():
        env_value = os.environ.get("XDG_DATA_HOME", "")
        base = Path(env_value) if env_value else Path.home() / ".local" / "share"
        path = base / _APP_NAME
    else:
        path = Path.home() / f".{_APP_NAME}"
    path.mkdir(parents=True, exist_ok=True)
    return path


# --- Precedence resolution ---


def _resolve_timeout() -> float:
    raw = os.environ.get(ENV_TIMEOUT, "")
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        raise ConfigError(f"{ENV_TIMEOUT} must be a number of seconds, got: {raw}") from None
    if value <= 0:
        raise ConfigError(f"{ENV_TIMEOUT} must be positive, got: {raw}")
    return value


def resolve_token(cli_token: Optional[str] = None) -> str:
    """Pick the API token: CLI flag first, then ``TYPEKIT_TOKEN``.

    Returns an empty string when neither is set; the commands turn that
    into a usage error.
    """
    if cli_token:
        return cli_token
    return os.environ.get(ENV_TOKEN, "")


def resolve_config(cli_token: Optional[str] = None, debug: bool = False) -> ClientConfig:
    """Build the effective client configuration.

    Precedence (high to low):
        1. CLI flags (``cli_token``, ``debug``)
        2. Environment variables (``TYPEKIT_TOKEN``, ``TYPEKIT_API_URL``,
           ``TYPEKIT_TIMEOUT``)
        3. Defaults

    Raises:
        ConfigError: If ``TYPEKIT_TIMEOUT`` is not a positive number.
    """
    base_url = os.environ.get(ENV_BASE_URL, "") or DEFAULT_BASE_URL
    return ClientConfig(
        token=resolve_token(cli_token),
        base_url=base_url.rstrip("/"),
        timeout=_resolve_timeout(),
        debug=debug,
    )
