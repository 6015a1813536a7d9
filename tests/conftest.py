"""Shared test fixtures for typekit_cli.

Provides an in-memory stand-in for the Typekit API served through
:class:`httpx.MockTransport`, helpers to point the CLI commands at it, and
output-state management. These fixtures are automatically discovered by
pytest and available to all test modules without explicit imports.
"""

from __future__ import annotations

from typing import Any, Callable, Optional
from urllib.parse import parse_qs

import httpx
import pytest

from typekit_cli.client import TypekitClient
from typekit_cli.models import DEFAULT_BASE_URL, ClientConfig
from typekit_cli.output import OutputFormat, OutputManager, reset_output, set_output

VALID_TOKEN = "a946de0ea6cf7147233d783c2c520dab254c15e2"
API_PREFIX = "/api/v1/json"


# ---------------------------------------------------------------------------
# In-memory Typekit service
# ---------------------------------------------------------------------------


class FakeTypekit:
    """Minimal stateful imitation of the Typekit kit endpoints.

    Records every request in :attr:`calls` as ``(method, path)`` tuples,
    with ``path`` relative to the API root.
    """

    def __init__(self, families: Optional[dict[str, str]] = None) -> None:
        self.families = families if families is not None else {
            "droid-sans": "gkmg",
            "ubuntu": "pcpv",
        }
        self.kits: dict[str, dict[str, Any]] = {}
        self.calls: list[tuple[str, str]] = []
        self.forms: list[dict[str, str]] = []
        self._next_id = 1

    def add_kit(self, name: str, domains: list[str]) -> str:
        kit_id = f"kit{self._next_id:04d}"
        self._next_id += 1
        self.kits[kit_id] = {
            "id": kit_id,
            "name": name,
            "analytics": False,
            "domains": domains,
            "families": [],
        }
        return kit_id

    def handle(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path
        assert path.startswith(API_PREFIX), path
        path = path[len(API_PREFIX):]
        self.calls.append((request.method, path))

        if request.headers.get("X-Typekit-Token") != VALID_TOKEN:
            return httpx.Response(401, json={"errors": ["Not authorized"]})

        form: dict[str, str] = {}
        if request.method == "POST":
            form = {k: v[0] for k, v in parse_qs(request.content.decode()).items()}
            self.forms.append(form)

        parts = path.strip("/").split("/")
        if parts == ["kits"] and request.method == "GET":
            return httpx.Response(200, json={
                "kits": [
                    {"id": kit_id, "link": f"{API_PREFIX}/kits/{kit_id}"}
                    for kit_id in self.kits
                ]
            })
        if parts == ["kits"] and request.method == "POST":
            domains = form["domains"].split(",") if form.get("domains") else []
            kit_id = self.add_kit(form.get("name", ""), domains)
            return httpx.Response(200, json={"kit": self.kits[kit_id]})
        if len(parts) == 2 and parts[0] == "kits":
            kit = self.kits.get(parts[1])
            if kit is None:
                return httpx.Response(404, json={"errors": ["Not Found"]})
            if request.method == "DELETE":
                del self.kits[parts[1]]
                return httpx.Response(200, content=b"")
            return httpx.Response(200, json={"kit": kit})
        if len(parts) == 4 and parts[0] == "kits" and parts[2] == "families":
            kit = self.kits.get(parts[1])
            if kit is None or parts[3] not in self.families.values():
                return httpx.Response(404, json={"errors": ["Not Found"]})
            variations = form["variations"].split(",") if form.get("variations") else ["n4"]
            family = {"id": parts[3], "variations": variations, "subset": "default"}
            kit["families"].append(family)
            return httpx.Response(200, json={"family": family})
        if len(parts) == 2 and parts[0] == "families":
            family_id = self.families.get(parts[1])
            if family_id is None:
                return httpx.Response(404, json={"errors": ["Not Found"]})
            return httpx.Response(200, json={
                "family": {"id": family_id, "name": parts[1].title(), "slug": parts[1]}
            })
        return httpx.Response(404, json={"errors": ["Not Found"]})


@pytest.fixture
def fake_api() -> FakeTypekit:
    """A fresh in-memory Typekit service with two known families."""
    return FakeTypekit()


@pytest.fixture
def config() -> ClientConfig:
    """Client configuration carrying the token the fake service accepts."""
    return ClientConfig(token=VALID_TOKEN, base_url=DEFAULT_BASE_URL)


@pytest.fixture
def make_client(config: ClientConfig) -> Callable[..., TypekitClient]:
    """Factory for clients wired to an arbitrary request handler."""

    def _make(
        handler: Callable[[httpx.Request], httpx.Response],
        client_config: Optional[ClientConfig] = None,
    ) -> TypekitClient:
        return TypekitClient(client_config or config, transport=httpx.MockTransport(handler))

    return _make


@pytest.fixture
def patched_commands(monkeypatch: pytest.MonkeyPatch, fake_api: FakeTypekit) -> FakeTypekit:
    """Route both CLI commands' HTTP traffic to :func:`fake_api`."""

    def _client(client_config: ClientConfig) -> TypekitClient:
        return TypekitClient(client_config, transport=httpx.MockTransport(fake_api.handle))

    monkeypatch.setattr("typekit_cli.commands.browse.TypekitClient", _client)
    monkeypatch.setattr("typekit_cli.commands.kitgen.TypekitClient", _client)
    monkeypatch.delenv("TYPEKIT_TOKEN", raising=False)
    monkeypatch.delenv("TYPEKIT_API_URL", raising=False)
    monkeypatch.delenv("TYPEKIT_TIMEOUT", raising=False)
    return fake_api


# ---------------------------------------------------------------------------
# Output state
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_output_between_tests() -> None:
    """Reset the global OutputManager after every test.

    The OutputManager caches references to sys.stdout/sys.stderr at
    creation time. When Typer's CliRunner redirects those streams during
    a test and the test finishes, the cached references become stale.
    """
    yield
    reset_output()


@pytest.fixture
def plain_output() -> OutputManager:
    """Install an uncoloured JSON-format OutputManager with debug enabled."""
    output = OutputManager(format=OutputFormat.JSON, no_color=True, verbose=True)
    set_output(output)
    return output


@pytest.fixture
def cli_runner():
    """Typer CLI test runner."""
    from typer.testing import CliRunner

    return CliRunner()
