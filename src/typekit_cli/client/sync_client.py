"""Synchronous HTTP client for the Typekit API.

This module provides :class:`TypekitClient`, the blocking client used by
both command-line tools. It wraps :class:`httpx.Client` and layers on:

- **Token injection** -- ``X-Typekit-Token`` is attached to every request.
- **Form bodies** -- POST fields go to httpx as ``data=`` and are sent
  URL-form-encoded; an empty form sends no body.
- **Debug echo** -- with ``debug`` enabled, the request line, any POST
  body, and the response status and body are written to stderr.
- **Error mapping** -- non-200/302 answers raise
  :class:`~typekit_cli.exceptions.ApiError`, unparseable bodies raise
  :class:`~typekit_cli.exceptions.ParseError`, and network failures raise
  :class:`~typekit_cli.exceptions.TransportError`.

There is no retry: each call is attempted exactly once.
"""

from __future__ import annotations

from typing import Any, Optional

import httpx

from typekit_cli.client.response import decode_envelope
from typekit_cli.exceptions import TransportError, UsageError
from typekit_cli.models import ClientConfig
from typekit_cli.output import get_output

TOKEN_HEADER = "X-Typekit-Token"
ALLOWED_METHODS = ("GET", "POST", "DELETE")


class TypekitClient:
    """Synchronous HTTP client for Typekit API calls.

    Must be used as a context manager so that the underlying transport is
    opened and closed around the work.

    Args:
        config: Token, base URL, timeout and debug flag.
        transport: Optional :mod:`httpx` transport, used by tests to plug
            in :class:`httpx.MockTransport`.

    Example::

        with TypekitClient(config) as client:
            kits = client.get("/kits")
    """

    def __init__(
        self,
        config: ClientConfig,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._config = config
        self._transport = transport
        self._client: Optional[httpx.Client] = None

    @property
    def config(self) -> ClientConfig:
        return self._config

    # ------------------------------------------------------------------ #
    # Context manager
    # ------------------------------------------------------------------ #

    def __enter__(self) -> TypekitClient:
        # 302 is a success status for this API, so redirects are surfaced
        # rather than followed.
        self._client = httpx.Client(
            base_url=self._config.base_url,
            timeout=self._config.timeout,
            headers={TOKEN_HEADER: self._config.token},
            follow_redirects=False,
            transport=self._transport,
        )
        return self

    def __exit__(self, *args: object) -> None:
        if self._client:
            self._client.close()
            self._client = None

    # ------------------------------------------------------------------ #
    # Public request methods
    # ------------------------------------------------------------------ #

    def request(
        self,
        method: str,
        path: str,
        form: Optional[dict[str, str]] = None,
    ) -> dict[str, Any]:
        """Perform one API call and return the decoded JSON envelope.

        Args:
            method: ``GET``, ``POST`` or ``DELETE``.
            path: URL path appended to the base URL, e.g. ``/kits``.
            form: Fields sent URL-form-encoded. Only used for POST.

        Returns:
            The response body as a dict (``{}`` for an empty body).

        Raises:
            UsageError: For an unsupported method.
            ApiError: On any status other than 200 or 302.
            ParseError: If the body is not a JSON object.
            TransportError: On network / timeout errors.
        """
        assert self._client is not None, "Client not initialised -- use as context manager"

        method = method.upper()
        if method not in ALLOWED_METHODS:
            raise UsageError(f"Unsupported HTTP method: {method}")

        output = get_output()
        url = f"{self._config.base_url}{path}"
        output.debug(f"making {method} request to {url}")

        data = form if method == "POST" else None
        request = self._client.build_request(method, path, data=data)
        if method == "POST":
            output.debug(f"  post data is {request.content.decode()}")

        try:
            response = self._client.send(request)
        except httpx.TransportError as exc:
            raise TransportError(f"Request to {url} failed: {exc}") from exc

        output.debug(f"  response is {response.status_code} {response.text}")
        return decode_envelope(response)

    def get(self, path: str) -> dict[str, Any]:
        """Send a GET request."""
        return self.request("GET", path)

    def post(self, path: str, form: Optional[dict[str, str]] = None) -> dict[str, Any]:
        """Send a POST request with a form-encoded body."""
        return self.request("POST", path, form)

    def delete(self, path: str) -> dict[str, Any]:
        """Send a DELETE request."""
        return self.request("DELETE", path)
