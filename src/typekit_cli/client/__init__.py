"""HTTP client module for typekit_cli.

Provides :class:`TypekitClient`, a blocking client backed by
:class:`httpx.Client` that injects the ``X-Typekit-Token`` header, echoes
traffic to stderr in debug mode, decodes JSON envelopes and maps failures
onto :mod:`typekit_cli.exceptions`.

Example::

    from typekit_cli.client import TypekitClient

    with TypekitClient(config) as client:
        data = client.get("/kits")
"""

from typekit_cli.client.sync_client import TypekitClient

__all__ = ["TypekitClient"]
