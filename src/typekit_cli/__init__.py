"""typekit_cli -- command-line clients for the Typekit kit management API.

The package ships two console scripts that share one HTTP client:

* ``typekit-browse`` lists kits, prints their details on request, and can
  delete kits.
* ``typekit-kitgen`` resolves font family slugs and creates a kit serving
  those families on the given domains.

Typical workflow::

    typekit-kitgen --token=$TOKEN -d example.com droid-sans:n4,i7
    typekit-browse --token=$TOKEN

Modules:
    app: Typer applications and console-script entry points.
    client: HTTP client wrapping :mod:`httpx`.
    kits: Typed kit operations layered on the client.
    models: Pydantic records for API responses and CLI inputs.
    config: Environment-aware configuration resolution.
    exceptions: Exception hierarchy with exit-code mapping.
    exit_codes: Numeric exit codes following clig.dev conventions.
    output: stdout/stderr formatting system with Rich support.
"""

__version__ = "0.1.0"
