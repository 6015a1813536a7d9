"""Pydantic models shared across typekit_cli.

The models fall into two groups:

**Response records** -- decoded from the JSON envelopes the Typekit API
returns: :class:`KitSummary`, :class:`KitList`, :class:`FamilyRef`,
:class:`KitDetail` and :class:`ErrorEnvelope`. Only the fields this client
reads are declared; everything else the server sends is preserved through
``extra="allow"`` so that printed output shows the full record.

**Input records** -- built from command-line arguments:
:class:`FamilySpec` and :class:`ResolvedFamily`.

Configuration lives in :class:`ClientConfig`, frozen after startup.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_BASE_URL = "https://typekit.com/api/v1/json"
DEFAULT_TIMEOUT = 30.0


# --- Configuration ---


class ClientConfig(BaseModel):
    """Settings handed to :class:`~typekit_cli.client.TypekitClient`.

    Built once by :func:`~typekit_cli.config.resolve_config` and never
    mutated afterwards.
    """

    model_config = ConfigDict(frozen=True)

    token: str = Field(description="Value sent in the X-Typekit-Token header")
    base_url: str = Field(default=DEFAULT_BASE_URL, description="API root URL")
    timeout: float = Field(default=DEFAULT_TIMEOUT, description="Request timeout in seconds")
    debug: bool = Field(default=False, description="Echo requests and responses to stderr")


# --- Response records ---


class _Record(BaseModel):
    """Base for API records; unknown keys are kept for display."""

    model_config = ConfigDict(extra="allow")

    def as_dict(self) -> dict[str, Any]:
        """Return the fields the server actually sent, in JSON-ready form."""
        return self.model_dump(mode="json", exclude_unset=True)


class KitSummary(_Record):
    """One entry of the ``GET /kits`` listing."""

    id: str
    link: Optional[str] = None


class KitList(_Record):
    """Envelope returned by ``GET /kits``."""

    kits: list[KitSummary] = Field(default_factory=list)


class FamilyRef(_Record):
    """A font family, either inside a kit detail or from a slug lookup.

    ``variations`` is a list of FVD strings inside a kit and a list of
    variation objects in a family lookup, so it is left untyped.
    """

    id: str
    name: Optional[str] = None
    slug: Optional[str] = None
    variations: list[Any] = Field(default_factory=list)
    subset: Optional[str] = None


class KitDetail(_Record):
    """The ``kit`` object returned by ``GET /kits/{id}``."""

    id: str
    name: Optional[str] = None
    analytics: Optional[bool] = None
    domains: list[str] = Field(default_factory=list)
    families: list[FamilyRef] = Field(default_factory=list)


class ErrorEnvelope(_Record):
    """Body of a failed response."""

    errors: list[str] = Field(default_factory=list)


# --- Input records ---


class FamilySpec(BaseModel):
    """A ``slug[:variations]`` family argument from the command line.

    Example::

        FamilySpec.parse("droid-sans:n4,i7")
        # FamilySpec(slug='droid-sans', variations='n4,i7')
    """

    slug: str
    variations: str = ""

    @classmethod
    def parse(cls, text: str) -> FamilySpec:
        """Split on ``:``; anything after a second ``:`` is dropped."""
        parts = text.split(":")
        return cls(slug=parts[0], variations=parts[1] if len(parts) > 1 else "")


class ResolvedFamily(BaseModel):
    """A family spec whose slug has been replaced by the API family id."""

    family_id: str
    variations: str = ""

    def __str__(self) -> str:
        return f"{self.family_id}:{self.variations}"
