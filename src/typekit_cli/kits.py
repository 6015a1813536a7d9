"""Typed kit operations layered on :class:`~typekit_cli.client.TypekitClient`.

:class:`KitsAPI` has one method per remote action used by the command-line
tools. Each method issues its request(s) through the shared client and
decodes the envelope into the records from :mod:`typekit_cli.models`.

Multi-request helpers (:meth:`KitsAPI.resolve_families`,
:meth:`KitsAPI.add_kit_families`) run strictly in input order and stop at
the first failure. Nothing already done is undone: a kit created before a
failed family attachment stays on the account.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from urllib.parse import quote

from typekit_cli.client import TypekitClient
from typekit_cli.client.response import require, validate_record
from typekit_cli.exceptions import FamilyNotFoundError, ParseError
from typekit_cli.models import FamilyRef, FamilySpec, KitDetail, KitList, ResolvedFamily
from typekit_cli.output import debug


def _segment(value: str) -> str:
    return quote(value, safe="")


class KitsAPI:
    """Kit management calls against the Typekit API.

    Args:
        client: An entered :class:`~typekit_cli.client.TypekitClient`.

    Example::

        with TypekitClient(config) as client:
            api = KitsAPI(client)
            kit_id = api.create_kit("My Kit", ["example.com", "example.org"])
            api.add_family(kit_id, "gkmg", "n4,i7")
    """

    def __init__(self, client: TypekitClient) -> None:
        self._client = client

    # --- kits ---

    def list_kits(self) -> KitList:
        """Return the kits on the account (``GET /kits``).

        Raises:
            ParseError: If the envelope has no ``kits`` collection, or an
                entry in it is not a kit summary.
        """
        data = self._client.get("/kits")
        require(data, "kits")
        return validate_record(KitList, data, data)

    def get_kit(self, kit_id: str) -> KitDetail:
        """Return the full record of one kit (``GET /kits/{id}``)."""
        data = self._client.get(f"/kits/{_segment(kit_id)}")
        return validate_record(KitDetail, require(data, "kit"), data)

    def delete_kit(self, kit_id: str) -> None:
        """Delete a kit (``DELETE /kits/{id}``)."""
        self._client.delete(f"/kits/{_segment(kit_id)}")

    def create_kit(self, name: str, domains: Sequence[str]) -> str:
        """Create a kit and return its id.

        Args:
            name: Human readable kit name.
            domains: Hostnames the kit will be served on; sent comma-joined.

        Example::

            api.create_kit("My Kit", ["example.com", "example.org"])
            # -> "nld3fax"
        """
        data = self._client.post("/kits", {"name": name, "domains": ",".join(domains)})
        kit_id = require(data, "kit", "id")
        return str(kit_id)

    # --- families ---

    def add_family(self, kit_id: str, family_id: str, variations: str = "") -> None:
        """Attach one font family to a kit.

        An empty *variations* string leaves the field out so the service
        applies its default variations.
        """
        form = {"variations": variations} if variations else {}
        self._client.post(f"/kits/{_segment(kit_id)}/families/{_segment(family_id)}", form)

    def add_kit_families(self, kit_id: str, families: Iterable[ResolvedFamily]) -> None:
        """Attach *families* to a kit one at a time, in order."""
        for family in families:
            self.add_family(kit_id, family.family_id, family.variations)

    def get_family(self, slug: str) -> FamilyRef:
        """Look up a font family by slug (``GET /families/{slug}``).

        Raises:
            FamilyNotFoundError: If the envelope carries no ``family.id``.
            ParseError: If the family record has the wrong shape.
        """
        data = self._client.get(f"/families/{_segment(slug)}")
        try:
            require(data, "family", "id")
        except ParseError:
            raise FamilyNotFoundError(slug) from None
        return validate_record(FamilyRef, data["family"], data)

    def get_family_id(self, slug: str) -> str:
        """Convert a family slug into the opaque family id.

        Example::

            api.get_family_id("droid-sans")
            # -> "gkmg"
        """
        return self.get_family(slug).id

    def resolve_families(self, specs: Iterable[FamilySpec]) -> list[ResolvedFamily]:
        """Resolve every spec's slug to a family id, keeping its variations."""
        resolved: list[ResolvedFamily] = []
        for spec in specs:
            family_id = self.get_family_id(spec.slug)
            resolved.append(ResolvedFamily(family_id=family_id, variations=spec.variations))
        debug(f"processed families are {' '.join(str(f) for f in resolved)}")
        return resolved
