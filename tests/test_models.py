"""Tests for the pydantic records in typekit_cli.models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from typekit_cli.models import (
    ClientConfig,
    FamilySpec,
    KitDetail,
    KitList,
    ResolvedFamily,
)


class TestFamilySpec:
    def test_slug_and_variations(self) -> None:
        spec = FamilySpec.parse("droid-sans:n4,i7")
        assert spec.slug == "droid-sans"
        assert spec.variations == "n4,i7"

    def test_slug_only(self) -> None:
        spec = FamilySpec.parse("ubuntu")
        assert spec.slug == "ubuntu"
        assert spec.variations == ""

    def test_trailing_colon_means_no_variations(self) -> None:
        assert FamilySpec.parse("ubuntu:") == FamilySpec(slug="ubuntu", variations="")

    def test_extra_sections_are_dropped(self) -> None:
        assert FamilySpec.parse("droid-sans:n4:x") == FamilySpec(slug="droid-sans", variations="n4")


class TestResolvedFamily:
    def test_renders_as_id_colon_variations(self) -> None:
        assert str(ResolvedFamily(family_id="gkmg", variations="n4")) == "gkmg:n4"

    def test_renders_trailing_colon_without_variations(self) -> None:
        assert str(ResolvedFamily(family_id="gkmg")) == "gkmg:"


class TestKitRecords:
    def test_list_keeps_unknown_fields(self) -> None:
        kits = KitList.model_validate({
            "kits": [{"id": "abc", "link": "/api/v1/json/kits/abc", "extra": 1}],
        })
        assert kits.kits[0].id == "abc"
        assert kits.as_dict() == {
            "kits": [{"id": "abc", "link": "/api/v1/json/kits/abc", "extra": 1}],
        }

    def test_detail_as_dict_omits_unsent_fields(self) -> None:
        detail = KitDetail.model_validate({"id": "abc", "name": "My Kit"})
        assert detail.as_dict() == {"id": "abc", "name": "My Kit"}
        assert detail.domains == []
        assert detail.families == []

    def test_detail_families_are_typed(self) -> None:
        detail = KitDetail.model_validate({
            "id": "abc",
            "domains": ["example.com"],
            "families": [{"id": "gkmg", "variations": ["n4"], "subset": "default"}],
        })
        assert detail.families[0].id == "gkmg"
        assert detail.families[0].variations == ["n4"]


class TestClientConfig:
    def test_defaults(self) -> None:
        config = ClientConfig(token="t")
        assert config.base_url == "https://typekit.com/api/v1/json"
        assert config.timeout == 30.0
        assert config.debug is False

    def test_frozen(self) -> None:
        config = ClientConfig(token="t")
        with pytest.raises(ValidationError):
            config.token = "other"
