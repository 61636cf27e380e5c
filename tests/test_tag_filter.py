"""
tests/test_tag_filter.py
------------------------
Unit tests for conventions/tag_filter.py.
Run with: python -m pytest tests/
"""
from __future__ import annotations

import pytest

from conventions.classifier import has_tags
from conventions.tag_filter import collect_tag_declarations, matches_tags
from models.markers import TagBehavior, tags


@tags("prod", "eu", behavior=TagBehavior.REQUIRE_ALL)
class ProdEu:
    pass


@tags("prod", "staging", behavior=TagBehavior.REQUIRE_ANY)
class ProdOrStaging:
    pass


class Untagged:
    pass


@tags("us")
@tags("prod")
class SplitAllDeclarations:
    pass


@tags("eu", behavior=TagBehavior.REQUIRE_ALL)
@tags("beta", behavior=TagBehavior.REQUIRE_ANY)
class AllAndAny:
    pass


class InheritsProdEu(ProdEu):
    pass


class TestRequireAll:
    def test_all_present(self) -> None:
        assert matches_tags(ProdEu, {"prod", "eu"})

    def test_not_all_present(self) -> None:
        assert not matches_tags(ProdEu, {"prod"})

    def test_extra_requested_tags_allowed(self) -> None:
        assert matches_tags(ProdEu, {"prod", "eu", "us"})

    def test_unrelated_request(self) -> None:
        assert not matches_tags(ProdEu, {"us"})

    def test_declarations_are_unioned(self) -> None:
        assert matches_tags(SplitAllDeclarations, {"us", "prod"})
        assert not matches_tags(SplitAllDeclarations, {"us"})


class TestRequireAny:
    def test_one_match(self) -> None:
        assert matches_tags(ProdOrStaging, {"staging"})

    def test_no_match(self) -> None:
        assert not matches_tags(ProdOrStaging, {"dev"})

    def test_one_of_many_requested(self) -> None:
        assert matches_tags(ProdOrStaging, {"dev", "prod"})


class TestMixedBehaviors:
    def test_all_succeeds(self) -> None:
        assert matches_tags(AllAndAny, {"eu"})

    def test_falls_back_to_any(self) -> None:
        assert matches_tags(AllAndAny, {"beta", "us"})

    def test_neither(self) -> None:
        assert not matches_tags(AllAndAny, {"us"})


class TestEdgeCases:
    @pytest.mark.parametrize("requested", [set(), {"prod"}, {"anything", "else"}])
    def test_untagged_type_never_matches(self, requested: set[str]) -> None:
        assert not has_tags(Untagged)
        assert not matches_tags(Untagged, requested)

    @pytest.mark.parametrize("tagged", [ProdEu, ProdOrStaging, AllAndAny])
    def test_empty_request_never_matches_tagged(self, tagged: type) -> None:
        assert not matches_tags(tagged, set())

    def test_inherited_declarations(self) -> None:
        assert len(collect_tag_declarations(InheritsProdEu)) == 1
        assert matches_tags(InheritsProdEu, ["eu", "prod"])

    def test_single_string_request(self) -> None:
        assert matches_tags(ProdOrStaging, "staging")

    def test_accepts_any_iterable(self) -> None:
        assert matches_tags(ProdEu, (t for t in ["prod", "eu"]))
