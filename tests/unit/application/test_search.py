"""Unit tests for free-text query normalisation."""

from __future__ import annotations

import pytest

from inventory_db.application.search import normalize_search_terms, substring_text, to_tsquery_text


class TestNormalizeSearchTerms:
    @pytest.mark.parametrize("text", [None, "", "   ", "***", "& | !"])
    def test_nothing_to_search(self, text: str | None) -> None:
        assert normalize_search_terms(text) == []

    def test_lowercases_and_splits(self) -> None:
        assert normalize_search_terms("  Test-10  Rack ") == ["test-10", "rack"]

    def test_strips_tsquery_operators(self) -> None:
        assert normalize_search_terms("rack:(A) b&c !x") == ["racka", "bc", "x"]

    def test_keeps_inner_punctuation(self) -> None:
        assert normalize_search_terms("ops@example.com 10.0.0.1") == ["ops@example.com", "10.0.0.1"]

    def test_strips_edge_punctuation(self) -> None:
        assert normalize_search_terms("-rack- .site.") == ["rack", "site"]


class TestToTsqueryText:
    def test_joins_conjunctively(self) -> None:
        assert to_tsquery_text(["rack", "01"]) == "rack & 01"

    def test_single_term(self) -> None:
        assert to_tsquery_text(["rack"]) == "rack"


class TestSubstringText:
    def test_blank_is_none(self) -> None:
        assert substring_text(None) is None
        assert substring_text("   ") is None

    def test_strips(self) -> None:
        assert substring_text("  rack(0 ") == "rack(0"
