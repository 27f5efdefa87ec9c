"""Tests for shred/catalog.py — fixed query lists per focus."""

from __future__ import annotations

import pytest

from shred.catalog import QUERY_CATALOG, queries_for, queries_for_depth, resolve_depth
from shred.models import QueryFocus, SearchDepth


class TestQueriesFor:
    @pytest.mark.parametrize("focus", list(QueryFocus))
    def test_every_focus_has_three_queries(self, focus):
        assert len(queries_for(focus)) == 3

    def test_accepts_plain_string(self):
        assert queries_for("documentation") == list(QUERY_CATALOG[QueryFocus.DOCUMENTATION])

    @pytest.mark.parametrize("focus", ["nonsense", "", "GENERAL", None])
    def test_unknown_focus_falls_back_to_general(self, focus):
        assert queries_for(focus) == queries_for(QueryFocus.GENERAL)

    def test_general_order_is_fixed(self):
        assert queries_for()[0] == "Canadian SHRED tax credit 2024 requirements"

    def test_returns_a_fresh_list(self):
        queries = queries_for()
        queries.clear()
        assert len(queries_for()) == 3


class TestQueriesForDepth:
    def test_basic_is_one_query(self):
        assert queries_for_depth(SearchDepth.BASIC) == queries_for()[:1]

    def test_comprehensive_is_two_queries(self):
        assert queries_for_depth(SearchDepth.COMPREHENSIVE) == queries_for()[:2]

    def test_detailed_is_three_queries(self):
        assert queries_for_depth(SearchDepth.DETAILED) == queries_for()


class TestResolveDepth:
    def test_none_is_comprehensive(self):
        assert resolve_depth(None) is SearchDepth.COMPREHENSIVE

    def test_known_string(self):
        assert resolve_depth("basic") is SearchDepth.BASIC

    @pytest.mark.parametrize("depth", ["deep", "", 3, ["basic"]])
    def test_unknown_value_is_detailed(self, depth):
        assert resolve_depth(depth) is SearchDepth.DETAILED
