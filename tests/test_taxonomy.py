import asyncio

import aiohttp
import pytest
from featured_sync.taxonomy import (
    category_query_params,
    filter_categories,
    get_categories,
    _page_categories,
)
from fakes import FakeResponse, FakeSession

WIKI = "https://wiki.test/w/api.php"


def _categories_body(titles, page_key="5422144"):
    return {
        "batchcomplete": "",
        "query": {"pages": {page_key: {"pageid": 1, "title": "X", "categories": [
            {"ns": 14, "title": t} for t in titles
        ]}}},
    }


# ── category_query_params ─────────────────────────────────────

class TestCategoryQueryParams:
    def test_params(self):
        assert category_query_params("Taylor Swift") == {
            "action": "query",
            "titles": "Taylor Swift",
            "prop": "categories",
            "cllimit": "max",
            "clshow": "!hidden",
            "format": "json",
            "origin": "*",
        }


# ── _page_categories ──────────────────────────────────────────

class TestPageCategories:
    @pytest.mark.parametrize("body", [
        None,
        [],
        {},
        {"query": None},
        {"query": {}},
        {"query": {"pages": {}}},
        {"query": {"pages": []}},
        {"query": {"pages": {"1": "page"}}},
        {"query": {"pages": {"1": {"title": "X"}}}},
        {"query": {"pages": {"1": {"categories": "nope"}}}},
    ])
    def test_missing_parts_give_empty(self, body):
        assert _page_categories(body) == []

    def test_takes_whatever_page_key(self):
        body = _categories_body(["Category:A"], page_key="-1")
        assert _page_categories(body) == [{"ns": 14, "title": "Category:A"}]


# ── filter_categories ─────────────────────────────────────────

class TestFilterCategories:
    def test_strips_prefix_keeps_order(self):
        raw = [{"title": "Category:B"}, {"title": "Category:A"}]
        assert filter_categories(raw, "Moon") == ["B", "A"]

    def test_excludes_eponymous_case_insensitive(self):
        raw = [
            {"title": "Category:Taylor Swift albums"},
            {"title": "Category:1989 births"},
            {"title": "Category:TAYLOR SWIFT"},
            {"title": "Category:Songs written by taylor swift"},
            {"title": "Category:American pop singers"},
        ]
        assert filter_categories(raw, "Taylor Swift") == ["1989 births", "American pop singers"]

    def test_partial_word_match_also_excluded(self):
        raw = [{"title": "Category:Moonlight"}, {"title": "Category:Satellites"}]
        assert filter_categories(raw, "moon") == ["Satellites"]

    def test_skips_entries_without_title(self):
        raw = [None, {"ns": 14}, {"title": 3}, {"title": "Category:Ok"}]
        assert filter_categories(raw, "Moon") == ["Ok"]

    @pytest.mark.parametrize("title", ["Moon", "Apollo 11", "Ada Lovelace", "Q"])
    def test_output_never_contains_title(self, title):
        raw = [{"title": f"Category:{p}"} for p in (
            title, title.upper(), f"Films about {title.lower()}", "Unrelated", "Other things",
        )]
        for name in filter_categories(raw, title):
            assert title.lower() not in name.lower()


# ── get_categories ────────────────────────────────────────────

class TestGetCategories:
    @pytest.mark.asyncio
    async def test_success(self):
        session = FakeSession(lambda url, params: FakeResponse(
            _categories_body(["Category:Moon", "Category:Natural satellites", "Category:Solar System"])
        ))
        cats = await get_categories(session, "Moon", wiki_api=WIKI)
        assert cats == ["Natural satellites", "Solar System"]
        url, params = session.calls[0]
        assert url == WIKI
        assert params["titles"] == "Moon"

    @pytest.mark.asyncio
    async def test_unreachable_gives_empty(self):
        session = FakeSession(lambda url, params: aiohttp.ClientConnectionError("down"))
        assert await get_categories(session, "Moon", wiki_api=WIKI) == []

    @pytest.mark.asyncio
    async def test_timeout_gives_empty(self):
        session = FakeSession(lambda url, params: asyncio.TimeoutError())
        assert await get_categories(session, "Moon", wiki_api=WIKI) == []

    @pytest.mark.asyncio
    async def test_malformed_json_gives_empty(self):
        session = FakeSession(lambda url, params: FakeResponse(ValueError("Expecting value")))
        assert await get_categories(session, "Moon", wiki_api=WIKI) == []

    @pytest.mark.asyncio
    async def test_server_error_gives_empty(self):
        session = FakeSession(lambda url, params: FakeResponse({}, status=500))
        assert await get_categories(session, "Moon", wiki_api=WIKI) == []

    @pytest.mark.asyncio
    async def test_missing_page_gives_empty(self):
        body = {"query": {"pages": {"-1": {"ns": 0, "title": "Moon", "missing": ""}}}}
        session = FakeSession(lambda url, params: FakeResponse(body))
        assert await get_categories(session, "Moon", wiki_api=WIKI) == []
