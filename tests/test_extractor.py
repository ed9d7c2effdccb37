"""Tests for the extraction engine, driven by an in-memory session."""

import itertools

import pytest
from unittest.mock import MagicMock

from sniffer_core.extractor import extract, extract_category
from sniffer_core.models import ExtractionStats
from sniffer_core.styles import styles_equal
from sniffer_core.taxonomy import DEFAULT_CATEGORIES, Category

from tests.fakes import FakeSession, button_styles

pytestmark = pytest.mark.asyncio

BUTTON = Category("Button", ("button", '[role="button"]', '[class*="btn"]', ".button"))
CHECKBOX = Category("Checkbox", ('input[type="checkbox"]', '[class*="checkbox"]'))
LINK = Category("Link", ("a",))


def assert_no_equal_pairs(result):
    for category in result:
        for a, b in itertools.combinations(category.elements, 2):
            assert not styles_equal(a.styles, b.styles)


class TestDeduplication:

    async def test_width_only_difference_collapses(self):
        session = FakeSession({"button": [button_styles(width="100px"), button_styles(width="120px")]})
        result = await extract(session, [BUTTON])

        assert result.names() == ["Button"]
        elements = result.get("Button").elements
        assert len(elements) == 1
        assert elements[0].styles["width"] == "100px"

    async def test_dedup_across_rules(self):
        session = FakeSession({
            "button": [button_styles()],
            ".button": [button_styles(margin="8px")],
        })
        result = await extract(session, [BUTTON])

        elements = result.get("Button").elements
        assert len(elements) == 1
        assert elements[0].selector == "button"

    async def test_distinct_elements_kept_in_discovery_order(self):
        session = FakeSession({
            "button": [button_styles(), button_styles(color="#000")],
            '[role="button"]': [button_styles(**{"border-radius": "12px"})],
        })
        result = await extract(session, [BUTTON])

        elements = result.get("Button").elements
        assert [e.selector for e in elements] == ["button", "button", '[role="button"]']
        assert [e.styles["color"] for e in elements] == ["#fff", "#000", "#fff"]
        assert_no_equal_pairs(result)

    async def test_full_style_set_retained(self):
        session = FakeSession({"a": [{"color": "red", "margin": "0px", "width": "auto"}]})
        result = await extract(session, [LINK])

        styles = result.get("Link").elements[0].styles
        assert styles["margin"] == "0px"
        assert styles["width"] == "auto"

    async def test_categories_dedup_independently(self):
        same = button_styles()
        session = FakeSession({"button": [same], "a": [same]})
        result = await extract(session, [BUTTON, LINK])

        assert result.names() == ["Button", "Link"]
        assert len(result.get("Link").elements) == 1


class TestOmission:

    async def test_checkbox_without_matches_is_absent(self):
        session = FakeSession({"button": [button_styles()]})
        result = await extract(session, [BUTTON, CHECKBOX])

        assert result.names() == ["Button"]
        assert result.get("Checkbox") is None
        assert "Checkbox" not in [c["name"] for c in result.to_list()]

    async def test_no_matches_at_all(self):
        result = await extract(FakeSession(), DEFAULT_CATEGORIES)
        assert len(result) == 0
        assert result.to_list() == []

    async def test_output_follows_taxonomy_order(self):
        session = FakeSession({"a": [{"color": "blue"}], "button": [button_styles()]})
        result = await extract(session, [LINK, CHECKBOX, BUTTON])
        assert result.names() == ["Link", "Button"]


class TestFailureIsolation:

    async def test_failing_rule_does_not_block_later_rules(self):
        session = FakeSession({
            '[class*="btn"]': [RuntimeError("Execution context was destroyed")],
            ".button": [button_styles()],
        })
        result = await extract(session, [BUTTON])

        elements = result.get("Button").elements
        assert [e.selector for e in elements] == [".button"]
        assert result.stats.rules_failed == 1

    async def test_elements_before_failure_are_kept(self):
        session = FakeSession({
            '[class*="btn"]': [button_styles(), RuntimeError("boom"), button_styles(color="#000")],
        })
        result = await extract(session, [BUTTON])

        elements = result.get("Button").elements
        assert len(elements) == 1
        assert elements[0].styles["color"] == "#fff"

    async def test_wait_error_is_absorbed(self):
        session = FakeSession(
            {".button": [button_styles()]},
            wait_errors={"button": RuntimeError("Target page, context or browser has been closed")},
        )
        result = await extract(session, [BUTTON])
        assert result.names() == ["Button"]

    async def test_failure_in_one_category_leaves_others(self):
        session = FakeSession({
            "button": [ValueError("bad")],
            "a": [{"color": "blue"}],
        })
        result = await extract(session, [BUTTON, LINK])
        assert result.names() == ["Link"]

    async def test_missing_rule_is_skipped_without_query(self):
        session = FakeSession({".button": [button_styles()]})
        await extract(session, [BUTTON])

        assert session.waited == list(BUTTON.rules)
        assert session.queried == [".button"]


class TestStatsAndRunLog:

    async def test_stats(self):
        session = FakeSession({
            "button": [button_styles(), button_styles(width="1px")],
            '[class*="btn"]': [RuntimeError("boom")],
        })
        stats = ExtractionStats()
        await extract_category(session, BUTTON, stats=stats)

        assert stats.rules_tried == 4
        assert stats.rules_without_match == 2
        assert stats.rules_failed == 1
        assert stats.elements_seen == 2
        assert stats.duplicates_discarded == 1

    async def test_run_logger_receives_entries(self):
        run_logger = MagicMock()
        session = FakeSession({"button": [button_styles()]})
        await extract(session, [BUTTON, CHECKBOX], run_logger=run_logger)

        headings = [c.args[0] for c in run_logger.log_heading.call_args_list]
        assert headings == ["Button", "Checkbox"]
        run_logger.log_category_summary.assert_called_once()
        keys = [c.args[0] for c in run_logger.log_kv.call_args_list]
        assert "Button button" in keys
        assert 'Checkbox input[type="checkbox"]' in keys
