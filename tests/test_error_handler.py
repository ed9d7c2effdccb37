"""Tests for user-facing error messages."""

import pytest

from sniffer_core.error_handler import (
    create_error_response,
    format_error_for_logging,
    format_user_friendly_error,
    get_error_category,
)
from sniffer_core.errors import AnalysisDataError, NavigationError


class TestFriendlyErrors:

    def test_navigation_timeout(self):
        error = NavigationError("Navigation timed out after 60000ms: https://x", url="https://x")
        friendly = format_user_friendly_error(error)
        assert friendly["message"] == "The page took too long to respond"
        assert friendly["can_retry"] is True
        assert "60000ms" in friendly["technical"]

    def test_dns_failure(self):
        error = NavigationError("Navigation failed: net::ERR_NAME_NOT_RESOLVED at https://nope")
        assert format_user_friendly_error(error)["message"] == "The host name could not be resolved"

    def test_missing_browser(self):
        error = NavigationError("Browser launch failed: Executable doesn't exist at /x/chrome")
        friendly = format_user_friendly_error(error)
        assert "playwright install chromium" in friendly["suggestion"]
        assert friendly["severity"] == "critical"

    def test_unmatched_navigation_error(self):
        friendly = format_user_friendly_error(NavigationError("something odd"))
        assert friendly["message"] == "The page could not be loaded"

    def test_missing_data(self):
        friendly = format_user_friendly_error(AnalysisDataError("No analysis data at public/x.json"))
        assert friendly["message"] == "No analysis data available"

    def test_unknown(self):
        friendly = format_user_friendly_error(RuntimeError("weird"))
        assert friendly["severity"] == "error"
        assert friendly["technical"] == "weird"


class TestCategories:

    @pytest.mark.parametrize("error,category", [
        (NavigationError("Navigation timed out after 5ms"), "network"),
        (NavigationError("Navigation failed: net::ERR_NAME_NOT_RESOLVED"), "network"),
        (NavigationError("Browser launch failed: Executable doesn't exist"), "browser"),
        (AnalysisDataError("No analysis data"), "data"),
        (PermissionError("Permission denied: 'public'"), "filesystem"),
        (RuntimeError("weird"), "unknown"),
    ])
    def test_category(self, error, category):
        assert get_error_category(error) == category


def test_format_for_logging_includes_context():
    text = format_error_for_logging(NavigationError("Navigation timed out"), context="analyze")
    assert text.splitlines()[0] == "📍 Context: analyze"
    assert "Technical: Navigation timed out" in text


def test_error_response():
    response = create_error_response(AnalysisDataError("No analysis data at x"), context="viewer")
    assert response["success"] is False
    assert response["error"]["category"] == "data"
    assert response["error"]["message"] == "No analysis data available"
