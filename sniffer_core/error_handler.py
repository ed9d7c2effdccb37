"""
User-Friendly Error Handler.

Converts technical errors into helpful messages with actionable suggestions.
"""

from typing import Dict, Optional
import logging

from .errors import AnalysisDataError, NavigationError

logger = logging.getLogger(__name__)


def format_user_friendly_error(
    error: Exception,
    context: str = "general",
    technical_details: Optional[str] = None
) -> Dict:
    """
    Convert technical error to user-friendly message.

    Args:
        error: The exception that occurred
        context: Context where error occurred (e.g., "navigation", "viewer")
        technical_details: Additional technical information

    Returns:
        Dictionary with user-friendly error information:
        {
            "message": str,          # User-friendly message
            "suggestion": str,       # Actionable suggestion
            "technical": str,        # Technical details
            "severity": str,         # "critical", "error", "warning"
            "can_retry": bool        # Whether retry might help
        }
    """
    error_str = str(error)

    # First matching pattern wins, so specific patterns come first
    for pattern, friendly_error in ERROR_MAPPINGS.items():
        if pattern.lower() in error_str.lower():
            result = friendly_error.copy()
            result["technical"] = technical_details or error_str
            logger.debug(f"Mapped error to user-friendly: {result['message']}")
            return result

    if isinstance(error, NavigationError):
        return {
            "message": "The page could not be loaded",
            "suggestion": "Check that the URL is correct and the site is reachable",
            "technical": technical_details or error_str,
            "severity": "error",
            "can_retry": True
        }
    if isinstance(error, AnalysisDataError):
        return {
            "message": "No analysis data available",
            "suggestion": "Run the analyzer first: design-sniffer <url>",
            "technical": technical_details or error_str,
            "severity": "warning",
            "can_retry": False
        }

    return {
        "message": "An unexpected error occurred during the analysis",
        "suggestion": "Check the run log or try again",
        "technical": technical_details or error_str,
        "severity": "error",
        "can_retry": True
    }


# Error mappings: pattern -> user-friendly info
ERROR_MAPPINGS = {
    # Browser installation
    "executable doesn't exist": {
        "message": "Chromium for Playwright is not installed",
        "suggestion": "Install it with: python -m playwright install chromium",
        "severity": "critical",
        "can_retry": False
    },
    "browser launch failed": {
        "message": "The browser could not be started",
        "suggestion": "Check the Playwright installation and system libraries (playwright install-deps)",
        "severity": "critical",
        "can_retry": False
    },

    # Address errors
    "cannot navigate to invalid url": {
        "message": "The URL is not valid",
        "suggestion": "Pass a full address including the scheme, e.g. https://example.com",
        "severity": "error",
        "can_retry": False
    },
    "err_name_not_resolved": {
        "message": "The host name could not be resolved",
        "suggestion": "Check the spelling of the domain and your DNS/network settings",
        "severity": "error",
        "can_retry": True
    },

    # Network/timeout errors
    "timed out": {
        "message": "The page took too long to respond",
        "suggestion": "Check the connection or raise --navigation-timeout and try again",
        "severity": "warning",
        "can_retry": True
    },
    "timeout": {
        "message": "The page took too long to respond",
        "suggestion": "Check the connection or raise --navigation-timeout and try again",
        "severity": "warning",
        "can_retry": True
    },
    "err_connection_refused": {
        "message": "The site refused the connection",
        "suggestion": "Check that the URL is correct and the server is running",
        "severity": "error",
        "can_retry": True
    },
    "connection refused": {
        "message": "The site refused the connection",
        "suggestion": "Check that the URL is correct and the server is running",
        "severity": "error",
        "can_retry": True
    },
    "err_internet_disconnected": {
        "message": "No network connection",
        "suggestion": "Check the internet connection and try again",
        "severity": "error",
        "can_retry": True
    },
    "ssl": {
        "message": "Secure connection to the site failed",
        "suggestion": "Check the certificate of the site or try the http:// address",
        "severity": "error",
        "can_retry": True
    },

    # Local filesystem
    "permission denied": {
        "message": "No permission to write the analysis output",
        "suggestion": "Check permissions of --public-dir, --archive-dir and --log-dir",
        "severity": "error",
        "can_retry": False
    },
    "no space left": {
        "message": "The disk is full",
        "suggestion": "Free some space or choose another output directory",
        "severity": "critical",
        "can_retry": False
    },

    # Artifact data
    "not valid json": {
        "message": "The analysis data file is damaged",
        "suggestion": "Run the analyzer again to regenerate computed-styles.json",
        "severity": "warning",
        "can_retry": False
    },
}


def get_error_category(error: Exception) -> str:
    """
    Categorize error type.

    Returns:
        Category name: "network", "browser", "data", "filesystem", "unknown"
    """
    error_str = str(error).lower()

    if isinstance(error, AnalysisDataError) or "json" in error_str:
        return "data"
    elif any(k in error_str for k in ["timeout", "timed out", "connection", "network", "err_name", "ssl"]):
        return "network"
    elif isinstance(error, NavigationError) or any(k in error_str for k in ["browser", "executable", "navigation"]):
        return "browser"
    elif isinstance(error, OSError) or any(k in error_str for k in ["permission", "no space"]):
        return "filesystem"
    else:
        return "unknown"


def format_error_for_logging(error: Exception, context: str = "") -> str:
    """
    Format error for structured logging.

    Args:
        error: The exception
        context: Additional context

    Returns:
        Formatted error string for logs
    """
    friendly = format_user_friendly_error(error, context)

    lines = [
        f"❌ {friendly['message']}",
        f"💡 {friendly['suggestion']}",
        f"🔧 Technical: {friendly['technical']}"
    ]

    if context:
        lines.insert(0, f"📍 Context: {context}")

    return "\n".join(lines)


def create_error_response(
    error: Exception,
    context: str = "",
) -> Dict:
    """
    Create standardized error response for API/CLI.
    """
    friendly = format_user_friendly_error(error, context)

    return {
        "success": False,
        "error": {
            "message": friendly["message"],
            "suggestion": friendly["suggestion"],
            "severity": friendly["severity"],
            "can_retry": friendly["can_retry"],
            "category": get_error_category(error),
        }
    }
