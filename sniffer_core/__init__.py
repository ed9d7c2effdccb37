"""
sniffer_core package: computed style extraction for design-sniffer

Usage:
    from sniffer_core import analyze_url, format_report

    result = asyncio.run(analyze_url("https://example.com"))
    print(format_report(result))
"""
from .config import Config, config
from .errors import AnalysisDataError, ExtractionError, NavigationError, SnifferError
from .taxonomy import DEFAULT_CATEGORIES, Category, ComponentKind
from .styles import IDENTITY_PROPERTIES, STYLE_PROPERTIES, styles_equal, visible_styles
from .models import AnalysisResult, CategoryResult, RepresentativeElement
from .report import format_report
from .extractor import analyze_url, extract

__all__ = [
    # Configuration
    "Config",
    "config",
    # Errors
    "SnifferError",
    "NavigationError",
    "ExtractionError",
    "AnalysisDataError",
    # Taxonomy
    "Category",
    "ComponentKind",
    "DEFAULT_CATEGORIES",
    # Equality policy
    "STYLE_PROPERTIES",
    "IDENTITY_PROPERTIES",
    "styles_equal",
    "visible_styles",
    # Result model
    "AnalysisResult",
    "CategoryResult",
    "RepresentativeElement",
    "format_report",
    # Engine
    "extract",
    "analyze_url",
]
