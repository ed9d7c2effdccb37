"""
Sniffer exceptions
"""

from typing import Optional


class SnifferError(Exception):
    """Base exception for design-sniffer"""
    pass


class NavigationError(SnifferError):
    """Target page could not be loaded or rendered (fatal for the run)"""

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.url = url


class ExtractionError(SnifferError):
    """A single selection rule failed while matching or reading styles"""

    def __init__(self, message: str, category: str = "", rule: str = ""):
        super().__init__(message)
        self.category = category
        self.rule = rule


class AnalysisDataError(SnifferError):
    """Primary analysis artifact is missing or malformed"""
    pass
