"""Viewer state, built per request and handed to the template"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from sniffer_core.errors import AnalysisDataError
from sniffer_core.models import AnalysisResult
from sniffer_core.result_store import load_analysis

logger = logging.getLogger(__name__)


@dataclass
class ViewerState:
    data: Optional[AnalysisResult] = None
    error: Optional[str] = None

    @property
    def has_data(self) -> bool:
        return self.data is not None and len(self.data) > 0


def load_viewer_state(path: Path) -> ViewerState:
    """Missing or malformed data becomes an error state, never an exception."""
    try:
        return ViewerState(data=load_analysis(path))
    except AnalysisDataError as e:
        logger.warning(f"Analysis data unavailable: {e}")
        return ViewerState(error=str(e))
