"""Plain-text report for an analysis result."""

from typing import List

from .models import AnalysisResult
from .styles import visible_styles

REPORT_TITLE = "Computed Style Analysis Report"


def format_report(result: AnalysisResult) -> str:
    """
    Render the human-readable report.

    Unset values ("", "none", "0px") are left out of the listing only; the
    result itself is not modified.
    """
    lines: List[str] = [REPORT_TITLE, "=" * 28, ""]

    for category in result:
        lines.append(f"Component: {category.name}")
        lines.append(f"Total Unique Elements: {len(category.elements)}")
        lines.append("-" * 40)

        for element in category.elements:
            lines.append("")
            lines.append(f"Selector: {element.selector}")
            lines.append("Styles:")
            for prop, value in visible_styles(element.styles).items():
                lines.append(f"  {prop}: {value}")
            lines.append("")

        lines.append("")

    return "\n".join(lines) + "\n"
