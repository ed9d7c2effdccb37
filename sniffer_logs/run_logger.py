"""
Run Logger - Markdown run log for one analysis run

Provides:
- Table of Contents generation
- Per-rule key/value entries
- Per-category summary tables
- Final status summary
"""

import json
import re
from datetime import datetime
from pathlib import Path
from typing import Any, List, Optional

from sniffer_core.styles import IDENTITY_PROPERTIES


class RunLogger:
    """
    Markdown run logger for step-by-step diagnostics.

    Usage:
        run_logger = RunLogger(
            url="https://example.com",
            command_line="design-sniffer https://example.com"
        )

        run_logger.log_heading("Button")
        run_logger.log_kv("Button .btn", "3 found, 2 new")
        run_logger.finalize(success=True, duration_ms=5400)
    """

    TOC_START = "<!-- TOC -->"
    TOC_END = "<!-- /TOC -->"

    def __init__(
        self,
        url: Optional[str],
        command_line: Optional[str] = None,
        log_dir: str = "./logs",
        session_id: Optional[str] = None
    ):
        """
        Initialize the run logger.

        Args:
            url: Target URL
            command_line: Full CLI command
            log_dir: Directory for log files
            session_id: Optional session ID (auto-generated if not provided)
        """
        self.session_id = session_id or datetime.now().strftime('%Y%m%d-%H%M%S')
        self.dir = Path(log_dir)
        self.dir.mkdir(parents=True, exist_ok=True)
        self.path = self.dir / f'run-{self.session_id}.md'

        self._toc: List[str] = []

        with open(self.path, 'w', encoding='utf-8') as f:
            f.write(f"# design-sniffer Run Log ({self.session_id})\n\n")
            f.write("## Navigation\n\n")
            f.write(f"{self.TOC_START}\n(no sections yet)\n{self.TOC_END}\n\n")
            if command_line:
                f.write(f"```bash\n{command_line}\n```\n\n")
            if url:
                f.write(f"- **URL**: {url}\n\n")

    def _write(self, text: str):
        """Append text to log file"""
        with open(self.path, 'a', encoding='utf-8') as f:
            f.write(text)

    def log_heading(self, text: str):
        """Log a section heading with TOC entry."""
        self._write("\n---\n\n")
        self._write(f"## {text}\n\n")
        self._toc.append(text)
        self._update_toc()

    def log_kv(self, key: str, value: str):
        """Log a key-value pair"""
        self._write(f"- {key}: {value}\n")

    def log_json(self, data: Any, title: str = "Data"):
        """Log JSON data"""
        self._write(f"### {title}\n\n")
        self._write(f"```json\n{json.dumps(data, indent=2, ensure_ascii=False)}\n```\n\n")

    def log_table(self, headers: List[str], rows: List[List[str]], title: str = ""):
        """
        Log a Markdown table.

        Args:
            headers: List of column headers
            rows: List of rows, each row is a list of cell values
            title: Optional title above the table
        """
        if title:
            self._write(f"\n### {title}\n\n")

        if not headers or not rows:
            return

        col_widths = [len(h) for h in headers]
        for row in rows:
            for i, cell in enumerate(row):
                if i < len(col_widths):
                    col_widths[i] = max(col_widths[i], len(str(cell)))

        header_line = "| " + " | ".join(h.ljust(col_widths[i]) for i, h in enumerate(headers)) + " |"
        self._write(header_line + "\n")

        sep_line = "|" + "|".join("-" * (w + 2) for w in col_widths) + "|"
        self._write(sep_line + "\n")

        for row in rows:
            padded_row = list(row) + [""] * (len(headers) - len(row))
            row_line = "| " + " | ".join(
                str(c).replace("|", "\\|").ljust(col_widths[i])
                for i, c in enumerate(padded_row[:len(headers)])
            ) + " |"
            self._write(row_line + "\n")

        self._write("\n")

    def log_category_summary(self, category_result):
        """Table of the representatives kept for a category, by identity properties."""
        headers = ["#", "Selector"] + list(IDENTITY_PROPERTIES)
        rows = []
        for i, element in enumerate(category_result.elements, 1):
            rows.append(
                [str(i), element.selector]
                + [element.styles.get(p, "") for p in IDENTITY_PROPERTIES]
            )
        self.log_table(
            headers,
            rows,
            f"{category_result.name}: {len(category_result.elements)} unique element(s)",
        )

    def log_error(self, message: str):
        self._write(f"❌ **ERROR:** {message}\n\n")

    def finalize(self, success: bool, duration_ms: int = 0, error: Optional[str] = None):
        """
        Finalize the log with summary.

        Args:
            success: Whether the run succeeded
            duration_ms: Total execution time
            error: Error message if failed
        """
        self._write("\n---\n\n")
        self._write("## Summary\n\n")

        status = "✅ SUCCESS" if success else "❌ FAILED"
        self._write(f"**Status:** {status}\n")
        self._write(f"**Duration:** {duration_ms}ms\n")

        if error:
            self._write(f"\n**Error:** {error}\n")

        self._write("\n")

    # --- Helpers ---
    def _slugify(self, text: str) -> str:
        """Convert text to URL-safe slug"""
        s = text.strip().lower()
        s = re.sub(r"[^a-z0-9\s-]", "", s)
        s = re.sub(r"\s+", "-", s)
        return s

    def _update_toc(self):
        """Rewrite the table of contents between the TOC markers"""
        with open(self.path, 'r', encoding='utf-8') as fr:
            content = fr.read()
        items = "\n".join(f"- [{title}](#{self._slugify(title)})" for title in self._toc)
        start = content.index(self.TOC_START) + len(self.TOC_START)
        end = content.index(self.TOC_END)
        content = content[:start] + "\n" + items + "\n" + content[end:]
        with open(self.path, 'w', encoding='utf-8') as fw:
            fw.write(content)

    @property
    def log_path(self) -> str:
        """Get the path to the log file"""
        return str(self.path)


# Convenience function
def create_run_logger(
    url: Optional[str] = None,
    command_line: Optional[str] = None,
    log_dir: str = "./logs"
) -> RunLogger:
    """Create a new run logger instance"""
    return RunLogger(
        url=url,
        command_line=command_line,
        log_dir=log_dir
    )
