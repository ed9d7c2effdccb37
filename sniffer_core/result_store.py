#!/usr/bin/env python3
import logging
import shutil
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional, Tuple

from .errors import AnalysisDataError
from .models import AnalysisResult
from .report import format_report

logger = logging.getLogger(__name__)

RESULT_FILENAME = "computed-styles.json"
REPORT_FILENAME = "computed-styles.txt"
SNAPSHOT_PREFIX = "computed-styles-"


@dataclass
class ArtifactPaths:
    data: Path
    report: Path
    previous: Optional[Path] = None


def _snapshot_stamp(now: Optional[datetime] = None) -> str:
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is not None:
        now = now.astimezone(timezone.utc).replace(tzinfo=None)
    iso = now.isoformat(timespec="milliseconds") + "Z"
    return iso.replace(":", "-").replace(".", "-")


def rotate_snapshot(
    current_path: Path,
    archive_dir: Path,
    now: Optional[datetime] = None,
) -> Optional[Path]:
    """
    Move the previous primary artifact into the archive directory.

    Returns the archived path, or None when there was no previous artifact.
    """
    current_path = Path(current_path)
    if not current_path.exists():
        return None
    archive_dir = Path(archive_dir)
    archive_dir.mkdir(parents=True, exist_ok=True)

    stem = f"{SNAPSHOT_PREFIX}{_snapshot_stamp(now)}"
    target = archive_dir / f"{stem}.json"
    n = 0
    while target.exists():
        n += 1
        target = archive_dir / f"{stem}-{n}.json"

    shutil.move(str(current_path), str(target))
    logger.info(f"📦 Moved old {current_path.name} to: {target}")
    return target


def write_artifacts(
    result: AnalysisResult,
    public_dir: Path,
    archive_dir: Path,
    now: Optional[datetime] = None,
) -> ArtifactPaths:
    """Rotate the previous snapshot, then write the text report and the JSON data."""
    public_dir = Path(public_dir)
    archive_dir = Path(archive_dir)
    public_dir.mkdir(parents=True, exist_ok=True)
    archive_dir.mkdir(parents=True, exist_ok=True)

    data_path = public_dir / RESULT_FILENAME
    previous = rotate_snapshot(data_path, archive_dir, now=now)

    report_path = archive_dir / REPORT_FILENAME
    with open(report_path, "w", encoding="utf-8") as f:
        f.write(format_report(result))

    with open(data_path, "w", encoding="utf-8") as f:
        f.write(result.to_json(indent=2))

    return ArtifactPaths(data=data_path, report=report_path, previous=previous)


def load_analysis(path: Path) -> AnalysisResult:
    """
    Raises:
        AnalysisDataError: if the artifact is missing, unreadable or malformed
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except FileNotFoundError as e:
        raise AnalysisDataError(f"No analysis data at {path}") from e
    except OSError as e:
        raise AnalysisDataError(f"Cannot read analysis data at {path}: {e}") from e
    return AnalysisResult.from_json(text)


def _snapshot_order(path: Path) -> Tuple[str, int]:
    # Collisions are suffixed -1, -2, ... after the stamp's trailing "Z"
    stem, _, suffix = path.stem.rpartition("Z-")
    if stem and suffix.isdigit():
        return stem, int(suffix)
    return path.stem.rstrip("Z"), 0


def list_snapshots(archive_dir: Path) -> List[Path]:
    """Archived snapshots, newest first."""
    archive_dir = Path(archive_dir)
    if not archive_dir.is_dir():
        return []
    return sorted(
        archive_dir.glob(f"{SNAPSHOT_PREFIX}*.json"), key=_snapshot_order, reverse=True
    )
