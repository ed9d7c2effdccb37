import json
from datetime import datetime, timezone
from pathlib import Path

import pytest

from sniffer_core.errors import AnalysisDataError
from sniffer_core.models import AnalysisResult, CategoryResult, RepresentativeElement
from sniffer_core.result_store import (
    list_snapshots,
    load_analysis,
    rotate_snapshot,
    write_artifacts,
)

NOON = datetime(2024, 3, 5, 12, 30, 45, 123000, tzinfo=timezone.utc)


def make_result(color="red"):
    category = CategoryResult("Link")
    category.add(RepresentativeElement("a", {"color": color, "margin": "0px"}))
    return AnalysisResult([category])


def test_rotate_without_previous_file(tmp_path: Path):
    assert rotate_snapshot(tmp_path / "computed-styles.json", tmp_path / "old") is None
    assert not (tmp_path / "old").exists()


def test_rotate_moves_previous_with_timestamp(tmp_path: Path):
    current = tmp_path / "computed-styles.json"
    current.write_text("[]", encoding="utf-8")

    moved = rotate_snapshot(current, tmp_path / "old", now=NOON)

    assert moved == tmp_path / "old" / "computed-styles-2024-03-05T12-30-45-123Z.json"
    assert moved.read_text(encoding="utf-8") == "[]"
    assert not current.exists()


def test_rotate_never_overwrites(tmp_path: Path):
    archive = tmp_path / "old"
    current = tmp_path / "computed-styles.json"
    for body in ("[1]", "[2]"):
        current.write_text(body, encoding="utf-8")
        rotate_snapshot(current, archive, now=NOON)

    snapshots = sorted(p.name for p in archive.iterdir())
    assert snapshots == [
        "computed-styles-2024-03-05T12-30-45-123Z-1.json",
        "computed-styles-2024-03-05T12-30-45-123Z.json",
    ]


def test_write_artifacts_first_run(tmp_path: Path):
    paths = write_artifacts(make_result(), tmp_path / "public", tmp_path / "old")

    assert paths.previous is None
    data = json.loads(paths.data.read_text(encoding="utf-8"))
    assert data == [{"name": "Link", "elements": [
        {"selector": "a", "styles": {"color": "red", "margin": "0px"}},
    ]}]
    report = paths.report.read_text(encoding="utf-8")
    assert "Component: Link" in report
    assert "margin" not in report
    assert paths.report.name == "computed-styles.txt"


def test_write_artifacts_rotates_previous(tmp_path: Path):
    public, archive = tmp_path / "public", tmp_path / "old"
    write_artifacts(make_result("red"), public, archive, now=NOON)
    paths = write_artifacts(make_result("blue"), public, archive, now=NOON)

    assert paths.previous is not None
    assert json.loads(paths.previous.read_text(encoding="utf-8"))[0]["elements"][0]["styles"]["color"] == "red"
    assert load_analysis(paths.data)[0].elements[0].styles["color"] == "blue"
    assert list_snapshots(archive) == [paths.previous]


def test_load_analysis_missing(tmp_path: Path):
    with pytest.raises(AnalysisDataError):
        load_analysis(tmp_path / "nope.json")


def test_load_analysis_malformed(tmp_path: Path):
    path = tmp_path / "computed-styles.json"
    path.write_text('{"oops": 1}', encoding="utf-8")
    with pytest.raises(AnalysisDataError):
        load_analysis(path)


def test_list_snapshots_newest_first(tmp_path: Path):
    for name in ("computed-styles-2024-01-01T00-00-00-000Z.json",
                 "computed-styles-2024-02-01T00-00-00-000Z.json",
                 "computed-styles.txt"):
        (tmp_path / name).write_text("[]", encoding="utf-8")
    assert [p.name for p in list_snapshots(tmp_path)] == [
        "computed-styles-2024-02-01T00-00-00-000Z.json",
        "computed-styles-2024-01-01T00-00-00-000Z.json",
    ]
    assert list_snapshots(tmp_path / "missing") == []


def test_list_snapshots_orders_collisions(tmp_path: Path):
    current = tmp_path / "computed-styles.json"
    archive = tmp_path / "old"
    for content in ("[1]", "[2]", "[3]"):
        current.write_text(content, encoding="utf-8")
        rotate_snapshot(current, archive, now=NOON)
    (archive / "computed-styles-2024-01-01T00-00-00-000Z.json").write_text("[0]", encoding="utf-8")

    snapshots = list_snapshots(archive)

    assert [p.name for p in snapshots] == [
        "computed-styles-2024-03-05T12-30-45-123Z-2.json",
        "computed-styles-2024-03-05T12-30-45-123Z-1.json",
        "computed-styles-2024-03-05T12-30-45-123Z.json",
        "computed-styles-2024-01-01T00-00-00-000Z.json",
    ]
    assert snapshots[0].read_text(encoding="utf-8") == "[3]"
