import io
from pathlib import Path

import pytest

from changelog_digest.core.errors import OutputError
from changelog_digest.core.types import Changelog
from changelog_digest.output.renderer import (
    render_airacs,
    render_contributors,
    render_other,
    render_report,
    write_report,
)


EXPECTED_AIRACS = "--- AIRACs: ---\n2207:\nTest 1\nTest 2\n\n2206:\nTest 3\nTest 4\nTest 5\n"
EXPECTED_OTHER = (
    "--- Other: ---\nEnhancement:\nDeleted Luton\n\nBug:\nRemoved all Gatwick (EGKK) SIDs\n"
)
EXPECTED_CONTRIBUTORS = "--- Contributors: ---\nJohn Doe\nTim\nSam Smith\n"


def _changelog() -> Changelog:
    return Changelog(
        airacs=[2207, 2206],
        airac_map={
            "2207": ["Test 1", "Test 2"],
            "2206": ["Test 3", "Test 4", "Test 5"],
        },
        other_map={
            "Bug": ["Removed all Gatwick (EGKK) SIDs"],
            "Enhancement": ["Deleted Luton"],
        },
        other_categories=["Enhancement", "Bug"],
        contributors=["John Doe", "Tim", "Sam Smith"],
    )


def _render(func, changelog: Changelog) -> str:
    buf = io.BytesIO()
    func(changelog, buf)
    return buf.getvalue().decode("utf-8")


def test_render_airacs_separates_cycles_without_trailing_blank() -> None:
    assert _render(render_airacs, _changelog()) == EXPECTED_AIRACS


def test_render_other_follows_category_order() -> None:
    assert _render(render_other, _changelog()) == EXPECTED_OTHER


def test_render_contributors() -> None:
    assert _render(render_contributors, _changelog()) == EXPECTED_CONTRIBUTORS


def test_render_report_joins_sections_with_one_blank_line() -> None:
    expected = EXPECTED_AIRACS + "\n" + EXPECTED_OTHER + "\n" + EXPECTED_CONTRIBUTORS

    assert _render(render_report, _changelog()) == expected


def test_render_report_with_empty_changelog() -> None:
    expected = "--- AIRACs: ---\n\n--- Other: ---\n\n--- Contributors: ---\n"

    assert _render(render_report, Changelog()) == expected


def test_render_contributors_writes_utf8() -> None:
    changelog = Changelog(contributors=["Zoë"])

    raw = io.BytesIO()
    render_contributors(changelog, raw)

    assert raw.getvalue() == "--- Contributors: ---\nZoë\n".encode("utf-8")


def test_write_report_creates_file(tmp_path: Path) -> None:
    output_path = tmp_path / "output.txt"

    write_report(_changelog(), output_path)

    assert output_path.read_bytes().decode("utf-8").startswith(EXPECTED_AIRACS)


def test_write_report_raises_output_error_for_missing_directory(tmp_path: Path) -> None:
    with pytest.raises(OutputError, match="Could not create"):
        write_report(_changelog(), tmp_path / "missing" / "output.txt")
