"""
Plain-text report rendering.

The report has three sections, separated by one blank line:

    --- AIRACs: ---
    2207:
    Updated Cranfield (EGTC) SMR

    --- Other: ---
    Bug:
    Corrected Alderney (EGJA) runway coords

    --- Contributors: ---
    John Doe

Everything is written as UTF-8 with "\\n" line endings to a binary sink.
"""

from __future__ import annotations

from pathlib import Path
from typing import BinaryIO, Iterable

from ..core.errors import OutputError
from ..core.types import Changelog


AIRAC_HEADER = "--- AIRACs: ---"
OTHER_HEADER = "--- Other: ---"
CONTRIBUTORS_HEADER = "--- Contributors: ---"


def _write_lines(sink: BinaryIO, lines: Iterable[str]) -> None:
    for line in lines:
        sink.write(f"{line}\n".encode("utf-8"))


def _grouped_lines(
    header: str, keys: Iterable[str], groups: dict[str, list[str]]
) -> list[str]:
    # One blank line between groups, none after the last
    lines = [header]
    for index, key in enumerate(keys):
        if index:
            lines.append("")
        lines.append(f"{key}:")
        lines.extend(groups.get(key, []))
    return lines


def render_airacs(changelog: Changelog, sink: BinaryIO) -> None:
    """Write the AIRAC section, cycles newest first."""
    keys = [str(cycle) for cycle in changelog.airacs]
    _write_lines(sink, _grouped_lines(AIRAC_HEADER, keys, changelog.airac_map))


def render_other(changelog: Changelog, sink: BinaryIO) -> None:
    """Write the Other section, categories in first-seen order."""
    _write_lines(
        sink,
        _grouped_lines(OTHER_HEADER, changelog.other_categories, changelog.other_map),
    )


def render_contributors(changelog: Changelog, sink: BinaryIO) -> None:
    _write_lines(sink, [CONTRIBUTORS_HEADER, *changelog.contributors])


def render_report(changelog: Changelog, sink: BinaryIO) -> None:
    """Write all three sections to sink."""
    render_airacs(changelog, sink)
    sink.write(b"\n")
    render_other(changelog, sink)
    sink.write(b"\n")
    render_contributors(changelog, sink)


def write_report(changelog: Changelog, output_path: Path) -> None:
    """Create output_path and render the report into it.

    Raises:
        OutputError: If the file cannot be created or written
    """
    try:
        with open(output_path, "wb") as f:
            render_report(changelog, f)
    except OSError as exc:
        raise OutputError(f"Could not create {output_path}: {exc}") from exc
