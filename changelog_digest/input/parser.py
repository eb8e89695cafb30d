"""
Line scanning and classification for sector-file changelogs.

The changelog is markdown with the newest release first:
- # headings mark each release
- numbered lines ("12. ...") are the individual changes
- a change may end with an attribution clause ("- thanks to @handle (Name)")

Only the changes under the newest heading are considered.
"""

from __future__ import annotations

import re
from typing import Iterable


HEADING_MARKER = "#"
NUMBER_RE = re.compile(r"^[0-9]{1,2}\.\s")  # Matches "12. "
AIRAC_RE = re.compile(r"AIRAC \([0-9]{4}\)")  # Matches "AIRAC (2207)"
ATTRIBUTION_RE = re.compile(r"\s-\sthanks\sto\s.*$")  # Matches " - thanks to @x (Name)"


def scan_changes(text: str) -> list[str]:
    """Extract the numbered change lines of the newest release.

    Scanning stops at the second heading, so older releases further down
    the document are never read. A document with fewer than two headings
    is scanned in full.

    Args:
        text: The full changelog as a string

    Returns:
        Change lines in document order with the leading "N. " removed.
        Lines that are not numbered items are dropped.
    """
    changes: list[str] = []
    headings = 0
    for line in text.splitlines():
        if HEADING_MARKER in line:
            headings += 1
            if headings >= 2:
                break
            continue
        change = strip_number(line)
        if change is not None:
            changes.append(change)
    return changes


def strip_number(line: str) -> str | None:
    """Return the line without its "N. " prefix, or None if it is not numbered."""
    if not NUMBER_RE.match(line):
        return None
    return NUMBER_RE.sub("", line, count=1)


def strip_attribution(change: str) -> str:
    """Truncate a change at the start of its trailing attribution clause.

    >>> strip_attribution("Bug - Fixed EGKK - thanks to @abc (Jo Bloggs)")
    'Bug - Fixed EGKK'
    """
    match = ATTRIBUTION_RE.search(change)
    if match is None:
        return change
    return change[: match.start()]


def is_airac_change(change: str) -> bool:
    return AIRAC_RE.search(change) is not None


def classify_changes(changes: Iterable[str]) -> tuple[list[str], list[str]]:
    """Split changes into the AIRAC group and the other group.

    Every change lands in exactly one group, attribution removed, with
    relative order kept inside each group.

    Returns:
        A tuple of (airac_list, other_list)
    """
    airac_list: list[str] = []
    other_list: list[str] = []
    for change in changes:
        trimmed = strip_attribution(change)
        if is_airac_change(trimmed):
            airac_list.append(trimmed)
        else:
            other_list.append(trimmed)
    return airac_list, other_list
