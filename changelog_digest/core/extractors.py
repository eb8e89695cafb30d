"""
Field extraction and aggregation over classified changes.

Each pattern sits behind its own small function so the matching can be
tested apart from the grouping:
- extract_cycle / extract_airac_message: fields of an AIRAC change
- split_category: category and message of any other change
- extract_contributor: the name inside an attribution clause
"""

from __future__ import annotations

import logging
import re
from typing import Iterable

from .errors import InvalidAiracKeyError


CYCLE_RE = re.compile(r"[0-9]{4}")  # First four-digit run, e.g. "2207"
CYCLE_KEY_RE = re.compile(r"^[0-9]{4}$")
AIRAC_MESSAGE_RE = re.compile(r"-\s(.*)$", re.DOTALL)  # Captures everything after the first "- "
CONTRIBUTOR_RE = re.compile(
    r"-\sthanks\sto\s@[A-Za-z0-9-]+\s\(([A-Za-z]+\s?[A-Za-z]*)\)"
)  # Captures "Jo Bloggs" from "- thanks to @handle (Jo Bloggs)"
CATEGORY_SEPARATOR = "-"

logger = logging.getLogger("changelog_digest")


def extract_cycle(change: str) -> str | None:
    """Return the first run of four digits in an AIRAC change, if any."""
    match = CYCLE_RE.search(change)
    return match.group(0) if match else None


def extract_airac_message(change: str) -> str | None:
    """Return the text after the first "- " separator, or None when absent.

    >>> extract_airac_message("AIRAC (2207) - Updated Cranfield (EGTC) SMR")
    'Updated Cranfield (EGTC) SMR'
    """
    match = AIRAC_MESSAGE_RE.search(change)
    return match.group(1) if match else None


def split_category(change: str) -> tuple[str, str]:
    """Split an other-group change into (category, message).

    The category is the trimmed text before the first "-". The message is
    the text after it, minus the single space that follows the separator.
    A change without a separator becomes a category with an empty message.
    """
    category, separator, message = change.partition(CATEGORY_SEPARATOR)
    if not separator:
        return change.strip(), ""
    if message.startswith(" "):
        message = message[1:]
    return category.strip(), message


def extract_contributor(change: str) -> str | None:
    """Return the contributor name from an attribution clause, if present."""
    match = CONTRIBUTOR_RE.search(change)
    return match.group(1) if match else None


def build_airac_map(
    airac_list: Iterable[str],
    log: logging.Logger | None = None,
) -> dict[str, list[str]]:
    """Group AIRAC change messages by cycle identifier.

    Changes missing the "- " separator are logged and skipped; the rest of
    the list is still processed.

    Returns:
        Mapping of cycle identifier to messages in document order
    """
    log = log or logger
    airac_map: dict[str, list[str]] = {}
    for change in airac_list:
        message = extract_airac_message(change)
        if message is None:
            log.warning("Malformed message string in %s", change, extra={"change": change})
            continue
        cycle = extract_cycle(change) or ""
        airac_map.setdefault(cycle, []).append(message)
    return airac_map


def sort_cycles(airac_map: dict[str, list[str]]) -> list[int]:
    """Return the cycle identifiers as integers, newest first.

    Raises:
        InvalidAiracKeyError: If a key is not a four-digit number
    """
    cycles: list[int] = []
    for key in airac_map:
        if not CYCLE_KEY_RE.match(key):
            raise InvalidAiracKeyError(key)
        cycles.append(int(key))
    return sorted(cycles, reverse=True)


def build_other_map(other_list: Iterable[str]) -> tuple[dict[str, list[str]], list[str]]:
    """Group other change messages by category.

    Returns:
        A tuple of (category -> messages, categories in first-seen order)
    """
    other_map: dict[str, list[str]] = {}
    categories: list[str] = []
    for change in other_list:
        category, message = split_category(change)
        if category not in other_map:
            other_map[category] = []
            categories.append(category)
        other_map[category].append(message)
    return other_map, categories


def collect_contributors(changes: Iterable[str]) -> list[str]:
    """List contributor names in first-seen order without duplicates.

    Must be given the changes before attribution clauses are stripped.
    """
    seen: set[str] = set()
    contributors: list[str] = []
    for change in changes:
        name = extract_contributor(change)
        if name is None or name in seen:
            continue
        seen.add(name)
        contributors.append(name)
    return contributors
