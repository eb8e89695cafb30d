"""
Core data types for the changelog digest.

This module defines the structure that flows through the pipeline:
- Changelog: every intermediate produced while regrouping one document
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Changelog:
    """Regrouped view of the newest release in a changelog document.

    Each stage of the pipeline fills in its own fields; nothing is shared
    between runs.

    Attributes:
        changes: Numbered change lines with the numbering stripped, in document order
        airac_list: AIRAC-tagged changes with the attribution clause removed
        other_list: Remaining changes with the attribution clause removed
        airac_map: Cycle identifier (e.g. "2207") to its messages, in document order
        airacs: Cycle identifiers as integers, newest first
        other_map: Category label (e.g. "Bug") to its messages, in document order
        other_categories: Category labels in first-seen order
        contributors: Unique contributor names in first-seen order
    """
    changes: list[str] = field(default_factory=list)
    airac_list: list[str] = field(default_factory=list)
    other_list: list[str] = field(default_factory=list)
    airac_map: dict[str, list[str]] = field(default_factory=dict)
    airacs: list[int] = field(default_factory=list)
    other_map: dict[str, list[str]] = field(default_factory=dict)
    other_categories: list[str] = field(default_factory=list)
    contributors: list[str] = field(default_factory=list)
