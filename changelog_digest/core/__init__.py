"""
Core domain models and extraction logic.

This package contains the data types, errors and field extractors that
are independent of how the changelog was obtained or where the report goes.
"""

from .errors import ChangelogError, InvalidAiracKeyError, OutputError, SourceError
from .extractors import (
    build_airac_map,
    build_other_map,
    collect_contributors,
    extract_airac_message,
    extract_contributor,
    extract_cycle,
    sort_cycles,
    split_category,
)
from .types import Changelog

__all__ = [
    "Changelog",
    "ChangelogError",
    "SourceError",
    "OutputError",
    "InvalidAiracKeyError",
    "build_airac_map",
    "build_other_map",
    "collect_contributors",
    "extract_airac_message",
    "extract_contributor",
    "extract_cycle",
    "sort_cycles",
    "split_category",
]
