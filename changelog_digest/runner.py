"""
Main pipeline orchestration for the changelog digest.

This module coordinates the entire workflow:
1. Read the changelog from disk or fetch it over HTTP
2. Scan the newest release for numbered changes
3. Split changes into AIRAC and other groups
4. Extract cycles, categories and contributors
5. Write the text report

Every fatal condition is raised as a ChangelogError for the caller to handle.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path

from rich.console import Console

from .config import AppConfig, resolve_source
from .core.extractors import build_airac_map, build_other_map, collect_contributors, sort_cycles
from .core.types import Changelog
from .fetch.fetcher import fetch_changelog, read_changelog_file
from .input.parser import classify_changes, scan_changes
from .logging_utils import log_event, setup_logging
from .output.renderer import write_report


@dataclass
class RunStats:
    """Summary of one pipeline run.

    Attributes:
        source: The file path or URL the changelog was read from
        output_path: Where the report was written
        changes: Number of changes found in the newest release
        airacs: Number of distinct AIRAC cycles
        categories: Number of distinct other categories
        contributors: Number of distinct contributors
        elapsed: Wall-clock seconds taken
    """
    source: str
    output_path: Path
    changes: int = 0
    airacs: int = 0
    categories: int = 0
    contributors: int = 0
    elapsed: float = 0.0


def generate_changelog(data: bytes, logger: logging.Logger | None = None) -> Changelog:
    """Regroup a raw changelog document.

    Args:
        data: The full changelog document
        logger: Receives diagnostics for malformed AIRAC changes

    Raises:
        InvalidAiracKeyError: If a cycle key cannot be ordered
    """
    text = data.decode("utf-8", errors="replace")
    changelog = Changelog()
    changelog.changes = scan_changes(text)
    changelog.airac_list, changelog.other_list = classify_changes(changelog.changes)
    changelog.airac_map = build_airac_map(changelog.airac_list, logger)
    changelog.airacs = sort_cycles(changelog.airac_map)
    changelog.other_map, changelog.other_categories = build_other_map(changelog.other_list)
    changelog.contributors = collect_contributors(changelog.changes)
    return changelog


def source_location(cfg: AppConfig, explicit_path: bool = False) -> str:
    """Return the URL or file path the changelog will be read from."""
    if resolve_source(cfg.input, explicit_path) == "web":
        return cfg.input.url
    return cfg.input.path


def load_document(cfg: AppConfig, explicit_path: bool = False) -> bytes:
    """Read the configured changelog.

    Raises:
        SourceError: If the changelog cannot be read or fetched
    """
    if resolve_source(cfg.input, explicit_path) == "web":
        return fetch_changelog(cfg.input.url, cfg.fetch)
    return read_changelog_file(Path(cfg.input.path))


def run_pipeline(
    cfg: AppConfig,
    console: Console | None = None,
    explicit_path: bool = False,
) -> RunStats:
    """Run the full pipeline and write the report.

    Args:
        cfg: Configuration for this run
        console: Receives progress messages, if given
        explicit_path: Whether the input path was given on the command line

    Returns:
        RunStats describing what was written
    """
    start = time.perf_counter()
    logger = setup_logging(cfg.logging)
    source = source_location(cfg, explicit_path)
    if console is not None:
        console.print(f"Reading from: {source}")

    data = load_document(cfg, explicit_path)
    changelog = generate_changelog(data, logger)
    output_path = Path(cfg.output.path)
    write_report(changelog, output_path)

    stats = RunStats(
        source=source,
        output_path=output_path,
        changes=len(changelog.changes),
        airacs=len(changelog.airacs),
        categories=len(changelog.other_categories),
        contributors=len(changelog.contributors),
        elapsed=time.perf_counter() - start,
    )
    log_event(
        logger,
        "Report written",
        source=stats.source,
        output_path=str(stats.output_path),
        changes=stats.changes,
        airacs=stats.airacs,
        categories=stats.categories,
        contributors=stats.contributors,
    )
    return stats
