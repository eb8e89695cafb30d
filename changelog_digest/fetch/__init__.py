"""
Changelog acquisition.

This package reads the changelog from disk or fetches it over HTTP.
"""

from .fetcher import FetchResult, fetch_changelog, fetch_url, read_changelog_file

__all__ = [
    "FetchResult",
    "fetch_url",
    "fetch_changelog",
    "read_changelog_file",
]
