"""Exceptions raised by the pipeline. Only the CLI turns them into exit codes."""

from __future__ import annotations


class ChangelogError(Exception):
    """Base class for fatal pipeline failures."""


class SourceError(ChangelogError):
    """The changelog could not be read or fetched."""


class OutputError(ChangelogError):
    """The report destination could not be created or written."""


class InvalidAiracKeyError(ChangelogError):
    """An AIRAC grouping key is not a four-digit cycle number."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Unable to convert AIRAC key {key!r} to a cycle number")
        self.key = key
