"""
Changelog Digest - regroups a sector-file changelog release.

This package reads the newest release from a changelog (local file or
URL) and writes a text report of AIRAC changes grouped by cycle, other
changes grouped by category, and the list of contributors.

Main entry point is the CLI via the `changelog-digest` command.

Example:
    $ changelog-digest --in CHANGELOG.md --out report.txt
"""

__all__ = ["__version__", "Changelog", "generate_changelog", "render_report"]
__version__ = "0.1.0"

from .core.types import Changelog
from .output.renderer import render_report
from .runner import generate_changelog
