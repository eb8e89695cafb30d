"""
Input parsing utilities.

This package turns the raw changelog text into classified change lines.
"""

from .parser import classify_changes, scan_changes, strip_attribution

__all__ = ["scan_changes", "classify_changes", "strip_attribution"]
