"""Shared changelog fixtures."""

import pytest


SAMPLE_CHANGELOG = (
    "# Changes from release 2022/06 to 2022/07\n"
    "2. Bug - Corrected Alderney (EGJA) runway coords - thanks to @sdkjsdklfj (John Doe)\n"
    "3. AIRAC (2207) - Updated Cranfield (EGTC) SMR - thanks to @sdfsdf (Doe John)\n"
    "fakeline"
)


@pytest.fixture
def sample_changelog() -> str:
    return SAMPLE_CHANGELOG


@pytest.fixture
def changelog_file(tmp_path):
    path = tmp_path / "changelog.md"
    path.write_text(SAMPLE_CHANGELOG, encoding="utf-8")
    return path
