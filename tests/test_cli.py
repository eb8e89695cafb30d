"""Tests for the command-line interface."""

from typer.testing import CliRunner

from changelog_digest import runner
from changelog_digest.cli import app


cli_runner = CliRunner()


def test_cli_writes_report(tmp_path, changelog_file):
    output_path = tmp_path / "report.txt"

    result = cli_runner.invoke(
        app, ["--in", str(changelog_file), "--out", str(output_path), "--log-level", "ERROR"]
    )

    assert result.exit_code == 0, result.output
    assert "Reading from:" in result.output
    assert "Output to:" in result.output
    assert output_path.read_text(encoding="utf-8").startswith("--- AIRACs: ---\n2207:\n")


def test_cli_missing_input_exits_non_zero(tmp_path):
    result = cli_runner.invoke(
        app, ["--in", str(tmp_path / "missing.md"), "--out", str(tmp_path / "out.txt")]
    )

    assert result.exit_code == 1
    assert not (tmp_path / "out.txt").exists()


def test_cli_web_flag_fetches_url(tmp_path, monkeypatch, sample_changelog):
    requested = []

    def fake_fetch(url, fetch_cfg):
        requested.append(url)
        return sample_changelog.encode("utf-8")

    monkeypatch.setattr(runner, "fetch_changelog", fake_fetch)
    output_path = tmp_path / "report.txt"

    result = cli_runner.invoke(
        app,
        ["--web", "--url", "https://example.com/CHANGELOG.md", "--out", str(output_path)],
    )

    assert result.exit_code == 0, result.output
    assert requested == ["https://example.com/CHANGELOG.md"]
    assert "Doe John" in output_path.read_text(encoding="utf-8")
