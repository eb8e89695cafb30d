"""
Configuration management using YAML files and dataclasses.

This module defines all configuration dataclasses and provides loading
from YAML files with defaults. Configuration sections:
- InputConfig: Where the changelog comes from
- FetchConfig: HTTP fetching settings
- OutputConfig: Report destination
- LoggingConfig: Logging behavior
- AppConfig: Root configuration container

The CLI builds one AppConfig per run and passes it down explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import yaml


DEFAULT_CHANGELOG_URL = (
    "https://raw.githubusercontent.com/VATSIM-UK/UK-Sector-File/main/.github/CHANGELOG.md"
)


@dataclass
class InputConfig:
    """Configuration for the changelog source.

    Attributes:
        path: Local changelog file
        use_web: Fetch the changelog from url instead of reading path
        url: Remote changelog location
    """

    path: str = "changelog.md"
    use_web: bool = False
    url: str = DEFAULT_CHANGELOG_URL


@dataclass
class FetchConfig:
    """Configuration for HTTP fetching.

    Attributes:
        timeout_seconds: HTTP request timeout
        trust_env: Whether to respect system proxy settings
        user_agent: HTTP User-Agent header string
    """

    timeout_seconds: float = 20.0
    trust_env: bool = True
    user_agent: str = "changelog-digest/0.1.0"


@dataclass
class OutputConfig:
    """Configuration for output generation.

    Attributes:
        path: File the report is written to
    """

    path: str = "output.txt"


@dataclass
class LoggingConfig:
    """Configuration for logging behavior.

    Attributes:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR")
        console: Whether to log to console
        file: Whether to log to file
        format: Log file format ("jsonl" or "plain")
        filename: Name of the log file
    """

    level: str = "INFO"
    console: bool = True
    file: bool = False
    format: str = "plain"
    filename: str = "changelog_digest.log"


@dataclass
class AppConfig:
    """Root configuration container aggregating all config sections."""

    input: InputConfig = field(default_factory=InputConfig)
    fetch: FetchConfig = field(default_factory=FetchConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: str | None) -> AppConfig:
    """Load configuration from a YAML file with defaults."""
    if not path:
        return AppConfig()

    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    return _merge_config(AppConfig(), raw)


def _merge_config(base: AppConfig, raw: dict[str, Any]) -> AppConfig:
    """Merge raw YAML config into base AppConfig."""
    data = _asdict(base)
    for key, value in raw.items():
        if key not in data:
            continue
        if isinstance(value, dict) and isinstance(data[key], dict):
            data[key].update(value)
        else:
            data[key] = value
    return _fromdict(data)


def _asdict(cfg: AppConfig) -> dict[str, Any]:
    """Convert AppConfig to nested dictionary."""
    return {
        "input": {
            "path": cfg.input.path,
            "use_web": cfg.input.use_web,
            "url": cfg.input.url,
        },
        "fetch": {
            "timeout_seconds": cfg.fetch.timeout_seconds,
            "trust_env": cfg.fetch.trust_env,
            "user_agent": cfg.fetch.user_agent,
        },
        "output": {
            "path": cfg.output.path,
        },
        "logging": {
            "level": cfg.logging.level,
            "console": cfg.logging.console,
            "file": cfg.logging.file,
            "format": cfg.logging.format,
            "filename": cfg.logging.filename,
        },
    }


def _fromdict(data: dict[str, Any]) -> AppConfig:
    """Reconstruct AppConfig from nested dictionary."""
    return AppConfig(
        input=InputConfig(**data["input"]),
        fetch=FetchConfig(**data["fetch"]),
        output=OutputConfig(**data["output"]),
        logging=LoggingConfig(**data["logging"]),
    )


def resolve_source(cfg: InputConfig, explicit_path: bool) -> str:
    """Return "web" or "file" for the configured input.

    The URL is only used when web input is enabled and no local path was
    given explicitly on the command line.
    """
    if cfg.use_web and not explicit_path:
        return "web"
    return "file"
