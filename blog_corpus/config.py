"""
Configuration management using YAML files and dataclasses.

This module defines all configuration dataclasses and provides loading
from YAML files with defaults. Configuration sections:
- CorpusConfig: Content directory and front matter settings
- ReferenceConfig: Cross-article reference resolution settings
- OutputConfig: Index export settings
- LoggingConfig: Logging behavior
- AppConfig: Root configuration container
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import yaml


@dataclass
class CorpusConfig:
    """Configuration for loading the article corpus.

    Attributes:
        content_dir: Directory holding the article files
        extensions: File suffixes treated as articles
        ignore: File names skipped while walking (generator section files)
        required_keys: Front matter keys every article must define
    """

    content_dir: str = "content"
    extensions: list[str] = field(default_factory=lambda: [".md"])
    ignore: list[str] = field(default_factory=lambda: ["_index.md"])
    required_keys: list[str] = field(default_factory=lambda: ["title", "date", "description"])


@dataclass
class ReferenceConfig:
    """Configuration for cross-article reference resolution.

    Attributes:
        fuzzy: Whether to fall back to fuzzy title matching
        title_match_threshold: Fuzzy match threshold (0-100) for title similarity
    """

    fuzzy: bool = True
    title_match_threshold: int = 90


@dataclass
class OutputConfig:
    """Configuration for index export.

    Attributes:
        index_filename: Default file name of the published index
    """

    index_filename: str = "index.json"


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
    format: str = "jsonl"
    filename: str = "corpus.jsonl"


@dataclass
class AppConfig:
    """Root configuration container aggregating all config sections."""

    corpus: CorpusConfig = field(default_factory=CorpusConfig)
    references: ReferenceConfig = field(default_factory=ReferenceConfig)
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
            data[key].update({k: v for k, v in value.items() if k in data[key]})
        else:
            data[key] = value
    return _fromdict(data)


def _asdict(cfg: AppConfig) -> dict[str, Any]:
    """Convert AppConfig to nested dictionary."""
    return {
        "corpus": {
            "content_dir": cfg.corpus.content_dir,
            "extensions": list(cfg.corpus.extensions),
            "ignore": list(cfg.corpus.ignore),
            "required_keys": list(cfg.corpus.required_keys),
        },
        "references": {
            "fuzzy": cfg.references.fuzzy,
            "title_match_threshold": cfg.references.title_match_threshold,
        },
        "output": {
            "index_filename": cfg.output.index_filename,
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
        corpus=CorpusConfig(**data["corpus"]),
        references=ReferenceConfig(**data["references"]),
        output=OutputConfig(**data["output"]),
        logging=LoggingConfig(**data["logging"]),
    )
