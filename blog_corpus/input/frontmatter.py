"""
Front matter parser for article files.

An article starts with a delimited metadata block followed by a blank line
and the Markdown body. Two delimiters are understood:
- ``+++`` fences around TOML (``title = "Rust closures"``)
- ``---`` fences around YAML (``title: Rust closures``)

Commented-out keys (``# tags = [...]``) are simply absent after decoding.
"""

from __future__ import annotations

import re
import tomllib
from dataclasses import dataclass, field
from datetime import date, datetime
from pathlib import Path
from typing import Any

import yaml

from blog_corpus.core.errors import FrontMatterError


TOML_FENCE = "+++"
YAML_FENCE = "---"
KNOWN_KEYS = {"title", "date", "description", "draft", "tags", "taxonomies", "references"}
DEFAULT_REQUIRED_KEYS = ("title", "date", "description")

_BOM = "\ufeff"
_TRUE_STRINGS = {"true", "yes"}
_FALSE_STRINGS = {"false", "no"}
_DATE_PREFIX_RE = re.compile(r"^\d{4}-\d{2}-\d{2}")


@dataclass
class FrontMatter:
    """Decoded metadata of one article.

    Attributes:
        title: Article headline
        date: Publication date
        description: One-line summary
        draft: Draft flag, False when absent
        tags: Active tags, empty when absent or commented out
        references: Slugs listed explicitly in front matter
        extra: Every other key, untouched
    """
    title: str
    date: date
    description: str = ""
    draft: bool = False
    tags: list[str] = field(default_factory=list)
    references: list[str] = field(default_factory=list)
    extra: dict[str, Any] = field(default_factory=dict)


def split_front_matter(text: str, path: Path) -> tuple[str, str, str]:
    """Split raw file text into (format, metadata block, body).

    Args:
        text: Full file content
        path: Source path, used in error messages

    Returns:
        A tuple of ("toml" or "yaml", raw block, body)

    Raises:
        FrontMatterError: If the file has no complete front matter block
    """
    lines = text.lstrip(_BOM).splitlines(keepends=True)
    if not lines:
        raise FrontMatterError(path, f"{path}: empty file")

    opening = lines[0].strip()
    if opening == TOML_FENCE:
        fmt = "toml"
    elif opening == YAML_FENCE:
        fmt = "yaml"
    else:
        raise FrontMatterError(path, f"{path}: missing front matter delimiter")

    for index in range(1, len(lines)):
        if lines[index].strip() == opening:
            block = "".join(lines[1:index])
            body_lines = lines[index + 1:]
            # A single blank line separates the block from the body
            if body_lines and not body_lines[0].strip():
                body_lines = body_lines[1:]
            return fmt, block, "".join(body_lines)

    raise FrontMatterError(path, f"{path}: unterminated front matter block")


def decode_block(fmt: str, block: str, path: Path) -> dict[str, Any]:
    """Decode a raw front matter block into a dictionary."""
    try:
        if fmt == "toml":
            data = tomllib.loads(block)
        else:
            data = yaml.safe_load(block) or {}
    except (tomllib.TOMLDecodeError, yaml.YAMLError, ValueError) as exc:
        # PyYAML raises a plain ValueError for timestamps like 2026-13-45
        raise FrontMatterError(path, f"{path}: invalid {fmt.upper()} front matter", [str(exc)]) from exc

    if not isinstance(data, dict):
        raise FrontMatterError(path, f"{path}: front matter is not a key/value table")
    return data


def parse_front_matter(
    text: str,
    path: Path,
    required_keys: tuple[str, ...] | list[str] = DEFAULT_REQUIRED_KEYS,
) -> tuple[FrontMatter, str]:
    """Parse a complete article file.

    Every problem in the metadata is collected before raising, so one
    error report lists all of them.

    Args:
        text: Full file content
        path: Source path, used in error messages
        required_keys: Keys that must be present

    Returns:
        A tuple of (FrontMatter, body)

    Raises:
        FrontMatterError: If the block is missing, undecodable, lacks a
            required key or holds a value of the wrong type
    """
    fmt, block, body = split_front_matter(text, path)
    data = decode_block(fmt, block, path)

    errors: list[str] = []
    for key in required_keys:
        if key not in data or data[key] is None:
            errors.append(f"missing required key '{key}'")

    title = _coerce_text(data.get("title"), "title", errors)
    description = _coerce_text(data.get("description"), "description", errors)
    published = _coerce_date(data.get("date"), errors)
    draft = _coerce_bool(data.get("draft"), "draft", errors)
    tags = _coerce_tags(data, errors)
    references = _coerce_str_list(data.get("references"), "references", errors)
    # Ordering needs a date even when configuration does not require one
    if published is None and not errors:
        errors.append("missing required key 'date'")

    if errors:
        raise FrontMatterError(path, f"{path}: malformed front matter ({'; '.join(errors)})", errors)

    extra = {key: value for key, value in data.items() if key not in KNOWN_KEYS}
    taxonomies = data.get("taxonomies")
    if isinstance(taxonomies, dict):
        others = {key: value for key, value in taxonomies.items() if key != "tags"}
        if others:
            extra["taxonomies"] = others

    return (
        FrontMatter(
            title=title or "",
            date=published,
            description=description or "",
            draft=draft,
            tags=tags,
            references=references,
            extra=extra,
        ),
        body,
    )


def _coerce_text(value: Any, key: str, errors: list[str]) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        errors.append(f"'{key}' must be a string")
        return None
    return value.strip()


def _coerce_date(value: Any, errors: list[str]) -> date | None:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        raw = value.strip()
        try:
            if len(raw) > 10 and _DATE_PREFIX_RE.match(raw):
                return datetime.fromisoformat(raw.replace("Z", "+00:00")).date()
            return date.fromisoformat(raw)
        except ValueError:
            errors.append(f"unparseable date '{value}'")
            return None
    errors.append(f"unparseable date '{value}'")
    return None


def _coerce_bool(value: Any, key: str, errors: list[str]) -> bool:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    errors.append(f"'{key}' must be true or false")
    return False


def _coerce_tags(data: dict[str, Any], errors: list[str]) -> list[str]:
    if "tags" in data:
        return _coerce_str_list(data["tags"], "tags", errors)
    taxonomies = data.get("taxonomies")
    if isinstance(taxonomies, dict) and "tags" in taxonomies:
        return _coerce_str_list(taxonomies["tags"], "tags", errors)
    return []


def _coerce_str_list(value: Any, key: str, errors: list[str]) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value.strip()] if value.strip() else []
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        result: list[str] = []
        for item in value:
            item = item.strip()
            if item and item not in result:
                result.append(item)
        return result
    errors.append(f"'{key}' must be a list of strings")
    return []
