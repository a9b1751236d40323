"""Slug derivation for content files."""

from __future__ import annotations

import re
from pathlib import Path

BUNDLE_INDEX = "index"


def slugify(text: str) -> str:
    """Convert text to URL-safe slug.

    Args:
        text: The text to slugify

    Returns:
        A lowercase, hyphenated slug, or "untitled" when nothing is left
    """
    slug = text.lower()
    slug = re.sub(r"[^a-z0-9]+", "-", slug)
    slug = slug.strip("-")
    if not slug:
        slug = "untitled"
    return slug


def slug_from_path(path: Path) -> str:
    """Derive an article slug from its file path.

    A page bundle (``rust-closures/index.md``) takes the name of its
    directory, any other file takes its stem.

    Examples:
        >>> slug_from_path(Path("content/blog/rust-closures.md"))
        'rust-closures'
        >>> slug_from_path(Path("content/blog/Rust_Async_Closures/index.md"))
        'rust-async-closures'
    """
    stem = path.stem
    if stem == BUNDLE_INDEX and path.parent.name:
        stem = path.parent.name
    return slugify(stem)
