"""
Core data types for the article corpus.

This module defines the records shared by the loader and the repository:
- Article: One content file with its front matter and body
- LoadFailure: A content file that could not be turned into an Article
- LoadResult: Outcome of loading a content directory
- ReferenceIssue: An outbound reference that resolves to no article
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Any


@dataclass
class Article:
    """Represents a single article of the corpus.

    Attributes:
        slug: Unique identifier derived from the file name
        title: Human-readable headline
        date: Publication date
        description: One-line summary
        draft: Whether the article is excluded from published listings
        tags: Tags from front matter (usually empty, the corpus comments them out)
        body: Raw Markdown body, opaque to this package
        references: Slugs of other articles this one links to
        path: Source file the article was loaded from
        extra: Remaining front matter keys, kept for the site generator
    """
    slug: str
    title: str
    date: date
    description: str = ""
    draft: bool = False
    tags: list[str] = field(default_factory=list)
    body: str = ""
    references: list[str] = field(default_factory=list)
    path: Path | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    @property
    def published(self) -> bool:
        return not self.draft


@dataclass
class LoadFailure:
    """A content file skipped during loading.

    Attributes:
        path: The offending file
        message: Human-readable reason
        errors: Individual problems found (e.g. each missing key)
    """
    path: Path
    message: str
    errors: list[str] = field(default_factory=list)


@dataclass
class LoadResult:
    """Articles loaded from a directory plus the files that failed."""
    articles: list[Article] = field(default_factory=list)
    failures: list[LoadFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures


@dataclass
class ReferenceIssue:
    """An outbound reference that could not be resolved."""
    from_slug: str
    target: str
    message: str
