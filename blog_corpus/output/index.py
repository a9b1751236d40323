"""
Published index export for the external site generator.

The index is a JSON array of the published articles in listing order.
Drafts never appear in it; the generator still reaches them through
direct links.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from blog_corpus.core.repository import ArticleRepository
from blog_corpus.core.types import Article


def index_entry(article: Article, root: Path | None = None) -> dict[str, Any]:
    """Build the index record for one article.

    ``path`` is made relative to ``root`` when the article lives below it.
    """
    path_value: str | None = None
    if article.path is not None:
        path = article.path
        if root is not None and path.is_relative_to(root):
            path = path.relative_to(root)
        path_value = path.as_posix()

    return {
        "slug": article.slug,
        "title": article.title,
        "date": article.date.isoformat(),
        "description": article.description,
        "tags": list(article.tags),
        "path": path_value,
    }


def build_published_index(repo: ArticleRepository, root: Path | None = None) -> list[dict[str, Any]]:
    return [index_entry(article, root) for article in repo.list_published()]


def write_published_index(repo: ArticleRepository, index_path: Path, root: Path | None = None) -> Path:
    """Write the published index to ``index_path``.

    Returns:
        Path to the written index file
    """
    entries = build_published_index(repo, root)
    index_path.parent.mkdir(parents=True, exist_ok=True)
    index_path.write_text(f"{json.dumps(entries, ensure_ascii=False, indent=2)}\n", encoding="utf-8")
    return index_path
