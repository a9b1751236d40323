"""
Core domain models and business logic.

This package contains the article record, the error hierarchy and the
repository queries, independent of how the corpus is read from disk.
"""

from .types import Article, LoadFailure, LoadResult, ReferenceIssue
from .errors import CorpusError, DuplicateSlugError, FrontMatterError, NotFound, UnresolvedReference
from .slug import slug_from_path, slugify
from .references import extract_references, is_link_target, link_slug
from .repository import ArticleRepository, publication_order

__all__ = [
    "Article",
    "LoadFailure",
    "LoadResult",
    "ReferenceIssue",
    "CorpusError",
    "DuplicateSlugError",
    "FrontMatterError",
    "NotFound",
    "UnresolvedReference",
    "slug_from_path",
    "slugify",
    "extract_references",
    "is_link_target",
    "link_slug",
    "ArticleRepository",
    "publication_order",
]
