"""
Blog Corpus - article metadata core for a static site.

This package loads a directory of Markdown articles with front matter and
answers the queries a static-site generator needs: the published listing,
lookup by slug and resolution of cross-article references.

Main entry point is the CLI via the `blog-corpus` command.

Example:
    $ blog-corpus check -d content/blog
"""

__all__ = [
    "__version__",
    "Article",
    "ArticleRepository",
    "NotFound",
    "UnresolvedReference",
    "load_corpus",
    "slugify",
]
__version__ = "0.1.0"

from .core.errors import NotFound, UnresolvedReference
from .core.repository import ArticleRepository
from .core.slug import slugify
from .core.types import Article
from .input.loader import load_corpus
