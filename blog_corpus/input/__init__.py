"""
Input handling: front matter decoding and corpus loading.
"""

from .frontmatter import FrontMatter, parse_front_matter, split_front_matter
from .loader import list_article_files, load_article, load_corpus

__all__ = [
    "FrontMatter",
    "parse_front_matter",
    "split_front_matter",
    "list_article_files",
    "load_article",
    "load_corpus",
]
