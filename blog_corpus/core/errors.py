"""Custom exceptions for the article corpus."""

from pathlib import Path


class CorpusError(Exception):
    """Base exception for all corpus errors."""

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class NotFound(CorpusError):
    """Raised when a slug is absent from the repository."""

    def __init__(self, slug: str):
        self.slug = slug
        super().__init__(f"Article not found: {slug}")


class UnresolvedReference(CorpusError):
    """Raised when an inline reference matches no article."""

    def __init__(self, from_slug: str, target: str):
        self.from_slug = from_slug
        self.target = target
        super().__init__(f"Unresolved reference from {from_slug!r} to {target!r}")


class FrontMatterError(CorpusError):
    """Raised when an article's front matter is missing or malformed."""

    def __init__(self, path: Path, message: str, errors: list | None = None):
        self.path = path
        self.errors = errors or []
        super().__init__(message)


class DuplicateSlugError(CorpusError):
    """Raised when two content files map to the same slug."""

    def __init__(self, slug: str, path: Path, existing: Path):
        self.slug = slug
        self.path = path
        self.existing = existing
        super().__init__(f"{path}: Duplicate slug {slug!r}, already defined by {existing}")
