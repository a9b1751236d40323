"""
In-memory article repository.

The repository holds every loaded Article keyed by slug and answers the
queries a static-site generator needs: the published listing, lookup by
slug, and resolution of the inline references articles make to each other.
The corpus is read once and never mutated afterwards.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator

from rapidfuzz import fuzz

from blog_corpus.config import AppConfig, ReferenceConfig
from blog_corpus.core.errors import DuplicateSlugError, NotFound, UnresolvedReference
from blog_corpus.core.references import is_link_target, link_slug
from blog_corpus.core.slug import slugify
from blog_corpus.core.types import Article, LoadFailure, ReferenceIssue
from blog_corpus.input.loader import load_corpus
from blog_corpus.utils.logging import log_event, log_warning


def publication_order(articles: Iterable[Article]) -> list[Article]:
    """Sort articles newest first, ties broken by slug ascending."""
    by_slug = sorted(articles, key=lambda article: article.slug)
    # sorted() is stable with reverse=True, so equal dates keep slug order
    return sorted(by_slug, key=lambda article: article.date, reverse=True)


class ArticleRepository:
    """Read-only collection of articles addressed by slug.

    Attributes:
        failures: Files that could not be loaded, when built from a directory
    """

    def __init__(
        self,
        articles: Iterable[Article],
        cfg: ReferenceConfig | None = None,
        failures: list[LoadFailure] | None = None,
        logger: logging.Logger | None = None,
    ):
        self._cfg = cfg or ReferenceConfig()
        self._logger = logger
        self._articles: dict[str, Article] = {}
        for article in articles:
            existing = self._articles.get(article.slug)
            if existing is not None:
                raise DuplicateSlugError(
                    article.slug,
                    article.path or Path(article.slug),
                    existing.path or Path(existing.slug),
                )
            self._articles[article.slug] = article
        self.failures = list(failures or [])

    @classmethod
    def from_directory(
        cls,
        content_dir: Path,
        cfg: AppConfig | None = None,
        logger: logging.Logger | None = None,
    ) -> "ArticleRepository":
        """Load every article under ``content_dir``.

        Files with malformed front matter are skipped and kept on
        ``failures``; they never abort the load.
        """
        cfg = cfg or AppConfig()
        result = load_corpus(content_dir, cfg.corpus, logger=logger)
        return cls(result.articles, cfg=cfg.references, failures=result.failures, logger=logger)

    def __len__(self) -> int:
        return len(self._articles)

    def __iter__(self) -> Iterator[Article]:
        for slug in sorted(self._articles):
            yield self._articles[slug]

    def __contains__(self, slug: object) -> bool:
        return slug in self._articles

    def list_published(self) -> list[Article]:
        """Return non-draft articles, newest first, ties by slug."""
        return publication_order(a for a in self._articles.values() if not a.draft)

    def list_drafts(self) -> list[Article]:
        """Return draft articles in the same order as the published listing."""
        return publication_order(a for a in self._articles.values() if a.draft)

    def get(self, slug: str) -> Article:
        """Return the article for ``slug``.

        Raises:
            NotFound: If no article has this slug
        """
        try:
            return self._articles[slug]
        except KeyError:
            raise NotFound(slug) from None

    def with_tag(self, tag: str) -> list[Article]:
        """Return published articles carrying ``tag``, in listing order."""
        return [article for article in self.list_published() if tag in article.tags]

    def neighbors(self, slug: str) -> tuple[Article | None, Article | None]:
        """Return the (newer, older) published articles around ``slug``.

        Drafts are not part of the published timeline and have no neighbors.

        Raises:
            NotFound: If no article has this slug
        """
        article = self.get(slug)
        if article.draft:
            return None, None
        listing = self.list_published()
        index = next(i for i, item in enumerate(listing) if item.slug == slug)
        newer = listing[index - 1] if index > 0 else None
        older = listing[index + 1] if index + 1 < len(listing) else None
        return newer, older

    def resolve_reference(self, from_slug: str, target: str) -> Article:
        """Resolve an inline cross-article reference.

        The target may be a slug, a Markdown link target or an article
        title. Matching is tried in order: slug, exact title
        (case-insensitive), then fuzzy title similarity when enabled.
        Drafts are valid targets, but a published article wins a title tie.

        Args:
            from_slug: Slug of the article making the reference
            target: Slug, link or title being referenced

        Returns:
            The referenced Article

        Raises:
            NotFound: If ``from_slug`` is not in the repository
            UnresolvedReference: If nothing matches ``target``
        """
        self.get(from_slug)

        for candidate in _slug_candidates(target):
            if candidate in self._articles:
                return self._articles[candidate]

        # Titles are only matched for targets not written as links
        wanted = "" if is_link_target(target) else target.strip().lower()
        if wanted:
            for article in self._title_candidates(exclude=from_slug):
                if article.title.strip().lower() == wanted:
                    return article

        if self._cfg.fuzzy and wanted:
            match = self._best_title_match(wanted, exclude=from_slug)
            if match is not None:
                log_event(
                    self._logger,
                    "Reference resolved by title similarity",
                    event="reference_fuzzy_match",
                    from_slug=from_slug,
                    target=target,
                    slug=match.slug,
                )
                return match

        raise UnresolvedReference(from_slug, target)

    def check_references(self) -> list[ReferenceIssue]:
        """Resolve every outbound reference and report the ones that fail."""
        issues: list[ReferenceIssue] = []
        for article in self:
            for target in article.references:
                try:
                    self.resolve_reference(article.slug, target)
                except UnresolvedReference as exc:
                    issues.append(ReferenceIssue(from_slug=article.slug, target=target, message=exc.message))
                    log_warning(
                        self._logger,
                        exc.message,
                        event="reference_unresolved",
                        from_slug=article.slug,
                        target=target,
                    )
        return issues

    def _best_title_match(self, wanted: str, exclude: str) -> Article | None:
        best: Article | None = None
        best_score = -1.0
        for article in self._title_candidates(exclude):
            score = fuzz.ratio(wanted, article.title.strip().lower())
            if score >= self._cfg.title_match_threshold and score > best_score:
                best = article
                best_score = score
        return best

    def _title_candidates(self, exclude: str) -> list[Article]:
        # Published articles win title ties over drafts, then slug order
        others = [self._articles[slug] for slug in sorted(self._articles) if slug != exclude]
        return sorted(others, key=lambda article: article.draft)


def _slug_candidates(target: str) -> list[str]:
    candidates: list[str] = []
    for candidate in (link_slug(target), slugify(target) if target.strip() else None):
        if candidate and candidate not in candidates:
            candidates.append(candidate)
    return candidates
