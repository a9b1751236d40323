"""
Corpus loader.

Walks a content directory and turns each article file into an Article.
Failures are isolated per file: a malformed article is recorded as a
LoadFailure and logged, and the rest of the corpus still loads.
"""

from __future__ import annotations

import logging
from pathlib import Path

from blog_corpus.config import CorpusConfig
from blog_corpus.core.errors import CorpusError, DuplicateSlugError, FrontMatterError
from blog_corpus.core.references import extract_references
from blog_corpus.core.slug import slug_from_path
from blog_corpus.core.types import Article, LoadFailure, LoadResult
from blog_corpus.input.frontmatter import parse_front_matter
from blog_corpus.utils.logging import log_debug, log_event, log_warning


def list_article_files(content_dir: Path, cfg: CorpusConfig) -> list[Path]:
    """List article files below ``content_dir`` in path order."""
    extensions = {ext.lower() for ext in cfg.extensions}
    ignored = set(cfg.ignore)
    return sorted(
        path
        for path in content_dir.rglob("*")
        if path.is_file() and path.suffix.lower() in extensions and path.name not in ignored
    )


def load_article(path: Path, cfg: CorpusConfig) -> Article:
    """Load a single article file.

    Raises:
        FrontMatterError: If the file cannot be read or its front matter is malformed
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise FrontMatterError(path, f"{path}: unreadable file", [str(exc)]) from exc

    meta, body = parse_front_matter(text, path, cfg.required_keys)

    references = list(meta.references)
    for slug in extract_references(body):
        if slug not in references:
            references.append(slug)

    return Article(
        slug=slug_from_path(path),
        title=meta.title,
        date=meta.date,
        description=meta.description,
        draft=meta.draft,
        tags=meta.tags,
        body=body,
        references=references,
        path=path,
        extra=meta.extra,
    )


def load_corpus(
    content_dir: Path,
    cfg: CorpusConfig | None = None,
    logger: logging.Logger | None = None,
) -> LoadResult:
    """Load every article under ``content_dir``.

    The first file in path order claims a slug; later files mapping to the
    same slug are reported as failures.

    Args:
        content_dir: Root of the content tree
        cfg: Corpus settings, defaults when None
        logger: Optional logger for load events

    Returns:
        LoadResult with the loaded articles and the per-file failures

    Raises:
        FileNotFoundError: If ``content_dir`` does not exist
    """
    cfg = cfg or CorpusConfig()
    if not content_dir.is_dir():
        raise FileNotFoundError(f"Content directory not found: {content_dir}")

    result = LoadResult()
    claimed: dict[str, Path] = {}

    for path in list_article_files(content_dir, cfg):
        try:
            article = load_article(path, cfg)
            if article.slug in claimed:
                raise DuplicateSlugError(article.slug, path, claimed[article.slug])
        except CorpusError as exc:
            errors = getattr(exc, "errors", [])
            result.failures.append(LoadFailure(path=path, message=exc.message, errors=list(errors)))
            log_warning(logger, exc.message, event="article_load_failed", path=str(path))
            continue

        claimed[article.slug] = path
        result.articles.append(article)
        log_debug(
            logger,
            "Article loaded",
            event="article_loaded",
            slug=article.slug,
            draft=article.draft,
            references=len(article.references),
        )

    log_event(
        logger,
        "Corpus loaded",
        event="corpus_loaded",
        articles=len(result.articles),
        failures=len(result.failures),
    )
    return result
