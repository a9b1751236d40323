"""
Command-line interface for the article corpus.

Uses Typer to list, inspect and validate a content directory and to
export the published index consumed by the site generator. Supports
loading .env files for the content directory setting.
"""

from __future__ import annotations

from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .config import AppConfig, load_config
from .core.errors import CorpusError
from .core.repository import ArticleRepository
from .output.index import write_published_index
from .utils.logging import setup_logging

app = typer.Typer(add_completion=False, no_args_is_help=True)
console = Console()

CONTENT_ENVVAR = "BLOG_CORPUS_CONTENT_DIR"

ContentOption = typer.Option(
    None,
    "--content",
    "-d",
    envvar=CONTENT_ENVVAR,
    help="Content directory (defaults to corpus.content_dir from config).",
)
ConfigOption = typer.Option(None, "--config", "-c", exists=True, help="YAML config file.")
LogLevelOption = typer.Option(None, "--log-level", help="Logging level.")


@app.callback()
def main() -> None:
    """Inspect and validate a corpus of Markdown articles."""
    # Load environment variables from .env before options read their envvars
    load_dotenv()


def _build_config(config: Path | None, log_level: str | None) -> AppConfig:
    cfg = load_config(str(config) if config else None)
    if log_level:
        cfg.logging.level = log_level
    return cfg


def _load_repository(content: Path | None, cfg: AppConfig) -> tuple[ArticleRepository, Path]:
    content_dir = content or Path(cfg.corpus.content_dir)
    logger = setup_logging(cfg.logging, log_dir=Path.cwd() if cfg.logging.file else None)
    try:
        repo = ArticleRepository.from_directory(content_dir, cfg, logger=logger)
    except FileNotFoundError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]", soft_wrap=True)
        raise typer.Exit(code=2) from exc
    return repo, content_dir


@app.command("list")
def list_articles(
    content: Path | None = ContentOption,
    config: Path | None = ConfigOption,
    log_level: str | None = LogLevelOption,
    drafts: bool = typer.Option(False, "--drafts", help="List drafts instead of published articles."),
):
    """List published articles, newest first."""
    cfg = _build_config(config, log_level)
    repo, _ = _load_repository(content, cfg)
    articles = repo.list_drafts() if drafts else repo.list_published()

    table = Table(title="Drafts" if drafts else "Published articles")
    table.add_column("Date", no_wrap=True)
    table.add_column("Slug", no_wrap=True)
    table.add_column("Title")
    for article in articles:
        table.add_row(article.date.isoformat(), article.slug, article.title)
    console.print(table)
    console.print(f"Total: {len(articles)}")


@app.command()
def show(
    slug: str = typer.Argument(..., help="Slug of the article."),
    content: Path | None = ContentOption,
    config: Path | None = ConfigOption,
    log_level: str | None = LogLevelOption,
):
    """Show the metadata of one article."""
    cfg = _build_config(config, log_level)
    repo, _ = _load_repository(content, cfg)
    try:
        article = repo.get(slug)
        newer, older = repo.neighbors(slug)
    except CorpusError as exc:
        console.print(f"[red]{escape(exc.message)}[/red]")
        raise typer.Exit(code=1) from exc

    console.print(f"[bold]{escape(article.title)}[/bold]")
    console.print(f"Slug: {article.slug}")
    console.print(f"Date: {article.date.isoformat()}")
    console.print(f"Description: {escape(article.description)}")
    console.print(f"Draft: {'yes' if article.draft else 'no'}")
    if article.tags:
        console.print(f"Tags: {', '.join(article.tags)}")
    if article.references:
        console.print(f"References: {', '.join(article.references)}")
    if newer is not None:
        console.print(f"Newer: {newer.slug}")
    if older is not None:
        console.print(f"Older: {older.slug}")


@app.command()
def check(
    content: Path | None = ContentOption,
    config: Path | None = ConfigOption,
    log_level: str | None = LogLevelOption,
):
    """Report malformed articles and unresolved references.

    Exits with status 1 when any problem is found, so a site build can
    stop before publishing broken links.
    """
    cfg = _build_config(config, log_level)
    repo, _ = _load_repository(content, cfg)
    issues = repo.check_references()

    for failure in repo.failures:
        console.print(f"[red]FAIL[/red] {escape(failure.message)}", soft_wrap=True)
        for error in failure.errors:
            console.print(f"    - {escape(error)}", soft_wrap=True)
    for issue in issues:
        console.print(f"[yellow]LINK[/yellow] {issue.from_slug} -> {escape(issue.target)}", soft_wrap=True)

    console.print(
        f"Articles: {len(repo)}  Failures: {len(repo.failures)}  Unresolved references: {len(issues)}"
    )
    if repo.failures or issues:
        raise typer.Exit(code=1)


@app.command("export-index")
def export_index(
    output: Path | None = typer.Option(None, "--output", "-o", help="Index file to write."),
    content: Path | None = ContentOption,
    config: Path | None = ConfigOption,
    log_level: str | None = LogLevelOption,
):
    """Write the JSON index of published articles."""
    cfg = _build_config(config, log_level)
    repo, content_dir = _load_repository(content, cfg)
    index_path = write_published_index(repo, output or Path(cfg.output.index_filename), root=content_dir)
    console.print(f"Index written: {index_path}")


if __name__ == "__main__":
    app()
