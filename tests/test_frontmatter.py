"""Tests for front matter parsing."""

from datetime import date
from pathlib import Path

import pytest

from blog_corpus.core.errors import FrontMatterError
from blog_corpus.input.frontmatter import parse_front_matter, split_front_matter

PATH = Path("content/blog/example.md")


def test_parse_toml_front_matter():
    """TOML blocks between +++ fences are decoded and the body kept verbatim"""
    text = (
        "+++\n"
        'title = "Rust closures"\n'
        "date = 2025-11-30\n"
        'description = "Capturing the environment."\n'
        "+++\n"
        "\n"
        "Body line one.\n"
        "\n"
        "Body line two.\n"
    )

    meta, body = parse_front_matter(text, PATH)

    assert meta.title == "Rust closures"
    assert meta.date == date(2025, 11, 30)
    assert meta.description == "Capturing the environment."
    assert meta.draft is False
    assert meta.tags == []
    assert body == "Body line one.\n\nBody line two.\n"


def test_parse_yaml_front_matter():
    """YAML blocks between --- fences are decoded too"""
    text = (
        "---\n"
        "title: Rust async closures\n"
        "date: 2026-02-22\n"
        "description: Async closures, stabilised.\n"
        "draft: false\n"
        "tags: [rust, async]\n"
        "---\n"
        "\n"
        "Body\n"
    )

    meta, body = parse_front_matter(text, PATH)

    assert meta.title == "Rust async closures"
    assert meta.date == date(2026, 2, 22)
    assert meta.tags == ["rust", "async"]
    assert body == "Body\n"


def test_commented_out_tags_are_inactive():
    text = (
        "+++\n"
        'title = "T"\n'
        "date = 2026-01-18\n"
        'description = "D"\n'
        "draft = true\n"
        '# tags = ["rust"]\n'
        "+++\n"
    )

    meta, body = parse_front_matter(text, PATH)

    assert meta.draft is True
    assert meta.tags == []
    assert body == ""


def test_taxonomy_tags_and_extra_keys():
    text = (
        "+++\n"
        'title = "T"\n'
        'date = "2026-01-18T09:30:00Z"\n'
        'description = "D"\n'
        'template = "page.html"\n'
        "[taxonomies]\n"
        'tags = ["rust", "closures"]\n'
        'categories = ["programming"]\n'
        "+++\n"
    )

    meta, _ = parse_front_matter(text, PATH)

    assert meta.date == date(2026, 1, 18)
    assert meta.tags == ["rust", "closures"]
    assert meta.extra == {"template": "page.html", "taxonomies": {"categories": ["programming"]}}


def test_missing_required_keys_are_all_reported():
    text = "+++\ndate = 2026-01-18\n+++\n\nBody\n"

    with pytest.raises(FrontMatterError) as excinfo:
        parse_front_matter(text, PATH)

    assert "missing required key 'title'" in excinfo.value.errors
    assert "missing required key 'description'" in excinfo.value.errors
    assert excinfo.value.path == PATH


def test_required_keys_are_configurable():
    text = '+++\ntitle = "T"\ndate = 2026-01-18\n+++\n'

    meta, _ = parse_front_matter(text, PATH, required_keys=["title", "date"])

    assert meta.description == ""


def test_date_is_always_required_for_ordering():
    text = '+++\ntitle = "T"\n+++\n'

    with pytest.raises(FrontMatterError) as excinfo:
        parse_front_matter(text, PATH, required_keys=["title"])

    assert excinfo.value.errors == ["missing required key 'date'"]


def test_unparseable_date():
    text = '+++\ntitle = "T"\ndate = "next tuesday"\ndescription = "D"\n+++\n'

    with pytest.raises(FrontMatterError) as excinfo:
        parse_front_matter(text, PATH)

    assert excinfo.value.errors == ["unparseable date 'next tuesday'"]


def test_invalid_draft_value():
    text = '+++\ntitle = "T"\ndate = 2026-01-18\ndescription = "D"\ndraft = "maybe"\n+++\n'

    with pytest.raises(FrontMatterError) as excinfo:
        parse_front_matter(text, PATH)

    assert excinfo.value.errors == ["'draft' must be true or false"]


def test_invalid_toml_is_reported():
    text = "+++\ntitle = \n+++\n"

    with pytest.raises(FrontMatterError) as excinfo:
        parse_front_matter(text, PATH)

    assert "invalid TOML front matter" in excinfo.value.message


def test_split_requires_opening_delimiter():
    with pytest.raises(FrontMatterError, match="missing front matter delimiter"):
        split_front_matter("# Just markdown\n", PATH)


def test_split_requires_closing_delimiter():
    with pytest.raises(FrontMatterError, match="unterminated front matter block"):
        split_front_matter('+++\ntitle = "T"\n', PATH)


def test_split_ignores_byte_order_mark():
    fmt, block, body = split_front_matter('\ufeff+++\ntitle = "T"\n+++\nBody\n', PATH)

    assert fmt == "toml"
    assert block == 'title = "T"\n'
    assert body == "Body\n"


def test_invalid_yaml_is_reported():
    text = "---\ntitle: [unclosed\n---\n"

    with pytest.raises(FrontMatterError) as excinfo:
        parse_front_matter(text, PATH)

    assert "invalid YAML front matter" in excinfo.value.message


def test_impossible_yaml_date_is_reported():
    """YAML timestamps that are not real dates fail like any other bad block"""
    text = "---\ntitle: T\ndate: 2026-02-30\ndescription: D\n---\n"

    with pytest.raises(FrontMatterError) as excinfo:
        parse_front_matter(text, PATH)

    assert "invalid YAML front matter" in excinfo.value.message
