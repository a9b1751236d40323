"""
Outbound reference extraction from article bodies.

Articles point at each other with ordinary Markdown links ("see the
previous article"). The forms seen in generator content are:
- internal links: ``[previous article](@/blog/rust-closures.md)``
- relative or rooted links: ``(../rust-closures/)``, ``(/blog/rust-closures#intro)``
- reference definitions: ``[prev]: rust-closures.md``

External URLs, mailto links, pure anchors and links to non-page files
(images, archives) are not references.
"""

from __future__ import annotations

import re
from pathlib import PurePosixPath

from .slug import slugify

# Matches [text](target "optional title") and ![alt](target)
INLINE_LINK_RE = re.compile(r"(!?)\[[^\]]*\]\(\s*<?([^)\s>]+)>?(?:\s+\"[^\"]*\")?\s*\)")
# Matches "[label]: target" reference definitions; "[^1]:" footnotes are not links
DEFINITION_RE = re.compile(r"^\s{0,3}\[(?!\^)[^\]]+\]:\s*<?(\S+?)>?(?:\s+.*)?$", re.MULTILINE)
# A fence may be indented up to three spaces and closes on a run at least as long
FENCE_RE = re.compile(r"^ {0,3}(`{3,}(?!`)|~{3,}(?!~)).*?^ {0,3}\1[`~]*[ \t]*$", re.MULTILINE | re.DOTALL)
INLINE_CODE_RE = re.compile(r"`[^`\n]*`")
SCHEME_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*:")

INTERNAL_PREFIX = "@/"
PAGE_SUFFIXES = {"", ".md", ".html"}
INDEX_NAMES = {"index", "_index"}


def link_slug(target: str) -> str | None:
    """Reduce a link target to the slug of the article it points at.

    Args:
        target: The raw link target from Markdown

    Returns:
        The slug, or None when the target is not a link to an article

    Examples:
        >>> link_slug("@/blog/rust-closures.md")
        'rust-closures'
        >>> link_slug("../rust-async-closures/index.md#why")
        'rust-async-closures'
        >>> link_slug("https://doc.rust-lang.org/book/") is None
        True
    """
    raw = target.strip()
    raw = raw.split("#", 1)[0].split("?", 1)[0]
    if raw.startswith(INTERNAL_PREFIX):
        raw = raw[len(INTERNAL_PREFIX):]
    elif SCHEME_RE.match(raw) or raw.startswith("//"):
        return None

    path = PurePosixPath(raw.rstrip("/"))
    name = path.name
    if not name or name in {".", ".."}:
        return None

    suffix = path.suffix.lower()
    if suffix not in PAGE_SUFFIXES:
        return None
    stem = path.stem if suffix else name
    if stem in INDEX_NAMES:
        stem = path.parent.name
        if not stem or stem in {".", ".."}:
            return None
    return slugify(stem)


def is_link_target(target: str) -> bool:
    """Return True when ``target`` is written as a link rather than a title."""
    raw = target.strip()
    return raw.startswith(INTERNAL_PREFIX) or "/" in raw or raw.lower().endswith(".md")


def extract_references(body: str) -> list[str]:
    """Collect the slugs a body links to, in order of first appearance.

    Links inside fenced code blocks and inline code spans are ignored.
    """
    text = FENCE_RE.sub("", body)
    text = INLINE_CODE_RE.sub("", text)

    found: list[tuple[int, str]] = []
    for match in INLINE_LINK_RE.finditer(text):
        if match.group(1):
            continue
        found.append((match.start(), match.group(2)))
    for match in DEFINITION_RE.finditer(text):
        found.append((match.start(), match.group(1)))
    found.sort(key=lambda item: item[0])

    slugs: list[str] = []
    for _, target in found:
        slug = link_slug(target)
        if slug and slug not in slugs:
            slugs.append(slug)
    return slugs
