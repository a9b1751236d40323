from __future__ import annotations

from pathlib import Path

import pytest


RUST_CLOSURES = """+++
title = "Rust closures"
date = 2025-11-30
description = "How closures capture their environment in Rust."
# tags = ["rust", "closures"]
+++

Closures are anonymous functions that can capture their environment.

```rust
let add = |x| x + 1;
```
"""

ASYNC_DRAFT = """+++
title = "Rust async closures"
date = 2026-01-18
description = "A first look at async closures."
draft = true
+++

In the [previous article](@/blog/rust-closures.md) we looked at closures.
"""

ASYNC_PUBLISHED = """+++
title = "Rust async closures"
date = 2026-02-22
description = "Async closures, stabilised."
+++

In the [previous article](@/blog/rust-closures.md) we looked at closures.
See the [Rust reference](https://doc.rust-lang.org/reference/) for details.
"""


def write_article(directory: Path, name: str, text: str) -> Path:
    path = directory / name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def content_dir(tmp_path: Path) -> Path:
    """A small blog corpus: one closure article and a draft/published async pair."""
    blog = tmp_path / "content" / "blog"
    write_article(blog, "rust-closures.md", RUST_CLOSURES)
    write_article(blog, "rust-async-closures-draft.md", ASYNC_DRAFT)
    write_article(blog, "rust-async-closures.md", ASYNC_PUBLISHED)
    write_article(blog, "_index.md", '+++\ntitle = "Blog"\nsort_by = "date"\n+++\n')
    return tmp_path / "content"


@pytest.fixture
def article_writer():
    return write_article


@pytest.fixture
def rust_closures_text() -> str:
    return RUST_CLOSURES
