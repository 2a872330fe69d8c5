"""Root test configuration: a small on-disk blog shared by pipeline and CLI tests"""

import json
from pathlib import Path

import pytest


POSTS = [
    {
        "id": "hello-world",
        "title": "Hello <World>",
        "author": "Ana & Bia",
        "date": "2026-01-15",
        "category": "Notas",
        "excerpt": "First post.",
        "md": "/posts/hello-world.md",
        "file": "posts/hello-world.html",
    },
    {
        "id": "second",
        "title": "Second",
        "date": "2026-02-01",
        "category": "Code",
        "excerpt": "Code samples.",
    },
    {
        "id": "missing-body",
        "title": "Missing",
        "date": "2025-12-31",
        "category": "Notas",
    },
]

HELLO_MD = """\
---
title: ignored by the renderer
---
# Hello

Some *intro* text.

- one
- two
"""

SECOND_MD = """\
```python
print(1 < 2)
```
"""


@pytest.fixture(name="site")
def site_fixture(tmp_path) -> Path:
    """Site root with data/posts.json and two of the three post bodies."""
    (tmp_path / "data").mkdir()
    (tmp_path / "data" / "posts.json").write_text(json.dumps(POSTS), encoding="utf-8")
    (tmp_path / "posts").mkdir()
    (tmp_path / "posts" / "hello-world.md").write_text(HELLO_MD, encoding="utf-8")
    (tmp_path / "posts" / "second.md").write_text(SECOND_MD, encoding="utf-8")
    return tmp_path
