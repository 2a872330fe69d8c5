"""Shared fixtures for core unit tests"""

import pytest


SAMPLE_MD = """\
# Post title

An intro paragraph with **bold** and a [link](https://example.com).
Second line of the intro.

## Steps

1. first
2. second
   - detail

> quoted *text*
> across lines

```python
if a < b and c:
    print("**not bold**")
```

---

The end.
"""


@pytest.fixture(name="sample_md")
def sample_md_fixture():
    return SAMPLE_MD
