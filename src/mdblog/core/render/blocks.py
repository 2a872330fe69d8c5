"""Line-anchored block transforms: newlines, headings, rules, and paragraphs"""

import re

from mdblog.core.render.extract import CODE_TOKEN_RE


# Longest marker run first so '######' is never read as a level-1 heading.
HEADING_RES: list[tuple[int, re.Pattern]] = [
    (level, re.compile(rf'^{"#" * level}[ \t]*(.*)$', re.MULTILINE))
    for level in range(6, 0, -1)
]
HR_RE = re.compile(r'^---$', re.MULTILINE)
PARAGRAPH_SPLIT_RE = re.compile(r'\n\s*\n')
BLOCK_TAG_RE = re.compile(r'^(?:<h[1-6]|<ul|<ol|<pre|<blockquote|<hr|<table)')


def normalize_newlines(text: str) -> str:
    """Convert CRLF and lone CR to LF and drop NUL, which is reserved for placeholders."""
    return text.replace('\r\n', '\n').replace('\r', '\n').replace('\x00', '')


def apply_headings(text: str) -> str:
    for level, pattern in HEADING_RES:
        text = pattern.sub(rf'<h{level}>\1</h{level}>', text)
    return text


def apply_horizontal_rules(text: str) -> str:
    return HR_RE.sub('<hr>', text)


def _is_block(chunk: str) -> bool:
    return bool(BLOCK_TAG_RE.match(chunk)) or bool(CODE_TOKEN_RE.match(chunk))


def wrap_paragraphs(text: str) -> str:
    """Wrap every blank-line separated chunk that is not already a block element in <p>.

    Single newlines inside a paragraph become <br>.
    """
    out = []
    for chunk in PARAGRAPH_SPLIT_RE.split(text):
        chunk = chunk.strip()
        if not chunk:
            continue
        if _is_block(chunk):
            out.append(chunk)
        else:
            out.append('<p>' + chunk.replace('\n', '<br>') + '</p>')
    return '\n'.join(out)
