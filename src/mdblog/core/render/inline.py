"""Inline formatting: images, links, bold, italic, and inline code"""

import re

from mdblog.core.render.escape import escape_attr


IMAGE_CLASS = "post-image"

IMAGE_RE = re.compile(r'!\[([^\]]*)\]\(([^)]+)\)')
LINK_RE = re.compile(r'\[([^\]]+)\]\((\S+?)\)')
# The body never starts or ends on '*', so '***x***' nests as <em><strong>.
BOLD_RE = re.compile(r'\*\*(?!\*)([^\n]+?)(?<!\*)\*\*')
ITALIC_RE = re.compile(r'\*([^*\n]+)\*')
CODE_RE = re.compile(r'`([^`]+)`')
TAG_TOKEN_RE = re.compile(r'\x00TAG_(\d+)\x00')


def _image(m: re.Match) -> str:
    return f'<img src="{escape_attr(m.group(2))}" alt="{escape_attr(m.group(1))}" class="{IMAGE_CLASS}">'


def _link_open(m: re.Match) -> str:
    return f'<a href="{escape_attr(m.group(2))}">'


def apply_inline_formatting(text: str) -> str:
    """Apply inline rules in order. Images before links, bold before italic.

    Emitted <img> and <a> tags are held out as tokens until the end so the
    emphasis and code rules never rewrite their attribute values.
    """
    tags: list[str] = []

    def _hold(tag: str) -> str:
        tags.append(tag)
        return f'\x00TAG_{len(tags) - 1}\x00'

    text = IMAGE_RE.sub(lambda m: _hold(_image(m)), text)
    text = LINK_RE.sub(lambda m: _hold(_link_open(m)) + m.group(1) + '</a>', text)
    text = BOLD_RE.sub(r'<strong>\1</strong>', text)
    text = ITALIC_RE.sub(r'<em>\1</em>', text)
    text = CODE_RE.sub(r'<code>\1</code>', text)
    return TAG_TOKEN_RE.sub(lambda m: tags[int(m.group(1))], text)
