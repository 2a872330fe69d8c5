"""Markdown-subset to HTML conversion pipeline"""

import logging

from mdblog.core.models import ExtractionTable
from mdblog.core.render.blocks import (
    apply_headings,
    apply_horizontal_rules,
    normalize_newlines,
    wrap_paragraphs,
)
from mdblog.core.render.escape import escape_html
from mdblog.core.render.extract import (
    extract_blockquotes,
    extract_code_fences,
    restore_blockquotes,
    restore_code_fences,
)
from mdblog.core.render.inline import apply_inline_formatting
from mdblog.core.render.lists import parse_nested_lists


logger = logging.getLogger(__name__)


def md_to_html(md: str | None) -> str:
    """Convert a markdown-subset string to an HTML fragment. Never raises on any input.

    Stage order is fixed: code and quotes are pulled out before escaping, block
    structure is built on escaped text, inline rules run after block structure,
    and code is restored last so no rule ever touches it.
    """
    if not md:
        return ''

    table = ExtractionTable()
    text = normalize_newlines(md)
    text = extract_code_fences(text, table)
    text = extract_blockquotes(text, table)
    text = escape_html(text)
    text = restore_blockquotes(text, table)
    text = apply_headings(text)
    text = apply_horizontal_rules(text)
    text = parse_nested_lists(text)
    text = wrap_paragraphs(text)
    text = apply_inline_formatting(text)
    text = restore_code_fences(text, table)

    logger.debug(
        "converted %d chars (%d code blocks, %d quotes)",
        len(md), len(table.code_blocks), len(table.quote_blocks),
    )
    return text
