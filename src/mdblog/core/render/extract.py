"""Placeholder protection for fenced code and blockquotes

Extraction swaps each construct for a NUL-delimited token carrying its index
in the ExtractionTable; restoration looks the record up by that index.
"""

import re

from mdblog.core.models import CodeBlock, ExtractionTable, QuoteBlock
from mdblog.core.render.escape import escape_attr, escape_html


FENCE_RE = re.compile(r'```[ \t]*([^\n`]*)\n(.*?)```', re.DOTALL)
QUOTE_RUN_RE = re.compile(r'(^|\n)([ \t]*>[^\n]*(?:\n[ \t]*>[^\n]*)*)')
QUOTE_MARKER_RE = re.compile(r'^[ \t]*>[ \t]?')

CODE_TOKEN_RE = re.compile(r'\x00CODEBLOCK_(\d+)\x00')
QUOTE_TOKEN_RE = re.compile(r'\x00QUOTE_(\d+)\x00')


def code_token(index: int) -> str:
    return f'\x00CODEBLOCK_{index}\x00'


def quote_token(index: int) -> str:
    return f'\x00QUOTE_{index}\x00'


def extract_code_fences(text: str, table: ExtractionTable) -> str:
    """Replace closed ``` fences with placeholders; unterminated fences stay as text."""
    def _store(m: re.Match) -> str:
        idx = table.add_code(CodeBlock(lang=m.group(1).strip(), code=m.group(2)))
        # Blank lines around the token keep the block out of any paragraph.
        return f'\n\n{code_token(idx)}\n\n'

    return FENCE_RE.sub(_store, text)


def extract_blockquotes(text: str, table: ExtractionTable) -> str:
    """Replace each maximal run of '>' lines with one placeholder. Must run before escaping."""
    def _store(m: re.Match) -> str:
        idx = table.add_quote(QuoteBlock(raw=m.group(2)))
        return f'{m.group(1)}\n{quote_token(idx)}\n'

    return QUOTE_RUN_RE.sub(_store, text)


def render_quote(block: QuoteBlock) -> str:
    lines = [QUOTE_MARKER_RE.sub('', line) for line in block.raw.split('\n')]
    return '<blockquote>' + '<br>'.join(escape_html(line) for line in lines) + '</blockquote>'


def render_code(block: CodeBlock) -> str:
    lang_class = f' class="language-{escape_attr(escape_html(block.lang))}"' if block.lang else ''
    return f'<pre><code{lang_class}>{escape_html(block.code)}</code></pre>'


def restore_blockquotes(text: str, table: ExtractionTable) -> str:
    def _restore(m: re.Match) -> str:
        idx = int(m.group(1))
        if idx >= len(table.quote_blocks):
            return ''
        return render_quote(table.quote_blocks[idx])

    return QUOTE_TOKEN_RE.sub(_restore, text)


def restore_code_fences(text: str, table: ExtractionTable) -> str:
    def _restore(m: re.Match) -> str:
        idx = int(m.group(1))
        if idx >= len(table.code_blocks):
            return ''
        return render_code(table.code_blocks[idx])

    return CODE_TOKEN_RE.sub(_restore, text)
