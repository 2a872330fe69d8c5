"""Nested list parser: a line scan over an explicit stack of open list frames

Every helper is a pure function of (state, input) returning (new_state,
emitted fragments). ListState is an immutable tuple, so a caller can inspect
the state between any two lines.
"""

import re
from dataclasses import replace

from mdblog.core.models import ListFrame, ListKind, ListState


UNORDERED_ITEM_RE = re.compile(r'^([ \t]*)([-*+])\s+(.*)$')
ORDERED_ITEM_RE = re.compile(r'^([ \t]*)(\d+\.)\s+(.*)$')
TAB_WIDTH = 4

Step = tuple[ListState, list[str]]


def indent_width(ws: str) -> int:
    """Width of leading whitespace: a space counts 1, a tab counts 4."""
    return sum(TAB_WIDTH if ch == '\t' else 1 for ch in ws)


def match_item(line: str) -> tuple[int, ListKind, str] | None:
    """Return (indent, kind, content) for a list item line, else None."""
    m = UNORDERED_ITEM_RE.match(line) or ORDERED_ITEM_RE.match(line)
    if not m:
        return None
    kind = ListKind.ordered if m.group(2).endswith('.') else ListKind.unordered
    return indent_width(m.group(1)), kind, m.group(3).strip()


def close_top(state: ListState) -> Step:
    top = state[-1]
    out = ['</li>'] if top.item_open else []
    out.append(f'</{top.kind.value}>')
    return state[:-1], out


def close_all(state: ListState) -> Step:
    """Close every open frame, innermost first."""
    out: list[str] = []
    while state:
        state, closed = close_top(state)
        out.extend(closed)
    return state, out


def close_to_indent(state: ListState, indent: int) -> Step:
    """Close frames until the top frame's indentation is <= indent."""
    out: list[str] = []
    while state and state[-1].indent > indent:
        state, closed = close_top(state)
        out.extend(closed)
    return state, out


def ensure_list(state: ListState, indent: int, kind: ListKind) -> Step:
    """Make the top frame a list of kind at indent, closing and opening containers as needed."""
    state, out = close_to_indent(state, indent)
    if state and state[-1].indent == indent and state[-1].kind != kind:
        state, closed = close_top(state)
        out.extend(closed)
    if not state or indent > state[-1].indent:
        state = state + (ListFrame(indent=indent, kind=kind),)
        out.append(f'<{kind.value}>')
    return state, out


def open_item(state: ListState, content: str) -> Step:
    """Open a list item in the top frame, closing its previous item first."""
    top = state[-1]
    out = ['</li>'] if top.item_open else []
    out.append(f'<li>{content}')
    return state[:-1] + (replace(top, item_open=True),), out


def step(state: ListState, line: str) -> Step:
    """Consume one physical line."""
    if not line.strip():
        state, out = close_all(state)
        return state, out + ['']

    item = match_item(line)
    if item is None:
        if not state:
            return state, [line]
        state, out = close_all(state)
        return state, out + ['', line]

    indent, kind, content = item
    out = []
    state, opened = ensure_list(state, indent, kind)
    out.extend(opened)
    state, item_out = open_item(state, content)
    out.extend(item_out)
    return state, out


def parse_nested_lists(text: str) -> str:
    """Convert list item lines to nested <ul>/<ol> markup. Expects already-escaped text."""
    state: ListState = ()
    out: list[str] = []
    for line in text.split('\n'):
        if not state and match_item(line) and out and out[-1]:
            out.append('')     # keep a new list off the preceding paragraph
        state, emitted = step(state, line)
        out.extend(emitted)
    state, closing = close_all(state)
    out.extend(closing)
    return '\n'.join(out)
