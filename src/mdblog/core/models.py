"""Data models for the post index and the markdown conversion pipeline"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from pydantic import BaseModel


class PostRecord(BaseModel):
    """One entry of the posts index (data/posts.json)."""
    id: str
    title: str
    author: Optional[str] = None
    date: Optional[str] = None      # ISO YYYY-MM-DD expected; other formats tolerated
    category: str = "Uncategorized"
    excerpt: str = ""
    md: Optional[str] = None        # body location, relative to the site root
    file: Optional[str] = None      # published page location


@dataclass(frozen=True)
class CodeBlock:
    """A fenced code block removed from the text before escaping."""
    lang: str
    code: str


@dataclass(frozen=True)
class QuoteBlock:
    """A run of '>' lines, stored raw with markers included."""
    raw: str


@dataclass
class ExtractionTable:
    """Side table for placeholder-protected content; a record's index is its token number."""
    code_blocks:  list[CodeBlock]  = field(default_factory=list)
    quote_blocks: list[QuoteBlock] = field(default_factory=list)

    def add_code(self, block: CodeBlock) -> int:
        self.code_blocks.append(block)
        return len(self.code_blocks) - 1

    def add_quote(self, block: QuoteBlock) -> int:
        self.quote_blocks.append(block)
        return len(self.quote_blocks) - 1


class ListKind(str, Enum):
    unordered = "ul"
    ordered   = "ol"


@dataclass(frozen=True)
class ListFrame:
    """One open list container in the nested list parser."""
    indent:    int
    kind:      ListKind
    item_open: bool = False


# Open frames, bottom to top; indentation strictly increases towards the top.
ListState = tuple[ListFrame, ...]
