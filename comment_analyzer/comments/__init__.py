"""Comment parsing.

Raw lines (pasted text, or text extracted from uploaded files) are decomposed
into `ParsedComment` records with these fields:

- `platform`: detected platform name or `Unknown`
- `username`: `@`-prefixed handle or `Anonymous`
- `text`: the remaining comment body

Format readers only extract lines. The heuristics live in `line_parser`.
"""

from comment_analyzer.comments.base import CommentSourceReader
from comment_analyzer.comments.line_parser import (
    LineCommentParser,
    ParsedComment,
    parse_comment_block,
    parse_comment_line,
)
from comment_analyzer.comments.registry import get_comment_reader, make_line_parser, read_comment_source

__all__ = [
    "CommentSourceReader",
    "LineCommentParser",
    "ParsedComment",
    "get_comment_reader",
    "make_line_parser",
    "parse_comment_block",
    "parse_comment_line",
    "read_comment_source",
]
