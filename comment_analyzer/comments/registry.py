# Comment Analyzer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Comment source reader registry."""

from pathlib import Path

from comment_analyzer.comments.base import CommentSourceReader, ReaderError
from comment_analyzer.comments.docx_reader import DocxCommentReader
from comment_analyzer.comments.json_reader import JsonCommentReader
from comment_analyzer.comments.line_parser import LineCommentParser, ParsedComment
from comment_analyzer.comments.odt_reader import OdtCommentReader
from comment_analyzer.comments.pdf_reader import PdfCommentReader
from comment_analyzer.comments.text_reader import TextCommentReader
from comment_analyzer.config import ConfigError, ParsingConfig


# Bump this whenever parsing semantics change in a way that should force
# regeneration of parsed batch files.
COMMENT_PARSING_VERSION = 1

SUPPORTED_SUFFIXES = (".docx", ".json", ".md", ".odt", ".pdf", ".txt")


_READERS: list[CommentSourceReader] = [
    TextCommentReader(),
    JsonCommentReader(),
    DocxCommentReader(),
    PdfCommentReader(),
    OdtCommentReader(),
]


def get_comment_reader(path: Path) -> CommentSourceReader:
    """Select a reader based on the file.

    Args:
        path:
            Comment source file path.

    Returns:
        A reader instance.

    Raises:
        ConfigError:
            If no reader supports the file.
    """

    for reader in _READERS:
        if reader.can_read(path):
            return reader

    supported = ", ".join(SUPPORTED_SUFFIXES)
    raise ConfigError(f"Unsupported comment source format: {path} (supported: {supported})")


def make_line_parser(parsing: ParsingConfig | None = None) -> LineCommentParser:
    """Build the line parser for the configured platform catalog."""

    if parsing is None:
        return LineCommentParser()
    if parsing.platforms is None:
        return LineCommentParser(platform_match=parsing.platform_match)
    return LineCommentParser(platforms=parsing.platforms, platform_match=parsing.platform_match)


def read_comment_source(path: Path, parser: LineCommentParser) -> list[ParsedComment]:
    """Read a comment source and normalize errors to ConfigError."""

    reader = get_comment_reader(path)
    try:
        return reader.read_comments(path, parser)
    except ReaderError as exc:
        raise ConfigError(str(exc)) from exc
