# Comment Analyzer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""TXT/Markdown comment reader.

Every line is one comment candidate. Blank lines and lines that are empty after
platform/username stripping are dropped by the batch parser.
"""

from pathlib import Path

from comment_analyzer.comments.base import ReaderError
from comment_analyzer.comments.line_parser import LineCommentParser, ParsedComment, parse_comment_block


class TextCommentReader:
    """Parse .txt and .md files line by line."""

    def can_read(self, path: Path) -> bool:
        return path.suffix.lower() in {".txt", ".md"}

    def read_comments(self, path: Path, parser: LineCommentParser) -> list[ParsedComment]:
        try:
            raw = path.read_text(encoding="utf-8")
        except Exception as exc:  # noqa: BLE001
            raise ReaderError(f"Failed to read text file: {exc}", path=path) from exc

        return parse_comment_block(raw, parser)
