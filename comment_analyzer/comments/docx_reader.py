# Comment Analyzer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""DOCX comment reader."""

from pathlib import Path

import docx

from comment_analyzer.comments.base import ReaderError
from comment_analyzer.comments.line_parser import LineCommentParser, ParsedComment, parse_comment_lines


class DocxCommentReader:
    """Parse Word documents, one comment candidate per paragraph line."""

    def can_read(self, path: Path) -> bool:
        return path.suffix.lower() == ".docx"

    def read_comments(self, path: Path, parser: LineCommentParser) -> list[ParsedComment]:
        try:
            document = docx.Document(str(path))
        except Exception as exc:  # noqa: BLE001
            raise ReaderError(f"Failed to open DOCX file: {exc}", path=path) from exc

        # Soft line breaks inside a paragraph come back as "\n".
        lines: list[str] = []
        for paragraph in document.paragraphs:
            lines.extend((paragraph.text or "").splitlines())

        return parse_comment_lines(lines, parser)
