# Comment Analyzer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""PDF comment reader.

Text extraction from PDFs is lossy: line breaks depend on how the document was
produced. Each page's extracted text is split into lines and parsed like a
pasted block.
"""

from pathlib import Path

from pypdf import PdfReader

from comment_analyzer.comments.base import ReaderError
from comment_analyzer.comments.line_parser import LineCommentParser, ParsedComment, parse_comment_block


class PdfCommentReader:
    """Parse PDF files page by page."""

    def can_read(self, path: Path) -> bool:
        return path.suffix.lower() == ".pdf"

    def read_comments(self, path: Path, parser: LineCommentParser) -> list[ParsedComment]:
        try:
            reader = PdfReader(str(path))
            pages = [page.extract_text() or "" for page in reader.pages]
        except Exception as exc:  # noqa: BLE001
            raise ReaderError(f"Failed to extract PDF text: {exc}", path=path) from exc

        records: list[ParsedComment] = []
        for page_text in pages:
            records.extend(parse_comment_block(page_text, parser))
        return records
