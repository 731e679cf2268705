# Comment Analyzer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""ODT comment reader."""

from pathlib import Path

from odfdo import Document

from comment_analyzer.comments.base import ReaderError
from comment_analyzer.comments.line_parser import LineCommentParser, ParsedComment, parse_comment_lines


def _node_text(node: object) -> str:
    # odfdo paragraphs expose nested spans via `inner_text`/`text_recursive`
    # rather than `.text`.
    for attr in ("inner_text", "text_recursive", "text"):
        value = getattr(node, attr, None)
        if callable(value):
            value = value()
        if value is not None:
            return str(value)
    return str(node)


class OdtCommentReader:
    """Parse ODT files, one comment candidate per paragraph or heading."""

    def can_read(self, path: Path) -> bool:
        return path.suffix.lower() == ".odt"

    def read_comments(self, path: Path, parser: LineCommentParser) -> list[ParsedComment]:
        try:
            body = Document(path).body
            nodes = list(body.xpath(".//text:p | .//text:h"))
            if not nodes:
                nodes = list(body.get_paragraphs())
            lines = [_node_text(n) for n in nodes]
        except Exception as exc:  # noqa: BLE001
            raise ReaderError(f"Failed to parse ODT file: {exc}", path=path) from exc

        return parse_comment_lines(lines, parser)
