# Comment Analyzer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Comment source reader interface."""

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from comment_analyzer.comments.line_parser import LineCommentParser, ParsedComment


class CommentSourceReader(Protocol):
    """Interface for comment source files.

    Implementations extract raw lines from their file format and hand them to
    the line parser. Formats that already carry structured records may build
    `ParsedComment` objects directly.
    """

    def can_read(self, path: Path) -> bool:
        """Return True if this reader supports the given file."""

        raise NotImplementedError

    def read_comments(self, path: Path, parser: LineCommentParser) -> list[ParsedComment]:
        """Return the non-empty comment records found in the given file."""

        raise NotImplementedError


@dataclass(frozen=True)
class ReaderError(RuntimeError):
    """Raised when a comment source cannot be read."""

    message: str
    path: Path | None = None
    excerpt: str | None = None

    def __str__(self) -> str:  # pragma: no cover
        parts: list[str] = []

        if self.path is not None:
            parts.append(f"{self.path}: {self.message}")
        else:
            parts.append(self.message)

        if isinstance(self.excerpt, str) and self.excerpt.strip():
            excerpt = self.excerpt.strip().replace("\n", " ")
            if len(excerpt) > 160:
                excerpt = excerpt[:157] + "..."
            parts.append(f"> {excerpt}")

        return "\n".join(parts)
