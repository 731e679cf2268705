# Comment Analyzer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""JSON comment reader.

JSON exports already carry structured fields, so they bypass the heuristic line
parser. The expected document is an array of objects:

    [{"platform": "TikTok", "username": "@sarah", "comment": "too pricey"}, ...]

Missing platforms and usernames fall back to the parser's sentinel values.
Items without comment text are dropped.
"""

import json
from pathlib import Path

from comment_analyzer.comments.base import ReaderError
from comment_analyzer.comments.line_parser import LineCommentParser, ParsedComment, comment_from_mapping


class JsonCommentReader:
    """Read comment records from a JSON array."""

    def can_read(self, path: Path) -> bool:
        return path.suffix.lower() == ".json"

    def read_comments(self, path: Path, parser: LineCommentParser) -> list[ParsedComment]:
        _ = parser

        try:
            raw = path.read_text(encoding="utf-8")
        except Exception as exc:  # noqa: BLE001
            raise ReaderError(f"Failed to read JSON file: {exc}", path=path) from exc

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise ReaderError(f"Invalid JSON: {exc}", path=path, excerpt=raw[:200]) from exc

        if not isinstance(data, list):
            return []

        records: list[ParsedComment] = []
        for item in data:
            record = comment_from_mapping(item)
            if record is not None:
                records.append(record)
        return records
