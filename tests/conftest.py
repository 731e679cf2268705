from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import yaml

from comment_analyzer.comments.line_parser import LineCommentParser
from comment_analyzer.config import ENDPOINT_ENV_VAR


@pytest.fixture(autouse=True)
def _no_endpoint_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(ENDPOINT_ENV_VAR, raising=False)


@pytest.fixture
def parser() -> LineCommentParser:
    return LineCommentParser()


@pytest.fixture
def write_config(tmp_path: Path):
    """Write a comments.yaml into tmp_path and return its path."""

    def _write(**overrides: Any) -> Path:
        raw: dict[str, Any] = {
            "include": ["comments/**/*.txt", "comments/**/*.json"],
            "outfile": "parsed.yaml",
        }
        raw.update(overrides)
        path = tmp_path / "comments.yaml"
        path.write_text(yaml.safe_dump(raw, sort_keys=False), encoding="utf-8")
        return path

    return _write
