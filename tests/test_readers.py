from __future__ import annotations

import json
from pathlib import Path

import docx
import pytest
from odfdo import Document, Paragraph

from comment_analyzer.comments import pdf_reader
from comment_analyzer.comments.docx_reader import DocxCommentReader
from comment_analyzer.comments.json_reader import JsonCommentReader
from comment_analyzer.comments.line_parser import (
    ANONYMOUS_USER,
    UNKNOWN_PLATFORM,
    LineCommentParser,
    ParsedComment,
)
from comment_analyzer.comments.odt_reader import OdtCommentReader
from comment_analyzer.comments.pdf_reader import PdfCommentReader
from comment_analyzer.comments.registry import get_comment_reader, read_comment_source
from comment_analyzer.comments.text_reader import TextCommentReader
from comment_analyzer.config import ConfigError


@pytest.mark.parametrize(
    ("name", "reader_type"),
    [
        ("comments.txt", TextCommentReader),
        ("notes.MD", TextCommentReader),
        ("export.json", JsonCommentReader),
        ("upload.docx", DocxCommentReader),
        ("upload.pdf", PdfCommentReader),
        ("upload.odt", OdtCommentReader),
    ],
)
def test_reader_selection_by_suffix(name: str, reader_type: type) -> None:
    assert isinstance(get_comment_reader(Path(name)), reader_type)


def test_unsupported_suffix() -> None:
    with pytest.raises(ConfigError, match="Unsupported comment source format"):
        get_comment_reader(Path("comments.csv"))


def test_text_file(tmp_path: Path, parser: LineCommentParser) -> None:
    path = tmp_path / "comments.txt"
    path.write_text(
        "Facebook @john_doe, loved this product!\n\nInstagram\nTikTok Sarah not interested, too pricey\n",
        encoding="utf-8",
    )

    assert read_comment_source(path, parser) == [
        ParsedComment("Facebook", "@john_doe", "loved this product!"),
        ParsedComment("TikTok", "@Sarah", "not interested too pricey"),
    ]


def test_json_records_bypass_line_parser(tmp_path: Path, parser: LineCommentParser) -> None:
    path = tmp_path / "export.json"
    path.write_text(
        json.dumps(
            [
                {"platform": "YouTube", "username": "@kim", "comment": "Great, really great"},
                {"comment": "no metadata here"},
                {"platform": "X", "username": "@bo"},
                "not an object",
            ]
        ),
        encoding="utf-8",
    )

    assert read_comment_source(path, parser) == [
        ParsedComment("YouTube", "@kim", "Great, really great"),
        ParsedComment(UNKNOWN_PLATFORM, ANONYMOUS_USER, "no metadata here"),
    ]


def test_json_object_document_yields_nothing(tmp_path: Path, parser: LineCommentParser) -> None:
    path = tmp_path / "export.json"
    path.write_text(json.dumps({"comments": []}), encoding="utf-8")

    assert read_comment_source(path, parser) == []


def test_invalid_json_is_reported(tmp_path: Path, parser: LineCommentParser) -> None:
    path = tmp_path / "export.json"
    path.write_text("[{broken", encoding="utf-8")

    with pytest.raises(ConfigError, match="Invalid JSON"):
        read_comment_source(path, parser)


def test_docx_file(tmp_path: Path, parser: LineCommentParser) -> None:
    path = tmp_path / "upload.docx"
    document = docx.Document()
    document.add_paragraph("LinkedIn @recruiter_anna, would buy this")
    document.add_paragraph("")
    document.add_paragraph("YouTube")
    document.add_paragraph("nice colours")
    document.save(str(path))

    assert read_comment_source(path, parser) == [
        ParsedComment("LinkedIn", "@recruiter_anna", "would buy this"),
        ParsedComment(UNKNOWN_PLATFORM, ANONYMOUS_USER, "nice colours"),
    ]


def test_broken_docx_is_reported(tmp_path: Path, parser: LineCommentParser) -> None:
    path = tmp_path / "upload.docx"
    path.write_bytes(b"not a zip archive")

    with pytest.raises(ConfigError, match="Failed to open DOCX file"):
        read_comment_source(path, parser)


def test_odt_file(tmp_path: Path, parser: LineCommentParser) -> None:
    path = tmp_path / "upload.odt"
    document = Document("text")
    document.body.append(Paragraph("Instagram @kim, love the packaging"))
    document.body.append(Paragraph("TikTok"))
    document.save(str(path))

    assert read_comment_source(path, parser) == [
        ParsedComment("Instagram", "@kim", "love the packaging"),
    ]


class _FakePage:
    def __init__(self, text: str | None) -> None:
        self._text = text

    def extract_text(self) -> str | None:
        return self._text


class _FakePdfReader:
    def __init__(self, path: str) -> None:
        self.path = path
        self.pages = [
            _FakePage("Facebook @a, first\nsecond line"),
            _FakePage(None),
            _FakePage("X Mike, third"),
        ]


def test_pdf_pages_are_split_into_lines(
    tmp_path: Path, parser: LineCommentParser, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(pdf_reader, "PdfReader", _FakePdfReader)
    path = tmp_path / "upload.pdf"
    path.write_bytes(b"%PDF-1.4")

    assert read_comment_source(path, parser) == [
        ParsedComment("Facebook", "@a", "first"),
        ParsedComment(UNKNOWN_PLATFORM, ANONYMOUS_USER, "second line"),
        ParsedComment("X", "@Mike", "third"),
    ]


def test_broken_pdf_is_reported(tmp_path: Path, parser: LineCommentParser) -> None:
    path = tmp_path / "upload.pdf"
    path.write_bytes(b"definitely not a pdf")

    with pytest.raises(ConfigError, match="Failed to extract PDF text"):
        read_comment_source(path, parser)
