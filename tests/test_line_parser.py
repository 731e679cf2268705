from __future__ import annotations

import dataclasses

import pytest

from comment_analyzer.comments.line_parser import (
    ANONYMOUS_USER,
    DEFAULT_PLATFORMS,
    UNKNOWN_PLATFORM,
    LineCommentParser,
    ParsedComment,
    comment_from_mapping,
    parse_comment_block,
    parse_comment_line,
    parse_comment_lines,
)


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        (
            "Facebook @john_doe, loved this product!",
            ParsedComment("Facebook", "@john_doe", "loved this product!"),
        ),
        (
            "TikTok Sarah not interested, too pricey",
            ParsedComment("TikTok", "@Sarah", "not interested too pricey"),
        ),
        (
            "just a plain comment with no metadata",
            ParsedComment(UNKNOWN_PLATFORM, ANONYMOUS_USER, "just a plain comment with no metadata"),
        ),
        ("Instagram", ParsedComment("Instagram", ANONYMOUS_USER, "")),
        ("", ParsedComment(UNKNOWN_PLATFORM, ANONYMOUS_USER, "")),
    ],
)
def test_reference_lines(parser: LineCommentParser, line: str, expected: ParsedComment) -> None:
    assert parser.parse(line) == expected


def test_default_catalog_order() -> None:
    assert DEFAULT_PLATFORMS == ("Facebook", "TikTok", "X", "Instagram", "YouTube", "LinkedIn")


def test_mention_wins_over_capitalized_name(parser: LineCommentParser) -> None:
    result = parser.parse("Loved it, @maria great")

    assert result.username == "@maria"
    assert result.text == "Loved it great"


def test_capitalized_name_gets_at_prefix(parser: LineCommentParser) -> None:
    result = parser.parse("I love it, Mark")

    assert result.username == "@Mark"
    assert result.text == "I love it"


def test_single_capital_letter_is_not_a_username(parser: LineCommentParser) -> None:
    result = parser.parse("I think so")

    assert result.username == ANONYMOUS_USER
    assert result.text == "I think so"


def test_mention_requires_leading_whitespace(parser: LineCommentParser) -> None:
    result = parser.parse("email me at foo@bar")

    assert result.username == ANONYMOUS_USER
    assert result.text == "email me at foo@bar"


def test_only_first_occurrence_of_username_is_removed(parser: LineCommentParser) -> None:
    result = parser.parse("great stuff @amy and @amy again")

    assert result.username == "@amy"
    assert result.text == "great stuff and @amy again"


def test_username_removal_leaves_skipped_platform_name_intact(parser: LineCommentParser) -> None:
    result = parser.parse("posted on YouTube You rock")

    assert result.platform == "YouTube"
    assert result.username == "@You"
    assert result.text.split() == ["posted", "on", "rock"]


def test_mention_after_non_breaking_space(parser: LineCommentParser) -> None:
    result = parser.parse("great\u00a0@kim")

    assert result.username == "@kim"
    assert result.text == "great"


def test_platform_names_are_not_usernames(parser: LineCommentParser) -> None:
    result = parser.parse("YouTube LinkedIn great video")

    assert result.username == ANONYMOUS_USER
    assert result.text == "great video"


def test_platform_detection_is_case_sensitive(parser: LineCommentParser) -> None:
    result = parser.parse("saw this on facebook yesterday")

    assert result.platform == UNKNOWN_PLATFORM
    assert result.text == "saw this on facebook yesterday"


def test_platform_detection_is_substring_based(parser: LineCommentParser) -> None:
    # "X" is a catalog name, so any capital X counts.
    result = parser.parse("Xavier loves this")

    assert result == ParsedComment("X", "@Xavier", "loves this")


def test_first_catalog_match_wins_by_default(parser: LineCommentParser) -> None:
    result = parser.parse("YouTube and Facebook fans")

    assert result.platform == "Facebook"
    assert "Facebook" not in result.text
    assert "YouTube" not in result.text


def test_last_catalog_match_wins_when_configured() -> None:
    parser = LineCommentParser(platform_match="last")

    result = parser.parse("YouTube and Facebook fans")

    assert result.platform == "YouTube"
    assert "Facebook" not in result.text
    assert "YouTube" not in result.text


def test_unknown_platform_match_mode_is_rejected() -> None:
    with pytest.raises(ValueError):
        LineCommentParser(platform_match="middle")


def test_custom_catalog() -> None:
    parser = LineCommentParser(platforms=["Reddit", "Threads"])

    assert parser.platforms == ("Reddit", "Threads")
    assert parser.parse("Reddit @bob, hi") == ParsedComment("Reddit", "@bob", "hi")
    # Default names are plain text for a custom catalog.
    assert parser.parse("Facebook is fine").platform == UNKNOWN_PLATFORM


def test_parse_never_raises_on_odd_input(parser: LineCommentParser) -> None:
    for line in ("   ", ",,,", "@", "@@@", "\t@x\t", "\u200b"):
        result = parser.parse(line)
        assert isinstance(result, ParsedComment)
        assert result.username


@pytest.mark.parametrize(
    "line",
    [
        "a, b,, c",
        "Facebook @john_doe, loved this product!",
        "TikTok, Sarah, not, interested",
        ",",
        "plain, lowercase, text",
    ],
)
def test_text_never_contains_commas(parser: LineCommentParser, line: str) -> None:
    assert "," not in parser.parse(line).text


def test_commas_are_removed_not_replaced(parser: LineCommentParser) -> None:
    assert parser.parse("a, b,, c").text == "a b c"


@pytest.mark.parametrize(
    ("line", "platform"),
    [
        ("Facebook @john_doe, loved this product!", "Facebook"),
        ("TikTok Sarah not interested, too pricey", "TikTok"),
        ("great reel on Instagram @kim", "Instagram"),
        ("@dev_guy LinkedIn post was useful", "LinkedIn"),
    ],
)
def test_single_platform_is_detected_and_stripped(
    parser: LineCommentParser, line: str, platform: str
) -> None:
    result = parser.parse(line)

    assert result.platform == platform
    assert platform not in result.text
    # Re-parsing the body finds no residual platform token.
    assert parser.parse(result.text).platform == UNKNOWN_PLATFORM


def test_records_are_immutable(parser: LineCommentParser) -> None:
    result = parser.parse("Facebook @a hi")

    with pytest.raises(dataclasses.FrozenInstanceError):
        result.text = "changed"  # type: ignore[misc]


def test_to_dict_has_request_shape() -> None:
    record = ParsedComment("TikTok", "@Sarah", "too pricey")

    assert record.to_dict() == {"platform": "TikTok", "username": "@Sarah", "text": "too pricey"}


def test_parse_comment_line_uses_default_parser() -> None:
    assert parse_comment_line("Instagram @kim nice") == ParsedComment("Instagram", "@kim", "nice")


def test_block_parsing_drops_empty_records_and_keeps_order() -> None:
    block = "Facebook @a, hi\n\nInstagram\nplain one\r\nTikTok Bob ok\r"

    records = parse_comment_block(block)

    assert records == [
        ParsedComment("Facebook", "@a", "hi"),
        ParsedComment(UNKNOWN_PLATFORM, ANONYMOUS_USER, "plain one"),
        ParsedComment("TikTok", "@Bob", "ok"),
    ]


def test_block_parsing_of_empty_text() -> None:
    assert parse_comment_block("") == []


def test_line_parsing_honours_custom_parser() -> None:
    parser = LineCommentParser(platforms=("Reddit",))

    records = parse_comment_lines(["Reddit @a first", "Reddit", "second"], parser)

    assert [r.text for r in records] == ["first", "second"]
    assert [r.platform for r in records] == ["Reddit", UNKNOWN_PLATFORM]


def test_comment_from_mapping_applies_sentinels() -> None:
    assert comment_from_mapping({"comment": " nice "}) == ParsedComment(
        UNKNOWN_PLATFORM, ANONYMOUS_USER, "nice"
    )
    assert comment_from_mapping(
        {"platform": "X", "username": "@bo", "text": "ok"}
    ) == ParsedComment("X", "@bo", "ok")


@pytest.mark.parametrize("item", [None, "text", ["a"], {}, {"comment": ""}, {"platform": "X"}])
def test_comment_from_mapping_rejects_items_without_text(item: object) -> None:
    assert comment_from_mapping(item) is None
