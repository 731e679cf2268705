# Comment Analyzer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Heuristic comment-line parsing.

A pasted or extracted line such as `Facebook @john_doe, loved this product!` is
decomposed into a `ParsedComment`:

1. The platform is detected by case-sensitive substring search over the
   platform catalog (first or last catalog match wins, see `PLATFORM_MATCH_*`).
2. The username is taken from the first matching rule in `USERNAME_RULES`. The
   matched span is removed from the line.
3. Every catalog name is removed once from the remaining line.
4. Commas are removed and the result is trimmed.

The parser never raises. Undetected values fall back to `UNKNOWN_PLATFORM` and
`ANONYMOUS_USER`.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable


DEFAULT_PLATFORMS: tuple[str, ...] = (
    "Facebook",
    "TikTok",
    "X",
    "Instagram",
    "YouTube",
    "LinkedIn",
)

UNKNOWN_PLATFORM = "Unknown"
ANONYMOUS_USER = "Anonymous"

PLATFORM_MATCH_FIRST = "first"
PLATFORM_MATCH_LAST = "last"
PLATFORM_MATCH_MODES = (PLATFORM_MATCH_FIRST, PLATFORM_MATCH_LAST)


@dataclass(frozen=True)
class ParsedComment:
    """One normalized comment record.

    Attributes:
        platform:
            Catalog platform name or `Unknown`.
        username:
            `@`-prefixed handle or `Anonymous`.
        text:
            Comment body. May be empty; batch helpers drop such records.
    """

    platform: str
    username: str
    text: str

    def to_dict(self) -> dict[str, str]:
        """Return the request shape expected by the analysis service."""

        return {"platform": self.platform, "username": self.username, "text": self.text}


def _at_prefixed(token: str) -> str:
    token = token.strip()
    return token if token.startswith("@") else f"@{token}"


@dataclass(frozen=True)
class UsernameRule:
    """A username detection rule: pattern plus normalization.

    `pattern` must define one capturing group for the handle. Leading
    whitespace consumed by the pattern is part of the raw match and is removed
    from the line together with the handle.
    """

    name: str
    pattern: re.Pattern[str]
    normalize: Callable[[str], str] = _at_prefixed
    skip_platform_names: bool = False


USERNAME_RULES: tuple[UsernameRule, ...] = (
    UsernameRule(
        name="mention",
        pattern=re.compile(r"(?:^|\s)(@[A-Za-z0-9_]+)"),
    ),
    UsernameRule(
        name="capitalized",
        pattern=re.compile(r"(?:^|\s)([A-Z][A-Za-z0-9_]+)"),
        skip_platform_names=True,
    ),
)


@dataclass(frozen=True)
class LineCommentParser:
    """Parse single lines into `ParsedComment` records.

    Instances hold no mutable state and can be shared freely.
    """

    platforms: tuple[str, ...] = DEFAULT_PLATFORMS
    platform_match: str = PLATFORM_MATCH_FIRST
    rules: tuple[UsernameRule, ...] = field(default=USERNAME_RULES, repr=False)

    def __post_init__(self) -> None:
        if self.platform_match not in PLATFORM_MATCH_MODES:
            raise ValueError(
                f"platform_match must be one of {', '.join(PLATFORM_MATCH_MODES)}, "
                f"got {self.platform_match!r}"
            )
        # Accept any iterable (e.g. a list from YAML) but store a tuple.
        object.__setattr__(self, "platforms", tuple(self.platforms))

    def parse(self, line: str) -> ParsedComment:
        """Decompose one raw line into platform, username and text."""

        platform = self.detect_platform(line)
        username, remainder = self.extract_username(line)
        remainder = self.strip_platforms(remainder)
        text = remainder.replace(",", "").strip()

        return ParsedComment(platform=platform, username=username, text=text)

    def detect_platform(self, line: str) -> str:
        matches = [p for p in self.platforms if p and p in line]
        if not matches:
            return UNKNOWN_PLATFORM
        if self.platform_match == PLATFORM_MATCH_LAST:
            return matches[-1]
        return matches[0]

    def extract_username(self, line: str) -> tuple[str, str]:
        """Return `(username, remainder)` for the first matching rule.

        The remainder is the line with the matched span (including consumed
        leading whitespace) removed and trimmed. Without a match the line is returned unchanged.
        """

        for rule in self.rules:
            for match in rule.pattern.finditer(line):
                token = (match.group(1) if match.re.groups else match.group(0)).strip()
                if rule.skip_platform_names and token in self.platforms:
                    continue

                remainder = line[: match.start()] + line[match.end() :]
                return rule.normalize(token), remainder.strip()

        return ANONYMOUS_USER, line

    def strip_platforms(self, line: str) -> str:
        """Remove the first occurrence of every catalog name, in catalog order."""

        for platform in self.platforms:
            if platform:
                line = line.replace(platform, "", 1).strip()
        return line


_DEFAULT_PARSER = LineCommentParser()


def parse_comment_line(line: str, parser: LineCommentParser | None = None) -> ParsedComment:
    """Parse a single line with the given (or the default) parser."""

    return (parser or _DEFAULT_PARSER).parse(line)


def parse_comment_lines(
    lines: Iterable[str],
    parser: LineCommentParser | None = None,
) -> list[ParsedComment]:
    """Parse lines independently and drop records without text.

    Input order is preserved.
    """

    p = parser or _DEFAULT_PARSER
    records: list[ParsedComment] = []
    for line in lines:
        record = p.parse(str(line))
        if record.text:
            records.append(record)
    return records


def parse_comment_block(text: str, parser: LineCommentParser | None = None) -> list[ParsedComment]:
    """Split a multi-line block on newlines and parse every line."""

    normalized = (text or "").replace("\r\n", "\n").replace("\r", "\n")
    return parse_comment_lines(normalized.split("\n"), parser)


def comment_from_mapping(item: Any) -> ParsedComment | None:
    """Build a record from an already structured mapping (e.g. JSON uploads).

    Accepts `comment` or `text` for the body. Returns None for non-mappings
    and for items without body text.
    """

    if not isinstance(item, dict):
        return None

    body = item.get("comment")
    if body is None:
        body = item.get("text")
    text = str(body).strip() if body is not None else ""
    if not text:
        return None

    platform = str(item.get("platform") or "").strip() or UNKNOWN_PLATFORM
    username = str(item.get("username") or "").strip() or ANONYMOUS_USER

    return ParsedComment(platform=platform, username=username, text=text)
