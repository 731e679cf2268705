# Comment Analyzer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

"""
Client for the external sentiment/purchase-intent analysis service.

The service accepts `POST {"comments": [{platform, username, text}, ...]}` and
answers with one result object per comment:

    {"platform": "...", "username": "...", "comment": "...",
     "sentiment": "Positive", "purchase_intent": "Yes", "confidence": 0.93}

This module only prepares the request and validates the response shape. The
analysis itself happens remotely.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Any, Iterable

import httpx

from comment_analyzer.comments.line_parser import ANONYMOUS_USER, UNKNOWN_PLATFORM, ParsedComment


class AnalysisServiceError(RuntimeError):
    """
    Raised when the analysis service cannot be reached or returns an invalid
    response.
    """

    pass


@dataclass(frozen=True)
class AnalysisResult:
    """One analyzed comment as returned by the service."""

    platform: str
    username: str
    comment: str
    sentiment: str
    purchase_intent: str
    confidence: float | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "platform": self.platform,
            "username": self.username,
            "comment": self.comment,
            "sentiment": self.sentiment,
            "purchase_intent": self.purchase_intent,
        }
        if self.confidence is not None:
            data["confidence"] = self.confidence
        return data


@dataclass(frozen=True)
class PlatformSummary:
    """Aggregated counts for one platform."""

    platform: str
    total: int
    positive: int
    negative: int


def _result_from_item(item: Any, idx: int) -> AnalysisResult:
    if not isinstance(item, dict):
        raise AnalysisServiceError(f"Result at index {idx} is not an object")

    sentiment = item.get("sentiment")
    if not isinstance(sentiment, str) or not sentiment.strip():
        raise AnalysisServiceError(f"Result at index {idx} has no 'sentiment'")

    confidence = item.get("confidence")
    if confidence is not None:
        if isinstance(confidence, bool) or not isinstance(confidence, (int, float)):
            raise AnalysisServiceError(f"Result at index {idx} has a non-numeric 'confidence'")
        confidence = float(confidence)

    comment = item.get("comment")
    if comment is None:
        comment = item.get("text")

    return AnalysisResult(
        platform=str(item.get("platform") or UNKNOWN_PLATFORM),
        username=str(item.get("username") or ANONYMOUS_USER),
        comment=str(comment or ""),
        sentiment=sentiment.strip(),
        purchase_intent=str(item.get("purchase_intent") or "").strip(),
        confidence=confidence,
    )


def parse_results(payload: Any) -> list[AnalysisResult]:
    """
    Validate a service response body.

    Args:
        payload:
            Decoded JSON body. Either a list of result objects or a mapping with
            a `results` list.

    Returns:
        Result records in response order.

    Raises:
        AnalysisServiceError:
            If the payload does not have the expected shape.
    """

    if isinstance(payload, dict) and isinstance(payload.get("results"), list):
        payload = payload["results"]

    if not isinstance(payload, list):
        raise AnalysisServiceError("Analysis service response must be a JSON array of results")

    return [_result_from_item(item, idx) for idx, item in enumerate(payload)]


def submit_comments(
    comments: Iterable[ParsedComment],
    *,
    endpoint: str,
    timeout: float = 30.0,
    transport: httpx.BaseTransport | None = None,
) -> list[AnalysisResult]:
    """
    Send a comment batch to the analysis service.

    Args:
        comments:
            Parsed comments. Records with empty text are skipped.
        endpoint:
            Full URL of the analyze endpoint.
        timeout:
            Request timeout in seconds.
        transport:
            Optional httpx transport (used by tests).

    Returns:
        Parsed analysis results. An empty batch returns an empty list without a
        request.

    Raises:
        AnalysisServiceError:
            On transport errors, non-2xx responses, or invalid response bodies.
    """

    batch = [c.to_dict() for c in comments if c.text]
    if not batch:
        return []

    try:
        with httpx.Client(timeout=timeout, transport=transport) as client:
            response = client.post(endpoint, json={"comments": batch})
            response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise AnalysisServiceError(
            f"Analysis service returned HTTP {exc.response.status_code} for {endpoint}"
        ) from exc
    except httpx.HTTPError as exc:
        raise AnalysisServiceError(f"Error calling the analysis service at {endpoint}: {exc}") from exc

    try:
        payload = response.json()
    except ValueError as exc:
        raise AnalysisServiceError(f"Invalid JSON response from {endpoint}: {exc}") from exc

    return parse_results(payload)


def summarize_by_platform(results: Iterable[AnalysisResult]) -> list[PlatformSummary]:
    """
    Count total/positive/negative results per platform.

    Sentiment labels are compared case-insensitively. Platforms are ordered by
    total count (descending), then name.
    """

    totals: Counter[str] = Counter()
    positive: Counter[str] = Counter()
    negative: Counter[str] = Counter()

    for r in results:
        totals[r.platform] += 1
        label = r.sentiment.lower()
        if label == "positive":
            positive[r.platform] += 1
        elif label == "negative":
            negative[r.platform] += 1

    ordered = sorted(totals, key=lambda p: (-totals[p], p))
    return [
        PlatformSummary(platform=p, total=totals[p], positive=positive[p], negative=negative[p])
        for p in ordered
    ]
