# =============================================================================
# core/models.py  —  Data Models for search results
# =============================================================================
#
# The remote search service answers with JSON shaped like:
#
#   {"results": [
#       {"title": "...", "url": "...", "score": 0.87,
#        "metadata": {"organization": "...", "region": "...",
#                     "startupHistory": "..."}},
#       ...
#   ]}
#
# Each entry becomes a NoticeResult.  They are frozen: the server only reads
# what the remote side ranked, it never edits or re-scores a notice.
# =============================================================================

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class NoticeMetadata:
    """Who runs the programme, where, and which startups it targets."""

    organization: str
    region: str
    startup_history: str               # "startupHistory" on the wire


@dataclass(frozen=True)
class NoticeResult:
    """One ranked notice from the search service.

    `score` is the similarity in [0, 1] as reported upstream.  It is kept
    verbatim (no clamping, no rounding) and only turned into a percentage
    when rendered.
    """

    title: str
    url: str
    score: float
    metadata: NoticeMetadata

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "NoticeResult":
        """Build a NoticeResult from one entry of the `results` array.

        Raises KeyError / TypeError when the entry lacks a required field or
        its score is not a number; the client turns those into a
        malformed-response error.
        """
        score = data["score"]
        if isinstance(score, bool) or not isinstance(score, (int, float)):
            raise TypeError(f"score must be a number, got {type(score).__name__}")
        meta = data["metadata"]
        return cls(
            title=data["title"],
            url=data["url"],
            score=score,
            metadata=NoticeMetadata(
                organization=meta["organization"],
                region=meta["region"],
                startup_history=meta["startupHistory"],
            ),
        )
