"""Segment and SegmentKind definitions for chatparts.

The scanner produces a stream of Segment objects that the resolver layers
rewrite and the parser coalesces. Each Segment has a kind, the raw string
sliced from the message, and its offsets into that message.

Thread Safety:
Segment is frozen (immutable) and safe to share across threads.
SegmentKind is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class SegmentKind(Enum):
    """Segment kinds produced by the pipeline.

    Values are stable lowercase names used by serialization and rendering.

    """

    URL = "url"  # https://example.com
    EMOTE = "emote"  # Kappa, :)
    CODE = "code"  # `code` or ```code```
    MENTION = "mention"  # @name
    TEXT = "text"  # everything else


@dataclass(frozen=True, slots=True)
class Segment:
    """A classified slice of a chat message.

    Attributes:
        kind: The segment kind (from SegmentKind enum)
        content: The raw string value, always ``source[start:end]``
        start: Start offset in source (inclusive, string index)
        end: End offset in source (exclusive, string index)

    Thread Safety:
        Frozen dataclass ensures immutability for safe sharing.

    """

    kind: SegmentKind
    content: str
    start: int
    end: int

    @property
    def span(self) -> tuple[int, int]:
        """Half-open ``(start, end)`` range into the source."""
        return (self.start, self.end)

    def byte_span(self, source: str) -> tuple[int, int]:
        """Convert the span to UTF-8 byte offsets into ``source``.

        Args:
            source: The message this segment was produced from.

        Returns:
            ``(start, end)`` byte offsets of the encoded message.
        """
        start = len(source[: self.start].encode("utf-8"))
        return (start, start + len(self.content.encode("utf-8")))

    def with_kind(self, kind: SegmentKind) -> Segment:
        """Return a copy reclassified as ``kind`` (same span and content)."""
        if kind is self.kind:
            return self
        return replace(self, kind=kind)

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.content
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Segment({self.kind.name}, {val!r}, {self.start}:{self.end})"
