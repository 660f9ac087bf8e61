"""Emote resolver layer.

Emote names are opaque tokens, so vocabulary membership is the only way to
tell them apart from ordinary words or punctuation. The resolver runs after
structural scanning and rewrites the kind of any matching segment; it never
looks at the source buffer.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from chatparts.config import EmotePrecedence
from chatparts.segments import Segment, SegmentKind
from chatparts.utils.logger import get_logger
from chatparts.vocabulary import Vocabulary

logger = get_logger(__name__)


def resolve_emotes(
    segments: Iterable[Segment],
    vocabulary: Vocabulary,
    precedence: EmotePrecedence = EmotePrecedence.ALL_KINDS,
) -> Iterator[Segment]:
    """Upgrade segments whose exact content is a known emote.

    Args:
        segments: Candidate segments from the scanner
        vocabulary: Known emote names
        precedence: ALL_KINDS also reclassifies code spans and mentions;
            TEXT_ONLY leaves them alone

    Yields:
        Segments in the same order, possibly reclassified as EMOTE.
    """
    emotes = vocabulary.emotes
    if not emotes:
        yield from segments
        return

    text_only = precedence is EmotePrecedence.TEXT_ONLY
    for segment in segments:
        if segment.kind is SegmentKind.EMOTE or segment.content not in emotes:
            yield segment
            continue
        if text_only and segment.kind is not SegmentKind.TEXT:
            yield segment
            continue
        logger.debug("emote %r at %d:%d", segment.content, segment.start, segment.end)
        yield segment.with_kind(SegmentKind.EMOTE)
