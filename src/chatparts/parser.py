"""Coalescing parser for chatparts.

Chains the scanner and the resolver layers, then merges runs of adjacent
text segments into one segment per run.

Pipeline, per segment pulled by the caller:
    Scan -> resolve_emotes -> resolve_urls -> {emit | merge}

Merged text is sliced from the original message over the run's span, never
concatenated from the pieces, so characters between tokens are reproduced
exactly.

Thread Safety:
Parser instances are single-use iterators. Create one per message.
The vocabulary and config they read are immutable.

"""

from __future__ import annotations

from collections.abc import Iterator

from chatparts.config import ParseConfig, get_parse_config
from chatparts.lexer import Scanner
from chatparts.resolvers import resolve_emotes, resolve_urls
from chatparts.segments import Segment, SegmentKind
from chatparts.vocabulary import EMPTY_VOCABULARY, Vocabulary


class Parser:
    """Lazy iterator of classified segments for one message.

    Holds at most one segment of lookahead. Iterating to exhaustion is the
    only way to observe every character's classification; a Parser cannot
    be restarted, create a new one to iterate again.

    Usage:
        >>> vocab = Vocabulary.of(emotes=["Kappa"])
        >>> list(Parser("Hello Kappa World!", vocab))
        [Segment(TEXT, 'Hello ', 0:6), Segment(EMOTE, 'Kappa', 6:11), Segment(TEXT, ' World!', 11:18)]

    """

    __slots__ = ("_source", "_segments", "_lookahead")

    def __init__(
        self,
        source: str,
        vocabulary: Vocabulary | None = None,
        *,
        config: ParseConfig | None = None,
    ) -> None:
        """Initialize the pipeline for a message.

        Args:
            source: The chat message
            vocabulary: Known emotes and names (empty if None)
            config: Parse configuration (ambient config if None)
        """
        config = config or get_parse_config()
        vocabulary = vocabulary or EMPTY_VOCABULARY

        segments: Iterator[Segment] = Scanner(source, vocabulary, config).scan()
        segments = resolve_emotes(segments, vocabulary, config.emote_precedence)
        if config.urls_enabled:
            segments = resolve_urls(segments, config.url_schemes)

        self._source = source
        self._segments = segments
        self._lookahead: Segment | None = None

    @property
    def source(self) -> str:
        """The message being parsed."""
        return self._source

    def __iter__(self) -> Parser:
        return self

    def __next__(self) -> Segment:
        segment = self._pull()
        if segment is None:
            raise StopIteration
        if segment.kind is SegmentKind.TEXT:
            return self._coalesce_text(segment)
        return segment

    def _pull(self) -> Segment | None:
        """Take the lookahead segment if present, else the next upstream."""
        if self._lookahead is not None:
            segment, self._lookahead = self._lookahead, None
            return segment
        return next(self._segments, None)

    def _peek(self) -> Segment | None:
        """Look at the next segment without consuming it."""
        if self._lookahead is None:
            self._lookahead = next(self._segments, None)
        return self._lookahead

    def _coalesce_text(self, first: Segment) -> Segment:
        """Merge first with every directly following TEXT segment.

        A lone text segment is returned as is. For a run, the end offset is
        extended per segment and the source is sliced once at the end.
        """
        end = first.end
        merged = False
        while (following := self._peek()) is not None and following.kind is SegmentKind.TEXT:
            self._lookahead = None
            end = following.end
            merged = True

        if not merged:
            return first
        return Segment(
            kind=SegmentKind.TEXT,
            content=self._source[first.start : end],
            start=first.start,
            end=end,
        )
