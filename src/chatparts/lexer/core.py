"""Single-pass scanner producing candidate segments.

At each cursor position the patterns are tried in a fixed order and the
first one that matches is consumed; scanning resumes right after it. Every
position falls through to a one-character text segment at worst, so the
scanner always advances and never fails.

Pattern order:
1. Fenced code      ```body```
2. Inline code      `body`
3. Mention          @name (accepted against the vocabulary here)
4. URL candidate    scheme: up to the next whitespace
5. Word             word run or short glyph
6. Anything else    one character

A known emote that is longer than the winning candidate is taken
instead, so emotes mixing word and punctuation characters stay whole.

Thread Safety:
Scanner instances are single-use. Create one per message.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from chatparts.config import ParseConfig, get_parse_config
from chatparts.lexer.charsets import MARKERS
from chatparts.lexer.classifiers import (
    CodeClassifierMixin,
    EmoteClassifierMixin,
    MentionClassifierMixin,
    UrlClassifierMixin,
    WordClassifierMixin,
)
from chatparts.segments import Segment, SegmentKind
from chatparts.vocabulary import EMPTY_VOCABULARY, Vocabulary


class Scanner(
    CodeClassifierMixin,
    MentionClassifierMixin,
    UrlClassifierMixin,
    EmoteClassifierMixin,
    WordClassifierMixin,
):
    """Ordered-alternation scanner over one chat message.

    Usage:
        >>> scanner = Scanner("hey @bob", Vocabulary.of(names=["bob"]))
        >>> for segment in scanner.scan():
        ...     print(segment)
        Segment(TEXT, 'hey', 0:3)
        Segment(TEXT, ' ', 3:4)
        Segment(MENTION, '@bob', 4:8)

    Thread Safety:
        Scanner instances are single-use. Create one per message.

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source) to avoid repeated calls
        "_pos",
        "_vocabulary",
        "_casefold_names",
        "_code_enabled",
        "_mentions_enabled",
        "_url_prefixes",  # "scheme:" strings, empty when URLs are off
    )

    def __init__(
        self,
        source: str,
        vocabulary: Vocabulary | None = None,
        config: ParseConfig | None = None,
    ) -> None:
        """Initialize scanner with message text.

        Args:
            source: The chat message
            vocabulary: Known emotes and names (empty if None)
            config: Parse configuration (ambient config if None)
        """
        config = config or get_parse_config()
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._vocabulary = vocabulary or EMPTY_VOCABULARY
        self._casefold_names = config.case_insensitive_names
        self._code_enabled = config.code_enabled
        self._mentions_enabled = config.mentions_enabled
        self._url_prefixes = (
            tuple(f"{scheme}:" for scheme in sorted(config.url_schemes))
            if config.urls_enabled
            else ()
        )

    def scan(self) -> Iterator[Segment]:
        """Scan the message into candidate segments.

        Yields:
            Segment objects one at a time, in source order

        Complexity: O(n) where n = len(source), amortized per pattern
        """
        source_len = self._source_len
        while self._pos < source_len:
            yield self._next_segment()

    def _next_segment(self) -> Segment:
        """Match one candidate at the cursor and commit past it.

        A known emote longer than the candidate found by the ordered rules
        replaces it, so no rule splits an emote it overlaps.
        """
        pos = self._pos
        kind, end = self._match_candidate(pos)
        emote_end = self._match_emote(pos, end)
        if emote_end > end:
            return self._commit(SegmentKind.TEXT, emote_end)
        return self._commit(kind, end)

    def _match_candidate(self, pos: int) -> tuple[SegmentKind, int]:
        """Apply the ordered rules at pos.

        Returns:
            Kind and end offset (exclusive) of the first rule that matches.
        """
        char = self._source[pos]

        if self._code_enabled:
            end = self._match_fenced_code(pos)
            if end < 0:
                end = self._match_inline_code(pos)
            if end >= 0:
                return SegmentKind.CODE, end

        if self._mentions_enabled:
            end = self._match_mention(pos)
            if end >= 0:
                kind = (
                    SegmentKind.MENTION
                    if self._accept_mention(self._source[pos:end])
                    else SegmentKind.TEXT
                )
                return kind, end

        end = self._match_url_candidate(pos)
        if end >= 0:
            return SegmentKind.TEXT, end

        # A marker whose pattern failed is a single literal character
        if char not in MARKERS:
            end = self._match_word(pos)
            if end >= 0:
                return SegmentKind.TEXT, end

        return SegmentKind.TEXT, pos + 1

    def _commit(self, kind: SegmentKind, end: int) -> Segment:
        """Create a Segment for [pos, end) and advance the cursor to end.

        Args:
            kind: Candidate kind
            end: End offset (exclusive), always > current position

        Returns:
            The committed Segment.
        """
        start = self._pos
        self._pos = end
        return Segment(
            kind=kind,
            content=self._source[start:end],
            start=start,
            end=end,
        )
