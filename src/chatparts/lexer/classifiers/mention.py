"""Mention classifier mixin."""

from chatparts.lexer.charsets import MENTION_MARKER, is_word_char
from chatparts.vocabulary import Vocabulary


class MentionClassifierMixin:
    """Mixin providing @name classification and acceptance.

    Acceptance happens here, at scan time, so that a rejected candidate is
    emitted as one text unit instead of being split again by the fallback
    rules.

    """

    # These will be set by the Scanner class
    _source: str
    _source_len: int
    _vocabulary: Vocabulary
    _casefold_names: bool

    def _match_mention(self, pos: int) -> int:
        """Match a marker followed by one or more word characters.

        Args:
            pos: Position of the marker

        Returns:
            End offset (exclusive) of the candidate, or -1 if no match.
        """
        source = self._source
        if source[pos] != MENTION_MARKER:
            return -1

        end = pos + 1
        source_len = self._source_len
        while end < source_len and is_word_char(source[end]):
            end += 1
        return end if end > pos + 1 else -1

    def _accept_mention(self, candidate: str) -> bool:
        """Decide whether a matched candidate names a known user.

        Args:
            candidate: The matched text, marker included

        Returns:
            True if the name (marker stripped) is in the vocabulary.
        """
        name = candidate.removeprefix(MENTION_MARKER)
        return self._vocabulary.is_name(name, casefold=self._casefold_names)
