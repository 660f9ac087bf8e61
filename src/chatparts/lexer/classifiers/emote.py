"""Vocabulary-driven emote classifier mixin."""

from chatparts.lexer.charsets import is_glyph_char, is_word_char
from chatparts.vocabulary import Vocabulary


class EmoteClassifierMixin:
    """Mixin matching whole known emotes at the cursor.

    Emote names such as ``hello-world``, ``:-))`` or ``Kappa!!`` are longer
    than a glyph and mix word and punctuation characters, so the ordered
    rules alone would split them. A known emote that is a prefix of the
    non-whitespace run at the cursor, and longer than the candidate the
    ordered rules found, is taken as one candidate instead.

    """

    # These will be set by the Scanner class
    _source: str
    _source_len: int
    _vocabulary: Vocabulary

    def _match_emote(self, pos: int, floor: int) -> int:
        """Match the longest known emote at pos that ends past floor.

        An emote never ends inside a word run, so ``Kappa`` does not match
        at the start of ``Kappas``.

        Args:
            pos: Candidate start position
            floor: End offset of the candidate from the ordered rules

        Returns:
            End offset (exclusive) of the emote, or -1 if no known emote
            is longer than that candidate.
        """
        vocabulary = self._vocabulary
        if vocabulary.longest_emote <= floor - pos:
            return -1

        source = self._source
        source_len = self._source_len
        limit = min(pos + vocabulary.longest_emote, source_len)
        end = pos
        while end < limit and is_glyph_char(source[end]):
            end += 1

        emotes = vocabulary.emotes
        while end > floor:
            inside_word = (
                end < source_len
                and is_word_char(source[end - 1])
                and is_word_char(source[end])
            )
            if not inside_word and source[pos:end] in emotes:
                return end
            end -= 1
        return -1
