"""Fallback word classifier mixin."""

from chatparts.lexer.charsets import (
    MARKERS,
    MAX_GLYPH_LENGTH,
    is_glyph_char,
    is_word_char,
)


class WordClassifierMixin:
    """Mixin providing the fallback word classification.

    A word is the longer of two candidates starting at the same position:
    a run of word characters, or a short glyph of printable non-whitespace
    characters. Ties go to the word run. Glyphs are what punctuation emotes
    like ``:)``, ``<3`` or ``B-)`` are scanned as.

    """

    # These will be set by the Scanner class
    _source: str
    _source_len: int

    def _starts_url_candidate(self, pos: int) -> bool:
        """Check for a URL candidate at pos. Implemented by UrlClassifierMixin."""
        raise NotImplementedError

    def _match_word(self, pos: int) -> int:
        """Match the longest word or glyph starting at pos.

        Args:
            pos: Candidate start position

        Returns:
            End offset (exclusive), or -1 if the character at pos is
            whitespace or not printable.
        """
        source = self._source
        if not is_glyph_char(source[pos]):
            return -1

        word_end = pos
        source_len = self._source_len
        while word_end < source_len and is_word_char(source[word_end]):
            word_end += 1

        glyph_end = self._match_glyph(pos)
        return glyph_end if glyph_end > word_end else word_end

    def _match_glyph(self, pos: int) -> int:
        """Match up to MAX_GLYPH_LENGTH printable characters.

        Characters after the first stop the glyph when they would open a
        code span, a mention or a URL candidate. A glyph never ends inside
        a word run, so "(Kappa" leaves "Kappa" whole.
        """
        source = self._source
        source_len = self._source_len
        limit = min(pos + MAX_GLYPH_LENGTH, source_len)
        end = pos + 1
        while end < limit:
            char = source[end]
            if (
                not is_glyph_char(char)
                or char in MARKERS
                or self._starts_url_candidate(end)
            ):
                break
            end += 1

        while (
            end > pos + 1
            and end < source_len
            and is_word_char(source[end - 1])
            and is_word_char(source[end])
        ):
            end -= 1
        return end
