"""Inline and fenced code classifier mixin."""

from chatparts.lexer.charsets import CODE_MARKER, FENCE


class CodeClassifierMixin:
    """Mixin providing code span classification.

    Both forms need at least one non-backtick character between the
    delimiters, and the body may not contain a backtick.

    """

    # These will be set by the Scanner class
    _source: str

    def _match_fenced_code(self, pos: int) -> int:
        """Match ```body``` starting at pos.

        Args:
            pos: Position of the first backtick

        Returns:
            End offset (exclusive) of the fenced block, or -1 if no match.
        """
        source = self._source
        if not source.startswith(FENCE, pos):
            return -1

        body_start = pos + len(FENCE)
        close = source.find(CODE_MARKER, body_start)
        if close <= body_start or not source.startswith(FENCE, close):
            return -1
        return close + len(FENCE)

    def _match_inline_code(self, pos: int) -> int:
        """Match `body` starting at pos.

        An unterminated opener never matches, so the rest of the message
        is left for normal scanning.

        Args:
            pos: Position of the opening backtick

        Returns:
            End offset (exclusive) of the code span, or -1 if no match.
        """
        source = self._source
        if source[pos] != CODE_MARKER:
            return -1

        close = source.find(CODE_MARKER, pos + 1)
        if close <= pos + 1:
            return -1
        return close + 1
