"""URL candidate classifier mixin."""


class UrlClassifierMixin:
    """Mixin providing URL candidate classification.

    A candidate starts with a configured scheme and its colon and runs to
    the next whitespace character. Whether the candidate is a real URL is
    left to the URL resolver; here it is only provisional text.

    """

    # These will be set by the Scanner class
    _source: str
    _source_len: int
    _url_prefixes: tuple[str, ...]

    def _match_url_candidate(self, pos: int) -> int:
        """Match scheme ":" and everything up to the next whitespace.

        Args:
            pos: Candidate start position

        Returns:
            End offset (exclusive) of the candidate, or -1 if no match.
        """
        source = self._source
        if not self._url_prefixes or not source[pos].isascii() or not source[pos].isalpha():
            return -1

        for prefix in self._url_prefixes:
            if source[pos : pos + len(prefix)].lower() == prefix:
                break
        else:
            return -1

        end = pos + len(prefix)
        source_len = self._source_len
        while end < source_len and not source[end].isspace():
            end += 1
        return end

    def _starts_url_candidate(self, pos: int) -> bool:
        """Check whether a URL candidate begins at pos (no extension)."""
        source = self._source
        return any(
            source[pos : pos + len(prefix)].lower() == prefix
            for prefix in self._url_prefixes
        )
