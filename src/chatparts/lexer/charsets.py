"""Character sets and predicates for O(1) classification.

All sets are frozensets for O(1) membership testing, immutability
(thread-safe) and module-level caching (no per-call allocation).

Usage:
    from chatparts.lexer.charsets import MARKERS, is_word_char

    if char in MARKERS:  # O(1) lookup
        ...
"""

# Delimiter of inline and fenced code
CODE_MARKER = "`"

# Three markers open and close a fenced block
FENCE = CODE_MARKER * 3

# Leading character of a mention
MENTION_MARKER = "@"

# Characters that start a structural pattern
MARKERS: frozenset[str] = frozenset(CODE_MARKER + MENTION_MARKER)

# Glyph emotes such as ":)", "<3" or ":-\" are at most this long
MAX_GLYPH_LENGTH = 3


def is_word_char(char: str) -> bool:
    """Check if character matches ``\\w`` (Unicode letters, digits, underscore)."""
    return char.isalnum() or char == "_"


def is_glyph_char(char: str) -> bool:
    """Check if character is printable and not whitespace."""
    return char.isprintable() and not char.isspace()
