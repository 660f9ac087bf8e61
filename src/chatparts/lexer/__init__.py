"""Candidate scanner for chatparts.

Architecture:
lexer/
├── __init__.py          # Re-exports Scanner
├── core.py              # Scanner class (mixin composition + cursor)
├── charsets.py          # Marker constants and character predicates
└── classifiers/         # Pattern classifiers (pure, no cursor movement)
    ├── code.py          # Inline and fenced code
    ├── mention.py       # @name candidates and acceptance
    ├── url.py           # scheme: candidates
    └── word.py          # Word runs and short glyphs

Usage:
    >>> from chatparts.lexer import Scanner
    >>> for segment in Scanner("Hello `code`").scan():
    ...     print(segment)
Segment(TEXT, 'Hello', 0:5)
Segment(TEXT, ' ', 5:6)
Segment(CODE, '`code`', 6:12)

"""

from chatparts.lexer.core import Scanner

__all__ = ["Scanner"]
