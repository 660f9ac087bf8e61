"""Candidate classifiers for the chatparts scanner.

Each classifier is a mixin that decides whether a pattern matches at a
given position. Classifiers are pure: they return the end offset of the
match (or -1) and never move the scanner's cursor.
"""

from chatparts.lexer.classifiers.code import CodeClassifierMixin
from chatparts.lexer.classifiers.emote import EmoteClassifierMixin
from chatparts.lexer.classifiers.mention import MentionClassifierMixin
from chatparts.lexer.classifiers.url import UrlClassifierMixin
from chatparts.lexer.classifiers.word import WordClassifierMixin

__all__ = [
    "CodeClassifierMixin",
    "EmoteClassifierMixin",
    "MentionClassifierMixin",
    "UrlClassifierMixin",
    "WordClassifierMixin",
]
