"""Caller-supplied vocabulary of known emote and mentionable names.

A Vocabulary is built once by the caller and handed to each parse. The
pipeline only ever reads from it.

Example:
    >>> vocab = Vocabulary.of(emotes=["Kappa", ":)"], names=["bob"])
    >>> "Kappa" in vocab.emotes
    True

"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Vocabulary:
    """Immutable sets of known emote names and mentionable names.

    Attributes:
        emotes: Exact strings that render as emotes
        names: Mentionable names, without the ``@`` marker
        folded_names: Casefolded ``names``, for case-insensitive lookup
        longest_emote: Length of the longest emote, 0 when there are none

    Thread Safety:
        Frozen dataclass over frozensets; safe to share across threads.

    """

    emotes: frozenset[str] = field(default_factory=frozenset)
    names: frozenset[str] = field(default_factory=frozenset)

    # Derived once per vocabulary, not per lookup
    folded_names: frozenset[str] = field(init=False, repr=False, compare=False)
    longest_emote: int = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "folded_names", frozenset(name.casefold() for name in self.names)
        )
        object.__setattr__(
            self, "longest_emote", max(map(len, self.emotes), default=0)
        )

    @classmethod
    def of(
        cls,
        emotes: Iterable[str] = (),
        names: Iterable[str] = (),
    ) -> Vocabulary:
        """Build a Vocabulary from any iterables of strings.

        Args:
            emotes: Known emote names
            names: Known mentionable names (without marker)

        Returns:
            New Vocabulary instance.
        """
        return cls(emotes=frozenset(emotes), names=frozenset(names))

    def is_emote(self, text: str) -> bool:
        """Check whether ``text`` is exactly a known emote."""
        return text in self.emotes

    def is_name(self, name: str, *, casefold: bool = False) -> bool:
        """Check whether ``name`` is a known mentionable name.

        Args:
            name: Candidate name with the marker already stripped
            casefold: Compare case-insensitively

        Returns:
            True if the name is known.
        """
        if name in self.names:
            return True
        return casefold and name.casefold() in self.folded_names


# Module-level empty vocabulary (reused, never recreated)
EMPTY_VOCABULARY: Vocabulary = Vocabulary()
