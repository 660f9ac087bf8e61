"""Reclassification layers applied after scanning.

Each layer consumes a segment iterator and yields a segment iterator,
rewriting kinds only. Layers run in this order:

1. resolve_emotes: vocabulary membership, any kind (policy dependent)
2. resolve_urls: syntactic URL validation, text only
"""

from chatparts.resolvers.emote import resolve_emotes
from chatparts.resolvers.url import is_valid_url, resolve_urls

__all__ = ["is_valid_url", "resolve_emotes", "resolve_urls"]
