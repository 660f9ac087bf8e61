"""
chatparts — Chat message segmentation for Python

Splits a raw chat message into an ordered sequence of typed segments
(text, emotes, code, mentions and URLs) for downstream rendering.
Classification depends on the message's lexical shape and on a
caller-supplied vocabulary of known emotes and mentionable names.

Quick Start:
    >>> from chatparts import Vocabulary, parse_all
    >>> vocab = Vocabulary.of(emotes=["Kappa"], names=["bob"])
    >>> for segment in parse_all("hey @bob Kappa", vocab):
    ...     print(segment.kind.name, repr(segment.content))
    TEXT 'hey '
    MENTION '@bob'
    TEXT ' '
    EMOTE 'Kappa'

    >>> # Render straight to HTML
    >>> from chatparts import render
    >>> render("see https://example.com", vocab)
    'see <a href="https://example.com" rel="noopener noreferrer">https://example.com</a>'

Installation:
    pip install chatparts
"""

from chatparts.config import (
    EmotePrecedence,
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from chatparts.errors import ChatPartsError, ConfigError, RenderError, SerializationError
from chatparts.lexer import Scanner
from chatparts.parser import Parser
from chatparts.renderers.html import HtmlRenderer
from chatparts.resolvers import is_valid_url, resolve_emotes, resolve_urls
from chatparts.segments import Segment, SegmentKind
from chatparts.serialization import from_dict, from_json, to_dict, to_json
from chatparts.vocabulary import Vocabulary

__version__ = "0.1.0"


def parse(
    source: str,
    vocabulary: Vocabulary | None = None,
    *,
    config: ParseConfig | None = None,
) -> Parser:
    """Parse a chat message into a lazy sequence of segments.

    Args:
        source: The chat message
        vocabulary: Known emotes and mentionable names (empty if None)
        config: Parse configuration. Defaults to the ambient config set
            via set_parse_config() or parse_config_context().

    Returns:
        A Parser, which yields Segment objects on iteration. It is
        single-use: call parse() again to iterate a second time.

    Example:
        >>> segments = parse("Hello Kappa World!", Vocabulary.of(emotes=["Kappa"]))
        >>> next(segments)
        Segment(TEXT, 'Hello ', 0:6)
    """
    return Parser(source, vocabulary, config=config)


def parse_all(
    source: str,
    vocabulary: Vocabulary | None = None,
    *,
    config: ParseConfig | None = None,
) -> list[Segment]:
    """Parse a chat message and collect every segment into a list.

    Args:
        source: The chat message
        vocabulary: Known emotes and mentionable names (empty if None)
        config: Parse configuration (ambient config if None)

    Returns:
        All segments in source order.
    """
    return list(Parser(source, vocabulary, config=config))


def render(
    source: str,
    vocabulary: Vocabulary | None = None,
    *,
    config: ParseConfig | None = None,
    renderer: HtmlRenderer | None = None,
) -> str:
    """Parse a chat message and render it to HTML in one call.

    Args:
        source: The chat message
        vocabulary: Known emotes and mentionable names (empty if None)
        config: Parse configuration (ambient config if None)
        renderer: Custom renderer (plain HtmlRenderer if None)

    Returns:
        HTML fragment.
    """
    renderer = renderer or HtmlRenderer()
    return renderer.render(Parser(source, vocabulary, config=config))


__all__ = [
    # Main API
    "parse",
    "parse_all",
    "render",
    "Parser",
    "Scanner",
    # Data model
    "Segment",
    "SegmentKind",
    "Vocabulary",
    # Layers
    "is_valid_url",
    "resolve_emotes",
    "resolve_urls",
    # Configuration
    "EmotePrecedence",
    "ParseConfig",
    "get_parse_config",
    "parse_config_context",
    "reset_parse_config",
    "set_parse_config",
    # Errors
    "ChatPartsError",
    "ConfigError",
    "RenderError",
    "SerializationError",
    # Rendering and serialization
    "HtmlRenderer",
    "from_dict",
    "from_json",
    "to_dict",
    "to_json",
    "__version__",
]
