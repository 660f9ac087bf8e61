"""ContextVar-based parse configuration for chatparts.

Provides thread-local configuration using Python's ContextVars (PEP 567).
A config passed explicitly to parse() wins; otherwise the ambient config
for the current context is used.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from chatparts.config import ParseConfig, parse_config_context

    with parse_config_context(ParseConfig(urls_enabled=False)):
        segments = parse_all("see https://example.com", vocab)

"""

from __future__ import annotations

import re
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from enum import Enum

from chatparts.errors import ConfigError

# RFC 3986 scheme: ALPHA *( ALPHA / DIGIT / "+" / "-" / "." )
_SCHEME_RE = re.compile(r"[a-z][a-z0-9+.\-]*")


class EmotePrecedence(Enum):
    """Which segment kinds the emote resolver may reclassify.

    ALL_KINDS: any segment whose content is a known emote becomes an emote,
        including code spans and accepted mentions.
    TEXT_ONLY: only provisional text segments are considered; code and
        mentions keep their structural kind.

    """

    ALL_KINDS = "all_kinds"
    TEXT_ONLY = "text_only"


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable parse configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).
    The vocabulary is per-call state, not configuration, and is passed
    to the parser directly.

    Attributes:
        emote_precedence: Which kinds the emote resolver may upgrade
        url_schemes: Lowercase schemes recognized as URL candidates
        case_insensitive_names: Compare mention names casefolded
        code_enabled: Recognize `inline` and ```fenced``` code
        mentions_enabled: Recognize @name mentions
        urls_enabled: Recognize and validate URLs

    """

    emote_precedence: EmotePrecedence = EmotePrecedence.ALL_KINDS
    url_schemes: frozenset[str] = field(
        default_factory=lambda: frozenset({"http", "https"})
    )
    case_insensitive_names: bool = False
    code_enabled: bool = True
    mentions_enabled: bool = True
    urls_enabled: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.emote_precedence, EmotePrecedence):
            raise ConfigError(
                "emote_precedence",
                f"expected EmotePrecedence, got {self.emote_precedence!r}",
            )
        for scheme in self.url_schemes:
            if not isinstance(scheme, str) or not _SCHEME_RE.fullmatch(scheme):
                raise ConfigError(
                    "url_schemes",
                    f"{scheme!r} is not a lowercase URL scheme",
                )

    @classmethod
    def from_dict(cls, config_dict: dict) -> ParseConfig:
        """Create ParseConfig from dictionary.

        Useful when config comes from external sources (YAML, JSON, env).
        Only includes keys that are valid ParseConfig fields; unknown keys
        are silently ignored. ``emote_precedence`` may be given by value
        (``"text_only"``) and ``url_schemes`` as any iterable.

        Args:
            config_dict: Dictionary with config values. Keys should match
                ParseConfig attribute names.

        Returns:
            New ParseConfig instance with values from dict.

        Raises:
            ConfigError: If a value cannot be coerced.

        Example:
            >>> config = ParseConfig.from_dict({
            ...     "emote_precedence": "text_only",
            ...     "unknown_key": "ignored",
            ... })
            >>> config.emote_precedence
            <EmotePrecedence.TEXT_ONLY: 'text_only'>

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}

        precedence = filtered.get("emote_precedence")
        if isinstance(precedence, str):
            try:
                filtered["emote_precedence"] = EmotePrecedence(precedence.lower())
            except ValueError:
                raise ConfigError(
                    "emote_precedence", f"unknown precedence {precedence!r}"
                ) from None

        schemes = filtered.get("url_schemes")
        if schemes is not None:
            if isinstance(schemes, str):
                schemes = [schemes]
            filtered["url_schemes"] = frozenset(
                s.lower() if isinstance(s, str) else s for s in schemes
            )

        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ParseConfig = ParseConfig()

# Thread-local configuration via ContextVar
_parse_config: ContextVar[ParseConfig] = ContextVar(
    "parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Get current parse configuration (thread-local).

    Returns:
        The active ParseConfig for this thread/context.

    """
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Set parse configuration for current context.

    Args:
        config: ParseConfig instance to use for this context.

    """
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton, avoiding allocation.

    """
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: ParseConfig to use within the context.

    Yields:
        None

    Example:
        >>> with parse_config_context(ParseConfig(code_enabled=False)):
        ...     segments = parse_all("`not code`")
        >>> # Automatically reset to previous config

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _parse_config.get()
    _parse_config.set(config)
    try:
        yield
    finally:
        _parse_config.set(previous)


__all__ = [
    "EmotePrecedence",
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
]
