"""Tests for ContextVar-based parse configuration.

Validates defaults, validation, context manager behavior and thread isolation.
"""

from contextvars import Context
from threading import Thread

import pytest

from chatparts import (
    EmotePrecedence,
    ParseConfig,
    SegmentKind,
    Vocabulary,
    get_parse_config,
    parse_all,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from chatparts.errors import ConfigError


class TestParseConfigDataclass:
    """Test ParseConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = ParseConfig()
        assert config.emote_precedence is EmotePrecedence.ALL_KINDS
        assert config.url_schemes == frozenset({"http", "https"})
        assert config.case_insensitive_names is False
        assert config.code_enabled is True
        assert config.mentions_enabled is True
        assert config.urls_enabled is True

    def test_immutability(self) -> None:
        config = ParseConfig()
        with pytest.raises(AttributeError):
            config.code_enabled = False  # type: ignore[misc]

    @pytest.mark.parametrize("scheme", ["", "HTTP", "1http", "ht tp", "http:"])
    def test_invalid_scheme(self, scheme: str) -> None:
        with pytest.raises(ConfigError) as exc_info:
            ParseConfig(url_schemes=frozenset({scheme}))
        assert exc_info.value.field == "url_schemes"

    def test_invalid_precedence(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            ParseConfig(emote_precedence="all_kinds")  # type: ignore[arg-type]
        assert exc_info.value.field == "emote_precedence"


class TestFromDict:
    """Test ParseConfig.from_dict()."""

    def test_unknown_keys_ignored(self) -> None:
        config = ParseConfig.from_dict({"code_enabled": False, "unknown_key": 1})
        assert config.code_enabled is False

    def test_precedence_by_value(self) -> None:
        config = ParseConfig.from_dict({"emote_precedence": "TEXT_ONLY"})
        assert config.emote_precedence is EmotePrecedence.TEXT_ONLY

    def test_unknown_precedence(self) -> None:
        with pytest.raises(ConfigError, match="unknown precedence"):
            ParseConfig.from_dict({"emote_precedence": "sometimes"})

    def test_schemes_from_list(self) -> None:
        config = ParseConfig.from_dict({"url_schemes": ["HTTPS", "ftp"]})
        assert config.url_schemes == frozenset({"https", "ftp"})

    def test_single_scheme_string(self) -> None:
        config = ParseConfig.from_dict({"url_schemes": "https"})
        assert config.url_schemes == frozenset({"https"})

    def test_empty_dict_is_default(self) -> None:
        assert ParseConfig.from_dict({}) == ParseConfig()


class TestContextVarFunctions:
    """Test get/set/reset functions."""

    def test_default_config(self) -> None:
        reset_parse_config()
        assert get_parse_config() == ParseConfig()

    def test_set_and_reset(self) -> None:
        set_parse_config(ParseConfig(code_enabled=False))
        try:
            assert get_parse_config().code_enabled is False
            assert parse_all("`x`")[0].content == "`x`"
            assert parse_all("`x`")[0].kind is SegmentKind.TEXT
        finally:
            reset_parse_config()
        assert get_parse_config().code_enabled is True


class TestContextManager:
    """Test parse_config_context()."""

    def test_applies_within_block(self) -> None:
        vocab = Vocabulary.of(emotes=["`x`"])
        with parse_config_context(ParseConfig(emote_precedence=EmotePrecedence.TEXT_ONLY)):
            assert parse_all("`x`", vocab)[0].kind is SegmentKind.CODE
        assert parse_all("`x`", vocab)[0].kind is SegmentKind.EMOTE

    def test_restores_on_exception(self) -> None:
        before = get_parse_config()
        with pytest.raises(RuntimeError):
            with parse_config_context(ParseConfig(urls_enabled=False)):
                raise RuntimeError("boom")
        assert get_parse_config() is before

    def test_explicit_config_wins(self) -> None:
        with parse_config_context(ParseConfig(urls_enabled=False)):
            segments = parse_all("https://a.io", config=ParseConfig())
        assert segments[0].kind is SegmentKind.URL


class TestThreadIsolation:
    """Config set in one context does not leak into a fresh one."""

    def test_thread_sees_default(self) -> None:
        seen: list[ParseConfig] = []

        def worker() -> None:
            seen.append(get_parse_config())

        with parse_config_context(ParseConfig(code_enabled=False)):
            thread = Thread(target=Context().run, args=(worker,))
            thread.start()
            thread.join()

        assert seen == [ParseConfig()]
