"""Tests for the high-level chatparts API."""

import pytest


class TestParseFunction:
    """Tests for the parse() and parse_all() functions."""

    def test_parse_returns_lazy_parser(self) -> None:
        from chatparts import Parser, parse

        result = parse("Hello")
        assert isinstance(result, Parser)

    def test_parse_all_returns_list(self) -> None:
        from chatparts import SegmentKind, parse_all

        segments = parse_all("Hello, this is a test!")
        assert len(segments) == 1
        assert segments[0].kind is SegmentKind.TEXT

    def test_vocabulary_is_optional(self) -> None:
        from chatparts import SegmentKind, parse_all

        assert parse_all("@bob")[0].kind is SegmentKind.TEXT

    def test_explicit_config(self) -> None:
        from chatparts import ParseConfig, SegmentKind, parse_all

        segments = parse_all("https://example.com", config=ParseConfig(urls_enabled=False))
        assert all(s.kind is SegmentKind.TEXT for s in segments)


class TestScenarios:
    """Representative messages, checked through the public API."""

    @pytest.mark.parametrize(
        ("source", "emotes", "names", "expected"),
        [
            ("```let foo = 1;```", [], [], [("CODE", "```let foo = 1;```")]),
            ("Hello, this is a test!", [], [], [("TEXT", "Hello, this is a test!")]),
            (
                "Hello Kappa World!",
                ["Kappa"],
                [],
                [("TEXT", "Hello "), ("EMOTE", "Kappa"), ("TEXT", " World!")],
            ),
            ("test `", [], [], [("TEXT", "test `")]),
            (
                "https://example.com/a?b=c not sure",
                [],
                [],
                [("URL", "https://example.com/a?b=c"), ("TEXT", " not sure")],
            ),
            ("hey @bob", [], ["bob"], [("TEXT", "hey "), ("MENTION", "@bob")]),
        ],
    )
    def test_scenario(
        self,
        source: str,
        emotes: list[str],
        names: list[str],
        expected: list[tuple[str, str]],
    ) -> None:
        from chatparts import Vocabulary, parse_all

        vocab = Vocabulary.of(emotes=emotes, names=names)
        actual = [(s.kind.name, s.content) for s in parse_all(source, vocab)]
        assert actual == expected


class TestRenderFunction:
    """Tests for the render() function."""

    def test_render_url(self) -> None:
        from chatparts import render

        html = render("see https://example.com")
        assert html == (
            'see <a href="https://example.com" rel="noopener noreferrer">'
            "https://example.com</a>"
        )

    def test_render_with_vocabulary(self) -> None:
        from chatparts import Vocabulary, render

        html = render("Kappa", Vocabulary.of(emotes=["Kappa"]))
        assert 'class="emote"' in html

    def test_render_with_custom_renderer(self) -> None:
        from chatparts import HtmlRenderer, Vocabulary, render

        renderer = HtmlRenderer(emote_url=lambda name: f"/emotes/{name}.png")
        html = render("Kappa", Vocabulary.of(emotes=["Kappa"]), renderer=renderer)
        assert html.startswith('<img class="emote" src="/emotes/Kappa.png"')


class TestSegment:
    """Tests for the Segment data type."""

    def test_span(self) -> None:
        from chatparts import Segment, SegmentKind

        segment = Segment(kind=SegmentKind.TEXT, content="ab", start=3, end=5)
        assert segment.span == (3, 5)

    def test_byte_span(self) -> None:
        from chatparts import SegmentKind, Vocabulary, parse_all

        source = "👪 Kappa"
        segments = parse_all(source, Vocabulary.of(emotes=["Kappa"]))
        emote = segments[-1]
        assert emote.kind is SegmentKind.EMOTE
        assert emote.span == (2, 7)
        start, end = emote.byte_span(source)
        assert (start, end) == (5, 10)
        assert source.encode("utf-8")[start:end] == b"Kappa"

    def test_frozen(self) -> None:
        from chatparts import Segment, SegmentKind

        segment = Segment(kind=SegmentKind.TEXT, content="a", start=0, end=1)
        with pytest.raises(AttributeError):
            segment.kind = SegmentKind.EMOTE  # type: ignore[misc]

    def test_with_kind_same_kind_returns_self(self) -> None:
        from chatparts import Segment, SegmentKind

        segment = Segment(kind=SegmentKind.TEXT, content="a", start=0, end=1)
        assert segment.with_kind(SegmentKind.TEXT) is segment
        assert segment.with_kind(SegmentKind.EMOTE).kind is SegmentKind.EMOTE

    def test_repr_truncates(self) -> None:
        from chatparts import Segment, SegmentKind

        segment = Segment(kind=SegmentKind.TEXT, content="x" * 30, start=0, end=30)
        assert repr(segment) == "Segment(TEXT, 'xxxxxxxxxxxxxxxxx...', 0:30)"


class TestVocabulary:
    """Tests for the Vocabulary data type."""

    def test_of_accepts_iterables(self) -> None:
        from chatparts import Vocabulary

        vocab = Vocabulary.of(emotes=iter(["a", "b"]), names=("c",))
        assert vocab.emotes == frozenset({"a", "b"})
        assert vocab.names == frozenset({"c"})

    def test_equality_by_value(self) -> None:
        from chatparts import Vocabulary

        assert Vocabulary.of(emotes=["a"]) == Vocabulary.of(emotes=["a"])

    def test_is_name_casefold(self) -> None:
        from chatparts import Vocabulary

        vocab = Vocabulary.of(names=["Bob"])
        assert not vocab.is_name("bob")
        assert vocab.is_name("bob", casefold=True)

    def test_folded_names_built_once(self) -> None:
        from chatparts import Vocabulary

        vocab = Vocabulary.of(names=["Bob", "STRASSE"])
        assert vocab.folded_names == frozenset({"bob", "strasse"})
        assert vocab.is_name("straße", casefold=True)
        assert not vocab.is_name("alice", casefold=True)

    def test_derived_fields_ignored_in_equality(self) -> None:
        from chatparts import Vocabulary

        vocab = Vocabulary.of(emotes=["Kappa", ":)"], names=["Bob"])
        assert vocab.longest_emote == 5
        assert vocab == Vocabulary.of(emotes=[":)", "Kappa"], names=["Bob"])
        assert Vocabulary().longest_emote == 0

    def test_is_emote(self) -> None:
        from chatparts import Vocabulary

        vocab = Vocabulary.of(emotes=[":)"])
        assert vocab.is_emote(":)")
        assert not vocab.is_emote(":(")
