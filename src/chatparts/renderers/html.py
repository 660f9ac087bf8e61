"""HTML renderer for classified chat segments.

Turns a segment sequence into an HTML fragment. Every piece of message text
is escaped, so the output is safe to insert into a page even when the
message contains markup.

Thread Safety:
HtmlRenderer holds only immutable settings. Multiple threads can safely
share a single instance and call render() concurrently.
"""

from __future__ import annotations

import html
from collections.abc import Callable, Iterable
from urllib.parse import quote as url_quote

from chatparts.errors import RenderError
from chatparts.lexer.charsets import CODE_MARKER, FENCE, MENTION_MARKER
from chatparts.segments import Segment, SegmentKind
from chatparts.utils.logger import get_logger

logger = get_logger(__name__)


def html_escape(s: str) -> str:
    """Escape HTML special characters, including double quotes."""
    return html.escape(s, quote=False).replace('"', "&quot;")


def _encode_url(url: str) -> str:
    """Percent-encode characters that may not appear raw in an href.

    Already-encoded sequences and RFC 3986 reserved characters are kept.
    Returns a URL that still needs html_escape for attribute quoting.
    """
    return url_quote(url, safe="/:?#[]@!$&'()*+,;=-_.~%")


def _strip_code_delimiters(content: str) -> tuple[str, bool]:
    """Return (body, fenced) for a code segment's content."""
    if len(content) > 2 * len(FENCE) and content.startswith(FENCE) and content.endswith(FENCE):
        return content[len(FENCE) : -len(FENCE)], True
    return content.removeprefix(CODE_MARKER).removesuffix(CODE_MARKER), False


class HtmlRenderer:
    """Render classified segments to an HTML fragment.

    Usage:
        >>> from chatparts import Vocabulary, parse
        >>> renderer = HtmlRenderer()
        >>> renderer.render(parse("hi `x`"))
        'hi <code>x</code>'

    Args:
        emote_url: Optional callback mapping an emote name to an image URL.
            When it returns a URL the emote renders as ``<img>``, otherwise
            as a labelled ``<span>``.
    """

    __slots__ = ("_emote_url",)

    def __init__(self, *, emote_url: Callable[[str], str | None] | None = None) -> None:
        self._emote_url = emote_url

    def render(self, segments: Iterable[Segment]) -> str:
        """Render segments in order.

        Args:
            segments: Any iterable of segments, typically a Parser.

        Returns:
            HTML string.

        Raises:
            RenderError: If a segment has a kind this renderer cannot handle.
        """
        parts: list[str] = []
        for segment in segments:
            parts.append(self._render_segment(segment))
        return "".join(parts)

    def _render_segment(self, segment: Segment) -> str:
        kind = segment.kind
        if kind is SegmentKind.TEXT:
            return html_escape(segment.content)
        if kind is SegmentKind.CODE:
            return self._render_code(segment)
        if kind is SegmentKind.EMOTE:
            return self._render_emote(segment)
        if kind is SegmentKind.MENTION:
            return self._render_mention(segment)
        if kind is SegmentKind.URL:
            return self._render_url(segment)
        raise RenderError(f"Cannot render segment kind {kind!r}")

    def _render_code(self, segment: Segment) -> str:
        body, fenced = _strip_code_delimiters(segment.content)
        if fenced:
            return f"<pre><code>{html_escape(body)}</code></pre>"
        return f"<code>{html_escape(body)}</code>"

    def _render_emote(self, segment: Segment) -> str:
        name = html_escape(segment.content)
        src = self._emote_url(segment.content) if self._emote_url else None
        if src:
            return (
                f'<img class="emote" src="{html_escape(_encode_url(src))}" '
                f'alt="{name}" title="{name}">'
            )
        if self._emote_url:
            logger.debug("no image for emote %r", segment.content)
        return f'<span class="emote" data-emote="{name}">{name}</span>'

    def _render_mention(self, segment: Segment) -> str:
        name = html_escape(segment.content.removeprefix(MENTION_MARKER))
        return f'<span class="mention" data-name="{name}">{html_escape(segment.content)}</span>'

    def _render_url(self, segment: Segment) -> str:
        href = html_escape(_encode_url(segment.content))
        return (
            f'<a href="{href}" rel="noopener noreferrer">'
            f"{html_escape(segment.content)}</a>"
        )
