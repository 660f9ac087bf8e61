"""URL resolver layer.

Upgrades text segments to URL when their content is a syntactically valid
absolute URL. Nothing is fetched; validation is purely lexical.

Validation rules:
- scheme is one of the configured schemes (case-insensitive)
- an authority with a non-empty host is present
- the host is a DNS name (IDNA-encodable, labels of letters, digits,
  hyphens and underscores), an IPv4 address, or a bracketed IPv6 address
- the port, when given, is a number in 0-65535
- no whitespace or control characters anywhere

"""

from __future__ import annotations

import ipaddress
import re
from collections.abc import Iterable, Iterator
from urllib.parse import SplitResult, urlsplit

from chatparts.segments import Segment, SegmentKind
from chatparts.utils.logger import get_logger

logger = get_logger(__name__)

# Host labels after IDNA encoding. Hyphens may lead or trail a label, as
# browsers accept them; a trailing root dot is allowed
_LABEL = r"[a-z0-9_-]+"
_DNS_HOST_RE = re.compile(rf"{_LABEL}(?:\.{_LABEL})*\.?")

_IPV4_LIKE_RE = re.compile(r"[0-9.]+")

DEFAULT_SCHEMES: frozenset[str] = frozenset({"http", "https"})


def is_valid_url(text: str, schemes: Iterable[str] = DEFAULT_SCHEMES) -> bool:
    """Check whether text is an absolute URL with one of the given schemes.

    Args:
        text: Candidate URL
        schemes: Accepted lowercase schemes

    Returns:
        True if text parses as an absolute URL with a valid host.

    Example:
        >>> is_valid_url("https://example.com/a?b=c")
        True
        >>> is_valid_url("https://")
        False
    """
    if not text or not text.isprintable() or any(c.isspace() for c in text):
        return False

    try:
        parts = urlsplit(text)
    except ValueError:
        # Unbalanced IPv6 brackets and similar
        return False

    if parts.scheme.lower() not in schemes or not parts.netloc:
        return False
    return _has_valid_authority(parts)


def _has_valid_authority(parts: SplitResult) -> bool:
    try:
        parts.port
    except ValueError:
        return False

    host = parts.hostname
    if not host:
        return False

    if "[" in parts.netloc:
        try:
            ipaddress.IPv6Address(host)
        except ValueError:
            return False
        return True

    if _IPV4_LIKE_RE.fullmatch(host):
        try:
            ipaddress.IPv4Address(host)
        except ValueError:
            return False
        return True

    try:
        ascii_host = host.encode("idna").decode("ascii")
    except UnicodeError:
        return False
    return _DNS_HOST_RE.fullmatch(ascii_host) is not None


def resolve_urls(
    segments: Iterable[Segment],
    schemes: Iterable[str] = DEFAULT_SCHEMES,
) -> Iterator[Segment]:
    """Upgrade text segments that are valid URLs.

    Only TEXT segments are considered; emotes, code and mentions pass
    through untouched.

    Args:
        segments: Segments from the emote resolver
        schemes: Accepted lowercase schemes

    Yields:
        Segments in the same order, possibly reclassified as URL.
    """
    schemes = frozenset(schemes)
    for segment in segments:
        if segment.kind is SegmentKind.TEXT and is_valid_url(segment.content, schemes):
            logger.debug("url %r at %d:%d", segment.content, segment.start, segment.end)
            yield segment.with_kind(SegmentKind.URL)
        else:
            yield segment
