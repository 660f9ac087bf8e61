"""Segment serialization — JSON round-trip for chatparts segments.

Converts segments to/from JSON-compatible dicts. Useful for:
- Handing parsed messages to a frontend renderer
- Caching classification results next to stored messages
- Debugging and inspection

All output is deterministic (sorted keys) for cache-key stability.

Example:
    from chatparts import parse_all
    from chatparts.serialization import to_json, from_json

    segments = parse_all("hey @bob")
    restored = from_json(to_json(segments))
    assert restored == segments

Thread Safety:
    All functions are pure — safe to call from any thread.

"""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any

from chatparts.errors import SerializationError
from chatparts.segments import Segment, SegmentKind

_FIELDS = ("kind", "content", "start", "end")


def to_dict(segment: Segment) -> dict[str, Any]:
    """Convert a segment to a JSON-compatible dict.

    Args:
        segment: Any chatparts Segment.

    Returns:
        Dict with ``kind`` (lowercase name), ``content``, ``start``, ``end``.

    """
    return {
        "kind": segment.kind.value,
        "content": segment.content,
        "start": segment.start,
        "end": segment.end,
    }


def from_dict(data: dict[str, Any]) -> Segment:
    """Reconstruct a segment from a dict produced by to_dict().

    Args:
        data: Dict with the four segment fields.

    Returns:
        The Segment.

    Raises:
        SerializationError: If a field is missing, the kind is unknown,
            or the span length does not match the content.

    """
    missing = [name for name in _FIELDS if name not in data]
    if missing:
        raise SerializationError(f"Missing segment fields: {', '.join(missing)}")

    try:
        kind = SegmentKind(data["kind"])
    except ValueError:
        raise SerializationError(f"Unknown segment kind: {data['kind']!r}") from None

    content, start, end = data["content"], data["start"], data["end"]
    if not isinstance(content, str):
        raise SerializationError(f"Segment content must be a string, got {content!r}")
    if not isinstance(start, int) or not isinstance(end, int) or start < 0:
        raise SerializationError(f"Invalid segment span: {start!r}..{end!r}")
    if end - start != len(content):
        raise SerializationError(
            f"Segment span {start}..{end} does not match content length {len(content)}"
        )

    return Segment(kind=kind, content=content, start=start, end=end)


def to_json(segments: Segment | Iterable[Segment], *, indent: int | None = None) -> str:
    """Serialize one segment or a sequence of segments to a JSON string.

    Args:
        segments: A Segment or any iterable of segments (including a Parser).
        indent: Optional JSON indentation (None for compact output).

    Returns:
        JSON string. A single segment becomes an object, a sequence an array.

    """
    if isinstance(segments, Segment):
        data: Any = to_dict(segments)
    else:
        data = [to_dict(segment) for segment in segments]
    return json.dumps(data, sort_keys=True, indent=indent, ensure_ascii=False)


def from_json(json_str: str) -> Segment | list[Segment]:
    """Deserialize a JSON string produced by to_json().

    Args:
        json_str: JSON object or array of segment objects.

    Returns:
        A Segment for an object, a list of segments for an array.

    Raises:
        SerializationError: If the JSON is malformed or a segment is invalid.

    """
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise SerializationError(f"Invalid segment JSON: {e}") from e

    if isinstance(data, dict):
        return from_dict(data)
    if isinstance(data, list):
        return [_item_from_json(item) for item in data]
    raise SerializationError(f"Expected a JSON object or array, got {type(data).__name__}")


def _item_from_json(item: Any) -> Segment:
    if not isinstance(item, dict):
        raise SerializationError(f"Expected a segment object, got {type(item).__name__}")
    return from_dict(item)
