"""Exception classes for chatparts.

Parsing itself never fails: every character of a message is classified,
at minimum as text. These exceptions cover caller misuse around the
pipeline (configuration, serialized data, rendering).
"""

from __future__ import annotations


class ChatPartsError(Exception):
    """Base exception for all chatparts errors.

    Subclass this for specific error categories.
    """

    pass


class ConfigError(ChatPartsError):
    """Invalid parse configuration.

    Raised when a ParseConfig field holds a value the pipeline cannot use.
    """

    def __init__(self, field: str, message: str) -> None:
        """Initialize config error.

        Args:
            field: Name of the offending ParseConfig field
            message: Description of the problem
        """
        self.field = field
        super().__init__(f"Config field '{field}': {message}")


class SerializationError(ChatPartsError):
    """Malformed serialized segment data.

    Raised by from_dict/from_json when the input does not describe a
    valid Segment.
    """

    pass


class RenderError(ChatPartsError):
    """Error during HTML rendering.

    Raised when the renderer encounters a segment it cannot render.
    """

    pass
