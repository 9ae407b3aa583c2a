"""Package-specific exception types."""

from __future__ import annotations


class MetadataError(ValueError):
    """Base class for frontmatter decoding errors.

    Represents a failure scoped to a single document; batch callers record it
    and carry on with the remaining documents.
    """


class MalformedMetadataError(MetadataError):
    """Raised when a frontmatter payload fails to decode under its format.

    Args:
        kind: Name of the declared format (``"toml"`` or ``"yaml"``).
        reason: Message reported by the decoder.
    """

    def __init__(self, kind: str, reason: str):
        self.kind = kind
        self.reason = reason
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        return f"Invalid {self.kind} frontmatter: {self.reason}"


class MissingMetadataError(MetadataError):
    """Raised when decoding is requested for a document without frontmatter."""

    def __init__(self):
        super().__init__("markdown file is missing frontmatter")
