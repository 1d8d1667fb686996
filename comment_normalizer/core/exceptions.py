"""Exception hierarchy for the comment normalizer."""

from typing import Any


class NormalizerError(Exception):
    """Base class for all errors raised by the comment normalizer."""


class UnsupportedSchemaKind(NormalizerError, ValueError):
    """Raised when a batch is submitted with a source schema tag the adapter does not know.

    Fatal for the whole batch: it is raised before any record is processed.
    """

    def __init__(self, schema_kind: Any):
        self.schema_kind = schema_kind
        super().__init__(f"Unsupported schema kind: {schema_kind!r}")


class InvalidRecordError(NormalizerError):
    """Raised when a single record cannot be normalized (e.g. its text field is null)."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)


class EmojiDictionaryError(NormalizerError, ValueError):
    """Raised when an emoji dictionary table cannot be interpreted."""
