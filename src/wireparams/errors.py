"""wireparams exception hierarchy.

Shared across the query, multipart, and forms modules so callers can
catch one base type.
"""

from dataclasses import dataclass


class WireParamsError(Exception):
    """Base for all wireparams-specific errors."""


class ConfigurationError(WireParamsError):
    """Raised when a ``CodecConfig`` is invalid.

    Caught at construction time in ``CodecConfig.__post_init__``.
    """


class DecodeError(WireParamsError):
    """Base for errors raised while decoding wire input."""


@dataclass(frozen=True, slots=True)
class MalformedPartError(DecodeError):
    """A multipart part could not be read.

    Only raised when decoding with ``CodecConfig(strict=True)``; the
    default policy skips the part and keeps going.
    """

    index: int
    reason: str

    def __str__(self) -> str:
        return f"part {self.index}: {self.reason}"


class EncodeError(WireParamsError):
    """Raised when a map cannot be represented in the target wire format."""


class MissingBoundaryError(WireParamsError, ValueError):
    """A multipart operation was given no boundary."""


class UnsupportedContentTypeError(WireParamsError, ValueError):
    """The body's content type is neither URL-encoded nor multipart."""
