"""Codec configuration.

CodecConfig is a frozen dataclass: immutable after creation, validated
once, shared freely between threads.
"""

import codecs
from dataclasses import dataclass

from wireparams.errors import ConfigurationError

LINE_ENDINGS = ("\r\n", "\n", "\r")


@dataclass(frozen=True, slots=True)
class CodecConfig:
    """Settings shared by the query and multipart codecs.

    All fields have working defaults. Override what you need::

        config = CodecConfig(encoding="latin-1", strict=True)
    """

    # Text encoding used to turn wire bytes into text and back
    encoding: str = "utf-8"

    # Line terminator written by encode_multipart (decoding accepts all three)
    line_ending: str = "\r\n"

    # Raise MalformedPartError instead of skipping unreadable multipart parts
    strict: bool = False

    def __post_init__(self) -> None:
        try:
            codecs.lookup(self.encoding)
        except LookupError as exc:
            msg = f"Unknown encoding: {self.encoding!r}"
            raise ConfigurationError(msg) from exc
        if self.line_ending not in LINE_ENDINGS:
            msg = f"line_ending must be one of {LINE_ENDINGS!r}, got {self.line_ending!r}"
            raise ConfigurationError(msg)


DEFAULT_CONFIG = CodecConfig()
