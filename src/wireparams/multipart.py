"""Multipart form-data codec.

A deliberately small subset of ``multipart/form-data``: text fields
only, one ``Content-Disposition`` header per part, no file uploads.

The boundary handed to ``decode_multipart`` is matched literally as a
line prefix, so ``--boundary`` matches both ``--boundary`` and the
closing ``--boundary--`` line. Lines may end in CRLF, CR or LF, mixed
freely within one body.

Malformed parts are skipped and logged unless the config is strict::

    decode_multipart(body, "--xyz")                                  # skip
    decode_multipart(body, "--xyz", config=CodecConfig(strict=True))  # raise
"""

import logging
import re
import secrets
from collections.abc import Mapping
from typing import Any

from python_multipart.multipart import parse_options_header

from wireparams._internal.multimap import MultiValueMapping
from wireparams.config import DEFAULT_CONFIG, CodecConfig
from wireparams.errors import EncodeError, MalformedPartError, MissingBoundaryError
from wireparams.multimap import MultiValueMap, as_multi_value_mapping
from wireparams.values import coerce

logger = logging.getLogger("wireparams.multipart")

# Alternation order matters: CRLF must win over a lone CR
_LINE_BREAK = re.compile(r"(\r\n|\r|\n)")

# Characters that cannot appear inside a quoted name="..." attribute
_UNSAFE_NAME = re.compile(r'["\r\n]')

# (content, terminator); terminator is "" only for an unterminated last line
_Line = tuple[str, str]


def generate_boundary() -> str:
    """Return a fresh random boundary token safe for a Content-Type header."""
    return f"wireparams-{secrets.token_hex(16)}"


def _split_lines(text: str) -> list[_Line]:
    pieces = _LINE_BREAK.split(text)
    # re.split with one group alternates content, terminator, content, ...
    lines = [(pieces[i], pieces[i + 1]) for i in range(0, len(pieces) - 1, 2)]
    if pieces[-1]:
        lines.append((pieces[-1], ""))
    return lines


def _merges_with_line_ending(text: str, eol: str) -> bool:
    """True when *text* framed by *eol* would decode to different text.

    A trailing CR followed by an LF line ending reads back as one CRLF,
    and so does a CR line ending followed by a leading LF.
    """
    return (text.endswith("\r") and eol.startswith("\n")) or (
        text.startswith("\n") and eol.endswith("\r")
    )


def _has_disposition(lines: list[_Line]) -> bool:
    return any(content.lower().startswith("content-disposition:") for content, _ in lines)


def _split_parts(lines: list[_Line], boundary: str) -> list[list[_Line]]:
    """Group lines into parts delimited by boundary lines.

    The preamble before the first boundary is dropped. Lines after the
    last boundary form a final, unterminated part only when they hold
    content; after a closing ``<boundary>--`` line they must also carry
    a Content-Disposition header, otherwise they are an epilogue.
    """
    parts: list[list[_Line]] = []
    current: list[_Line] | None = None
    closed = False
    for line in lines:
        if line[0].startswith(boundary):
            if current is not None:
                parts.append(current)
            current = []
            closed = line[0][len(boundary) :].startswith("--")
        elif current is not None:
            current.append(line)
    if current and any(content.strip() for content, _ in current):
        if not closed or _has_disposition(current):
            parts.append(current)
        else:
            logger.debug("Ignoring %d epilogue line(s) after closing boundary", len(current))
    return parts


def _field_name(headers: list[_Line], encoding: str) -> str | None:
    for content, _ in headers:
        field, sep, value = content.partition(":")
        if not sep or field.strip().lower() != "content-disposition":
            continue
        # parse_options_header round-trips bytes through latin-1, so
        # hand it encoded bytes and decode the result the same way
        _, options = parse_options_header(value.strip().encode(encoding))
        name = options.get(b"name")
        if name is None:
            return None
        return name.decode(encoding)
    return None


def _read_part(part: list[_Line], encoding: str) -> tuple[str, str]:
    """Return ``(name, value_text)`` for one part.

    Raises:
        ValueError: With a short reason when the part is unreadable.
    """
    for separator_index, (content, _) in enumerate(part):
        if not content:
            break
    else:
        msg = "no blank line between headers and body"
        raise ValueError(msg)

    name = _field_name(part[:separator_index], encoding)
    if name is None:
        msg = "no Content-Disposition name attribute"
        raise ValueError(msg)

    body = part[separator_index + 1 :]
    if not body:
        return name, ""
    # The terminator of the last line belongs to the next boundary
    text = "".join(content + terminator for content, terminator in body[:-1])
    return name, text + body[-1][0]


def decode_multipart(
    body: bytes | str | None,
    boundary: str,
    *,
    config: CodecConfig | None = None,
) -> MultiValueMap:
    """Parse a multipart form-data body into a fresh ``MultiValueMap``.

    Each part's value text is coerced the same way query values are:
    all ASCII digits become an integer, anything else a string. A part
    with an empty value creates its key with no values.

    Args:
        body: Raw body. Bytes are decoded with ``config.encoding``.
        boundary: Delimiter matched literally at the start of a line,
            including any leading ``--`` (e.g. ``"--xyz"``).
        config: Codec settings, ``DEFAULT_CONFIG`` when omitted.

    Returns:
        Keys in first-seen order, values in part order.

    Raises:
        MissingBoundaryError: If *boundary* is empty.
        MalformedPartError: If a part is unreadable and ``config.strict``.
    """
    config = config or DEFAULT_CONFIG
    if not boundary:
        msg = "A multipart boundary is required"
        raise MissingBoundaryError(msg)

    result = MultiValueMap()
    if not body:
        return result
    if isinstance(body, bytes):
        body = body.decode(config.encoding, errors="replace")

    for index, part in enumerate(_split_parts(_split_lines(body), boundary)):
        try:
            name, text = _read_part(part, config.encoding)
        except ValueError as exc:
            if config.strict:
                raise MalformedPartError(index=index, reason=str(exc)) from exc
            logger.debug("Skipping multipart part %d: %s", index, exc)
            continue
        result.ensure(name)
        if text:
            result.add(name, coerce(text))
    return result


def encode_multipart(
    params: Mapping[str, Any] | MultiValueMapping | None,
    boundary: str,
    *,
    config: CodecConfig | None = None,
) -> bytes:
    """Render *params* as a multipart form-data body.

    One part per value, in key-then-value order. A key with no values
    still gets one part with an empty body so that it survives a round
    trip. The body ends with a ``<boundary>--`` closing line.

    Args:
        params: Any ``MultiValueMapping``, or a plain mapping accepted
            by the ``MultiValueMap`` constructor. ``None`` produces only
            the closing line.
        boundary: Delimiter written verbatim at the start of each part.
        config: Codec settings, ``DEFAULT_CONFIG`` when omitted.

    Raises:
        MissingBoundaryError: If *boundary* is empty.
        EncodeError: If a key cannot be written as a quoted name, or a
            value contains the boundary or would merge its edge line
            breaks with the line ending.
    """
    config = config or DEFAULT_CONFIG
    if not boundary:
        msg = "A multipart boundary is required"
        raise MissingBoundaryError(msg)
    source = as_multi_value_mapping(params)
    eol = config.line_ending

    chunks: list[str] = []
    for key in source:
        if _UNSAFE_NAME.search(key):
            msg = f"Field name cannot contain quotes or line breaks: {key!r}"
            raise EncodeError(msg)
        header = f'{boundary}{eol}Content-Disposition: form-data; name="{key}"{eol}{eol}'
        texts = source.get_list(key) or [""]
        for text in texts:
            if boundary in text:
                msg = f"Value for {key!r} contains the boundary {boundary!r}"
                raise EncodeError(msg)
            if _merges_with_line_ending(text, eol):
                msg = f"Value for {key!r} cannot be framed with line ending {eol!r}: {text!r}"
                raise EncodeError(msg)
        chunks.extend(f"{header}{text}{eol}" for text in texts)
    chunks.append(f"{boundary}--{eol}")
    return "".join(chunks).encode(config.encoding)
