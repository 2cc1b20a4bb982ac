"""Form body dispatch by content type.

Picks the query or multipart codec from a ``Content-Type`` header value
so an HTTP client can hand over a body and its header untouched::

    params = parse_body(body, "multipart/form-data; boundary=xyz")
    body, content_type = render_body(params, "multipart/form-data")

Header parameters are read with ``python-multipart``'s
``parse_options_header``.
"""

from collections.abc import Mapping
from typing import Any

from python_multipart.multipart import parse_options_header

from wireparams.config import DEFAULT_CONFIG, CodecConfig
from wireparams.errors import MissingBoundaryError, UnsupportedContentTypeError
from wireparams.multimap import MultiValueMap
from wireparams.multipart import decode_multipart, encode_multipart, generate_boundary
from wireparams.query import decode_query, encode_query

URLENCODED = "application/x-www-form-urlencoded"
MULTIPART = "multipart/form-data"


def multipart_content_type(boundary: str) -> str:
    """Build the ``Content-Type`` header value for a multipart body."""
    return f"{MULTIPART}; boundary={boundary}"


def boundary_from_content_type(content_type: str) -> str:
    """Extract the ``boundary`` parameter from a ``Content-Type`` value.

    Raises:
        MissingBoundaryError: If the header carries no boundary.
    """
    _, options = parse_options_header(content_type)
    boundary = options.get(b"boundary")
    if not boundary:
        msg = f"Content type has no boundary parameter: {content_type!r}"
        raise MissingBoundaryError(msg)
    return boundary.decode("latin-1")


def _media_type(content_type: str) -> str:
    return content_type.lower().split(";")[0].strip()


def parse_body(
    body: bytes | str | None,
    content_type: str,
    *,
    config: CodecConfig | None = None,
) -> MultiValueMap:
    """Decode a form body according to its ``Content-Type`` header value.

    Supports:
    - ``application/x-www-form-urlencoded`` (query string codec)
    - ``multipart/form-data`` (multipart codec, delimiter ``--<boundary>``)

    Raises:
        UnsupportedContentTypeError: For any other media type.
        MissingBoundaryError: For multipart without a boundary parameter.
    """
    media_type = _media_type(content_type)

    if media_type == URLENCODED:
        return decode_query(body, config=config)

    if media_type == MULTIPART:
        boundary = boundary_from_content_type(content_type)
        return decode_multipart(body, f"--{boundary}", config=config)

    msg = f"Unsupported form content type: {content_type!r}"
    raise UnsupportedContentTypeError(msg)


def render_body(
    params: Mapping[str, Any] | None,
    content_type: str = URLENCODED,
    *,
    config: CodecConfig | None = None,
) -> tuple[bytes, str]:
    """Encode *params* for a request body.

    Returns the body bytes and the ``Content-Type`` header value to send
    with them. Multipart bodies get a fresh boundary unless
    *content_type* already names one.

    Raises:
        UnsupportedContentTypeError: For any other media type.
    """
    config = config or DEFAULT_CONFIG
    media_type = _media_type(content_type)

    if media_type == URLENCODED:
        return encode_query(params).encode(config.encoding), URLENCODED

    if media_type == MULTIPART:
        try:
            boundary = boundary_from_content_type(content_type)
        except MissingBoundaryError:
            boundary = generate_boundary()
        body = encode_multipart(params, f"--{boundary}", config=config)
        return body, multipart_content_type(boundary)

    msg = f"Unsupported form content type: {content_type!r}"
    raise UnsupportedContentTypeError(msg)
