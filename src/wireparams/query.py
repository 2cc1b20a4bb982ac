"""Query string codec.

Encodes a ``MultiValueMap`` as ``key=value&key=value`` text and decodes
it back. Values pass through verbatim: no percent-encoding is applied
in either direction, so the codec is only lossless for tokens without
``&`` or ``=`` in keys and without ``&`` in values.
"""

import logging
from collections.abc import Mapping
from typing import Any

from wireparams._internal.multimap import MultiValueMapping
from wireparams.config import DEFAULT_CONFIG, CodecConfig
from wireparams.multimap import MultiValueMap, as_multi_value_mapping
from wireparams.values import coerce

logger = logging.getLogger("wireparams.query")


def encode_query(params: Mapping[str, Any] | MultiValueMapping | None) -> str:
    """Render *params* as a query string (without the leading ``?``).

    A key with no values is written once as ``key=``; a key with
    several values is repeated once per value, in order::

        encode_query({"a": [1, 2], "b": None})  # 'a=1&a=2&b='

    Args:
        params: Any ``MultiValueMapping``, or a plain mapping accepted
            by the ``MultiValueMap`` constructor. ``None`` encodes to ``""``.
    """
    if not params:
        return ""
    source = as_multi_value_mapping(params)

    segments: list[str] = []
    for key in source:
        texts = source.get_list(key)
        if not texts:
            segments.append(f"{key}=")
            continue
        segments.extend(f"{key}={text}" for text in texts)
    return "&".join(segments)


def decode_query(
    query: str | bytes | None,
    *,
    config: CodecConfig | None = None,
) -> MultiValueMap:
    """Parse a query string into a fresh ``MultiValueMap``.

    Segments are split on ``&`` and each segment on its first ``=``.
    ``key=`` and a bare ``key`` both yield the key with no values;
    repeated keys collect their values in order of appearance. Never
    raises on malformed input.

    Args:
        query: Query text without the leading ``?``. Bytes are decoded
            with ``config.encoding``.
        config: Codec settings, ``DEFAULT_CONFIG`` when omitted.
    """
    config = config or DEFAULT_CONFIG
    result = MultiValueMap()
    if not query:
        return result
    if isinstance(query, bytes):
        query = query.decode(config.encoding, errors="replace")

    for segment in query.split("&"):
        key, sep, remainder = segment.partition("=")
        if not sep:
            logger.debug("Query segment %r has no '='; treating as empty value", segment)
        result.ensure(key)
        if remainder:
            result.add(key, coerce(remainder))
    return result
