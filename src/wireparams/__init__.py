"""wireparams: multi-valued parameter maps to query strings and form bodies.

Encodes an ordered ``MultiValueMap`` as a URL query string or a
``multipart/form-data`` body and decodes both back, keeping key order,
value order, and the difference between "no values" and "absent".

Basic usage::

    from wireparams import decode_query, encode_query

    params = decode_query("tag=a&tag=b&page=2&flag=")
    params["page"]           # (IntegerValue(value=2),)
    params["flag"]           # ()
    encode_query(params)     # 'tag=a&tag=b&page=2&flag='

Multipart::

    from wireparams import decode_multipart, encode_multipart

    body = encode_multipart({"key": [1, 2]}, "--xyz")
    decode_multipart(body, "--xyz")
"""

__version__ = "0.1.0"
__all__ = [
    "CodecConfig",
    "ConfigurationError",
    "DecodeError",
    "EncodeError",
    "IntegerValue",
    "MalformedPartError",
    "MissingBoundaryError",
    "MultiValueMap",
    "StringValue",
    "UnsupportedContentTypeError",
    "Value",
    "WireParamsError",
    "coerce",
    "decode_multipart",
    "decode_query",
    "encode_multipart",
    "encode_query",
    "generate_boundary",
    "multi_value_map_equals",
    "parse_body",
    "render_body",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import wireparams`` fast while providing a flat top-level API.
    """
    if name in ("IntegerValue", "StringValue", "Value", "coerce"):
        from wireparams import values as _values

        return getattr(_values, name)

    if name in ("MultiValueMap", "multi_value_map_equals"):
        from wireparams import multimap as _multimap

        return getattr(_multimap, name)

    if name in ("encode_query", "decode_query"):
        from wireparams import query as _query

        return getattr(_query, name)

    if name in ("encode_multipart", "decode_multipart", "generate_boundary"):
        from wireparams import multipart as _multipart

        return getattr(_multipart, name)

    if name in ("parse_body", "render_body"):
        from wireparams import forms as _forms

        return getattr(_forms, name)

    if name == "CodecConfig":
        from wireparams.config import CodecConfig

        return CodecConfig

    if name in (
        "ConfigurationError",
        "DecodeError",
        "EncodeError",
        "MalformedPartError",
        "MissingBoundaryError",
        "UnsupportedContentTypeError",
        "WireParamsError",
    ):
        from wireparams import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
