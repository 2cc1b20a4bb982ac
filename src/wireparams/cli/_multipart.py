"""``wireparams multipart``: decode a form-data body to JSON, or encode JSON.

Decoding needs the boundary exactly as it starts each delimiter line
(usually ``--`` plus the Content-Type boundary). Encoding generates one
when ``--boundary`` is omitted and reports it on stderr.
"""

import argparse
import logging
import sys
from pathlib import Path

from wireparams.cli._common import build_config, dump_params, fail, load_params
from wireparams.errors import WireParamsError
from wireparams.multipart import decode_multipart, encode_multipart, generate_boundary

logger = logging.getLogger("wireparams.cli")


def _read_body(source: str) -> bytes:
    if source == "-":
        return sys.stdin.buffer.read()
    return Path(source).read_bytes()


def run_multipart(args: argparse.Namespace) -> None:
    """Decode ``args.input`` as a body file, or encode it as JSON."""
    config = build_config(args)

    if args.encode:
        params = load_params(args.input)
        boundary = args.boundary or f"--{generate_boundary()}"
        if not args.boundary:
            print(f"boundary: {boundary}", file=sys.stderr)
        try:
            body = encode_multipart(params, boundary, config=config)
        except WireParamsError as exc:
            fail(exc)
        sys.stdout.write(body.decode(config.encoding))
        return

    if not args.boundary:
        print("Error: --boundary is required to decode", file=sys.stderr)
        raise SystemExit(2)
    try:
        body = _read_body(args.input)
    except OSError as exc:
        fail(exc)
    logger.debug("Read %d bytes from %s", len(body), args.input)
    try:
        params = decode_multipart(body, args.boundary, config=config)
    except WireParamsError as exc:
        fail(exc)
    dump_params(params)
