"""``wireparams query``: decode a query string to JSON, or encode JSON."""

import argparse

from wireparams.cli._common import build_config, dump_params, load_params
from wireparams.query import decode_query, encode_query


def run_query(args: argparse.Namespace) -> None:
    """Print the decoded map as JSON, or the encoded query string."""
    config = build_config(args)
    if args.encode:
        print(encode_query(load_params(args.input)))
        return
    dump_params(decode_query(args.input, config=config))
