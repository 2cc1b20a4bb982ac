"""wireparams CLI: encode and decode query strings and form bodies.

Entry point registered as ``wireparams`` in ``pyproject.toml``::

    [project.scripts]
    wireparams = "wireparams.cli:main"
"""

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``wireparams`` command."""
    parser = argparse.ArgumentParser(
        prog="wireparams",
        description="wireparams: multi-valued parameter maps to query strings and form bodies.",
    )
    parser.add_argument("--verbose", action="store_true", help="Log debug diagnostics to stderr")
    parser.add_argument("--encoding", default="utf-8", help="Text encoding (default: utf-8)")
    subparsers = parser.add_subparsers(dest="command")

    # -- wireparams query -------------------------------------------------
    query_parser = subparsers.add_parser("query", help="Decode or encode a query string")
    query_parser.add_argument(
        "input",
        help="Query string to decode, or a JSON object with --encode",
    )
    query_parser.add_argument(
        "--encode",
        action="store_true",
        help="Treat input as JSON and print the query string",
    )

    # -- wireparams multipart ---------------------------------------------
    multipart_parser = subparsers.add_parser("multipart", help="Decode or encode a form-data body")
    multipart_parser.add_argument(
        "input",
        help="Body file to decode ('-' for stdin), or a JSON object with --encode",
    )
    multipart_parser.add_argument(
        "--boundary",
        default=None,
        help="Delimiter line prefix, including any leading '--' (required to decode)",
    )
    multipart_parser.add_argument(
        "--encode",
        action="store_true",
        help="Treat input as JSON and print the body",
    )
    multipart_parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on malformed parts instead of skipping them",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if args.command == "query":
        from wireparams.cli._query import run_query

        run_query(args)
    elif args.command == "multipart":
        from wireparams.cli._multipart import run_multipart

        run_multipart(args)
