"""Helpers shared by the CLI subcommands."""

import argparse
import json
import sys
from typing import NoReturn

from wireparams.config import CodecConfig
from wireparams.errors import WireParamsError
from wireparams.multimap import MultiValueMap


def fail(exc: Exception) -> NoReturn:
    """Report *exc* on stderr and exit with status 1."""
    print(f"Error: {exc}", file=sys.stderr)
    raise SystemExit(1) from exc


def build_config(args: argparse.Namespace) -> CodecConfig:
    try:
        return CodecConfig(encoding=args.encoding, strict=getattr(args, "strict", False))
    except WireParamsError as exc:
        fail(exc)


def load_params(text: str) -> MultiValueMap:
    """Build a map from a JSON object of ``key -> value | [values] | null``."""
    try:
        data = json.loads(text)
        if not isinstance(data, dict):
            msg = "expected a JSON object"
            raise TypeError(msg)
        return MultiValueMap(data)
    except (ValueError, TypeError) as exc:
        fail(exc)


def dump_params(params: MultiValueMap) -> None:
    print(json.dumps(params.to_dict(), ensure_ascii=False))
