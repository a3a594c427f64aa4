#!/usr/bin/env python3

import argparse
import sys

from uploadfields.core.app import get_context
from uploadfields.core.logging_setup import configure_logging
from uploadfields.cli import config, fields, upload


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="uploadfields", description="UploadFields CLI")
    parser.add_argument("--site", default=None, help="Site YAML file (overrides config 'site_path').")
    subparsers = parser.add_subparsers(dest="command")

    # Register subcommands (they should accept ctx)
    fields.register(subparsers)
    upload.register(subparsers)
    config.register(subparsers)
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    try:
        ctx = get_context(site_path_override=args.site)  # built once
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    configure_logging(ctx.config)
    return args.func(args, ctx)


if __name__ == "__main__":
    sys.exit(main())
