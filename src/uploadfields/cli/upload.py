#!/usr/bin/env python3

import sys
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

import yaml

from uploadfields.core.app_context import AppContext
from uploadfields.core.constants import DEFAULT_TEXT_ENCODING


def register(subparsers):
    sp = subparsers.add_parser("upload", help="Upload workflow commands")
    sps = sp.add_subparsers(dest="upload_cmd")

    def upload_default(args, ctx: AppContext) -> int:
        sp.print_help()
        return 1
    sp.set_defaults(func=upload_default)

    cp = sps.add_parser("complete", help="Append submitted field values to a file page")
    cp.add_argument("title", help="File page title, e.g. 'File:Example.png'")
    cp.add_argument("--summary", default="", help="Upload description text.")
    cp.add_argument(
        "--value",
        action="append",
        default=None,
        metavar="KEY=VALUE",
        help="Submitted field value (repeat a key to submit a list).",
    )
    cp.add_argument("--values-file", default=None, help="YAML mapping of field key -> value.")
    cp.add_argument("--reupload", action="store_true", help="Treat as a re-upload (no edit).")
    cp.add_argument("--dry-run", action="store_true", help="Print the page text without saving.")
    cp.set_defaults(func=complete_upload)


def parse_values(pairs: Optional[Iterable[str]]) -> Dict[str, Any]:
    """
    Parse KEY=VALUE pairs. A key given more than once collects a list.

    Raises:
        ValueError: for a pair without '='.
    """
    values: Dict[str, Any] = {}
    for pair in pairs or []:
        if "=" not in pair:
            raise ValueError(f"Expected KEY=VALUE, got {pair!r}")
        key, value = pair.split("=", 1)
        key = key.strip()
        if key in values:
            prev = values[key]
            values[key] = (prev if isinstance(prev, list) else [prev]) + [value]
        else:
            values[key] = value
    return values


def load_values_file(path: Path) -> Dict[str, Any]:
    """
    Raises:
        ValueError: if the file is not a YAML mapping.
    """
    try:
        raw = yaml.safe_load(path.read_text(encoding=DEFAULT_TEXT_ENCODING)) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ValueError(f"Failed to read values file {str(path)!r}: {e}") from e
    if not isinstance(raw, dict):
        raise ValueError(f"Values file {str(path)!r} must contain a mapping")
    return {str(k): v for k, v in raw.items()}


def complete_upload(args, ctx: AppContext) -> int:
    try:
        submitted = load_values_file(Path(args.values_file)) if args.values_file else {}
        submitted.update(parse_values(args.value))
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    text = ctx.hooks.on_upload_complete(
        args.title, submitted, args.summary, for_reupload=args.reupload
    )
    if text is None:
        print(f"{args.title}: no changes")
        return 0

    if args.dry_run:
        print(text)
        return 0

    ctx.site.save()
    print(f"{args.title}: saved to {ctx.site.path}")
    return 0
