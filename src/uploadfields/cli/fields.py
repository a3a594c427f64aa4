#!/usr/bin/env python3

import json
import sys
from typing import Optional

from uploadfields.core.app_context import AppContext
from uploadfields.core.field.upload_field import UploadField
from uploadfields.core.registry import FieldRegistry


def register(subparsers):
    sp = subparsers.add_parser("fields", help="Upload field utilities")
    sps = sp.add_subparsers(dest="fields_cmd")

    # default when user runs: `uploadfields fields`
    def fields_default(args, ctx: AppContext) -> int:
        sp.print_help()
        return 1
    sp.set_defaults(func=fields_default)

    lp = sps.add_parser("list", help="List upload fields")
    lp.add_argument("--all", action="store_true", help="Include invalid definitions")
    lp.add_argument("--invalid", action="store_true", help="Show only invalid definitions")
    lp.add_argument("--json", action="store_true", help="JSON output")
    lp.set_defaults(func=list_fields)

    shp = sps.add_parser("show", help="Show a field's form descriptor")
    shp.add_argument("field", help="Field id or key")
    shp.set_defaults(func=show_field)

    op = sps.add_parser("options", help="Show a field's parsed option tree")
    op.add_argument("field", help="Field id or key")
    op.set_defaults(func=show_options)


def resolve_field(registry: FieldRegistry, ref: str) -> Optional[UploadField]:
    """Look a field up by numeric id, falling back to its key."""
    ref = ref.strip()
    if ref.isdigit():
        field = registry.get(int(ref))
        if field is not None:
            return field
    return registry.get_by_key(ref)


def list_fields(args, ctx: AppContext) -> int:
    print("Site file:", ctx.site.path)

    if args.invalid:
        entries = ctx.registry.invalid_entries()
    elif args.all:
        entries = ctx.registry.entries()
    else:
        entries = ctx.registry.valid_entries()

    if args.json:
        payload = []
        for e in entries:
            field = ctx.registry.get(e.id) if e.valid else None
            payload.append({
                "id": e.id,
                "title": e.title,
                "valid": e.valid,
                "reason": e.reason,
                "type": field.type.value if field else None,
                "key": field.key if field else None,
                "label": field.label if field else None,
            })
        print(json.dumps(payload, indent=2))
        return 0 if payload else 1

    if not entries:
        print("No upload fields found.")
        return 1

    print("\nUpload Fields:")
    for e in entries:
        if not e.valid:
            print(f"  ✗ {e.title} [{e.id}]: {e.reason}")
            continue
        field = ctx.registry.get(e.id)
        print(f"  ✓ {field.label} [{e.id}] {field.type.value} key={field.key}")
    return 0


def show_field(args, ctx: AppContext) -> int:
    field = resolve_field(ctx.registry, args.field)
    if field is None:
        print(f"Upload field {args.field!r} not found", file=sys.stderr)
        return 1
    print(json.dumps(field.get_descriptor().to_dict(), indent=2, ensure_ascii=False))
    return 0


def show_options(args, ctx: AppContext) -> int:
    field = resolve_field(ctx.registry, args.field)
    if field is None:
        print(f"Upload field {args.field!r} not found", file=sys.stderr)
        return 1
    if not field.type.is_choice():
        print(f"Upload field {field.key!r} is a {field.type.value} field and has no options", file=sys.stderr)
        return 1
    options = field.get_descriptor().options or {}
    print(json.dumps(options, indent=2, ensure_ascii=False))
    return 0
