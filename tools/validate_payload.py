#!/usr/bin/env python3
"""Validate a JSON request payload against a named request schema.

Usage:
  python tools/validate_payload.py create_event path/to/payload.json
  python tools/validate_payload.py --list
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path

from clubshared import SCHEMAS, validate


def load_json(path: Path):
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser()
    ap.add_argument("schema", nargs="?", help="Schema name (see --list)")
    ap.add_argument("payload", nargs="?", type=Path, help="Path to payload JSON file")
    ap.add_argument("--list", action="store_true", help="List schema names and exit")
    args = ap.parse_args(argv)

    if args.list:
        for name in sorted(SCHEMAS):
            print(name)
        return 0

    if not args.schema or not args.payload:
        ap.error("schema and payload are required")
    if args.schema not in SCHEMAS:
        ap.error(f"unknown schema '{args.schema}' (see --list)")

    result = validate(args.schema, load_json(args.payload))

    if result.valid:
        print(f"OK: payload is valid for {args.schema}")
        return 0

    print(f"INVALID: {len(result.errors)} error(s)")
    for err in result.errors:
        print(f"- {err.field}: {err.message}")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
