#!/usr/bin/env python3
"""Export a JSON Schema for every request schema, for the client build.

Usage:
  python tools/export_json_schemas.py [--out schema/]
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path

from jsonschema import Draft202012Validator

from clubshared import SCHEMAS


def build_json_schemas() -> dict[str, dict]:
    """JSON Schema (Draft 2020-12) per registry name, checked before returning"""
    schemas = {}
    for name, model in sorted(SCHEMAS.items()):
        schema = model.model_json_schema(by_alias=True)
        schema["$schema"] = Draft202012Validator.META_SCHEMA["$id"]
        Draft202012Validator.check_schema(schema)
        schemas[name] = schema
    return schemas


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser()
    ap.add_argument("--out", type=Path, default=Path("schema"), help="Output directory")
    args = ap.parse_args(argv)

    args.out.mkdir(parents=True, exist_ok=True)
    schemas = build_json_schemas()

    for name, schema in schemas.items():
        path = args.out / f"{name}.schema.json"
        with path.open("w", encoding="utf-8") as f:
            json.dump(schema, f, indent=2, sort_keys=True)
            f.write("\n")

    print(f"Wrote {len(schemas)} schema(s) to {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
