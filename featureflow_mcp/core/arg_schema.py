# core/arg_schema.py
from __future__ import annotations
from typing import Any, Dict, Mapping

# JSON-schema type name -> python type accepted for it
TYPE_MAP = {
    "string": str,
    "boolean": bool,
}


class ArgumentError(Exception):
    pass


def _assert(cond: bool, msg: str) -> None:
    if not cond:
        raise ArgumentError(msg)


def validate_arguments(schema: Dict[str, Any], args: Any) -> None:
    """
    Check a tool call's arguments against its inputSchema.

    Walks any schema of the shape the registry uses:
      {"type": "object", "properties": {...}, "required": [...]}
    Absent and None values count as unset. Unknown keys are ignored.
    """
    _assert(isinstance(args, Mapping), "Arguments must be a JSON object")

    properties: Dict[str, Any] = schema.get("properties") or {}
    required = schema.get("required") or []

    missing = [k for k in required if args.get(k) is None]
    _assert(not missing, f"Missing required arguments: {missing}")

    for key, prop in properties.items():
        value = args.get(key)
        if value is None:
            continue

        expected = TYPE_MAP.get(prop.get("type", ""))
        if expected is not None:
            _assert(
                isinstance(value, expected),
                f"{key} must be of type {prop['type']}",
            )

        allowed = prop.get("enum")
        if allowed is not None:
            _assert(value in allowed, f"{key} must be one of {list(allowed)}")
