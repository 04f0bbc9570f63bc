from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Mapping, Optional


@dataclass(frozen=True)
class ApiRequest:
    method: str
    path: str
    params: Optional[Dict[str, Any]] = None
    body: Optional[Dict[str, Any]] = None
    # set on delete routes: "Project", "Feature", ...
    deleted: Optional[str] = None
    deleted_id: Optional[str] = None


def segment(value: Any) -> str:
    """Render a value as a URL path segment, verbatim."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def sparse(
    args: Mapping[str, Any],
    keys: Iterable[str],
    keep_empty: Iterable[str] = (),
) -> Dict[str, Any]:
    """
    Copy only the keys the caller actually set.

    None counts as unset. Empty strings are dropped unless the key is in
    keep_empty. False is a value and is always kept.
    """
    keep_empty = set(keep_empty)
    out: Dict[str, Any] = {}
    for key in keys:
        value = args.get(key)
        if value is None:
            continue
        if isinstance(value, str) and value == "" and key not in keep_empty:
            continue
        out[key] = value
    return out


def required(args: Mapping[str, Any], keys: Iterable[str]) -> Dict[str, Any]:
    return {key: args.get(key) for key in keys}
