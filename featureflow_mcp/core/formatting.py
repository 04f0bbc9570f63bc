from __future__ import annotations
import json
from typing import Any

from featureflow_mcp.core.featureflow_api import FeatureflowAPIError


def to_pretty_json(data: Any) -> str:
    return json.dumps(data, ensure_ascii=False, indent=2)


def format_error(error: BaseException) -> str:
    """Turn any failure into the single line returned to the MCP client."""
    if isinstance(error, FeatureflowAPIError):
        data = error.payload if isinstance(error.payload, dict) else {}
        if data.get("message"):
            return f"Error ({error.status}): {data['message']}"
        if data.get("title"):
            return f"Error ({error.status}): {data['title']}"

    message = str(error)
    if message:
        return f"Error: {message}"
    return f"Error: {error!r}"
