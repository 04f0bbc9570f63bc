import copy
import logging
from functools import lru_cache

from featureflow_mcp.core import config
from featureflow_mcp.core.arg_schema import validate_arguments
from featureflow_mcp.core.featureflow_api import FeatureflowAPI
from featureflow_mcp.core.formatting import format_error, to_pretty_json
from .loader import load_tools

log = logging.getLogger(__name__)

TOOL_ROUTES, TOOL_SPECS = load_tools()
_SCHEMAS = {spec["name"]: spec["inputSchema"] for spec in TOOL_SPECS}


def list_tools() -> list[dict]:
    return copy.deepcopy(list(TOOL_SPECS))


@lru_cache(maxsize=1)
def default_api() -> FeatureflowAPI:
    return FeatureflowAPI(config.API_BASE_URL, config.API_TOKEN, timeout=config.REQUEST_TIMEOUT_SEC)


def dispatch(tool_name: str, args: dict | None = None, api: FeatureflowAPI | None = None) -> str:
    if args is None:
        args = {}

    try:
        if not isinstance(tool_name, str) or tool_name not in TOOL_ROUTES:
            return f"Unknown tool: {tool_name}"

        validate_arguments(_SCHEMAS[tool_name], args)
        req = TOOL_ROUTES[tool_name](args)
        log.info(f"{tool_name} -> {req.method} {req.path}")

        data = (api or default_api()).send(req)
        if req.deleted:
            return f"{req.deleted} '{req.deleted_id}' deleted successfully."
        return to_pretty_json(data)
    except Exception as e:
        log.warning(f"{tool_name} failed: {e}")
        return format_error(e)
