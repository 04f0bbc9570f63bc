from featureflow_mcp.core.request import ApiRequest, required, segment

TOOL_SPECS = [
    {
        "name": "list_targets",
        "description": "Get all targets (user attributes) for a project. Targets are used in targeting rules for A/B testing.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "projectKey": {"type": "string", "description": "Project key"},
            },
            "required": ["projectKey"],
        },
    },
    {
        "name": "get_target",
        "description": "Get a specific target by its key.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "projectKey": {"type": "string", "description": "Project key"},
                "targetKey": {"type": "string", "description": "Target key to look up"},
            },
            "required": ["projectKey", "targetKey"],
        },
    },
]


def list_targets(args: dict) -> ApiRequest:
    return ApiRequest("GET", "/v1/targets", params=required(args, ["projectKey"]))


def get_target(args: dict) -> ApiRequest:
    return ApiRequest("GET", f"/v1/targets/{segment(args['targetKey'])}", params=required(args, ["projectKey"]))


ROUTES = {
    "list_targets": list_targets,
    "get_target": get_target,
}
