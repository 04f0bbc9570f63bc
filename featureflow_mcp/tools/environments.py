from featureflow_mcp.core.request import ApiRequest, required, segment, sparse

TOOL_SPECS = [
    {
        "name": "list_environments",
        "description": "List all environments for a project or the entire organization.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "projectKey": {"type": "string", "description": "Optional project key to filter environments"},
            },
        },
    },
    {
        "name": "get_environment",
        "description": "Get detailed information about a specific environment by ID or unified key (projectKey:environmentKey).",
        "inputSchema": {
            "type": "object",
            "properties": {
                "idOrUnifiedKey": {"type": "string", "description": "Environment ID or unified key (e.g., 'myproject:production')"},
            },
            "required": ["idOrUnifiedKey"],
        },
    },
    {
        "name": "create_environment",
        "description": "Create a new environment for a project. Optionally clone settings from an existing environment.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "projectKey": {"type": "string", "description": "The project key where the environment will be created"},
                "key": {"type": "string", "description": "Unique environment key within the project"},
                "name": {"type": "string", "description": "Display name for the environment"},
                "color": {"type": "string", "description": "Color for the environment (hex code)"},
                "production": {"type": "boolean", "description": "Whether this is a production environment"},
                "cloneEnvironmentKey": {"type": "string", "description": "Optional environment key to clone settings from"},
            },
            "required": ["projectKey", "key", "name"],
        },
    },
    {
        "name": "update_environment",
        "description": "Update an existing environment's properties.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "idOrUnifiedKey": {"type": "string", "description": "Environment ID or unified key"},
                "name": {"type": "string", "description": "New display name"},
                "color": {"type": "string", "description": "New color (hex code)"},
                "url": {"type": "string", "description": "Environment URL"},
                "production": {"type": "boolean", "description": "Whether this is a production environment"},
            },
            "required": ["idOrUnifiedKey"],
        },
    },
    {
        "name": "delete_environment",
        "description": "Delete an environment. Cannot delete the last environment in a project.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "idOrUnifiedKey": {"type": "string", "description": "Environment ID or unified key to delete"},
            },
            "required": ["idOrUnifiedKey"],
        },
    },
]


def environment_path(args: dict) -> str:
    return f"/v1/environments/{segment(args['idOrUnifiedKey'])}"


def list_environments(args: dict) -> ApiRequest:
    return ApiRequest("GET", "/v1/environments", params=sparse(args, ["projectKey"]))


def get_environment(args: dict) -> ApiRequest:
    return ApiRequest("GET", environment_path(args))


def create_environment(args: dict) -> ApiRequest:
    body = required(args, ["projectKey", "key", "name"])
    # optional strings the caller set are sent as-is, "" included
    body.update(sparse(args, ["color", "production", "cloneEnvironmentKey"], keep_empty=["color", "cloneEnvironmentKey"]))
    return ApiRequest("POST", "/v1/environments", body=body)


def update_environment(args: dict) -> ApiRequest:
    body = sparse(args, ["name", "color", "url", "production"])
    return ApiRequest("PUT", environment_path(args), body=body)


def delete_environment(args: dict) -> ApiRequest:
    return ApiRequest(
        "DELETE",
        environment_path(args),
        deleted="Environment",
        deleted_id=segment(args["idOrUnifiedKey"]),
    )


ROUTES = {
    "list_environments": list_environments,
    "get_environment": get_environment,
    "create_environment": create_environment,
    "update_environment": update_environment,
    "delete_environment": delete_environment,
}
