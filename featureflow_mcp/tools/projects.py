from featureflow_mcp.core.request import ApiRequest, required, segment, sparse

TOOL_SPECS = [
    {
        "name": "list_projects",
        "description": "List all projects in the organization. Optionally filter by a search query that matches project name or key.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "query": {"type": "string", "description": "Optional search query to filter projects by name or key"},
            },
        },
    },
    {
        "name": "get_project",
        "description": "Get detailed information about a specific project by its ID or key.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "idOrKey": {"type": "string", "description": "The project ID or key"},
            },
            "required": ["idOrKey"],
        },
    },
    {
        "name": "create_project",
        "description": "Create a new project in the organization.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "key": {"type": "string", "description": "Unique project key (lowercase, no spaces, use hyphens)"},
                "name": {"type": "string", "description": "Display name for the project"},
            },
            "required": ["key", "name"],
        },
    },
    {
        "name": "update_project",
        "description": "Update an existing project's name.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "idOrKey": {"type": "string", "description": "The project ID or key to update"},
                "name": {"type": "string", "description": "New display name for the project"},
            },
            "required": ["idOrKey", "name"],
        },
    },
    {
        "name": "delete_project",
        "description": "Delete a project. This will also delete all features and environments in the project.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "idOrKey": {"type": "string", "description": "The project ID or key to delete"},
            },
            "required": ["idOrKey"],
        },
    },
]


def list_projects(args: dict) -> ApiRequest:
    return ApiRequest("GET", "/v1/projects", params=sparse(args, ["query"]))


def get_project(args: dict) -> ApiRequest:
    return ApiRequest("GET", f"/v1/projects/{segment(args['idOrKey'])}")


def create_project(args: dict) -> ApiRequest:
    return ApiRequest("POST", "/v1/projects", body=required(args, ["key", "name"]))


def update_project(args: dict) -> ApiRequest:
    return ApiRequest("PUT", f"/v1/projects/{segment(args['idOrKey'])}", body=required(args, ["name"]))


def delete_project(args: dict) -> ApiRequest:
    return ApiRequest(
        "DELETE",
        f"/v1/projects/{segment(args['idOrKey'])}",
        deleted="Project",
        deleted_id=segment(args["idOrKey"]),
    )


ROUTES = {
    "list_projects": list_projects,
    "get_project": get_project,
    "create_project": create_project,
    "update_project": update_project,
    "delete_project": delete_project,
}
