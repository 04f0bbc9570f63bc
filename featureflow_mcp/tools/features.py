from featureflow_mcp.core.request import ApiRequest, required, segment, sparse

FEATURE_FILTERS = ["maintaining", "bookmarked", "recent"]

TOOL_SPECS = [
    {
        "name": "list_features",
        "description": "List all features. Can filter by project key, search query, or predefined filters (maintaining, bookmarked, recent).",
        "inputSchema": {
            "type": "object",
            "properties": {
                "projectKey": {"type": "string", "description": "Project key to filter features"},
                "query": {"type": "string", "description": "Search query to match feature key or name"},
                "filter": {"type": "string", "enum": FEATURE_FILTERS, "description": "Predefined filter type"},
                "archived": {"type": "boolean", "description": "Include archived features (default: false)"},
            },
        },
    },
    {
        "name": "get_feature",
        "description": "Get detailed information about a specific feature by ID or unified key (projectKey:featureKey).",
        "inputSchema": {
            "type": "object",
            "properties": {
                "idOrUnifiedKey": {"type": "string", "description": "Feature ID or unified key (e.g., 'myproject:my-feature')"},
            },
            "required": ["idOrUnifiedKey"],
        },
    },
    {
        "name": "create_feature",
        "description": "Create a new feature flag in a project.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "projectKey": {"type": "string", "description": "The project key where the feature will be created"},
                "key": {"type": "string", "description": "Unique feature key within the project (lowercase, no spaces)"},
                "name": {"type": "string", "description": "Display name for the feature"},
                "description": {"type": "string", "description": "Optional description of the feature"},
            },
            "required": ["projectKey", "key", "name"],
        },
    },
    {
        "name": "update_feature",
        "description": "Update an existing feature's properties like name, description, or variants.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "idOrUnifiedKey": {"type": "string", "description": "Feature ID or unified key"},
                "name": {"type": "string", "description": "New display name for the feature"},
                "description": {"type": "string", "description": "New description for the feature"},
            },
            "required": ["idOrUnifiedKey"],
        },
    },
    {
        "name": "clone_feature",
        "description": "Clone an existing feature with a new key and name.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "idOrUnifiedKey": {"type": "string", "description": "Feature ID or unified key of the source feature to clone"},
                "newKey": {"type": "string", "description": "Key for the cloned feature"},
                "name": {"type": "string", "description": "Name for the cloned feature"},
            },
            "required": ["idOrUnifiedKey", "newKey", "name"],
        },
    },
    {
        "name": "archive_feature",
        "description": "Archive or unarchive a feature flag.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "idOrUnifiedKey": {"type": "string", "description": "Feature ID or unified key"},
                "archived": {"type": "boolean", "description": "Set to true to archive, false to unarchive"},
            },
            "required": ["idOrUnifiedKey", "archived"],
        },
    },
    {
        "name": "delete_feature",
        "description": "Delete a feature flag. Requires production editor or admin permissions.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "idOrUnifiedKey": {"type": "string", "description": "Feature ID or unified key to delete"},
            },
            "required": ["idOrUnifiedKey"],
        },
    },
]


def feature_path(args: dict) -> str:
    return f"/v1/features/{segment(args['idOrUnifiedKey'])}"


def list_features(args: dict) -> ApiRequest:
    # filter and archived are independent; the API decides how they combine
    params = sparse(args, ["projectKey", "query", "filter", "archived"])
    return ApiRequest("GET", "/v1/features", params=params)


def get_feature(args: dict) -> ApiRequest:
    return ApiRequest("GET", feature_path(args))


def create_feature(args: dict) -> ApiRequest:
    body = required(args, ["projectKey", "key", "name"])
    # optional strings the caller set are sent as-is, "" included
    body.update(sparse(args, ["description"], keep_empty=["description"]))
    return ApiRequest("POST", "/v1/features", body=body)


def update_feature(args: dict) -> ApiRequest:
    # an explicit empty description clears it
    body = sparse(args, ["name", "description"], keep_empty=["description"])
    return ApiRequest("PUT", feature_path(args), body=body)


def clone_feature(args: dict) -> ApiRequest:
    return ApiRequest("POST", f"{feature_path(args)}/clone", body=required(args, ["newKey", "name"]))


def archive_feature(args: dict) -> ApiRequest:
    return ApiRequest("PUT", f"{feature_path(args)}/archived/{segment(args['archived'])}")


def delete_feature(args: dict) -> ApiRequest:
    return ApiRequest(
        "DELETE",
        feature_path(args),
        deleted="Feature",
        deleted_id=segment(args["idOrUnifiedKey"]),
    )


ROUTES = {
    "list_features": list_features,
    "get_feature": get_feature,
    "create_feature": create_feature,
    "update_feature": update_feature,
    "clone_feature": clone_feature,
    "archive_feature": archive_feature,
    "delete_feature": delete_feature,
}
