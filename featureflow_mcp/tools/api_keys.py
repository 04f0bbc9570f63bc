from featureflow_mcp.core.request import ApiRequest, required, sparse

API_KEY_TYPES = ["server_environment", "client_environment"]

TOOL_SPECS = [
    {
        "name": "list_api_keys",
        "description": "List API keys for a specific environment.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "environmentKey": {"type": "string", "description": "Environment unified key (projectKey:environmentKey format)"},
                "type": {"type": "string", "enum": API_KEY_TYPES, "description": "Optional type filter for API keys"},
            },
            "required": ["environmentKey"],
        },
    },
]


def list_api_keys(args: dict) -> ApiRequest:
    params = required(args, ["environmentKey"])
    params.update(sparse(args, ["type"]))
    return ApiRequest("GET", "/v1/api-keys", params=params)


ROUTES = {
    "list_api_keys": list_api_keys,
}
