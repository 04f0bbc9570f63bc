from featureflow_mcp.core.request import ApiRequest, segment, sparse

TOOL_SPECS = [
    {
        "name": "get_feature_control",
        "description": "Get the feature control configuration for a specific feature and environment. Shows enabled state, rules, and variant assignments.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "idOrUnifiedKey": {"type": "string", "description": "Feature ID or unified key"},
                "environmentKey": {"type": "string", "description": "Environment key (e.g., 'development', 'production')"},
            },
            "required": ["idOrUnifiedKey", "environmentKey"],
        },
    },
    {
        "name": "update_feature_control",
        "description": "Update feature control settings for a specific environment. Can enable/disable the feature, change the off variant, and modify rules.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "idOrUnifiedKey": {"type": "string", "description": "Feature ID or unified key"},
                "environmentKey": {"type": "string", "description": "Environment key"},
                "enabled": {"type": "boolean", "description": "Whether the feature is enabled in this environment"},
                "offVariantKey": {"type": "string", "description": "The variant to serve when the feature is disabled"},
            },
            "required": ["idOrUnifiedKey", "environmentKey"],
        },
    },
]


def control_path(args: dict) -> str:
    return f"/v1/features/{segment(args['idOrUnifiedKey'])}/controls/{segment(args['environmentKey'])}"


def get_feature_control(args: dict) -> ApiRequest:
    return ApiRequest("GET", control_path(args))


def update_feature_control(args: dict) -> ApiRequest:
    return ApiRequest("PUT", control_path(args), body=sparse(args, ["enabled", "offVariantKey"]))


ROUTES = {
    "get_feature_control": get_feature_control,
    "update_feature_control": update_feature_control,
}
