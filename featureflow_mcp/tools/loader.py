import importlib

# catalog order, as listed to MCP clients
TOOL_MODULES = [
    "projects",
    "features",
    "feature_controls",
    "environments",
    "targets",
    "api_keys",
]


def load_tools():
    """
    Assemble the tool catalog from the resource modules inside tools/.
    Each module must expose:
      - TOOL_SPECS (list of MCP-style tool schemas, in display order)
      - ROUTES (dict: tool name -> fn(args: dict) -> ApiRequest)
    """
    package_name = __name__.rsplit(".", 1)[0]  # "featureflow_mcp.tools"

    routes = {}
    specs = []

    for name in TOOL_MODULES:
        m = importlib.import_module(f"{package_name}.{name}")

        module_routes = getattr(m, "ROUTES", {})
        module_specs = getattr(m, "TOOL_SPECS", [])

        spec_names = [s["name"] for s in module_specs]
        if set(spec_names) != set(module_routes):
            raise RuntimeError(
                f"tools.{name}: specs and routes disagree: "
                f"{sorted(set(spec_names) ^ set(module_routes))}"
            )

        for spec in module_specs:
            tool_name = spec["name"]
            if tool_name in routes:
                raise RuntimeError(f"Duplicate tool name: {tool_name}")
            routes[tool_name] = module_routes[tool_name]
            specs.append(spec)

    return routes, tuple(specs)
