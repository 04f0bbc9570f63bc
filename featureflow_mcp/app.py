import sys
import asyncio
import logging
from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastmcp import FastMCP
from fastmcp.tools.tool import Tool, ToolResult
from mcp.types import TextContent

from featureflow_mcp.core import config
from featureflow_mcp.tools import dispatch, list_tools

log = logging.getLogger("featureflow_mcp")


def utc_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z")


# -----------------------------
# Logging (stderr only: stdout is the stdio protocol channel)
# -----------------------------
def setup_logging() -> None:
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s | %(levelname)s | %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


# -----------------------------
# MCP tools
# -----------------------------
class FeatureflowTool(Tool):
    """Catalog entry served with its inputSchema as-is and routed through dispatch()."""

    async def run(self, arguments: Dict[str, Any]) -> ToolResult:
        # requests is blocking; keep it off the event loop
        text = await asyncio.to_thread(dispatch, self.name, arguments or {})
        return ToolResult(content=[TextContent(type="text", text=text)])


def build_tools() -> list[FeatureflowTool]:
    return [
        FeatureflowTool(
            name=spec["name"],
            description=spec["description"],
            parameters=spec["inputSchema"],
        )
        for spec in list_tools()
    ]


def create_mcp() -> FastMCP:
    server = FastMCP(name=config.SERVICE_NAME)
    for tool in build_tools():
        server.add_tool(tool)
    return server


mcp = create_mcp()

# -----------------------------
# FastAPI (health + CORS) for the http transport
# -----------------------------
mcp_app = mcp.http_app(path="/mcp")
app = FastAPI(title=config.SERVICE_NAME, version=config.VERSION, lifespan=mcp_app.lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
def root():
    return {
        "ok": True,
        "message": "Featureflow MCP Server alive",
        "service": config.SERVICE_NAME,
        "version": config.VERSION,
        "ts": utc_iso(),
        "api_url": config.API_BASE_URL,
        "tools": len(list_tools()),
        "mcp": "/mcp",
    }


@app.get("/health")
def health():
    return {"ok": True, "ts": utc_iso(), "service": config.SERVICE_NAME, "version": config.VERSION}


app.mount("/", mcp_app)


# -----------------------------
# Entry point
# -----------------------------
def serve() -> None:
    if config.TRANSPORT == "http":
        import uvicorn

        log.info(f"Featureflow MCP Server running on http://{config.HTTP_HOST}:{config.HTTP_PORT}/mcp")
        uvicorn.run(app, host=config.HTTP_HOST, port=config.HTTP_PORT, log_config=None)
    elif config.TRANSPORT == "stdio":
        log.info("Featureflow MCP Server running on stdio")
        mcp.run(transport="stdio")
    else:
        raise RuntimeError(f"Unknown transport: {config.TRANSPORT} (expected stdio or http)")


def main() -> int:
    setup_logging()

    if not config.API_TOKEN:
        log.warning("FEATUREFLOW_API_TOKEN is not set. API calls will likely fail.")

    log.info("Featureflow MCP Server starting...")
    log.info(f"API URL: {config.API_BASE_URL}")

    try:
        serve()
    except Exception as e:
        log.error(f"Fatal error: {e}", exc_info=True)
        return 1
    return 0
