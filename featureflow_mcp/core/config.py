import os

from featureflow_mcp import __version__


def env(key: str, default: str | None = None) -> str | None:
    v = os.getenv(key)
    if v is None or v.strip() == "":
        return default
    return v.strip()

# --- Featureflow API ---
API_BASE_URL = env("FEATUREFLOW_API_URL", "http://localhost:8080/api")
API_TOKEN = env("FEATUREFLOW_API_TOKEN", "")
REQUEST_TIMEOUT_SEC = float(env("FEATUREFLOW_TIMEOUT_SEC", "30"))

# --- MCP server ---
SERVICE_NAME = env("SERVICE_NAME", "featureflow-mcp")
VERSION = env("VERSION", __version__)
TRANSPORT = (env("FEATUREFLOW_MCP_TRANSPORT", "stdio") or "stdio").lower()  # stdio | http
HTTP_HOST = env("FEATUREFLOW_MCP_HOST", "127.0.0.1")
HTTP_PORT = int(env("FEATUREFLOW_MCP_PORT", "8000"))

# --- Logging ---
LOG_LEVEL = (env("LOG_LEVEL", "INFO") or "INFO").upper()
