"""MCP server exposing the Featureflow feature-flag API as tools."""

__version__ = "1.0.0"
