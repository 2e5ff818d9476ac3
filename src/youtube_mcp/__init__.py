"""YouTube MCP server: read-only YouTube data as MCP tools, resources and prompts."""

__version__ = "0.2.0"
