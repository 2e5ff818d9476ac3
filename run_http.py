"""HTTP runner for MCP server (Smithery / remote deployment)."""
import os

os.environ.setdefault("YOUTUBE_MCP_TRANSPORT", "streamable-http")

from youtube_mcp.server import main

if __name__ == "__main__":
    main()
