"""YouTube MCP Server."""

import logging
import sys

from mcp.server.fastmcp import FastMCP

from youtube_mcp import __version__
from youtube_mcp.config import (
    EffectiveConfig,
    ServerConfig,
    ServerSettings,
    Transport,
    resolve_config,
)
from youtube_mcp.prompts import PROMPTS
from youtube_mcp.registry import Catalog
from youtube_mcp.resources import build_resources
from youtube_mcp.services import YouTubeServices
from youtube_mcp.tools import build_tools
from youtube_mcp.transports import run_http, run_stdio

# Logging to stderr (MCP convention)
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger("youtube-mcp")

SERVER_NAME = "youtube-mcp"
INSTRUCTIONS = "Read-only access to YouTube videos, transcripts, channels and playlists"


def build_catalog(services: YouTubeServices, config: EffectiveConfig) -> Catalog:
    return Catalog().extend(
        tools=build_tools(services, config),
        resources=build_resources(services, config),
        prompts=PROMPTS,
    )


def create_server(
    supplied: ServerConfig | None = None,
    *,
    services: YouTubeServices | None = None,
) -> FastMCP:
    """Build one server instance.

    The config is resolved first and handed to the services, then the catalog
    is checked in full before anything is installed on the FastMCP instance.
    """
    config = resolve_config(supplied)
    if services is None:
        services = YouTubeServices.from_config(config)
    catalog = build_catalog(services, config)

    server = FastMCP(SERVER_NAME, instructions=INSTRUCTIONS)
    server._mcp_server.version = __version__
    return catalog.install(server)


def main():
    settings = ServerSettings()
    logging.getLogger().setLevel(settings.log_level.upper())
    if settings.youtube_mcp_transport == Transport.STREAMABLE_HTTP:
        run_http(create_server, host=settings.host, port=settings.port)
    else:
        run_stdio(create_server)


if __name__ == "__main__":
    main()
