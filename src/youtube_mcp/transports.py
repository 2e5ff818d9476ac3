"""Transport bindings.

``run_stdio`` serves one long-lived server over standard input/output.
``create_http_app`` serves streamable HTTP statelessly: every request gets its
own server built from that request's config, and the server is discarded once
the response has been sent.
"""

import logging
from collections.abc import Callable

import uvicorn
from mcp.server.fastmcp import FastMCP
from mcp.server.streamable_http_manager import StreamableHTTPSessionManager
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route
from starlette.types import Receive, Scope, Send

from youtube_mcp import __version__
from youtube_mcp.config import ServerConfig
from youtube_mcp.errors import ConfigError

logger = logging.getLogger(__name__)

ServerFactory = Callable[[ServerConfig | None], FastMCP]

MCP_PATH = "/mcp"


def run_stdio(factory: ServerFactory) -> None:
    server = factory(None)
    logger.info(f"YouTube MCP Server v{__version__} started successfully")
    logger.info("Server will validate YouTube API key when tools are called")
    server.run(transport="stdio")


class StatelessMCPEndpoint:
    """ASGI endpoint that builds a fresh MCP server for every request."""

    def __init__(self, factory: ServerFactory, json_response: bool = True):
        self._factory = factory
        self._json_response = json_response

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        request = Request(scope, receive)
        try:
            supplied = ServerConfig.from_query_params(request.query_params)
        except ConfigError as e:
            logger.warning(f"Rejected request config: {e}")
            response = JSONResponse({"error": str(e)}, status_code=400)
            await response(scope, receive, send)
            return

        server = self._factory(supplied)
        logger.debug("Built server instance for request")
        manager = StreamableHTTPSessionManager(
            app=server._mcp_server,
            json_response=self._json_response,
            stateless=True,
        )
        async with manager.run():
            await manager.handle_request(scope, receive, send)


async def health(request: Request) -> JSONResponse:
    return JSONResponse({"status": "ok", "version": __version__})


def create_http_app(factory: ServerFactory) -> Starlette:
    return Starlette(
        routes=[
            Route(MCP_PATH, endpoint=StatelessMCPEndpoint(factory), methods=["POST"]),
            Route("/health", endpoint=health, methods=["GET"]),
        ]
    )


def run_http(factory: ServerFactory, host: str = "0.0.0.0", port: int = 3000) -> None:
    logger.info(f"YouTube MCP Server v{__version__} listening on http://{host}:{port}{MCP_PATH}")
    # Access lines would carry the query string, and with it the tenant key
    uvicorn.run(create_http_app(factory), host=host, port=port, access_log=False)
