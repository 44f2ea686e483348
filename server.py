#!/usr/bin/env python3
"""
Weather + Feishu MCP Server

Thin integration server exposing two external APIs as MCP tools:
- get_alerts: Active NWS weather alerts for a US state
- get_forecast: NWS forecast for a latitude/longitude
- get_feishu_doc: Plain-text content of a Feishu / Lark document

Architecture:
- extractors/: Pure functions (no MCP, no API calls)
- adapters/: Thin NWS and Feishu API wrappers
- tools/: Tool implementations (business logic)
- server.py: Thin MCP wrappers (this file)

Usage:
    python server.py            # stdio transport
    python server.py sse 8080   # HTTP/SSE transport on port 8080
"""

import os
import signal
import sys

import uvicorn
from mcp.server.fastmcp import FastMCP
from starlette.applications import Starlette
from starlette.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

from adapters.feishu import FeishuClient
from adapters.services import build_feishu_client
from config import (
    CORS_ALLOW_ORIGINS,
    DEFAULT_SSE_HOST,
    DEFAULT_SSE_PORT,
    SERVER_NAME,
    SERVER_VERSION,
    load_feishu_config,
)
from logging_config import configure_logging, logger
from tools import do_fetch_doc, do_get_alerts, do_get_forecast


OVERVIEW = """# weather-feishu

MCP server for US weather data and Feishu document access.

## Tools

| Tool | Purpose |
|------|---------|
| `get_alerts` | Active NWS alerts for a two-letter state code |
| `get_forecast` | NWS forecast for a latitude/longitude (US only) |
| `get_feishu_doc` | Feishu document content as plain text |

## Feishu document types

Pass a bare token or a full `feishu.cn` / `larksuite.com` link.

| Type | Returned content |
|------|------------------|
| doc, docx | Raw text |
| sheet, sheets | First 3 sheets, first 10 rows each, tab-separated |
| slides | Title and slide identifiers |
| bitable | App name, description, table list |
| file | File metadata (never content) |
| mindnote | Not supported, placeholder text |
| wiki | Resolved to the node's real type first |

Tokens without a recognizable type are resolved through the wiki node lookup.
"""


def create_server(
    feishu_client: FeishuClient | None,
    host: str = DEFAULT_SSE_HOST,
    port: int = DEFAULT_SSE_PORT,
) -> FastMCP:
    """
    Build the MCP server around an already-constructed Feishu client.

    Args:
        feishu_client: Shared client, or None when credentials are missing
        host: Interface the SSE transport binds
        port: Port for the SSE transport
    """
    mcp = FastMCP(SERVER_NAME, host=host, port=port)

    # ========================================================================
    # TOOLS (thin wrappers)
    # ========================================================================

    @mcp.tool()
    def get_alerts(state: str) -> str:
        """
        Get weather alerts for a US state.

        Args:
            state: Two-letter state code (e.g. CA, NY)
        """
        return do_get_alerts(state).text

    @mcp.tool()
    def get_forecast(latitude: float, longitude: float) -> str:
        """
        Get weather forecast for a location.

        Args:
            latitude: Latitude of the location (-90 to 90)
            longitude: Longitude of the location (-180 to 180)
        """
        return do_get_forecast(latitude, longitude).text

    @mcp.tool()
    def get_feishu_doc(doc_id: str) -> str:
        """
        Get Feishu document content as plain text.

        Args:
            doc_id: Feishu document ID, usually found in the URL. Accepts the
                full link or the bare ID for these types: doc, docx, sheet,
                sheets, mindnote, bitable, file, slides, wiki
        """
        return do_fetch_doc(doc_id, feishu_client).text

    # ========================================================================
    # RESOURCES
    # ========================================================================

    @mcp.resource("weather-feishu://docs/overview")
    def docs_overview() -> str:
        """Overview of the weather-feishu MCP server."""
        return OVERVIEW

    # ========================================================================
    # HTTP INFO (SSE transport only)
    # ========================================================================

    @mcp.custom_route("/", methods=["GET"])
    async def server_info(request: Request) -> JSONResponse:
        return JSONResponse(server_info_payload(feishu_client is not None))

    return mcp


def server_info_payload(feishu_configured: bool) -> dict[str, object]:
    """Description served at GET / for the SSE transport."""
    return {
        "name": "Weather and Feishu MCP Server",
        "version": SERVER_VERSION,
        "description": "MCP Server for weather data and Feishu document access",
        "endpoints": {"sse": "/sse"},
        "tools": [
            "get_alerts: get weather alerts",
            "get_forecast: get weather forecast",
            "get_feishu_doc: get Feishu document content"
            if feishu_configured
            else "get_feishu_doc: not configured (set Feishu API credentials)",
        ],
    }


# ============================================================================
# SERVER ENTRY POINT
# ============================================================================

def parse_args(argv: list[str]) -> tuple[str, int]:
    """[stdio|sse] [port] → (transport, port). Bad ports fall back to the default."""
    transport = argv[0] if argv else "stdio"
    try:
        port = int(argv[1]) if len(argv) > 1 else DEFAULT_SSE_PORT
    except ValueError:
        port = DEFAULT_SSE_PORT
    return transport, port


def _shutdown_handler(signum: int, frame: object) -> None:
    """Handle termination signals by exiting immediately.

    os._exit() is required because sys.exit() raises SystemExit,
    which asyncio's event loop catches and ignores.
    """
    os._exit(0)


def build_sse_app(mcp: FastMCP) -> Starlette:
    """FastMCP's SSE app with CORS open to browser clients."""
    app = mcp.sse_app()
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(CORS_ALLOW_ORIGINS),
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )
    return app


def main(argv: list[str] | None = None) -> None:
    signal.signal(signal.SIGTERM, _shutdown_handler)
    signal.signal(signal.SIGINT, _shutdown_handler)

    configure_logging(os.environ.get("LOG_LEVEL", "INFO"))
    transport, port = parse_args(sys.argv[1:] if argv is None else argv)

    feishu_client = build_feishu_client(load_feishu_config())
    mcp = create_server(feishu_client, host=DEFAULT_SSE_HOST, port=port)

    if transport == "sse":
        logger.info(f"Weather and Feishu MCP Server running on http://{DEFAULT_SSE_HOST}:{port}")
        logger.info(f"SSE endpoint: http://{DEFAULT_SSE_HOST}:{port}/sse")
        uvicorn.run(build_sse_app(mcp), host=DEFAULT_SSE_HOST, port=port)
    else:
        logger.info("Weather and Feishu MCP Server running on stdio")
        mcp.run()


if __name__ == "__main__":
    main()
