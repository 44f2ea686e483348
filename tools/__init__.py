"""
Tools — MCP tool implementations.

Each tool has its own module with the implementation logic.
server.py provides thin @mcp.tool() wrappers that call into these.

Tools:
- get_alerts / get_forecast: National Weather Service lookups
- get_feishu_doc: Feishu document content as plain text
"""

from .fetch import do_fetch_doc
from .weather import do_get_alerts, do_get_forecast

# Single source of truth for exposed tool names.
TOOL_NAMES = frozenset({"get_alerts", "get_forecast", "get_feishu_doc"})

__all__ = ["do_fetch_doc", "do_get_alerts", "do_get_forecast", "TOOL_NAMES"]
