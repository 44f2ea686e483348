"""
Extractors — Pure functions for content extraction.

No MCP awareness, no remote API calls. Just transform input → output.
Easily testable with fixtures.
"""

from .sheets import render_sheet, cell_text, SPREADSHEET_HEADER
from .slides import render_slides
from .bitable import render_bitable
from .drive import render_file_info, render_mindnote
from .weather import format_alert, format_alerts, format_period, format_forecast

__all__ = [
    "render_sheet",
    "cell_text",
    "SPREADSHEET_HEADER",
    "render_slides",
    "render_bitable",
    "render_file_info",
    "render_mindnote",
    "format_alert",
    "format_alerts",
    "format_period",
    "format_forecast",
]
