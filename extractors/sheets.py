"""
Sheets Extractor — Pure function for converting sheet values to tab-separated text.

Receives one sheet's title and cell rows, returns a bounded text block.
No API calls, no MCP awareness.
"""

from typing import Any

# Rows shown per sheet
DEFAULT_MAX_ROWS = 10

SPREADSHEET_HEADER = "Spreadsheet content:\n\n"


def cell_text(cell: Any) -> str:
    """
    Render one cell.

    Rich cells arrive as dicts with a 'text' field; plain values as scalars.
    Empty cells are None.
    """
    if cell is None:
        return ""
    if isinstance(cell, dict):
        return str(cell.get("text") or "")
    if isinstance(cell, list):
        # Segmented rich text: concatenate the text of each segment
        return "".join(cell_text(part) for part in cell)
    return str(cell)


def render_sheet(
    title: str,
    rows: list[list[Any]],
    max_rows: int = DEFAULT_MAX_ROWS,
) -> str:
    """
    Render a sheet as tab-separated rows under a title line.

    Only the first max_rows rows are kept.

    Returns:
        Text like:
            Sheet: Summary
            Name\tValue
            Revenue\t1000

    (with a trailing blank line so sheets concatenate cleanly)
    """
    lines = [f"Sheet: {title}"]
    for row in rows[:max_rows]:
        lines.append("\t".join(cell_text(cell) for cell in (row or [])))
    return "\n".join(lines) + "\n\n"
