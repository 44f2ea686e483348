"""
Bitable Extractor — Pure function for summarising a structured-table app.

No API calls, no MCP awareness.
"""

from typing import Any


def render_bitable(app: dict[str, Any], tables: list[dict[str, Any]]) -> str:
    """
    Summarise a bitable app and its tables.

    Returns:
        Text like:
            Bitable: Roadmap
            Description: No description

            Contains 2 tables:
            1. Features (tblA)
            2. Bugs (tblB)
    """
    lines = [
        f"Bitable: {app.get('name') or 'Untitled'}",
        f"Description: {app.get('description') or 'No description'}",
        "",
        f"Contains {len(tables)} tables:",
    ]
    for index, table in enumerate(tables, start=1):
        lines.append(f"{index}. {table.get('name', '')} ({table.get('table_id', '')})")
    return "\n".join(lines) + "\n"
