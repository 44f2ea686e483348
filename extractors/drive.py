"""
Drive Extractor — file metadata and placeholder text for unsupported types.

No API calls, no MCP awareness.
"""

from typing import Any


def render_file_info(file: dict[str, Any]) -> str:
    """Describe a file from its metadata. File content is never fetched."""
    return "\n".join([
        f"File name: {file.get('name', '')}",
        f"Type: {file.get('type', '')}",
        f"Size: {file.get('size', '')} bytes",
        f"Created: {file.get('created_time', '')}",
        f"Modified: {file.get('modified_time', '')}",
    ])


def render_mindnote(token: str) -> str:
    return (
        f"Mindnote document (ID: {token})\n"
        "Content extraction is not supported yet; open it in Feishu to view it."
    )
