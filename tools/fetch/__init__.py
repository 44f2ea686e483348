"""
Fetch tool package — extracts document references, dispatches by type, reshapes content to text.

Re-exports all public symbols so `from tools.fetch import X` continues to work.
"""

# Router (entry point)
from .router import do_fetch_doc, FAILURE_PREFIX

# Feishu fetchers
from .feishu import (
    fetch_docx, fetch_sheets, fetch_slides, fetch_bitable, fetch_file,
    fetch_mindnote, fetch_by_type, fetch_node, resolve_node, FETCHERS,
)
