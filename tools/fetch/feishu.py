"""
Feishu document fetch — one fetcher per document type, type dispatch, wiki node resolution.

Every remote call is checked with _require(): a non-zero code becomes a
RemoteAPIError and propagates untouched to the tool boundary.
"""

from typing import Any, Callable

from adapters.feishu import FeishuClient
from config import MAX_SHEET_ROWS, MAX_SHEETS, SHEET_RANGE
from extractors import (
    SPREADSHEET_HEADER,
    render_bitable,
    render_file_info,
    render_mindnote,
    render_sheet,
    render_slides,
)
from logging_config import logger
from models import ApiResponse, DocType, DocumentReference, RemoteAPIError, UnsupportedTypeError


def _require(response: ApiResponse, action: str) -> dict[str, Any]:
    """Return response data, or raise RemoteAPIError for a non-zero code."""
    if not response.ok:
        raise RemoteAPIError(
            f"Failed to {action}: {response.msg}",
            code=response.code,
            msg=response.msg,
            data=response.data,
        )
    return response.data or {}


# ============================================================================
# FETCHERS
# ============================================================================

def fetch_docx(client: FeishuClient, document_id: str) -> str:
    """Raw text content of a doc/docx, verbatim."""
    data = _require(client.get_raw_content(document_id), "get doc from Feishu API")
    return data.get("content", "")


def fetch_sheets(client: FeishuClient, spreadsheet_token: str) -> str:
    """
    First MAX_SHEETS sheets of a workbook, MAX_SHEET_ROWS rows each.

    Sheet values are requested one sheet at a time.
    """
    data = _require(client.query_sheets(spreadsheet_token), "get sheets list")
    sheets = data.get("sheets") or []

    parts = [SPREADSHEET_HEADER]
    for sheet in sheets[:MAX_SHEETS]:
        cell_range = f"{sheet.get('sheet_id', '')}!{SHEET_RANGE}"
        values = _require(
            client.get_sheet_values(spreadsheet_token, cell_range),
            f"get values for sheet {sheet.get('title', '')}",
        )
        value_ranges = values.get("valueRanges") or values.get("value_ranges") or []
        rows = (value_ranges[0].get("values") or []) if value_ranges else []
        parts.append(render_sheet(sheet.get("title", ""), rows, max_rows=MAX_SHEET_ROWS))

    if len(sheets) > MAX_SHEETS:
        logger.debug(f"Spreadsheet {spreadsheet_token}: showing {MAX_SHEETS} of {len(sheets)} sheets")
    return "".join(parts)


def fetch_slides(client: FeishuClient, presentation_token: str) -> str:
    """Presentation title and slide identifiers."""
    data = _require(client.get_presentation(presentation_token), "get slides")
    return render_slides(data.get("presentation") or {})


def fetch_bitable(client: FeishuClient, app_token: str) -> str:
    """Bitable app name, description and table list."""
    app = _require(client.get_app(app_token), "get bitable").get("app") or {}
    tables = _require(client.list_tables(app_token), "list bitable tables").get("items") or []
    return render_bitable(app, tables)


def fetch_file(client: FeishuClient, file_token: str) -> str:
    """File metadata only."""
    data = _require(client.get_file(file_token), "get file info")
    return render_file_info(data.get("file") or {})


def fetch_mindnote(client: FeishuClient, token: str) -> str:
    """Mindnotes can't be extracted; no remote call."""
    return render_mindnote(token)


# ============================================================================
# DISPATCH
# ============================================================================

# Total over FETCHABLE_TYPES (checked in tests)
FETCHERS: dict[DocType, Callable[[FeishuClient, str], str]] = {
    DocType.DOC: fetch_docx,
    DocType.DOCX: fetch_docx,
    DocType.SHEET: fetch_sheets,
    DocType.SHEETS: fetch_sheets,
    DocType.SLIDES: fetch_slides,
    DocType.BITABLE: fetch_bitable,
    DocType.FILE: fetch_file,
    DocType.MINDNOTE: fetch_mindnote,
}


def fetch_by_type(client: FeishuClient, doc_type: DocType | str, token: str) -> str:
    """
    Fetch a document whose concrete type is known.

    Args:
        client: Feishu client
        doc_type: DocType or raw tag (node lookups return raw tags)
        token: Document token

    Raises:
        UnsupportedTypeError: For wiki, unknown, or any tag without a fetcher
        RemoteAPIError: On a non-zero platform code
    """
    if isinstance(doc_type, str):
        doc_type = DocType.parse(doc_type)

    fetcher = FETCHERS.get(doc_type)
    if fetcher is None:
        raise UnsupportedTypeError(doc_type.value)

    logger.info(f"Fetching Feishu {doc_type.value}: {token}")
    return fetcher(client, token)


# ============================================================================
# WIKI NODES
# ============================================================================

def resolve_node(client: FeishuClient, token: str) -> DocumentReference:
    """
    Look up what a wiki node (or untyped token) points at.

    Raises:
        RemoteAPIError: On a non-zero platform code
        UnsupportedTypeError: If the node's object type isn't a known tag
    """
    data = _require(client.get_node(token), "get node from Feishu API")
    node = data.get("node") or {}
    obj_type = node.get("obj_type", "")
    return DocumentReference(DocType.parse(obj_type), node.get("obj_token", ""))


def fetch_node(client: FeishuClient, token: str) -> str:
    """Resolve a node token, then fetch the object it points at."""
    reference = resolve_node(client, token)
    logger.info(f"Node {token} resolved to {reference.type.value}: {reference.id}")
    return fetch_by_type(client, reference.type, reference.id)
