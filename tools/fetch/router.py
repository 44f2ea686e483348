"""
Fetch routing — reference extraction and do_fetch_doc entry point.
"""

import json

from adapters.feishu import FeishuClient
from logging_config import log_fetch_failure, logger
from models import RemoteAPIError, ServiceError, ToolResult, UnconfiguredError
from validation import extract_document_reference

from .feishu import fetch_by_type, fetch_node

FAILURE_PREFIX = "Failed to fetch Feishu document: "


def _describe_error(error: Exception) -> str:
    """Human-readable failure text for the tool response."""
    if isinstance(error, UnconfiguredError):
        return error.message
    if isinstance(error, RemoteAPIError):
        payload = json.dumps(error.data, ensure_ascii=False, default=str)
        return f"{FAILURE_PREFIX}{error.message}, code {error.code}, {payload}"
    if isinstance(error, ServiceError):
        return f"{FAILURE_PREFIX}{error.message}"
    return f"{FAILURE_PREFIX}{error}"


def do_fetch_doc(doc_id: str, client: FeishuClient | None) -> ToolResult:
    """
    Main document fetch entry point.

    Extracts (type, token) from the input, fetches directly when the type is
    known, otherwise resolves through the wiki node endpoint first. Failures
    come back as error text, never as raised exceptions.

    Args:
        doc_id: Bare token or full feishu.cn / larksuite.com URL
        client: Feishu client, or None when credentials weren't configured
    """
    try:
        if client is None:
            raise UnconfiguredError()

        reference = extract_document_reference(doc_id)
        logger.info(f"Detected document type: {reference.type.value}, id: {reference.id}")

        if reference.needs_resolution:
            content = fetch_node(client, reference.id)
        else:
            content = fetch_by_type(client, reference.type, reference.id)
    except ServiceError as e:
        log_fetch_failure(doc_id, e.to_dict())
        return ToolResult(_describe_error(e), is_error=True)
    except Exception as e:
        logger.exception(f"Unexpected error fetching {doc_id!r}")
        return ToolResult(_describe_error(e), is_error=True)

    return ToolResult(content)
