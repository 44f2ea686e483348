"""
Feishu adapter — Feishu / Lark open platform wrapper.

Exposes exactly the calls the document fetchers need. Each returns an
ApiResponse (code, msg, data); deciding what a non-zero code means is left
to the caller.

Token acquisition (tenant access token) is handled inside the lark-oapi SDK.
"""

import json
from typing import Any, Protocol

import lark_oapi as lark

from logging_config import log_api_call, log_api_result
from models import ApiResponse

__all__ = [
    "FeishuClient",
    "LarkFeishuClient",
]


class FeishuClient(Protocol):
    """The document platform capabilities used by the fetchers."""

    def get_raw_content(self, document_id: str) -> ApiResponse: ...

    def query_sheets(self, spreadsheet_token: str) -> ApiResponse: ...

    def get_sheet_values(self, spreadsheet_token: str, cell_range: str) -> ApiResponse: ...

    def get_presentation(self, presentation_token: str) -> ApiResponse: ...

    def get_app(self, app_token: str) -> ApiResponse: ...

    def list_tables(self, app_token: str) -> ApiResponse: ...

    def get_file(self, file_token: str) -> ApiResponse: ...

    def get_node(self, token: str) -> ApiResponse: ...


def _parse_response(response: lark.BaseResponse) -> ApiResponse:
    """Turn a raw SDK response into ApiResponse, preferring the JSON body."""
    body: dict[str, Any] = {}
    raw = getattr(response, "raw", None)
    if raw is not None and raw.content:
        try:
            body = json.loads(raw.content)
        except ValueError:
            body = {}
    if not isinstance(body, dict):
        body = {}

    code = body.get("code", response.code)
    msg = body.get("msg", response.msg) or ""
    data = body.get("data") or {}
    return ApiResponse(code=code if code is not None else -1, msg=msg, data=data)


class LarkFeishuClient:
    """
    FeishuClient backed by the official lark-oapi SDK.

    Built once at startup and shared; holds no state beyond the SDK client.
    """

    def __init__(self, app_id: str, app_secret: str):
        self._client = (
            lark.Client.builder()
            .app_id(app_id)
            .app_secret(app_secret)
            .log_level(lark.LogLevel.WARNING)
            .build()
        )

    def _get(
        self,
        uri: str,
        paths: dict[str, str] | None = None,
        queries: list[tuple[str, str]] | None = None,
    ) -> ApiResponse:
        builder = (
            lark.BaseRequest.builder()
            .http_method(lark.HttpMethod.GET)
            .uri(uri)
            .token_types({lark.AccessTokenType.TENANT})
        )
        if paths:
            builder = builder.paths(paths)
        if queries:
            builder = builder.queries(queries)

        log_api_call("feishu", uri, **(paths or {}))
        result = _parse_response(self._client.request(builder.build()))
        log_api_result("feishu", uri, result.code)
        return result

    def get_raw_content(self, document_id: str) -> ApiResponse:
        """docx v1 raw text content. data: {content}"""
        return self._get(
            "/open-apis/docx/v1/documents/:document_id/raw_content",
            paths={"document_id": document_id},
            queries=[("lang", "0")],
        )

    def query_sheets(self, spreadsheet_token: str) -> ApiResponse:
        """Sheets in a workbook. data: {sheets: [{sheet_id, title, ...}]}"""
        return self._get(
            "/open-apis/sheets/v3/spreadsheets/:spreadsheet_token/sheets/query",
            paths={"spreadsheet_token": spreadsheet_token},
        )

    def get_sheet_values(self, spreadsheet_token: str, cell_range: str) -> ApiResponse:
        """Cell values for one range. data: {valueRanges: [{values: [[...]]}]}"""
        return self._get(
            "/open-apis/sheets/v2/spreadsheets/:spreadsheet_token/values_batch_get",
            paths={"spreadsheet_token": spreadsheet_token},
            queries=[("ranges", cell_range)],
        )

    def get_presentation(self, presentation_token: str) -> ApiResponse:
        """Presentation metadata. data: {presentation: {title, slides}}"""
        return self._get(
            "/open-apis/slides/v1/presentations/:presentation_token",
            paths={"presentation_token": presentation_token},
        )

    def get_app(self, app_token: str) -> ApiResponse:
        """Bitable app metadata. data: {app: {name, ...}}"""
        return self._get(
            "/open-apis/bitable/v1/apps/:app_token",
            paths={"app_token": app_token},
        )

    def list_tables(self, app_token: str) -> ApiResponse:
        """Tables in a bitable app. data: {items: [{table_id, name}]}"""
        return self._get(
            "/open-apis/bitable/v1/apps/:app_token/tables",
            paths={"app_token": app_token},
        )

    def get_file(self, file_token: str) -> ApiResponse:
        """Drive file metadata. data: {file: {name, type, size, ...}}"""
        return self._get(
            "/open-apis/drive/v1/files/:file_token",
            paths={"file_token": file_token},
        )

    def get_node(self, token: str) -> ApiResponse:
        """Wiki node lookup. data: {node: {obj_type, obj_token, ...}}"""
        return self._get(
            "/open-apis/wiki/v2/spaces/get_node",
            queries=[("token", token)],
        )
