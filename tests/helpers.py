"""
Shared test helpers for feishu-weather.

Centralizes mock wiring patterns that repeat across test files.
"""

from __future__ import annotations

from typing import Any, Callable
from unittest.mock import MagicMock

from models import ApiResponse


def ok(data: dict[str, Any] | None = None) -> ApiResponse:
    """Successful platform response."""
    return ApiResponse(code=0, msg="success", data=data or {})


def fail(code: int = 99991663, msg: str = "permission denied") -> ApiResponse:
    """Failed platform response."""
    return ApiResponse(code=code, msg=msg, data={})


class FakeFeishuClient:
    """In-memory FeishuClient returning canned responses.

    Every call is recorded as (method, args) in .calls so tests can assert on
    call counts and ordering without network access.

    Responses are keyed by method name. A value may be:
    - an ApiResponse (returned for every call)
    - a callable taking the call args and returning an ApiResponse

    Unconfigured methods return a failure so a test never silently passes
    on a call it didn't expect.

    Usage:
        client = FakeFeishuClient(get_raw_content=ok({"content": "hello"}))
        fetch_docx(client, "doc1")
        assert client.calls == [("get_raw_content", ("doc1",))]
    """

    def __init__(self, **responses: ApiResponse | Callable[..., ApiResponse]):
        self.responses = responses
        self.calls: list[tuple[str, tuple[Any, ...]]] = []

    def _respond(self, method: str, *args: Any) -> ApiResponse:
        self.calls.append((method, args))
        response = self.responses.get(method)
        if response is None:
            return fail(code=-1, msg=f"unexpected call: {method}")
        if callable(response):
            return response(*args)
        return response

    def call_count(self, method: str | None = None) -> int:
        if method is None:
            return len(self.calls)
        return sum(1 for name, _ in self.calls if name == method)

    def get_raw_content(self, document_id: str) -> ApiResponse:
        return self._respond("get_raw_content", document_id)

    def query_sheets(self, spreadsheet_token: str) -> ApiResponse:
        return self._respond("query_sheets", spreadsheet_token)

    def get_sheet_values(self, spreadsheet_token: str, cell_range: str) -> ApiResponse:
        return self._respond("get_sheet_values", spreadsheet_token, cell_range)

    def get_presentation(self, presentation_token: str) -> ApiResponse:
        return self._respond("get_presentation", presentation_token)

    def get_app(self, app_token: str) -> ApiResponse:
        return self._respond("get_app", app_token)

    def list_tables(self, app_token: str) -> ApiResponse:
        return self._respond("list_tables", app_token)

    def get_file(self, file_token: str) -> ApiResponse:
        return self._respond("get_file", file_token)

    def get_node(self, token: str) -> ApiResponse:
        return self._respond("get_node", token)


def workbook(sheet_count: int, row_count: int, col_count: int = 3) -> FakeFeishuClient:
    """Fake client serving a workbook of identical sheets.

    Cells are rich-text dicts like {"text": "r0c1"} so rendering can be
    checked per row.
    """
    sheets = [{"sheet_id": f"s{i}", "title": f"Sheet {i}"} for i in range(sheet_count)]
    rows = [[{"text": f"r{r}c{c}"} for c in range(col_count)] for r in range(row_count)]

    def values(token: str, cell_range: str) -> ApiResponse:
        return ok({"valueRanges": [{"range": cell_range, "values": rows}]})

    return FakeFeishuClient(query_sheets=ok({"sheets": sheets}), get_sheet_values=values)


def wire_httpx_client(mock_client_cls: MagicMock) -> MagicMock:
    """Wire up httpx.Client context manager mock and return the client instance.

    Replaces the repetitive 3-line pattern:
        mock_client = MagicMock()
        mock_client_cls.return_value.__enter__ = MagicMock(return_value=mock_client)
        mock_client_cls.return_value.__exit__ = MagicMock(return_value=False)

    Usage:
        mock_client = wire_httpx_client(mock_client_cls)
    """
    mock_client = MagicMock()
    mock_client_cls.return_value.__enter__ = MagicMock(return_value=mock_client)
    mock_client_cls.return_value.__exit__ = MagicMock(return_value=False)
    return mock_client
