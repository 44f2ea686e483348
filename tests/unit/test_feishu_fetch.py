"""
Unit tests for Feishu content fetchers, type dispatch and wiki node resolution.
"""

import pytest
from inline_snapshot import snapshot

from models import (
    FETCHABLE_TYPES,
    DocType,
    DocumentReference,
    ErrorKind,
    RemoteAPIError,
    UnsupportedTypeError,
)
from tools.fetch import (
    FETCHERS,
    fetch_bitable,
    fetch_by_type,
    fetch_docx,
    fetch_file,
    fetch_mindnote,
    fetch_node,
    fetch_sheets,
    fetch_slides,
    resolve_node,
)
from tests.helpers import FakeFeishuClient, fail, ok, workbook


class TestFetchDocx:
    def test_returns_content_verbatim(self, docx_client) -> None:
        assert fetch_docx(docx_client, "dox1") == "Quarterly plan\nShip it."
        assert docx_client.calls == [("get_raw_content", ("dox1",))]

    def test_no_truncation(self) -> None:
        long_text = "x" * 200_000
        client = FakeFeishuClient(get_raw_content=ok({"content": long_text}))
        assert fetch_docx(client, "dox1") == long_text

    def test_remote_error_carries_message(self) -> None:
        client = FakeFeishuClient(get_raw_content=fail(1770002, "not found"))
        with pytest.raises(RemoteAPIError) as exc_info:
            fetch_docx(client, "dox1")
        assert exc_info.value.code == 1770002
        assert exc_info.value.msg == "not found"
        assert "not found" in exc_info.value.message
        assert exc_info.value.kind == ErrorKind.REMOTE_API


class TestFetchSheets:
    def test_basic_rendering(self) -> None:
        client = FakeFeishuClient(
            query_sheets=ok({"sheets": [{"sheet_id": "a1", "title": "Budget"}]}),
            get_sheet_values=ok({"valueRanges": [{"values": [
                [{"text": "Item"}, {"text": "Cost"}],
                [{"text": "Laptop"}, None],
            ]}]}),
        )
        assert fetch_sheets(client, "sht1") == snapshot(
            "Spreadsheet content:\n\nSheet: Budget\nItem\tCost\nLaptop\t\n\n"
        )

    def test_requests_bounded_range_per_sheet(self) -> None:
        client = workbook(sheet_count=2, row_count=1)
        fetch_sheets(client, "sht1")
        assert client.calls == [
            ("query_sheets", ("sht1",)),
            ("get_sheet_values", ("sht1", "s0!A1:Z100")),
            ("get_sheet_values", ("sht1", "s1!A1:Z100")),
        ]

    def test_large_workbook_is_bounded(self) -> None:
        """50 sheets × 500 rows still yields 3 sheets × 10 rows."""
        client = workbook(sheet_count=50, row_count=500)
        result = fetch_sheets(client, "big")

        assert client.call_count("get_sheet_values") == 3
        assert result.count("Sheet: ") == 3
        assert "Sheet: Sheet 3" not in result
        # Each sheet: title line + 10 data rows
        data_lines = [line for line in result.splitlines() if line.startswith("r")]
        assert len(data_lines) == 30
        assert "r9c0" in result
        assert "r10c0" not in result

    def test_snake_case_value_ranges(self) -> None:
        client = FakeFeishuClient(
            query_sheets=ok({"sheets": [{"sheet_id": "a1", "title": "T"}]}),
            get_sheet_values=ok({"value_ranges": [{"values": [[1, "two", True]]}]}),
        )
        assert "1\ttwo\tTrue" in fetch_sheets(client, "sht1")

    def test_empty_workbook(self) -> None:
        client = FakeFeishuClient(query_sheets=ok({"sheets": []}))
        assert fetch_sheets(client, "sht1") == "Spreadsheet content:\n\n"

    def test_list_failure_raises(self) -> None:
        client = FakeFeishuClient(query_sheets=fail(msg="no permission"))
        with pytest.raises(RemoteAPIError, match="no permission"):
            fetch_sheets(client, "sht1")

    def test_values_failure_raises(self) -> None:
        client = FakeFeishuClient(
            query_sheets=ok({"sheets": [{"sheet_id": "a1", "title": "T"}]}),
            get_sheet_values=fail(msg="range invalid"),
        )
        with pytest.raises(RemoteAPIError, match="range invalid"):
            fetch_sheets(client, "sht1")


class TestFetchSlides:
    def test_lists_slide_ids(self) -> None:
        client = FakeFeishuClient(get_presentation=ok({"presentation": {
            "title": "Kickoff",
            "slides": [{"object_id": "p1"}, {"object_id": "p2"}],
        }}))
        assert fetch_slides(client, "sld1") == snapshot(
            "Presentation title: Kickoff\n\n2 slides\n\nSlide 1: p1\nSlide 2: p2\n"
        )

    def test_error(self) -> None:
        client = FakeFeishuClient(get_presentation=fail())
        with pytest.raises(RemoteAPIError):
            fetch_slides(client, "sld1")


class TestFetchBitable:
    def test_app_and_tables(self) -> None:
        client = FakeFeishuClient(
            get_app=ok({"app": {"name": "Roadmap", "description": ""}}),
            list_tables=ok({"items": [
                {"table_id": "tblA", "name": "Features"},
                {"table_id": "tblB", "name": "Bugs"},
            ]}),
        )
        assert fetch_bitable(client, "bas1") == snapshot(
            "Bitable: Roadmap\nDescription: No description\n\nContains 2 tables:\n"
            "1. Features (tblA)\n2. Bugs (tblB)\n"
        )

    def test_table_list_failure_raises(self) -> None:
        client = FakeFeishuClient(get_app=ok({"app": {"name": "R"}}), list_tables=fail())
        with pytest.raises(RemoteAPIError):
            fetch_bitable(client, "bas1")


class TestFetchFile:
    def test_metadata_only(self) -> None:
        client = FakeFeishuClient(get_file=ok({"file": {
            "name": "report.pdf",
            "type": "pdf",
            "size": 2048,
            "created_time": "1700000000",
            "modified_time": "1700000500",
        }}))
        result = fetch_file(client, "box1")
        assert "File name: report.pdf" in result
        assert "Size: 2048 bytes" in result
        assert "Modified: 1700000500" in result
        assert client.call_count() == 1


class TestFetchMindnote:
    def test_no_remote_call(self) -> None:
        client = FakeFeishuClient()
        result = fetch_mindnote(client, "bmn1")
        assert "bmn1" in result
        assert "not supported" in result
        assert client.call_count() == 0


class TestDispatch:
    def test_dispatch_is_total_over_fetchable_types(self) -> None:
        assert set(FETCHERS) == set(FETCHABLE_TYPES)

    @pytest.mark.parametrize("tag,method", [
        ("doc", "get_raw_content"),
        ("docx", "get_raw_content"),
        ("sheet", "query_sheets"),
        ("sheets", "query_sheets"),
        ("slides", "get_presentation"),
        ("bitable", "get_app"),
        ("file", "get_file"),
    ])
    def test_routes_to_fetcher(self, tag: str, method: str) -> None:
        client = FakeFeishuClient(**{method: fail(msg="stop here")})
        with pytest.raises(RemoteAPIError):
            fetch_by_type(client, tag, "tok")
        assert client.calls[0] == (method, ("tok",))

    def test_accepts_enum(self, docx_client) -> None:
        assert fetch_by_type(docx_client, DocType.DOCX, "dox1").startswith("Quarterly")

    def test_unknown_tag_raises(self) -> None:
        with pytest.raises(UnsupportedTypeError) as exc_info:
            fetch_by_type(FakeFeishuClient(), "folder", "tok")
        message = exc_info.value.message
        assert "folder" in message
        for doc_type in FETCHABLE_TYPES:
            assert doc_type.value in message

    @pytest.mark.parametrize("doc_type", [DocType.WIKI, DocType.UNKNOWN])
    def test_unresolved_types_rejected(self, doc_type: DocType) -> None:
        client = FakeFeishuClient()
        with pytest.raises(UnsupportedTypeError):
            fetch_by_type(client, doc_type, "tok")
        assert client.call_count() == 0


class TestWikiNodes:
    def test_resolve_node(self, wiki_client) -> None:
        ref = resolve_node(wiki_client, "wikTOKEN")
        assert ref == DocumentReference(DocType.DOCX, "doxREAL")
        assert wiki_client.calls == [("get_node", ("wikTOKEN",))]

    def test_resolution_is_idempotent(self, wiki_client) -> None:
        assert resolve_node(wiki_client, "wikTOKEN") == resolve_node(wiki_client, "wikTOKEN")

    def test_fetch_node_forwards_to_dispatch(self, wiki_client) -> None:
        assert fetch_node(wiki_client, "wikTOKEN") == "Resolved content"
        assert wiki_client.calls == [
            ("get_node", ("wikTOKEN",)),
            ("get_raw_content", ("doxREAL",)),
        ]

    def test_node_error_propagates(self) -> None:
        client = FakeFeishuClient(get_node=fail(131005, "node not found"))
        with pytest.raises(RemoteAPIError) as exc_info:
            fetch_node(client, "wikTOKEN")
        assert exc_info.value.msg == "node not found"
        assert client.call_count() == 1

    def test_node_with_unsupported_type(self) -> None:
        client = FakeFeishuClient(get_node=ok({"node": {"obj_type": "catalog", "obj_token": "x"}}))
        with pytest.raises(UnsupportedTypeError, match="catalog"):
            fetch_node(client, "wikTOKEN")

    def test_node_pointing_at_mindnote(self) -> None:
        client = FakeFeishuClient(get_node=ok({"node": {"obj_type": "mindnote", "obj_token": "bmnX"}}))
        assert "bmnX" in fetch_node(client, "wikTOKEN")
        assert client.call_count() == 1
