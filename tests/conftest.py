"""
Shared pytest fixtures for feishu-weather tests.

Remote responses are canned: the Feishu client is replaced by
FakeFeishuClient (tests/helpers.py), NWS calls are patched per test.
"""

from typing import Any

import pytest

from tests.helpers import FakeFeishuClient, ok


# ============================================================================
# Feishu Fixtures
# ============================================================================

@pytest.fixture
def docx_client() -> FakeFeishuClient:
    """Client serving one docx document."""
    return FakeFeishuClient(get_raw_content=ok({"content": "Quarterly plan\nShip it."}))


@pytest.fixture
def wiki_client() -> FakeFeishuClient:
    """Client whose wiki node points at a docx document."""
    return FakeFeishuClient(
        get_node=ok({"node": {"obj_type": "docx", "obj_token": "doxREAL", "title": "Plan"}}),
        get_raw_content=ok({"content": "Resolved content"}),
    )


@pytest.fixture(autouse=True)
def _no_feishu_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer credentials out of tests."""
    monkeypatch.delenv("FEISHU_APP_ID", raising=False)
    monkeypatch.delenv("FEISHU_APP_SECRET", raising=False)


# ============================================================================
# Weather Fixtures
# ============================================================================

@pytest.fixture
def alerts_response() -> dict[str, Any]:
    """NWS /alerts GeoJSON with two features."""
    return {
        "type": "FeatureCollection",
        "features": [
            {
                "properties": {
                    "event": "Heat Advisory",
                    "areaDesc": "Sacramento Valley",
                    "severity": "Moderate",
                    "status": "Actual",
                    "headline": "Heat Advisory until 8 PM",
                }
            },
            {"properties": {"event": "Wind Advisory"}},
        ],
    }


@pytest.fixture
def forecast_response() -> dict[str, Any]:
    """NWS gridpoint forecast with two periods."""
    return {
        "properties": {
            "periods": [
                {
                    "name": "Tonight",
                    "temperature": 58,
                    "temperatureUnit": "F",
                    "windSpeed": "5 mph",
                    "windDirection": "W",
                    "shortForecast": "Clear",
                },
                {
                    "name": "Saturday",
                    "temperature": 0,
                    "temperatureUnit": "F",
                    "windSpeed": "10 mph",
                    "windDirection": "N",
                    "shortForecast": "Snow",
                },
            ]
        }
    }
