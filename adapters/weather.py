"""
Weather adapter — National Weather Service API wrapper.

Plain GET requests returning parsed GeoJSON. Failures are logged and
reported as None; the tools turn that into a readable message.
"""

from typing import Any

import httpx

from config import HTTP_TIMEOUT, NWS_API_BASE, USER_AGENT
from logging_config import logger, log_api_call

__all__ = [
    "make_nws_request",
    "alerts_url",
    "points_url",
]

NWS_HEADERS = {
    "User-Agent": USER_AGENT,
    "Accept": "application/geo+json",
}


def alerts_url(state: str) -> str:
    """Active alerts endpoint for a state code."""
    return f"{NWS_API_BASE}/alerts?area={state}"


def points_url(latitude: float, longitude: float) -> str:
    """Gridpoint metadata endpoint; NWS wants at most four decimals."""
    return f"{NWS_API_BASE}/points/{latitude:.4f},{longitude:.4f}"


def make_nws_request(url: str) -> dict[str, Any] | None:
    """
    GET an NWS URL.

    Returns:
        Parsed JSON body, or None on network error, non-2xx status, or a body
        that isn't JSON.
    """
    log_api_call("nws", url)
    try:
        with httpx.Client(headers=NWS_HEADERS, timeout=HTTP_TIMEOUT, follow_redirects=True) as client:
            response = client.get(url)
            response.raise_for_status()
            return response.json()
    except httpx.HTTPStatusError as e:
        logger.warning(f"NWS request failed: HTTP {e.response.status_code} for {url}")
    except httpx.HTTPError as e:
        logger.warning(f"NWS request failed: {e}")
    except ValueError as e:
        logger.warning(f"NWS returned invalid JSON for {url}: {e}")
    return None
