"""
Weather tools — NWS alerts and forecasts as text.
"""

from adapters.weather import alerts_url, make_nws_request, points_url
from extractors.weather import format_alerts, format_forecast
from logging_config import logger
from models import Alert, ForecastPeriod, ToolResult
from validation import validate_coordinates, validate_state_code


def do_get_alerts(state: str) -> ToolResult:
    """Active weather alerts for a two-letter US state code."""
    try:
        state_code = validate_state_code(state)
    except ValueError as e:
        return ToolResult(str(e), is_error=True)

    data = make_nws_request(alerts_url(state_code))
    if not data:
        return ToolResult("Failed to retrieve alerts data", is_error=True)

    features = data.get("features") or []
    if not features:
        return ToolResult(f"No active alerts for {state_code}")

    logger.info(f"{len(features)} active alerts for {state_code}")
    alerts = [Alert.from_feature(f) for f in features]
    return ToolResult(format_alerts(state_code, alerts))


def do_get_forecast(latitude: float, longitude: float) -> ToolResult:
    """
    Forecast for a location.

    Two calls: gridpoint lookup for the forecast URL, then the forecast.
    Only US locations are covered by NWS.
    """
    try:
        validate_coordinates(latitude, longitude)
    except ValueError as e:
        return ToolResult(str(e), is_error=True)

    points = make_nws_request(points_url(latitude, longitude))
    if not points:
        return ToolResult(
            f"Failed to retrieve grid point data for coordinates: {latitude}, {longitude}. "
            "This location may not be supported by the NWS API (only US locations are supported).",
            is_error=True,
        )

    forecast_url = (points.get("properties") or {}).get("forecast")
    if not forecast_url:
        return ToolResult("Failed to get forecast URL from grid point data", is_error=True)

    forecast = make_nws_request(forecast_url)
    if not forecast:
        return ToolResult("Failed to retrieve forecast data", is_error=True)

    periods = (forecast.get("properties") or {}).get("periods") or []
    if not periods:
        return ToolResult("No forecast periods available")

    return ToolResult(format_forecast(latitude, longitude, [ForecastPeriod.from_dict(p) for p in periods]))
