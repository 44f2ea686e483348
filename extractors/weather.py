"""
Weather Extractor — Pure functions formatting NWS alerts and forecasts as text.

No API calls, no MCP awareness.
"""

from models import Alert, ForecastPeriod


def format_alert(alert: Alert) -> str:
    """One alert block, terminated by a --- separator."""
    return "\n".join([
        f"Event: {alert.event}",
        f"Area: {alert.area}",
        f"Severity: {alert.severity}",
        f"Status: {alert.status}",
        f"Headline: {alert.headline}",
        "---",
    ])


def format_alerts(state: str, alerts: list[Alert]) -> str:
    """
    All alerts for a state.

    Returns:
        Text like:
            Active alerts for CA:

            Event: Heat Advisory
            ...
            ---
    """
    body = "\n".join(format_alert(a) for a in alerts)
    return f"Active alerts for {state}:\n\n{body}"


def format_period(period: ForecastPeriod) -> str:
    """One forecast period block, terminated by a --- separator."""
    return "\n".join([
        f"{period.name}:",
        f"Temperature: {period.temperature}°{period.temperature_unit}",
        f"Wind: {period.wind_speed} {period.wind_direction}",
        period.short_forecast,
        "---",
    ])


def format_forecast(latitude: float, longitude: float, periods: list[ForecastPeriod]) -> str:
    body = "\n".join(format_period(p) for p in periods)
    return f"Forecast for {latitude}, {longitude}:\n\n{body}"
