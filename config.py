"""
Configuration - Single Source of Truth

Endpoints, limits and credential loading are defined here. Do not duplicate elsewhere.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from logging_config import logger

# --- Server identity ---
SERVER_NAME = "weather-feishu"
SERVER_VERSION = "1.0.0"
DEFAULT_SSE_PORT = 8080
DEFAULT_SSE_HOST = "0.0.0.0"  # all interfaces
CORS_ALLOW_ORIGINS = ("*",)

# --- National Weather Service ---
NWS_API_BASE = "https://api.weather.gov"
USER_AGENT = "weather-app/1.0"
HTTP_TIMEOUT = 30

# --- Feishu / Lark document platform ---
FEISHU_DOMAINS = ("feishu.cn", "larksuite.com")

# Spreadsheet output bounds
MAX_SHEETS = 3
MAX_SHEET_ROWS = 10
SHEET_RANGE = "A1:Z100"

# Environment variable names for credentials
APP_ID_ENV = "FEISHU_APP_ID"
APP_SECRET_ENV = "FEISHU_APP_SECRET"


@dataclass(frozen=True)
class FeishuConfig:
    """Credentials for the Feishu open platform app."""
    app_id: str
    app_secret: str


def load_feishu_config() -> FeishuConfig | None:
    """
    Read Feishu credentials from the environment (and a local .env file).

    Returns:
        FeishuConfig, or None when either variable is missing. Document tools
        then report themselves as unconfigured.
    """
    load_dotenv()
    app_id = os.environ.get(APP_ID_ENV)
    app_secret = os.environ.get(APP_SECRET_ENV)

    if not app_id or not app_secret:
        logger.warning(f"Feishu config not found: {APP_ID_ENV} and {APP_SECRET_ENV} are not set")
        logger.warning("Feishu document tools will be unavailable")
        return None

    return FeishuConfig(app_id=app_id, app_secret=app_secret)


def mask_api_key(key: str | None) -> str:
    """Hide all but the first and last four characters of a secret."""
    if not key:
        return "unset"
    if len(key) <= 8:
        return "*" * len(key)
    return key[:4] + "*" * (len(key) - 8) + key[-4:]
