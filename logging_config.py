"""
Logging for the weather / Feishu server.

One package logger, written to stderr because stdout is the MCP stdio
channel. Adapters log remote calls at DEBUG, the tool boundary logs failed
fetches at WARNING. Extractors never log.

configure_logging() is called by the entry points (server.py, cli.py) only;
importing this module has no side effects.
"""

import logging
import sys
from typing import Any

logger = logging.getLogger("feishu_weather")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """
    Set the package log level and attach a stderr handler once.

    Unknown level names fall back to INFO.
    """
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    if logger.handlers:
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
    logger.addHandler(handler)


def log_api_call(service: str, endpoint: str, **params: object) -> None:
    """DEBUG line for an outgoing request: `nws GET url='...'`."""
    args = " ".join(f"{k}={v!r}" for k, v in params.items() if v is not None)
    logger.debug(f"{service} GET {endpoint} {args}".rstrip())


def log_api_result(service: str, endpoint: str, code: int | None = None) -> None:
    """DEBUG line for a finished request. Feishu reports a body code, NWS doesn't."""
    status = "done" if code is None else f"code={code}"
    logger.debug(f"{service} {endpoint} -> {status}")


def log_fetch_failure(doc_id: str, error: dict[str, Any]) -> None:
    """WARNING for a document fetch that ended in a ServiceError."""
    logger.warning(f"Feishu fetch failed for {doc_id!r}: [{error['kind']}] {error['message']}")
