#!/usr/bin/env python3
"""
CLI interface for weather-feishu.

Usage:
    feishu-weather alerts CA
    feishu-weather forecast 37.7749 -122.4194
    feishu-weather doc <doc_id_or_url>

This provides the same functionality as the MCP tools but via command line,
making it accessible to agents that don't support MCP.
"""

import argparse
import os
import sys

from adapters.services import build_feishu_client
from config import load_feishu_config
from logging_config import configure_logging
from models import ToolResult
from tools import do_fetch_doc, do_get_alerts, do_get_forecast


def _emit(result: ToolResult) -> int:
    stream = sys.stderr if result.is_error else sys.stdout
    print(result.text, file=stream)
    return 1 if result.is_error else 0


def cmd_alerts(args: argparse.Namespace) -> int:
    """Active weather alerts for a state."""
    return _emit(do_get_alerts(args.state))


def cmd_forecast(args: argparse.Namespace) -> int:
    """Forecast for a location."""
    return _emit(do_get_forecast(args.latitude, args.longitude))


def cmd_doc(args: argparse.Namespace) -> int:
    """Feishu document content."""
    client = build_feishu_client(load_feishu_config())
    return _emit(do_fetch_doc(args.doc_id, client))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Weather and Feishu document CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    feishu-weather alerts CA
    feishu-weather forecast 37.7749 -122.4194
    feishu-weather doc doxcnAbC123
    feishu-weather doc "https://example.feishu.cn/docx/AbC123"
""",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # alerts
    alerts_p = subparsers.add_parser("alerts", help="Active NWS alerts for a state")
    alerts_p.add_argument("state", help="Two-letter state code (e.g. CA, NY)")
    alerts_p.set_defaults(func=cmd_alerts)

    # forecast
    forecast_p = subparsers.add_parser("forecast", help="NWS forecast for a location")
    forecast_p.add_argument("latitude", type=float, help="Latitude (-90 to 90)")
    forecast_p.add_argument("longitude", type=float, help="Longitude (-180 to 180)")
    forecast_p.set_defaults(func=cmd_forecast)

    # doc
    doc_p = subparsers.add_parser("doc", help="Fetch Feishu document content")
    doc_p.add_argument("doc_id", help="Document ID or feishu.cn / larksuite.com URL")
    doc_p.set_defaults(func=cmd_doc)

    return parser


def main(argv: list[str] | None = None) -> int:
    configure_logging(os.environ.get("LOG_LEVEL", "WARNING"))
    args = build_parser().parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
