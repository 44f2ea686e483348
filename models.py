"""
Type definitions for feishu-weather.

Dataclasses defining the contracts between layers:
- Adapters return ApiResponse from the document platform and raw JSON from NWS
- Extractors consume these structures and return text
- Tools wire everything together

These types make the adapter→extractor contract explicit and IDE-checkable.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


# ============================================================================
# ERROR TYPES
# ============================================================================

class ErrorKind(Enum):
    """Categories of errors for consistent handling."""
    UNSUPPORTED_TYPE = "unsupported_type"  # Type tag outside the closed set
    REMOTE_API = "remote_api"              # Non-zero code from the platform
    UNCONFIGURED = "unconfigured"          # Credentials missing at startup


UNCONFIGURED_MESSAGE = (
    "Feishu service not configured: set the FEISHU_APP_ID and "
    "FEISHU_APP_SECRET environment variables"
)


class ServiceError(Exception):
    """
    Structured error for consistent handling across layers.

    Adapters and fetchers raise these.
    Tools catch and format for the MCP response.
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for structured logging and CLI output."""
        return {
            "error": True,
            "kind": self.kind.value,
            "message": self.message,
            **self.details,
        }


class UnsupportedTypeError(ServiceError):
    """Document type tag that no fetcher handles."""

    def __init__(self, doc_type: str):
        supported = ", ".join(t.value for t in FETCHABLE_TYPES)
        super().__init__(
            ErrorKind.UNSUPPORTED_TYPE,
            f"Unsupported document type: {doc_type}. Supported types: {supported}",
            {"doc_type": doc_type},
        )
        self.doc_type = doc_type


class RemoteAPIError(ServiceError):
    """The document platform answered with a non-zero code."""

    def __init__(
        self,
        message: str,
        code: int | None = None,
        msg: str = "",
        data: Any = None,
    ):
        super().__init__(
            ErrorKind.REMOTE_API,
            message,
            {"code": code, "remote_message": msg},
        )
        self.code = code
        self.msg = msg
        self.data = data


class UnconfiguredError(ServiceError):
    """Feishu credentials were not supplied at startup."""

    def __init__(self) -> None:
        super().__init__(ErrorKind.UNCONFIGURED, UNCONFIGURED_MESSAGE)


# ============================================================================
# DOCUMENT TYPES
# ============================================================================

class DocType(Enum):
    """Document type tags as they appear in platform URLs and node lookups."""
    DOC = "doc"
    DOCX = "docx"
    SHEET = "sheet"
    SHEETS = "sheets"
    SLIDES = "slides"
    BITABLE = "bitable"
    FILE = "file"
    MINDNOTE = "mindnote"
    WIKI = "wiki"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: str) -> "DocType":
        """Map a raw tag to a DocType, raising UnsupportedTypeError if unknown."""
        try:
            return cls(value)
        except ValueError:
            raise UnsupportedTypeError(value) from None


# Concrete types a fetcher exists for. WIKI and UNKNOWN must be resolved first.
FETCHABLE_TYPES: tuple[DocType, ...] = (
    DocType.DOC,
    DocType.DOCX,
    DocType.SHEET,
    DocType.SHEETS,
    DocType.SLIDES,
    DocType.BITABLE,
    DocType.FILE,
    DocType.MINDNOTE,
)


@dataclass(frozen=True)
class DocumentReference:
    """A (type, id) pair extracted from user input or a wiki node lookup."""
    type: DocType
    id: str

    @property
    def needs_resolution(self) -> bool:
        """True when the real type must come from the wiki node endpoint."""
        return self.type in (DocType.UNKNOWN, DocType.WIKI)


@dataclass
class ApiResponse:
    """
    Raw document platform response.

    code == 0 means success; anything else carries the platform's msg.
    """
    code: int
    msg: str = ""
    data: dict[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.code == 0


# ============================================================================
# WEATHER TYPES
# ============================================================================

@dataclass
class Alert:
    """One active NWS alert (a GeoJSON feature's properties)."""
    event: str = "Unknown"
    area: str = "Unknown"
    severity: str = "Unknown"
    status: str = "Unknown"
    headline: str = "No headline"

    @classmethod
    def from_feature(cls, feature: dict[str, Any]) -> "Alert":
        props = feature.get("properties") or {}
        return cls(
            event=props.get("event") or "Unknown",
            area=props.get("areaDesc") or "Unknown",
            severity=props.get("severity") or "Unknown",
            status=props.get("status") or "Unknown",
            headline=props.get("headline") or "No headline",
        )


@dataclass
class ForecastPeriod:
    """One period of an NWS gridpoint forecast."""
    name: str = "Unknown"
    temperature: int | str = "Unknown"
    temperature_unit: str = "F"
    wind_speed: str = "Unknown"
    wind_direction: str = ""
    short_forecast: str = "No forecast available"

    @classmethod
    def from_dict(cls, period: dict[str, Any]) -> "ForecastPeriod":
        temperature = period.get("temperature")
        return cls(
            name=period.get("name") or "Unknown",
            temperature=temperature if temperature is not None else "Unknown",
            temperature_unit=period.get("temperatureUnit") or "F",
            wind_speed=period.get("windSpeed") or "Unknown",
            wind_direction=period.get("windDirection") or "",
            short_forecast=period.get("shortForecast") or "No forecast available",
        )


# ============================================================================
# TOOL RESULTS
# ============================================================================

@dataclass
class ToolResult:
    """Text payload returned by a tool. Errors are text too, flagged."""
    text: str
    is_error: bool = False
