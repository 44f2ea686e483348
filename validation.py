"""
Input validation and ID extraction utilities.

Handles:
- Feishu / Lark URL or bare token → DocumentReference
- Weather tool parameters (state codes, coordinates)
"""

import re

from config import FEISHU_DOMAINS
from models import DocType, DocumentReference

# =============================================================================
# PATTERNS
# =============================================================================

_DOMAIN_ALTERNATION = "|".join(re.escape(d) for d in FEISHU_DOMAINS)

# /{type}/{token} directly after the domain
FEISHU_TYPED_URL_PATTERN = re.compile(
    rf'(?:{_DOMAIN_ALTERNATION})/'
    r'(doc|docx|sheet|sheets|mindnote|bitable|file|slides|wiki)/([^/?#]+)'
)

# Any first segment; keeps the second as the token, type left unknown
FEISHU_LOOSE_URL_PATTERN = re.compile(
    rf'(?:{_DOMAIN_ALTERNATION})/[^/]*/([^/?#]+)'
)

STATE_CODE_PATTERN = re.compile(r'^[A-Za-z]{2}$')


# =============================================================================
# FEISHU DOCUMENT REFERENCES
# =============================================================================

def is_feishu_url(input_value: str) -> bool:
    """True if the string mentions one of the platform's domains."""
    return any(domain in input_value for domain in FEISHU_DOMAINS)


def extract_document_reference(input_value: str) -> DocumentReference:
    """
    Extract document type and token from a Feishu URL or bare token.

    Accepts:
    - Typed URL: https://xx.feishu.cn/docx/ABC123 → (docx, ABC123)
    - Other URL on a known domain: https://xx.feishu.cn/base/XYZ → (unknown, XYZ)
    - Bare token: ABC123 → (unknown, ABC123)

    Never raises. Anything that can't be typed comes back as UNKNOWN and is
    resolved through the wiki node lookup. The extracted token is not
    validated. Input with no known domain is passed through byte for byte.
    """
    if is_feishu_url(input_value):
        url = input_value.strip()
        match = FEISHU_TYPED_URL_PATTERN.search(url)
        if match:
            return DocumentReference(DocType(match.group(1)), match.group(2))

        match = FEISHU_LOOSE_URL_PATTERN.search(url)
        if match:
            return DocumentReference(DocType.UNKNOWN, match.group(1))

    return DocumentReference(DocType.UNKNOWN, input_value)


# =============================================================================
# WEATHER PARAMETERS
# =============================================================================

def validate_state_code(state: str) -> str:
    """
    Normalize a two-letter US state code.

    Raises:
        ValueError: If the code isn't exactly two letters
    """
    state = (state or "").strip()
    if not STATE_CODE_PATTERN.match(state):
        raise ValueError(
            f"Invalid state code: {state!r}\n"
            "Expected a two-letter code (e.g. CA, NY)"
        )
    return state.upper()


def validate_coordinates(latitude: float, longitude: float) -> tuple[float, float]:
    """
    Check latitude/longitude ranges.

    Raises:
        ValueError: If either coordinate is out of range
    """
    if not -90 <= latitude <= 90:
        raise ValueError(f"Latitude must be between -90 and 90, got {latitude}")
    if not -180 <= longitude <= 180:
        raise ValueError(f"Longitude must be between -180 and 180, got {longitude}")
    return latitude, longitude
