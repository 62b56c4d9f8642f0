"""
HueForge Request IDs
`<prefix>-<YYYYmmddHHMMSS>-<8 hex>` identifiers for tracing requests in logs.
"""
import re
import uuid
from datetime import datetime

REQUEST_ID_RE = re.compile(r"^(?P<prefix>[a-z]+)-(?P<timestamp>\d{14})-(?P<suffix>[0-9a-f]{8})$")


def generate_request_id(prefix: str = "pal") -> str:
    """
    Generate a unique request ID.

    Args:
        prefix: Short operation tag, "pal" for palette and "thm" for theme requests
    """
    return f"{prefix}-{datetime.now():%Y%m%d%H%M%S}-{uuid.uuid4().hex[:8]}"


def extract_timestamp_from_request_id(request_id: str) -> str:
    """Return the timestamp part of a request ID, or "" if it is malformed."""
    match = REQUEST_ID_RE.match(request_id)
    return match.group("timestamp") if match else ""
