"""
harview/har/entry_extractor.py

Extracts the summary row, header lines and body records from one decoded HAR entry.
"""

import math
from typing import Any, NamedTuple

from harview.data_models.har import BodyRecord, HeaderPair, SummaryRow
from harview.utils.logger import get_logger
from harview.utils.url_utils import parse_url


logger = get_logger(name=__name__)


NO_CONTENT_TYPE = "[no content]"
NO_REQUEST_HEADERS = "No request headers."
NO_RESPONSE_HEADERS = "No response headers."

EMPTY_LABEL = "Empty"
NO_POST_DATA = BodyRecord(label="", text="Nothing to show here...")
EMPTY_REQUEST = BodyRecord(label=EMPTY_LABEL, text="[Empty request]")
EMPTY_RESPONSE = BodyRecord(label=EMPTY_LABEL, text="[empty response]")
NO_DATA_TEXT = "[no data]"


class ExtractedEntry(NamedTuple):
    """Everything derived from a single HAR entry."""

    row: SummaryRow
    headers: HeaderPair
    request_body: BodyRecord
    response_body: BodyRecord


def _as_dict(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _format_number(value: Any) -> str:
    """Render a JSON number, dropping the fractional part when it is integral."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def format_time(time_ms: Any) -> str:
    """Format an entry time as "{rounded} ms"."""
    if not _is_number(time_ms) or not math.isfinite(time_ms):
        return "0 ms"
    return f"{_round_half_away(time_ms)} ms"


def format_header_lines(headers: Any, placeholder: str) -> tuple[str, ...]:
    """
    Format HAR headers as "{name}: {value}" lines in document order.

    Returns a one-line placeholder when the header list is absent or empty.
    """
    if not isinstance(headers, list) or not headers:
        return (placeholder,)

    lines = []
    for header in headers:
        header = _as_dict(header)
        name = header.get("name")
        value = header.get("value")
        lines.append(f"{'' if name is None else name}: {'' if value is None else value}")
    return tuple(lines)


def extract_request_body(request: dict[str, Any], size: Any) -> BodyRecord:
    """
    Build the request body record from request.postData.

    Emptiness is decided by the entry's response content size, so a
    postData with text is still an empty request when that size is <= 0.
    """
    if "postData" not in request or not isinstance(request["postData"], dict):
        return NO_POST_DATA

    post_data = request["postData"]
    if not _is_number(size) or size <= 0:
        return EMPTY_REQUEST

    mime_type = str(post_data.get("mimeType") or "")
    text = post_data.get("text")
    if text is None:
        return BodyRecord(label=mime_type, text=NO_DATA_TEXT)
    return BodyRecord(label=mime_type, text=str(text))


def extract_response_body(content: dict[str, Any]) -> BodyRecord:
    """
    Build the response body record from response.content.

    Bodies with size <= 0 and bodies without a text field (e.g. binary
    content the recorder did not capture) both map to the empty sentinel.
    """
    size = content.get("size")
    text = content.get("text")
    if _is_number(size) and size > 0 and text is not None:
        return BodyRecord(label=str(content.get("mimeType") or ""), text=str(text))
    return EMPTY_RESPONSE


def extract_entry(entry_id: int, entry: dict[str, Any]) -> ExtractedEntry:
    """
    Extract the summary row, header pair and body records for one HAR entry.

    Args:
        entry_id: 1-based position of the entry in the document.
        entry: Decoded HAR entry object.

    Returns:
        ExtractedEntry with all four derived values.
    """
    request = _as_dict(entry.get("request"))
    response = _as_dict(entry.get("response"))
    content = _as_dict(response.get("content"))

    url = request.get("url")
    parsed_url = parse_url(url if isinstance(url, str) else "")
    if not parsed_url.host:
        logger.debug("Entry %d: no host in request URL %r", entry_id, url)

    status = response.get("status")
    size = content.get("size")

    row = SummaryRow(
        id=entry_id,
        protocol=parsed_url.scheme,
        method=str(request.get("method") or ""),
        domain=parsed_url.host,
        path=parsed_url.path,
        status=_format_number(status) if _is_number(status) else "0",
        content_type=str(content.get("mimeType") or NO_CONTENT_TYPE),
        size=_format_number(size) if _is_number(size) else "0",
        time_display=format_time(entry.get("time")),
    )

    headers = HeaderPair(
        request_lines=format_header_lines(request.get("headers"), NO_REQUEST_HEADERS),
        response_lines=format_header_lines(response.get("headers"), NO_RESPONSE_HEADERS),
    )

    return ExtractedEntry(
        row=row,
        headers=headers,
        request_body=extract_request_body(request, size),
        response_body=extract_response_body(content),
    )
