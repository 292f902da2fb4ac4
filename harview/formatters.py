"""
harview/formatters.py

Body display formatting for the viewer: maps a mime type to a body category
and pretty-prints the categories that have a structured text form.
"""

import json
from enum import StrEnum
from urllib.parse import parse_qsl

from harview.data_models.har import BodyRecord
from harview.utils.logger import get_logger


logger = get_logger(name=__name__)


class BodyCategory(StrEnum):
    """Display category of a body, derived from its mime type."""
    JSON = "json"
    XML = "xml"
    HTML = "html"
    JAVASCRIPT = "javascript"
    CSS = "css"
    FORM = "form"
    TEXT = "text"
    BINARY = "binary"
    NONE = "none"


# exact mime types, checked after parameters are stripped
MIME_CATEGORIES: dict[str, BodyCategory] = {
    "application/json": BodyCategory.JSON,
    "text/json": BodyCategory.JSON,
    "application/xml": BodyCategory.XML,
    "text/xml": BodyCategory.XML,
    "text/html": BodyCategory.HTML,
    "application/xhtml+xml": BodyCategory.HTML,
    "application/javascript": BodyCategory.JAVASCRIPT,
    "application/x-javascript": BodyCategory.JAVASCRIPT,
    "text/javascript": BodyCategory.JAVASCRIPT,
    "text/css": BodyCategory.CSS,
    "application/x-www-form-urlencoded": BodyCategory.FORM,
}

# structured suffixes (RFC 6839), e.g. application/ld+json
SUFFIX_CATEGORIES: dict[str, BodyCategory] = {
    "+json": BodyCategory.JSON,
    "+xml": BodyCategory.XML,
}

BINARY_PREFIXES = ("image/", "audio/", "video/", "font/", "application/octet-stream")


def categorize_mime_type(mime_type: str) -> BodyCategory:
    """
    Map a mime type (parameters allowed) to a BodyCategory.

    Examples:
        "application/json; charset=utf-8" -> JSON
        "application/vnd.api+json"        -> JSON
        "image/png"                       -> BINARY
        ""                                -> NONE
    """
    normalized = mime_type.split(";")[0].strip().lower()
    if not normalized:
        return BodyCategory.NONE
    if normalized in MIME_CATEGORIES:
        return MIME_CATEGORIES[normalized]
    for suffix, category in SUFFIX_CATEGORIES.items():
        if normalized.endswith(suffix):
            return category
    if normalized.startswith(BINARY_PREFIXES):
        return BodyCategory.BINARY
    if normalized.startswith("text/"):
        return BodyCategory.TEXT
    return BodyCategory.BINARY


def _format_json(text: str) -> str:
    try:
        return json.dumps(json.loads(text), indent=2, ensure_ascii=False)
    except json.JSONDecodeError as e:
        logger.debug("Body is not valid JSON, showing as-is: %s", e)
        return text


def _format_form(text: str) -> str:
    pairs = parse_qsl(text, keep_blank_values=True)
    if not pairs:
        return text
    return "\n".join(f"{name}={value}" for name, value in pairs)


FORMATTERS = {
    BodyCategory.JSON: _format_json,
    BodyCategory.FORM: _format_form,
}


def format_body(record: BodyRecord, pretty: bool = True) -> str:
    """
    Render a body record's text for display.

    Sentinel records and categories without a formatter are returned verbatim.

    Args:
        record: The body record to render.
        pretty: Whether to pretty-print structured bodies.

    Returns:
        The text to display.
    """
    if not pretty:
        return record.text
    formatter = FORMATTERS.get(categorize_mime_type(record.label))
    if formatter is None:
        return record.text
    return formatter(record.text)
