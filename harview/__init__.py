"""
harview - Parse HAR (HTTP Archive) files into summary rows and per-entry details.

Usage:
    from harview import HarDataStore

    store = HarDataStore()
    rows = store.parse(har_text)
    headers = store.get_headers(rows[0].id)
    body = store.get_response_body(rows[0].id)
"""

__version__ = "0.1.0"

from .data_models.har import BodyRecord, HeaderPair, ParsedURL, SummaryRow
from .har.har_data_store import HarDataStore, HarSession, build_session, load_har_document
from .utils.exceptions import EntryIndexOutOfRangeError, HarViewError, MalformedDocumentError
from .utils.url_utils import parse_url

__all__ = [
    # Store
    "HarDataStore",
    "HarSession",
    "build_session",
    "load_har_document",
    "parse_url",
    # Data models
    "BodyRecord",
    "HeaderPair",
    "ParsedURL",
    "SummaryRow",
    # Exceptions
    "EntryIndexOutOfRangeError",
    "HarViewError",
    "MalformedDocumentError",
]
