"""
harview/har/__init__.py

HAR document parsing and indexing.
"""

from harview.har.entry_extractor import ExtractedEntry, extract_entry
from harview.har.har_data_store import HarDataStore, HarSession, build_session, load_har_document

__all__ = [
    "ExtractedEntry",
    "HarDataStore",
    "HarSession",
    "build_session",
    "extract_entry",
    "load_har_document",
]
