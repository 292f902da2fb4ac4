"""
harview/har/har_data_store.py

Data store for HAR (HTTP Archive) documents.

Parses HAR content into three order-aligned collections (summary rows,
header pairs, body records) indexed by 1-based entry id.
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from harview.data_models.har import BodyRecord, HeaderPair, SummaryRow
from harview.har.entry_extractor import extract_entry
from harview.utils.exceptions import EntryIndexOutOfRangeError, MalformedDocumentError
from harview.utils.logger import get_logger


logger = get_logger(name=__name__)


def load_har_document(har_content: str) -> dict[str, Any]:
    """
    Decode HAR text and check that it has a log.entries list.

    Args:
        har_content: Raw HAR file content as JSON string.

    Returns:
        The decoded document.

    Raises:
        MalformedDocumentError: If the content is not JSON or lacks log.entries.
    """
    try:
        data = json.loads(har_content)
    except (json.JSONDecodeError, TypeError) as e:
        logger.error("Failed to parse HAR JSON: %s", e)
        raise MalformedDocumentError(f"Invalid HAR JSON: {e}") from e

    if not isinstance(data, dict):
        logger.error("HAR root is %s, expected an object", type(data).__name__)
        raise MalformedDocumentError("Invalid HAR format: root is not an object")

    log = data.get("log")
    if not isinstance(log, dict) or not isinstance(log.get("entries"), list):
        logger.error("HAR document has no log.entries list")
        raise MalformedDocumentError("Invalid HAR format: missing log.entries")

    return data


@dataclass(frozen=True)
class HarSession:
    """
    The result of parsing one HAR document.

    The three collections have one element per entry, in document order;
    entry id N lives at index N - 1 of each.
    """

    rows: tuple[SummaryRow, ...] = ()
    headers: tuple[HeaderPair, ...] = ()
    request_bodies: tuple[BodyRecord, ...] = ()
    response_bodies: tuple[BodyRecord, ...] = ()

    def __len__(self) -> int:
        return len(self.rows)

    def _index(self, entry_id: int) -> int:
        if isinstance(entry_id, bool) or not isinstance(entry_id, int) or not 1 <= entry_id <= len(self.rows):
            raise EntryIndexOutOfRangeError(
                f"Entry id {entry_id!r} is out of range; {len(self.rows)} entries loaded"
            )
        return entry_id - 1

    def get_headers(self, entry_id: int) -> HeaderPair:
        """Get the request/response header lines of an entry."""
        return self.headers[self._index(entry_id)]

    def get_request_body(self, entry_id: int) -> BodyRecord:
        """Get the request body record of an entry."""
        return self.request_bodies[self._index(entry_id)]

    def get_response_body(self, entry_id: int) -> BodyRecord:
        """Get the response body record of an entry."""
        return self.response_bodies[self._index(entry_id)]

    def search_rows(
        self,
        method: str | None = None,
        domain_contains: str | None = None,
        path_contains: str | None = None,
        status: str | int | None = None,
        content_type_contains: str | None = None,
    ) -> list[SummaryRow]:
        """
        Search summary rows with filters.

        Args:
            method: Filter by HTTP method (case-insensitive)
            domain_contains: Filter by domain containing substring
            path_contains: Filter by path containing substring
            status: Filter by exact status code
            content_type_contains: Filter by content type containing substring

        Returns:
            Matching rows in document order.
        """
        results = []

        for row in self.rows:
            if method and row.method.upper() != method.upper():
                continue
            if domain_contains and domain_contains.lower() not in row.domain.lower():
                continue
            if path_contains and path_contains.lower() not in row.path.lower():
                continue
            if status is not None and row.status != str(status):
                continue
            if content_type_contains and content_type_contains.lower() not in row.content_type.lower():
                continue

            results.append(row)

        return results


def build_session(har_content: str) -> HarSession:
    """
    Parse HAR content into a new HarSession.

    Every entry is extracted before the session is built, so a failure
    leaves no partial result behind.

    Raises:
        MalformedDocumentError: If the document or any entry is malformed.
    """
    data = load_har_document(har_content)
    raw_entries = data["log"]["entries"]

    rows: list[SummaryRow] = []
    headers: list[HeaderPair] = []
    request_bodies: list[BodyRecord] = []
    response_bodies: list[BodyRecord] = []

    for entry_id, entry in enumerate(raw_entries, start=1):
        if not isinstance(entry, dict):
            logger.error("Entry %d is %s, expected an object", entry_id, type(entry).__name__)
            raise MalformedDocumentError(f"Invalid HAR format: entry {entry_id} is not an object")

        extracted = extract_entry(entry_id, entry)
        rows.append(extracted.row)
        headers.append(extracted.headers)
        request_bodies.append(extracted.request_body)
        response_bodies.append(extracted.response_body)

    return HarSession(
        rows=tuple(rows),
        headers=tuple(headers),
        request_bodies=tuple(request_bodies),
        response_bodies=tuple(response_bodies),
    )


class HarDataStore:
    """
    Data store for HAR document viewing.

    Holds the currently loaded HarSession. Each parse builds a complete new
    session and only then replaces the current one; a failed parse leaves the
    previous session in place.

    Usage:
        store = HarDataStore()
        rows = store.parse(open("network.har").read())

        headers = store.get_headers(rows[0].id)
        body = store.get_response_body(rows[0].id)
    """

    def __init__(self, har_content: str | None = None) -> None:
        """
        Initialize the HAR data store.

        Args:
            har_content: Optional raw HAR content to parse immediately.
        """
        self._session = HarSession()
        if har_content is not None:
            self.parse(har_content)

    @classmethod
    def from_file(cls, har_path: str | Path) -> "HarDataStore":
        """
        Load a HAR file from disk.

        Raises:
            FileNotFoundError: If the file doesn't exist.
            MalformedDocumentError: If the file is not a HAR document.
        """
        path = Path(har_path)
        if not path.exists():
            raise FileNotFoundError(f"HAR file not found: {path}")

        try:
            content = path.read_text(encoding="utf-8-sig")
        except UnicodeDecodeError as e:
            logger.error("HAR file %s is not UTF-8: %s", path, e)
            raise MalformedDocumentError(f"HAR file is not UTF-8 text: {e}") from e

        return cls(content)

    @property
    def session(self) -> HarSession:
        """Return the currently loaded session."""
        return self._session

    @property
    def rows(self) -> tuple[SummaryRow, ...]:
        """Return the summary rows of the loaded document."""
        return self._session.rows

    def __len__(self) -> int:
        return len(self._session)

    def parse(self, har_content: str) -> list[SummaryRow]:
        """
        Parse HAR content and replace the loaded document.

        Args:
            har_content: Raw HAR file content as JSON string.

        Returns:
            Summary rows, ids 1..N in document order.

        Raises:
            MalformedDocumentError: If the content is not a HAR document.
        """
        session = build_session(har_content)
        self._session = session

        logger.info("HarDataStore loaded %d entries", len(session))
        return list(session.rows)

    def get_headers(self, entry_id: int) -> HeaderPair:
        """Get the header pair for an entry id of the loaded document."""
        return self._session.get_headers(entry_id)

    def get_request_body(self, entry_id: int) -> BodyRecord:
        """Get the request body for an entry id of the loaded document."""
        return self._session.get_request_body(entry_id)

    def get_response_body(self, entry_id: int) -> BodyRecord:
        """Get the response body for an entry id of the loaded document."""
        return self._session.get_response_body(entry_id)

    def search_rows(
        self,
        method: str | None = None,
        domain_contains: str | None = None,
        path_contains: str | None = None,
        status: str | int | None = None,
        content_type_contains: str | None = None,
    ) -> list[SummaryRow]:
        """Search summary rows of the loaded document. See HarSession.search_rows."""
        return self._session.search_rows(
            method=method,
            domain_contains=domain_contains,
            path_contains=path_contains,
            status=status,
            content_type_contains=content_type_contains,
        )
