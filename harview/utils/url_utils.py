"""
harview/utils/url_utils.py

URL parsing for HAR request URLs, including the "blob:" wrapper scheme.
"""

from urllib.parse import urlsplit

from harview.data_models.har import ParsedURL
from harview.utils.logger import get_logger


logger = get_logger(name=__name__)

BLOB_PREFIX = "blob:"
BLOB_SCHEME_SUFFIX = ":blob"


def _split_url(url: str) -> ParsedURL:
    """Split a plain URL, falling back to empty components when it cannot be parsed."""
    try:
        parts = urlsplit(url)
    except ValueError as e:
        logger.debug("Unparsable URL %r: %s", url, e)
        return ParsedURL()

    # drop userinfo from the network location
    host = parts.netloc.rpartition("@")[2]
    return ParsedURL(scheme=parts.scheme, host=host, path=parts.path)


def parse_url(url: str) -> ParsedURL:
    """
    Parse a URL into scheme, host and path.

    A URL prefixed with "blob:" is unwrapped; the inner URL is parsed normally
    and its scheme is rewritten to "{scheme}:blob".

    Examples:
        blob:https://example.com/x -> ("https:blob", "example.com", "/x")
        https://a.com/p?q=1        -> ("https", "a.com", "/p")

    Args:
        url: Raw URL string from the HAR entry.

    Returns:
        ParsedURL with empty strings for components that could not be extracted.
    """
    if url.startswith(BLOB_PREFIX):
        inner = _split_url(url[len(BLOB_PREFIX):])
        return inner.model_copy(update={"scheme": inner.scheme + BLOB_SCHEME_SUFFIX})
    return _split_url(url)
