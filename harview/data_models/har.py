"""
harview/data_models/har.py

Data models for parsed HAR entries: the summary row shown in the entry table
and the detail records looked up by entry id.
"""

from pydantic import BaseModel, ConfigDict, Field


class ParsedURL(BaseModel):
    """
    Scheme, host and path extracted from a request URL.
    Blob-wrapped URLs carry the inner scheme with a ":blob" suffix (e.g. "https:blob").
    """
    model_config = ConfigDict(frozen=True)

    scheme: str = Field(
        default="",
        description="URL scheme",
        examples=["https", "http", "https:blob"]
    )
    host: str = Field(
        default="",
        description="Network location (host, with port if present)",
        examples=["example.com", "localhost:8080"]
    )
    path: str = Field(
        default="",
        description="Path component, without query string or fragment",
        examples=["/", "/api/v1/users"]
    )


class SummaryRow(BaseModel):
    """
    One row of the entry table. All display fields are pre-rendered strings.
    """
    model_config = ConfigDict(frozen=True)

    id: int = Field(
        ...,
        ge=1,
        description="1-based position of the entry in the document"
    )
    protocol: str = Field(..., description="URL scheme of the request")
    method: str = Field(..., description="HTTP method", examples=["GET", "POST"])
    domain: str = Field(..., description="Host of the request URL")
    path: str = Field(..., description="Path of the request URL")
    status: str = Field(..., description="Response status code", examples=["200", "404"])
    content_type: str = Field(
        ...,
        description="Response mime type, or '[no content]'",
        examples=["application/json", "[no content]"]
    )
    size: str = Field(..., description="Response content size in bytes")
    time_display: str = Field(..., description="Total entry time", examples=["123 ms"])


class HeaderPair(BaseModel):
    """
    Request and response header lines, each formatted "{name}: {value}".
    Never empty: an entry without headers gets a single placeholder line.
    """
    model_config = ConfigDict(frozen=True)

    request_lines: tuple[str, ...] = Field(..., min_length=1)
    response_lines: tuple[str, ...] = Field(..., min_length=1)


class BodyRecord(BaseModel):
    """
    A request or response body with its label.
    The label is a mime type or a sentinel category ("Empty", "").
    """
    model_config = ConfigDict(frozen=True)

    label: str
    text: str
