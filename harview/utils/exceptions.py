"""
harview/utils/exceptions.py

Custom exceptions for harview.

Contains:
- HarViewError: Base exception
- MalformedDocumentError: Input is not a usable HAR document
- EntryIndexOutOfRangeError: Entry id outside the loaded document
"""


class HarViewError(Exception):
    """
    Base exception for all harview errors.
    """


class MalformedDocumentError(HarViewError, ValueError):
    """
    Raised when the input is not valid JSON or lacks a log.entries list.
    """


class EntryIndexOutOfRangeError(HarViewError, IndexError):
    """
    Raised when an entry id is outside [1, N] for the currently loaded document.
    """
