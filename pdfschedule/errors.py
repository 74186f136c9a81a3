"""
Exceptions raised while turning PDF tokens into events.
"""

from __future__ import annotations


class ScheduleError(Exception):
    """Base class for all pdfschedule errors."""


class UnterminatedBlockError(ScheduleError):
    """Tokens after the last ']' never formed a complete block."""

    def __init__(self, data: str) -> None:
        super().__init__(f"unterminated block at end of input: {data!r}")
        self.data = data


class ParseError(ScheduleError):
    """A raw block could not be turned into an event."""


class TypeNotFoundError(ParseError):
    def __init__(self, data: str) -> None:
        super().__init__(f"schedule event type is not found in {data!r}")
        self.data = data


class DateParseError(ParseError):
    pass


class MissingFieldError(ParseError):
    def __init__(self, field_name: str, data: str) -> None:
        super().__init__(f"empty {field_name} in {data!r}")
        self.field_name = field_name
        self.data = data


class IndexedParseError(ParseError):
    """
    Batch-level failure: which block failed and why.
    """

    def __init__(self, index: int, error: Exception) -> None:
        super().__init__(f"parse events[{index}]: {error}")
        self.index = index
        self.error = error


class DateSyntaxError(ValueError):
    """The date list of a block is malformed."""


class PDFReadError(ScheduleError):
    """The input file could not be read as a PDF."""
