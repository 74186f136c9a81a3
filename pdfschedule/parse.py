"""
Parsing (raw blocks -> events).

A timetable cell always lists its fields in the same order:

    <title>. <teacher>. <type>. (<subgroup>). <location>. [<dates>]

e.g. "Algorithms. Smith. лекции. Room 101. [12.03]"

Teacher and subgroup are optional. Instead of one big regex the block is
processed stage by stage, left to right: every stage returns offsets and
the next stage works on the slice between them. This keeps titles or
locations that contain dots from breaking the whole match.

Important rules (DO NOT CHANGE):
- a block yields either a complete Event or an exception, never half an Event
- parse_events stops at the first broken block
"""

from __future__ import annotations

import logging
import re
from typing import Callable, Iterable, List, Optional, Tuple

from pdfschedule.dates import parse_dates
from pdfschedule.errors import (
    DateParseError,
    DateSyntaxError,
    IndexedParseError,
    MissingFieldError,
    ParseError,
    TypeNotFoundError,
)
from pdfschedule.model import TYPE_PHRASES, Event, EventType, RawBlock

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = ". "

TYPE_REGEX = re.compile("(" + "|".join(re.escape(p) for p in TYPE_PHRASES) + r")\.")

# Leading words inside the date brackets that are not dates
DATE_SKIP = {
    EventType.LECTURE: 0,
    EventType.SEMINAR: 0,
    EventType.LAB: 1,
}

Observer = Callable[[RawBlock, Event], None]


# ---------------------------------------------------------------------------
# Stages
# ---------------------------------------------------------------------------


def find_event_type(data: str) -> Tuple[EventType, int, int]:
    """
    Find the first type phrase followed by a dot.

    Returns the event type and the span of the match (dot included).
    """
    m = TYPE_REGEX.search(data)
    if not m:
        raise TypeNotFoundError(data)
    return TYPE_PHRASES[m.group(1)], m.start(), m.end()


def split_title_teacher(text: str) -> Tuple[str, str]:
    """
    Split the text before the type into title and teacher.

    Without a teacher the last character of the title is dropped
    (the layout leaves punctuation there).
    """
    parts = text.split(FIELD_SEPARATOR)
    if len(parts) == 1:
        return parts[0][:-1], ""
    return parts[0], parts[1]


def split_subgroup_location(text: str) -> Tuple[str, str]:
    """
    Split the text between type and dates into subgroup and location.

    "(1 подгр.). Room 5" -> ("1 подгр.", "Room 5")
    "Room 5"             -> ("", "Room 5")
    """
    parts = text.split(FIELD_SEPARATOR)
    if len(parts) == 2:
        return parts[0].strip("()"), parts[1]
    return "", parts[0]


# ---------------------------------------------------------------------------
# Block parsing
# ---------------------------------------------------------------------------


def parse_event(block: RawBlock) -> Event:
    """
    Parse one raw block into an Event.

    Raises TypeNotFoundError, DateParseError or MissingFieldError.
    """
    data = block.data
    if block.initial_date is None:
        raise MissingFieldError("reference date", data)
    reference_date = block.initial_date

    event_type, type_start, type_end = find_event_type(data)

    # Text before the type without the trailing ". "
    title, teacher = split_title_teacher(data[: max(type_start - 2, 0)])

    try:
        dates, offset = parse_dates(data[type_end:], reference_date, DATE_SKIP[event_type])
    except DateSyntaxError as exc:
        raise DateParseError(f"parse dates: {exc}") from exc
    dates_start = type_end + offset

    # Text between "<type>. " and ". [" of the date list
    subgroup, location = split_subgroup_location(data[type_end + 1 : dates_start - 2])

    if not title:
        raise MissingFieldError("title", data)
    if not location:
        raise MissingFieldError("location", data)

    return Event(
        title=title,
        teacher=teacher,
        type=event_type,
        subgroup=subgroup,
        location=location,
        dates=dates,
    )


def log_observer(block: RawBlock, event: Event) -> None:
    """
    Observer for parse_events that writes every parsed block to the debug log.
    """
    logger.debug("<--- %s --->", block)
    logger.debug("<--- %s --->", event)


def parse_events(blocks: Iterable[RawBlock], observer: Optional[Observer] = None) -> List[Event]:
    """
    Parse all blocks in order.

    The first failing block aborts the run with IndexedParseError
    (zero-based index of the block, original error as __cause__).
    """
    events: List[Event] = []
    for i, block in enumerate(blocks):
        try:
            event = parse_event(block)
        except ParseError as exc:
            raise IndexedParseError(i, exc) from exc
        if observer is not None:
            observer(block, event)
        events.append(event)
    return events
