"""
Date list parsing.

Every timetable cell ends with its dates in square brackets, e.g.

    [12.03]
    [12.03, 26.03, 09.04]
    [05.02-28.05 к.н.]
    [1 12.02-21.05 ч.н.]        (lab: leading bench label)

Supported items (comma-separated):
- DD.MM               one date
- DD.MM-DD.MM         every week from start to end (inclusive)
- DD.MM-DD.MM к.н.    every week ("каждую неделю")
- DD.MM-DD.MM ч.н.    every other week ("через неделю")

There is no year in the PDF: dates are resolved against the reference
date and roll over into the next year when they would lie before it.
"""

from __future__ import annotations

import re
from datetime import date, timedelta
from typing import List, Optional, Set, Tuple

from pdfschedule.errors import DateSyntaxError

# Last bracketed group in the text
DATE_LIST_REGEX = re.compile(r"\[([^\[\]]*)\][^\[\]]*$")

ITEM_REGEX = re.compile(
    r"^(?P<d1>\d{1,2})\.(?P<m1>\d{1,2})"
    r"(?:\s*-\s*(?P<d2>\d{1,2})\.(?P<m2>\d{1,2})(?:\s+(?P<freq>к\.н\.|ч\.н\.))?)?$"
)

FREQUENCY_STEPS = {
    None: 7,
    "к.н.": 7,
    "ч.н.": 14,
}


def resolve_date(day: int, month: int, reference_date: date) -> date:
    """
    Return the first DD.MM that is not before reference_date.

    29.02 in a non-leap reference year is looked up in the next year.
    """
    error: Optional[ValueError] = None
    for year in (reference_date.year, reference_date.year + 1):
        try:
            resolved = date(year, month, day)
        except ValueError as exc:
            error = exc
            continue
        if resolved >= reference_date:
            return resolved

    raise DateSyntaxError(f"invalid date {day:02d}.{month:02d}: {error}") from error


def _expand_item(item: str, reference_date: date) -> List[date]:
    m = ITEM_REGEX.match(item)
    if not m:
        raise DateSyntaxError(f"unrecognised date item {item!r}")

    start = resolve_date(int(m.group("d1")), int(m.group("m1")), reference_date)
    if m.group("d2") is None:
        return [start]

    # The range end is resolved against its own start
    end = resolve_date(int(m.group("d2")), int(m.group("m2")), start)
    step = timedelta(days=FREQUENCY_STEPS[m.group("freq")])

    out: List[date] = []
    current = start
    while current <= end:
        out.append(current)
        current += step
    return out


def parse_dates(text: str, reference_date: date, skip: int = 0) -> Tuple[List[date], int]:
    """
    Parse the bracketed date list at the end of text.

    skip is the number of leading words inside the brackets that are
    not dates (laboratory sessions carry one).

    Returns the sorted, de-duplicated dates and the offset of '[' in text.
    Raises DateSyntaxError if there is no valid date list.
    """
    m = DATE_LIST_REGEX.search(text)
    if not m:
        raise DateSyntaxError(f"no date list found in {text!r}")

    body = m.group(1).strip()
    if skip:
        words = body.split(None, skip)
        if len(words) <= skip:
            raise DateSyntaxError(f"no dates after {skip} leading word(s) in [{body}]")
        body = words[skip]

    items = [x.strip() for x in body.split(",") if x.strip()]
    if not items:
        raise DateSyntaxError("empty date list")

    dates: Set[date] = set()
    for item in items:
        dates.update(_expand_item(item, reference_date))

    return sorted(dates), m.start()
