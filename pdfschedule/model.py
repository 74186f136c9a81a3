"""
Central data model definitions used across the project.

This module defines the canonical structure of tokens, raw blocks and events so that:
- all modules share the same field names
- the PDF reader, the assembler, the parser and the exporters agree on one shape
- the output records always carry the same keys
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class Token:
    """
    One positioned text fragment as read from the PDF.
    """

    text: str
    x: float
    y: float


@dataclass
class RawBlock:
    """
    Text of one timetable cell, glued together from tokens.

    The block ends with the closing bracket of its date list.
    initial_date is the reference date used to resolve 'DD.MM' dates.
    """

    data: str = ""
    position: Point = field(default_factory=lambda: Point(0.0, 0.0))
    initial_date: Optional[date] = None


class EventType(str, Enum):
    LECTURE = "lecture"
    SEMINAR = "seminar"
    LAB = "lab"


# Phrases as printed in the timetable -> event type
TYPE_PHRASES: Dict[str, EventType] = {
    "лекции": EventType.LECTURE,
    "семинар": EventType.SEMINAR,
    "лабораторные занятия": EventType.LAB,
}


@dataclass
class Event:
    """
    Represents one parsed timetable entry with all of its dates.
    """

    title: str
    teacher: str
    type: EventType
    subgroup: str
    location: str
    dates: List[date]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "teacher": self.teacher,
            "type": self.type.value,
            "subgroup": self.subgroup,
            "location": self.location,
            "dates": [d.isoformat() for d in self.dates],
        }
