"""
Writing parsed events to disk.

- JSON: one object per event, dates as an array of ISO strings
- iCalendar (.ics): one all-day VEVENT per event date, importable into
  Google Calendar, Outlook or Apple Calendar
"""

from __future__ import annotations

import json
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any, Dict, Iterable, List

from pdfschedule.model import Event


def events_to_records(events: Iterable[Event]) -> List[Dict[str, Any]]:
    return [ev.to_dict() for ev in events]


def export_events_to_json(events: Iterable[Event], out_path: str | Path) -> int:
    """
    Write events as a JSON array. Returns number of exported events.
    """
    out = Path(out_path)
    out.parent.mkdir(parents=True, exist_ok=True)

    records = events_to_records(events)
    out.write_text(json.dumps(records, ensure_ascii=False, indent=2), encoding="utf-8")
    return len(records)


def _ics_escape(text: str) -> str:
    """
    Escape text for ICS fields (very small subset, sufficient for our use).
    """
    return (
        text.replace("\\", "\\\\").replace("\r\n", "\\n").replace("\n", "\\n").replace(";", "\\;").replace(",", "\\,")
    )


def _description(ev: Event) -> str:
    parts: List[str] = []
    if ev.teacher:
        parts.append(f"Teacher: {ev.teacher}")
    if ev.subgroup:
        parts.append(f"Subgroup: {ev.subgroup}")
    return "\n".join(parts)


def export_events_to_ics(events: Iterable[Event], out_path: str | Path) -> int:
    """
    Export events to an .ics file. Returns number of VEVENTs written.
    """
    out = Path(out_path)
    out.parent.mkdir(parents=True, exist_ok=True)

    lines: List[str] = []
    lines.append("BEGIN:VCALENDAR")
    lines.append("VERSION:2.0")
    lines.append("PRODID:-//pdfschedule//EN")
    lines.append("CALSCALE:GREGORIAN")

    dtstamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
    count = 0
    for i, ev in enumerate(events):
        summary = f"{ev.title} ({ev.type.value})"
        description = _description(ev)

        for d in ev.dates:
            uid = f"{i}-{d.strftime('%Y%m%d')}-{ev.type.value}@pdfschedule"

            lines.append("BEGIN:VEVENT")
            lines.append(f"UID:{_ics_escape(uid)}")
            lines.append(f"DTSTAMP:{dtstamp}")
            lines.append(f"DTSTART;VALUE=DATE:{d.strftime('%Y%m%d')}")
            lines.append(f"DTEND;VALUE=DATE:{(d + timedelta(days=1)).strftime('%Y%m%d')}")
            lines.append(f"SUMMARY:{_ics_escape(summary)}")
            if ev.location:
                lines.append(f"LOCATION:{_ics_escape(ev.location)}")
            if description:
                lines.append(f"DESCRIPTION:{_ics_escape(description)}")
            lines.append("END:VEVENT")
            count += 1

    lines.append("END:VCALENDAR")

    # ICS standard uses CRLF
    out.write_text("\r\n".join(lines) + "\r\n", encoding="utf-8")
    return count
