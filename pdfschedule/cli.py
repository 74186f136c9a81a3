"""
CLI (Command Line Interface).

Converts a timetable PDF into structured events:

    pdfschedule timetable.pdf --date 2024-09-02
    pdfschedule timetable.pdf --date 2024-09-02 --out events.json --ics events.ics
    pdfschedule timetable.pdf --pages 1,2 --strict -v

Steps: read tokens from the PDF -> assemble raw blocks -> parse events
-> write JSON (and optionally .ics) -> print a short summary table.
"""

from __future__ import annotations

import argparse
import logging
from datetime import date
from pathlib import Path
from typing import List

from rich.console import Console
from rich.table import Table
from rich import box

from pdfschedule.assemble import assemble_blocks
from pdfschedule.errors import ScheduleError
from pdfschedule.export import export_events_to_ics, export_events_to_json
from pdfschedule.model import Event
from pdfschedule.parse import log_observer, parse_events
from pdfschedule.pdf import extract_tokens

logger = logging.getLogger(__name__)

console = Console()


def _iso_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid date {value!r}, expected YYYY-MM-DD")


def _page_list(value: str) -> List[int]:
    try:
        pages = [int(x) for x in value.split(",") if x.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid page list {value!r}, expected e.g. 1,2")
    if not pages or any(p < 1 for p in pages):
        raise argparse.ArgumentTypeError(f"invalid page list {value!r}, pages start at 1")
    return pages


def _print_summary(events: List[Event]) -> None:
    """
    Print parsed events as a table (first/last date and number of dates).
    """
    table = Table(title=f"{len(events)} events", box=box.SIMPLE)
    table.add_column("Title")
    table.add_column("Teacher")
    table.add_column("Type")
    table.add_column("Subgroup")
    table.add_column("Location")
    table.add_column("Dates")

    for ev in events:
        first, last = ev.dates[0], ev.dates[-1]
        span = first.isoformat() if first == last else f"{first.isoformat()} .. {last.isoformat()}"
        table.add_row(ev.title, ev.teacher, ev.type.value, ev.subgroup, ev.location, f"{span} ({len(ev.dates)})")

    console.print(table)


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argparse CLI parser.
    """
    p = argparse.ArgumentParser(prog="pdfschedule", description="Convert a timetable PDF into JSON events")
    p.add_argument("pdf", type=Path, help="Timetable PDF")
    p.add_argument(
        "--date",
        "-d",
        type=_iso_date,
        default=None,
        help="Reference date for DD.MM dates, YYYY-MM-DD (default: today)",
    )
    p.add_argument("--out", "-o", type=Path, default=Path("events.json"), help="Output JSON file")
    p.add_argument("--ics", type=Path, default=None, help="Also export an .ics calendar file")
    p.add_argument("--pages", type=_page_list, default=None, help="Pages to read, e.g. 1,2 (default: all)")
    p.add_argument("--strict", action="store_true", help="Fail on text after the last date list")
    p.add_argument("--quiet", "-q", action="store_true", help="Do not print the summary table")
    p.add_argument("--verbose", "-v", action="store_true", help="Log every parsed block")
    return p


def run(args: argparse.Namespace) -> int:
    reference_date = args.date or date.today()

    try:
        tokens = extract_tokens(args.pdf, pages=args.pages)
    except (FileNotFoundError, ScheduleError) as exc:
        logger.error("%s", exc)
        return 1

    try:
        blocks = assemble_blocks(tokens, reference_date, strict=args.strict)
        logger.info("%d tokens -> %d blocks", len(tokens), len(blocks))
        events = parse_events(blocks, observer=log_observer)
    except ScheduleError as exc:
        logger.error("%s", exc)
        return 1

    n = export_events_to_json(events, args.out)
    logger.info("Exported %d events to: %s", n, args.out)

    if args.ics is not None:
        n_ics = export_events_to_ics(events, args.ics)
        logger.info("Exported %d calendar entries to: %s", n_ics, args.ics)

    if not args.quiet:
        _print_summary(events)

    return 0


def main(argv: list[str] | None = None) -> None:
    """
    CLI entry point. Parses args, configures logging, runs the conversion
    and exits via SystemExit with a return code.
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    raise SystemExit(run(args))
