"""
CLI (Command Line Interface).

    schedule-detail fetch <crn> [--term FALL2012]     look a section up online
    schedule-detail parse <page.html> --crn <crn>     parse a saved page
    schedule-detail show                              list stored entries

fetch / parse print the entry as text (or JSON with --json) and store it
with --save.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table

from schedule_detail.errors import CourseNotFound, ResultMismatch, ScheduleDetailError
from schedule_detail.model import ScheduleDetailEntry
from schedule_detail.parse import parse_schedule_detail_html
from schedule_detail.predefined import Term
from schedule_detail.scrape import DEFAULT_TIMEOUT, RAW_DIR, SCHEDULE_DETAIL_URL, ScheduleDetailClient
from schedule_detail.storage import load_entries, save_entries

EXIT_ERROR = 1
EXIT_NOT_FOUND = 3
EXIT_MISMATCH = 4


def _term_arg(text: str) -> Term:
    """
    Accept "FALL2012", "Fall 2012" or the term code "201310".
    """
    try:
        if text.strip().isdigit():
            return Term.from_link_name(text)
        return Term.from_display(text)
    except ScheduleDetailError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def _print_entry(entry: ScheduleDetailEntry, as_json: bool) -> None:
    if as_json:
        print(json.dumps(entry.to_dict(), indent=2, ensure_ascii=False))
    else:
        print(entry)


def _finish(entry: ScheduleDetailEntry, args: argparse.Namespace) -> int:
    _print_entry(entry, args.json)
    if args.save:
        n = save_entries([entry], args.entries)
        print(f"Saved (stored entries: {n})", file=sys.stderr)
    return 0


def _report_error(e: ScheduleDetailError) -> int:
    print(f"Error: {e}", file=sys.stderr)
    if isinstance(e, CourseNotFound):
        return EXIT_NOT_FOUND
    if isinstance(e, ResultMismatch):
        return EXIT_MISMATCH
    return EXIT_ERROR


def _cmd_fetch(args: argparse.Namespace) -> int:
    """
    Fetch one section from the registration system.
    """
    with ScheduleDetailClient(url=args.url, timeout=args.timeout, raw_dir=args.save_html) as client:
        try:
            entry = client.get_result(args.crn, args.term)
        except ScheduleDetailError as e:
            return _report_error(e)
    return _finish(entry, args)


def _cmd_parse(args: argparse.Namespace) -> int:
    """
    Parse a schedule detail page saved to disk.
    """
    path = Path(args.html)
    try:
        html = path.read_bytes()
    except OSError as e:
        print(f"Error: cannot read {path}: {e}", file=sys.stderr)
        return EXIT_ERROR

    term = args.term if args.term is not None else Term.CURRENT
    try:
        entry = parse_schedule_detail_html(html, term, args.crn)
    except ScheduleDetailError as e:
        return _report_error(e)
    return _finish(entry, args)


def _cmd_show(args: argparse.Namespace) -> int:
    """
    List stored entries as a table.
    """
    entries = load_entries(args.entries)
    if not entries:
        print("No stored entries.")
        return 0

    table = Table(title="Stored schedule details", box=box.SIMPLE)
    table.add_column("Term")
    table.add_column("CRN", justify="right")
    table.add_column("Course")
    table.add_column("Sec")
    table.add_column("Type")
    table.add_column("Credits", justify="right")
    table.add_column("Seats", justify="right")
    table.add_column("Name")

    for e in entries:
        course = f"{e.subject.code} {e.catalog_number}" if e.subject else (e.catalog_number or "")
        table.add_row(
            e.term.display_name if e.term else e.search_term.display_name,
            str(e.crn if e.crn is not None else e.search_crn),
            course,
            e.section or "",
            e.schedule_type.display_name if e.schedule_type else "",
            str(e.credits),
            f"{e.seats.remaining}/{e.seats.capacity}" if e.seats else "",
            e.name or "",
        )

    Console().print(table)
    return 0


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argparse CLI parser with sub-commands.
    """
    parser = argparse.ArgumentParser(prog="schedule-detail", description="Purdue schedule detail lookup")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--entries",
        type=Path,
        default=None,
        help="Stored entries file (default: package data/processed/schedule_details.json)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    def add_output_args(p: argparse.ArgumentParser) -> None:
        p.add_argument("--term", type=_term_arg, default=None, help="Term, e.g. FALL2012 (default: current)")
        p.add_argument("--json", action="store_true", help="Print JSON instead of text")
        p.add_argument("--save", action="store_true", help="Store the entry in the entries file")

    p_fetch = sub.add_parser("fetch", help="Fetch a section by CRN")
    p_fetch.add_argument("crn", type=int, help="Course reference number (e.g. 12345)")
    add_output_args(p_fetch)
    p_fetch.add_argument("--url", default=SCHEDULE_DETAIL_URL, help="Schedule detail endpoint")
    p_fetch.add_argument("--timeout", type=float, default=DEFAULT_TIMEOUT, help="Request timeout in seconds")
    p_fetch.add_argument(
        "--save-html",
        type=Path,
        nargs="?",
        const=RAW_DIR,
        default=None,
        metavar="DIR",
        help=f"Keep the fetched page as HTML (default dir: {RAW_DIR})",
    )

    p_parse = sub.add_parser("parse", help="Parse a saved schedule detail page")
    p_parse.add_argument("html", type=str, help="Path to the saved HTML page")
    p_parse.add_argument("--crn", type=int, required=True, help="CRN the page was requested for")
    add_output_args(p_parse)

    sub.add_parser("show", help="List stored entries")

    return parser


def main(argv: Optional[list[str]] = None) -> None:
    """
    CLI entry point. Parses args, dispatches to command handlers,
    and exits via SystemExit with a return code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.command == "fetch":
        raise SystemExit(_cmd_fetch(args))
    if args.command == "parse":
        raise SystemExit(_cmd_parse(args))
    if args.command == "show":
        raise SystemExit(_cmd_show(args))

    raise SystemExit(2)
