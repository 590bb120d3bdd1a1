"""
Parsing (schedule detail HTML -> ScheduleDetailEntry).

Page layout (only the parts we read):

    <table summary="This table is used to present the detailed class information.">
      <th class="ddlabel">Intro to CS - 12345 - CS 18000 - 001</th>
      <td class="dddefault">
        <span>Associated Term: </span>Fall 2012<br/>
        ...
        <table summary="This layout table is used to present the seating numbers.">
          <tr> header </tr> <tr> Seats </tr> <tr> Waitlist Seats </tr> [<tr> Cross List Seats </tr>]
        </table>
        <span>Restrictions:</span><br/> ...
      </td>
    </table>

Important rules:
- any shape violation aborts the parse, no partial entry is returned
- the parsed CRN must equal the searched CRN
- with several detail tables the last one wins for every field it sets
"""

from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List

from bs4 import BeautifulSoup, Tag

from schedule_detail.errors import CourseNotFound, MalformedPage, ResultMismatch, ScheduleDetailError
from schedule_detail.model import ScheduleDetailEntry, SeatCount
from schedule_detail.predefined import ScheduleType, Subject, Term
from schedule_detail.requirements import classify_lines
from schedule_detail.textutil import element_text, split_lines, unescape_trim

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Page markers
# ---------------------------------------------------------------------------

DETAIL_TABLE_SUMMARY = "This table is used to present the detailed class information."
SEAT_TABLE_SUMMARY = "This layout table is used to present the seating numbers."
MESSAGE_TABLE_SUMMARY = "This layout table holds message information"
NOT_FOUND_TEXT = "No detailed class information found"

BASIC_INFO_CLASS = "ddlabel"
DETAIL_CLASS = "dddefault"

BASIC_INFO_DELIMITER = " - "
LABEL_CLOSE = "</span>"

Fields = Dict[str, Any]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _to_int(text: str, what: str) -> int:
    try:
        return int(text)
    except ValueError:
        raise MalformedPage(f"{what} is not an integer: {text!r}.") from None


def _after_label(line: str, label: str) -> str:
    """
    Value of "<span>Label: </span>value". Falls back to the text after the
    label itself when the label is not wrapped in a span.
    """
    idx = line.find(LABEL_CLOSE)
    if idx >= 0:
        return line[idx + len(LABEL_CLOSE):]
    return line[line.index(label) + len(label):]


# ---------------------------------------------------------------------------
# Basic info: "<name> - <crn> - <SUBJECT CNBR> - <section>"
# ---------------------------------------------------------------------------


def parse_basic_info(basic_info: str, search_crn: int, fields: Fields) -> None:
    """
    Set name, crn, subject, catalog_number and section.

    The CRN is checked against the searched one before anything else is set.
    """
    parts = basic_info.split(BASIC_INFO_DELIMITER)
    if len(parts) < 4:
        raise MalformedPage(f"Basic info cannot be split to equal or more than 4. We have {len(parts)}.")

    crn = _to_int(parts[-3].strip(), "CRN")
    if crn != search_crn:
        raise ResultMismatch(f"Result CRN {crn} does not match searched CRN {search_crn}.")
    fields["crn"] = crn

    fields["section"] = unescape_trim(parts[-1])

    subject_cnbr = parts[-2].split(" ")
    if len(subject_cnbr) != 2:
        raise MalformedPage(f"Subject and CNBR cannot be split to 2. We have {len(subject_cnbr)}.")
    fields["subject"] = Subject.from_code(subject_cnbr[0])
    fields["catalog_number"] = subject_cnbr[1]

    fields["name"] = unescape_trim(BASIC_INFO_DELIMITER.join(parts[:-3]))


# ---------------------------------------------------------------------------
# Seat rows
# ---------------------------------------------------------------------------


def _parse_seat_line(text: str, expected_tokens: int, what: str) -> SeatCount:
    tokens = text.split(" ")
    if len(tokens) != expected_tokens:
        raise MalformedPage(f"{what} info cannot be split to {expected_tokens}. We have {len(tokens)}.")
    capacity, taken, remaining = (_to_int(t, what) for t in tokens[-3:])
    return SeatCount(capacity=capacity, taken=taken, remaining=remaining)


def parse_seats(text: str) -> SeatCount:
    """
    "Seats 30 28 2" -> SeatCount(30, 28, 2)
    """
    return _parse_seat_line(text, 4, "Seats")


def parse_waitlist_seats(text: str) -> SeatCount:
    """
    "Waitlist Seats 10 0 10" -> SeatCount(10, 0, 10)
    """
    return _parse_seat_line(text, 5, "Waitlist seats")


def parse_crosslist_seats(text: str) -> SeatCount:
    """
    "Cross List Seats 60 55 5" -> SeatCount(60, 55, 5)
    """
    return _parse_seat_line(text, 6, "Crosslist seats")


def _parse_seat_table(detail_el: Tag, fields: Fields) -> Tag:
    seat_tables = detail_el.find_all(attrs={"summary": SEAT_TABLE_SUMMARY})
    if len(seat_tables) != 1:
        raise MalformedPage(f"Seat detail elements size not 1. We have {len(seat_tables)}.")
    seat_table = seat_tables[0]

    # html.parser does not synthesize <tbody>, so fall back to the table
    body = seat_table.find("tbody") or seat_table
    rows = body.find_all("tr", recursive=False)
    if len(rows) not in (3, 4):
        raise MalformedPage(f"Seat detail entry elements size not 3 or 4. We have {len(rows)}.")

    fields["seats"] = parse_seats(element_text(rows[1]))
    fields["waitlist_seats"] = parse_waitlist_seats(element_text(rows[2]))
    if len(rows) == 4:
        fields["crosslist_seats"] = parse_crosslist_seats(element_text(rows[3]))

    return seat_table


# ---------------------------------------------------------------------------
# Labeled single-value fields (term, levels, campus, type, credits)
# ---------------------------------------------------------------------------


def parse_credits(line: str) -> Decimal:
    """
    "3.000 Credits" -> 3.000, "1.000 TO 4.000 Credits" -> 4.000,
    "3.000 OR 4.000 Credits" -> 4.000 (only the second bound is kept)
    """
    end = line.index("Credits")
    if "TO" in line:
        value = line[line.index("TO") + 2:end]
    elif "OR" in line:
        value = line[line.index("OR") + 2:end]
    else:
        value = line[:end]
    value = value.strip()
    if not value:
        return Decimal(0)
    try:
        return Decimal(value)
    except InvalidOperation:
        raise MalformedPage(f"Credits is not a number: {value!r}.") from None


def parse_labeled_field(line: str, fields: Fields) -> bool:
    """
    Try the single-value labels in priority order. Returns True when the
    line held one of them.
    """
    if "Associated Term: " in line:
        fields["term"] = Term.from_display(_after_label(line, "Associated Term: "))
    elif "Levels: " in line:
        levels = _after_label(line, "Levels: ")
        fields["levels"] = tuple(level.strip() for level in levels.split(", "))
    elif "Campus" in line:
        fields["campus"] = unescape_trim(line[: line.index("Campus")])
    elif "Schedule Type" in line:
        fields["schedule_type"] = ScheduleType.from_display(line[: line.index("Schedule Type")].strip())
    elif "Credits" in line:
        fields["credits"] = parse_credits(line)
    else:
        return False
    return True


def parse_remaining_info(remaining_html: str, fields: Fields) -> None:
    """
    Labeled fields and requirement texts from the detail cell markup
    (seat table already removed).
    """
    lines = split_lines(remaining_html)
    requirements = classify_lines(lines, labeled_field=lambda line: parse_labeled_field(line, fields))
    for category, text in requirements.items():
        fields[category.field_name] = text


# ---------------------------------------------------------------------------
# Document
# ---------------------------------------------------------------------------


def _raise_not_found_or_malformed(document: BeautifulSoup) -> None:
    messages = document.find_all(attrs={"summary": MESSAGE_TABLE_SUMMARY})
    text = " ".join(element_text(m) for m in messages)
    if messages and NOT_FOUND_TEXT in text:
        raise CourseNotFound(text)
    raise MalformedPage(
        "Course table not found, but page does not contain message stating no course found."
    )


def _parse_detail_table(table: Tag, search_crn: int, fields: Fields) -> None:
    basic_info_el = table.find(class_=BASIC_INFO_CLASS)
    if basic_info_el is None:
        raise MalformedPage("Basic info element empty.")
    parse_basic_info(element_text(basic_info_el), search_crn, fields)

    detail_el = table.find(class_=DETAIL_CLASS)
    if detail_el is None:
        raise MalformedPage("Detailed info element empty.")

    seat_table = _parse_seat_table(detail_el, fields)
    seat_table.decompose()

    parse_remaining_info(detail_el.decode_contents(), fields)


def extract(document: BeautifulSoup, search_term: Term, search_crn: int) -> ScheduleDetailEntry:
    """
    Turn a parsed schedule detail page into a ScheduleDetailEntry.

    Raises CourseNotFound, MalformedPage or ResultMismatch, each annotated
    with the searched term and CRN.
    """
    try:
        tables: List[Tag] = document.find_all(attrs={"summary": DETAIL_TABLE_SUMMARY})
        logger.debug("Found %d detail table(s) for CRN %s", len(tables), search_crn)
        if not tables:
            _raise_not_found_or_malformed(document)
        if len(tables) > 1:
            logger.warning(
                "CRN %s: %d detail tables, fields of the last one win", search_crn, len(tables)
            )

        fields: Fields = {}
        for table in tables:
            _parse_detail_table(table, search_crn, fields)

        return ScheduleDetailEntry(search_term=search_term, search_crn=search_crn, **fields)
    except ScheduleDetailError as e:
        e.with_query(search_term, search_crn)
        raise


def parse_schedule_detail_html(html: str | bytes, search_term: Term, search_crn: int) -> ScheduleDetailEntry:
    """
    Parse raw page markup (str, or bytes with the encoding left to bs4).
    """
    soup = BeautifulSoup(html, "html.parser")
    return extract(soup, search_term, search_crn)
