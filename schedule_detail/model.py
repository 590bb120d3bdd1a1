"""
Central data model definitions.

This module defines the structure of a parsed schedule detail page so that:
- the parser, the client, storage and the CLI share the same field names
- a parsed entry is a plain immutable value that can be passed around freely
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from schedule_detail.errors import ResultMismatch
from schedule_detail.predefined import ScheduleType, Subject, Term


@dataclass(frozen=True)
class SeatCount:
    """
    One capacity / taken / remaining triplet. Stored exactly as printed,
    the numbers do not always add up on crosslisted sections.
    """

    capacity: int
    taken: int
    remaining: int

    def __str__(self) -> str:
        return f"{self.capacity} / {self.taken} / {self.remaining}"


class RequirementCategory(Enum):
    PREREQUISITES = "prerequisites"
    RESTRICTIONS = "restrictions"
    GENERAL_REQUIREMENTS = "general_requirements"
    COREQUISITES = "corequisites"

    @property
    def field_name(self) -> str:
        return self.value


@dataclass(frozen=True)
class ScheduleDetailEntry:
    """
    Everything the schedule detail page tells about one course section.

    search_term / search_crn echo the query that produced the entry; the
    parsed crn must match search_crn.
    """

    search_term: Term
    search_crn: int

    name: Optional[str] = None
    crn: Optional[int] = None
    subject: Optional[Subject] = None
    catalog_number: Optional[str] = None
    section: Optional[str] = None
    term: Optional[Term] = None

    levels: Tuple[str, ...] = ()
    campus: Optional[str] = None
    schedule_type: Optional[ScheduleType] = None
    credits: Decimal = field(default_factory=lambda: Decimal(0))

    seats: Optional[SeatCount] = None
    waitlist_seats: Optional[SeatCount] = None
    crosslist_seats: Optional[SeatCount] = None

    prerequisites: Optional[str] = None
    restrictions: Optional[str] = None
    general_requirements: Optional[str] = None
    corequisites: Optional[str] = None

    def __post_init__(self) -> None:
        if self.crn is not None and self.crn != self.search_crn:
            raise ResultMismatch(
                f"Result CRN {self.crn} does not match searched CRN {self.search_crn}.",
                term=self.search_term,
                crn=self.search_crn,
            )

    # -----------------------------------------------------------------------
    # Serialization
    # -----------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        """
        JSON-ready dictionary. Enums are stored by name, credits as string.
        """

        def _seats(s: Optional[SeatCount]) -> Optional[Dict[str, int]]:
            if s is None:
                return None
            return {"capacity": s.capacity, "taken": s.taken, "remaining": s.remaining}

        def _name(e: Optional[Enum]) -> Optional[str]:
            return e.name if e is not None else None

        return {
            "search_term": self.search_term.name,
            "search_crn": self.search_crn,
            "name": self.name,
            "crn": self.crn,
            "subject": _name(self.subject),
            "catalog_number": self.catalog_number,
            "section": self.section,
            "term": _name(self.term),
            "levels": list(self.levels),
            "campus": self.campus,
            "schedule_type": _name(self.schedule_type),
            "credits": str(self.credits),
            "seats": _seats(self.seats),
            "waitlist_seats": _seats(self.waitlist_seats),
            "crosslist_seats": _seats(self.crosslist_seats),
            "prerequisites": self.prerequisites,
            "restrictions": self.restrictions,
            "general_requirements": self.general_requirements,
            "corequisites": self.corequisites,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ScheduleDetailEntry":
        def _seats(d: Any) -> Optional[SeatCount]:
            if not isinstance(d, dict):
                return None
            return SeatCount(int(d["capacity"]), int(d["taken"]), int(d["remaining"]))

        subject = data.get("subject")
        term = data.get("term")
        schedule_type = data.get("schedule_type")

        return cls(
            search_term=Term[data["search_term"]],
            search_crn=int(data["search_crn"]),
            name=data.get("name"),
            crn=data.get("crn"),
            subject=Subject[subject] if subject else None,
            catalog_number=data.get("catalog_number"),
            section=data.get("section"),
            term=Term[term] if term else None,
            levels=tuple(data.get("levels") or ()),
            campus=data.get("campus"),
            schedule_type=ScheduleType[schedule_type] if schedule_type else None,
            credits=Decimal(str(data.get("credits", "0"))),
            seats=_seats(data.get("seats")),
            waitlist_seats=_seats(data.get("waitlist_seats")),
            crosslist_seats=_seats(data.get("crosslist_seats")),
            prerequisites=data.get("prerequisites"),
            restrictions=data.get("restrictions"),
            general_requirements=data.get("general_requirements"),
            corequisites=data.get("corequisites"),
        )

    def __str__(self) -> str:
        levels = ", ".join(self.levels)
        rows = [
            ("Course Name", self.name),
            ("CRN", self.crn),
            ("Subject", self.subject.code if self.subject else None),
            ("CNBR", self.catalog_number),
            ("Section", self.section),
            ("Term", self.term.display_name if self.term else None),
            ("Levels", levels),
            ("Campus", self.campus),
            ("Type", self.schedule_type.display_name if self.schedule_type else None),
            ("Credits", self.credits),
            ("Seats", self.seats),
            ("Waitlist Seats", self.waitlist_seats),
            ("Crosslist Seats", self.crosslist_seats),
            ("Restrictions", self.restrictions),
            ("Prerequisites", self.prerequisites),
            ("General Requirements", self.general_requirements),
            ("Corequisites", self.corequisites),
        ]
        return "\n".join(f"{label}: {value}" for label, value in rows)
