"""
Schedule detail lookup: fetch a course section by term + CRN and parse the
registration system's detail page into a ScheduleDetailEntry.
"""

from schedule_detail.errors import (
    CourseNotFound,
    MalformedPage,
    RequestInProgress,
    ResultMismatch,
    ScheduleDetailError,
    TransportFailure,
    UnknownEnumValue,
)
from schedule_detail.model import RequirementCategory, ScheduleDetailEntry, SeatCount
from schedule_detail.parse import extract, parse_schedule_detail_html
from schedule_detail.predefined import ScheduleType, Subject, Term
from schedule_detail.scrape import ScheduleDetailClient

__all__ = [
    "CourseNotFound",
    "MalformedPage",
    "RequestInProgress",
    "RequirementCategory",
    "ResultMismatch",
    "ScheduleDetailClient",
    "ScheduleDetailEntry",
    "ScheduleDetailError",
    "ScheduleType",
    "SeatCount",
    "Subject",
    "Term",
    "TransportFailure",
    "UnknownEnumValue",
    "extract",
    "parse_schedule_detail_html",
]
