"""
Error kinds raised while fetching and parsing a schedule detail page.

Every error can carry the (term, crn) query it belongs to, so a caller that
fires many lookups can tell which one failed:

    ScheduleDetailError
    ├── TransportFailure      network / HTTP problem
    ├── MalformedPage         page does not have the expected shape
    │   └── UnknownEnumValue  term / subject / schedule type not recognized
    ├── CourseNotFound        page says there is no such course
    ├── ResultMismatch        page describes a different CRN than requested
    └── RequestInProgress     client is still busy with a previous request
"""

from __future__ import annotations

from typing import Any, Optional


class ScheduleDetailError(Exception):
    """
    Base class for all schedule detail errors.
    """

    def __init__(self, message: str = "", term: Any = None, crn: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.term = term
        self.crn = crn

    def with_query(self, term: Any, crn: Optional[int]) -> "ScheduleDetailError":
        """
        Attach the original query unless it is already set. Returns self.
        """
        if self.term is None:
            self.term = term
        if self.crn is None:
            self.crn = crn
        return self

    def __str__(self) -> str:
        if self.term is None and self.crn is None:
            return self.message
        term_name = getattr(self.term, "name", self.term)
        return f"{self.message} (term={term_name}, crn={self.crn})"


class TransportFailure(ScheduleDetailError):
    pass


class MalformedPage(ScheduleDetailError):
    pass


class UnknownEnumValue(MalformedPage):
    """
    Raised when a string from the page has no matching enum member.
    """

    def __init__(self, enum_name: str, value: str) -> None:
        super().__init__(f"Unknown {enum_name} value: {value!r}")
        self.enum_name = enum_name
        self.value = value


class CourseNotFound(ScheduleDetailError):
    pass


class ResultMismatch(ScheduleDetailError):
    pass


class RequestInProgress(ScheduleDetailError):
    pass
