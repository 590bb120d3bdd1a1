"""
Unit tests for the result entity.

Entity contract:
- crn must equal search_crn (ResultMismatch otherwise)
- entries are immutable
- to_dict / from_dict give a JSON-ready representation
"""

import dataclasses
import json
import unittest
from decimal import Decimal

from schedule_detail.errors import ResultMismatch
from schedule_detail.model import ScheduleDetailEntry, SeatCount
from schedule_detail.predefined import ScheduleType, Subject, Term


def _entry(**overrides) -> ScheduleDetailEntry:
    values = dict(
        search_term=Term.FALL2012,
        search_crn=12345,
        name="Intro to CS",
        crn=12345,
        subject=Subject.CS,
        catalog_number="18000",
        section="001",
        term=Term.FALL2012,
        levels=("Undergraduate",),
        campus="West Lafayette",
        schedule_type=ScheduleType.LECTURE,
        credits=Decimal("3.000"),
        seats=SeatCount(30, 28, 2),
        waitlist_seats=SeatCount(10, 0, 10),
        restrictions="Seniors only",
    )
    values.update(overrides)
    return ScheduleDetailEntry(**values)


class TestScheduleDetailEntry(unittest.TestCase):
    def test_mismatch_rejected(self) -> None:
        with self.assertRaises(ResultMismatch) as ctx:
            _entry(crn=54321)
        self.assertEqual(ctx.exception.crn, 12345)

    def test_defaults(self) -> None:
        entry = ScheduleDetailEntry(search_term=Term.FALL2012, search_crn=1)
        self.assertIsNone(entry.crn)
        self.assertEqual(entry.credits, Decimal(0))
        self.assertEqual(entry.levels, ())
        self.assertIsNone(entry.crosslist_seats)

    def test_immutable(self) -> None:
        entry = _entry()
        with self.assertRaises(dataclasses.FrozenInstanceError):
            entry.name = "Other"  # type: ignore[misc]

    def test_dict_is_json_ready(self) -> None:
        data = _entry().to_dict()
        text = json.dumps(data)
        self.assertIn('"subject": "CS"', text)
        self.assertEqual(data["credits"], "3.000")
        self.assertEqual(data["seats"], {"capacity": 30, "taken": 28, "remaining": 2})
        self.assertIsNone(data["crosslist_seats"])

    def test_from_dict_restores_entry(self) -> None:
        entry = _entry(crosslist_seats=SeatCount(60, 55, 5))
        self.assertEqual(ScheduleDetailEntry.from_dict(entry.to_dict()), entry)

    def test_str_lists_fields(self) -> None:
        text = str(_entry())
        self.assertIn("Course Name: Intro to CS", text)
        self.assertIn("Subject: CS", text)
        self.assertIn("Term: Fall 2012", text)
        self.assertIn("Seats: 30 / 28 / 2", text)
        self.assertIn("Corequisites: None", text)


if __name__ == "__main__":
    unittest.main()
