"""
Persistent storage for parsed schedule detail entries.

This module manages the file:

    data/processed/schedule_details.json

Entries are keyed by (term, crn); saving an entry for a key that is already
stored replaces the old one, so re-fetching a course keeps the file current.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable, List

from schedule_detail.errors import ScheduleDetailError
from schedule_detail.model import ScheduleDetailEntry

logger = logging.getLogger(__name__)


def _default_entries_path() -> Path:
    """
    Return the default path of schedule_details.json inside the package.

    Using a function instead of a constant makes testing easier,
    because tests can override the path.
    """
    base_dir = Path(__file__).resolve().parent
    return base_dir / "data" / "processed" / "schedule_details.json"


def load_entries(path: str | Path | None = None) -> List[ScheduleDetailEntry]:
    """
    Load stored entries.

    Returns an empty list if the file does not exist or is invalid.
    Single records that cannot be read back are skipped.
    """
    entries_path = Path(path) if path is not None else _default_entries_path()

    if not entries_path.exists():
        return []

    try:
        data = json.loads(entries_path.read_text(encoding="utf-8"))
        records = data.get("entries", [])
    except (OSError, json.JSONDecodeError, UnicodeDecodeError, AttributeError):
        logger.warning("Ignoring unreadable entries file %s", entries_path)
        return []
    if not isinstance(records, list):
        return []

    out: List[ScheduleDetailEntry] = []
    for record in records:
        try:
            out.append(ScheduleDetailEntry.from_dict(record))
        except (AttributeError, KeyError, TypeError, ValueError, ArithmeticError, ScheduleDetailError) as e:
            logger.warning("Skipping stored entry %r: %s", record, e)
    return out


def save_entries(entries: Iterable[ScheduleDetailEntry], path: str | Path | None = None) -> int:
    """
    Merge entries into the stored file and return the number of stored entries.

    Creates parent directories if needed.
    """
    entries_path = Path(path) if path is not None else _default_entries_path()
    entries_path.parent.mkdir(parents=True, exist_ok=True)

    by_key = {(e.search_term.name, e.search_crn): e for e in load_entries(entries_path)}
    for e in entries:
        by_key[(e.search_term.name, e.search_crn)] = e

    payload = {"entries": [by_key[k].to_dict() for k in sorted(by_key)]}
    entries_path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
    return len(by_key)
