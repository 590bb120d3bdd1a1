"""
Fetching schedule detail pages.

ScheduleDetailClient posts (term, crn) to the registration system, optionally
caches the raw HTML and hands the page to the parser.

One client handles one request at a time: starting a second request while
the first is still running raises RequestInProgress right away instead of
queueing it.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from pathlib import Path
from typing import Callable, Optional

import requests

from schedule_detail.errors import RequestInProgress, TransportFailure
from schedule_detail.model import ScheduleDetailEntry
from schedule_detail.parse import parse_schedule_detail_html
from schedule_detail.predefined import Term

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Paths & URLs
# ---------------------------------------------------------------------------

PACKAGE_DIR = Path(__file__).resolve().parent
RAW_DIR = PACKAGE_DIR / "data" / "raw"

SCHEDULE_DETAIL_URL = "https://selfservice.mypurdue.purdue.edu/prod/bzwsrch.p_schedule_detail"
DEFAULT_TIMEOUT = 30.0


def raw_html_path(raw_dir: Path, term: Term, crn: int) -> Path:
    return raw_dir / f"{term.name}_{crn}.html"


class ScheduleDetailClient:
    """
    Client for the "schedule detail" lookup.

        with ScheduleDetailClient() as client:
            entry = client.get_result(12345, Term.FALL2012)

    get_result_async runs the same lookup on a background worker and returns
    a concurrent.futures.Future.
    """

    def __init__(
        self,
        url: str = SCHEDULE_DETAIL_URL,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
        raw_dir: Optional[Path] = None,
    ) -> None:
        self.url = url
        self.timeout = timeout
        self.raw_dir = Path(raw_dir) if raw_dir is not None else None
        self._session = session if session is not None else requests.Session()
        self._in_flight = threading.Lock()
        self._executor: Optional[ThreadPoolExecutor] = None

    # -----------------------------------------------------------------------
    # Request guard
    # -----------------------------------------------------------------------

    def _begin(self, term: Term, crn: int) -> None:
        if not self._in_flight.acquire(blocking=False):
            raise RequestInProgress("Previous request has not finished yet.", term=term, crn=crn)

    def _end(self) -> None:
        self._in_flight.release()

    def is_request_finished(self) -> bool:
        return not self._in_flight.locked()

    # -----------------------------------------------------------------------
    # Transport
    # -----------------------------------------------------------------------

    def fetch_html(self, term: Term, crn: int) -> bytes:
        """
        POST the lookup form and return the raw page bytes.
        """
        data = {"term": term.link_name, "crn": str(crn)}
        logger.debug("POST %s %s", self.url, data)
        try:
            resp = self._session.post(self.url, data=data, timeout=self.timeout)
            resp.raise_for_status()
        except requests.RequestException as e:
            raise TransportFailure(f"Request failed: {e}", term=term, crn=crn) from e

        if self.raw_dir is not None:
            self.raw_dir.mkdir(parents=True, exist_ok=True)
            out_file = raw_html_path(self.raw_dir, term, crn)
            out_file.write_bytes(resp.content)
            logger.debug("Cached %s", out_file)

        return resp.content

    def _lookup(self, term: Term, crn: int) -> ScheduleDetailEntry:
        html = self.fetch_html(term, crn)
        return parse_schedule_detail_html(html, term, crn)

    # -----------------------------------------------------------------------
    # Public API
    # -----------------------------------------------------------------------

    def get_result(self, crn: int, term: Optional[Term] = None) -> ScheduleDetailEntry:
        """
        Fetch and parse one course section. term defaults to Term.CURRENT.
        """
        term = term if term is not None else Term.CURRENT
        self._begin(term, crn)
        try:
            return self._lookup(term, crn)
        finally:
            self._end()

    def get_result_async(
        self,
        crn: int,
        term: Optional[Term] = None,
        callback: Optional[Callable[["Future[ScheduleDetailEntry]"], None]] = None,
    ) -> "Future[ScheduleDetailEntry]":
        """
        Start a lookup in the background. The guard is taken here, on the
        caller's thread, so a busy client fails immediately.
        """
        term = term if term is not None else Term.CURRENT
        self._begin(term, crn)
        try:
            if self._executor is None:
                self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="schedule-detail")
            future = self._executor.submit(self._run_guarded, term, crn)
        except BaseException:
            self._end()
            raise

        # a future cancelled before it started never reaches _run_guarded
        future.add_done_callback(lambda f: self._end() if f.cancelled() else None)
        if callback is not None:
            future.add_done_callback(callback)
        return future

    def _run_guarded(self, term: Term, crn: int) -> ScheduleDetailEntry:
        # the guard is released before the future completes, so waiters and
        # callbacks may start the next request right away
        try:
            return self._lookup(term, crn)
        finally:
            self._end()

    def close(self) -> None:
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None
        self._session.close()

    def __enter__(self) -> "ScheduleDetailClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
