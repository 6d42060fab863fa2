"""RateMyProfessors GraphQL client: school search and professor pagination."""

import asyncio
import sys

import requests

from rmp_lite.config import ClientConfig
from rmp_lite.exceptions import MissingFieldError, ResponseShapeError, RMPError
from rmp_lite.queries import school_search_payload, teacher_search_payload
from rmp_lite.result import Failure, FailureReason, Result
from rmp_lite.schema import SchoolEdge, TeacherEdge, TeacherPage
from rmp_lite.utils import dig, post_graphql


def _log_failure(context: str, failure: Failure) -> None:
    where = f" (page {failure.page})" if failure.page is not None else ""
    print(f"ERROR: {context}{where}: {failure.message}", file=sys.stderr)


class RMPClient:
    """Talks to one GraphQL endpoint with a fixed header set.

    Blocking requests run in a worker thread so the pagination loop is an
    ordinary asyncio task: it can be cancelled between pages and bounded by
    ``config.fetch_timeout`` while each request is bounded by
    ``config.request_timeout``. A request abandoned by a timeout keeps
    running in its thread; :meth:`aclose` waits for it before closing the
    session.
    """

    def __init__(self, config: ClientConfig | None = None, session: requests.Session | None = None):
        self.config = config or ClientConfig()
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()
        self._in_flight: asyncio.Future | None = None

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    async def aclose(self) -> None:
        """Wait for a request still running in a worker thread, then close."""
        if self._in_flight is not None and not self._in_flight.done():
            await asyncio.wait({self._in_flight})
        self.close()

    async def _in_thread(self, func, *args):
        self._in_flight = asyncio.ensure_future(asyncio.to_thread(func, *args))
        # Cancelling the caller must not cancel the tracked worker future.
        return await asyncio.shield(self._in_flight)

    def _post(self, payload: dict) -> dict:
        return post_graphql(
            self.session,
            self.config.endpoint,
            payload,
            headers=self.config.headers,
            timeout=self.config.request_timeout,
        )

    # --- School search ---

    def _search_schools(self, school_name: str) -> list[SchoolEdge]:
        body = self._post(school_search_payload(school_name))
        edges = dig(body, "data", "newSearch", "schools", "edges") or []
        try:
            return [SchoolEdge.from_dict(edge) for edge in edges]
        except (TypeError, AttributeError, ValueError) as e:
            raise ResponseShapeError(f"Unexpected school search shape: {e}") from e

    async def search_schools(self, school_name: str) -> Result[list[SchoolEdge]]:
        """Search schools by free-text name; one request, no retries."""
        try:
            edges = await self._in_thread(self._search_schools, school_name)
        except RMPError as e:
            failure = Failure.from_error(e)
            _log_failure(f"School search for '{school_name}' failed", failure)
            return Result([], failure)
        return Result(edges)

    # --- Professor pagination ---

    def fetch_teacher_page(self, professor_name: str, school_id: str, after_cursor: str) -> TeacherPage | None:
        """Fetch one page of teachers; None when the response has no teachers."""
        payload = teacher_search_payload(professor_name, school_id, after_cursor, self.config.page_size)
        body = self._post(payload)
        try:
            teachers = dig(body, "data", "search", "teachers")
        except MissingFieldError:
            return None
        if teachers is None:
            return None
        try:
            return TeacherPage.from_dict(teachers)
        except (TypeError, AttributeError, ValueError) as e:
            raise ResponseShapeError(f"Unexpected teachers page shape: {e}") from e

    async def fetch_professors(self, professor_name: str, school_id: str) -> Result[list[TeacherEdge]]:
        """Fetch every page of professors at ``school_id``.

        Pass "" as ``professor_name`` to retrieve every professor. A failing
        page ends the loop; the edges from earlier pages are still returned.
        """
        edges: list[TeacherEdge] = []
        try:
            failure = await asyncio.wait_for(
                self._paginate(professor_name, school_id, edges),
                timeout=self.config.fetch_timeout,
            )
        except asyncio.TimeoutError:
            failure = Failure(
                FailureReason.TIMEOUT,
                f"Pagination did not finish within {self.config.fetch_timeout}s",
            )
            _log_failure("Error while fetching teacher data", failure)
        return Result(list(edges), failure)

    async def _paginate(self, professor_name: str, school_id: str, edges: list[TeacherEdge]) -> Failure | None:
        after_cursor = ""
        has_next_page = True
        page_number = 0

        while has_next_page:
            page_number += 1
            try:
                page = await self._in_thread(
                    self.fetch_teacher_page, professor_name, school_id, after_cursor
                )
            except RMPError as e:
                failure = Failure.from_error(e, page=page_number)
                _log_failure("Error while fetching teacher data", failure)
                return failure

            if page is None:
                failure = Failure(
                    FailureReason.MISSING_FIELD,
                    "No teachers field found in response. Possibly blocked or invalid ID.",
                    page=page_number,
                )
                _log_failure("Error while fetching teacher data", failure)
                return failure

            # Edges without a school reference are kept as sent.
            foreign = {
                e.node.school_id for e in page.edges
                if e.node.school_id is not None and e.node.school_id != school_id
            }
            if foreign:
                failure = Failure(
                    FailureReason.FOREIGN_SCHOOL,
                    f"Expected school {school_id}, got {', '.join(sorted(foreign))}",
                    page=page_number,
                )
                _log_failure("Error while fetching teacher data", failure)
                return failure

            edges.extend(page.edges)
            print(f"  Page {page_number}: +{len(page.edges)} professors (total {len(edges)})")

            has_next_page = page.page_info.has_next_page
            after_cursor = page.page_info.end_cursor

        return None
