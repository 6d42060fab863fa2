"""Runner: search a school, fetch all of its professors, save them."""

import asyncio
from dataclasses import dataclass
from pathlib import Path

from rmp_lite.client import RMPClient
from rmp_lite.config import ClientConfig
from rmp_lite.result import Failure
from rmp_lite.schema import School, TeacherEdge
from rmp_lite.storage import write_professors
from rmp_lite.utils import get_first_or_none


@dataclass
class RunReport:
    school: School | None = None
    professors: list[TeacherEdge] | None = None
    output_path: Path | None = None
    failure: Failure | None = None

    @property
    def written(self) -> bool:
        return self.output_path is not None


async def run(config: ClientConfig | None = None, *, client: RMPClient | None = None) -> RunReport:
    """Search ``config.school_name`` and save every professor of the first match.

    Request failures are reported on the console and in the returned report,
    never raised. The output file is skipped only when no school was found.
    """
    config = config or ClientConfig()
    owns_client = client is None
    client = client or RMPClient(config)

    try:
        search = await client.search_schools(config.school_name)
        best = get_first_or_none(search.value)
        if best is None:
            print("No school results found!")
            return RunReport(failure=search.failure)

        # The first edge is taken as the best match.
        school = best.node
        print(f"School found: {school.name} ID: {school.id}")

        fetched = await client.fetch_professors(config.professor_name, school.id)
        print(f"Total professors found: {len(fetched.value)}")
        if not fetched.ok:
            print(f"WARNING: professor list may be incomplete ({fetched.failure.reason.value})")

        path = write_professors(fetched.value, config.output_path)
        print(f"Saved all professor data to '{path}'.")
        return RunReport(
            school=school,
            professors=fetched.value,
            output_path=path,
            failure=fetched.failure,
        )
    finally:
        if owns_client:
            await client.aclose()


def scrape_school(school_name: str | None = None, *, config: ClientConfig | None = None) -> RunReport:
    """Blocking entry point around :func:`run`.

    Args:
        school_name: Free-text school name. None = ``config.school_name``.
        config: Client configuration. None = defaults.

    Returns:
        RunReport describing the school, the professors and the file written.
    """
    config = (config or ClientConfig()).with_overrides(school_name=school_name)
    return asyncio.run(run(config))
