"""Command line entry point: ``python -m rmp_lite [school] [--out ...]``."""

import argparse
import asyncio
from pathlib import Path

from rmp_lite.config import DEFAULT_SCHOOL_NAME, ClientConfig
from rmp_lite.runner import run


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rmp-lite",
        description="Fetch all professors of a school from the RateMyProfessors GraphQL API",
    )
    parser.add_argument("school", nargs="?", default=DEFAULT_SCHOOL_NAME,
                        help="School name to search (default: %(default)s)")
    parser.add_argument("--out", type=Path, help="Output JSON path (default: professors.json)")
    parser.add_argument("--professor", help="Only professors matching this name")
    parser.add_argument("--endpoint", help="GraphQL endpoint URL")
    parser.add_argument("--page-size", type=int, help="Professors requested per page")
    parser.add_argument("--timeout", type=float, help="Per-request timeout in seconds")
    parser.add_argument("--deadline", type=float, help="Overall pagination deadline in seconds")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    config = ClientConfig().with_overrides(
        school_name=args.school,
        output_path=args.out,
        professor_name=args.professor,
        endpoint=args.endpoint,
        page_size=args.page_size,
        request_timeout=args.timeout,
        fetch_timeout=args.deadline,
    )
    asyncio.run(run(config))
    # Failures are reported on the console, not through the exit status.
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
