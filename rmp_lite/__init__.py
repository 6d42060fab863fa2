"""
rmp_lite: fetch every RateMyProfessors professor of one school.

Searches the RateMyProfessors GraphQL API for a school by name, pages
through all of its professors and saves them to a JSON file.

Usage:
    from rmp_lite import scrape_school

    # Default school, writes professors.json
    report = scrape_school()

    # Another school
    report = scrape_school("University of Waterloo")
"""

from rmp_lite.client import RMPClient
from rmp_lite.config import ClientConfig
from rmp_lite.result import Failure, FailureReason, Result
from rmp_lite.runner import RunReport, run, scrape_school

__all__ = [
    "ClientConfig",
    "Failure",
    "FailureReason",
    "RMPClient",
    "Result",
    "RunReport",
    "run",
    "scrape_school",
]
