"""Shared fixtures: a fake requests session and GraphQL response builders."""

import pytest
import requests

SCHOOL_ID = "U2Nob29sLTEwNzk="


class FakeResponse:
    def __init__(self, body=None, status_code=200, text=None):
        self.body = body
        self.status_code = status_code
        self.text = text

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)

    def json(self):
        if self.text is not None:
            raise ValueError(f"Expecting value: {self.text!r}")
        return self.body


class FakeSession:
    """Replays queued responses (or raises queued exceptions) in order."""

    def __init__(self, *replies):
        self.replies = list(replies)
        self.calls = []
        self.closed = False

    def post(self, url, json=None, headers=None, timeout=None):
        self.calls.append({"url": url, "json": json, "headers": headers, "timeout": timeout})
        if not self.replies:
            raise AssertionError("unexpected extra request")
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        if isinstance(reply, FakeResponse):
            return reply
        return FakeResponse(reply)

    def close(self):
        self.closed = True


def make_school_node(school_id=SCHOOL_ID, name="University of California Santa Cruz", summary=None):
    return {
        "id": school_id,
        "legacyId": 1079,
        "name": name,
        "city": "Santa Cruz",
        "state": "CA",
        "departments": [{"id": "RGVwYXJ0bWVudC0x", "name": "Computer Science"}],
        "numRatings": 4211,
        "avgRatingRounded": 3.8,
        "summary": summary,
    }


def make_school_body(*nodes):
    return {
        "data": {
            "newSearch": {
                "schools": {
                    "edges": [{"cursor": f"c{i}", "node": node} for i, node in enumerate(nodes)],
                    "pageInfo": {"hasNextPage": False, "endCursor": "c0"},
                }
            }
        }
    }


def make_teacher_edge(n, school_id=SCHOOL_ID):
    return {
        "cursor": f"YXJyYXljb25uZWN0aW9uOj{n}",
        "node": {
            "__typename": "Teacher",
            "avgDifficulty": 3.1,
            "avgRating": 4.2,
            "department": "Mathematics",
            "firstName": f"First{n}",
            "id": f"VGVhY2hlci0{n}",
            "isSaved": False,
            "lastName": f"Last{n}",
            "legacyId": 1000 + n,
            "numRatings": 12,
            "school": {"id": school_id, "name": "University of California Santa Cruz"},
            "wouldTakeAgainPercent": 75.5,
        },
    }


def make_teacher_body(edges, has_next_page, end_cursor="end"):
    return {
        "data": {
            "search": {
                "teachers": {
                    "didFallback": False,
                    "edges": edges,
                    "pageInfo": {"hasNextPage": has_next_page, "endCursor": end_cursor},
                    "resultCount": 99,
                    "filters": [{"field": "teacherdepartment_s", "options": []}],
                }
            },
            "school": {"__typename": "School", "name": "UCSC", "id": SCHOOL_ID},
        }
    }


@pytest.fixture
def fake_session():
    return FakeSession


@pytest.fixture
def fake_response():
    return FakeResponse


@pytest.fixture
def school_body():
    return make_school_body


@pytest.fixture
def school_node():
    return make_school_node


@pytest.fixture
def teacher_edge():
    return make_teacher_edge


@pytest.fixture
def teacher_body():
    return make_teacher_body


@pytest.fixture
def school_id():
    return SCHOOL_ID
