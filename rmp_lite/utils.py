"""Shared utilities for the rmp_lite client."""

import requests

from rmp_lite.exceptions import (
    DecodeError,
    GraphQLResponseError,
    HTTPStatusError,
    MissingFieldError,
    RequestTimeoutError,
    TransportError,
)


def post_graphql(
    session: requests.Session,
    url: str,
    payload: dict,
    *,
    headers: dict[str, str],
    timeout: float,
) -> dict:
    """POST a GraphQL payload once and return the decoded body."""
    try:
        response = session.post(url, json=payload, headers=headers, timeout=timeout)
        response.raise_for_status()
    except requests.HTTPError as e:
        status = e.response.status_code if e.response is not None else 0
        raise HTTPStatusError(status, url) from e
    except requests.Timeout as e:
        raise RequestTimeoutError(f"Request to {url} timed out after {timeout}s") from e
    except requests.RequestException as e:
        raise TransportError(f"Request to {url} failed: {e}") from e

    try:
        body = response.json()
    except ValueError as e:
        raise DecodeError(f"Response from {url} is not valid JSON: {e}") from e

    if not isinstance(body, dict):
        raise DecodeError(f"Response from {url} is not a JSON object")
    if body.get("errors"):
        raise GraphQLResponseError(body["errors"])
    return body


def dig(data, *path: str):
    """Walk nested dicts along ``path``; raise MissingFieldError on a gap."""
    current = data
    for depth, key in enumerate(path):
        if not isinstance(current, dict) or key not in current:
            raise MissingFieldError(path[: depth + 1])
        current = current[key]
    return current


def get_first_or_none(items: list):
    """Return first item or None."""
    return items[0] if items else None
