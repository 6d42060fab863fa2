"""Explicit success/failure values returned by the client."""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

from rmp_lite.exceptions import (
    DecodeError,
    GraphQLResponseError,
    HTTPStatusError,
    MissingFieldError,
    RequestTimeoutError,
    ResponseShapeError,
    RMPError,
)

T = TypeVar("T")


class FailureReason(str, Enum):
    HTTP_STATUS = "http_status"
    TRANSPORT = "transport"
    TIMEOUT = "timeout"
    DECODE = "decode"
    GRAPHQL_ERRORS = "graphql_errors"
    MISSING_FIELD = "missing_field"
    SCHEMA_MISMATCH = "schema_mismatch"
    FOREIGN_SCHOOL = "foreign_school"


@dataclass(frozen=True)
class Failure:
    reason: FailureReason
    message: str
    status_code: int | None = None
    page: int | None = None

    @classmethod
    def from_error(cls, error: RMPError, *, page: int | None = None) -> "Failure":
        """Map an rmp_lite exception onto a failure reason."""
        status_code = None
        if isinstance(error, HTTPStatusError):
            reason = FailureReason.HTTP_STATUS
            status_code = error.status_code
        elif isinstance(error, RequestTimeoutError):
            reason = FailureReason.TIMEOUT
        elif isinstance(error, DecodeError):
            reason = FailureReason.DECODE
        elif isinstance(error, GraphQLResponseError):
            reason = FailureReason.GRAPHQL_ERRORS
        elif isinstance(error, MissingFieldError):
            reason = FailureReason.MISSING_FIELD
        elif isinstance(error, ResponseShapeError):
            reason = FailureReason.SCHEMA_MISMATCH
        else:
            reason = FailureReason.TRANSPORT
        return cls(reason=reason, message=str(error), status_code=status_code, page=page)


@dataclass(frozen=True)
class Result(Generic[T]):
    """A value plus the failure that cut it short, if any.

    The value is always usable: an empty list when a search failed, the
    edges accumulated so far when pagination stopped early.
    """

    value: T
    failure: Failure | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None
