"""Exceptions raised by the request and parsing layers."""


class RMPError(Exception):
    """Base exception for rmp_lite errors."""


class RequestError(RMPError):
    """Base exception for a failed GraphQL request."""


class HTTPStatusError(RequestError):
    """Raised when the endpoint answers with a non-2xx status."""

    def __init__(self, status_code: int, url: str):
        self.status_code = status_code
        self.url = url
        super().__init__(f"Network response from RMP not OK ({status_code}) for {url}")


class RequestTimeoutError(RequestError):
    """Raised when a request exceeds its timeout."""


class TransportError(RequestError):
    """Raised when a request never completes (DNS, connection reset, ...)."""


class DecodeError(RequestError):
    """Raised when the response body is not valid JSON."""


class GraphQLResponseError(RequestError):
    """Raised when the response carries a top-level GraphQL ``errors`` array."""

    def __init__(self, errors: list):
        self.errors = errors
        messages = "; ".join(str(e.get("message", e)) if isinstance(e, dict) else str(e) for e in errors)
        super().__init__(f"GraphQL errors: {messages}")


class ResponseShapeError(RMPError):
    """Base exception for a response that does not have the expected shape."""


class MissingFieldError(ResponseShapeError):
    """Raised when an expected field is absent from the response."""

    def __init__(self, path: tuple[str, ...]):
        self.path = path
        super().__init__(f"Missing field '{'.'.join(path)}' in response")


class SchemaMismatchError(ResponseShapeError):
    """Raised when a response object's keys differ from the declared shape."""

    def __init__(self, shape: str, missing: list[str], unexpected: list[str]):
        self.shape = shape
        self.missing = missing
        self.unexpected = unexpected
        super().__init__(
            f"{shape} does not match the declared shape: "
            f"missing {missing or 'nothing'}, unexpected {unexpected or 'nothing'}"
        )
