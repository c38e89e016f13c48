"""Exceptions raised while executing subgraph queries."""

from typing import Any, Optional, Sequence


class QueryError(Exception):
    """Base class for every failure surfaced by a query execution."""

    pass


class TransportError(QueryError):
    """Raised when the request never produced an HTTP response."""

    CONNECTION = "connection"
    TIMEOUT = "timeout"
    OTHER = "other"

    def __init__(
        self, message: str, kind: str = OTHER, cause: Optional[BaseException] = None
    ):
        super().__init__(message)
        self.kind = kind
        self.cause = cause


class HttpStatusError(QueryError):
    """Raised when the server answers with a non-2xx status."""

    def __init__(self, status: int, message: Optional[str] = None):
        super().__init__(message or f"HTTP error! status: {status}")
        self.status = status


class ResponseParseError(QueryError):
    """Raised when a response body is not a GraphQL result."""

    def __init__(self, message: str, body: Optional[str] = None):
        super().__init__(message)
        self.body = body


class QueryDocumentError(QueryError):
    """Raised when a query document cannot be parsed locally."""

    pass


class GraphQLResponseError(QueryError):
    """Raised on demand when a result carries a non-empty ``errors`` list."""

    def __init__(self, errors: Sequence[Any], data: Any = None):
        messages = "; ".join(error.message for error in errors)
        super().__init__(f"GraphQL errors: {messages}")
        self.errors = tuple(errors)
        self.data = data
