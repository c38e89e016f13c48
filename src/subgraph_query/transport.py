"""Transport interface shared by every way of sending a query."""

from abc import ABC, abstractmethod

import requests

from subgraph_query.exceptions import TransportError
from subgraph_query.query import QueryRequest, QueryResult


class Transport(ABC):
    """Sends one query and returns its parsed result."""

    name = "transport"

    @abstractmethod
    def execute(self, request: QueryRequest) -> QueryResult:
        """Send ``request`` with exactly one network call."""

    def close(self) -> None:
        pass


def transport_error_from_requests(
    error: requests.exceptions.RequestException, endpoint: str
) -> TransportError:
    """Map a ``requests`` exception onto a :class:`TransportError`."""
    if isinstance(error, requests.exceptions.Timeout):
        kind = TransportError.TIMEOUT
    elif isinstance(error, requests.exceptions.ConnectionError):
        kind = TransportError.CONNECTION
    else:
        kind = TransportError.OTHER
    return TransportError(
        f"Request to {endpoint} failed ({kind}): {str(error)}", kind=kind, cause=error
    )
