"""Adapter for prebuilt graph clients exposing ``execute(document, variables)``."""

import importlib
from typing import Any, Mapping, Protocol

from subgraph_query.exceptions import QueryError, TransportError
from subgraph_query.query import QueryRequest, QueryResult
from subgraph_query.transport import Transport


class GraphClient(Protocol):
    def execute(self, document: str, variables: Mapping[str, Any]) -> Any: ...


def load_client(target: str) -> GraphClient:
    """Import a prebuilt client given as ``package.module:attribute``."""
    module_name, _, attribute = target.partition(":")
    if not module_name or not attribute:
        raise ValueError(f"Expected a client as module:attribute, got {target!r}")
    client = getattr(importlib.import_module(module_name), attribute)
    if not callable(getattr(client, "execute", None)):
        raise TypeError(f"{target} has no execute(document, variables) method")
    return client


class GeneratedClientTransport(Transport):
    """
    Transport delegating to a generated graph client.

    The client returns either a response mapping or an execution result with
    ``data`` and ``errors`` attributes, such as ``graphql.ExecutionResult``.
    """

    name = "client"

    def __init__(self, client: GraphClient):
        self.client = client

    def execute(self, request: QueryRequest) -> QueryResult:
        try:
            result = self.client.execute(request.document, dict(request.variables))
        except QueryError:
            raise
        except Exception as e:
            raise TransportError(
                f"Graph client failed: {str(e)}", kind=TransportError.OTHER, cause=e
            ) from e

        if isinstance(result, Mapping):
            return QueryResult.from_body(result)

        errors = getattr(result, "errors", None) or []
        return QueryResult.from_body(
            {
                "data": getattr(result, "data", None),
                "errors": [getattr(error, "formatted", error) for error in errors],
            }
        )
