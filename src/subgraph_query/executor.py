"""Query-execution façade shared by every transport."""

import logging

from subgraph_query.config import TransportConfig
from subgraph_query.exceptions import QueryError
from subgraph_query.graph_client import GeneratedClientTransport, GraphClient
from subgraph_query.graphql_client import GqlTransport
from subgraph_query.http_client import HttpTransport
from subgraph_query.query import QueryRequest, QueryResult
from subgraph_query.transport import Transport

TRANSPORTS = {
    HttpTransport.name: HttpTransport,
    GqlTransport.name: GqlTransport,
}


class QueryExecutor:
    """Sends query requests over a single transport."""

    def __init__(self, transport: Transport):
        self.transport = transport
        self.logger = logging.getLogger(__name__)

    @classmethod
    def from_config(
        cls, config: TransportConfig, kind: str = "http"
    ) -> "QueryExecutor":
        """Build an executor for one of the configurable transports."""
        try:
            transport_cls = TRANSPORTS[kind]
        except KeyError:
            raise ValueError(
                f"Unknown transport {kind!r}, expected one of {sorted(TRANSPORTS)}"
            ) from None
        return cls(transport_cls(config))

    @classmethod
    def from_client(cls, client: GraphClient) -> "QueryExecutor":
        """Build an executor around a prebuilt graph client."""
        return cls(GeneratedClientTransport(client))

    def execute(self, request: QueryRequest) -> QueryResult:
        """
        Execute a query request.

        Args:
            request (QueryRequest): The query document and its variables.

        Returns:
            QueryResult: The parsed result. GraphQL errors reported by the
            server are returned in ``errors`` rather than raised.

        Raises:
            QueryError: If the request failed or the response was unusable.
        """
        self.logger.info(
            f"Executing GraphQL query via {self.transport.name}: "
            f"{' '.join(request.document.split())[:50]}..."
        )
        self.logger.debug(f"Query variables: {dict(request.variables)}")
        try:
            result = self.transport.execute(request)
        except QueryError as e:
            self.logger.exception(f"Error executing GraphQL query: {str(e)}")
            raise

        self.logger.debug(f"Query result: {result}")
        for error in result.errors:
            self.logger.warning(f"GraphQL error: {error.message}")
        return result

    def close(self) -> None:
        self.transport.close()

    def __enter__(self) -> "QueryExecutor":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
