"""GraphQL client transport for querying a subgraph through ``gql``."""

import requests
from gql import gql, Client
from gql.transport.exceptions import TransportProtocolError, TransportServerError
from gql.transport.requests import RequestsHTTPTransport
from graphql.error import GraphQLSyntaxError

from subgraph_query.config import TransportConfig
from subgraph_query.exceptions import (
    HttpStatusError,
    QueryDocumentError,
    ResponseParseError,
)
from subgraph_query.query import QueryRequest, QueryResult
from subgraph_query.transport import Transport, transport_error_from_requests


class GqlTransport(Transport):
    """Transport backed by a ``gql`` client over ``requests``."""

    name = "gql"

    def __init__(self, config: TransportConfig):
        self.config = config
        transport = RequestsHTTPTransport(
            url=config.endpoint,
            headers=dict(config.headers),
            timeout=config.timeout,
        )
        # Schema introspection would add a second request per query.
        self.client = Client(transport=transport, fetch_schema_from_transport=False)

    def execute(self, request: QueryRequest) -> QueryResult:
        """
        Execute a GraphQL query with the ``gql`` client.

        The connected transport is called directly so that partial data,
        GraphQL errors and empty answers all reach :class:`QueryResult`
        instead of being raised or asserted on by the client session.

        Args:
            request (QueryRequest): The query document and its variables.

        Returns:
            QueryResult: The query result, including any GraphQL errors.
        """
        try:
            document = gql(request.document)
        except GraphQLSyntaxError as e:
            raise QueryDocumentError(f"Invalid query document: {e.message}") from e

        try:
            with self.client:
                result = self.client.transport.execute(
                    document, variable_values=dict(request.variables)
                )
        except TransportServerError as e:
            raise HttpStatusError(e.code or 0, str(e)) from e
        except TransportProtocolError as e:
            raise ResponseParseError(str(e)) from e
        except requests.exceptions.RequestException as e:
            raise transport_error_from_requests(e, self.config.endpoint) from e

        return QueryResult.from_body(
            {
                "data": result.data,
                "errors": [
                    error if isinstance(error, dict) else error.formatted
                    for error in result.errors or []
                ],
            }
        )
