"""Raw HTTP transport posting GraphQL-over-HTTP JSON bodies."""

import logging
from typing import Optional

import requests

from subgraph_query.config import TransportConfig
from subgraph_query.exceptions import HttpStatusError
from subgraph_query.query import QueryRequest, QueryResult
from subgraph_query.transport import Transport, transport_error_from_requests


class HttpTransport(Transport):
    """Posts ``{"query", "variables"}`` to the endpoint with ``requests``."""

    name = "http"

    def __init__(
        self, config: TransportConfig, session: Optional[requests.Session] = None
    ):
        self.config = config
        self.session = session or requests.Session()
        self.logger = logging.getLogger(__name__)

    def execute(self, request: QueryRequest) -> QueryResult:
        headers = {"Content-Type": "application/json", **self.config.headers}
        try:
            response = self.session.post(
                self.config.endpoint,
                data=request.to_json(),
                headers=headers,
                timeout=self.config.timeout,
            )
        except requests.exceptions.RequestException as e:
            raise transport_error_from_requests(e, self.config.endpoint) from e

        self.logger.debug(f"Response status: {response.status_code}")
        if not response.ok:
            raise HttpStatusError(response.status_code)

        return QueryResult.from_text(response.text)

    def close(self) -> None:
        self.session.close()
