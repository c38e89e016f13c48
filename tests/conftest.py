"""Shared fixtures for the subgraph query tests."""

from unittest.mock import MagicMock

import pytest
import requests

from subgraph_query.config import TransportConfig

TOKENS_BODY = '{"data":{"tokens":[{"id":"1","name":"Foo","symbol":"FOO"}]},"errors":[]}'


def make_response(status_code: int, text: str) -> requests.Response:
    """Build a real ``requests.Response`` carrying ``text`` as its body."""
    response = requests.Response()
    response.status_code = status_code
    response._content = text.encode("utf-8")
    response.encoding = "utf-8"
    return response


@pytest.fixture
def transport_config() -> TransportConfig:
    return TransportConfig(
        endpoint="https://subgraph.example/query",
        headers={"Authorization": "Bearer test-key"},
        timeout=5.0,
    )


@pytest.fixture
def mock_session() -> MagicMock:
    """Fixture for mocking the requests session."""
    return MagicMock(spec=requests.Session)
