"""Tests for the request and result shapes."""

import dataclasses
import json

import pytest

from subgraph_query.exceptions import GraphQLResponseError, ResponseParseError
from subgraph_query.queries import TOKENS_QUERY, pools_request, tokens_request
from subgraph_query.query import QueryRequest, QueryResult


def test_variables_round_trip() -> None:
    request = QueryRequest(TOKENS_QUERY, {"first": 10})

    body = json.loads(request.to_json())

    assert body == {"query": TOKENS_QUERY, "variables": {"first": 10}}


def test_request_is_immutable() -> None:
    variables = {"first": 10}
    request = QueryRequest(TOKENS_QUERY, variables)
    variables["first"] = 99

    assert request.variables["first"] == 10
    with pytest.raises(TypeError):
        request.variables["first"] = 1
    with pytest.raises(dataclasses.FrozenInstanceError):
        request.document = "query { pools { id } }"


@pytest.mark.parametrize("document", ["", "   \n  "])
def test_empty_document_is_rejected(document: str) -> None:
    with pytest.raises(ValueError):
        QueryRequest(document)


def test_missing_errors_means_empty() -> None:
    result = QueryResult.from_body({"data": {"tokens": []}, "errors": None})

    assert result.errors == ()
    assert result.raise_for_errors() is result


def test_data_null_requires_errors() -> None:
    with pytest.raises(ResponseParseError):
        QueryResult.from_body({"data": None, "errors": []})


def test_raise_for_errors() -> None:
    result = QueryResult.from_body(
        {"data": {"tokens": None}, "errors": [{"message": "a"}, {"message": "b"}]}
    )

    with pytest.raises(GraphQLResponseError) as excinfo:
        result.raise_for_errors()

    assert str(excinfo.value) == "GraphQL errors: a; b"
    assert excinfo.value.data == {"tokens": None}
    assert len(excinfo.value.errors) == 2


def test_non_json_text() -> None:
    with pytest.raises(ResponseParseError) as excinfo:
        QueryResult.from_text("upstream connect error")

    assert excinfo.value.body == "upstream connect error"


def test_query_builders() -> None:
    assert pools_request().variables == {"first": 10}
    assert tokens_request(5).variables == {"first": 5}
    with pytest.raises(ValueError):
        tokens_request(0)
    with pytest.raises(ValueError):
        pools_request(-1)
