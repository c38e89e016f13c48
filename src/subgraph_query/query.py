"""Request and result shapes exchanged with a subgraph."""

import json
import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from subgraph_query.exceptions import GraphQLResponseError, ResponseParseError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QueryRequest:
    """A GraphQL document together with its variables."""

    document: str
    variables: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.document or not self.document.strip():
            raise ValueError("Query document must not be empty")
        object.__setattr__(self, "variables", MappingProxyType(dict(self.variables)))

    def to_payload(self) -> Dict[str, Any]:
        """Return the ``{query, variables}`` body of the request."""
        return {"query": self.document, "variables": dict(self.variables)}

    def to_json(self) -> str:
        return json.dumps(self.to_payload())


@dataclass(frozen=True)
class GraphQLErrorEntry:
    """One entry of a response's ``errors`` list."""

    message: str
    locations: Optional[Tuple[Any, ...]] = None
    path: Optional[Tuple[Any, ...]] = None
    extensions: Optional[Mapping[str, Any]] = None

    @classmethod
    def from_dict(cls, entry: Any) -> "GraphQLErrorEntry":
        if not isinstance(entry, Mapping) or not isinstance(entry.get("message"), str):
            raise ResponseParseError(f"Malformed GraphQL error entry: {entry!r}")
        locations = entry.get("locations")
        path = entry.get("path")
        return cls(
            message=entry["message"],
            locations=tuple(locations) if locations is not None else None,
            path=tuple(path) if path is not None else None,
            extensions=entry.get("extensions"),
        )


@dataclass(frozen=True)
class QueryResult:
    """Parsed GraphQL response: ``data`` plus any ``errors``."""

    data: Any = None
    errors: Tuple[GraphQLErrorEntry, ...] = ()

    def __post_init__(self) -> None:
        if self.data is None and not self.errors:
            raise ResponseParseError("Response has neither data nor errors")

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    def raise_for_errors(self) -> "QueryResult":
        """Raise :class:`GraphQLResponseError` if the server reported any errors."""
        if self.errors:
            raise GraphQLResponseError(self.errors, self.data)
        return self

    @classmethod
    def from_body(cls, body: Any) -> "QueryResult":
        """
        Build a result from a decoded response body.

        Args:
            body (Any): The decoded JSON body.

        Returns:
            QueryResult: The parsed result.

        Raises:
            ResponseParseError: If the body is not a GraphQL result.
        """
        if not isinstance(body, Mapping):
            raise ResponseParseError(
                f"Expected a JSON object, got {type(body).__name__}"
            )
        if "data" not in body and "errors" not in body:
            raise ResponseParseError('No "data" or "errors" keys in answer')

        raw_errors = body.get("errors") or []
        if not isinstance(raw_errors, list):
            raise ResponseParseError(
                f'"errors" must be a list, got {type(raw_errors).__name__}'
            )

        errors = tuple(GraphQLErrorEntry.from_dict(entry) for entry in raw_errors)
        return cls(data=body.get("data"), errors=errors)

    @classmethod
    def from_text(cls, text: str) -> "QueryResult":
        try:
            body = json.loads(text)
        except ValueError as e:
            logger.debug(f"Unparseable response body: {text[:200]}")
            raise ResponseParseError(f"Not a JSON answer: {str(e)}", body=text) from e
        return cls.from_body(body)
