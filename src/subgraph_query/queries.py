"""Query documents sent to the subgraph."""

from subgraph_query.query import QueryRequest

POOLS_QUERY = """
query GetPools($first: Int!) {
  pools(first: $first) {
    id
    token0 {
      name
      id
      symbol
    }
    token1 {
      name
      id
      symbol
    }
    blockNumber
    timestamp
  }
}
"""

TOKENS_QUERY = """
query GetTokens($first: Int!) {
  tokens(first: $first) {
    id
    name
    symbol
  }
}
"""


def pools_request(first: int = 10) -> QueryRequest:
    if first < 1:
        raise ValueError(f"Number of pools must be positive, got {first}")
    return QueryRequest(POOLS_QUERY, {"first": first})


def tokens_request(first: int = 10) -> QueryRequest:
    if first < 1:
        raise ValueError(f"Number of tokens must be positive, got {first}")
    return QueryRequest(TOKENS_QUERY, {"first": first})
