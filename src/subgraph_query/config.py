"""Configuration module for the subgraph query tool."""

import os
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional


@dataclass(frozen=True)
class TransportConfig:
    """Endpoint and headers shared by every query of a process."""

    endpoint: str
    headers: Mapping[str, str] = field(default_factory=dict)
    timeout: Optional[float] = None

    def __post_init__(self) -> None:
        if not self.endpoint:
            raise ValueError("Transport endpoint must not be empty")
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))


class Config:
    """Configuration class for the application."""

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        env = os.environ if environ is None else environ
        self.SUBGRAPH_QUERY_URL = env.get(
            "SUBGRAPH_QUERY_URL", "https://chainstack-subgraphs-query-url"
        )
        self.SUBGRAPH_API_KEY = env.get("SUBGRAPH_API_KEY")
        timeout = env.get("SUBGRAPH_TIMEOUT")
        self.SUBGRAPH_TIMEOUT = float(timeout) if timeout else None
        self.POOLS_TO_FETCH = 10
        self.TOKENS_TO_FETCH = 10

    def transport_config(self, endpoint: Optional[str] = None) -> TransportConfig:
        """Build the transport configuration, optionally overriding the endpoint."""
        headers = {}
        if self.SUBGRAPH_API_KEY:
            headers["Authorization"] = f"Bearer {self.SUBGRAPH_API_KEY}"
        return TransportConfig(
            endpoint=endpoint or self.SUBGRAPH_QUERY_URL,
            headers=headers,
            timeout=self.SUBGRAPH_TIMEOUT,
        )
