#!/usr/bin/env python3.12
"""
Subgraph Query - Main Application

This script is the entry point for querying a blockchain-indexing subgraph.
It supports fetching pools, tokens, or both over a selectable transport, or
through a prebuilt graph client.
"""

import argparse
import json
import logging
import sys
from typing import Any, Optional, Sequence

from subgraph_query.config import Config
from subgraph_query.exceptions import QueryError
from subgraph_query.executor import TRANSPORTS, QueryExecutor
from subgraph_query.graph_client import load_client
from subgraph_query.queries import pools_request, tokens_request
from subgraph_query.query import QueryRequest


def setup_logging(verbose: bool = False) -> None:
    """Set up logging configuration."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("gql.transport").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def positive_int(value: str) -> int:
    """Argparse type accepting integers greater than zero."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {number}")
    return number


def parse_arguments(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Subgraph Query",
        epilog=(
            "Use 'subgraph-query <command> --help' "
            "for more information on a command."
        ),
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )
    parser.add_argument(
        "--transport",
        choices=sorted(TRANSPORTS),
        default="http",
        help="How queries are sent (default: http)",
    )
    parser.add_argument(
        "--endpoint", help="Subgraph query URL (overrides SUBGRAPH_QUERY_URL)"
    )
    parser.add_argument(
        "--client",
        metavar="MODULE:ATTR",
        help="Prebuilt graph client to send queries with (overrides --transport)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    pools_parser = subparsers.add_parser("pools", help="Fetch pool data")
    pools_parser.add_argument(
        "--first", type=positive_int, help="Number of pools to fetch (overrides config)"
    )

    tokens_parser = subparsers.add_parser("tokens", help="Fetch a list of tokens")
    tokens_parser.add_argument(
        "--first",
        type=positive_int,
        help="Number of tokens to fetch (overrides config)",
    )

    subparsers.add_parser("all", help="Fetch pool data, then token data")

    return parser.parse_args(argv)


def build_executor(args: argparse.Namespace, config: Config) -> QueryExecutor:
    """Build the executor selected on the command line."""
    logger = logging.getLogger(__name__)
    if args.client:
        logger.info(f"Querying through graph client {args.client}")
        return QueryExecutor.from_client(load_client(args.client))

    transport_config = config.transport_config(args.endpoint)
    logger.info(f"Querying {transport_config.endpoint} via {args.transport}")
    return QueryExecutor.from_config(transport_config, args.transport)


def run_query(
    executor: QueryExecutor, label: str, request: QueryRequest, key: str
) -> None:
    """Run one query and print its payload."""
    logger = logging.getLogger(__name__)
    try:
        result = executor.execute(request)
    except QueryError as e:
        logger.error(f"Error fetching {label.lower()}: {str(e)}")
        return

    payload: Any = result.data
    if isinstance(payload, dict):
        payload = payload.get(key)
    print(f"{label}: {json.dumps(payload, indent=2)}")


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main function to run the subgraph queries."""
    args = parse_arguments(argv)
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    try:
        config = Config()
        first = getattr(args, "first", None)

        with build_executor(args, config) as executor:
            if args.command in ("pools", "all"):
                count = config.POOLS_TO_FETCH if first is None else first
                run_query(executor, "Pools", pools_request(count), "pools")
            if args.command in ("tokens", "all"):
                count = config.TOKENS_TO_FETCH if first is None else first
                run_query(executor, "Tokens", tokens_request(count), "tokens")

    except Exception as e:
        logger.exception(f"An error occurred: {str(e)}")
        sys.exit(1)


if __name__ == "__main__":
    main()
