"""Argument parser construction for all CLI subcommands."""

from __future__ import annotations

import argparse
import os

from es_httpclient.cli.command_handlers import (
    handle_create_index,
    handle_delete_index,
    handle_delete_pipeline,
    handle_exists,
    handle_force_merge,
    handle_get_index,
    handle_get_pipeline,
    handle_put_pipeline,
    handle_refresh,
    handle_search,
    handle_validate_query,
)
from es_httpclient.config import (
    DEFAULT_BACKEND_URL,
    DEFAULT_TIMEOUT_S,
    LOG_LEVEL_ENV,
    PROXY_URL_ENV,
    TIMEOUT_ENV,
    URL_ENV,
    VERIFY_CERTS_ENV,
    env_bool,
    env_float,
)


def add_connection_flags(subparser: argparse.ArgumentParser) -> None:
    """Add connection and runtime flags shared by subcommands."""
    subparser.add_argument(
        "--backend-url",
        default=os.getenv(URL_ENV, DEFAULT_BACKEND_URL),
        help="Backend base URL (Elasticsearch or OpenSearch).",
    )
    subparser.add_argument(
        "--timeout-s",
        default=env_float(TIMEOUT_ENV, default_value=DEFAULT_TIMEOUT_S),
        type=float,
        help="HTTP request timeout in seconds.",
    )
    subparser.add_argument(
        "--verify-certs",
        default=env_bool(VERIFY_CERTS_ENV, default_value=True),
        action=argparse.BooleanOptionalAction,
        help="Verify TLS certificates of the backend.",
    )
    subparser.add_argument(
        "--proxy-url",
        default=os.getenv(PROXY_URL_ENV),
        help="Optional HTTP/HTTPS proxy URL.",
    )
    subparser.add_argument(
        "--log-level",
        default=os.getenv(LOG_LEVEL_ENV, "WARNING"),
        help="Logging level (DEBUG, INFO, WARNING, ERROR).",
    )
    subparser.add_argument(
        "--output",
        default="-",
        help="Output destination: '-' for stdout or path to file.",
    )


def add_master_timeout_flags(subparser: argparse.ArgumentParser) -> None:
    """Add acknowledgement and master-node timeout flags."""
    subparser.add_argument("--timeout", default=None, help="Acknowledgement timeout, e.g. '30s'.")
    subparser.add_argument("--master-timeout", default=None, help="Master node timeout, e.g. '30s'.")


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        argparse.ArgumentParser: Configured parser.

    """
    parser = argparse.ArgumentParser(
        prog="es-httpclient",
        description="Run index, pipeline and search actions against a cluster over REST.",
    )
    subparsers = parser.add_subparsers(dest="command")

    create_index = subparsers.add_parser("create-index", help="Create an index.")
    create_index.add_argument("index", help="Index name.")
    create_index.add_argument("--settings", default=None, help="Index settings as JSON or @file.")
    create_index.add_argument("--mappings", default=None, help="Index mappings as JSON or @file.")
    add_master_timeout_flags(create_index)
    add_connection_flags(create_index)
    create_index.set_defaults(handler=handle_create_index)

    delete_index = subparsers.add_parser("delete-index", help="Delete indices.")
    delete_index.add_argument("indices", nargs="+", help="Index names.")
    add_master_timeout_flags(delete_index)
    add_connection_flags(delete_index)
    delete_index.set_defaults(handler=handle_delete_index)

    get_index = subparsers.add_parser("get-index", help="Show aliases, mappings and settings of indices.")
    get_index.add_argument("indices", nargs="+", help="Index names.")
    get_index.add_argument(
        "--include-defaults",
        default=False,
        action=argparse.BooleanOptionalAction,
        help="Include default settings.",
    )
    add_connection_flags(get_index)
    get_index.set_defaults(handler=handle_get_index)

    exists = subparsers.add_parser("exists", help="Check whether indices exist.")
    exists.add_argument("indices", nargs="+", help="Index names.")
    add_connection_flags(exists)
    exists.set_defaults(handler=handle_exists)

    refresh = subparsers.add_parser("refresh", help="Refresh indices (all when none given).")
    refresh.add_argument("indices", nargs="*", help="Index names.")
    add_connection_flags(refresh)
    refresh.set_defaults(handler=handle_refresh)

    force_merge = subparsers.add_parser("force-merge", help="Force merge index segments (all indices when none given).")
    force_merge.add_argument("indices", nargs="*", help="Index names.")
    force_merge.add_argument("--max-num-segments", default=None, type=int, help="Target segment count.")
    force_merge.add_argument(
        "--only-expunge-deletes",
        default=False,
        action=argparse.BooleanOptionalAction,
        help="Only merge segments holding deletions.",
    )
    force_merge.add_argument(
        "--flush",
        default=True,
        action=argparse.BooleanOptionalAction,
        help="Flush after merging.",
    )
    add_connection_flags(force_merge)
    force_merge.set_defaults(handler=handle_force_merge)

    validate_query = subparsers.add_parser("validate-query", help="Validate a query without running it.")
    validate_query.add_argument("indices", nargs="*", help="Index names.")
    validate_query.add_argument("--query", default='{"match_all": {}}', help="Query as JSON or @file.")
    validate_query.add_argument("--explain", default=False, action=argparse.BooleanOptionalAction)
    validate_query.add_argument("--rewrite", default=False, action=argparse.BooleanOptionalAction)
    validate_query.add_argument("--all-shards", default=False, action=argparse.BooleanOptionalAction)
    add_connection_flags(validate_query)
    validate_query.set_defaults(handler=handle_validate_query)

    put_pipeline = subparsers.add_parser("put-pipeline", help="Store an ingest pipeline.")
    put_pipeline.add_argument("id", help="Pipeline id.")
    put_pipeline.add_argument("--source", required=True, help="Pipeline definition as JSON or @file.")
    add_master_timeout_flags(put_pipeline)
    add_connection_flags(put_pipeline)
    put_pipeline.set_defaults(handler=handle_put_pipeline)

    get_pipeline = subparsers.add_parser("get-pipeline", help="Show ingest pipelines (all when none given).")
    get_pipeline.add_argument("ids", nargs="*", help="Pipeline ids.")
    add_connection_flags(get_pipeline)
    get_pipeline.set_defaults(handler=handle_get_pipeline)

    delete_pipeline = subparsers.add_parser("delete-pipeline", help="Delete an ingest pipeline.")
    delete_pipeline.add_argument("id", help="Pipeline id.")
    add_master_timeout_flags(delete_pipeline)
    add_connection_flags(delete_pipeline)
    delete_pipeline.set_defaults(handler=handle_delete_pipeline)

    search = subparsers.add_parser("search", help="Run a search.")
    search.add_argument("indices", nargs="*", help="Index names.")
    search.add_argument("--query", default=None, help="Query as JSON or @file.")
    search.add_argument("--size", default=None, type=int, help="Number of hits to return.")
    add_connection_flags(search)
    search.set_defaults(handler=handle_search)

    return parser
