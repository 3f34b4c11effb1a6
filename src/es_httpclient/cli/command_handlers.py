"""CLI command handlers, one per subcommand."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

from es_httpclient.cli.common_runtime import load_json_argument
from es_httpclient.domain import (
    CreateIndexRequest,
    DeleteIndexRequest,
    DeletePipelineRequest,
    ForceMergeRequest,
    GetIndexRequest,
    GetPipelineRequest,
    IndicesExistsRequest,
    PutPipelineRequest,
    RefreshRequest,
    SearchRequest,
    ValidateQueryRequest,
)
from es_httpclient.factory import build_http_client

if TYPE_CHECKING:
    import argparse

    from pydantic import BaseModel

    from es_httpclient.client import HttpClient
    from es_httpclient.listeners import PlainActionFuture

ResponseT = TypeVar("ResponseT")

_MISSING_FUTURE_ERROR = "The client did not return a future for a call without listener."


def open_client(args: argparse.Namespace) -> HttpClient:
    """Build a client from the shared connection flags.

    Args:
        args (argparse.Namespace): Parsed command-line arguments.

    Returns:
        HttpClient: Client facade, to be closed by the caller.

    """
    return build_http_client(
        url=str(args.backend_url),
        timeout_s=float(args.timeout_s),
        verify_certs=bool(args.verify_certs),
    )


def await_response(future: PlainActionFuture[ResponseT] | None) -> ResponseT:
    """Block until `future` completes and return its response.

    Raises:
        RuntimeError: If no future was returned.

    """
    if future is None:
        raise RuntimeError(_MISSING_FUTURE_ERROR)
    return future.action_get()


def _optional_json(value: str | None) -> Any:
    return None if value is None else load_json_argument(value)


def handle_create_index(args: argparse.Namespace) -> BaseModel:
    """Run `create-index`."""
    request = CreateIndexRequest(
        index=str(args.index),
        settings=_optional_json(args.settings),
        mappings=_optional_json(args.mappings),
        timeout=args.timeout,
        master_timeout=args.master_timeout,
    )
    with open_client(args) as client:
        return await_response(client.indices.create(request))


def handle_delete_index(args: argparse.Namespace) -> BaseModel:
    """Run `delete-index`."""
    request = DeleteIndexRequest(
        indices=tuple(args.indices),
        timeout=args.timeout,
        master_timeout=args.master_timeout,
    )
    with open_client(args) as client:
        return await_response(client.indices.delete(request))


def handle_get_index(args: argparse.Namespace) -> BaseModel:
    """Run `get-index`."""
    request = GetIndexRequest(indices=tuple(args.indices), include_defaults=bool(args.include_defaults))
    with open_client(args) as client:
        return await_response(client.indices.get(request))


def handle_exists(args: argparse.Namespace) -> BaseModel:
    """Run `exists`."""
    request = IndicesExistsRequest(indices=tuple(args.indices))
    with open_client(args) as client:
        return await_response(client.indices.exists(request))


def handle_refresh(args: argparse.Namespace) -> BaseModel:
    """Run `refresh`."""
    request = RefreshRequest(indices=tuple(args.indices))
    with open_client(args) as client:
        return await_response(client.indices.refresh(request))


def handle_force_merge(args: argparse.Namespace) -> BaseModel:
    """Run `force-merge`."""
    request = ForceMergeRequest(
        indices=tuple(args.indices),
        max_num_segments=args.max_num_segments,
        only_expunge_deletes=bool(args.only_expunge_deletes),
        flush=bool(args.flush),
    )
    with open_client(args) as client:
        return await_response(client.indices.force_merge(request))


def handle_validate_query(args: argparse.Namespace) -> BaseModel:
    """Run `validate-query`."""
    request = ValidateQueryRequest(
        indices=tuple(args.indices),
        query=load_json_argument(str(args.query)),
        explain=bool(args.explain),
        rewrite=bool(args.rewrite),
        all_shards=bool(args.all_shards),
    )
    with open_client(args) as client:
        return await_response(client.indices.validate_query(request))


def handle_put_pipeline(args: argparse.Namespace) -> BaseModel:
    """Run `put-pipeline`."""
    request = PutPipelineRequest(
        id=str(args.id),
        source=load_json_argument(str(args.source)),
        timeout=args.timeout,
        master_timeout=args.master_timeout,
    )
    with open_client(args) as client:
        return await_response(client.ingest.put_pipeline(request))


def handle_get_pipeline(args: argparse.Namespace) -> BaseModel:
    """Run `get-pipeline`."""
    request = GetPipelineRequest(ids=tuple(args.ids))
    with open_client(args) as client:
        return await_response(client.ingest.get_pipeline(request))


def handle_delete_pipeline(args: argparse.Namespace) -> BaseModel:
    """Run `delete-pipeline`."""
    request = DeletePipelineRequest(id=str(args.id), timeout=args.timeout, master_timeout=args.master_timeout)
    with open_client(args) as client:
        return await_response(client.ingest.delete_pipeline(request))


def handle_search(args: argparse.Namespace) -> BaseModel:
    """Run `search`."""
    request = SearchRequest(
        indices=tuple(args.indices),
        query=_optional_json(args.query),
        size=args.size,
    )
    with open_client(args) as client:
        return await_response(client.search(request))
