"""Immutable request values, one per REST action."""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

from es_httpclient.domain.enums import AliasActionType, OpType, RefreshPolicy


def _as_name_tuple(value: Any) -> Any:
    """Accept a single name where a list of names is expected."""
    if isinstance(value, str):
        return (value,)
    return value


Name = Annotated[str, Field(min_length=1)]
Names = Annotated[tuple[Name, ...], BeforeValidator(_as_name_tuple)]


class ActionRequest(BaseModel):
    """Base class for request values."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)


class MasterNodeRequest(ActionRequest):
    """Request carrying the acknowledgement and master-node timeouts."""

    timeout: str | None = None
    master_timeout: str | None = None


# Index lifecycle


class CreateIndexRequest(MasterNodeRequest):
    """Create one index with optional settings, mappings and aliases."""

    index: str = Field(min_length=1)
    settings: dict[str, Any] | None = None
    mappings: dict[str, Any] | None = None
    aliases: dict[str, Any] | None = None
    wait_for_active_shards: str | None = None


class DeleteIndexRequest(MasterNodeRequest):
    """Delete one or more indices."""

    indices: Names = Field(min_length=1)


class GetIndexRequest(ActionRequest):
    """Fetch aliases, mappings and settings of indices."""

    indices: Names = Field(min_length=1)
    include_defaults: bool = False


class IndicesExistsRequest(ActionRequest):
    """Check whether all given indices exist."""

    indices: Names = Field(min_length=1)


class OpenIndexRequest(MasterNodeRequest):
    """Open closed indices."""

    indices: Names = Field(min_length=1)


class CloseIndexRequest(MasterNodeRequest):
    """Close open indices."""

    indices: Names = Field(min_length=1)


class RefreshRequest(ActionRequest):
    """Refresh indices, or every index when none is given."""

    indices: Names = ()


class FlushRequest(ActionRequest):
    """Flush indices, or every index when none is given."""

    indices: Names = ()
    force: bool | None = None
    wait_if_ongoing: bool | None = None


class ForceMergeRequest(ActionRequest):
    """Force merge the segments of indices."""

    indices: Names = ()
    max_num_segments: int | None = Field(default=None, ge=1)
    only_expunge_deletes: bool = False
    flush: bool = True


class AliasAction(BaseModel):
    """One alias mutation of an aliases request."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    action: AliasActionType = AliasActionType.ADD
    index: str = Field(min_length=1)
    alias: str | None = None
    filter: dict[str, Any] | None = None
    routing: str | None = None
    is_write_index: bool | None = None


class IndicesAliasesRequest(MasterNodeRequest):
    """Apply alias mutations atomically."""

    actions: tuple[AliasAction, ...] = Field(min_length=1)


class PutMappingRequest(MasterNodeRequest):
    """Update the mapping of indices."""

    indices: Names = Field(min_length=1)
    source: dict[str, Any]


class GetMappingsRequest(ActionRequest):
    """Fetch the mappings of indices, or of every index when none is given."""

    indices: Names = ()


class ValidateQueryRequest(ActionRequest):
    """Validate a query without executing it."""

    indices: Names = ()
    query: dict[str, Any] = Field(default_factory=lambda: {"match_all": {}})
    explain: bool = False
    rewrite: bool = False
    all_shards: bool = False


# Ingest pipelines


class PutPipelineRequest(MasterNodeRequest):
    """Store an ingest pipeline definition."""

    id: str = Field(min_length=1)
    source: dict[str, Any]


class GetPipelineRequest(ActionRequest):
    """Fetch ingest pipelines, or every pipeline when no id is given."""

    ids: Names = ()
    master_timeout: str | None = None


class DeletePipelineRequest(MasterNodeRequest):
    """Delete an ingest pipeline."""

    id: str = Field(min_length=1)


# Documents


class IndexRequest(ActionRequest):
    """Index one document, with an auto-generated id when none is given."""

    index: str = Field(min_length=1)
    source: dict[str, Any]
    id: str | None = None
    routing: str | None = None
    refresh: RefreshPolicy | None = None
    op_type: OpType | None = None
    pipeline: str | None = None


class GetRequest(ActionRequest):
    """Fetch one document by id."""

    index: str = Field(min_length=1)
    id: str = Field(min_length=1)
    routing: str | None = None
    realtime: bool | None = None
    refresh: bool | None = None
    source: bool | None = None


class MultiGetItem(BaseModel):
    """One document reference of a multi get request."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    index: str = Field(min_length=1)
    id: str = Field(min_length=1)
    routing: str | None = None


class MultiGetRequest(ActionRequest):
    """Fetch several documents in one round trip."""

    items: tuple[MultiGetItem, ...] = Field(min_length=1)
    realtime: bool | None = None
    refresh: bool | None = None


class UpdateRequest(ActionRequest):
    """Partially update one document with a doc or a script."""

    index: str = Field(min_length=1)
    id: str = Field(min_length=1)
    doc: dict[str, Any] | None = None
    script: dict[str, Any] | None = None
    upsert: dict[str, Any] | None = None
    doc_as_upsert: bool | None = None
    routing: str | None = None
    refresh: RefreshPolicy | None = None
    retry_on_conflict: int | None = Field(default=None, ge=0)


class DeleteRequest(ActionRequest):
    """Delete one document by id."""

    index: str = Field(min_length=1)
    id: str = Field(min_length=1)
    routing: str | None = None
    refresh: RefreshPolicy | None = None


class BulkRequest(ActionRequest):
    """Execute several index/update/delete operations in one round trip."""

    operations: tuple[IndexRequest | UpdateRequest | DeleteRequest, ...] = Field(min_length=1)
    refresh: RefreshPolicy | None = None


class ExplainRequest(ActionRequest):
    """Explain how a query scores one document."""

    index: str = Field(min_length=1)
    id: str = Field(min_length=1)
    query: dict[str, Any]
    routing: str | None = None


# Search


class SearchRequest(ActionRequest):
    """Run a search, optionally opening a scroll context."""

    indices: Names = ()
    query: dict[str, Any] | None = None
    size: int | None = Field(default=None, ge=0)
    from_: int | None = Field(default=None, ge=0, alias="from")
    sort: list[Any] | None = None
    aggregations: dict[str, Any] | None = None
    source: bool | list[str] | dict[str, Any] | None = None
    track_total_hits: bool | int | None = None
    scroll: str | None = None


class SearchScrollRequest(ActionRequest):
    """Fetch the next page of a scroll context."""

    scroll_id: str = Field(min_length=1)
    scroll: str | None = None


class ClearScrollRequest(ActionRequest):
    """Release scroll contexts."""

    scroll_ids: Names = Field(min_length=1)


class MultiSearchRequest(ActionRequest):
    """Run several searches in one round trip."""

    searches: tuple[SearchRequest, ...] = Field(min_length=1)
