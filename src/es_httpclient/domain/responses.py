"""Immutable response values parsed from REST reply bodies.

Parsing is lenient: fields the cluster adds that a model does not declare are
ignored, so newer clusters keep working with these schemas.
"""

from __future__ import annotations

from http import HTTPStatus
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from es_httpclient.domain.enums import DocWriteResult

RANDOM_SHARD = -1


class ActionResponse(BaseModel):
    """Base class for response values."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class ShardFailure(ActionResponse):
    """Describe one shard-level failure."""

    index: str | None = None
    shard: int | None = None
    node: str | None = None
    status: str | None = None
    reason: dict[str, Any] | None = None


class ShardStatistics(ActionResponse):
    """Summarize how many shards took part in an operation."""

    total: int = 0
    successful: int = 0
    failed: int = 0
    skipped: int = 0
    failures: tuple[ShardFailure, ...] = ()

    @property
    def status(self) -> HTTPStatus:
        """Derive the REST status of a shard-level broadcast."""
        if not self.failures:
            if self.successful == 0 and self.total > 0:
                return HTTPStatus.SERVICE_UNAVAILABLE
            return HTTPStatus.OK
        statuses = [_status_from_name(failure.status) for failure in self.failures]
        return max(statuses)


def _status_from_name(name: str | None) -> HTTPStatus:
    if name is None:
        return HTTPStatus.INTERNAL_SERVER_ERROR
    try:
        return HTTPStatus[name.upper()]
    except KeyError:
        return HTTPStatus.INTERNAL_SERVER_ERROR


# Index lifecycle


class AcknowledgedResponse(ActionResponse):
    """Response of master-node operations that only report acknowledgement."""

    acknowledged: bool


class CreateIndexResponse(AcknowledgedResponse):
    """Response of the create index action."""

    shards_acknowledged: bool = False
    index: str | None = None


class OpenIndexResponse(AcknowledgedResponse):
    """Response of the open index action."""

    shards_acknowledged: bool = False


class BroadcastResponse(ActionResponse):
    """Response of shard-broadcast operations (refresh, flush, force merge)."""

    shards: ShardStatistics = Field(default_factory=ShardStatistics, alias="_shards")

    @property
    def status(self) -> HTTPStatus:
        """Return the REST status derived from shard results."""
        return self.shards.status


class IndexMetadata(ActionResponse):
    """Aliases, mappings and settings of one index."""

    aliases: dict[str, Any] = Field(default_factory=dict)
    mappings: dict[str, Any] = Field(default_factory=dict)
    settings: dict[str, Any] = Field(default_factory=dict)
    defaults: dict[str, Any] = Field(default_factory=dict)


class GetIndexResponse(ActionResponse):
    """Response of the get index action, keyed by index name."""

    metadata: dict[str, IndexMetadata] = Field(default_factory=dict)

    @property
    def indices(self) -> list[str]:
        """Return the names of the returned indices."""
        return list(self.metadata)

    @property
    def aliases(self) -> dict[str, dict[str, Any]]:
        """Return aliases by index name."""
        return {name: item.aliases for name, item in self.metadata.items()}

    @property
    def mappings(self) -> dict[str, dict[str, Any]]:
        """Return mappings by index name."""
        return {name: item.mappings for name, item in self.metadata.items()}

    @property
    def settings(self) -> dict[str, dict[str, Any]]:
        """Return settings by index name."""
        return {name: item.settings for name, item in self.metadata.items()}


class IndicesExistsResponse(ActionResponse):
    """Response of the indices exists action."""

    exists: bool


class GetMappingsResponse(ActionResponse):
    """Response of the get mappings action, keyed by index name."""

    mappings: dict[str, dict[str, Any]] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _unwrap_index_entries(cls, data: Any) -> Any:
        # {"idx": {"mappings": {...}}} -> {"mappings": {"idx": {...}}}
        if isinstance(data, dict) and "mappings" not in data:
            return {"mappings": {name: (entry or {}).get("mappings", {}) for name, entry in data.items()}}
        return data


class QueryExplanation(ActionResponse):
    """Per-index (or per-shard) explanation of a validated query."""

    index: str | None = None
    shard: int = RANDOM_SHARD
    valid: bool
    explanation: str | None = None
    error: str | None = None

    @field_validator("shard", mode="before")
    @classmethod
    def _default_shard(cls, value: Any) -> Any:
        return RANDOM_SHARD if value is None else value


class ValidateQueryResponse(ActionResponse):
    """Response of the validate query action."""

    shards: ShardStatistics | None = Field(default=None, alias="_shards")
    valid: bool
    explanations: tuple[QueryExplanation, ...] = ()
    error: str | None = None


# Ingest pipelines


class GetPipelineResponse(ActionResponse):
    """Response of the get pipeline action, keyed by pipeline id."""

    pipelines: dict[str, dict[str, Any]] = Field(default_factory=dict)

    @property
    def is_found(self) -> bool:
        """Return whether at least one pipeline was returned."""
        return bool(self.pipelines)


# Documents


class DocWriteResponse(ActionResponse):
    """Response of index, update and delete actions."""

    index: str = Field(alias="_index")
    id: str = Field(alias="_id")
    version: int | None = Field(default=None, alias="_version")
    result: DocWriteResult
    shards: ShardStatistics | None = Field(default=None, alias="_shards")
    seq_no: int | None = Field(default=None, alias="_seq_no")
    primary_term: int | None = Field(default=None, alias="_primary_term")
    forced_refresh: bool = False

    @property
    def status(self) -> HTTPStatus:
        """Return the REST status matching the write result."""
        if self.result == DocWriteResult.CREATED:
            return HTTPStatus.CREATED
        if self.result == DocWriteResult.NOT_FOUND:
            return HTTPStatus.NOT_FOUND
        return HTTPStatus.OK


class GetResponse(ActionResponse):
    """Response of the get action, also used for multi get items."""

    index: str = Field(alias="_index")
    id: str = Field(alias="_id")
    version: int | None = Field(default=None, alias="_version")
    seq_no: int | None = Field(default=None, alias="_seq_no")
    primary_term: int | None = Field(default=None, alias="_primary_term")
    routing: str | None = Field(default=None, alias="_routing")
    found: bool = False
    source: dict[str, Any] | None = Field(default=None, alias="_source")
    fields: dict[str, Any] | None = None
    error: dict[str, Any] | None = None

    @property
    def is_exists(self) -> bool:
        """Return whether the document was found."""
        return self.found

    @property
    def is_failed(self) -> bool:
        """Return whether fetching this document failed."""
        return self.error is not None


class MultiGetResponse(ActionResponse):
    """Response of the multi get action."""

    docs: tuple[GetResponse, ...] = ()


class BulkItemResponse(ActionResponse):
    """Outcome of one bulk operation."""

    op_type: str
    index: str | None = Field(default=None, alias="_index")
    id: str | None = Field(default=None, alias="_id")
    version: int | None = Field(default=None, alias="_version")
    result: DocWriteResult | None = None
    status: int
    error: dict[str, Any] | None = None

    @model_validator(mode="before")
    @classmethod
    def _unwrap_operation(cls, data: Any) -> Any:
        # {"index": {...}} -> {"op_type": "index", ...}
        if isinstance(data, dict) and "op_type" not in data and len(data) == 1:
            ((op_type, inner),) = data.items()
            if isinstance(inner, dict):
                return {"op_type": op_type, **inner}
        return data

    @property
    def is_failed(self) -> bool:
        """Return whether this operation failed."""
        return self.error is not None


class BulkResponse(ActionResponse):
    """Response of the bulk action."""

    took: int = 0
    errors: bool = False
    items: tuple[BulkItemResponse, ...] = ()

    @property
    def has_failures(self) -> bool:
        """Return whether at least one operation failed."""
        return self.errors or any(item.is_failed for item in self.items)


class ExplainResponse(ActionResponse):
    """Response of the explain action."""

    index: str = Field(alias="_index")
    id: str = Field(alias="_id")
    matched: bool = False
    explanation: dict[str, Any] | None = None

    @property
    def has_explanation(self) -> bool:
        """Return whether the cluster returned an explanation."""
        return self.explanation is not None


# Search


class TotalHits(ActionResponse):
    """Total hit count and whether it is exact."""

    value: int
    relation: str = "eq"


class SearchHit(ActionResponse):
    """One search hit."""

    index: str | None = Field(default=None, alias="_index")
    id: str | None = Field(default=None, alias="_id")
    score: float | None = Field(default=None, alias="_score")
    source: dict[str, Any] | None = Field(default=None, alias="_source")
    sort: list[Any] | None = None
    fields: dict[str, Any] | None = None
    highlight: dict[str, list[str]] | None = None


class SearchHits(ActionResponse):
    """Hits section of a search response."""

    total: TotalHits | None = None
    max_score: float | None = None
    hits: tuple[SearchHit, ...] = ()

    @field_validator("total", mode="before")
    @classmethod
    def _total_from_count(cls, value: Any) -> Any:
        # Older clusters and `rest_total_hits_as_int` report a bare integer.
        if isinstance(value, int):
            return {"value": value, "relation": "eq"}
        return value

    @property
    def total_hits(self) -> int:
        """Return the total hit count, 0 when it was not tracked."""
        return self.total.value if self.total is not None else 0


class SearchResponse(ActionResponse):
    """Response of the search and search scroll actions."""

    took: int = 0
    timed_out: bool = False
    terminated_early: bool | None = None
    shards: ShardStatistics = Field(default_factory=ShardStatistics, alias="_shards")
    hits: SearchHits = Field(default_factory=SearchHits)
    aggregations: dict[str, Any] | None = None
    scroll_id: str | None = Field(default=None, alias="_scroll_id")

    @property
    def status(self) -> HTTPStatus:
        """Return the REST status derived from shard results."""
        return self.shards.status


class ClearScrollResponse(ActionResponse):
    """Response of the clear scroll action."""

    succeeded: bool
    num_freed: int = 0

    @property
    def status(self) -> HTTPStatus:
        """Return OK when the scroll contexts were released."""
        return HTTPStatus.OK if self.succeeded else HTTPStatus.NOT_FOUND


class MultiSearchItem(ActionResponse):
    """One search outcome of a multi search: a response or a failure."""

    response: SearchResponse | None = None
    error: dict[str, Any] | str | None = None
    status: int | None = None

    @model_validator(mode="before")
    @classmethod
    def _split_outcome(cls, data: Any) -> Any:
        if isinstance(data, dict) and "response" not in data:
            if "error" in data:
                return {"error": data["error"], "status": data.get("status")}
            return {"response": data, "status": data.get("status")}
        return data

    @property
    def is_failure(self) -> bool:
        """Return whether this search failed."""
        return self.error is not None


class MultiSearchResponse(ActionResponse):
    """Response of the multi search action."""

    took: int = 0
    responses: tuple[MultiSearchItem, ...] = ()
