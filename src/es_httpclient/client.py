"""Client facade exposing one method per action, shaped like the native client.

Every method takes a request value and an optional listener. With a listener the
outcome is delivered to it and the method returns None; without one the method
returns a `PlainActionFuture` completed with the outcome.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

from es_httpclient.actions import (
    BulkAction,
    ClearScrollAction,
    CloseIndexAction,
    CreateIndexAction,
    DeleteAction,
    DeleteIndexAction,
    DeletePipelineAction,
    ExplainAction,
    FlushAction,
    ForceMergeAction,
    GetAction,
    GetIndexAction,
    GetMappingsAction,
    GetPipelineAction,
    IndexAction,
    IndicesAliasesAction,
    IndicesExistsAction,
    MultiGetAction,
    MultiSearchAction,
    OpenIndexAction,
    PutMappingAction,
    PutPipelineAction,
    RefreshAction,
    SearchAction,
    SearchScrollAction,
    UpdateAction,
    ValidateQueryAction,
)
from es_httpclient.listeners import PlainActionFuture

if TYPE_CHECKING:
    from types import TracebackType

    from es_httpclient.actions import HttpAction
    from es_httpclient.domain import (
        AcknowledgedResponse,
        BroadcastResponse,
        BulkRequest,
        BulkResponse,
        ClearScrollRequest,
        ClearScrollResponse,
        CloseIndexRequest,
        CreateIndexRequest,
        CreateIndexResponse,
        DeleteIndexRequest,
        DeletePipelineRequest,
        DeleteRequest,
        DocWriteResponse,
        ExplainRequest,
        ExplainResponse,
        FlushRequest,
        ForceMergeRequest,
        GetIndexRequest,
        GetIndexResponse,
        GetMappingsRequest,
        GetMappingsResponse,
        GetPipelineRequest,
        GetPipelineResponse,
        GetRequest,
        GetResponse,
        IndexRequest,
        IndicesAliasesRequest,
        IndicesExistsRequest,
        IndicesExistsResponse,
        MultiGetRequest,
        MultiGetResponse,
        MultiSearchRequest,
        MultiSearchResponse,
        OpenIndexRequest,
        OpenIndexResponse,
        PutMappingRequest,
        PutPipelineRequest,
        RefreshRequest,
        SearchRequest,
        SearchResponse,
        SearchScrollRequest,
        UpdateRequest,
        ValidateQueryRequest,
        ValidateQueryResponse,
    )
    from es_httpclient.listeners import ActionListener
    from es_httpclient.transport import HttpTransport

ResponseT = TypeVar("ResponseT")


class _ActionNamespace:
    """Run actions over a shared transport."""

    def __init__(self, transport: HttpTransport) -> None:
        self._transport = transport

    def _execute(
        self,
        action_class: type[HttpAction[Any, Any]],
        request: Any,
        listener: ActionListener[ResponseT] | None,
    ) -> PlainActionFuture[ResponseT] | None:
        action = action_class(self._transport)
        if listener is not None:
            action.execute(request, listener)
            return None
        future: PlainActionFuture[ResponseT] = PlainActionFuture()
        action.execute(request, future)
        return future


class IndicesClient(_ActionNamespace):
    """Index lifecycle actions."""

    def create(
        self,
        request: CreateIndexRequest,
        listener: ActionListener[CreateIndexResponse] | None = None,
    ) -> PlainActionFuture[CreateIndexResponse] | None:
        """Create an index."""
        return self._execute(CreateIndexAction, request, listener)

    def delete(
        self,
        request: DeleteIndexRequest,
        listener: ActionListener[AcknowledgedResponse] | None = None,
    ) -> PlainActionFuture[AcknowledgedResponse] | None:
        """Delete indices."""
        return self._execute(DeleteIndexAction, request, listener)

    def get(
        self,
        request: GetIndexRequest,
        listener: ActionListener[GetIndexResponse] | None = None,
    ) -> PlainActionFuture[GetIndexResponse] | None:
        """Fetch aliases, mappings and settings of indices."""
        return self._execute(GetIndexAction, request, listener)

    def exists(
        self,
        request: IndicesExistsRequest,
        listener: ActionListener[IndicesExistsResponse] | None = None,
    ) -> PlainActionFuture[IndicesExistsResponse] | None:
        """Check whether indices exist."""
        return self._execute(IndicesExistsAction, request, listener)

    def open(
        self,
        request: OpenIndexRequest,
        listener: ActionListener[OpenIndexResponse] | None = None,
    ) -> PlainActionFuture[OpenIndexResponse] | None:
        """Open closed indices."""
        return self._execute(OpenIndexAction, request, listener)

    def close(
        self,
        request: CloseIndexRequest,
        listener: ActionListener[AcknowledgedResponse] | None = None,
    ) -> PlainActionFuture[AcknowledgedResponse] | None:
        """Close indices."""
        return self._execute(CloseIndexAction, request, listener)

    def refresh(
        self,
        request: RefreshRequest,
        listener: ActionListener[BroadcastResponse] | None = None,
    ) -> PlainActionFuture[BroadcastResponse] | None:
        """Refresh indices."""
        return self._execute(RefreshAction, request, listener)

    def flush(
        self,
        request: FlushRequest,
        listener: ActionListener[BroadcastResponse] | None = None,
    ) -> PlainActionFuture[BroadcastResponse] | None:
        """Flush indices."""
        return self._execute(FlushAction, request, listener)

    def force_merge(
        self,
        request: ForceMergeRequest,
        listener: ActionListener[BroadcastResponse] | None = None,
    ) -> PlainActionFuture[BroadcastResponse] | None:
        """Force merge index segments."""
        return self._execute(ForceMergeAction, request, listener)

    def update_aliases(
        self,
        request: IndicesAliasesRequest,
        listener: ActionListener[AcknowledgedResponse] | None = None,
    ) -> PlainActionFuture[AcknowledgedResponse] | None:
        """Add or remove aliases."""
        return self._execute(IndicesAliasesAction, request, listener)

    def put_mapping(
        self,
        request: PutMappingRequest,
        listener: ActionListener[AcknowledgedResponse] | None = None,
    ) -> PlainActionFuture[AcknowledgedResponse] | None:
        """Update index mappings."""
        return self._execute(PutMappingAction, request, listener)

    def get_mappings(
        self,
        request: GetMappingsRequest,
        listener: ActionListener[GetMappingsResponse] | None = None,
    ) -> PlainActionFuture[GetMappingsResponse] | None:
        """Fetch index mappings."""
        return self._execute(GetMappingsAction, request, listener)

    def validate_query(
        self,
        request: ValidateQueryRequest,
        listener: ActionListener[ValidateQueryResponse] | None = None,
    ) -> PlainActionFuture[ValidateQueryResponse] | None:
        """Validate a query without running it."""
        return self._execute(ValidateQueryAction, request, listener)


class IngestClient(_ActionNamespace):
    """Ingest pipeline actions."""

    def put_pipeline(
        self,
        request: PutPipelineRequest,
        listener: ActionListener[AcknowledgedResponse] | None = None,
    ) -> PlainActionFuture[AcknowledgedResponse] | None:
        """Store a pipeline."""
        return self._execute(PutPipelineAction, request, listener)

    def get_pipeline(
        self,
        request: GetPipelineRequest,
        listener: ActionListener[GetPipelineResponse] | None = None,
    ) -> PlainActionFuture[GetPipelineResponse] | None:
        """Fetch pipelines."""
        return self._execute(GetPipelineAction, request, listener)

    def delete_pipeline(
        self,
        request: DeletePipelineRequest,
        listener: ActionListener[AcknowledgedResponse] | None = None,
    ) -> PlainActionFuture[AcknowledgedResponse] | None:
        """Delete a pipeline."""
        return self._execute(DeletePipelineAction, request, listener)


class HttpClient(_ActionNamespace):
    """Drop-in substitute for the native transport client, speaking REST."""

    def __init__(self, transport: HttpTransport) -> None:
        """Build a client over `transport`.

        Args:
            transport (HttpTransport): Executes HTTP exchanges.

        """
        super().__init__(transport)
        self.indices = IndicesClient(transport)
        self.ingest = IngestClient(transport)

    def close(self) -> None:
        """Release the connections of the underlying transport."""
        self._transport.close()

    def __enter__(self) -> HttpClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()

    def index(
        self,
        request: IndexRequest,
        listener: ActionListener[DocWriteResponse] | None = None,
    ) -> PlainActionFuture[DocWriteResponse] | None:
        """Index a document."""
        return self._execute(IndexAction, request, listener)

    def get(
        self,
        request: GetRequest,
        listener: ActionListener[GetResponse] | None = None,
    ) -> PlainActionFuture[GetResponse] | None:
        """Fetch a document."""
        return self._execute(GetAction, request, listener)

    def multi_get(
        self,
        request: MultiGetRequest,
        listener: ActionListener[MultiGetResponse] | None = None,
    ) -> PlainActionFuture[MultiGetResponse] | None:
        """Fetch several documents."""
        return self._execute(MultiGetAction, request, listener)

    def update(
        self,
        request: UpdateRequest,
        listener: ActionListener[DocWriteResponse] | None = None,
    ) -> PlainActionFuture[DocWriteResponse] | None:
        """Update a document."""
        return self._execute(UpdateAction, request, listener)

    def delete(
        self,
        request: DeleteRequest,
        listener: ActionListener[DocWriteResponse] | None = None,
    ) -> PlainActionFuture[DocWriteResponse] | None:
        """Delete a document."""
        return self._execute(DeleteAction, request, listener)

    def bulk(
        self,
        request: BulkRequest,
        listener: ActionListener[BulkResponse] | None = None,
    ) -> PlainActionFuture[BulkResponse] | None:
        """Run several write operations at once."""
        return self._execute(BulkAction, request, listener)

    def explain(
        self,
        request: ExplainRequest,
        listener: ActionListener[ExplainResponse] | None = None,
    ) -> PlainActionFuture[ExplainResponse] | None:
        """Explain the score of a document for a query."""
        return self._execute(ExplainAction, request, listener)

    def search(
        self,
        request: SearchRequest,
        listener: ActionListener[SearchResponse] | None = None,
    ) -> PlainActionFuture[SearchResponse] | None:
        """Run a search."""
        return self._execute(SearchAction, request, listener)

    def search_scroll(
        self,
        request: SearchScrollRequest,
        listener: ActionListener[SearchResponse] | None = None,
    ) -> PlainActionFuture[SearchResponse] | None:
        """Fetch the next page of a scroll."""
        return self._execute(SearchScrollAction, request, listener)

    def clear_scroll(
        self,
        request: ClearScrollRequest,
        listener: ActionListener[ClearScrollResponse] | None = None,
    ) -> PlainActionFuture[ClearScrollResponse] | None:
        """Release scroll contexts."""
        return self._execute(ClearScrollAction, request, listener)

    def multi_search(
        self,
        request: MultiSearchRequest,
        listener: ActionListener[MultiSearchResponse] | None = None,
    ) -> PlainActionFuture[MultiSearchResponse] | None:
        """Run several searches."""
        return self._execute(MultiSearchAction, request, listener)
