"""Domain values for es-httpclient: enums, requests and responses."""

from es_httpclient.domain.enums import AliasActionType, DocWriteResult, HttpMethod, OpType, RefreshPolicy
from es_httpclient.domain.requests import (
    ActionRequest,
    AliasAction,
    BulkRequest,
    ClearScrollRequest,
    CloseIndexRequest,
    CreateIndexRequest,
    DeleteIndexRequest,
    DeletePipelineRequest,
    DeleteRequest,
    ExplainRequest,
    FlushRequest,
    ForceMergeRequest,
    GetIndexRequest,
    GetMappingsRequest,
    GetPipelineRequest,
    GetRequest,
    IndexRequest,
    IndicesAliasesRequest,
    IndicesExistsRequest,
    MultiGetItem,
    MultiGetRequest,
    MultiSearchRequest,
    OpenIndexRequest,
    PutMappingRequest,
    PutPipelineRequest,
    RefreshRequest,
    SearchRequest,
    SearchScrollRequest,
    UpdateRequest,
    ValidateQueryRequest,
)
from es_httpclient.domain.responses import (
    RANDOM_SHARD,
    AcknowledgedResponse,
    ActionResponse,
    BroadcastResponse,
    BulkItemResponse,
    BulkResponse,
    ClearScrollResponse,
    CreateIndexResponse,
    DocWriteResponse,
    ExplainResponse,
    GetIndexResponse,
    GetMappingsResponse,
    GetPipelineResponse,
    GetResponse,
    IndexMetadata,
    IndicesExistsResponse,
    MultiGetResponse,
    MultiSearchItem,
    MultiSearchResponse,
    OpenIndexResponse,
    QueryExplanation,
    SearchHit,
    SearchHits,
    SearchResponse,
    ShardFailure,
    ShardStatistics,
    TotalHits,
    ValidateQueryResponse,
)

__all__ = [
    "RANDOM_SHARD",
    "AcknowledgedResponse",
    "ActionRequest",
    "ActionResponse",
    "AliasAction",
    "AliasActionType",
    "BroadcastResponse",
    "BulkItemResponse",
    "BulkRequest",
    "BulkResponse",
    "ClearScrollRequest",
    "ClearScrollResponse",
    "CloseIndexRequest",
    "CreateIndexRequest",
    "CreateIndexResponse",
    "DeleteIndexRequest",
    "DeletePipelineRequest",
    "DeleteRequest",
    "DocWriteResponse",
    "DocWriteResult",
    "ExplainRequest",
    "ExplainResponse",
    "FlushRequest",
    "ForceMergeRequest",
    "GetIndexRequest",
    "GetIndexResponse",
    "GetMappingsRequest",
    "GetMappingsResponse",
    "GetPipelineRequest",
    "GetPipelineResponse",
    "GetRequest",
    "GetResponse",
    "HttpMethod",
    "IndexMetadata",
    "IndexRequest",
    "IndicesAliasesRequest",
    "IndicesExistsRequest",
    "IndicesExistsResponse",
    "MultiGetItem",
    "MultiGetRequest",
    "MultiGetResponse",
    "MultiSearchItem",
    "MultiSearchRequest",
    "MultiSearchResponse",
    "OpType",
    "OpenIndexRequest",
    "OpenIndexResponse",
    "PutMappingRequest",
    "PutPipelineRequest",
    "QueryExplanation",
    "RefreshPolicy",
    "RefreshRequest",
    "SearchHit",
    "SearchHits",
    "SearchRequest",
    "SearchResponse",
    "SearchScrollRequest",
    "ShardFailure",
    "ShardStatistics",
    "TotalHits",
    "UpdateRequest",
    "ValidateQueryRequest",
    "ValidateQueryResponse",
]
