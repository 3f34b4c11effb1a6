"""REST action adapters, one per endpoint."""

from es_httpclient.actions.base import HttpAction
from es_httpclient.actions.documents import (
    BulkAction,
    DeleteAction,
    ExplainAction,
    GetAction,
    IndexAction,
    MultiGetAction,
    UpdateAction,
)
from es_httpclient.actions.indices import (
    CloseIndexAction,
    CreateIndexAction,
    DeleteIndexAction,
    FlushAction,
    ForceMergeAction,
    GetIndexAction,
    GetMappingsAction,
    IndicesAliasesAction,
    IndicesExistsAction,
    OpenIndexAction,
    PutMappingAction,
    RefreshAction,
    ValidateQueryAction,
)
from es_httpclient.actions.ingest import DeletePipelineAction, GetPipelineAction, PutPipelineAction
from es_httpclient.actions.search import ClearScrollAction, MultiSearchAction, SearchAction, SearchScrollAction

__all__ = [
    "BulkAction",
    "ClearScrollAction",
    "CloseIndexAction",
    "CreateIndexAction",
    "DeleteAction",
    "DeleteIndexAction",
    "DeletePipelineAction",
    "ExplainAction",
    "FlushAction",
    "ForceMergeAction",
    "GetAction",
    "GetIndexAction",
    "GetMappingsAction",
    "GetPipelineAction",
    "HttpAction",
    "IndexAction",
    "IndicesAliasesAction",
    "IndicesExistsAction",
    "MultiGetAction",
    "MultiSearchAction",
    "OpenIndexAction",
    "PutMappingAction",
    "PutPipelineAction",
    "RefreshAction",
    "SearchAction",
    "SearchScrollAction",
    "UpdateAction",
    "ValidateQueryAction",
]
