"""Index lifecycle actions."""

from __future__ import annotations

from http import HTTPStatus
from typing import TYPE_CHECKING

from es_httpclient.actions.base import HttpAction, present_fields, with_master_timeouts
from es_httpclient.domain import (
    AcknowledgedResponse,
    BroadcastResponse,
    CloseIndexRequest,
    CreateIndexRequest,
    CreateIndexResponse,
    DeleteIndexRequest,
    FlushRequest,
    ForceMergeRequest,
    GetIndexRequest,
    GetIndexResponse,
    GetMappingsRequest,
    GetMappingsResponse,
    HttpMethod,
    IndicesAliasesRequest,
    IndicesExistsRequest,
    IndicesExistsResponse,
    OpenIndexRequest,
    OpenIndexResponse,
    PutMappingRequest,
    RefreshRequest,
    ValidateQueryRequest,
    ValidateQueryResponse,
)
from es_httpclient.transport import HttpRequest

if TYPE_CHECKING:
    import httpx


class CreateIndexAction(HttpAction[CreateIndexRequest, CreateIndexResponse]):
    """`PUT /{index}`."""

    name = "indices:admin/create"
    response_model = CreateIndexResponse

    def build_request(self, request: CreateIndexRequest) -> HttpRequest:
        http_request = with_master_timeouts(HttpRequest.build(HttpMethod.PUT, indices=(request.index,)), request)
        http_request = http_request.with_param("wait_for_active_shards", request.wait_for_active_shards)
        body = present_fields(settings=request.settings, mappings=request.mappings, aliases=request.aliases)
        if not body:
            return http_request
        return self.with_json(http_request, body)


class DeleteIndexAction(HttpAction[DeleteIndexRequest, AcknowledgedResponse]):
    """`DELETE /{indices}`."""

    name = "indices:admin/delete"
    response_model = AcknowledgedResponse

    def build_request(self, request: DeleteIndexRequest) -> HttpRequest:
        return with_master_timeouts(HttpRequest.build(HttpMethod.DELETE, indices=request.indices), request)


class GetIndexAction(HttpAction[GetIndexRequest, GetIndexResponse]):
    """`GET /{indices}`."""

    name = "indices:admin/get"
    response_model = GetIndexResponse

    def build_request(self, request: GetIndexRequest) -> HttpRequest:
        return HttpRequest.build(HttpMethod.GET, indices=request.indices).with_param(
            "include_defaults",
            request.include_defaults,
        )

    def parse_response(self, response: httpx.Response) -> GetIndexResponse:
        return GetIndexResponse.model_validate({"metadata": response.json()})


class IndicesExistsAction(HttpAction[IndicesExistsRequest, IndicesExistsResponse]):
    """`HEAD /{indices}`: a 404 answers the question instead of failing."""

    name = "indices:admin/exists"
    response_model = IndicesExistsResponse

    def build_request(self, request: IndicesExistsRequest) -> HttpRequest:
        return HttpRequest.build(HttpMethod.HEAD, indices=request.indices)

    def accepts(self, response: httpx.Response) -> bool:
        return response.is_success or response.status_code == HTTPStatus.NOT_FOUND

    def parse_response(self, response: httpx.Response) -> IndicesExistsResponse:
        return IndicesExistsResponse(exists=response.status_code == HTTPStatus.OK)


class OpenIndexAction(HttpAction[OpenIndexRequest, OpenIndexResponse]):
    """`POST /{indices}/_open`."""

    name = "indices:admin/open"
    response_model = OpenIndexResponse

    def build_request(self, request: OpenIndexRequest) -> HttpRequest:
        return with_master_timeouts(HttpRequest.build(HttpMethod.POST, "_open", indices=request.indices), request)


class CloseIndexAction(HttpAction[CloseIndexRequest, AcknowledgedResponse]):
    """`POST /{indices}/_close`."""

    name = "indices:admin/close"
    response_model = AcknowledgedResponse

    def build_request(self, request: CloseIndexRequest) -> HttpRequest:
        return with_master_timeouts(HttpRequest.build(HttpMethod.POST, "_close", indices=request.indices), request)


class RefreshAction(HttpAction[RefreshRequest, BroadcastResponse]):
    """`POST /{indices}/_refresh`."""

    name = "indices:admin/refresh"
    response_model = BroadcastResponse

    def build_request(self, request: RefreshRequest) -> HttpRequest:
        return HttpRequest.build(HttpMethod.POST, "_refresh", indices=request.indices)


class FlushAction(HttpAction[FlushRequest, BroadcastResponse]):
    """`POST /{indices}/_flush`."""

    name = "indices:admin/flush"
    response_model = BroadcastResponse

    def build_request(self, request: FlushRequest) -> HttpRequest:
        return (
            HttpRequest.build(HttpMethod.POST, "_flush", indices=request.indices)
            .with_param("force", request.force)
            .with_param("wait_if_ongoing", request.wait_if_ongoing)
        )


class ForceMergeAction(HttpAction[ForceMergeRequest, BroadcastResponse]):
    """`POST /{indices}/_forcemerge`."""

    name = "indices:admin/forcemerge"
    response_model = BroadcastResponse

    def build_request(self, request: ForceMergeRequest) -> HttpRequest:
        return (
            HttpRequest.build(HttpMethod.POST, "_forcemerge", indices=request.indices)
            .with_param("max_num_segments", request.max_num_segments)
            .with_param("only_expunge_deletes", request.only_expunge_deletes)
            .with_param("flush", request.flush)
        )


class IndicesAliasesAction(HttpAction[IndicesAliasesRequest, AcknowledgedResponse]):
    """`POST /_aliases`."""

    name = "indices:admin/aliases"
    response_model = AcknowledgedResponse

    def build_request(self, request: IndicesAliasesRequest) -> HttpRequest:
        actions = [
            {
                alias_action.action.value: present_fields(
                    index=alias_action.index,
                    alias=alias_action.alias,
                    filter=alias_action.filter,
                    routing=alias_action.routing,
                    is_write_index=alias_action.is_write_index,
                ),
            }
            for alias_action in request.actions
        ]
        http_request = with_master_timeouts(HttpRequest.build(HttpMethod.POST, "_aliases"), request)
        return self.with_json(http_request, {"actions": actions})


class PutMappingAction(HttpAction[PutMappingRequest, AcknowledgedResponse]):
    """`PUT /{indices}/_mapping`."""

    name = "indices:admin/mapping/put"
    response_model = AcknowledgedResponse

    def build_request(self, request: PutMappingRequest) -> HttpRequest:
        http_request = HttpRequest.build(HttpMethod.PUT, "_mapping", indices=request.indices)
        http_request = with_master_timeouts(http_request, request)
        return self.with_json(http_request, request.source)


class GetMappingsAction(HttpAction[GetMappingsRequest, GetMappingsResponse]):
    """`GET /{indices}/_mapping`."""

    name = "indices:admin/mappings/get"
    response_model = GetMappingsResponse

    def build_request(self, request: GetMappingsRequest) -> HttpRequest:
        return HttpRequest.build(HttpMethod.GET, "_mapping", indices=request.indices)


class ValidateQueryAction(HttpAction[ValidateQueryRequest, ValidateQueryResponse]):
    """`GET /{indices}/_validate/query`."""

    name = "indices:admin/validate/query"
    response_model = ValidateQueryResponse

    def build_request(self, request: ValidateQueryRequest) -> HttpRequest:
        http_request = (
            HttpRequest.build(HttpMethod.GET, "_validate", "query", indices=request.indices)
            .with_param("explain", request.explain)
            .with_param("rewrite", request.rewrite)
            .with_param("all_shards", request.all_shards)
        )
        return self.with_json(http_request, {"query": request.query})
