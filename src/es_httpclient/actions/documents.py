"""Single and multi document actions."""

from __future__ import annotations

from typing import Any

from es_httpclient.actions.base import HttpAction, present_fields
from es_httpclient.domain import (
    BulkRequest,
    BulkResponse,
    DeleteRequest,
    DocWriteResponse,
    ExplainRequest,
    ExplainResponse,
    GetRequest,
    GetResponse,
    HttpMethod,
    IndexRequest,
    MultiGetRequest,
    MultiGetResponse,
    OpType,
    UpdateRequest,
)
from es_httpclient.transport import HttpRequest


def _update_body(request: UpdateRequest) -> dict[str, Any]:
    return present_fields(
        doc=request.doc,
        script=request.script,
        upsert=request.upsert,
        doc_as_upsert=request.doc_as_upsert,
    )


class IndexAction(HttpAction[IndexRequest, DocWriteResponse]):
    """`PUT /{index}/_doc/{id}`, or `POST /{index}/_doc` without an id."""

    name = "indices:data/write/index"
    response_model = DocWriteResponse

    def build_request(self, request: IndexRequest) -> HttpRequest:
        if request.id is None:
            http_request = HttpRequest.build(HttpMethod.POST, "_doc", indices=(request.index,))
        else:
            http_request = HttpRequest.build(HttpMethod.PUT, "_doc", request.id, indices=(request.index,))
        http_request = (
            http_request.with_param("routing", request.routing)
            .with_param("refresh", request.refresh)
            .with_param("op_type", request.op_type)
            .with_param("pipeline", request.pipeline)
        )
        return self.with_json(http_request, request.source)


class GetAction(HttpAction[GetRequest, GetResponse]):
    """`GET /{index}/_doc/{id}`."""

    name = "indices:data/read/get"
    response_model = GetResponse

    def build_request(self, request: GetRequest) -> HttpRequest:
        return (
            HttpRequest.build(HttpMethod.GET, "_doc", request.id, indices=(request.index,))
            .with_param("routing", request.routing)
            .with_param("realtime", request.realtime)
            .with_param("refresh", request.refresh)
            .with_param("_source", request.source)
        )


class MultiGetAction(HttpAction[MultiGetRequest, MultiGetResponse]):
    """`POST /_mget`."""

    name = "indices:data/read/mget"
    response_model = MultiGetResponse

    def build_request(self, request: MultiGetRequest) -> HttpRequest:
        docs = [present_fields(_index=item.index, _id=item.id, routing=item.routing) for item in request.items]
        http_request = (
            HttpRequest.build(HttpMethod.POST, "_mget")
            .with_param("realtime", request.realtime)
            .with_param("refresh", request.refresh)
        )
        return self.with_json(http_request, {"docs": docs})


class UpdateAction(HttpAction[UpdateRequest, DocWriteResponse]):
    """`POST /{index}/_update/{id}`."""

    name = "indices:data/write/update"
    response_model = DocWriteResponse

    def build_request(self, request: UpdateRequest) -> HttpRequest:
        http_request = (
            HttpRequest.build(HttpMethod.POST, "_update", request.id, indices=(request.index,))
            .with_param("routing", request.routing)
            .with_param("refresh", request.refresh)
            .with_param("retry_on_conflict", request.retry_on_conflict)
        )
        return self.with_json(http_request, _update_body(request))


class DeleteAction(HttpAction[DeleteRequest, DocWriteResponse]):
    """`DELETE /{index}/_doc/{id}`."""

    name = "indices:data/write/delete"
    response_model = DocWriteResponse

    def build_request(self, request: DeleteRequest) -> HttpRequest:
        return (
            HttpRequest.build(HttpMethod.DELETE, "_doc", request.id, indices=(request.index,))
            .with_param("routing", request.routing)
            .with_param("refresh", request.refresh)
        )


class BulkAction(HttpAction[BulkRequest, BulkResponse]):
    """`POST /_bulk` with one metadata line (and one source line) per operation."""

    name = "indices:data/write/bulk"
    response_model = BulkResponse

    def build_request(self, request: BulkRequest) -> HttpRequest:
        lines: list[dict[str, Any]] = []
        for operation in request.operations:
            if isinstance(operation, IndexRequest):
                op_type = (operation.op_type or OpType.INDEX).value
                metadata = present_fields(
                    _index=operation.index,
                    _id=operation.id,
                    routing=operation.routing,
                    pipeline=operation.pipeline,
                )
                lines.extend([{op_type: metadata}, operation.source])
            elif isinstance(operation, UpdateRequest):
                metadata = present_fields(
                    _index=operation.index,
                    _id=operation.id,
                    routing=operation.routing,
                    retry_on_conflict=operation.retry_on_conflict,
                )
                lines.extend([{"update": metadata}, _update_body(operation)])
            else:
                metadata = present_fields(_index=operation.index, _id=operation.id, routing=operation.routing)
                lines.append({"delete": metadata})

        http_request = HttpRequest.build(HttpMethod.POST, "_bulk").with_param("refresh", request.refresh)
        return self.with_ndjson(http_request, lines)


class ExplainAction(HttpAction[ExplainRequest, ExplainResponse]):
    """`POST /{index}/_explain/{id}`."""

    name = "indices:data/read/explain"
    response_model = ExplainResponse

    def build_request(self, request: ExplainRequest) -> HttpRequest:
        http_request = HttpRequest.build(HttpMethod.POST, "_explain", request.id, indices=(request.index,)).with_param(
            "routing",
            request.routing,
        )
        return self.with_json(http_request, {"query": request.query})
