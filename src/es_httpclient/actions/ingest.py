"""Ingest pipeline actions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from es_httpclient.actions.base import HttpAction, with_master_timeouts
from es_httpclient.domain import (
    AcknowledgedResponse,
    DeletePipelineRequest,
    GetPipelineRequest,
    GetPipelineResponse,
    HttpMethod,
    PutPipelineRequest,
)
from es_httpclient.transport import HttpRequest

if TYPE_CHECKING:
    import httpx

_PIPELINE_SEGMENTS = ("_ingest", "pipeline")


class PutPipelineAction(HttpAction[PutPipelineRequest, AcknowledgedResponse]):
    """`PUT /_ingest/pipeline/{id}`."""

    name = "cluster:admin/ingest/pipeline/put"
    response_model = AcknowledgedResponse

    def build_request(self, request: PutPipelineRequest) -> HttpRequest:
        http_request = with_master_timeouts(HttpRequest.build(HttpMethod.PUT, *_PIPELINE_SEGMENTS, request.id), request)
        return self.with_json(http_request, request.source)


class GetPipelineAction(HttpAction[GetPipelineRequest, GetPipelineResponse]):
    """`GET /_ingest/pipeline/{ids}`."""

    name = "cluster:admin/ingest/pipeline/get"
    response_model = GetPipelineResponse

    def build_request(self, request: GetPipelineRequest) -> HttpRequest:
        segments = (*_PIPELINE_SEGMENTS, ",".join(request.ids)) if request.ids else _PIPELINE_SEGMENTS
        return HttpRequest.build(HttpMethod.GET, *segments).with_param("master_timeout", request.master_timeout)

    def parse_response(self, response: httpx.Response) -> GetPipelineResponse:
        return GetPipelineResponse.model_validate({"pipelines": response.json()})


class DeletePipelineAction(HttpAction[DeletePipelineRequest, AcknowledgedResponse]):
    """`DELETE /_ingest/pipeline/{id}`."""

    name = "cluster:admin/ingest/pipeline/delete"
    response_model = AcknowledgedResponse

    def build_request(self, request: DeletePipelineRequest) -> HttpRequest:
        return with_master_timeouts(HttpRequest.build(HttpMethod.DELETE, *_PIPELINE_SEGMENTS, request.id), request)
