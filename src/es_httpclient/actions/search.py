"""Search and scroll actions."""

from __future__ import annotations

from typing import Any

from es_httpclient.actions.base import HttpAction, present_fields
from es_httpclient.domain import (
    ClearScrollRequest,
    ClearScrollResponse,
    HttpMethod,
    MultiSearchRequest,
    MultiSearchResponse,
    SearchRequest,
    SearchResponse,
    SearchScrollRequest,
)
from es_httpclient.transport import HttpRequest


def search_body(request: SearchRequest) -> dict[str, Any]:
    """Build the search body from the fields set on `request`.

    Args:
        request (SearchRequest): Search request.

    Returns:
        dict[str, Any]: Search body, empty when only defaults are used.

    """
    return present_fields(
        query=request.query,
        size=request.size,
        **{"from": request.from_},
        sort=request.sort,
        aggs=request.aggregations,
        _source=request.source,
        track_total_hits=request.track_total_hits,
    )


class SearchAction(HttpAction[SearchRequest, SearchResponse]):
    """`POST /{indices}/_search`."""

    name = "indices:data/read/search"
    response_model = SearchResponse

    def build_request(self, request: SearchRequest) -> HttpRequest:
        http_request = HttpRequest.build(HttpMethod.POST, "_search", indices=request.indices).with_param(
            "scroll",
            request.scroll,
        )
        return self.with_json(http_request, search_body(request))


class SearchScrollAction(HttpAction[SearchScrollRequest, SearchResponse]):
    """`POST /_search/scroll`."""

    name = "indices:data/read/scroll"
    response_model = SearchResponse

    def build_request(self, request: SearchScrollRequest) -> HttpRequest:
        body = present_fields(scroll_id=request.scroll_id, scroll=request.scroll)
        return self.with_json(HttpRequest.build(HttpMethod.POST, "_search", "scroll"), body)


class ClearScrollAction(HttpAction[ClearScrollRequest, ClearScrollResponse]):
    """`DELETE /_search/scroll`."""

    name = "indices:data/read/scroll/clear"
    response_model = ClearScrollResponse

    def build_request(self, request: ClearScrollRequest) -> HttpRequest:
        body = {"scroll_id": list(request.scroll_ids)}
        return self.with_json(HttpRequest.build(HttpMethod.DELETE, "_search", "scroll"), body)


class MultiSearchAction(HttpAction[MultiSearchRequest, MultiSearchResponse]):
    """`POST /_msearch` with one header line and one body line per search."""

    name = "indices:data/read/msearch"
    response_model = MultiSearchResponse

    def build_request(self, request: MultiSearchRequest) -> HttpRequest:
        lines: list[dict[str, Any]] = []
        for search in request.searches:
            header = present_fields(index=",".join(search.indices) or None)
            lines.extend([header, search_body(search)])
        return self.with_ndjson(HttpRequest.build(HttpMethod.POST, "_msearch"), lines)
