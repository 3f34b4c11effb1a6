from __future__ import annotations

from http import HTTPStatus

from es_httpclient.domain import (
    RANDOM_SHARD,
    BroadcastResponse,
    BulkResponse,
    ClearScrollResponse,
    DocWriteResponse,
    DocWriteResult,
    GetMappingsResponse,
    GetResponse,
    MultiSearchResponse,
    SearchResponse,
    ValidateQueryResponse,
)

_TOTAL_SHARDS = 2
_TOTAL_HITS = 42
_VERSION = 3


def test_broadcast_response_reads_shard_statistics() -> None:
    response = BroadcastResponse.model_validate({"_shards": {"total": _TOTAL_SHARDS, "successful": 2, "failed": 0}})

    assert response.shards.total == _TOTAL_SHARDS
    assert response.status == HTTPStatus.OK


def test_broadcast_status_reflects_failures() -> None:
    unavailable = BroadcastResponse.model_validate({"_shards": {"total": 2, "successful": 0, "failed": 0}})
    failed = BroadcastResponse.model_validate(
        {
            "_shards": {
                "total": 2,
                "successful": 1,
                "failed": 1,
                "failures": [{"index": "idx", "shard": 0, "status": "BAD_REQUEST", "reason": {"type": "x"}}],
            },
        },
    )

    assert unavailable.status == HTTPStatus.SERVICE_UNAVAILABLE
    assert failed.status == HTTPStatus.BAD_REQUEST


def test_doc_write_response_maps_wire_fields() -> None:
    response = DocWriteResponse.model_validate(
        {
            "_index": "books",
            "_id": "1",
            "_version": _VERSION,
            "result": "created",
            "_shards": {"total": 2, "successful": 1, "failed": 0},
            "_seq_no": 0,
            "_primary_term": 1,
        },
    )

    assert response.index == "books"
    assert response.id == "1"
    assert response.version == _VERSION
    assert response.result == DocWriteResult.CREATED
    assert response.status == HTTPStatus.CREATED


def test_get_response_exposes_source() -> None:
    response = GetResponse.model_validate({"_index": "books", "_id": "1", "found": True, "_source": {"title": "Dune"}})

    assert response.is_exists
    assert response.source == {"title": "Dune"}
    assert not response.is_failed


def test_get_mappings_response_unwraps_index_entries() -> None:
    payload = {"books": {"mappings": {"properties": {"title": {"type": "text"}}}}, "empty": {}}

    response = GetMappingsResponse.model_validate(payload)

    assert response.mappings == {"books": {"properties": {"title": {"type": "text"}}}, "empty": {}}


def test_validate_query_response_defaults_missing_shard() -> None:
    response = ValidateQueryResponse.model_validate(
        {
            "_shards": {"total": 1, "successful": 1, "failed": 0},
            "valid": True,
            "explanations": [{"index": "books", "valid": True, "explanation": "+*:*"}],
        },
    )

    assert response.valid
    assert response.explanations[0].shard == RANDOM_SHARD
    assert response.explanations[0].explanation == "+*:*"


def test_search_response_accepts_object_and_integer_totals() -> None:
    modern = SearchResponse.model_validate({"hits": {"total": {"value": _TOTAL_HITS, "relation": "gte"}, "hits": []}})
    legacy = SearchResponse.model_validate({"hits": {"total": _TOTAL_HITS, "hits": []}})
    untracked = SearchResponse.model_validate({"hits": {"hits": []}})

    assert modern.hits.total_hits == _TOTAL_HITS
    assert modern.hits.total is not None
    assert modern.hits.total.relation == "gte"
    assert legacy.hits.total_hits == _TOTAL_HITS
    assert untracked.hits.total_hits == 0


def test_search_response_reads_hits_and_scroll_id() -> None:
    response = SearchResponse.model_validate(
        {
            "_scroll_id": "scroll-1",
            "took": 3,
            "hits": {
                "total": {"value": 1, "relation": "eq"},
                "max_score": 1.0,
                "hits": [{"_index": "books", "_id": "1", "_score": 1.0, "_source": {"title": "Dune"}}],
            },
        },
    )

    assert response.scroll_id == "scroll-1"
    assert response.hits.hits[0].id == "1"
    assert response.hits.hits[0].source == {"title": "Dune"}


def test_bulk_response_unwraps_operation_items() -> None:
    response = BulkResponse.model_validate(
        {
            "took": 5,
            "errors": True,
            "items": [
                {"index": {"_index": "books", "_id": "1", "status": 201, "result": "created"}},
                {"delete": {"_index": "books", "_id": "2", "status": 404, "result": "not_found"}},
                {"update": {"_index": "books", "_id": "3", "status": 404, "error": {"type": "document_missing"}}},
            ],
        },
    )

    assert [item.op_type for item in response.items] == ["index", "delete", "update"]
    assert response.items[0].result == DocWriteResult.CREATED
    assert response.items[2].is_failed
    assert response.has_failures


def test_multi_search_response_separates_failures() -> None:
    response = MultiSearchResponse.model_validate(
        {
            "took": 1,
            "responses": [
                {"hits": {"total": {"value": 0, "relation": "eq"}, "hits": []}, "status": 200},
                {"error": {"type": "index_not_found_exception"}, "status": 404},
            ],
        },
    )

    assert not response.responses[0].is_failure
    assert response.responses[0].response is not None
    assert response.responses[0].response.hits.total_hits == 0
    assert response.responses[1].is_failure
    assert response.responses[1].status == HTTPStatus.NOT_FOUND


def test_clear_scroll_status() -> None:
    assert ClearScrollResponse(succeeded=True, num_freed=1).status == HTTPStatus.OK
    assert ClearScrollResponse(succeeded=False).status == HTTPStatus.NOT_FOUND
