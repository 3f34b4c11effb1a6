from __future__ import annotations

import os
import uuid

import pytest

from es_httpclient import build_http_client
from es_httpclient.domain import (
    CreateIndexRequest,
    DeleteIndexRequest,
    DeletePipelineRequest,
    DeleteRequest,
    ForceMergeRequest,
    GetIndexRequest,
    GetPipelineRequest,
    GetRequest,
    IndexRequest,
    IndicesExistsRequest,
    PutPipelineRequest,
    RefreshPolicy,
    RefreshRequest,
    SearchRequest,
    ValidateQueryRequest,
)
from es_httpclient.errors import SearchEngineError

_LIVE_URL = os.getenv("ES_HTTPCLIENT_TEST_URL")
_WAIT_S = 30.0

pytestmark = pytest.mark.skipif(not _LIVE_URL, reason="ES_HTTPCLIENT_TEST_URL is not set")


@pytest.fixture
def live_client():
    with build_http_client(url=_LIVE_URL, timeout_s=_WAIT_S) as client:
        yield client


@pytest.fixture
def index_name(live_client):
    name = f"es-httpclient-{uuid.uuid4().hex[:12]}"
    yield name
    live_client.indices.delete(DeleteIndexRequest(indices=name)).exception(timeout=_WAIT_S)


def test_live_index_lifecycle(live_client, index_name) -> None:
    created = live_client.indices.create(
        CreateIndexRequest(index=index_name, mappings={"properties": {"title": {"type": "text"}}}),
    ).action_get(_WAIT_S)
    assert created.acknowledged

    exists = live_client.indices.exists(IndicesExistsRequest(indices=index_name)).action_get(_WAIT_S)
    assert exists.exists is True

    metadata = live_client.indices.get(GetIndexRequest(indices=index_name)).action_get(_WAIT_S)
    assert metadata.mappings[index_name]["properties"]["title"]["type"] == "text"

    merged = live_client.indices.force_merge(
        ForceMergeRequest(indices=index_name, max_num_segments=1),
    ).action_get(_WAIT_S)
    assert merged.shards.failed == 0

    deleted = live_client.indices.delete(DeleteIndexRequest(indices=index_name)).action_get(_WAIT_S)
    assert deleted.acknowledged

    gone = live_client.indices.exists(IndicesExistsRequest(indices=index_name)).action_get(_WAIT_S)
    assert gone.exists is False


def test_live_document_round_trip(live_client, index_name) -> None:
    written = live_client.index(
        IndexRequest(index=index_name, id="1", source={"title": "Dune"}, refresh=RefreshPolicy.IMMEDIATE),
    ).action_get(_WAIT_S)
    assert written.id == "1"

    fetched = live_client.get(GetRequest(index=index_name, id="1")).action_get(_WAIT_S)
    assert fetched.source == {"title": "Dune"}

    live_client.indices.refresh(RefreshRequest(indices=index_name)).action_get(_WAIT_S)
    query = {"match": {"title": "dune"}}
    found = live_client.search(SearchRequest(indices=index_name, query=query)).action_get(_WAIT_S)
    assert found.hits.total_hits == 1

    validation = live_client.indices.validate_query(
        ValidateQueryRequest(indices=index_name, query=query, explain=True),
    ).action_get(_WAIT_S)
    assert validation.valid

    live_client.delete(DeleteRequest(index=index_name, id="1", refresh=RefreshPolicy.IMMEDIATE)).action_get(_WAIT_S)
    with pytest.raises(SearchEngineError):
        live_client.get(GetRequest(index=index_name, id="1")).action_get(_WAIT_S)


def test_live_pipeline_lifecycle(live_client, index_name) -> None:
    pipeline_id = f"{index_name}-pipeline"
    source = {"description": "lowercase titles", "processors": [{"lowercase": {"field": "title"}}]}

    stored = live_client.ingest.put_pipeline(PutPipelineRequest(id=pipeline_id, source=source)).action_get(_WAIT_S)
    assert stored.acknowledged

    fetched = live_client.ingest.get_pipeline(GetPipelineRequest(ids=pipeline_id)).action_get(_WAIT_S)
    assert fetched.pipelines[pipeline_id]["processors"] == source["processors"]

    removed = live_client.ingest.delete_pipeline(DeletePipelineRequest(id=pipeline_id)).action_get(_WAIT_S)
    assert removed.acknowledged
