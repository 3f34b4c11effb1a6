from __future__ import annotations

from es_httpclient.domain import HttpMethod, RefreshPolicy
from es_httpclient.transport import JSON_CONTENT_TYPE, NDJSON_CONTENT_TYPE, HttpRequest, build_path, format_param


def test_build_path_joins_indices_and_segments() -> None:
    assert build_path("_forcemerge") == "/_forcemerge"
    assert build_path(indices=("a", "b")) == "/a,b"
    assert build_path("_validate", "query", indices=("logs-*",)) == "/logs-*/_validate/query"
    assert build_path() == "/"


def test_build_path_escapes_identifiers() -> None:
    assert build_path("_doc", "a b/c", indices=("idx",)) == "/idx/_doc/a%20b%2Fc"
    assert build_path("_ingest", "pipeline", "my pipeline") == "/_ingest/pipeline/my%20pipeline"


def test_format_param_renders_booleans_and_enums() -> None:
    assert format_param(True) == "true"  # noqa: FBT003
    assert format_param(False) == "false"  # noqa: FBT003
    assert format_param(5) == "5"
    assert format_param(RefreshPolicy.WAIT_UNTIL) == "wait_for"
    assert format_param("30s") == "30s"


def test_with_param_skips_none_and_keeps_order() -> None:
    request = (
        HttpRequest.build(HttpMethod.POST, "_forcemerge")
        .with_param("max_num_segments", None)
        .with_param("only_expunge_deletes", False)  # noqa: FBT003
        .with_param("flush", True)  # noqa: FBT003
    )

    assert request.params == (("only_expunge_deletes", "false"), ("flush", "true"))
    assert request.query == {"only_expunge_deletes": "false", "flush": "true"}


def test_with_param_returns_new_value() -> None:
    base = HttpRequest.build(HttpMethod.GET, indices=("idx",))
    extended = base.with_param("include_defaults", False)  # noqa: FBT003

    assert base.params == ()
    assert extended.params == (("include_defaults", "false"),)


def test_with_body_sets_content_type() -> None:
    request = HttpRequest.build(HttpMethod.PUT, "_ingest", "pipeline", "p1")

    assert request.with_body(b"{}").content_type == JSON_CONTENT_TYPE
    assert request.with_body(b"{}\n", NDJSON_CONTENT_TYPE).content_type == NDJSON_CONTENT_TYPE
    assert request.body is None


def test_build_path_encodes_dot_segments() -> None:
    assert build_path("_doc", "..", indices=("logs",)) == "/logs/_doc/%2E%2E"
    assert build_path("_doc", ".", indices=("logs",)) == "/logs/_doc/%2E"
    assert build_path(indices=("..",)) == "/%2E%2E"
    assert build_path("_ingest", "pipeline", "..") == "/_ingest/pipeline/%2E%2E"
    assert build_path("_doc", "...", indices=("logs",)) == "/logs/_doc/..."
