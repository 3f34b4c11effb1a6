from __future__ import annotations

import json
import os

import pytest

from es_httpclient.cli import build_parser, main

_PARSER_ERROR_EXIT_CODE = 2
_PROXY_URL = "http://proxy.local:8080"
_PROXY_ENV_KEYS = ("HTTP_PROXY", "HTTPS_PROXY", "http_proxy", "https_proxy")
_ACKNOWLEDGED = {"acknowledged": True}


@pytest.fixture
def cli_cluster(cluster, monkeypatch):
    captured: dict[str, object] = {}

    def _fake_build_http_client(**kwargs: object):
        captured.update(kwargs)
        return cluster.client()

    monkeypatch.setattr("es_httpclient.cli.command_handlers.build_http_client", _fake_build_http_client)
    cluster.connection = captured
    return cluster


def test_main_without_subcommand_returns_1(capsys) -> None:
    exit_code = main([])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert "usage:" in captured.out


def test_main_with_unknown_subcommand_returns_parser_error() -> None:
    assert main(["reindex"]) == _PARSER_ERROR_EXIT_CODE


def test_parser_defaults_optional_index_lists_to_empty() -> None:
    args = build_parser().parse_args(["refresh"])

    assert args.indices == []
    assert args.output == "-"


def test_parser_reads_connection_defaults_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("ES_HTTPCLIENT_URL", "http://es.env:9200")
    monkeypatch.setenv("ES_HTTPCLIENT_VERIFY_CERTS", "false")

    args = build_parser().parse_args(["exists", "books"])

    assert args.backend_url == "http://es.env:9200"
    assert args.verify_certs is False


def test_create_index_sends_mappings_and_prints_response(cli_cluster, capsys) -> None:
    cli_cluster.route("PUT", "/books", payload={**_ACKNOWLEDGED, "shards_acknowledged": True, "index": "books"})

    exit_code = main(
        [
            "create-index",
            "books",
            "--mappings",
            '{"properties": {"title": {"type": "text"}}}',
            "--backend-url",
            "http://es.local:9200",
            "--timeout-s",
            "3",
        ],
    )

    assert exit_code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload == {"acknowledged": True, "shards_acknowledged": True, "index": "books"}
    assert json.loads(cli_cluster.last_request.content) == {"mappings": {"properties": {"title": {"type": "text"}}}}
    assert cli_cluster.connection == {"url": "http://es.local:9200", "timeout_s": 3.0, "verify_certs": True}


def test_force_merge_forwards_flags(cli_cluster, capsys) -> None:
    cli_cluster.route("POST", "/books/_forcemerge", payload={"_shards": {"total": 2, "successful": 2, "failed": 0}})

    exit_code = main(["force-merge", "books", "--max-num-segments", "1", "--no-flush"])

    assert exit_code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["_shards"]["successful"] == 2  # noqa: PLR2004
    assert dict(cli_cluster.last_request.url.params) == {
        "max_num_segments": "1",
        "only_expunge_deletes": "false",
        "flush": "false",
    }


def test_exists_reports_missing_index(cli_cluster, capsys) -> None:
    exit_code = main(["exists", "missing"])

    assert exit_code == 0
    assert json.loads(capsys.readouterr().out) == {"exists": False}
    assert cli_cluster.last_request.method == "HEAD"


def test_put_pipeline_reads_source_from_file(cli_cluster, tmp_path, capsys) -> None:
    cli_cluster.route("PUT", "/_ingest/pipeline/lowercase", payload=_ACKNOWLEDGED)
    source = {"processors": [{"lowercase": {"field": "title"}}]}
    source_path = tmp_path / "pipeline.json"
    source_path.write_text(json.dumps(source), encoding="utf-8")

    exit_code = main(["put-pipeline", "lowercase", "--source", f"@{source_path}", "--master-timeout", "1m"])

    assert exit_code == 0
    assert json.loads(capsys.readouterr().out) == _ACKNOWLEDGED
    assert json.loads(cli_cluster.last_request.content) == source
    assert dict(cli_cluster.last_request.url.params) == {"master_timeout": "1m"}


def test_cluster_error_returns_1(cli_cluster, caplog) -> None:
    cli_cluster.route(
        "DELETE",
        "/missing",
        status=404,
        payload={"error": {"type": "index_not_found_exception", "reason": "no such index [missing]"}, "status": 404},
    )

    exit_code = main(["delete-index", "missing"])

    assert exit_code == 1
    assert "index_not_found_exception" in caplog.text


def test_invalid_json_argument_returns_1(cli_cluster) -> None:
    exit_code = main(["validate-query", "books", "--query", "{not json"])

    assert exit_code == 1
    assert cli_cluster.requests == []


def test_empty_backend_url_returns_1() -> None:
    assert main(["refresh", "--backend-url", ""]) == 1


def test_search_writes_output_file(cli_cluster, tmp_path) -> None:
    cli_cluster.route(
        "POST",
        "/books/_search",
        payload={
            "took": 1,
            "timed_out": False,
            "_shards": {"total": 1, "successful": 1, "failed": 0},
            "hits": {"total": {"value": 1, "relation": "eq"}, "hits": [{"_index": "books", "_id": "1"}]},
        },
    )
    output_path = tmp_path / "out" / "search.json"

    exit_code = main(["search", "books", "--size", "1", "--output", str(output_path)])

    assert exit_code == 0
    payload = json.loads(output_path.read_text(encoding="utf-8"))
    assert payload["hits"]["total"]["value"] == 1
    assert json.loads(cli_cluster.last_request.content) == {"size": 1}


def test_proxy_url_sets_proxy_environment(cli_cluster, monkeypatch) -> None:
    for key in _PROXY_ENV_KEYS:
        monkeypatch.setenv(key, "")
    cli_cluster.route("GET", "/_ingest/pipeline", payload={})

    exit_code = main(["get-pipeline", "--proxy-url", _PROXY_URL])

    assert exit_code == 0
    for key in _PROXY_ENV_KEYS:
        assert os.environ[key] == _PROXY_URL
