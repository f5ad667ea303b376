"""Tests for the application orchestrator and CLI entry point."""

from __future__ import annotations

import io
import json
from unittest.mock import AsyncMock, patch

import httpx
import pytest

from esclusterstats.__main__ import build_parser, main
from esclusterstats.app import Application


@pytest.mark.asyncio
async def test_run_prints_metric_lines(sample_settings, cluster_stats, make_client):
    out = io.StringIO()
    handler = lambda request: httpx.Response(200, json=cluster_stats)  # noqa: E731
    async with make_client(handler) as client:
        app = Application(settings=sample_settings, client=client, out=out)
        status = await app.run()

    assert status == 0
    lines = out.getvalue().splitlines()
    assert len(lines) == 15
    assert lines[0].startswith("elasticsearchclusterstats.indices.docs.docs_count\t1250000.000000\t")


@pytest.mark.asyncio
async def test_run_transport_error_exits_nonzero(sample_settings, make_client, caplog):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    out = io.StringIO()
    async with make_client(handler) as client:
        app = Application(settings=sample_settings, client=client, out=out)
        status = await app.run()

    assert status == 1
    assert out.getvalue() == ""
    assert "connection refused" in caplog.text


def test_print_graphs(sample_settings):
    out = io.StringIO()
    app = Application(settings=sample_settings, out=out)
    assert app.print_graphs() == 0
    data = json.loads(out.getvalue())
    assert set(data["graphs"]) == {
        "elasticsearchclusterstats.indices.docs",
        "elasticsearchclusterstats.indices.memory_size",
        "elasticsearchclusterstats.indices.evictions",
    }


def test_application_uses_settings_base_uri(sample_settings):
    app = Application(settings=sample_settings)
    assert app.fetcher.url == "http://es.example.com:9200/_cluster/stats"


# ── CLI ──────────────────────────────────────────────────────────────

def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.scheme is None
    assert args.port is None
    assert args.graphs is False


def test_main_flags_override_config(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    captured = {}

    async def fake_run(self):
        captured["uri"] = self.fetcher.base_uri
        captured["labels"] = [g.label for g in self.graphs]
        return 0

    with patch.object(Application, "run", fake_run):
        status = main([
            "--scheme", "https", "--host", "es1", "--port", "9243",
            "--metric-key-prefix", "prod",
        ])

    assert status == 0
    assert captured["uri"] == "https://es1:9243"
    assert captured["labels"][0] == "Prod Indices Docs"


def test_main_graphs_mode_does_not_fetch(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    run = AsyncMock(return_value=0)
    with patch.object(Application, "run", run):
        status = main(["--graphs", "--metric-key-prefix", "custom"])

    assert status == 0
    run.assert_not_called()
    data = json.loads(capsys.readouterr().out)
    assert "custom.indices.evictions" in data["graphs"]


def test_main_missing_config_exits_nonzero(tmp_path):
    assert main(["-c", str(tmp_path / "missing.yaml")]) == 1


def test_main_unknown_log_level_exits_nonzero(tmp_path, capsys):
    path = tmp_path / "bad.yaml"
    path.write_text("log_level: verbose\n")
    assert main(["-c", str(path), "--graphs"]) == 1
    assert capsys.readouterr().out == ""
