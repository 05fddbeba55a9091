"""Tests for the HTTP surface and the stdio transport."""

import asyncio
import io
import json
import shutil

import pytest
from fastapi.testclient import TestClient

from fluentui_docs import __version__, server
from fluentui_docs.config import Settings
from fluentui_docs.errors import DocsRootNotFoundError
from fluentui_docs.mcp.jsonrpc import INDEX_NOT_READY, MCP_PROTOCOL_VERSION
from fluentui_docs.mcp.stdio import serve
from fluentui_docs.mcp.transport import ToolDispatcher
from fluentui_docs.sources import create_index_manager

from .conftest import INDEXED_COUNT, write_corpus


@pytest.fixture
def client(monkeypatch, test_settings):
    monkeypatch.setattr(server, "settings", test_settings)
    with TestClient(server.app) as test_client:
        yield test_client


@pytest.fixture
def empty_client(monkeypatch, tmp_path):
    root = tmp_path / "empty"
    root.mkdir()
    monkeypatch.setattr(server, "settings", Settings(docs_path=root))
    with TestClient(server.app) as test_client:
        yield test_client


def rpc(client, method, params=None, id=1):
    body = {"jsonrpc": "2.0", "id": id, "method": method}
    if params is not None:
        body["params"] = params
    return client.post("/mcp", json=body)


# ============ HEALTH ============


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "healthy"
    assert r.json()["version"] == __version__
    assert r.headers["x-request-id"]


def test_ready_after_initial_build(client):
    r = client.get("/ready")
    assert r.status_code == 200
    assert r.json()["status"] == "ready"
    assert r.json()["generation"] == 1


def test_root(client):
    r = client.get("/")
    assert r.status_code == 200
    assert r.json()["name"] == "fluentui-v9-docs"


def test_not_ready_without_documents(empty_client):
    r = empty_client.get("/ready")
    assert r.status_code == 503
    assert r.json()["checks"]["index"] is False


def test_startup_fails_without_docs_root(monkeypatch, tmp_path):
    monkeypatch.setattr(server, "settings", Settings(docs_path=tmp_path / "missing"))
    with pytest.raises(DocsRootNotFoundError, match="FLUENTUI_DOCS_PATH"):
        with TestClient(server.app):
            pass


def test_default_docs_root_is_under_working_directory(monkeypatch, tmp_path):
    monkeypatch.delenv("FLUENTUI_DOCS_PATH", raising=False)
    monkeypatch.chdir(tmp_path)
    config = Settings()
    assert config.resolved_docs_path == (tmp_path / "docs" / "v9").resolve()

    with pytest.raises(DocsRootNotFoundError):
        create_index_manager(config)

    write_corpus(tmp_path / "docs" / "v9")
    assert create_index_manager(config).source_root == config.resolved_docs_path


# ============ JSON-RPC ============


def test_initialize(client):
    r = rpc(client, "initialize", {})
    result = r.json()["result"]
    assert result["protocolVersion"] == MCP_PROTOCOL_VERSION
    assert result["serverInfo"] == {"name": "fluentui-v9-docs", "version": __version__}
    assert result["capabilities"] == {"tools": {}}


def test_tools_list(client):
    tools = rpc(client, "tools/list").json()["result"]["tools"]
    assert len(tools) == 12
    assert all("inputSchema" in tool for tool in tools)


def test_tools_call(client):
    r = rpc(client, "tools/call", {"name": "query_component", "arguments": {"componentName": "checkbox"}})
    result = r.json()["result"]
    assert result["isError"] is False
    payload = json.loads(result["content"][0]["text"])
    assert payload["found"] is True
    assert payload["document"]["title"] == "Checkbox"


def test_tools_call_reports_tool_errors(client):
    r = rpc(client, "tools/call", {"name": "search_docs", "arguments": {}})
    assert r.json()["result"]["isError"] is True


def test_tools_call_unknown_tool(client):
    r = rpc(client, "tools/call", {"name": "drop_index", "arguments": {}})
    assert r.json()["error"]["code"] == -32602


def test_unknown_method(client):
    assert rpc(client, "resources/list").json()["error"]["code"] == -32601


def test_ping(client):
    assert rpc(client, "ping").json()["result"] == {}


def test_notification_has_no_response(client):
    r = client.post("/mcp", json={"jsonrpc": "2.0", "method": "notifications/initialized"})
    assert r.status_code == 204


def test_batch(client):
    r = client.post(
        "/mcp",
        json=[
            {"jsonrpc": "2.0", "id": 1, "method": "ping"},
            {"jsonrpc": "2.0", "method": "notifications/initialized"},
            {"jsonrpc": "2.0", "id": 2, "method": "tools/list"},
        ],
    )
    assert [item["id"] for item in r.json()] == [1, 2]


def test_parse_error(client):
    r = client.post("/mcp", content=b"{not json", headers={"Content-Type": "application/json"})
    assert r.status_code == 400
    assert r.json()["error"]["code"] == -32700


def test_tools_call_before_index_is_ready(empty_client):
    r = rpc(empty_client, "tools/call", {"name": "search_docs", "arguments": {"query": "input"}})
    assert r.json()["error"]["code"] == INDEX_NOT_READY


# ============ REST ============


def test_tool_endpoint(client):
    r = client.post("/v1/tools", json={"tool": "search_docs", "params": {"query": "input"}})
    body = r.json()
    assert r.status_code == 200
    assert body["success"] is True
    assert body["result"]["results"][0]["document"]["title"] == "Input"
    assert body["usage"]["output_tokens"] > 0


def test_tool_endpoint_validation_error_is_not_success(client):
    r = client.post("/v1/tools", json={"tool": "query_component", "params": {}})
    assert r.status_code == 200
    assert r.json()["success"] is False
    assert "invalid parameters" in r.json()["error"]


def test_tool_endpoint_unknown_tool(client):
    r = client.post("/v1/tools", json={"tool": "drop_index", "params": {}})
    assert r.status_code == 422


def test_tool_endpoint_not_ready(empty_client):
    r = empty_client.post("/v1/tools", json={"tool": "list_all_docs"})
    assert r.status_code == 503
    assert r.json()["success"] is False


def test_stats(client):
    r = client.get("/v1/stats")
    body = r.json()
    assert r.status_code == 200
    assert body["generation"] == 1
    assert body["documents"] == INDEXED_COUNT
    assert body["failed_files"] == 1
    assert body["by_category"]["forms"] == 5
    assert body["terms"] > 0


def test_stats_not_ready(empty_client):
    assert empty_client.get("/v1/stats").status_code == 503


def test_reindex_endpoint(client):
    r = client.post("/v1/reindex")
    assert r.status_code == 200
    assert r.json()["success"] is True
    assert r.json()["result"]["generation"] == 2


def test_failed_reindex_keeps_serving(client, docs_root):
    shutil.rmtree(docs_root)
    docs_root.mkdir()

    r = client.post("/v1/reindex")
    assert r.json()["success"] is False
    assert r.json()["result"]["active_generation"] == 1

    r = client.post("/v1/tools", json={"tool": "search_docs", "params": {"query": "checkbox"}})
    assert r.json()["result"]["results"][0]["document"]["id"] == "components/forms/checkbox"


def test_reindex_after_empty_start(empty_client, tmp_path):
    write_corpus(tmp_path / "empty")
    assert empty_client.post("/v1/reindex").json()["success"] is True
    assert empty_client.get("/ready").status_code == 200


# ============ STDIO ============


def test_stdio_round_trip(manager, test_settings):
    manager.rebuild()
    dispatcher = ToolDispatcher(manager, test_settings)
    stdin = io.StringIO(
        "\n".join(
            [
                json.dumps({"jsonrpc": "2.0", "id": 1, "method": "initialize", "params": {}}),
                json.dumps({"jsonrpc": "2.0", "method": "notifications/initialized"}),
                "",
                "{broken",
                json.dumps(
                    {
                        "jsonrpc": "2.0",
                        "id": 2,
                        "method": "tools/call",
                        "params": {"name": "list_by_category", "arguments": {"category": "navigation"}},
                    }
                ),
            ]
        )
        + "\n"
    )
    stdout = io.StringIO()

    asyncio.run(serve(dispatcher, stdin, stdout))

    responses = [json.loads(line) for line in stdout.getvalue().splitlines()]
    assert [r.get("id") for r in responses] == [1, None, 2]
    assert responses[1]["error"]["code"] == -32700
    payload = json.loads(responses[2]["result"]["content"][0]["text"])
    assert len(payload["documents"]) == 2
