"""HTTP-level tests for the FastAPI application."""

import pytest
from fastapi.testclient import TestClient

from toolhost import __version__
from toolhost.config import Settings
from toolhost.server import build_default_registry, create_app


@pytest.fixture
def client(registry) -> TestClient:
    return TestClient(create_app(registry), raise_server_exceptions=False)


class TestMCPEndpoint:
    def test_get_returns_discovery(self, client) -> None:
        r = client.get("/mcp")
        assert r.status_code == 200
        assert r.json() == {
            "name": "weather-server",
            "version": "1.2.3",
            "protocol": "MCP over JSON-RPC 2.0",
        }

    def test_empty_post_is_parse_error(self, client) -> None:
        r = client.post("/mcp", content=b"")
        assert r.status_code == 200
        data = r.json()
        assert data["error"]["code"] == -32700
        assert data["id"] is None

    def test_initialize(self, client) -> None:
        r = client.post("/mcp", json={"jsonrpc": "2.0", "id": 7, "method": "initialize"})
        assert r.status_code == 200
        data = r.json()
        assert data["id"] == 7
        assert data["result"]["protocolVersion"] == "2024-11-05"
        assert data["result"]["serverInfo"] == {"name": "weather-server", "version": "1.2.3"}

    def test_initialized_notification_is_no_content(self, client) -> None:
        r = client.post("/mcp", json={"jsonrpc": "2.0", "method": "notifications/initialized"})
        assert r.status_code == 204
        assert r.content == b""

    def test_tools_call(self, client) -> None:
        r = client.post(
            "/mcp",
            json={
                "jsonrpc": "2.0",
                "id": 1,
                "method": "tools/call",
                "params": {"name": "getWeather", "arguments": {"city": "Paris"}},
            },
        )
        assert r.json()["result"]["content"] == [{"type": "text", "text": "Sunny"}]

    def test_rpc_errors_use_http_200(self, client) -> None:
        r = client.post("/mcp", json={"jsonrpc": "2.0", "id": 1, "method": "nope"})
        assert r.status_code == 200
        assert r.json()["error"]["code"] == -32601

    def test_tool_failure_is_generic_500(self, client) -> None:
        r = client.post(
            "/mcp",
            json={"jsonrpc": "2.0", "id": 1, "method": "tools/call", "params": {"name": "broken"}},
        )
        assert r.status_code == 500
        assert r.json() == {"error": "An internal server error occurred."}
        assert r.headers["x-request-id"]
        assert r.headers["x-content-type-options"] == "nosniff"

    def test_tool_failure_keeps_inbound_request_id(self, client) -> None:
        r = client.post(
            "/mcp",
            json={"jsonrpc": "2.0", "id": 1, "method": "tools/call", "params": {"name": "broken"}},
            headers={"X-Request-Id": "req-500"},
        )
        assert r.status_code == 500
        assert r.headers["x-request-id"] == "req-500"

    @pytest.mark.parametrize("method", ["OPTIONS", "TRACE", "PUT", "DELETE", "PATCH"])
    def test_any_non_post_verb_returns_discovery(self, client, method) -> None:
        r = client.request(method, "/mcp")
        assert r.status_code == 200
        assert r.json() == {
            "name": "weather-server",
            "version": "1.2.3",
            "protocol": "MCP over JSON-RPC 2.0",
        }

    def test_cors_preflight_handled_by_middleware(self, client) -> None:
        r = client.options(
            "/mcp",
            headers={"Origin": "https://client.example", "Access-Control-Request-Method": "POST"},
        )
        assert r.status_code == 200
        assert "access-control-allow-methods" in r.headers

    def test_custom_mcp_path(self, registry) -> None:
        client = TestClient(create_app(registry, mcp_path="/rpc"))
        r = client.post("/rpc", json={"jsonrpc": "2.0", "id": 1, "method": "initialize"})
        assert r.json()["result"]["serverInfo"]["name"] == "weather-server"
        assert client.post("/mcp", json={"jsonrpc": "2.0", "id": 1, "method": "initialize"}).status_code == 404


class TestHTTPErrors:
    def test_not_found_uses_error_shape(self, client) -> None:
        r = client.get("/does-not-exist")
        assert r.status_code == 404
        assert r.json() == {"error": "Not Found"}

    def test_method_not_allowed_uses_error_shape(self, client) -> None:
        r = client.post("/health")
        assert r.status_code == 405
        assert r.json() == {"error": "Method Not Allowed"}


class TestAmbientEndpoints:
    def test_health(self, client) -> None:
        r = client.get("/health")
        assert r.status_code == 200
        data = r.json()
        assert data["status"] == "healthy"
        assert data["version"] == "1.2.3"

    def test_request_id_generated(self, client) -> None:
        r = client.get("/health")
        assert r.headers["x-request-id"]
        assert r.headers["x-content-type-options"] == "nosniff"

    def test_request_id_reused(self, client) -> None:
        r = client.get("/health", headers={"X-Request-Id": "req-123"})
        assert r.headers["x-request-id"] == "req-123"


class TestDefaultRegistry:
    def test_builtin_echo_tool(self) -> None:
        registry = build_default_registry()
        echo = registry.get_tool("echo")
        assert echo is not None
        assert echo({"text": "hi", "upper": True}).call() == "HI"
        assert echo({"text": "hi"}).call() == "hi"

    def test_default_app_serves_echo(self) -> None:
        client = TestClient(create_app())
        r = client.post(
            "/mcp",
            json={"jsonrpc": "2.0", "id": 1, "method": "tools/list"},
        )
        tools = r.json()["result"]["tools"]
        assert [tool["name"] for tool in tools] == ["echo"]
        assert tools[0]["inputSchema"]["properties"]["upper"]["type"] == "boolean"
        assert tools[0]["inputSchema"]["required"] == ["text"]


class TestSettings:
    def test_defaults(self, monkeypatch) -> None:
        monkeypatch.delenv("TOOLHOST_SERVER_NAME", raising=False)
        s = Settings(_env_file=None)
        assert s.server_name == "toolhost"
        assert s.server_version == __version__
        assert s.mcp_path == "/mcp"

    def test_env_overrides(self, monkeypatch) -> None:
        monkeypatch.setenv("TOOLHOST_SERVER_NAME", "weather")
        monkeypatch.setenv("TOOLHOST_PROMPTS", '["p1", "p2"]')
        monkeypatch.setenv("TOOLHOST_CORS_ALLOWED_ORIGINS", "https://a.example, https://b.example")
        s = Settings(_env_file=None)
        assert s.server_name == "weather"
        assert s.prompts == ["p1", "p2"]
        assert s.cors_origins_list == ["https://a.example", "https://b.example"]
