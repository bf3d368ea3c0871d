import json

import mcp.types as types
import pytest

from clicksend_mcp import server as server_module
from clicksend_mcp.core.config import APIConfig, ConfigError
from clicksend_mcp.core.models import ToolExecutionError
from clicksend_mcp.server import call_registered_tool, create_server, list_tool_definitions
from clicksend_mcp.tools import ToolRegistry

from conftest import FakeUpstream, run


@pytest.fixture
def registry(config, upstream):
    return ToolRegistry(config, client=upstream.client())


def test_list_tool_definitions_covers_registry(registry):
    tools = list_tool_definitions(registry)

    assert [t.name for t in tools] == registry.names()
    send_fax = next(t for t in tools if t.name == "post_fax_send")
    assert send_fax.title == "Send Fax"
    assert send_fax.inputSchema["required"] == ["messages", "to", "file_url"]
    assert "from" in send_fax.inputSchema["properties"]


def test_call_returns_text_content(registry, upstream):
    content = run(call_registered_tool(registry, "get_countries", {}))

    assert len(content) == 1
    assert content[0].type == "text"
    assert json.loads(content[0].text) == json.loads(upstream.body)
    assert upstream.last.url.path.endswith("/countries")


def test_call_error_is_raised_for_the_sdk(registry, upstream):
    with pytest.raises(ToolExecutionError, match="Missing required path parameter: message_id"):
        run(call_registered_tool(registry, "put_sms_message_id_cancel", {}))
    assert upstream.requests == []


def test_upstream_error_body_is_in_the_raised_message(config):
    upstream = FakeUpstream(status=404, body=b'{"response_code": "NOT_FOUND"}')
    registry = ToolRegistry(config, client=upstream.client())

    with pytest.raises(ToolExecutionError) as excinfo:
        run(call_registered_tool(registry, "get_voice_receipts_message_id", {"message_id": "x"}))

    assert str(excinfo.value) == 'API error: {"response_code": "NOT_FOUND"}'


def test_unknown_tool(registry, upstream):
    with pytest.raises(ToolExecutionError, match="Unknown tool: send_pigeon"):
        run(call_registered_tool(registry, "send_pigeon", {}))
    assert upstream.requests == []


def test_create_server_registers_tool_handlers(registry):
    server = create_server(registry, name="clicksend-test")

    assert server.name == "clicksend-test"
    assert types.ListToolsRequest in server.request_handlers
    assert types.CallToolRequest in server.request_handlers

    result = run(server.request_handlers[types.ListToolsRequest](types.ListToolsRequest(method="tools/list")))
    assert {t.name for t in result.root.tools} == set(registry.names())


def test_main_exits_with_message_on_config_error(monkeypatch):
    def broken_config():
        raise ConfigError("config.yaml must contain a mapping at the top level")

    monkeypatch.setattr(server_module, "get_config", broken_config)

    with pytest.raises(SystemExit) as excinfo:
        server_module.main()

    assert excinfo.value.code == "Error: config.yaml must contain a mapping at the top level"


def test_main_exits_with_status_1_on_unhandled_error(monkeypatch, tmp_path, restore_root_logging, capsys):
    async def crashing_run(server):
        raise RuntimeError("stdio closed")

    monkeypatch.setattr(server_module, "get_config", lambda: {"log_dir": str(tmp_path / "logs")})
    monkeypatch.setattr(server_module, "get_api_config", lambda: APIConfig(basic_auth="abc="))
    monkeypatch.setattr(server_module, "run_stdio", crashing_run)

    with pytest.raises(SystemExit) as excinfo:
        server_module.main()

    assert excinfo.value.code == 1
    assert "Unhandled exception occurred" in capsys.readouterr().err


def test_main_runs_server_until_shutdown(monkeypatch, tmp_path, restore_root_logging):
    served = []

    async def fake_run(server):
        served.append(server.name)

    monkeypatch.setattr(server_module, "get_config", lambda: {"log_dir": str(tmp_path / "logs"), "server_name": "sms"})
    monkeypatch.setattr(server_module, "get_api_config", lambda: APIConfig(basic_auth="abc="))
    monkeypatch.setattr(server_module, "run_stdio", fake_run)

    server_module.main()

    assert served == ["sms"]
