import pytest

from clicksend_mcp.core.config import APIConfig
from clicksend_mcp.core.models import EndpointDefinition
from clicksend_mcp.tools import EndpointTool, ToolRegistry, load_endpoints

from conftest import run

COUNTRIES = EndpointDefinition(
    name="get_countries", title="Get all Countries", description="List countries", method="GET", path="/countries"
)


def test_load_endpoints_skips_private_modules():
    names = [d.name for d in load_endpoints()]

    assert "get_countries" in names
    assert "post_fax_send" in names
    assert len(names) == len(set(names))


def test_registry_lookup(config):
    registry = ToolRegistry(config)

    assert len(registry) == 24
    assert "get_fax_history" in registry
    assert "nope" not in registry
    tool = registry.get("get_fax_history")
    assert isinstance(tool, EndpointTool)
    assert tool.config is config
    assert registry.get("nope") is None
    assert [t.name for t in registry] == registry.names()


def test_registry_rejects_duplicate_names(config):
    with pytest.raises(ValueError, match="Duplicate tool name"):
        ToolRegistry(config, definitions=[COUNTRIES, COUNTRIES])


def test_unknown_tool_is_an_error_result(config, upstream):
    registry = ToolRegistry(config, definitions=[COUNTRIES], client=upstream.client())

    result = run(registry.call("get_country", {}))

    assert result.is_error
    assert result.text == "Unknown tool: get_country"
    assert upstream.requests == []


def test_tool_without_shared_client_opens_its_own(monkeypatch):
    import httpx

    created = []

    class RecordingClient(httpx.AsyncClient):
        def __init__(self, **kwargs):
            created.append(kwargs)
            super().__init__(transport=httpx.MockTransport(lambda request: httpx.Response(200, text="ok")), **kwargs)

    monkeypatch.setattr(httpx, "AsyncClient", RecordingClient)
    registry = ToolRegistry(APIConfig(base_url="https://api.test", timeout=7.5), definitions=[COUNTRIES])

    first = run(registry.call("get_countries"))
    second = run(registry.call("get_countries"))

    assert first.text == second.text == "ok"
    assert created == [{"timeout": 7.5}, {"timeout": 7.5}]
