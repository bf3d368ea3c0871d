import asyncio
import sys
from typing import List, Optional

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from clicksend_mcp.core.config import ConfigError, get_api_config, get_config
from clicksend_mcp.core.logging_config import get_logger, setup_logging
from clicksend_mcp.core.models import ToolExecutionError
from clicksend_mcp.tools import ToolRegistry

logger = get_logger(__name__)

DEFAULT_SERVER_NAME = "clicksend"
INSTRUCTIONS = (
    "Tools for the ClickSend REST API v3: SMS, MMS, fax, voice, post letters, email, "
    "contacts, pricing, numbers, subaccounts and reseller management. Every tool performs "
    "one API request and returns the JSON response."
)


def list_tool_definitions(registry: ToolRegistry) -> List[types.Tool]:
    return [
        types.Tool(
            name=definition.name,
            title=definition.title,
            description=definition.description,
            inputSchema=definition.input_schema(),
        )
        for definition in registry.definitions()
    ]


async def call_registered_tool(registry: ToolRegistry, name: str, arguments: Optional[dict]) -> List[types.TextContent]:
    """Dispatch one tools/call to the registry; error results are raised so the SDK sets isError."""
    result = await registry.call(name, arguments)
    if result.is_error:
        raise ToolExecutionError(result.text)
    return [types.TextContent(type="text", text=result.text)]


def create_server(registry: ToolRegistry, name: str = DEFAULT_SERVER_NAME) -> Server:
    server = Server(name, instructions=INSTRUCTIONS)

    @server.list_tools()
    async def _list_tools() -> List[types.Tool]:
        return list_tool_definitions(registry)

    @server.call_tool()
    async def _call_tool(tool_name: str, arguments: dict) -> List[types.TextContent]:
        return await call_registered_tool(registry, tool_name, arguments)

    logger.info(f"Total tools registered: {len(registry)} , tool names: {registry.names()}")
    return server


async def run_stdio(server: Server) -> None:
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


###################################################### Startup ######################################################

def main() -> None:
    try:
        _cfg = get_config() or {}
    except ConfigError as e:
        sys.exit(f"Error: {e}")

    log = setup_logging(_cfg.get("log_dir"), level=_cfg.get("log_level"))
    log.info("MCP server bootstrap starting.")
    try:
        config = get_api_config()
        if not config.basic_auth:
            log.warning("No ClickSend credential configured; requests are sent without Authorization")
        registry = ToolRegistry(config)
        server = create_server(registry, name=str(_cfg.get("server_name") or DEFAULT_SERVER_NAME))
        log.info("Starting MCP server against %s", config.base_url)
        asyncio.run(run_stdio(server))
        log.info("MCP server shut down.")
    except Exception:
        log.exception("Unhandled exception running MCP server")
        print("Unhandled exception occurred. See the logs directory for details.", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
