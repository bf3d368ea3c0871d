# tools package for the ClickSend MCP server
# Public modules in this package expose `ENDPOINTS: tuple[EndpointDefinition, ...]`.
# `load_endpoints` imports every module here (names starting with "_" are skipped) and
# `ToolRegistry` turns each definition into a callable EndpointTool.
from __future__ import annotations

import logging
import pkgutil
from importlib import import_module
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional

import httpx

from clicksend_mcp.core.config import APIConfig
from clicksend_mcp.core.models import EndpointDefinition, ToolResult

from ._endpoint import EndpointTool

logger = logging.getLogger(__name__)

__all__ = ["EndpointTool", "ToolRegistry", "load_endpoints"]


def load_endpoints() -> List[EndpointDefinition]:
    """Collect endpoint definitions from every public module of this package, in module order."""
    definitions: List[EndpointDefinition] = []
    seen: Dict[str, str] = {}
    tools_path = Path(__file__).resolve().parent
    for _, name, _ in sorted(pkgutil.iter_modules([str(tools_path)]), key=lambda m: m.name):
        if name.startswith("_"):
            continue
        module_name = f"{__name__}.{name}"
        mod = import_module(module_name)
        endpoints = getattr(mod, "ENDPOINTS", None)
        if endpoints is None:
            logger.warning(f"Tools module {module_name} has no ENDPOINTS table; skipping")
            continue
        for definition in endpoints:
            if definition.name in seen:
                raise ValueError(
                    f"Duplicate tool name {definition.name!r} in {module_name} and {seen[definition.name]}"
                )
            seen[definition.name] = module_name
            definitions.append(definition)
        logger.debug(f"Imported tools module: {module_name} ({len(endpoints)} endpoints)")
    return definitions


class ToolRegistry:
    """Name-indexed set of EndpointTools sharing one read-only APIConfig."""

    def __init__(
        self,
        config: APIConfig,
        definitions: Optional[Iterable[EndpointDefinition]] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        if definitions is None:
            definitions = load_endpoints()
        self.config = config
        self._tools: Dict[str, EndpointTool] = {}
        for definition in definitions:
            if definition.name in self._tools:
                raise ValueError(f"Duplicate tool name {definition.name!r}")
            self._tools[definition.name] = EndpointTool(definition, config, client=client)

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)

    def __iter__(self) -> Iterator[EndpointTool]:
        return iter(self._tools.values())

    def names(self) -> List[str]:
        return list(self._tools)

    def get(self, name: str) -> Optional[EndpointTool]:
        return self._tools.get(name)

    def definitions(self) -> List[EndpointDefinition]:
        return [tool.definition for tool in self._tools.values()]

    async def call(self, name: str, arguments=None) -> ToolResult:
        tool = self._tools.get(name)
        if tool is None:
            return ToolResult.error(f"Unknown tool: {name}")
        return await tool(arguments)
