"""Generic executor shared by every ClickSend tool.

`EndpointTool` turns one argument mapping into exactly one HTTP request described by an
`EndpointDefinition` and converts the response into a `ToolResult`. Every failure is
reported through the result; nothing is raised to the caller.
"""
from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

import httpx

from clicksend_mcp.core.config import APIConfig
from clicksend_mcp.core.models import (
    ArgumentError,
    EndpointDefinition,
    InvocationArguments,
    ToolResult,
)
from clicksend_mcp.utils import format_response_text, get_endpoint

logger = logging.getLogger(__name__)


class _BodyEncodingError(Exception):
    pass


class EndpointTool:
    def __init__(
        self,
        definition: EndpointDefinition,
        config: APIConfig,
        client: httpx.AsyncClient | None = None,
    ):
        self.definition = definition
        self.config = config
        self._client = client

    @property
    def name(self) -> str:
        return self.definition.name

    def __repr__(self) -> str:
        return f"EndpointTool({self.definition.method} {self.definition.path!r})"

    def validate(self, arguments: Any) -> InvocationArguments:
        """Check presence and kind of URL and required parameters; split URL values from body."""
        if arguments is None:
            arguments = {}
        if not isinstance(arguments, Mapping):
            raise ArgumentError("Invalid arguments object")

        definition = self.definition
        url_fields = set(definition.url_fields)
        parsed = InvocationArguments()
        for param in definition.parameters:
            in_url = param.name in url_fields
            label = "path parameter" if in_url else "parameter"
            if param.name not in arguments:
                if in_url or param.required:
                    raise ArgumentError(f"Missing required {label}: {param.name}")
                continue
            value = arguments[param.name]
            if (in_url or param.required) and not param.kind.accepts(value):
                raise ArgumentError(f"Invalid {label}: {param.name}")
            if in_url:
                parsed.url_values[param.name] = value

        if definition.has_body:
            parsed.body = {k: v for k, v in arguments.items() if k not in url_fields}
        return parsed

    def build_request(self, client: httpx.AsyncClient, parsed: InvocationArguments) -> httpx.Request:
        definition = self.definition
        url = get_endpoint(self.config.base_url, definition.path, parsed.url_values)
        headers = {"Accept": "application/json"}
        if self.config.basic_auth:
            headers["Authorization"] = f"Basic {self.config.basic_auth}"

        content = None
        if definition.has_body:
            try:
                content = json.dumps(parsed.body).encode("utf-8")
            except (TypeError, ValueError) as e:
                raise _BodyEncodingError(e) from e
            headers["Content-Type"] = "application/json"
        return client.build_request(definition.method, url, headers=headers, content=content)

    async def __call__(self, arguments: Any = None) -> ToolResult:
        try:
            parsed = self.validate(arguments)
        except ArgumentError as e:
            return ToolResult.error(str(e))

        if self._client is not None:
            return await self._execute(self._client, parsed)

        client_kwargs = {} if self.config.timeout is None else {"timeout": self.config.timeout}
        async with httpx.AsyncClient(**client_kwargs) as client:
            return await self._execute(client, parsed)

    async def _execute(self, client: httpx.AsyncClient, parsed: InvocationArguments) -> ToolResult:
        definition = self.definition
        try:
            request = self.build_request(client, parsed)
        except _BodyEncodingError as e:
            return ToolResult.error(f"Failed to encode request body: {e}")
        except (httpx.InvalidURL, ValueError, TypeError) as e:
            return ToolResult.error(f"Failed to create request: {e}")

        logger.info("%s: %s %s", definition.name, definition.method, definition.path)
        try:
            response = await client.send(request, stream=True)
        except httpx.HTTPError as e:
            logger.warning("%s: request failed: %s", definition.name, e)
            return ToolResult.error(f"Request failed: {e}")

        try:
            await response.aread()
            body = response.text
        except (httpx.HTTPError, httpx.StreamError) as e:
            logger.warning("%s: failed to read response body: %s", definition.name, e)
            return ToolResult.error(f"Failed to read response body: {e}")
        finally:
            await response.aclose()

        if response.status_code >= 400:
            logger.warning("%s: upstream returned HTTP %s", definition.name, response.status_code)
            return ToolResult.error(f"API error: {body}")
        return ToolResult.success(format_response_text(body))
