"""MCP server exposing the ClickSend REST API v3 as agent tools."""

__version__ = "0.1.0"
