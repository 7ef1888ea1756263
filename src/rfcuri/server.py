"""MCP Server setup and tool registration for URI handling."""

import json
import logging
import os

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from rfcuri.tools import (
    handle_equals,
    handle_file_base,
    handle_normalize,
    handle_parse,
    handle_path_to_uri,
    handle_resolve,
    handle_uri_to_path,
)
from rfcuri.uri import URI_CLASSES

logger = logging.getLogger(__name__)

# Create the MCP server instance
server = Server("rfcuri")

_KIND_PROPERTY = {
    "type": "string",
    "enum": list(URI_CLASSES),
    "description": "URI kind: generic (RFC 3986), http (http/https only) or file",
}


def default_kind() -> str:
    """Return the URI kind used when a tool call doesn't name one."""
    return os.environ.get("RFCURI_DEFAULT_KIND", "generic")


@server.list_tools()
async def list_tools() -> list[Tool]:
    """List available URI tools."""
    return [
        Tool(
            name="uri_parse",
            description="Parse a URI reference into scheme, userinfo, host, port, path, query and fragment",
            inputSchema={
                "type": "object",
                "properties": {
                    "uri": {
                        "type": "string",
                        "description": "URI reference to parse",
                    },
                    "kind": _KIND_PROPERTY,
                },
                "required": ["uri"],
            },
        ),
        Tool(
            name="uri_normalize",
            description="Normalize a URI: case, percent-encoding, default port and dot segments",
            inputSchema={
                "type": "object",
                "properties": {
                    "uri": {
                        "type": "string",
                        "description": "URI reference to normalize",
                    },
                    "kind": _KIND_PROPERTY,
                },
                "required": ["uri"],
            },
        ),
        Tool(
            name="uri_resolve",
            description="Resolve a relative URI reference against an absolute base URI (RFC 3986 section 5.2)",
            inputSchema={
                "type": "object",
                "properties": {
                    "reference": {
                        "type": "string",
                        "description": "Relative or absolute URI reference",
                    },
                    "base": {
                        "type": "string",
                        "description": "Absolute base URI",
                    },
                    "kind": _KIND_PROPERTY,
                },
                "required": ["reference", "base"],
            },
        ),
        Tool(
            name="uri_equals",
            description="Compare two URIs component by component",
            inputSchema={
                "type": "object",
                "properties": {
                    "first": {
                        "type": "string",
                        "description": "First URI",
                    },
                    "second": {
                        "type": "string",
                        "description": "Second URI",
                    },
                    "normalized": {
                        "type": "boolean",
                        "description": "Compare normalized forms of both URIs",
                        "default": False,
                    },
                    "kind": _KIND_PROPERTY,
                },
                "required": ["first", "second"],
            },
        ),
        Tool(
            name="file_uri_base",
            description="Get the normalized base of a file URI, without query and fragment",
            inputSchema={
                "type": "object",
                "properties": {
                    "uri": {
                        "type": "string",
                        "description": "File URI",
                    },
                },
                "required": ["uri"],
            },
        ),
        Tool(
            name="path_to_file_uri",
            description="Convert a local file path to a file:// URI",
            inputSchema={
                "type": "object",
                "properties": {
                    "path": {
                        "type": "string",
                        "description": "Absolute or relative file path",
                    },
                },
                "required": ["path"],
            },
        ),
        Tool(
            name="file_uri_to_path",
            description="Convert a file URI to a local file path",
            inputSchema={
                "type": "object",
                "properties": {
                    "uri": {
                        "type": "string",
                        "description": "File URI",
                    },
                },
                "required": ["uri"],
            },
        ),
    ]


@server.call_tool()
async def call_tool(name: str, arguments: dict) -> list[TextContent]:
    """Handle tool calls."""
    logger.debug(f"Tool called: {name} with args: {arguments}")

    try:
        match name:
            case "uri_parse":
                result = handle_parse(
                    uri=arguments["uri"],
                    kind=arguments.get("kind", default_kind()),
                )

            case "uri_normalize":
                result = handle_normalize(
                    uri=arguments["uri"],
                    kind=arguments.get("kind", default_kind()),
                )

            case "uri_resolve":
                result = handle_resolve(
                    reference=arguments["reference"],
                    base=arguments["base"],
                    kind=arguments.get("kind", default_kind()),
                )

            case "uri_equals":
                result = handle_equals(
                    first=arguments["first"],
                    second=arguments["second"],
                    normalized=arguments.get("normalized", False),
                    kind=arguments.get("kind", default_kind()),
                )

            case "file_uri_base":
                result = handle_file_base(uri=arguments["uri"])

            case "path_to_file_uri":
                result = handle_path_to_uri(path=arguments["path"])

            case "file_uri_to_path":
                result = handle_uri_to_path(uri=arguments["uri"])

            case _:
                result = {"error": f"Unknown tool: {name}", "available_tools": "Use list_tools to see available tools"}

    except Exception as e:
        logger.exception(f"Error executing tool {name}: {e}")
        result = {
            "error": str(e),
            "context": {"tool": name, "arguments": arguments},
        }

    return [TextContent(type="text", text=json.dumps(result, indent=2))]


async def run_server() -> None:
    """Run the MCP server using stdio transport."""
    logger.info("rfcuri MCP Server starting...")

    try:
        async with stdio_server() as (read_stream, write_stream):
            await server.run(
                read_stream,
                write_stream,
                server.create_initialization_options(),
            )
    finally:
        logger.info("rfcuri MCP Server stopped")
