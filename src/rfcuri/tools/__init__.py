"""MCP tools for URI handling."""

from rfcuri.tools.components import handle_equals, handle_normalize, handle_parse
from rfcuri.tools.filesystem import handle_path_to_uri, handle_uri_to_path
from rfcuri.tools.resolution import handle_file_base, handle_resolve

__all__ = [
    "handle_parse",
    "handle_normalize",
    "handle_equals",
    "handle_resolve",
    "handle_file_base",
    "handle_path_to_uri",
    "handle_uri_to_path",
]
