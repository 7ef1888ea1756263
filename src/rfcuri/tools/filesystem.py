"""Filesystem tools: convert between local paths and file URIs."""

from typing import Any

from rfcuri.utils.errors import safe_tool_handler
from rfcuri.utils.paths import file_to_uri, uri_to_file


@safe_tool_handler
def handle_path_to_uri(path: str) -> dict[str, Any]:
    """
    Convert a local path to a file URI.

    Args:
        path: Absolute or relative file path (relative to the server's cwd)

    Returns:
        Dict with the file URI
    """
    return {"success": True, "path": path, "uri": file_to_uri(path)}


@safe_tool_handler
def handle_uri_to_path(uri: str) -> dict[str, Any]:
    """
    Convert a file URI to a local path.

    Args:
        uri: File URI

    Returns:
        Dict with the file path
    """
    return {"success": True, "uri": uri, "path": uri_to_file(uri)}
