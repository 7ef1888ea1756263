"""Resolution tools: relative references and base URIs."""

from typing import Any

from rfcuri.uri import FileUri, uri_class
from rfcuri.utils.errors import safe_tool_handler


@safe_tool_handler
def handle_resolve(reference: str, base: str, kind: str = "generic") -> dict[str, Any]:
    """
    Resolve a URI reference against a base URI (RFC 3986 section 5.2).

    Args:
        reference: Relative or absolute URI reference
        base: Absolute base URI
        kind: URI kind - "generic", "http" or "file"

    Returns:
        Dict with the target URI and its components
    """
    resolved = uri_class(kind)(reference, base)
    return {"success": True, "reference": reference, "base": base, **resolved.to_dict()}


@safe_tool_handler
def handle_file_base(uri: str) -> dict[str, Any]:
    """
    Get the base of a file URI: normalized, without query and fragment.

    Args:
        uri: File URI

    Returns:
        Dict with the base URI
    """
    base = FileUri(uri).to_base_uri()
    return {"success": True, "base": base.to_string(), "path": base.path}
