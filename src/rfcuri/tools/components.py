"""Component tools: parse, normalize and compare URIs."""

import logging
from typing import Any

from rfcuri.uri import uri_class
from rfcuri.utils.errors import safe_tool_handler

logger = logging.getLogger(__name__)


@safe_tool_handler
def handle_parse(uri: str, kind: str = "generic") -> dict[str, Any]:
    """
    Split a URI into its components.

    Args:
        uri: URI reference to parse
        kind: URI kind - "generic", "http" or "file"

    Returns:
        Dict with the recomposed URI and each component
    """
    parsed = uri_class(kind)(uri)
    return {"success": True, "kind": parsed.kind.value, **parsed.to_dict()}


@safe_tool_handler
def handle_normalize(uri: str, kind: str = "generic") -> dict[str, Any]:
    """
    Normalize a URI (case, percent-encoding, default port, dot segments).

    Args:
        uri: URI reference to normalize
        kind: URI kind - "generic", "http" or "file"

    Returns:
        Dict with the original and the normalized URI
    """
    parsed = uri_class(kind)(uri)
    original = parsed.to_string()
    normalized = parsed.normalize()

    return {
        "success": True,
        "original": original,
        "changed": original != normalized.to_string(),
        **normalized.to_dict(),
    }


@safe_tool_handler
def handle_equals(
    first: str,
    second: str,
    normalized: bool = False,
    kind: str = "generic",
) -> dict[str, Any]:
    """
    Compare two URIs component by component.

    Args:
        first: First URI
        second: Second URI
        normalized: Compare the normalized forms
        kind: URI kind - "generic", "http" or "file"

    Returns:
        Dict with the comparison result
    """
    cls = uri_class(kind)
    first_uri = cls(first)
    second_uri = cls(second)
    equal = first_uri.equals(second_uri, normalized=normalized)
    logger.debug(f"Compared '{first}' and '{second}' (normalized={normalized}): {equal}")

    return {
        "success": True,
        "equal": equal,
        "normalized": normalized,
        "first": first_uri.to_string(),
        "second": second_uri.to_string(),
    }
