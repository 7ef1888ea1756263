"""Exceptions and error handling utilities for rfcuri."""

import logging
from collections.abc import Callable
from functools import wraps
from typing import Any, ParamSpec

logger = logging.getLogger(__name__)

P = ParamSpec("P")


class UriSyntaxError(ValueError):
    """Raised when a string can't be parsed as a URI of the requested kind."""

    pass


class UriInternalError(RuntimeError):
    """Raised when the parser ends in an inconsistent state (a parser bug)."""

    pass


def safe_tool_handler(
    func: Callable[P, dict[str, Any]],
) -> Callable[P, dict[str, Any]]:
    """
    Decorator to turn URI errors raised by a tool handler into error payloads.

    Args:
        func: Tool handler returning a JSON-serializable dict

    Returns:
        Decorated handler that never raises rfcuri errors
    """

    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> dict[str, Any]:
        try:
            return func(*args, **kwargs)
        except UriSyntaxError as e:
            logger.warning(f"Invalid URI in {func.__name__}: {e}")
            return format_error_response("Invalid URI", str(e))
        except UriInternalError as e:
            logger.exception(f"Parser failure in {func.__name__}: {e}")
            return format_error_response("Internal parser error", str(e))

    return wrapper


def format_error_response(error: str, details: str | None = None) -> dict[str, Any]:
    """
    Format an error response for MCP tool output.

    Args:
        error: Short error message
        details: Optional detailed information

    Returns:
        Dict with error information
    """
    response: dict[str, Any] = {
        "success": False,
        "error": error,
    }
    if details:
        response["details"] = details
    return response
