"""Utility modules for rfcuri."""

from rfcuri.utils.errors import (
    UriInternalError,
    UriSyntaxError,
    format_error_response,
    safe_tool_handler,
)

__all__ = [
    "UriSyntaxError",
    "UriInternalError",
    "format_error_response",
    "safe_tool_handler",
]
