"""Conversion between local file paths and file URIs."""

from pathlib import Path
from urllib.parse import unquote

from rfcuri.core.dotsegments import is_drive_letter
from rfcuri.uri import FileUri, Uri


def file_to_uri(file_path: str | Path) -> str:
    """
    Convert a file path to a file:// URI.

    Args:
        file_path: Absolute or relative file path

    Returns:
        File URI string (e.g., "file:///home/user/project/main.py")
    """
    path = Path(file_path).resolve()
    # Use Path.as_uri() for proper encoding
    return FileUri(path.as_uri()).normalize().to_string()


def uri_to_file(uri: str) -> str:
    """
    Convert a file URI to a file path.

    Args:
        uri: File URI string, "file:/path" and "file:///path" are both accepted

    Returns:
        File path string; the host of a remote file URI is dropped

    Raises:
        UriSyntaxError: If the string is not a valid file URI
    """
    file_uri = FileUri(uri)

    # Handle URL encoding
    path = unquote(file_uri.path)

    # Local file URIs keep their path in the "///path" form
    if file_uri.host is None and path.startswith("///"):
        path = path[2:]

    # On Windows, remove leading slash from /C:/path
    if len(path) > 2 and path[0] == "/" and is_drive_letter(path[1:3]):
        path = path[1:]

    return path


def normalize_uri(uri: str) -> str:
    """
    Normalize a URI for consistent comparison.

    Local file URIs are resolved to an absolute path first. File URIs
    with a host are normalized as file URIs, any other URI as a generic
    URI.

    Args:
        uri: URI string

    Returns:
        Normalized URI string
    """
    if uri.lower().startswith("file:"):
        file_uri = FileUri(uri)
        if file_uri.host is None:
            return file_to_uri(uri_to_file(uri))
        return file_uri.normalize().to_string()
    return Uri(uri).normalize().to_string()
