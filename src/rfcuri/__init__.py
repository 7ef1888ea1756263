"""RFC 3986 URI parsing, normalization and reference resolution."""

from rfcuri.uri import FileUri, Http, Uri, uri_class
from rfcuri.utils.errors import UriInternalError, UriSyntaxError
from rfcuri.utils.paths import file_to_uri, normalize_uri, uri_to_file

__version__ = "0.1.0"

__all__ = [
    "Uri",
    "Http",
    "FileUri",
    "uri_class",
    "UriSyntaxError",
    "UriInternalError",
    "file_to_uri",
    "uri_to_file",
    "normalize_uri",
]
