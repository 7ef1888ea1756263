"""Percent-encoding normalization (RFC 3986 section 6.2.2.2)."""

from urllib.parse import unquote_to_bytes

from rfcuri.core.charsets import PCHAR, QUERY_OR_FRAGMENT


def normalize_percent_encoding(value: str, allowed: frozenset[str]) -> str:
    """
    Decode a component, then re-encode every byte outside ``allowed``.

    A literal ``+`` is read as an encoded space, so a decoded ``+`` is
    always written back as ``%2B`` and never as a bare plus. Hex digits
    are emitted in uppercase.

    Args:
        value: Raw component text
        allowed: Characters that may appear unencoded

    Returns:
        The component with minimal, uppercase percent-encoding
    """
    decoded = unquote_to_bytes(value.replace("+", " "))
    chars = []
    for byte in decoded:
        char = chr(byte)
        if byte < 0x80 and char != "+" and char in allowed:
            chars.append(char)
        else:
            chars.append(f"%{byte:02X}")
    return "".join(chars)


def normalize_path_encoding(path: str) -> str:
    """Normalize percent-encoding of a path, one segment at a time."""
    return "/".join(normalize_percent_encoding(segment, PCHAR) for segment in path.split("/"))


def normalize_query_or_fragment_encoding(value: str | None) -> str | None:
    """Normalize percent-encoding of a query or fragment, if there is one."""
    if value is None:
        return None
    return normalize_percent_encoding(value, QUERY_OR_FRAGMENT)
