"""Character classes from RFC 3986 section 2 and 3."""

import re

UNRESERVED = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-._~")

GEN_DELIMS = frozenset(":/?#[]@")

SUB_DELIMS = frozenset("!$&'()*+,;=")

RESERVED = GEN_DELIMS | SUB_DELIMS

# unreserved / sub-delims / ":" / "@"
PCHAR = UNRESERVED | SUB_DELIMS | frozenset(":@")

# pchar / "/" / "?"
QUERY_OR_FRAGMENT = PCHAR | frozenset("/?")

SCHEME_PATTERN = re.compile(r"[a-zA-Z][a-zA-Z0-9+\-.]*")

PORT_PATTERN = re.compile(r"[0-9]+")

DRIVE_LETTER_PATTERN = re.compile(r"[a-zA-Z]:")
