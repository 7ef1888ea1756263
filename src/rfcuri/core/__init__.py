"""RFC 3986 parsing, resolution and normalization machinery."""

from rfcuri.core.builder import build_components, resolve_against
from rfcuri.core.types import ParseState, UriComponents
from rfcuri.core.variants import SCHEME_RULES, SchemeRules, UriKind

__all__ = [
    "build_components",
    "resolve_against",
    "ParseState",
    "UriComponents",
    "SCHEME_RULES",
    "SchemeRules",
    "UriKind",
]
