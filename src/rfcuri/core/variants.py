"""
Scheme variants and the rules each of them applies.

There are three variants: generic URIs (RFC 3986), HTTP(S) URIs (RFC 2616
section 3.2, where an empty path becomes "/") and file URIs (RFC 8089,
with Windows/DOS drive letters kept intact). Each variant is a row in
SCHEME_RULES; the parser, resolver and value types look up the row for
their kind instead of overriding methods.
"""

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

from rfcuri.core.charsets import SCHEME_PATTERN
from rfcuri.core.dotsegments import drive_prefix, remove_dot_segments
from rfcuri.core.types import ParseState
from rfcuri.utils.errors import UriSyntaxError

logger = logging.getLogger(__name__)


class UriKind(Enum):
    """The supported URI variants."""

    GENERIC = "generic"
    HTTP = "http"
    FILE = "file"


def _no_post_processing(state: ParseState) -> None:
    pass


def _no_path_prefix(base_path: str) -> str | None:
    return None


@dataclass(frozen=True)
class SchemeRules:
    """Validation and post-processing hooks of one URI variant."""

    kind: UriKind
    allowed_schemes: frozenset[str] | None = None
    default_ports: Mapping[str, int] = field(default_factory=lambda: MappingProxyType({}))
    protect_drive_letters: bool = False
    slashed_local_paths: bool = False
    post_process: Callable[[ParseState], None] = _no_post_processing
    absolute_path_prefix: Callable[[str], str | None] = _no_path_prefix

    def validate_scheme(self, scheme: str) -> str:
        """
        Check a scheme candidate and return it in lowercase.

        Raises:
            UriSyntaxError: If the scheme is malformed or not allowed
        """
        if not SCHEME_PATTERN.fullmatch(scheme):
            raise UriSyntaxError(f"Invalid scheme: '{scheme}'")
        scheme = scheme.lower()
        if self.allowed_schemes is not None and scheme not in self.allowed_schemes:
            allowed = ", ".join(sorted(self.allowed_schemes))
            raise UriSyntaxError(f"Scheme '{scheme}' not allowed, expected one of: {allowed}")
        return scheme

    def remove_dot_segments(self, path: str, has_authority: bool = True) -> str:
        """
        Remove dot segments, keeping the path readable without an authority.

        Without an authority, a result starting with "//" would read back
        as an authority, so it gets a "/." prefix (RFC 3986 section 5.3). File URIs
        keep their local "///path" form as is.
        """
        path = remove_dot_segments(path, protect_drive_letters=self.protect_drive_letters)
        if not has_authority and not self.slashed_local_paths and path.startswith("//"):
            path = "/." + path
        return path

    def default_port(self, scheme: str | None) -> int | None:
        if scheme is None:
            return None
        return self.default_ports.get(scheme)


def validate_path(state: ParseState) -> None:
    """
    Check the path against the presence of an authority.

    Raises:
        UriSyntaxError: If the path is inconsistent with the authority
    """
    if state.authority is None:
        if state.path.startswith("//"):
            raise UriSyntaxError(
                f"Invalid path: '{state.path}'. Can't begin with '//' if no authority was found"
            )
    elif state.path and not state.path.startswith("/"):
        raise UriSyntaxError(
            f"Invalid path: '{state.path}'. Must begin with '/' when an authority is present"
        )


def _http_post_processing(state: ParseState) -> None:
    # Different from RFC 3986: an empty HTTP path means "/"
    if state.path == "":
        state.path = "/"


def _file_post_processing(state: ParseState) -> None:
    if state.scheme is None:
        raise UriSyntaxError("File URIs must have a scheme")

    if state.path == "":
        raise UriSyntaxError(
            f"File URI '{state.raw}' must have a path. "
            "Is your File URI local and did you use '//' to start the path? That is illegal. "
            "Please use '///' or '/' for local File URIs."
        )

    # "file:/x" and "file:///x" both name a local file; keep the "///" form
    if _starts_with_single_slash(state.path) and not state.host:
        logger.debug(f"Rewriting local file path '{state.path}' to '//{state.path}'")
        state.path = "//" + state.path


def _starts_with_single_slash(path: str) -> bool:
    return path.startswith("/") and not path.startswith("//")


SCHEME_RULES: Mapping[UriKind, SchemeRules] = MappingProxyType(
    {
        UriKind.GENERIC: SchemeRules(kind=UriKind.GENERIC),
        UriKind.HTTP: SchemeRules(
            kind=UriKind.HTTP,
            allowed_schemes=frozenset({"http", "https"}),
            default_ports=MappingProxyType({"http": 80, "https": 443}),
            post_process=_http_post_processing,
        ),
        UriKind.FILE: SchemeRules(
            kind=UriKind.FILE,
            allowed_schemes=frozenset({"file"}),
            protect_drive_letters=True,
            slashed_local_paths=True,
            post_process=_file_post_processing,
            absolute_path_prefix=drive_prefix,
        ),
    }
)
