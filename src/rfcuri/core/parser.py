"""
URI reference parser (RFC 3986 section 4.1).

    foo://example.com:8042/over/there?name=ferret#nose
    \\_/   \\______________/\\_________/ \\_________/ \\__/
     |           |            |            |       |
  scheme     authority       path        query  fragment

The parser runs a fixed sequence of stages over the input. Each stage
consumes a prefix of the remaining text and leaves the rest to the next
one, so a character is only ever looked at by the first stage that can
claim it.
"""

from rfcuri.core.charsets import PORT_PATTERN
from rfcuri.core.types import ParseState
from rfcuri.core.variants import SchemeRules, validate_path
from rfcuri.utils.errors import UriInternalError, UriSyntaxError


def scan_until_first_of(value: str, characters: str) -> str:
    """
    Return the prefix of ``value`` before the first of ``characters``.

    The leftmost delimiter of any kind ends the scan. If none of the
    characters occur, the whole string is returned.
    """
    positions = [pos for pos in (value.find(char) for char in characters) if pos != -1]
    if not positions:
        return value
    return value[: min(positions)]


def parse_reference(raw: str, rules: SchemeRules) -> ParseState:
    """
    Split a URI reference into its components.

    Scheme-specific post-processing is not applied here, since it has to
    run after a relative reference has been resolved.

    Args:
        raw: URI reference, surrounding whitespace is ignored
        rules: Rules of the URI variant being parsed

    Returns:
        Parse state with all components filled in

    Raises:
        UriSyntaxError: If the reference is not valid for the variant
        UriInternalError: If input is left over after the last stage
    """
    state = ParseState(raw.strip())

    _parse_scheme(state, rules)
    _parse_authority(state)
    _parse_path(state)
    _parse_query(state)
    _parse_fragment(state)

    if state.remaining:
        raise UriInternalError(
            f"Still something left after parsing '{state.raw}', shouldn't happen: '{state.remaining}'"
        )
    return state


def parse_authority(authority: str) -> tuple[str | None, str | None, str, int | None]:
    """
    Split an authority into username, password, host and port.

    Args:
        authority: Non-empty authority text, without the leading "//"

    Returns:
        Tuple of (username, password, host, port)

    Raises:
        UriSyntaxError: For IPv6 literals and malformed ports
    """
    username = password = None
    remaining = authority

    userinfo, at, host_port = remaining.rpartition("@")
    if at:
        username, colon, password = userinfo.partition(":")
        if not colon:
            password = None
        remaining = host_port

    if remaining.startswith("["):
        raise UriSyntaxError(f"IPv6 addresses are not supported: '{authority}'")

    host, colon, port_text = remaining.rpartition(":")
    if not colon:
        return username, password, remaining, None

    if port_text == "":
        raise UriSyntaxError("Port must not be empty")
    if not PORT_PATTERN.fullmatch(port_text):
        raise UriSyntaxError(f"Port must be numeric: '{port_text}'")
    return username, password, host, int(port_text)


def _parse_scheme(state: ParseState, rules: SchemeRules) -> None:
    pos = state.remaining.find(":")
    if pos == -1:
        return
    candidate = state.remaining[:pos]
    state.scheme = rules.validate_scheme(candidate)
    # skip the ":" as well
    state.consume(pos + 1)


def _parse_authority(state: ParseState) -> None:
    if not state.remaining.startswith("//"):
        return
    state.consume(2)
    authority = scan_until_first_of(state.remaining, "/?#")
    if not authority:
        return
    state.authority = authority
    state.username, state.password, state.host, state.port = parse_authority(authority)
    state.consume(len(authority))


def _parse_path(state: ParseState) -> None:
    # An empty path is still a path
    state.path = scan_until_first_of(state.remaining, "?#")
    validate_path(state)
    state.consume(len(state.path))


def _parse_query(state: ParseState) -> None:
    if not state.remaining.startswith("?"):
        return
    state.consume(1)
    state.query = state.consume(len(scan_until_first_of(state.remaining, "#")))


def _parse_fragment(state: ParseState) -> None:
    if not state.remaining.startswith("#"):
        return
    state.consume(1)
    state.fragment = state.consume(len(state.remaining))
