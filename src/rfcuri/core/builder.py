"""Construction of URI components from strings: parse, resolve, post-process."""

import logging

from rfcuri.core.parser import parse_reference
from rfcuri.core.resolver import resolve_reference
from rfcuri.core.types import UriComponents
from rfcuri.core.variants import SchemeRules
from rfcuri.utils.errors import UriSyntaxError

logger = logging.getLogger(__name__)


def build_components(raw: str, base_uri: str | None, rules: SchemeRules) -> UriComponents:
    """
    Parse a URI reference, resolving it against ``base_uri`` if needed.

    The base is only used when the reference has no scheme. It is parsed
    with the same rules as the reference and must be absolute.

    Args:
        raw: URI reference
        base_uri: Optional base URI string
        rules: Rules of the URI variant being built

    Returns:
        Components of the finished URI

    Raises:
        UriSyntaxError: If the reference or the base is invalid
    """
    try:
        state = parse_reference(raw, rules)
        if state.scheme is None and base_uri is not None:
            base = _parse_base(base_uri, rules)
            resolve_reference(state, base, rules)
        rules.post_process(state)
    except UriSyntaxError as e:
        logger.debug(f"Rejected {rules.kind.value} URI '{raw}': {e}")
        raise
    return state.freeze()


def resolve_against(reference: str, base: UriComponents, rules: SchemeRules) -> UriComponents:
    """
    Resolve a reference against already parsed base components.

    Unlike build_components, the resolver also runs when the reference has
    a scheme of its own, which removes the dot segments from its path.

    Raises:
        UriSyntaxError: If the reference is invalid or the base is relative
    """
    if base.scheme is None:
        raise UriSyntaxError("The base URI has to be absolute")
    state = parse_reference(reference, rules)
    resolve_reference(state, base, rules)
    rules.post_process(state)
    return state.freeze()


def _parse_base(base_uri: str, rules: SchemeRules) -> UriComponents:
    try:
        state = parse_reference(base_uri, rules)
        # Resolving against a relative base makes no sense
        if state.scheme is None:
            raise UriSyntaxError("The base URI has to be absolute")
        rules.post_process(state)
    except UriSyntaxError as e:
        raise UriSyntaxError(f"Invalid base URI: {e}") from e
    return state.freeze()
