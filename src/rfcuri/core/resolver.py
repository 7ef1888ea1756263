"""Relative reference resolution (RFC 3986 section 5.2)."""

import logging

from rfcuri.core.dotsegments import merge_paths
from rfcuri.core.types import ParseState, UriComponents
from rfcuri.core.variants import SchemeRules

logger = logging.getLogger(__name__)


def resolve_reference(reference: ParseState, base: UriComponents, rules: SchemeRules) -> None:
    """
    Transform a parsed reference into its target URI, in place.

    Follows the strict algorithm of RFC 3986 section 5.2.2: a scheme in the
    reference is always kept, even when it equals the base scheme. The
    fragment always comes from the reference. For file URIs, an absolute
    path reference keeps the drive letter of the base.

    Args:
        reference: Parse state of the reference, modified in place
        base: Components of an absolute base URI
        rules: Rules of the URI variant being resolved
    """
    if reference.scheme is not None:
        reference.path = rules.remove_dot_segments(reference.path, reference.has_authority)
        return

    reference.scheme = base.scheme

    if reference.has_authority:
        reference.path = rules.remove_dot_segments(reference.path)
        return

    # A base without an authority (e.g. "mailto:") has none to give
    if base.has_authority:
        reference.inherit_authority(base)

    if reference.path == "":
        reference.path = base.path
        if reference.query is None:
            reference.query = base.query
    elif reference.path.startswith("/"):
        prefix = rules.absolute_path_prefix(base.path)
        if prefix is not None:
            reference.path = prefix + reference.path
        reference.path = rules.remove_dot_segments(reference.path, reference.has_authority)
    else:
        merged = merge_paths(base.has_authority, base.path, reference.path)
        reference.path = rules.remove_dot_segments(merged, reference.has_authority)

    logger.debug(f"Resolved '{reference.raw}' to path '{reference.path}'")
