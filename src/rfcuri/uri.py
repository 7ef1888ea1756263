"""
URI value types.

Uri handles any URI reference from RFC 3986, Http restricts it to the
http and https schemes, and FileUri to local and remote file URIs.
"""

from dataclasses import replace
from typing import Any, ClassVar

from rfcuri.core import (
    SCHEME_RULES,
    SchemeRules,
    UriComponents,
    UriKind,
    build_components,
    resolve_against,
)
from rfcuri.core.percent import normalize_path_encoding, normalize_query_or_fragment_encoding


class Uri:
    """
    A URI reference (RFC 3986).

    A reference without a scheme is resolved against ``base_uri`` when one
    is given. Construction either succeeds completely or raises
    UriSyntaxError.

    Example:
        >>> str(Uri("../g", "http://a/b/c/d;p?q"))
        'http://a/b/g'
    """

    kind: ClassVar[UriKind] = UriKind.GENERIC

    def __init__(self, uri: str, base_uri: str | None = None) -> None:
        self._components = build_components(uri, base_uri, self.rules)
        self._composed: str | None = None

    @classmethod
    def from_components(cls, components: UriComponents) -> "Uri":
        """Create a value directly from components, skipping the parser."""
        instance = cls.__new__(cls)
        instance._components = components
        instance._composed = None
        return instance

    @property
    def rules(self) -> SchemeRules:
        return SCHEME_RULES[self.kind]

    @property
    def components(self) -> UriComponents:
        return self._components

    @property
    def scheme(self) -> str | None:
        return self._components.scheme

    @property
    def username(self) -> str | None:
        return self._components.username

    @property
    def password(self) -> str | None:
        return self._components.password

    @property
    def host(self) -> str | None:
        return self._components.host

    @property
    def port(self) -> int | None:
        return self._components.port

    @property
    def path(self) -> str:
        return self._components.path

    @property
    def query(self) -> str | None:
        return self._components.query

    @property
    def fragment(self) -> str | None:
        return self._components.fragment

    @property
    def authority(self) -> str | None:
        """The recomposed ``userinfo@host:port``, or None without a host."""
        c = self._components
        if c.host is None:
            return None
        authority = ""
        if c.username is not None:
            authority += c.username
            if c.password is not None:
                authority += ":" + c.password
            authority += "@"
        authority += c.host
        if c.port is not None:
            authority += f":{c.port}"
        return authority

    def normalize(self) -> "Uri":
        """
        Normalize this URI in place and return it.

        Lowercases scheme and host, normalizes the percent-encoding of path,
        query and fragment, drops the port if it is the scheme's default
        and removes dot segments from the path. Username and password are
        left untouched. Normalizing twice gives the same result as once.
        """
        c = self._components
        scheme = c.scheme.lower() if c.scheme is not None else None
        host = c.host.lower() if c.host is not None else None
        port = c.port
        if port is not None and port == self.rules.default_port(scheme):
            port = None
        path = self.rules.remove_dot_segments(
            normalize_path_encoding(c.path), has_authority=host is not None
        )

        self._components = replace(
            c,
            scheme=scheme,
            host=host,
            port=port,
            path=path,
            query=normalize_query_or_fragment_encoding(c.query),
            fragment=normalize_query_or_fragment_encoding(c.fragment),
        )
        self._composed = None
        return self

    def to_string(self) -> str:
        """
        Recompose the components as a string (RFC 3986 section 5.3).

        The result reflects normalization and reference resolution, so it
        can differ from the string the URI was created from.
        """
        if self._composed is None:
            c = self._components
            parts = []
            if c.scheme is not None:
                parts.append(c.scheme + ":")
            if c.host is not None:
                parts.append("//" + self.authority)
            parts.append(c.path)
            if c.query is not None:
                parts.append("?" + c.query)
            if c.fragment is not None:
                parts.append("#" + c.fragment)
            self._composed = "".join(parts)
        return self._composed

    def equals(self, other: "Uri", normalized: bool = False) -> bool:
        """
        Test two URIs for equality, component by component.

        Args:
            other: URI to compare with
            normalized: Compare normalized copies; neither URI is modified

        Returns:
            True if all components are identical
        """
        if normalized:
            return self.copy().normalize().components == other.copy().normalize().components
        return self._components == other.components

    def copy(self) -> "Uri":
        """Return an independent copy of this URI."""
        return self.from_components(self._components)

    def resolve(self, reference: str) -> "Uri":
        """
        Resolve a reference against this URI.

        Args:
            reference: URI reference, relative or absolute

        Returns:
            New URI of the same kind

        Raises:
            UriSyntaxError: If the reference is invalid or this URI is relative
        """
        return self.from_components(resolve_against(reference, self._components, self.rules))

    def to_dict(self) -> dict[str, Any]:
        return {"uri": self.to_string(), **self._components.to_dict()}

    def __copy__(self) -> "Uri":
        return self.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Uri):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash(self._components)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_string()!r})"


class Http(Uri):
    """
    An http or https URI (RFC 2616 section 3.2).

    Different from RFC 3986, an empty path becomes "/". Ports 80 and 443
    are dropped by normalize() for http and https respectively.
    """

    kind = UriKind.HTTP


class FileUri(Uri):
    """
    A file URI.

    A scheme and a non-empty path are required. Local paths are kept in
    the ``file:///path`` form, and Windows drive letters (``file:///c:/``)
    survive ".." segments and absolute-path references.
    """

    kind = UriKind.FILE

    def to_base_uri(self) -> "FileUri":
        """Return a normalized copy without query and fragment."""
        base = self.from_components(replace(self._components, query=None, fragment=None))
        return base.normalize()


URI_CLASSES: dict[str, type[Uri]] = {
    UriKind.GENERIC.value: Uri,
    UriKind.HTTP.value: Http,
    UriKind.FILE.value: FileUri,
}


def uri_class(kind: str) -> type[Uri]:
    """
    Look up the URI class for a kind name.

    Raises:
        ValueError: If the kind is unknown
    """
    try:
        return URI_CLASSES[kind.lower()]
    except KeyError:
        raise ValueError(f"Unknown URI kind: '{kind}', expected one of: {', '.join(URI_CLASSES)}") from None
