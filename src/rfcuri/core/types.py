"""Component containers for parsed URI references."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class UriComponents:
    """
    The components of one URI reference (RFC 3986 section 3).

    ``path`` is always a string: an empty path is still a path. Every
    other component is None when absent, which is different from being
    present and empty (``"http://a/?"`` has an empty query).
    """

    scheme: str | None = None
    username: str | None = None
    password: str | None = None
    host: str | None = None
    port: int | None = None
    path: str = ""
    query: str | None = None
    fragment: str | None = None

    @property
    def has_authority(self) -> bool:
        return self.host is not None

    def to_dict(self) -> dict[str, Any]:
        return {
            "scheme": self.scheme,
            "username": self.username,
            "password": self.password,
            "host": self.host,
            "port": self.port,
            "path": self.path,
            "query": self.query,
            "fragment": self.fragment,
        }


@dataclass
class ParseState:
    """
    Mutable working state used while a reference is parsed and resolved.

    ``remaining`` holds the input not yet consumed by a parsing stage and
    ``authority`` the raw authority text, which only lives as long as the
    parse. ``freeze`` turns the state into an immutable UriComponents.
    """

    raw: str
    remaining: str = ""
    scheme: str | None = None
    authority: str | None = None
    username: str | None = None
    password: str | None = None
    host: str | None = None
    port: int | None = None
    path: str = ""
    query: str | None = None
    fragment: str | None = None

    def __post_init__(self) -> None:
        self.remaining = self.raw

    def consume(self, count: int) -> str:
        """Drop ``count`` characters from the front of the remaining input."""
        head, self.remaining = self.remaining[:count], self.remaining[count:]
        return head

    def inherit_authority(self, base: UriComponents) -> None:
        """Copy userinfo, host and port from a base URI."""
        self.username = base.username
        self.password = base.password
        self.host = base.host
        self.port = base.port

    @property
    def has_authority(self) -> bool:
        return self.host is not None

    def freeze(self) -> UriComponents:
        return UriComponents(
            scheme=self.scheme,
            username=self.username,
            password=self.password,
            host=self.host,
            port=self.port,
            path=self.path,
            query=self.query,
            fragment=self.fragment,
        )
