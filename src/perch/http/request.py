"""Immutable HTTP request.

Produced by the transport layer, read-only to the router. The url is
kept exactly as received; ``path`` is the part the router matches on.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request.

    ``url`` may carry a ``?query`` and/or ``#fragment`` suffix.
    ``method`` is compared case-sensitively against registered routes;
    no normalization happens here.
    """

    url: str
    method: str
    headers: Mapping[str, str] = field(default_factory=dict)
    body: str | None = None

    def __post_init__(self) -> None:
        # Snapshot the caller's mapping so later mutation can't leak in
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))

    def __hash__(self) -> int:
        return hash((self.url, self.method, frozenset(self.headers.items()), self.body))

    # -- Computed properties --

    @property
    def path(self) -> str:
        """The url with any fragment, then any query string, removed."""
        return self.url.split("#", 1)[0].split("?", 1)[0]

    @property
    def query_string(self) -> str:
        """Raw text between the first ``?`` and the fragment, or ``""``."""
        without_fragment = self.url.split("#", 1)[0]
        if "?" not in without_fragment:
            return ""
        return without_fragment.split("?", 1)[1]

    @property
    def fragment(self) -> str:
        """Raw text after the first ``#``, or ``""``."""
        if "#" not in self.url:
            return ""
        return self.url.split("#", 1)[1]
