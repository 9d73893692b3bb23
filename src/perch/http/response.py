"""HTTP response value and its chainable builder.

``ResponseBuilder`` follows the ``.with_*()`` transformation style: every
configuration call returns a new builder, so a builder can be branched
and built any number of times without one build aliasing another.
"""

from __future__ import annotations

import json as json_module
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any


@dataclass(frozen=True, slots=True)
class Response:
    """An immutable HTTP response.

    The transport layer is responsible for serializing it onto the wire.
    """

    status_code: int = 200
    headers: Mapping[str, str] = field(default_factory=dict)
    body: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))

    def __hash__(self) -> int:
        # Equal header dicts may differ in insertion order
        return hash((self.status_code, frozenset(self.headers.items()), self.body))


@dataclass(frozen=True, slots=True)
class ResponseBuilder:
    """Builds a ``Response`` through immutable transformations.

    Defaults to status 200, no headers and an empty body::

        response = (
            ResponseBuilder.ok()
            .header("Content-Type", "text/plain")
            .body("hello")
            .build()
        )

    Header pairs are kept in call order and collapsed at build time, so
    a later value for the same key wins.
    """

    _status_code: int = 200
    _headers: tuple[tuple[str, str], ...] = ()
    _body: str = ""

    # -- Presets --

    @classmethod
    def ok(cls) -> ResponseBuilder:
        """A builder preset to 200."""
        return cls().status_code(200)

    @classmethod
    def not_found(cls) -> ResponseBuilder:
        """A builder preset to 404."""
        return cls().status_code(404)

    @classmethod
    def internal_server_error(cls) -> ResponseBuilder:
        """A builder preset to 500."""
        return cls().status_code(500)

    @classmethod
    def builder(cls) -> ResponseBuilder:
        """A builder with defaults: 200, no headers, empty body."""
        return cls()

    # -- Chainable transformations --

    def status_code(self, status_code: int) -> ResponseBuilder:
        """Return a new builder with a different status code."""
        return replace(self, _status_code=status_code)

    def header(self, key: str, value: str) -> ResponseBuilder:
        """Return a new builder with *key* set to *value*."""
        return replace(self, _headers=(*self._headers, (key, value)))

    def headers(self, headers: Mapping[str, str]) -> ResponseBuilder:
        """Return a new builder with every pair of *headers* merged in."""
        return replace(self, _headers=(*self._headers, *headers.items()))

    def body(self, body: str) -> ResponseBuilder:
        """Return a new builder with a different body."""
        return replace(self, _body=body)

    def json(self, data: Any) -> ResponseBuilder:
        """Return a new builder with *data* serialized as a JSON body.

        Also sets ``Content-Type: application/json``.
        """
        return self.header("Content-Type", "application/json").body(json_module.dumps(data))

    # -- Terminal --

    def build(self) -> Response:
        """Snapshot the current state into a ``Response``."""
        return Response(
            status_code=self._status_code,
            headers=dict(self._headers),
            body=self._body,
        )
