"""Test client for perch routers.

Uses the same Request and Response types as production and sends them
through ``Router.dispatch``, so middleware runs exactly as it would
behind a real transport.
"""

from __future__ import annotations

import json as json_module
from typing import Any

from perch.http.request import Request
from perch.http.response import Response
from perch.routing.router import Router


class TestClient:
    __test__ = False  # Tell pytest this is not a test class
    """Async test client for perch routers.

    Usage::

        async with TestClient(router) as client:
            response = await client.get("/users/42")
            assert response.status_code == 200
    """

    __slots__ = ("router",)

    def __init__(self, router: Router) -> None:
        self.router = router

    async def __aenter__(self) -> TestClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        pass

    async def get(self, url: str, *, headers: dict[str, str] | None = None) -> Response:
        """Send a GET request."""
        return await self.request("GET", url, headers=headers)

    async def post(
        self,
        url: str,
        *,
        headers: dict[str, str] | None = None,
        body: str | None = None,
        json: Any = None,
    ) -> Response:
        """Send a POST request.

        Passing *json* serializes it as the body and sets
        ``Content-Type: application/json`` unless *headers* overrides it.
        """
        extra_headers: dict[str, str] = {}
        if json is not None:
            body = json_module.dumps(json)
            extra_headers["Content-Type"] = "application/json"

        merged = {**extra_headers, **(headers or {})}
        return await self.request("POST", url, headers=merged, body=body)

    async def put(
        self,
        url: str,
        *,
        headers: dict[str, str] | None = None,
        body: str | None = None,
    ) -> Response:
        """Send a PUT request."""
        return await self.request("PUT", url, headers=headers, body=body)

    async def delete(self, url: str, *, headers: dict[str, str] | None = None) -> Response:
        """Send a DELETE request."""
        return await self.request("DELETE", url, headers=headers)

    async def request(
        self,
        method: str,
        url: str,
        *,
        headers: dict[str, str] | None = None,
        body: str | None = None,
    ) -> Response:
        """Send an arbitrary request through the router.

        *method* is passed through verbatim; routes match it
        case-sensitively.
        """
        request = Request(url=url, method=method, headers=headers or {}, body=body)
        return await self.router.dispatch(request)
