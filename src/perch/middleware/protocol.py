"""Middleware protocol and Next type alias.

A middleware is any callable matching::

    async def my_mw(request: Request, next: Next) -> Response: ...

No base class required. Middleware runs only under ``Router.dispatch``;
``Router.on_request`` goes straight to the route table.
"""

from collections.abc import Awaitable, Callable
from typing import Protocol

from perch.http.request import Request
from perch.http.response import Response

# The next step in the middleware chain
type Next = Callable[[Request], Awaitable[Response]]


class Middleware(Protocol):
    """Protocol for perch middleware.

    Accepts both functions and callable objects::

        # Function middleware
        async def timing(request: Request, next: Next) -> Response:
            start = time.monotonic()
            response = await next(request)
            elapsed = time.monotonic() - start
            return replace(response, headers={**response.headers, "X-Time": f"{elapsed:.3f}"})

        # Class middleware
        class RequireToken:
            async def __call__(self, request: Request, next: Next) -> Response:
                if "Authorization" not in request.headers:
                    return ResponseBuilder.builder().status_code(401).build()
                return await next(request)
    """

    async def __call__(self, request: Request, next: Next) -> Response: ...
