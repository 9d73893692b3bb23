"""Middleware — Protocol-based, no inheritance required.

A middleware is any callable matching:
    async def mw(request: Request, next: Next) -> Response

Registered with ``Router.use()`` and run by ``Router.dispatch()``.
"""

from perch.middleware.protocol import Middleware, Next

__all__ = [
    "Middleware",
    "Next",
]
