"""Perch — a minimal HTTP request router.

Registers path/method pairs with handlers, matches requests segment by
segment (``:name`` segments match anything), and answers with the first
matching handler's response or a bare 404.

Basic usage::

    from perch import Request, ResponseBuilder, Router

    router = Router()
    router.get("/users/:id", lambda request: ResponseBuilder.ok().body("hi").build())

    response = router.on_request(Request(url="/users/42?full=1", method="GET"))

Async handlers and middleware::

    response = await router.dispatch(request)
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "Handler",
    "Middleware",
    "Next",
    "PerchError",
    "Request",
    "Response",
    "ResponseBuilder",
    "Route",
    "Router",
    "RouterConfig",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import perch`` fast while providing a clean top-level API.
    """
    if name == "Router":
        from perch.routing.router import Router

        return Router

    if name in ("Route", "Handler"):
        from perch.routing import route as _route

        return getattr(_route, name)

    if name == "RouterConfig":
        from perch.config import RouterConfig

        return RouterConfig

    if name == "Request":
        from perch.http.request import Request

        return Request

    if name in ("Response", "ResponseBuilder"):
        from perch.http import response as _resp

        return getattr(_resp, name)

    if name in ("Middleware", "Next"):
        from perch.middleware import protocol as _mw

        return getattr(_mw, name)

    if name in ("ConfigurationError", "PerchError"):
        from perch import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
