"""Ordered route table with segment-by-segment path matching.

Routes are registered during setup and tried in registration order at
dispatch time. Matching is pure: nothing is cached and nothing about the
table changes while a request is being resolved.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Awaitable, Callable

import anyio

from perch.config import RouterConfig
from perch.errors import ConfigurationError
from perch.http.request import Request
from perch.http.response import Response, ResponseBuilder
from perch.middleware.protocol import Middleware, Next
from perch.routing.route import Handler, Route

logger = logging.getLogger("perch.routing")


class Router:
    """Ordered route table with first-match dispatch.

    Usage::

        router = Router()
        router.get("/users/:id", show_user)
        router.on("/users", "POST", create_user)
        response = router.on_request(Request(url="/users/42", method="GET"))

    ``on_request`` returns whatever the matched handler returns (a
    ``Response`` or an awaitable of one) and never runs middleware.
    ``dispatch`` is the async entry point that runs the middleware chain
    and awaits the handler's result.
    """

    __slots__ = ("_config", "_frozen", "_middleware", "_routes")

    def __init__(self, config: RouterConfig | None = None) -> None:
        self._config = config or RouterConfig()
        self._routes: list[Route] = []
        self._middleware: list[Middleware] = []
        self._frozen = False

    @property
    def config(self) -> RouterConfig:
        return self._config

    @property
    def routes(self) -> tuple[Route, ...]:
        """Registered routes in registration (and therefore match) order."""
        return tuple(self._routes)

    @property
    def middlewares(self) -> tuple[Middleware, ...]:
        """Registered middleware, outermost first."""
        return tuple(self._middleware)

    @property
    def frozen(self) -> bool:
        return self._frozen

    # -- Registration --

    def on(self, path: str, method: str, handler: Handler) -> Router:
        """Append a route for *method* requests to *path*.

        No deduplication: if an identical path and method is already
        registered, the earlier route keeps winning.
        """
        self._check_not_frozen()
        if not callable(handler):
            msg = f"Handler for {method} {path!r} must be callable, got {type(handler).__name__}."
            raise ConfigurationError(msg)
        self._routes.append(Route(path=path, method=method, handler=handler))
        logger.debug("Registered %s %s", method, path)
        return self

    def get(self, path: str, handler: Handler) -> Router:
        return self.on(path, "GET", handler)

    def post(self, path: str, handler: Handler) -> Router:
        return self.on(path, "POST", handler)

    def put(self, path: str, handler: Handler) -> Router:
        return self.on(path, "PUT", handler)

    def patch(self, path: str, handler: Handler) -> Router:
        return self.on(path, "PATCH", handler)

    def delete(self, path: str, handler: Handler) -> Router:
        return self.on(path, "DELETE", handler)

    def head(self, path: str, handler: Handler) -> Router:
        return self.on(path, "HEAD", handler)

    def options(self, path: str, handler: Handler) -> Router:
        return self.on(path, "OPTIONS", handler)

    def route(self, path: str, method: str = "GET") -> Callable[[Handler], Handler]:
        """Register a route handler via decorator.

        The decorated function is returned unchanged::

            @router.route("/health")
            def health(request):
                return ResponseBuilder.ok().body("ok").build()
        """

        def decorator(func: Handler) -> Handler:
            self.on(path, method, func)
            return func

        return decorator

    def use(self, middleware: Middleware) -> Router:
        """Append a middleware. The first one registered runs outermost."""
        self._check_not_frozen()
        if not callable(middleware):
            msg = f"Middleware must be callable, got {type(middleware).__name__}."
            raise ConfigurationError(msg)
        self._middleware.append(middleware)
        return self

    def freeze(self) -> None:
        """Reject any further registration on this router."""
        if not self._frozen:
            self._frozen = True
            logger.debug(
                "Router frozen with %d route(s), %d middleware",
                len(self._routes),
                len(self._middleware),
            )

    def _maybe_freeze(self) -> None:
        if self._config.auto_freeze:
            self.freeze()

    def _check_not_frozen(self) -> None:
        if self._frozen:
            msg = (
                "Cannot modify the router after it has been frozen. "
                "Register routes and middleware before serving requests."
            )
            raise ConfigurationError(msg)

    # -- Matching --

    @staticmethod
    def is_path_matching(path: str, url: str) -> bool:
        """True if the pattern *path* structurally matches *url*.

        Both are split on ``/`` as-is, so a leading slash yields an empty
        first segment on each side and a trailing slash adds a segment.
        A pattern segment starting with ``:`` matches anything in its
        position; every other segment must be equal.
        """
        path_segments = path.split("/")
        url_segments = url.split("/")
        if len(path_segments) != len(url_segments):
            return False
        for path_segment, url_segment in zip(path_segments, url_segments, strict=True):
            if path_segment.startswith(":"):
                continue
            if path_segment != url_segment:
                return False
        return True

    def find_route(self, request: Request) -> Route | None:
        """Return the first route matching the request's method and path.

        The fragment and query string are stripped from the url before
        comparison. Returns ``None`` when nothing matches.
        """
        path = request.path
        for route in self._routes:
            if route.method == request.method and self.is_path_matching(route.path, path):
                return route
        return None

    # -- Dispatch --

    def on_request(self, request: Request) -> Response | Awaitable[Response]:
        """Resolve *request* to a handler result, or a bare 404.

        The handler's return value is passed back untouched, and anything
        it raises propagates to the caller.
        """
        self._maybe_freeze()

        route = self.find_route(request)
        if route is None:
            logger.debug("404 %s %s", request.method, request.url)
            return ResponseBuilder.not_found().build()

        if self._config.debug:
            logger.debug("%s %s -> %s", request.method, request.url, route.path)
        return route.handler(request)

    async def dispatch(self, request: Request) -> Response:
        """Run *request* through the middleware chain and the route table.

        Awaits the handler's result if it is awaitable. Exceptions from
        middleware or handlers are not caught.
        """
        # Middleware may answer without reaching on_request
        self._maybe_freeze()

        handler: Next = self._respond
        for mw in reversed(self._middleware):
            outer = handler
            mw_ref = mw

            async def make_next(req: Request, _mw: Middleware = mw_ref, _next: Next = outer) -> Response:
                return await _mw(req, _next)

            handler = make_next

        return await handler(request)

    def dispatch_sync(self, request: Request) -> Response:
        """Blocking ``dispatch`` on a fresh event loop.

        For synchronous transports. Must not be called from inside a
        running event loop.
        """
        return anyio.run(self.dispatch, request)

    async def _respond(self, request: Request) -> Response:
        result = self.on_request(request)
        if inspect.isawaitable(result):
            return await result
        return result
