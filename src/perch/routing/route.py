"""Route frozen dataclass and the Handler type."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from perch.http.request import Request
from perch.http.response import Response

# A handler answers now or later; the router never looks inside.
type Handler = Callable[[Request], Response | Awaitable[Response]]


@dataclass(frozen=True, slots=True)
class Route:
    """A registered (path pattern, method, handler) triple.

    ``path`` is ``/``-separated; a segment starting with ``:`` matches
    any single segment in that position. ``method`` must match the
    request method exactly.
    """

    path: str
    method: str
    handler: Handler
