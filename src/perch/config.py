"""Router configuration.

RouterConfig is a frozen dataclass: immutable after creation, no
string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RouterConfig(debug=True, auto_freeze=True)
    """

    # Log every matched dispatch on the ``perch.routing`` logger (DEBUG)
    debug: bool = False

    # Reject further registration once the first request is dispatched
    auto_freeze: bool = False
