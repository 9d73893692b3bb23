"""Perch exception hierarchy.

Route-not-found is not an exception: the router answers it with a 404
``Response``. Handler failures are never wrapped and reach the caller
as whatever the handler raised.
"""


class PerchError(Exception):
    """Base for all perch-specific errors."""


class ConfigurationError(PerchError):
    """Raised when the router is set up incorrectly.

    Registering a non-callable handler or middleware, or registering
    anything after the router has been frozen.
    """
