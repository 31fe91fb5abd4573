"""Hermes exception hierarchy.

Shared across the route table, the app, the chain executor and the
response so every module raises and catches the same types.
"""


class HermesError(Exception):
    """Base for all hermes-specific errors."""


class ConfigurationError(HermesError):
    """Raised when the app is wired up incorrectly.

    Reported synchronously from the registration call that caused it,
    e.g. mounting an object that is not a router.
    """


class RouteSyntaxError(ConfigurationError):
    """A path template could not be compiled.

    Templates are not validated at registration, so this surfaces the
    first time a request is matched against the bad template.
    """

    def __init__(self, template: str, reason: str) -> None:
        self.template = template
        self.reason = reason
        super().__init__(f"Invalid route template {template!r}: {reason}")


class MiddlewareError(HermesError):
    """A handler broke the ``next()`` contract."""


class ResponseEndedError(HermesError):
    """Raised when writing to a response that has already been ended."""
