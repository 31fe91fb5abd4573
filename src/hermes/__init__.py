"""Hermes — a small middleware router for ASGI.

Path-based dispatch, ``(request, response, next)`` middleware chains,
sub-router mounting and response helpers.

Basic usage::

    from hermes import App

    app = App()

    def show_user(request, response, next):
        response.status(200).json({"id": request.params["id"]})

    app.get("/users/:id", show_user)
    app.listen(3000, lambda: print("listening on :3000"))
"""

__version__ = "0.1.0"
__all__ = [
    "App",
    "AppConfig",
    "ConfigurationError",
    "Handler",
    "HermesError",
    "MiddlewareError",
    "Mountable",
    "Next",
    "Request",
    "Response",
    "ResponseEndedError",
    "RouteKey",
    "RouteMatch",
    "RouteSyntaxError",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import hermes`` fast while providing a clean top-level API.
    """
    if name == "App":
        from hermes.app import App

        return App

    if name == "AppConfig":
        from hermes.config import AppConfig

        return AppConfig

    if name == "Request":
        from hermes.http.request import Request

        return Request

    if name == "Response":
        from hermes.http.response import Response

        return Response

    if name in ("RouteKey", "RouteMatch"):
        from hermes.routing import route as _route

        return getattr(_route, name)

    if name in ("Handler", "Mountable", "Next"):
        from hermes.middleware import protocol as _mw

        return getattr(_mw, name)

    if name in (
        "ConfigurationError",
        "HermesError",
        "MiddlewareError",
        "ResponseEndedError",
        "RouteSyntaxError",
    ):
        from hermes import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
