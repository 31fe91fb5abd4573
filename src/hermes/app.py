"""Hermes application class.

Owns one route table and one global middleware list. Both are filled in
during setup (registration, ``use``, ``use_router``) and read on every
request once the app is serving.
"""

import logging
from collections.abc import Callable
from typing import Any

from hermes._internal.asgi import Receive, Scope, Send
from hermes.config import AppConfig
from hermes.errors import ConfigurationError
from hermes.http.decorators import ResponseDecorator
from hermes.middleware.protocol import Handler, Mountable
from hermes.routing.pattern import join_paths
from hermes.routing.route import RouteKey, RouteMatch
from hermes.routing.table import RouteTable
from hermes.server.handler import handle_request

logger = logging.getLogger("hermes.app")


class App:
    """The hermes application, and the unit of composition.

    Routes map ``(method, path template)`` to a list of handlers::

        app = App()
        app.get("/users/:id", load_user, show_user)
        app.use(log_requests)           # every matched request
        app.use("/admin", require_admin)  # routes registered so far under /admin
        app.use_router("/api", api)     # copy another router's routes in

    An App is also an ASGI 3.0 callable, so it can be handed to any ASGI
    server directly, or started with :meth:`listen`.

    Thread safety:
        Registration is meant to happen before serving starts. The route
        table and middleware list are not locked.
    """

    __slots__ = (
        "_global_middleware",
        "_response_decorator",
        "_routes",
        "config",
    )

    def __init__(self, config: AppConfig | None = None) -> None:
        self.config: AppConfig = config or AppConfig()
        self._routes: RouteTable = RouteTable()
        self._global_middleware: list[Handler] = []
        self._response_decorator = ResponseDecorator(self.config)

    # -- Route registration --

    def add_route(self, method: str, path: str, *handlers: Handler) -> None:
        """Append *handlers* to the ``(method, path)`` route.

        Registering the same method and path again extends the handler
        list. The template is not validated here; a malformed template
        raises ``RouteSyntaxError`` the first time a request is matched
        against it.
        """
        self._routes.add(method, path, handlers)

    def get(self, path: str, *handlers: Handler) -> None:
        """Register handlers for ``GET path``."""
        self.add_route("GET", path, *handlers)

    def post(self, path: str, *handlers: Handler) -> None:
        """Register handlers for ``POST path``."""
        self.add_route("POST", path, *handlers)

    def put(self, path: str, *handlers: Handler) -> None:
        """Register handlers for ``PUT path``."""
        self.add_route("PUT", path, *handlers)

    def delete(self, path: str, *handlers: Handler) -> None:
        """Register handlers for ``DELETE path``."""
        self.add_route("DELETE", path, *handlers)

    def patch(self, path: str, *handlers: Handler) -> None:
        """Register handlers for ``PATCH path``."""
        self.add_route("PATCH", path, *handlers)

    # -- Middleware --

    def use(self, path_or_middleware: str | Handler, *middlewares: Handler) -> None:
        """Register middleware by path prefix or globally.

        With a string first argument, the middlewares are put in front of
        every route registered *so far* whose template starts with that
        string. The check is a plain string prefix, so ``"/admin"`` also
        covers ``"/administrators"``. Routes added later do not get them.

        With a callable first argument, all arguments are appended to the
        global middleware list, which runs for every matched request
        before the route's own handlers.
        """
        if isinstance(path_or_middleware, str):
            prefix = path_or_middleware
            covered = [key for key in self._routes if key.path.startswith(prefix)]
            for key in covered:
                self._routes.prepend(key, middlewares)
            logger.debug(
                "use(%r): %d middleware(s) added to %d route(s)",
                prefix,
                len(middlewares),
                len(covered),
            )
            return

        if not callable(path_or_middleware):
            msg = (
                "use() expects a path prefix string or a middleware callable, "
                f"got {type(path_or_middleware).__name__}"
            )
            raise ConfigurationError(msg)

        self._global_middleware.extend((path_or_middleware, *middlewares))

    def use_router(self, prefix: str, router: Mountable) -> None:
        """Mount another router's routes under *prefix*.

        For each of the child's routes, the child's global middleware
        followed by the route's handlers are appended to the parent route
        at ``prefix + path``. The data is copied: later registrations on
        the child do not show up here.

        Raises:
            ConfigurationError: *router* lacks ``get_routes()`` or
                ``get_global_middleware()``.
        """
        get_routes = getattr(router, "get_routes", None)
        get_global_middleware = getattr(router, "get_global_middleware", None)
        if not callable(get_routes) or not callable(get_global_middleware):
            msg = (
                f"Cannot mount {type(router).__name__!s} at {prefix!r}: a router must "
                "provide get_routes() and get_global_middleware()"
            )
            raise ConfigurationError(msg)

        child_routes = get_routes()
        child_middleware = tuple(get_global_middleware())

        for key, handlers in child_routes.items():
            method, path = _split_key(key)
            self._routes.add(method, join_paths(prefix, path), (*child_middleware, *handlers))

        logger.debug("Mounted %d route(s) at %r", len(child_routes), prefix)

    # -- Introspection --

    def get_routes(self) -> dict[RouteKey, tuple[Handler, ...]]:
        """Return a copy of the route table in registration order."""
        return dict(self._routes.items())

    def get_global_middleware(self) -> tuple[Handler, ...]:
        """Return the global middleware list."""
        return tuple(self._global_middleware)

    def match_route(self, path: str, method: str) -> RouteMatch | None:
        """Resolve *path* for *method* the same way a live request is resolved."""
        return self._routes.match(method, path)

    # -- Server --

    def listen(
        self,
        port: int | None = None,
        callback: Callable[[], Any] | None = None,
        *,
        host: str | None = None,
    ) -> None:
        """Start serving on *port* and block until the server stops.

        *callback* runs once the listener is bound. Host and port fall
        back to ``self.config``.
        """
        from hermes.server.listen import run_server

        run_server(
            self,
            host or self.config.host,
            port if port is not None else self.config.port,
            callback=callback,
            **self._server_options(),
        )

    async def serve(
        self,
        port: int | None = None,
        callback: Callable[[], Any] | None = None,
        *,
        host: str | None = None,
    ) -> None:
        """Awaitable form of :meth:`listen` for an already running event loop."""
        from hermes.server.listen import serve

        await serve(
            self,
            host or self.config.host,
            port if port is not None else self.config.port,
            callback=callback,
            **self._server_options(),
        )

    def _server_options(self) -> dict[str, Any]:
        """uvicorn options from config; ``debug`` forces debug logging."""
        return {
            "log_level": "debug" if self.config.debug else self.config.log_level,
            "access_log": self.config.access_log,
        }

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point.

        Acknowledges lifespan events and dispatches HTTP scopes. Other
        scope types (websocket) are not handled.
        """
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return

        if scope["type"] != "http":
            return

        await handle_request(
            scope,
            receive,
            send,
            routes=self._routes,
            global_middleware=tuple(self._global_middleware),
            response_decorator=self._response_decorator,
        )

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Run the ASGI lifespan protocol. Hermes has no hooks to run."""
        while True:
            message = await receive()
            if message["type"] == "lifespan.startup":
                logger.debug("Startup with %d route(s)", len(self._routes))
                await send({"type": "lifespan.startup.complete"})
            elif message["type"] == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return


def _split_key(key: Any) -> tuple[str, str]:
    """Accept ``RouteKey`` or ``"METHOD /path"`` keys from mounted routers."""
    if isinstance(key, RouteKey):
        return key.method, key.path
    if isinstance(key, tuple) and len(key) == 2:
        return key[0], key[1]
    if isinstance(key, str):
        method, _, path = key.partition(" ")
        if path:
            return method, path
    msg = f"Unrecognized route key {key!r} in mounted router"
    raise ConfigurationError(msg)
