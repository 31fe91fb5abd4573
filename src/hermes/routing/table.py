"""Ordered route table with first-registered-wins matching.

Routes are stored in insertion order keyed by ``RouteKey``. Matching is
a linear scan: the first entry with the requested method whose template
matches the path wins, regardless of how specific later templates are.
"""

import logging
from collections.abc import Iterable, Iterator

from hermes.middleware.protocol import Handler
from hermes.routing.pattern import compile_path
from hermes.routing.route import RouteKey, RouteMatch

logger = logging.getLogger("hermes.routing")


class RouteTable:
    """Append-only mapping of ``RouteKey`` to handler sequences.

    Usage::

        table = RouteTable()
        table.add("GET", "/users/:id", [load_user, show_user])
        match = table.match("GET", "/users/42")
        match.params  # {"id": "42"}

    Entries are never removed. Registering the same key again extends
    its handler list instead of replacing it.
    """

    __slots__ = ("_entries",)

    def __init__(self) -> None:
        self._entries: dict[RouteKey, list[Handler]] = {}

    def add(self, method: str, path: str, handlers: Iterable[Handler]) -> RouteKey:
        """Append *handlers* to the ``(method, path)`` entry, creating it if absent."""
        key = RouteKey(method, path)
        self._entries.setdefault(key, []).extend(handlers)
        logger.debug("route %s now has %d handler(s)", key, len(self._entries[key]))
        return key

    def prepend(self, key: RouteKey, handlers: Iterable[Handler]) -> None:
        """Put *handlers* in front of an existing entry's handler list."""
        current = self._entries[key]
        current[:0] = list(handlers)

    def get(self, key: RouteKey) -> tuple[Handler, ...] | None:
        handlers = self._entries.get(key)
        if handlers is None:
            return None
        return tuple(handlers)

    def keys(self) -> list[RouteKey]:
        return list(self._entries)

    def items(self) -> Iterator[tuple[RouteKey, tuple[Handler, ...]]]:
        """Yield ``(key, handlers)`` pairs in registration order."""
        for key, handlers in self._entries.items():
            yield key, tuple(handlers)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[RouteKey]:
        return iter(list(self._entries))

    def match(self, method: str, path: str) -> RouteMatch | None:
        """Resolve *path* for *method*.

        Returns the first matching entry in registration order, or
        ``None`` when nothing matches. Templates are compiled on first
        use, so a malformed template raises ``RouteSyntaxError`` here
        rather than at registration.
        """
        method = method.upper()
        for key, handlers in self._entries.items():
            if key.method != method:
                continue
            params = compile_path(key.path).match(path)
            if params is not None:
                return RouteMatch(key=key, handlers=tuple(handlers), params=params)
        return None
