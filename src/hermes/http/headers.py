"""Case-insensitive HTTP headers.

Implements ``MutableMapping[str, str]``. Request headers are built from
the raw ASGI byte pairs; response headers are filled in by handlers and
encoded back to bytes by the sender.
"""

from collections.abc import Iterable, Iterator, MutableMapping


class Headers(MutableMapping[str, str]):
    """Ordered, case-insensitive header collection.

    ``__getitem__`` returns the first value for a name.
    ``__setitem__`` replaces every value for a name.
    ``add`` appends another value (e.g. a second ``Set-Cookie``).
    ``get_list`` returns all values for a name.
    """

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[tuple[str, str]] = ()) -> None:
        self._items: list[tuple[str, str]] = [(name, value) for name, value in items]

    @classmethod
    def from_raw(cls, raw: Iterable[tuple[bytes, bytes]]) -> "Headers":
        """Decode ASGI header byte pairs (latin-1, per the ASGI spec)."""
        return cls((name.decode("latin-1"), value.decode("latin-1")) for name, value in raw)

    def __getitem__(self, key: str) -> str:
        lowered = key.lower()
        for name, value in self._items:
            if name.lower() == lowered:
                return value
        raise KeyError(key)

    def __setitem__(self, key: str, value: str) -> None:
        lowered = key.lower()
        self._items = [(n, v) for n, v in self._items if n.lower() != lowered]
        self._items.append((key, value))

    def __delitem__(self, key: str) -> None:
        lowered = key.lower()
        kept = [(n, v) for n, v in self._items if n.lower() != lowered]
        if len(kept) == len(self._items):
            raise KeyError(key)
        self._items = kept

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        lowered = key.lower()
        return any(name.lower() == lowered for name, _ in self._items)

    def __iter__(self) -> Iterator[str]:
        seen: set[str] = set()
        for name, _ in self._items:
            lowered = name.lower()
            if lowered not in seen:
                seen.add(lowered)
                yield lowered

    def __len__(self) -> int:
        return len({name.lower() for name, _ in self._items})

    def __repr__(self) -> str:
        return f"Headers({self._items!r})"

    def add(self, key: str, value: str) -> None:
        """Append a value without touching existing values for *key*."""
        self._items.append((key, value))

    def get_list(self, key: str) -> list[str]:
        """Return all values for *key*."""
        lowered = key.lower()
        return [value for name, value in self._items if name.lower() == lowered]

    def raw(self) -> list[tuple[bytes, bytes]]:
        """Encode as ASGI header pairs with lower-cased names."""
        return [
            (name.lower().encode("latin-1"), value.encode("latin-1"))
            for name, value in self._items
        ]
