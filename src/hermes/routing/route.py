"""RouteKey and RouteMatch frozen dataclasses."""

from dataclasses import dataclass, field

from hermes.middleware.protocol import Handler


@dataclass(frozen=True, slots=True)
class RouteKey:
    """Identity of a route table entry.

    One entry per exact ``(method, path)`` pair. The method is stored
    upper-cased; the path is the raw template string.
    """

    method: str
    path: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "method", self.method.upper())

    def __str__(self) -> str:
        return f"{self.method} {self.path}"


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful route match."""

    key: RouteKey
    handlers: tuple[Handler, ...]
    params: dict[str, str] = field(default_factory=dict)
