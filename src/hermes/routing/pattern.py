"""Path template compilation.

Templates use named segments::

    "/users"              -> literal
    "/users/:id"          -> one segment captured as ``id``
    "/files/*path"        -> the rest of the path captured as ``path``
    "/v:major.:minor"     -> several parameters inside one segment

Literal text matches case-insensitively, a single trailing slash on the
request path is tolerated, and captured values are percent-decoded.
"""

import functools
import re
from dataclasses import dataclass
from urllib.parse import unquote

from hermes.errors import RouteSyntaxError

# Marker followed by an optional identifier: ":id", "*rest"
_PARAM = re.compile(r"([:*])([A-Za-z_][A-Za-z0-9_]*)?")

# Characters with a meaning in richer template dialects (groups, modifiers,
# inline regexes). Rejected rather than silently matched as literals.
_RESERVED = frozenset("()[]{}?+!")

# regex fragment for each parameter kind
SEGMENT_PATTERNS: dict[str, str] = {
    ":": r"[^/]+",
    "*": r".+",
}


@dataclass(frozen=True, slots=True)
class PathPattern:
    """A compiled path template."""

    template: str
    regex: re.Pattern[str]
    param_names: tuple[str, ...]

    def match(self, path: str) -> dict[str, str] | None:
        """Return decoded parameters if *path* satisfies the template."""
        m = self.regex.fullmatch(path)
        if m is None:
            return None
        return {
            name: unquote(m.group(f"p{index}"))
            for index, name in enumerate(self.param_names)
        }


def _escape_literal(template: str, text: str) -> str:
    for char in text:
        if char in _RESERVED:
            raise RouteSyntaxError(template, f"unsupported character {char!r}")
    return re.escape(text)


@functools.lru_cache(maxsize=None)
def compile_path(template: str) -> PathPattern:
    """Compile *template* into a :class:`PathPattern`.

    Results are cached per template string, so each template is parsed
    once no matter how many requests are matched against it. Failures are
    not cached and raise again on the next attempt.

    Raises:
        RouteSyntaxError: A marker without a name, a duplicate parameter
            name, a splat that is not the last token, or a reserved
            character.
    """
    parts: list[str] = []
    names: list[str] = []
    cursor = 0

    for m in _PARAM.finditer(template):
        parts.append(_escape_literal(template, template[cursor : m.start()]))
        marker, name = m.group(1), m.group(2)
        if not name:
            msg = f"missing parameter name after {marker!r} at index {m.start()}"
            raise RouteSyntaxError(template, msg)
        if name in names:
            raise RouteSyntaxError(template, f"duplicate parameter name {name!r}")
        if marker == "*" and template[m.end() :] not in ("", "/"):
            raise RouteSyntaxError(template, "splat parameter must be the last token")
        parts.append(f"(?P<p{len(names)}>{SEGMENT_PATTERNS[marker]})")
        names.append(name)
        cursor = m.end()

    parts.append(_escape_literal(template, template[cursor:]))
    if not template.endswith("/"):
        parts.append("/?")

    return PathPattern(
        template=template,
        regex=re.compile("".join(parts), re.IGNORECASE),
        param_names=tuple(names),
    )


def join_paths(prefix: str, path: str) -> str:
    """Concatenate a mount prefix and a route path with a single ``/`` at the seam.

    ``join_paths("/api/", "/users")`` and ``join_paths("/api", "/users")``
    both give ``"/api/users"``.
    """
    if prefix.endswith("/") and path.startswith("/"):
        return prefix[:-1] + path
    return prefix + path
