"""Query string parsing.

Follows ``application/x-www-form-urlencoded`` rules: ``+`` is a space,
percent escapes are decoded, blank values are kept, and when a key
repeats the last value wins.
"""

from urllib.parse import parse_qsl


def parse_query(query_string: str | bytes) -> dict[str, str]:
    """Parse *query_string* into a flat ``{key: value}`` dict.

    >>> parse_query("x=1&y=2")
    {'x': '1', 'y': '2'}
    >>> parse_query(b"tag=a&tag=b&empty=")
    {'tag': 'b', 'empty': ''}
    """
    if isinstance(query_string, bytes):
        query_string = query_string.decode("latin-1")
    if query_string.startswith("?"):
        query_string = query_string[1:]
    return dict(parse_qsl(query_string, keep_blank_values=True))


def split_target(target: str) -> tuple[str, str]:
    """Split a request target into ``(path, query_string)``.

    Only the first ``?`` separates; anything after it belongs to the query.
    """
    path, _, query_string = target.partition("?")
    return path, query_string
