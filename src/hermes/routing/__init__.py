"""Routing — ordered route table over compiled path templates.

Routes are matched in registration order; the first template that fits
the request path wins.
"""

from hermes.routing.pattern import PathPattern, compile_path, join_paths
from hermes.routing.route import RouteKey, RouteMatch
from hermes.routing.table import RouteTable

__all__ = [
    "PathPattern",
    "RouteKey",
    "RouteMatch",
    "RouteTable",
    "compile_path",
    "join_paths",
]
