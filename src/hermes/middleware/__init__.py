"""Middleware — the ``(request, response, next)`` protocol and chain executor."""

from hermes.middleware.chain import run_chain
from hermes.middleware.protocol import Handler, Middleware, Mountable, Next

__all__ = [
    "Handler",
    "Middleware",
    "Mountable",
    "Next",
    "run_chain",
]
