"""HTTP values — Request, Response, Headers and query parsing."""

from hermes.http.headers import Headers
from hermes.http.query import parse_query
from hermes.http.request import Request
from hermes.http.response import Response

__all__ = ["Headers", "Request", "Response", "parse_query"]
