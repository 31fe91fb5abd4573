"""Test utilities for hermes applications.

    from hermes.testing import TestClient
"""

from hermes.testing.client import ClientResponse, TestClient

__all__ = ["ClientResponse", "TestClient"]
