"""Test utilities for porchlight applications.

    from porchlight.testing import TestClient
"""

from porchlight.testing.client import TestClient

__all__ = ["TestClient"]
