"""Shared type aliases used across porchlight modules."""

from collections.abc import Callable
from typing import Any, TypeAlias

# Route handler: user-defined synchronous function with variable signature
Handler: TypeAlias = Callable[..., Any]

# Lifespan hook: zero-argument callable, sync or async
Hook: TypeAlias = Callable[[], Any]
