from __future__ import annotations

from fastapi import FastAPI

from ..api import create_api_app
from ..core.registry import InMemoryRegistry


def create_app(registry: InMemoryRegistry | None = None) -> FastAPI:
    """Create the full app around `registry` (a fresh, empty one by default)."""

    return create_api_app(registry if registry is not None else InMemoryRegistry())
