from __future__ import annotations

from fastapi import FastAPI

from .. import __version__
from ..core.registry import InMemoryRegistry
from .routes import mount_medication_api


def create_api_app(registry: InMemoryRegistry) -> FastAPI:
    app = FastAPI(title="medreg", version=__version__)
    app.state.registry = registry

    mount_medication_api(app, registry)

    @app.get("/healthz")
    def healthz() -> dict[str, bool]:
        return {"ok": True}

    return app
