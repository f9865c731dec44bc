from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from starlette.responses import PlainTextResponse, Response

from ...core.errors import MedicationError
from ...core.registry import InMemoryRegistry
from ..parsing import parse_medication_body, parse_name_query

logger = logging.getLogger(__name__)

# Each path answers whatever verb it is sent; the path alone selects the operation.
ANY_METHOD = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def _first_name(request: Request) -> str | None:
    names = request.query_params.getlist("name")
    return names[0] if names else None


def mount_medication_api(app: FastAPI, registry: InMemoryRegistry) -> None:
    """Mount the five registry endpoints plus the error renderer.

    Handlers are stateless; the registry is the only shared object and each
    handler performs exactly one registry call.
    """

    @app.exception_handler(MedicationError)
    async def _medication_error(request: Request, exc: MedicationError) -> PlainTextResponse:
        logger.debug("%s %s -> %d %s", request.method, request.url.path, exc.status_code, exc.message)
        return PlainTextResponse(exc.message, status_code=exc.status_code)

    @app.api_route("/add", methods=ANY_METHOD, status_code=201)
    async def add_medication(request: Request) -> Response:
        med = parse_medication_body(await request.body())
        await run_in_threadpool(registry.add, med)
        return Response(status_code=201)

    @app.api_route("/get", methods=ANY_METHOD)
    def get_medication(request: Request) -> dict[str, Any]:
        return registry.get(parse_name_query(_first_name(request))).to_dict()

    @app.api_route("/getAll", methods=ANY_METHOD)
    def list_medications() -> list[dict[str, Any]]:
        return [m.to_dict() for m in registry.list()]

    @app.api_route("/update", methods=ANY_METHOD)
    async def update_medication_count(request: Request) -> Response:
        # Only `count` is applied; the payload's dosage is ignored.
        med = parse_medication_body(await request.body())
        await run_in_threadpool(registry.update_count, med.name, med.count)
        return Response(status_code=200)

    @app.api_route("/delete", methods=ANY_METHOD)
    def delete_medication(request: Request) -> Response:
        registry.delete(parse_name_query(_first_name(request)))
        return Response(status_code=200)
