"""FastAPI application exposing assignments, query execution and answer validation."""

import contextlib
import math
from collections.abc import AsyncIterator
from decimal import Decimal
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from cipher_sql.api.container import Container
from cipher_sql.api.schemas import ExecuteRequest, ValidateRequest
from cipher_sql.assignment.domain.errors import AssignmentNotFoundError
from cipher_sql.execution.domain.errors import QueryExecutionError
from cipher_sql.result.domain.normalizer import canonical_text
from cipher_sql.safety.domain.errors import UnsafeQueryError


def _finite_or_null(value: float) -> float | None:
    return value if math.isfinite(value) else None


# JSON has no NaN or Infinity; NUMERIC keeps its exact text form.
_CELL_ENCODERS: dict[Any, Any] = {
    bytes: canonical_text,
    bytearray: canonical_text,
    memoryview: canonical_text,
    float: _finite_or_null,
    Decimal: str,
}


def create_app(container: Container) -> FastAPI:
    """Build the API around an already wired Container; the app closes it on shutdown."""

    @contextlib.asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        try:
            yield
        finally:
            await container.aclose()

    app = FastAPI(title="CipherSQLStudio", lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    _register_error_handlers(app)

    @app.get("/")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/assignments")
    async def list_assignments() -> list[dict[str, Any]]:
        return [
            a.model_dump(mode="json", by_alias=True)
            for a in container.catalog.list_assignments()
        ]

    @app.get("/assignments/{assignment_id}")
    async def get_assignment(assignment_id: str) -> dict[str, Any]:
        assignment = container.catalog.get_assignment(assignment_id)
        return assignment.model_dump(mode="json", by_alias=True)

    @app.post("/execute")
    async def execute(req: ExecuteRequest | None = None) -> JSONResponse:
        body = req if req is not None else ExecuteRequest()
        result = await container.verifier.execute(body.query)
        payload = {"columns": result.columns, "rows": result.rows}
        return JSONResponse(jsonable_encoder(payload, custom_encoder=_CELL_ENCODERS))

    @app.post("/validate")
    async def validate(req: ValidateRequest | None = None) -> dict[str, Any]:
        body = req if req is not None else ValidateRequest()
        verdict = await container.verifier.verify(
            assignment_id=body.assignment_key,
            candidate_query=body.query,
        )
        return verdict.model_dump(mode="json")

    return app


def _register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(UnsafeQueryError)
    async def _unsafe_query(_: Request, exc: UnsafeQueryError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"error": str(exc)})

    @app.exception_handler(AssignmentNotFoundError)
    async def _not_found(_: Request, exc: AssignmentNotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"error": str(exc)})

    @app.exception_handler(QueryExecutionError)
    async def _execution_failed(_: Request, exc: QueryExecutionError) -> JSONResponse:
        return JSONResponse(status_code=500, content={"error": str(exc)})
