from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager

from decaygraph.core.exceptions import (
    DecayGraphError,
    InvalidExpiration,
    InvalidVertexLabel,
    MalformedInput,
    TraversalStateError,
    VertexNotFound,
)

from backend.app.config import AppConfig
from backend.app.api.routes_query import router as query_router
from backend.app.api.routes_graph import router as graph_router
from backend.app.dependencies import get_decay_service

ERROR_STATUS = {
    MalformedInput: 400,
    InvalidVertexLabel: 400,
    InvalidExpiration: 400,
    VertexNotFound: 404,
    TraversalStateError: 409,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Builds the shared graph (and loads any seed edges) once at startup.
    """
    get_decay_service()

    yield


async def decay_error_handler(request: Request, exc: DecayGraphError) -> JSONResponse:
    return JSONResponse(
        status_code=ERROR_STATUS.get(type(exc), 400),
        content={
            "detail": str(exc),
            "error": type(exc).__name__,
            "details": exc.details,
        },
    )


def create_app(config: AppConfig) -> FastAPI:
    app = FastAPI(
        title=config.app_name,
        lifespan=lifespan,
    )

    app.add_exception_handler(DecayGraphError, decay_error_handler)

    app.include_router(
        query_router,
        prefix=f"{config.api_prefix}/query",
        tags=["query"],
    )

    app.include_router(
        graph_router,
        prefix=f"{config.api_prefix}/graph",
        tags=["graph"],
    )

    return app


config = AppConfig()
app = create_app(config)
