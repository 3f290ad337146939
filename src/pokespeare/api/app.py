from typing import Any

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from pokespeare import __version__, metrics
from pokespeare.api.dependencies import HandlerDep, ServiceDep, lifespan
from pokespeare.config import settings
from pokespeare.dto import CacheStatsResponse, ErrorResponse, HealthCheckResponse, PokemonResponse
from pokespeare.utils import configure_logging

configure_logging()
logger = structlog.get_logger(__name__)

app = FastAPI(
    title="Pokespeare API",
    description="Shakespearean Pokemon descriptions, cached",
    version=__version__,
    lifespan=lifespan,
)


@app.exception_handler(StarletteHTTPException)
async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render every HTTP error with the same ``{"message": ...}`` envelope."""
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(message=str(exc.detail)).model_dump(),
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ErrorResponse(message="Invalid Request").model_dump(),
    )


@app.exception_handler(Exception)
async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error", path=request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(message="Internal Server Error").model_dump(),
    )


@app.get("/")
async def root() -> dict[str, Any]:
    """Root endpoint with API information."""
    return {
        "name": "Pokespeare API",
        "version": __version__,
        "description": "Shakespearean Pokemon descriptions, cached",
        "endpoints": {
            "pokemon": "/pokemon/{name}",
            "stats": "/stats",
            "health": "/health",
            "metrics": "/metrics",
            "docs": "/docs",
        },
    }


@app.get("/health", response_model=HealthCheckResponse)
async def health() -> HealthCheckResponse:
    """Health check endpoint. Does not contact the upstreams."""
    return HealthCheckResponse(status="healthy")


@app.get("/metrics")
async def prometheus_metrics() -> Response:
    """Prometheus metrics in the text exposition format."""
    payload, content_type = metrics.render_latest()
    return Response(content=payload, media_type=content_type)


@app.get(
    "/pokemon/{name}",
    response_model=PokemonResponse,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def get_pokemon(name: str, handler: HandlerDep) -> PokemonResponse:
    """Return the Shakespearean translation of the description of a Pokemon."""
    return await handler.get_pokemon(name)


@app.get("/stats", response_model=CacheStatsResponse)
async def get_stats(service: ServiceDep) -> CacheStatsResponse:
    """Get result cache statistics."""
    return CacheStatsResponse(**service.get_stats())


def run() -> None:
    """Run the API with uvicorn."""
    import uvicorn

    uvicorn.run(
        "pokespeare.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_config=None,
    )


if __name__ == "__main__":
    run()
