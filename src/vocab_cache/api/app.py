import time

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from vocab_cache import __version__
from vocab_cache.api.dependencies import HandlerDep, lifespan
from vocab_cache.dto import HealthCheckResponse, ServiceInfoResponse
from vocab_cache.logging_config import get_logger

logger = get_logger("vocab_cache.access")

app = FastAPI(
    title="Vocabulary Cache API",
    description="Word definitions and random words, cached in Redis in front of API Ninjas",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,  # type: ignore[arg-type]
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next) -> Response:
    """Log every request and turn unhandled exceptions into a plain 500."""
    start_time = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception as e:
        logger.exception("unhandled error", method=request.method, path=request.url.path)
        response = PlainTextResponse(f"internal server error: {e}", status_code=500)

    logger.info(
        "request",
        method=request.method,
        path=request.url.path,
        status=response.status_code,
        duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
    )
    return response


@app.get("/", response_model=ServiceInfoResponse)
async def root() -> ServiceInfoResponse:
    """Root endpoint with API information."""
    return ServiceInfoResponse(
        name="Vocabulary Cache API",
        version=__version__,
        description="Word definitions and random words, cached in Redis in front of API Ninjas",
        endpoints={
            "dictionary": "/api/v1/dictionary?word=<word>",
            "randomword": "/api/v1/randomword",
            "metrics": "/metrics",
            "health": "/health",
            "docs": "/docs",
        },
    )


@app.get("/health", response_model=HealthCheckResponse)
async def health(handler: HandlerDep, response: Response) -> HealthCheckResponse:
    """Health check endpoint."""
    return await handler.health_check(response)


@app.get("/metrics")
async def metrics(handler: HandlerDep) -> Response:
    """Prometheus metrics endpoint."""
    return handler.metrics()


@app.get("/api/v1/dictionary", response_class=PlainTextResponse)
async def dictionary(handler: HandlerDep, word: str | None = None) -> PlainTextResponse:
    """Look up the definition of ``word``, from Redis when cached."""
    return await handler.dictionary(word)


@app.get("/api/v1/randomword", response_class=PlainTextResponse)
async def randomword(handler: HandlerDep) -> PlainTextResponse:
    """Generate a random word and look up its definition."""
    return await handler.random_word()


def main() -> None:
    """Run the API with uvicorn on the configured address."""
    import uvicorn

    from vocab_cache.config import get_settings

    settings = get_settings()
    uvicorn.run(
        "vocab_cache.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
    )


if __name__ == "__main__":
    main()
