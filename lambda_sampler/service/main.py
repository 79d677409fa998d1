"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request

from ..core.config import env_file_candidates, get_settings, resolved_env_file
from ..core.logging_config import configure_logging, get_logger
from .api.health import router as health_router
from .api.samples import router as samples_router

configure_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """FastAPI lifespan handler."""

    settings = get_settings()
    logger.info(
        "sampler_startup",
        env=settings.app_env,
        log_level=settings.log_level,
        sampler_host=settings.sampler_host,
        sampler_port=settings.sampler_port,
        aws_region=settings.aws_region,
        function_name=settings.lambda_function_name or "unset",
    )
    logger.info(
        "environment_loaded",
        log_file=settings.log_file or "stdout-only",
        env_file=resolved_env_file() or "not-found",
        env_candidates=list(env_file_candidates()),
    )
    yield
    logger.info("sampler_shutdown")


app = FastAPI(
    title="Lambda Sampler",
    version="0.1.0",
    description="Timed, fault-isolated AWS Lambda invocation sampler.",
    lifespan=lifespan,
)


@app.middleware("http")
async def log_incoming_requests(request: Request, call_next):
    logger.info(
        "http_request_received",
        method=request.method,
        path=request.url.path,
        client=str(request.client[0]) if request.client else "unknown",
    )
    response = await call_next(request)
    logger.info(
        "http_request_completed",
        method=request.method,
        path=request.url.path,
        status_code=response.status_code,
    )
    return response

app.include_router(health_router)
app.include_router(samples_router)


@app.get("/")
async def index() -> dict[str, str]:
    return {"service": "lambda-sampler", "status": "ok"}
