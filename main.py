"""
FastAPI Application Entry Point

Integrates:
  - Summary endpoint (POST /api/generate-summary)
  - Health checks
  - Middleware for logging & error handling

Run: uvicorn main:app --reload --host 0.0.0.0 --port 8000
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from api import router as summary_router
from config import Config
from infra.config import get_config

# Setup logging
logging.basicConfig(
    level=getattr(logging, Config.LOG_LEVEL, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan: startup and shutdown handlers.
    """
    # Startup
    infra = get_config()
    logger.info("=" * 60)
    logger.info("Summarizer starting up...")
    logger.info(f"Environment: {Config.ENVIRONMENT}")
    logger.info(f"LLM Backend: {infra.llm_backend} ({infra.workers_ai_model})")
    missing = infra.missing_settings()
    if missing:
        logger.warning(f"Missing required environment variables: {', '.join(missing)}")
    if infra.invalid_settings:
        logger.warning(f"Invalid environment variables: {', '.join(infra.invalid_settings)}")
    logger.info("=" * 60)

    yield

    # Shutdown
    logger.info("Summarizer shutting down...")


# Create FastAPI app
app = FastAPI(
    title="Summarizer API",
    description="Text summarization proxy for a hosted language model",
    version="1.0.0",
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=Config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Middleware for logging
@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all requests."""
    logger.debug(f"{request.method} {request.url.path}")
    try:
        response = await call_next(request)
        return response
    except Exception as e:
        logger.error(f"Request error: {str(e)}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error"},
        )


# Include routers
app.include_router(summary_router)


# Health check endpoints
@app.get("/health/live")
async def health_live():
    """Live health check (Kubernetes liveness probe)."""
    return {"status": "alive"}


@app.get("/health/ready")
async def health_ready():
    """Readiness health check: required configuration is present and well-formed."""
    infra = get_config()
    missing = infra.missing_settings()
    if missing or infra.invalid_settings:
        return JSONResponse(
            status_code=503,
            content={"status": "not_ready", "missing": missing, "invalid": infra.invalid_settings},
        )
    return {"status": "ready"}


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": "Summarizer API",
        "version": "1.0.0",
        "status": "running",
        "endpoints": {
            "generate_summary": "POST /api/generate-summary",
            "health_live": "GET /health/live",
            "health_ready": "GET /health/ready",
            "config_info": "GET /config/info",
        },
    }


@app.get("/config/info")
async def config_info():
    """Get non-sensitive configuration info."""
    infra = get_config()
    return {
        "environment": Config.ENVIRONMENT,
        "llm_backend": infra.llm_backend,
        "model": infra.workers_ai_model,
        "gateway_configured": bool(infra.gateway_id),
        "cache_ttl": infra.gateway_cache_ttl,
        "skip_cache": infra.gateway_skip_cache,
        "app_port": Config.APP_PORT,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=Config.APP_PORT,
        reload=Config.ENVIRONMENT == "development",
    )
