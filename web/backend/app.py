#!/usr/bin/env python3
"""
Compatibility Engine - FastAPI Application

HTTP surface for the job/candidate compatibility analysis, the interview
dialogue simulator and the application document generator.

Usage:
    uv run python -m web.backend.app

Then open:
    - http://localhost:8080/docs - API Documentation (Swagger UI)
    - http://localhost:8080/redoc - Alternative API Documentation
"""

import logging

from fastapi import FastAPI, HTTPException

from core.exceptions import EngineError
from .config import get_config
from .exceptions import (
    engine_exception_handler,
    http_exception_handler,
    general_exception_handler
)
from .rate_limit import add_rate_limit_handlers
from .routers import (
    analysis_router,
    dialogue_router,
    applications_router
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Load configuration
config = get_config()

# Create FastAPI app
app = FastAPI(
    title="Compatibility Engine API",
    description="Job/candidate compatibility scoring and interview dialogue simulation",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

# Configure rate limiting
add_rate_limit_handlers(app)

# Register exception handlers
app.add_exception_handler(EngineError, engine_exception_handler)
app.add_exception_handler(HTTPException, http_exception_handler)
app.add_exception_handler(Exception, general_exception_handler)

# Include routers
app.include_router(analysis_router)
app.include_router(dialogue_router)
app.include_router(applications_router)


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "compatibility-engine"}


def main():
    """Run the web server."""
    import uvicorn

    logger.info(f"Starting Compatibility Engine on {config.web.host}:{config.web.port}")
    logger.info(f"API Docs: http://{config.web.host}:{config.web.port}/docs")

    uvicorn.run(
        "web.backend.app:app",
        host=config.web.host,
        port=config.web.port,
        reload=False,
        log_level="info"
    )


if __name__ == "__main__":
    main()
