"""
Health and Readiness Endpoints

Kubernetes-compatible health probes for load balancers and orchestration.
"""
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from loguru import logger

from liferpg.repositories import db_manager

router = APIRouter(tags=["Health"])

# API version - single source of truth
API_VERSION = "0.4.0"


@router.get("/health")
async def health_check():
    """
    Basic health check endpoint.
    Returns 200 if service is running.
    """
    return {
        "status": "healthy",
        "service": "life-rpg-brain-dump",
        "version": API_VERSION
    }


@router.get("/ready")
async def readiness_check(request: Request):
    """
    Readiness probe - checks if service can handle requests.

    Verifies:
    - Processor repositories are initialized
    - MongoDB connection is active

    Returns 200 if ready, 503 if not ready.
    """
    try:
        processor = getattr(request.app.state, "processor", None)
        if processor is None or not processor.is_ready:
            return JSONResponse(
                status_code=503,
                content={
                    "status": "not_ready",
                    "reason": "Repositories not initialized"
                }
            )

        await db_manager.client.admin.command("ping")

        return {
            "status": "ready",
            "mongodb": "connected",
            "processor": "initialized"
        }

    except Exception as e:
        logger.error(f"Readiness check failed: {e}")
        return JSONResponse(
            status_code=503,
            content={
                "status": "not_ready",
                "reason": str(e)
            }
        )


@router.get("/")
async def root():
    """Root endpoint with API information."""
    return {
        "service": "Life RPG Brain Dump API",
        "version": API_VERSION,
        "endpoints": {
            "health": "/health",
            "ready": "/ready",
            "classify": "/classify (POST)",
            "brain_dumps": "/brain-dumps",
            "process": "/brain-dumps/{id}/process (POST)",
            "results": "/brain-dumps/{id}/results",
            "generate_quest": "/brain-dumps/{id}/generate-quest (POST)"
        }
    }
